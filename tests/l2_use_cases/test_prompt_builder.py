"""Tests for summary prompt construction."""

from live_scribe.l1_entities.languages import APP_LANGUAGES
from live_scribe.l2_use_cases.utils.prompt_builder import build_summary_prompt


class TestBuildSummaryPrompt:
    def test_english(self):
        prompt = build_summary_prompt('the text', 'en')
        assert 'concise summary' in prompt
        assert prompt.endswith('Text:\nthe text')

    def test_spanish(self):
        prompt = build_summary_prompt('el texto', 'es')
        assert 'resumen conciso' in prompt
        assert prompt.endswith('Texto:\nel texto')

    def test_region_subtag_matches_primary(self):
        assert 'resumen' in build_summary_prompt('x', 'es-ES')

    def test_unknown_language_falls_back_to_english(self):
        assert 'concise summary' in build_summary_prompt('x', 'ja')

    def test_braces_in_text_are_kept(self):
        assert build_summary_prompt('a {b} c', 'en').endswith('a {b} c')

    def test_every_app_language_has_its_own_prompt(self):
        english = build_summary_prompt('x', 'en')
        for code in APP_LANGUAGES:
            prompt = build_summary_prompt('x', code)
            assert (prompt == english) == (code == 'en')
