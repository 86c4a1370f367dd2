"""Prompt construction for the summarization backends."""

from __future__ import annotations

from live_scribe.l1_entities.languages import APP_LANGUAGES, FALLBACK_SUMMARY_LANGUAGE

_SUMMARY_PROMPTS: dict[str, str] = {
    'en': (
        'The following text was transcribed from speech and may lack punctuation or contain small mistakes. '
        'Correct any errors and provide a concise summary of the important information.\n\n'
        'Text:\n{text}'
    ),
    'es': (
        'El siguiente texto fue transcrito a partir de voz y puede carecer de puntuación o contener pequeños errores. '
        'Corrige los errores y proporciona un resumen conciso de la información importante.\n\n'
        'Texto:\n{text}'
    ),
}


def build_summary_prompt(text: str, language: str) -> str:
    """Build the correct-then-summarize prompt. Matches on the primary subtag, falls back to English."""
    key = language.lower().split('-')[0]
    if key not in APP_LANGUAGES:
        key = FALLBACK_SUMMARY_LANGUAGE
    return _SUMMARY_PROMPTS[key].format(text=text)
