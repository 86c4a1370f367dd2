"""Use case: correct and summarize transcribed text."""

from __future__ import annotations

from live_scribe.l1_entities.errors import ValidationError
from live_scribe.l1_entities.languages import FALLBACK_SUMMARY_LANGUAGE
from live_scribe.l1_entities.transcription import SummarizationResult
from live_scribe.l2_use_cases.ports.summarization_service import SummarizationService


class SummarizeTextUseCase:
    """Trims and validates input, then delegates to the summarization service."""

    def __init__(
        self,
        summarization_service: SummarizationService,
        fallback_language: str = FALLBACK_SUMMARY_LANGUAGE,
    ) -> None:
        self._service = summarization_service
        self._fallback_language = fallback_language

    async def execute(self, text: str | None, language: str | None = None) -> SummarizationResult:
        """Summarize *text*. Raises ValidationError if it is empty after trimming."""
        cleaned = (text or '').strip()
        lang = (language or '').strip() or self._fallback_language
        if not cleaned:
            raise ValidationError('Missing text')
        return await self._service.summarize(cleaned, lang)
