"""Port: text correction + summarization service."""

from __future__ import annotations

from typing import Protocol

from live_scribe.l1_entities.transcription import SummarizationResult


class SummarizationService(Protocol):
    """Abstract summarization backend. Zero framework types leak through."""

    async def summarize(self, text: str, language: str) -> SummarizationResult:
        """Correct and summarize *text*, answering in *language*."""
        ...
