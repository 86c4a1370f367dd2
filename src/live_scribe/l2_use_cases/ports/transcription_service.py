"""Port: speech-to-text service (cloud provider client)."""

from __future__ import annotations

from typing import Protocol

from live_scribe.l1_entities.transcription import AudioPayload, TranscriptionResult


class TranscriptionService(Protocol):
    """Abstract transcription backend. Zero framework types leak through."""

    async def transcribe(self, audio: AudioPayload) -> TranscriptionResult:
        """Transcribe one audio payload. Provider errors propagate unchanged."""
        ...
