"""Use case: transcribe one audio payload through the injected service."""

from __future__ import annotations

from live_scribe.l1_entities.errors import ValidationError
from live_scribe.l1_entities.transcription import AudioPayload, TranscriptionResult
from live_scribe.l2_use_cases.ports.transcription_service import TranscriptionService


class TranscribeAudioUseCase:
    """Validates the payload and delegates. No retry, no caching."""

    def __init__(self, transcription_service: TranscriptionService) -> None:
        self._service = transcription_service

    async def execute(self, file: AudioPayload | None) -> TranscriptionResult:
        """Transcribe *file*. Raises ValidationError when no audio is supplied."""
        if file is None or file.is_empty:
            raise ValidationError('Missing file')
        return await self._service.transcribe(file)
