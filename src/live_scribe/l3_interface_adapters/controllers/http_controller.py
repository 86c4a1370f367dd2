"""HttpController — request validation and error mapping between HTTP routes and use cases."""

from __future__ import annotations

import logging

import pydantic
from pydantic import BaseModel

from live_scribe.l1_entities.errors import AppError, ValidationError
from live_scribe.l1_entities.transcription import AudioPayload
from live_scribe.l2_use_cases.summarize_text_use_case import SummarizeTextUseCase
from live_scribe.l2_use_cases.transcribe_audio_use_case import TranscribeAudioUseCase

log = logging.getLogger('lsc.http')

INTERNAL_ERROR_MESSAGE = 'Internal server error'


class SummarizeRequest(BaseModel):
    text: str | None = None
    language: str | None = None


class HttpController:
    """Framework-free handlers; the web layer only parses requests and renders responses."""

    def __init__(self, transcribe: TranscribeAudioUseCase, summarize: SummarizeTextUseCase) -> None:
        self._transcribe_uc = transcribe
        self._summarize_uc = summarize

    async def transcribe(self, file: AudioPayload | None) -> dict[str, str]:
        result = await self._transcribe_uc.execute(file)
        return {'text': result.text}

    async def summarize(self, body: object) -> dict[str, str]:
        try:
            req = SummarizeRequest.model_validate(body)
        except pydantic.ValidationError as e:
            raise ValidationError('Invalid request body') from e
        result = await self._summarize_uc.execute(req.text, req.language)
        return {'summary': result.summary}


def error_response(error: Exception) -> tuple[int, str]:
    """Map an exception to (status, message). Unknown errors are logged, never leaked."""
    if isinstance(error, AppError):
        return error.status_code, error.message
    log.error('Unhandled error: %s', error, exc_info=error)
    return 500, INTERNAL_ERROR_MESSAGE
