"""Transcription and summarization payloads/results."""

from __future__ import annotations

from pydantic import BaseModel


class AudioPayload(BaseModel):
    """An audio blob to be transcribed (one uploaded file or one captured chunk)."""

    filename: str = 'chunk.wav'
    content: bytes
    content_type: str = 'audio/wav'

    @property
    def is_empty(self) -> bool:
        return not self.content


class TranscriptionResult(BaseModel):
    text: str


class SummarizationResult(BaseModel):
    summary: str
