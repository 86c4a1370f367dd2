"""Gateway: OpenAI-compatible speech-to-text — implements TranscriptionService port.

Works with any OpenAI-compatible audio API: OpenAI (whisper-1), DeepSeek, etc.
"""

from __future__ import annotations

import openai

from live_scribe.l1_entities.transcription import AudioPayload, TranscriptionResult


class OpenAICompatTranscriptionService:
    """Wraps openai.AsyncOpenAI audio transcriptions."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = 'https://api.openai.com/v1',
        model: str = 'whisper-1',
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._model = model

    async def transcribe(self, audio: AudioPayload) -> TranscriptionResult:
        client = openai.AsyncOpenAI(api_key=self._api_key, base_url=self._base_url)
        result = await client.audio.transcriptions.create(
            model=self._model,
            file=(audio.filename, audio.content, audio.content_type),
        )
        return TranscriptionResult(text=result.text)

    def check_connectivity(self) -> tuple[bool, str]:
        try:
            client = openai.OpenAI(api_key=self._api_key, base_url=self._base_url)
            client.models.list()
            return True, ''
        except openai.AuthenticationError as e:
            return False, f'Authentication failed: {e}'
        except Exception as e:
            return False, f'Cannot connect to OpenAI-compatible API: {e}'
