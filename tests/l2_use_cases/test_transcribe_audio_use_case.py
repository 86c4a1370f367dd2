"""Tests for TranscribeAudioUseCase — uses FakeTranscriptionService."""

import pytest

from live_scribe.l1_entities.errors import ValidationError
from live_scribe.l1_entities.transcription import AudioPayload, TranscriptionResult
from live_scribe.l2_use_cases.transcribe_audio_use_case import TranscribeAudioUseCase
from tests.conftest import FakeTranscriptionService


class TestTranscribeAudio:
    @pytest.mark.asyncio
    async def test_missing_file_rejected(self):
        service = FakeTranscriptionService()
        uc = TranscribeAudioUseCase(service)

        with pytest.raises(ValidationError, match='Missing file'):
            await uc.execute(None)
        assert service.calls == []

    @pytest.mark.asyncio
    async def test_empty_payload_rejected(self):
        uc = TranscribeAudioUseCase(FakeTranscriptionService())

        with pytest.raises(ValidationError):
            await uc.execute(AudioPayload(content=b''))

    @pytest.mark.asyncio
    async def test_result_returned_unchanged(self):
        service = FakeTranscriptionService(text='hi')
        uc = TranscribeAudioUseCase(service)
        audio = AudioPayload(filename='a.webm', content=b'\x00\x01', content_type='audio/webm')

        result = await uc.execute(audio)

        assert result == TranscriptionResult(text='hi')
        assert service.calls == [audio]

    @pytest.mark.asyncio
    async def test_provider_error_propagates(self):
        uc = TranscribeAudioUseCase(FakeTranscriptionService(error=ConnectionError('down')))

        with pytest.raises(ConnectionError, match='down'):
            await uc.execute(AudioPayload(content=b'\x00'))
