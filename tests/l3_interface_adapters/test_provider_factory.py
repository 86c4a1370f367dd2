"""Tests for ProviderAdapterFactory."""

from __future__ import annotations

import pytest

from live_scribe.l1_entities.recording import ProviderKind
from live_scribe.l2_use_cases.transcribe_audio_use_case import TranscribeAudioUseCase
from live_scribe.l3_interface_adapters.providers.chunked_upload_adapter import ChunkedUploadAdapter
from live_scribe.l3_interface_adapters.providers.continuous_recognition_adapter import ContinuousRecognitionAdapter
from live_scribe.l3_interface_adapters.providers.factory import ProviderAdapterFactory
from live_scribe.l3_interface_adapters.providers.simulated_adapter import SimulatedAdapter
from tests.conftest import FakeAudioSource, FakeRecognizer, FakeTranscriptionService


class TestProviderAdapterFactory:
    def test_simulated_uses_configured_speed(self, default_config, recorder):
        factory = ProviderAdapterFactory(default_config.recording)
        adapter = factory.create(ProviderKind.SIMULATED, 'en-US', recorder)
        assert isinstance(adapter, SimulatedAdapter)
        assert adapter.speed_ms == 1000

    def test_supported_follows_recognizer(self, default_config):
        assert ProviderAdapterFactory(default_config.recording).supported is False
        assert ProviderAdapterFactory(default_config.recording, recognizer_factory=FakeRecognizer).supported is True

    def test_continuous(self, default_config, recorder):
        factory = ProviderAdapterFactory(default_config.recording, recognizer_factory=FakeRecognizer)
        adapter = factory.create(ProviderKind.CONTINUOUS, 'ja-JP', recorder)
        assert isinstance(adapter, ContinuousRecognitionAdapter)
        assert adapter.language == 'ja-JP'

    def test_continuous_without_recognizer_raises(self, default_config, recorder):
        factory = ProviderAdapterFactory(default_config.recording)
        with pytest.raises(RuntimeError, match='recognizer'):
            factory.create(ProviderKind.CONTINUOUS, 'en-US', recorder)

    def test_chunked(self, default_config, recorder):
        factory = ProviderAdapterFactory(
            default_config.recording,
            transcribe=TranscribeAudioUseCase(FakeTranscriptionService()),
            audio_source_factory=FakeAudioSource,
        )
        adapter = factory.create(ProviderKind.CHUNKED, 'en-US', recorder)
        assert isinstance(adapter, ChunkedUploadAdapter)

    def test_chunked_without_dependencies_raises(self, default_config, recorder):
        factory = ProviderAdapterFactory(default_config.recording)
        with pytest.raises(RuntimeError, match='Chunked upload'):
            factory.create(ProviderKind.CHUNKED, 'en-US', recorder)
