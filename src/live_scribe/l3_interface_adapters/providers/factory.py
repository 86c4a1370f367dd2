"""Builds the provider adapter a recording session asks for."""

from __future__ import annotations

import random
from collections.abc import Callable

from live_scribe.l1_entities.config import RecordingConfig
from live_scribe.l1_entities.recording import ProviderKind
from live_scribe.l2_use_cases.ports.audio_source import AudioSource
from live_scribe.l2_use_cases.ports.provider_adapter import EventSink, ProviderAdapter
from live_scribe.l2_use_cases.ports.speech_recognizer import SpeechRecognizer
from live_scribe.l2_use_cases.transcribe_audio_use_case import TranscribeAudioUseCase
from live_scribe.l3_interface_adapters.providers.chunked_upload_adapter import ChunkedUploadAdapter
from live_scribe.l3_interface_adapters.providers.continuous_recognition_adapter import ContinuousRecognitionAdapter
from live_scribe.l3_interface_adapters.providers.simulated_adapter import SimulatedAdapter


class ProviderAdapterFactory:
    """Implements the AdapterFactory port.

    ``supported`` reflects whether an on-device recognizer was supplied; it is
    fixed at construction.
    """

    def __init__(
        self,
        recording: RecordingConfig,
        transcribe: TranscribeAudioUseCase | None = None,
        audio_source_factory: Callable[[], AudioSource] | None = None,
        recognizer_factory: Callable[[], SpeechRecognizer] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._recording = recording
        self._transcribe = transcribe
        self._audio_source_factory = audio_source_factory
        self._recognizer_factory = recognizer_factory
        self._rng = rng
        self.supported = recognizer_factory is not None

    def create(self, kind: ProviderKind, language: str, sink: EventSink) -> ProviderAdapter:
        rc = self._recording
        if kind == ProviderKind.SIMULATED:
            return SimulatedAdapter(
                sink,
                language,
                speed_ms=rc.simulation_speed_ms,
                final_delay=rc.simulated_final_delay,
                rng=self._rng,
            )
        if kind == ProviderKind.CONTINUOUS:
            if self._recognizer_factory is None:
                raise RuntimeError('No on-device speech recognizer available')
            return ContinuousRecognitionAdapter(self._recognizer_factory(), sink, language)
        if self._transcribe is None or self._audio_source_factory is None:
            raise RuntimeError('Chunked upload needs a transcription service and an audio source')
        return ChunkedUploadAdapter(
            self._audio_source_factory(),
            self._transcribe,
            sink,
            language,
            chunk_interval=rc.chunk_interval,
            sample_rate=rc.sample_rate,
        )
