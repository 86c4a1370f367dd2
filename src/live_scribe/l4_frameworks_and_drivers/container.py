"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from collections.abc import Callable

from live_scribe.l1_entities.config import AppConfig
from live_scribe.l1_entities.recording import RecordingMode
from live_scribe.l2_use_cases.ports.audio_source import AudioSource
from live_scribe.l2_use_cases.ports.config_loader import ConfigLoader
from live_scribe.l2_use_cases.ports.speech_recognizer import SpeechRecognizer
from live_scribe.l2_use_cases.ports.summarization_service import SummarizationService
from live_scribe.l2_use_cases.ports.transcription_service import TranscriptionService
from live_scribe.l2_use_cases.summarize_text_use_case import SummarizeTextUseCase
from live_scribe.l2_use_cases.transcribe_audio_use_case import TranscribeAudioUseCase
from live_scribe.l3_interface_adapters.controllers.http_controller import HttpController
from live_scribe.l3_interface_adapters.controllers.recording_session import RecordingSession, SessionSnapshot
from live_scribe.l3_interface_adapters.gateways.ollama_summarization_service import OllamaSummarizationService
from live_scribe.l3_interface_adapters.gateways.openai_summarization_service import OpenAICompatSummarizationService
from live_scribe.l3_interface_adapters.gateways.openai_transcription_service import OpenAICompatTranscriptionService
from live_scribe.l3_interface_adapters.gateways.yaml_config_loader import YamlConfigLoader
from live_scribe.l3_interface_adapters.providers.factory import ProviderAdapterFactory
from live_scribe.l4_frameworks_and_drivers.infra_config import InfraConfig


def _default_audio_source() -> AudioSource:  # pragma: no cover -- requires sounddevice hardware
    from live_scribe.l3_interface_adapters.gateways.sounddevice_audio_source import (  # noqa: PLC0415 -- deferred: PortAudio loaded only when capture starts
        SounddeviceAudioSource,
    )

    return SounddeviceAudioSource()


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(
        self,
        config: AppConfig,
        infra: InfraConfig | None = None,
        *,
        transcription_service: TranscriptionService | None = None,
        summarization_service: SummarizationService | None = None,
        audio_source_factory: Callable[[], AudioSource] | None = None,
        recognizer_factory: Callable[[], SpeechRecognizer] | None = None,
    ) -> None:
        self.config = config
        self.infra = infra or InfraConfig()

        self.transcription_service: TranscriptionService = transcription_service or self._build_transcription_service(
            self.infra
        )
        self.summarization_service: SummarizationService = summarization_service or self._build_summarization_service(
            self.infra
        )

        self.transcribe_use_case = TranscribeAudioUseCase(self.transcription_service)
        self.summarize_use_case = SummarizeTextUseCase(
            self.summarization_service,
            fallback_language=config.summarization.fallback_language,
        )
        self.http_controller = HttpController(self.transcribe_use_case, self.summarize_use_case)

        # No on-device recognizer ships with the package; real mode falls back to chunked upload.
        self.adapter_factory = ProviderAdapterFactory(
            config.recording,
            transcribe=self.transcribe_use_case,
            audio_source_factory=audio_source_factory or _default_audio_source,
            recognizer_factory=recognizer_factory,
        )

    def build_session(
        self,
        mode: RecordingMode = RecordingMode.REAL,
        language: str | None = None,
        on_change: Callable[[SessionSnapshot], None] | None = None,
        on_error: Callable[[str], None] | None = None,
    ) -> RecordingSession:
        rc = self.config.recording
        return RecordingSession(
            self.adapter_factory,
            supported=self.adapter_factory.supported,
            language=language or rc.language,
            mode=mode,
            restart_delay=rc.restart_delay,
            simulation_speed_ms=rc.simulation_speed_ms,
            on_change=on_change,
            on_error=on_error,
        )

    @staticmethod
    def config_loader() -> ConfigLoader:
        return YamlConfigLoader()

    @staticmethod
    def _build_transcription_service(infra: InfraConfig) -> TranscriptionService:
        if infra.transcription_provider == 'deepseek':
            ds = infra.deepseek
            return OpenAICompatTranscriptionService(ds.api_key, ds.base_url, ds.transcription_model)
        oa = infra.openai
        return OpenAICompatTranscriptionService(oa.api_key, oa.base_url, oa.transcription_model)

    @staticmethod
    def _build_summarization_service(infra: InfraConfig) -> SummarizationService:
        if infra.summarization_provider == 'ollama':
            return OllamaSummarizationService(host=infra.ollama.host, model=infra.ollama.model)
        if infra.summarization_provider == 'deepseek':
            ds = infra.deepseek
            return OpenAICompatSummarizationService(ds.api_key, ds.base_url, ds.summarization_model)
        oa = infra.openai
        return OpenAICompatSummarizationService(oa.api_key, oa.base_url, oa.summarization_model)
