"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import pytest

from live_scribe.l1_entities.config import AppConfig
from live_scribe.l1_entities.provider_events import ProviderEvent
from live_scribe.l1_entities.recording import ProviderKind
from live_scribe.l1_entities.transcription import AudioPayload, SummarizationResult, TranscriptionResult
from live_scribe.l2_use_cases.ports.provider_adapter import EventSink
from live_scribe.l2_use_cases.ports.speech_recognizer import (
    EndHandler,
    ErrorHandler,
    RecognitionAlternative,
    RecognitionResult,
    ResultHandler,
)
from live_scribe.l3_interface_adapters.providers.base import BaseProviderAdapter
from live_scribe.l4_frameworks_and_drivers.infra_config import build_app_config

# --- Protocol-conforming Fakes ---


class FakeTranscriptionService:
    """Fake TranscriptionService for use case and provider tests."""

    def __init__(self, text: str = 'hi', error: Exception | None = None) -> None:
        self._text = text
        self._error = error
        self.calls: list[AudioPayload] = []

    async def transcribe(self, audio: AudioPayload) -> TranscriptionResult:
        self.calls.append(audio)
        if self._error is not None:
            raise self._error
        return TranscriptionResult(text=self._text)

    def set_text(self, text: str) -> None:
        self._text = text

    def set_error(self, error: Exception | None) -> None:
        self._error = error


class FakeSummarizationService:
    """Fake SummarizationService for use case and HTTP tests."""

    def __init__(self, summary: str = 'Fake summary', error: Exception | None = None) -> None:
        self._summary = summary
        self._error = error
        self.calls: list[tuple[str, str]] = []

    async def summarize(self, text: str, language: str) -> SummarizationResult:
        self.calls.append((text, language))
        if self._error is not None:
            raise self._error
        return SummarizationResult(summary=self._summary)


class FakeAudioSource:
    """Fake AudioSource — each drain() hands out the next queued chunk."""

    def __init__(self, chunks: list[np.ndarray] | None = None, open_error: Exception | None = None) -> None:
        self._chunks = list(chunks or [])
        self._open_error = open_error
        self.open_calls: list[tuple[int, int]] = []
        self.close_calls = 0

    def open(self, sample_rate: int, channels: int) -> None:
        if self._open_error is not None:
            raise self._open_error
        self.open_calls.append((sample_rate, channels))

    def drain(self) -> np.ndarray | None:
        if not self._chunks:
            return None
        return self._chunks.pop(0)

    def close(self) -> None:
        self.close_calls += 1

    def push(self, chunk: np.ndarray) -> None:
        self._chunks.append(chunk)


class FakeRecognizer:
    """Fake SpeechRecognizer; tests drive its callbacks directly."""

    def __init__(self, end_on_stop: bool = True, start_error: Exception | None = None) -> None:
        self.language = ''
        self.end_on_stop = end_on_stop
        self._start_error = start_error
        self.start_calls: list[str] = []
        self.stop_calls = 0
        self._on_result: ResultHandler | None = None
        self._on_error: ErrorHandler | None = None
        self._on_end: EndHandler | None = None

    def set_handlers(self, on_result: ResultHandler, on_error: ErrorHandler, on_end: EndHandler) -> None:
        self._on_result = on_result
        self._on_error = on_error
        self._on_end = on_end

    def start(self) -> None:
        if self._start_error is not None:
            raise self._start_error
        self.start_calls.append(self.language)

    def stop(self) -> None:
        self.stop_calls += 1
        if self.end_on_stop:
            self.end()

    def results(self, result_index: int, results: Sequence[RecognitionResult]) -> None:
        assert self._on_result is not None
        self._on_result(result_index, results)

    def error(self, reason: str) -> None:
        assert self._on_error is not None
        self._on_error(reason)

    def end(self) -> None:
        assert self._on_end is not None
        self._on_end()


def result(text: str, *, final: bool = False, confidence: float = 0.9) -> RecognitionResult:
    """Build a single-alternative recognition result."""
    return RecognitionResult(alternatives=(RecognitionAlternative(text, confidence),), is_final=final)


class FakeAdapter(BaseProviderAdapter):
    """Fake ProviderAdapter recording its lifecycle; tests emit through it."""

    def __init__(self, kind: ProviderKind, sink: EventSink, language: str, start_error: Exception | None = None):
        super().__init__(sink, language)
        self.kind = kind
        self.start_calls = 0
        self.stop_calls = 0
        self.running = False
        self.speed_ms: int | None = None
        self._start_error = start_error

    async def start(self) -> None:
        self.start_calls += 1
        if self._start_error is not None:
            raise self._start_error
        self.running = True

    def stop(self) -> None:
        self.stop_calls += 1
        self.running = False

    def set_speed(self, speed_ms: int) -> None:
        self.speed_ms = speed_ms

    # Test helpers -- emit as the provider would
    def interim(self, text: str) -> None:
        self._emit_interim(text)

    def final(self, text: str, confidence: float | None = None) -> None:
        self._emit_final(text, confidence)

    def error(self, reason: str, *, fatal: bool = True) -> None:
        self._emit_error(reason, fatal=fatal)

    def ended(self) -> None:
        self._emit_ended()


class FakeAdapterFactory:
    """Fake AdapterFactory — remembers every adapter it built."""

    def __init__(self, start_error: Exception | None = None, create_error: Exception | None = None) -> None:
        self.created: list[FakeAdapter] = []
        self._start_error = start_error
        self._create_error = create_error

    def create(self, kind: ProviderKind, language: str, sink: EventSink) -> FakeAdapter:
        if self._create_error is not None:
            raise self._create_error
        adapter = FakeAdapter(kind, sink, language, start_error=self._start_error)
        self.created.append(adapter)
        return adapter

    @property
    def last(self) -> FakeAdapter:
        return self.created[-1]


class EventRecorder:
    """Collects provider events in emission order."""

    def __init__(self) -> None:
        self.events: list[ProviderEvent] = []

    def __call__(self, event: ProviderEvent) -> None:
        self.events.append(event)

    def of_type(self, cls: type) -> list:
        return [e for e in self.events if isinstance(e, cls)]


# --- Standard Fixtures ---


@pytest.fixture
def default_config() -> AppConfig:
    return build_app_config({})


@pytest.fixture
def fake_transcription() -> FakeTranscriptionService:
    return FakeTranscriptionService()


@pytest.fixture
def fake_summarization() -> FakeSummarizationService:
    return FakeSummarizationService()


@pytest.fixture
def recorder() -> EventRecorder:
    return EventRecorder()


@pytest.fixture
def sample_config_yaml(tmp_path):
    content = """\
recording:
  language: "es-ES"
  simulation_speed_ms: 3000
summarization:
  fallback_language: "es"
server:
  port: 9100
summarization_provider: "ollama"
ollama:
  host: "http://ollama.local:11434"
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p
