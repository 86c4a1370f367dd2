"""Shared emission helpers for provider adapters."""

from __future__ import annotations

from live_scribe.l1_entities.provider_events import (
    FinalReceived,
    InterimReceived,
    ProviderEnded,
    ProviderErrored,
)
from live_scribe.l1_entities.transcript import TranscriptSegment
from live_scribe.l2_use_cases.ports.provider_adapter import EventSink


class BaseProviderAdapter:
    """Holds the event sink and the recognition language; builds typed events."""

    def __init__(self, sink: EventSink, language: str) -> None:
        self._sink = sink
        self._language = language

    @property
    def language(self) -> str:
        return self._language

    def set_language(self, language: str) -> None:
        self._language = language

    def _emit_interim(self, text: str) -> None:
        self._sink(InterimReceived(TranscriptSegment(text=text, is_final=False)))

    def _emit_final(self, text: str, confidence: float | None = None) -> None:
        self._sink(FinalReceived(TranscriptSegment(text=text, is_final=True, confidence=confidence)))

    def _emit_error(self, reason: str, *, fatal: bool = True) -> None:
        self._sink(ProviderErrored(reason=reason, fatal=fatal))

    def _emit_ended(self) -> None:
        self._sink(ProviderEnded())
