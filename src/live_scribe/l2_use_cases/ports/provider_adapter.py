"""Port: provider adapter contract and the factory the session builds them with."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from live_scribe.l1_entities.provider_events import ProviderEvent
from live_scribe.l1_entities.recording import ProviderKind

EventSink = Callable[[ProviderEvent], None]


class ProviderAdapter(Protocol):
    """One transcription source behind a uniform start/stop contract.

    Emits InterimReceived / FinalReceived / ProviderErrored / ProviderEnded
    through the sink it was built with. ProviderEnded fires exactly once per
    start/stop cycle, after all finals of that cycle.
    """

    async def start(self) -> None: ...

    def stop(self) -> None: ...

    def set_language(self, language: str) -> None: ...


@runtime_checkable
class SupportsSpeed(Protocol):
    def set_speed(self, speed_ms: int) -> None: ...


class AdapterFactory(Protocol):
    """Builds a fresh adapter of the requested kind wired to *sink*."""

    def create(self, kind: ProviderKind, language: str, sink: EventSink) -> ProviderAdapter: ...
