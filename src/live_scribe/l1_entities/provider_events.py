"""Typed events a provider adapter emits to its owning session."""

from __future__ import annotations

from dataclasses import dataclass

from live_scribe.l1_entities.transcript import TranscriptSegment


@dataclass(frozen=True)
class InterimReceived:
    segment: TranscriptSegment


@dataclass(frozen=True)
class FinalReceived:
    segment: TranscriptSegment


@dataclass(frozen=True)
class ProviderErrored:
    """Provider failure. Non-fatal errors (a single failed chunk) leave the session listening."""

    reason: str
    fatal: bool = True


@dataclass(frozen=True)
class ProviderEnded:
    pass


ProviderEvent = InterimReceived | FinalReceived | ProviderErrored | ProviderEnded
