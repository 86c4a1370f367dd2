"""L1 entities: recording mode, session state, provider kinds."""

from __future__ import annotations

import enum


class RecordingMode(enum.Enum):
    REAL = 'real'
    MOCK = 'mock'


class SessionState(enum.Enum):
    IDLE = 'idle'
    LISTENING = 'listening'
    ERRORED = 'errored'
    STOPPED = 'stopped'  # after teardown(); never left


class ProviderKind(enum.Enum):
    CONTINUOUS = 'continuous'
    CHUNKED = 'chunked'
    SIMULATED = 'simulated'


SIMULATION_SPEEDS_MS: tuple[int, ...] = (1000, 3000, 5000)


def resolve_provider_kind(mode: RecordingMode, supported: bool) -> ProviderKind:
    """Pick the provider variant for a mode given the on-device recognizer capability."""
    if mode == RecordingMode.MOCK:
        return ProviderKind.SIMULATED
    if supported:
        return ProviderKind.CONTINUOUS
    return ProviderKind.CHUNKED
