"""RecordingSession — state machine owning one provider adapter and the running transcript."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass

from live_scribe.l1_entities.errors import InvalidTransitionError
from live_scribe.l1_entities.languages import DEFAULT_RECOGNITION_LANGUAGE
from live_scribe.l1_entities.provider_events import (
    FinalReceived,
    InterimReceived,
    ProviderEnded,
    ProviderErrored,
    ProviderEvent,
)
from live_scribe.l1_entities.recording import (
    SIMULATION_SPEEDS_MS,
    ProviderKind,
    RecordingMode,
    SessionState,
    resolve_provider_kind,
)
from live_scribe.l1_entities.transcript import Transcript
from live_scribe.l2_use_cases.ports.provider_adapter import AdapterFactory, ProviderAdapter, SupportsSpeed
from live_scribe.l2_use_cases.transcript_aggregator import TranscriptAggregator

log = logging.getLogger('lsc.session')

DEFAULT_RESTART_DELAY = 0.1


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of the session pushed to ``on_change`` listeners."""

    state: SessionState
    mode: RecordingMode
    language: str
    supported: bool
    display_text: str
    committed_text: str
    pending_interim: str
    confidence: float | None
    processing: bool
    last_error: str | None


class RecordingSession:
    """Central orchestrator between one ProviderAdapter and a TranscriptAggregator.

    Transitions: IDLE -> LISTENING -> {IDLE, ERRORED}; ERRORED -> IDLE or
    LISTENING; any -> STOPPED on teardown(). The state flag is always set
    before the adapter is started or stopped, so an ``ended`` event that races
    an explicit stop() is never mistaken for an unexpected drop.

    All methods run on the event loop thread; adapter events are applied
    synchronously in emission order.
    """

    def __init__(
        self,
        adapter_factory: AdapterFactory,
        *,
        supported: bool,
        language: str = DEFAULT_RECOGNITION_LANGUAGE,
        mode: RecordingMode = RecordingMode.REAL,
        restart_delay: float = DEFAULT_RESTART_DELAY,
        simulation_speed_ms: int | None = None,
        on_change: Callable[[SessionSnapshot], None] | None = None,
        on_error: Callable[[str], None] | None = None,
    ) -> None:
        self._factory = adapter_factory
        self._supported = supported
        self._language = language
        self._mode = mode
        self._restart_delay = restart_delay
        self._simulation_speed_ms = simulation_speed_ms
        self._on_change = on_change
        self._on_error = on_error

        self._state = SessionState.IDLE
        self._aggregator = TranscriptAggregator()
        self._adapter: ProviderAdapter | None = None
        self._adapter_kind: ProviderKind | None = None
        self._generation = 0
        self._restart_handle: asyncio.TimerHandle | None = None
        self._tasks: set[asyncio.Task] = set()

        self.last_error: str | None = None
        self.restart_count = 0

    # --- Observable state ---

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def mode(self) -> RecordingMode:
        return self._mode

    @property
    def language(self) -> str:
        return self._language

    @property
    def supported(self) -> bool:
        return self._supported

    @property
    def transcript(self) -> Transcript:
        return self._aggregator.transcript

    @property
    def adapter(self) -> ProviderAdapter | None:
        return self._adapter

    @property
    def adapter_kind(self) -> ProviderKind | None:
        return self._adapter_kind

    def snapshot(self) -> SessionSnapshot:
        t = self._aggregator.transcript
        return SessionSnapshot(
            state=self._state,
            mode=self._mode,
            language=self._language,
            supported=self._supported,
            display_text=t.display_text,
            committed_text=t.committed_text,
            pending_interim=t.pending_interim,
            confidence=t.best_confidence,
            processing=t.processing,
            last_error=self.last_error,
        )

    # --- Transitions ---

    async def start(self) -> None:
        """Begin listening. Valid from IDLE or ERRORED."""
        if self._state not in (SessionState.IDLE, SessionState.ERRORED):
            raise InvalidTransitionError(f'Cannot start a session that is {self._state.value}')

        self.last_error = None
        if self._adapter is None:
            try:
                self._adapter = self._build_adapter()
            except Exception as e:
                log.error('Cannot build provider for %s mode: %s', self._mode.value, e, exc_info=True)
                self._fail(f'Provider unavailable: {e}')
                return

        self._state = SessionState.LISTENING
        log.info('Recording started (%s, %s)', self._adapter_kind.value if self._adapter_kind else '?', self._language)
        self._notify()
        await self._start_adapter(self._generation)

    def stop(self) -> None:
        """Stop listening. Valid only from LISTENING."""
        if self._state != SessionState.LISTENING:
            raise InvalidTransitionError(f'Cannot stop a session that is {self._state.value}')

        self._state = SessionState.IDLE
        self._cancel_restart()
        self._aggregator.clear_interim()
        if self._adapter is not None:
            self._adapter.stop()
        log.info('Recording stopped')
        self._notify()

    def switch_mode(self, mode: RecordingMode) -> None:
        """Replace the provider for *mode*. Never resumes recording on its own."""
        self._ensure_alive()
        if self._state == SessionState.LISTENING:
            self.stop()
        self._discard_adapter()
        self._mode = mode
        log.info('Switched to %s mode', mode.value)
        self._notify()

    def set_language(self, language: str) -> None:
        """Update the recognition locale; a live adapter picks it up on its next start."""
        self._language = language
        if self._adapter is not None:
            self._adapter.set_language(language)
        self._notify()

    def set_simulation_speed(self, speed_ms: int) -> None:
        if speed_ms not in SIMULATION_SPEEDS_MS:
            raise ValueError(f'Unsupported simulation speed: {speed_ms} ms')
        self._simulation_speed_ms = speed_ms
        if isinstance(self._adapter, SupportsSpeed):
            self._adapter.set_speed(speed_ms)
        self._notify()

    def clear(self) -> None:
        """Reset committed text, interim, confidence and processing together."""
        self._aggregator.clear()
        self._notify()

    def acknowledge_error(self) -> None:
        """ERRORED -> IDLE once the error has been shown to the user."""
        if self._state == SessionState.ERRORED:
            self._state = SessionState.IDLE
            self._notify()

    def teardown(self) -> None:
        """Release the adapter and timers for good. The session cannot be restarted."""
        if self._state == SessionState.STOPPED:
            return
        if self._state == SessionState.LISTENING:
            self.stop()
        self._discard_adapter()
        for task in list(self._tasks):
            task.cancel()
        self._state = SessionState.STOPPED
        log.info('Session torn down')
        self._notify()

    # --- Adapter lifecycle ---

    def _build_adapter(self) -> ProviderAdapter:
        self._generation += 1
        generation = self._generation
        kind = resolve_provider_kind(self._mode, self._supported)

        def _sink(event: ProviderEvent) -> None:
            self._dispatch(generation, event)

        adapter = self._factory.create(kind, self._language, _sink)
        if self._simulation_speed_ms is not None and isinstance(adapter, SupportsSpeed):
            adapter.set_speed(self._simulation_speed_ms)
        self._adapter_kind = kind
        log.debug('Built %s adapter (generation %d)', kind.value, generation)
        return adapter

    def _discard_adapter(self) -> None:
        self._cancel_restart()
        if self._adapter is not None:
            self._adapter.stop()
            self._adapter = None
            self._adapter_kind = None
            self._generation += 1  # late events from the old adapter are ignored

    async def _start_adapter(self, generation: int) -> None:
        adapter = self._adapter
        if adapter is None or generation != self._generation or self._state != SessionState.LISTENING:
            return
        try:
            await adapter.start()
        except Exception as e:
            log.error('Provider failed to start: %s', e, exc_info=True)
            if generation == self._generation and self._state == SessionState.LISTENING:
                self._fail(f'Failed to start provider: {e}')
            return
        if generation == self._generation and self._state != SessionState.LISTENING:
            # stop() landed while start() was suspended
            adapter.stop()

    def _ensure_alive(self) -> None:
        if self._state == SessionState.STOPPED:
            raise InvalidTransitionError('Session has been torn down')

    # --- Event handling ---

    def _dispatch(self, generation: int, event: ProviderEvent) -> None:
        if generation != self._generation:
            log.debug('Ignoring %s from a replaced adapter', type(event).__name__)
            return

        if isinstance(event, InterimReceived):
            if self._state != SessionState.LISTENING:
                return
            self._aggregator.apply(event.segment)
            self._notify()
        elif isinstance(event, FinalReceived):
            self._aggregator.apply(event.segment)
            self._notify()
        elif isinstance(event, ProviderErrored):
            if event.fatal:
                self._fail(event.reason)
            else:
                log.warning('Provider reported a recoverable error: %s', event.reason)
                self.last_error = event.reason
                if self._on_error is not None:
                    self._on_error(event.reason)
                self._notify()
        elif isinstance(event, ProviderEnded):
            self._on_ended()

    def _on_ended(self) -> None:
        self._aggregator.clear_interim()
        if self._state == SessionState.LISTENING:
            log.warning('Provider ended unexpectedly; restarting in %d ms', int(self._restart_delay * 1000))
            self._cancel_restart()
            self._restart_handle = asyncio.get_running_loop().call_later(
                self._restart_delay,
                self._restart,
                self._generation,
            )
        self._notify()

    def _restart(self, generation: int) -> None:
        self._restart_handle = None
        if self._state != SessionState.LISTENING or generation != self._generation or self._adapter is None:
            return
        self.restart_count += 1
        log.info('Restarting provider (restart #%d)', self.restart_count)
        task = asyncio.get_running_loop().create_task(self._start_adapter(generation))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def _cancel_restart(self) -> None:
        if self._restart_handle is not None:
            self._restart_handle.cancel()
            self._restart_handle = None

    def _fail(self, reason: str) -> None:
        self._cancel_restart()
        self._state = SessionState.ERRORED
        self._aggregator.clear_interim()
        self.last_error = reason
        log.error('Recording error: %s', reason)
        if self._adapter is not None:
            self._adapter.stop()
        if self._on_error is not None:
            self._on_error(reason)
        self._notify()

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self.snapshot())
