"""Simulated provider: timer-driven sample phrases, interim first, final after a delay."""

from __future__ import annotations

import asyncio
import logging
import random

from live_scribe.l1_entities.recording import SIMULATION_SPEEDS_MS
from live_scribe.l2_use_cases.ports.provider_adapter import EventSink
from live_scribe.l3_interface_adapters.providers.base import BaseProviderAdapter

log = logging.getLogger('lsc.provider')

SAMPLE_PHRASES: tuple[str, ...] = (
    'Hello, this is a test of the speech recognition system.',
    'The quick brown fox jumps over the lazy dog.',
    'Lorem ipsum dolor sit amet, consectetur adipiscing elit.',
    'Testing one two three, can you hear me clearly?',
    'This is a simulation of continuous speech input.',
    "The weather is beautiful today, isn't it?",
    "I'm debugging the speech-to-text functionality.",
    'Please continue with the next test phrase.',
    'The microphone is working perfectly in simulation mode.',
    'This helps me test without speaking constantly.',
)

MIN_CONFIDENCE = 0.85
CONFIDENCE_SPAN = 0.10


class SimulatedAdapter(BaseProviderAdapter):
    """Cycles through SAMPLE_PHRASES on a fixed interval.

    Each tick emits the next phrase as interim, then schedules the same phrase
    as final after ``final_delay`` seconds with a confidence in [0.85, 0.95).
    A final whose cycle was stopped before it fired is dropped.
    """

    def __init__(
        self,
        sink: EventSink,
        language: str,
        speed_ms: int = 1000,
        final_delay: float = 0.5,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(sink, language)
        self._speed_ms = speed_ms
        self._final_delay = final_delay
        self._rng = rng or random.Random()
        self._index = 0
        self._cycle = 0
        self._running = False
        self._task: asyncio.Task | None = None

    @property
    def speed_ms(self) -> int:
        return self._speed_ms

    @property
    def running(self) -> bool:
        return self._running

    def set_speed(self, speed_ms: int) -> None:
        """Change the tick interval. Takes effect on the next start()."""
        if speed_ms not in SIMULATION_SPEEDS_MS:
            raise ValueError(f'Unsupported simulation speed: {speed_ms} ms')
        self._speed_ms = speed_ms

    async def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._cycle += 1
        self._task = asyncio.get_running_loop().create_task(self._run(self._speed_ms / 1000))
        log.debug('Simulation started (every %d ms)', self._speed_ms)

    async def _run(self, interval: float) -> None:
        while True:
            await asyncio.sleep(interval)
            self.tick()

    def tick(self) -> None:
        """Emit the next phrase as interim and schedule its final."""
        if not self._running:
            return
        phrase = SAMPLE_PHRASES[self._index % len(SAMPLE_PHRASES)]
        self._index += 1
        self._emit_interim(phrase)
        asyncio.get_running_loop().call_later(self._final_delay, self._finalize, phrase, self._cycle)

    def _finalize(self, phrase: str, cycle: int) -> None:
        if not self._running or cycle != self._cycle:
            log.debug('Dropping simulated final after stop: %r', phrase)
            return
        confidence = MIN_CONFIDENCE + self._rng.random() * CONFIDENCE_SPAN
        self._emit_final(phrase, confidence)

    def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        if self._task is not None:
            self._task.cancel()
            self._task = None
        self._emit_ended()
