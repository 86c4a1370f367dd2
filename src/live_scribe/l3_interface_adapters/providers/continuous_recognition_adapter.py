"""Continuous on-device recognition provider with interim/final batches."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from live_scribe.l2_use_cases.ports.provider_adapter import EventSink
from live_scribe.l2_use_cases.ports.speech_recognizer import RecognitionResult, SpeechRecognizer
from live_scribe.l3_interface_adapters.providers.base import BaseProviderAdapter

log = logging.getLogger('lsc.provider')


class ContinuousRecognitionAdapter(BaseProviderAdapter):
    """Wraps a SpeechRecognizer that re-sends its full result list on every callback.

    ``cursor`` is one past the highest result index already committed as
    final. Finals below it are never emitted again, even when an interim
    sits in front of them, so a replayed batch never commits the same text
    twice. Recognizer callbacks are expected on the event loop thread.

    stop() emits ProviderEnded itself; the recognizer's own ``on_end`` for a
    stopped run is swallowed whenever it arrives. Only an ``on_end`` nobody
    asked for is reported, and the session treats that one as a drop.
    """

    def __init__(self, recognizer: SpeechRecognizer, sink: EventSink, language: str) -> None:
        super().__init__(sink, language)
        self._recognizer = recognizer
        self._recognizer.set_handlers(self._on_result, self._on_error, self._on_end)
        self._cursor = 0
        self._active = False
        self._stopped_runs = 0  # stopped runs whose on_end has not arrived yet

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def active(self) -> bool:
        return self._active

    async def start(self) -> None:
        if self._active:
            return
        self._cursor = 0  # each run starts a fresh result list
        self._recognizer.language = self._language
        self._active = True
        try:
            self._recognizer.start()
        except Exception:
            self._active = False
            raise

    def stop(self) -> None:
        if not self._active:
            return
        self._active = False
        self._stopped_runs += 1
        self._recognizer.stop()
        self._emit_ended()

    def _on_result(self, result_index: int, results: Sequence[RecognitionResult]) -> None:
        if self._active and self._stopped_runs:
            log.debug('Dropping results delivered before the previous run ended')
            return

        finals: list[str] = []
        interims: list[str] = []
        best_confidence = 0.0
        committed_upto = self._cursor

        for index in range(result_index, len(results)):
            result = results[index]
            alt = result.best
            if not result.is_final:
                interims.append(alt.transcript)
            elif index >= self._cursor:
                finals.append(alt.transcript)
                best_confidence = max(best_confidence, alt.confidence)
                committed_upto = index + 1
        self._cursor = committed_upto

        final_text = ''.join(finals).strip()
        interim_text = ''.join(interims).strip()
        if final_text:
            self._emit_final(final_text, best_confidence)
        if interim_text:
            self._emit_interim(interim_text)

    def _on_error(self, reason: str) -> None:
        log.error('Speech recognition error: %s', reason)
        self._emit_error(reason, fatal=True)

    def _on_end(self) -> None:
        if self._stopped_runs:
            self._stopped_runs -= 1
            return
        if not self._active:
            return
        self._active = False
        log.warning('Speech recognizer ended on its own')
        self._emit_ended()
