"""Chunked cloud fallback: capture audio, upload a chunk every interval."""

from __future__ import annotations

import asyncio
import logging

from live_scribe.l1_entities.transcription import AudioPayload
from live_scribe.l2_use_cases.ports.audio_source import AudioSource
from live_scribe.l2_use_cases.ports.provider_adapter import EventSink
from live_scribe.l2_use_cases.transcribe_audio_use_case import TranscribeAudioUseCase
from live_scribe.l3_interface_adapters.gateways.wav_encoder import encode_wav
from live_scribe.l3_interface_adapters.providers.base import BaseProviderAdapter

log = logging.getLogger('lsc.provider')


class ChunkedUploadAdapter(BaseProviderAdapter):
    """Uploads each captured chunk independently; every reply becomes one final.

    A failed chunk is reported as a non-fatal error and capture continues.
    Replies arriving after stop() are dropped. Chunk seams are not
    de-duplicated, so a word cut by a boundary can appear twice.
    """

    def __init__(
        self,
        audio_source: AudioSource,
        transcribe: TranscribeAudioUseCase,
        sink: EventSink,
        language: str,
        chunk_interval: float = 2.0,
        sample_rate: int = 16000,
    ) -> None:
        super().__init__(sink, language)
        self._audio_source = audio_source
        self._transcribe = transcribe
        self._chunk_interval = chunk_interval
        self._sample_rate = sample_rate
        self._recording = False
        self._cycle = 0
        self._chunk_count = 0
        self._task: asyncio.Task | None = None
        self._uploads: set[asyncio.Task] = set()

    @property
    def recording(self) -> bool:
        return self._recording

    @property
    def pending_uploads(self) -> int:
        return len(self._uploads)

    async def start(self) -> None:
        if self._recording:
            return
        self._audio_source.open(self._sample_rate, 1)
        self._recording = True
        self._cycle += 1
        self._chunk_count = 0
        self._task = asyncio.get_running_loop().create_task(self._capture_loop(self._cycle))
        self._task.add_done_callback(self._on_capture_done)
        log.debug('Chunked capture started (every %.1fs)', self._chunk_interval)

    async def _capture_loop(self, cycle: int) -> None:
        while True:
            await asyncio.sleep(self._chunk_interval)
            self.flush_chunk(cycle)

    def _on_capture_done(self, task: asyncio.Task) -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is None:
            return
        log.error('Audio capture failed: %s', exc, exc_info=exc)
        if self._recording and task is self._task:
            self._emit_error(f'Audio capture failed: {exc}', fatal=True)

    def flush_chunk(self, cycle: int | None = None) -> asyncio.Task | None:
        """Take everything captured so far and upload it as one chunk."""
        data = self._audio_source.drain()
        if data is None or len(data) == 0:
            return None
        self._chunk_count += 1
        payload = AudioPayload(
            filename=f'chunk_{self._chunk_count:04d}.wav',
            content=encode_wav(data, self._sample_rate),
        )
        task = asyncio.get_running_loop().create_task(self._upload(payload, cycle or self._cycle))
        self._uploads.add(task)
        task.add_done_callback(self._uploads.discard)
        return task

    async def _upload(self, payload: AudioPayload, cycle: int) -> None:
        try:
            result = await self._transcribe.execute(payload)
        except Exception as e:
            log.error('Chunk %s transcription failed: %s', payload.filename, e, exc_info=True)
            if self._is_current(cycle):
                self._emit_error(f'Chunk transcription failed: {e}', fatal=False)
            return

        text = result.text.strip()
        if not self._is_current(cycle):
            log.debug('Dropping late chunk result for %s', payload.filename)
            return
        if text:
            self._emit_final(text)

    def _is_current(self, cycle: int) -> bool:
        return self._recording and cycle == self._cycle

    def stop(self) -> None:
        if not self._recording:
            return
        self._recording = False
        if self._task is not None:
            self._task.cancel()
            self._task = None
        self._audio_source.close()
        self._emit_ended()
