"""Gateway: microphone capture via sounddevice — implements AudioSource port."""

from __future__ import annotations

import logging
import threading

import numpy as np
import sounddevice as sd

log = logging.getLogger('lsc.provider')


class SounddeviceAudioSource:
    """Buffers PortAudio input blocks until the chunked provider drains them.

    The stream callback runs on PortAudio's thread; the buffer swap in
    drain() is the only point shared with the event loop.
    """

    def __init__(self) -> None:
        self._stream: sd.InputStream | None = None
        self._blocks: list[np.ndarray] = []
        self._lock = threading.Lock()

    def open(self, sample_rate: int, channels: int) -> None:
        def _on_block(indata, frames, time_info, status):
            if status:
                log.warning('Audio input status: %s', status)
            block = indata[:, 0] if indata.ndim > 1 else indata
            with self._lock:
                self._blocks.append(block.copy())

        self._stream = sd.InputStream(
            samplerate=sample_rate,
            channels=channels,
            dtype='float32',
            callback=_on_block,
        )
        self._stream.start()
        log.debug('Microphone opened at %d Hz', sample_rate)

    def drain(self) -> np.ndarray | None:
        with self._lock:
            blocks, self._blocks = self._blocks, []
        return np.concatenate(blocks) if blocks else None

    def close(self) -> None:
        if self._stream is not None:
            self._stream.stop()
            self._stream.close()
            self._stream = None
        with self._lock:
            self._blocks.clear()
