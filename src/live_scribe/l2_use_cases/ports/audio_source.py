"""Port: audio capture source."""

from __future__ import annotations

from typing import Protocol

import numpy as np


class AudioSource(Protocol):
    """Abstract audio input stream."""

    def open(self, sample_rate: int, channels: int) -> None:
        """Open the audio stream."""
        ...

    def drain(self) -> np.ndarray | None:
        """Return everything captured since the last drain, or None if nothing arrived."""
        ...

    def close(self) -> None:
        """Stop and release the stream and all its underlying tracks."""
        ...
