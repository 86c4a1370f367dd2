"""Port: continuous on-device speech recognizer."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class RecognitionAlternative:
    transcript: str
    confidence: float = 0.0


@dataclass(frozen=True)
class RecognitionResult:
    """One result candidate; only the top alternative is used."""

    alternatives: tuple[RecognitionAlternative, ...]
    is_final: bool = False

    @property
    def best(self) -> RecognitionAlternative:
        return self.alternatives[0]


ResultHandler = Callable[[int, Sequence[RecognitionResult]], None]
ErrorHandler = Callable[[str], None]
EndHandler = Callable[[], None]


class SpeechRecognizer(Protocol):
    """Streaming recognizer with interim results.

    Each result callback re-sends the full result list of the current run
    together with the lowest index that changed.
    """

    language: str

    def set_handlers(self, on_result: ResultHandler, on_error: ErrorHandler, on_end: EndHandler) -> None:
        """Register the result/error/end callbacks."""
        ...

    def start(self) -> None:
        """Begin a recognition run using the current ``language``."""
        ...

    def stop(self) -> None:
        """Request the run to end. Pending finals are delivered before ``on_end``."""
        ...
