"""Merges interim/final segments into a running transcript. No I/O."""

from __future__ import annotations

from live_scribe.l1_entities.transcript import Transcript, TranscriptSegment


class TranscriptAggregator:
    """Applies provider segments, in emission order, to one Transcript.

    Interim text replaces the pending interim; final text is appended to the
    committed text with a single space. The committed text only shrinks via
    ``clear()``.
    """

    def __init__(self) -> None:
        self.transcript = Transcript()

    def apply(self, segment: TranscriptSegment) -> Transcript:
        if segment.is_final:
            return self.apply_final(segment.text, segment.confidence)
        return self.apply_interim(segment.text)

    def apply_interim(self, text: str) -> Transcript:
        t = self.transcript
        t.pending_interim = text
        t.processing = True
        return t

    def apply_final(self, text: str, confidence: float | None = None) -> Transcript:
        t = self.transcript
        if text:
            t.committed_text = f'{t.committed_text} {text}' if t.committed_text else text
        # Providers without a confidence signal leave the previous value in place.
        if confidence is not None:
            t.best_confidence = confidence
        t.pending_interim = ''
        t.processing = False
        return t

    def clear_interim(self) -> Transcript:
        """Drop the in-flight interim without touching committed text."""
        t = self.transcript
        t.pending_interim = ''
        t.processing = False
        return t

    def clear(self) -> Transcript:
        self.transcript = Transcript()
        return self.transcript

    @property
    def display_text(self) -> str:
        return self.transcript.display_text
