"""Transcript entities — emitted segments and the running transcript."""

from __future__ import annotations

import time

from pydantic import BaseModel, Field


class TranscriptSegment(BaseModel):
    """A single text fragment emitted by a provider."""

    text: str
    is_final: bool = False
    confidence: float | None = Field(default=None, ge=0.0, le=1.0, description='Meaningful only when is_final')
    emitted_at: float = Field(default_factory=time.time)


class Transcript(BaseModel):
    """Running transcript: append-only committed text plus at most one pending interim."""

    committed_text: str = ''
    pending_interim: str = ''
    best_confidence: float | None = None
    processing: bool = False

    @property
    def display_text(self) -> str:
        """Committed text followed by the pending interim while processing."""
        if not self.processing or not self.pending_interim:
            return self.committed_text
        if not self.committed_text:
            return self.pending_interim
        return f'{self.committed_text} {self.pending_interim}'
