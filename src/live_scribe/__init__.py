"""live-scribe — live speech capture, transcription and summarization."""

__version__ = '0.3.0'
