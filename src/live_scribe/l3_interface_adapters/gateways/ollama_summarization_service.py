"""Gateway: Ollama summarizer — implements SummarizationService port."""

from __future__ import annotations

import ollama as ollama_sync

from live_scribe.l1_entities.transcription import SummarizationResult
from live_scribe.l2_use_cases.utils.prompt_builder import build_summary_prompt


class OllamaSummarizationService:
    """Wraps ollama.AsyncClient chat."""

    def __init__(self, host: str = 'http://localhost:11434', model: str = 'llama3.1:8b') -> None:
        self._host = host
        self._model = model

    async def summarize(self, text: str, language: str) -> SummarizationResult:
        client = ollama_sync.AsyncClient(host=self._host)
        resp = await client.chat(
            model=self._model,
            messages=[{'role': 'user', 'content': build_summary_prompt(text, language)}],
        )
        return SummarizationResult(summary=(resp.message.content or '').strip())

    def check_connectivity(self) -> tuple[bool, str]:
        try:
            client = ollama_sync.Client(host=self._host)
            client.list()
            return True, ''
        except Exception as e:
            return False, f'Cannot connect to Ollama: {e}'
