"""Gateway: OpenAI-compatible chat summarizer — implements SummarizationService port."""

from __future__ import annotations

import logging

import openai

from live_scribe.l1_entities.transcription import SummarizationResult
from live_scribe.l2_use_cases.utils.prompt_builder import build_summary_prompt

log = logging.getLogger('lsc.llm')


class OpenAICompatSummarizationService:
    """Wraps openai.AsyncOpenAI chat completions."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = 'https://api.openai.com/v1',
        model: str = 'gpt-3.5-turbo',
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._model = model

    async def summarize(self, text: str, language: str) -> SummarizationResult:
        client = openai.AsyncOpenAI(api_key=self._api_key, base_url=self._base_url)
        prompt = build_summary_prompt(text, language)
        log.info('Summarize request: %d chars, language=%s, model=%s', len(text), language, self._model)
        resp = await client.chat.completions.create(
            model=self._model,
            messages=[{'role': 'user', 'content': prompt}],
        )
        summary = (resp.choices[0].message.content or '').strip()
        return SummarizationResult(summary=summary)

    def check_connectivity(self) -> tuple[bool, str]:
        try:
            client = openai.OpenAI(api_key=self._api_key, base_url=self._base_url)
            client.models.list()
            return True, ''
        except openai.AuthenticationError as e:
            return False, f'Authentication failed: {e}'
        except Exception as e:
            return False, f'Cannot connect to OpenAI-compatible API: {e}'
