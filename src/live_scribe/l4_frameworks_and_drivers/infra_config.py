"""Infrastructure provider configs — lives in L4, not domain."""

from __future__ import annotations

import copy
from typing import Literal

from pydantic import BaseModel, Field

from live_scribe.l1_entities.config import AppConfig
from live_scribe.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'recording': {
        'language': 'en-US',
        'simulation_speed_ms': 1000,
        'restart_delay': 0.1,
        'chunk_interval': 2.0,
        'simulated_final_delay': 0.5,
        'sample_rate': 16000,
    },
    'summarization': {
        'fallback_language': 'en',
    },
    'server': {
        'host': '127.0.0.1',
        'port': 8000,
    },
    'logging': {
        'level': 'INFO',
        'file': None,
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)


class OpenAIProviderConfig(BaseModel):
    api_key: str | None = None  # None → SDK reads OPENAI_API_KEY env
    base_url: str = 'https://api.openai.com/v1'
    transcription_model: str = 'whisper-1'
    summarization_model: str = 'gpt-3.5-turbo'


class DeepSeekProviderConfig(BaseModel):
    api_key: str | None = None
    base_url: str = 'https://api.deepseek.com'
    transcription_model: str = 'deepseek-asr'
    summarization_model: str = 'deepseek-chat'


class OllamaProviderConfig(BaseModel):
    host: str = 'http://localhost:11434'
    model: str = 'llama3.1:8b'


class InfraConfig(BaseModel):
    """Groups all provider-specific settings outside the domain layer."""

    transcription_provider: Literal['openai', 'deepseek'] = 'openai'
    summarization_provider: Literal['openai', 'deepseek', 'ollama'] = 'openai'
    openai: OpenAIProviderConfig = Field(default_factory=OpenAIProviderConfig)
    deepseek: DeepSeekProviderConfig = Field(default_factory=DeepSeekProviderConfig)
    ollama: OllamaProviderConfig = Field(default_factory=OllamaProviderConfig)
