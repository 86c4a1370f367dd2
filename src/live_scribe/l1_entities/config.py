"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from live_scribe.l1_entities.recording import SIMULATION_SPEEDS_MS


class RecordingConfig(BaseModel):
    language: str
    simulation_speed_ms: int
    restart_delay: float
    chunk_interval: float
    simulated_final_delay: float
    sample_rate: int

    @field_validator('simulation_speed_ms')
    @classmethod
    def _known_speed(cls, value: int) -> int:
        if value not in SIMULATION_SPEEDS_MS:
            raise ValueError(f'simulation_speed_ms must be one of {SIMULATION_SPEEDS_MS}')
        return value


class SummarizationConfig(BaseModel):
    fallback_language: str


class ServerConfig(BaseModel):
    host: str
    port: int


class LoggingConfig(BaseModel):
    level: str
    file: str | None = None  # None → stderr


class AppConfig(BaseModel):
    recording: RecordingConfig
    summarization: SummarizationConfig
    server: ServerConfig
    logging: LoggingConfig
