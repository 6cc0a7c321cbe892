"""
Generation job configuration.

Controls how asynchronous generation jobs advance (simulated timer
checkpoints or real provider polling) and how many are retained.

Dependencies: pydantic_settings
System role: Job tracker configuration
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GenerationSettings(BaseSettings):
    """Settings for image/video generation and job tracking."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GENERATION_",
        case_sensitive=False,
        extra="ignore",
    )

    mode: Literal["simulated", "provider"] = Field(
        default="simulated",
        description="simulated renders placeholders on a timer; provider calls Imagen/Veo",
    )
    job_capacity: int = Field(
        default=10,
        ge=1,
        description="Number of most recent jobs retained by the tracker",
    )
    tick_interval_seconds: float = Field(
        default=1.0,
        ge=0.0,
        description="Delay between simulated progress checkpoints",
    )
    checkpoints: list[int] = Field(
        default=[25, 50, 75, 90],
        description="Ordered progress checkpoints reported while running",
    )
    poll_interval_seconds: float = Field(
        default=10.0,
        gt=0.0,
        description="Delay between provider operation polls",
    )
    wait_timeout_seconds: float = Field(
        default=600.0,
        gt=0.0,
        description="Upper bound for synchronous waits on a video job",
    )
