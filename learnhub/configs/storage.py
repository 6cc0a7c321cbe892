"""
Artifact storage bucket configuration.

Settings for the S3 bucket holding generated videos and images
and for presigned download URL generation.

Dependencies: pydantic_settings
System role: Artifact storage configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Settings for S3 artifact bucket operations."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="STORAGE_",
        case_sensitive=False,
        extra="ignore",
    )

    bucket: str | None = Field(
        default=None,
        description="S3 bucket for generated artifacts; unset keeps artifacts inline",
    )
    region: str = Field(
        default="us-east-1",
        description="AWS region of the artifact bucket",
    )
    url_expiry_seconds: int = Field(
        default=3600,
        description="Presigned download URL lifetime in seconds",
    )
