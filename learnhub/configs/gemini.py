"""
Gemini configuration settings.

API key and model identifiers for the Google generative AI providers
(text/vision chat, Imagen images, Veo videos).

Dependencies: pydantic_settings
System role: Generative AI provider configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeminiSettings(BaseSettings):
    """Settings for Google Gemini, Imagen and Veo access."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GEMINI_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        description="Google AI Studio API key; required by every provider-backed path",
    )
    text_model: str = Field(
        default="gemini-flash-lite-latest",
        description="Model for chat, vision and learning module content",
    )
    image_model: str = Field(
        default="imagen-3.0-generate-002",
        description="Model for synchronous image generation",
    )
    video_model: str = Field(
        default="veo-2.0-generate-001",
        description="Model for long-running video generation",
    )
    chat_temperature: float = Field(default=0.7, description="Chat sampling temperature")
    chat_top_k: int = Field(default=40, description="Chat top-k sampling")
    chat_top_p: float = Field(default=0.95, description="Chat nucleus sampling")
    chat_max_output_tokens: int = Field(default=1024, description="Chat response token cap")
