"""
Generation clients.

Synchronous image generation, job-backed video generation and Gemini
text/vision access, with shared provider error mapping.
"""

from learnhub.core.generation.image_client import ImageGenerationClient
from learnhub.core.generation.provider import create_google_client, describe_provider_error
from learnhub.core.generation.text_client import GeminiTextClient
from learnhub.core.generation.video_client import (
    VeoProgressSource,
    VideoGenerationClient,
    create_video_tracker,
)

__all__ = [
    "GeminiTextClient",
    "ImageGenerationClient",
    "VeoProgressSource",
    "VideoGenerationClient",
    "create_google_client",
    "create_video_tracker",
    "describe_provider_error",
]
