"""Synchronous image generation.

Returns finished image artifacts in a single call: Imagen through google-genai
in provider mode, keyword-driven SVG placeholders in simulated mode.

Dependencies: google.genai, learnhub.core.jobs, learnhub.core.generation.provider
System role: Image half of the generation client
"""

import asyncio
import logging
from typing import TYPE_CHECKING, Literal

from google.genai import types

from learnhub.core.exceptions import ConfigurationError, ProviderError, ValidationError
from learnhub.core.generation.placeholders import render_image_placeholder
from learnhub.core.generation.provider import describe_provider_error
from learnhub.core.jobs.artifacts import to_data_url
from learnhub.core.jobs.models import GeneratedArtifact, GenerationConfig

if TYPE_CHECKING:
    from google import genai

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_MIME_TYPE = "image/png"
STYLE_HINTS = {
    "photographic": "a photorealistic photograph",
    "digital_art": "digital art",
    "sketch": "a pencil sketch",
    "watercolor": "a watercolor painting",
    "oil_painting": "an oil painting",
}


def build_image_prompt(prompt: str, style: str | None) -> str:
    """Fold the requested style into the provider prompt."""
    if not style:
        return prompt
    return f"{prompt}, rendered as {STYLE_HINTS.get(style, style.replace('_', ' '))}"


class ImageGenerationClient:
    """Generates images synchronously."""

    def __init__(
        self,
        mode: Literal["simulated", "provider"] = "simulated",
        google_client: "genai.Client | None" = None,
        model_id: str = "imagen-3.0-generate-002",
    ) -> None:
        """
        Args:
            mode: simulated renders placeholders, provider calls Imagen
            google_client: google-genai client (required in provider mode)
            model_id: Imagen model identifier

        Raises:
            ConfigurationError: If provider mode is requested without a client
        """
        if mode == "provider" and google_client is None:
            raise ConfigurationError("Gemini API key is required", setting="GEMINI_API_KEY")
        self._mode = mode
        self._google_client = google_client
        self._model_id = model_id

    @property
    def mode(self) -> str:
        return self._mode

    async def generate(
        self,
        prompt: str,
        config: GenerationConfig | None = None,
    ) -> list[GeneratedArtifact]:
        """
        Generate images for a prompt.

        Args:
            prompt: Image description
            config: Number of images, aspect ratio and style

        Returns:
            list[GeneratedArtifact]: One artifact per generated image

        Raises:
            ValidationError: If prompt is empty
            ProviderError: If the provider rejects or fails the request
        """
        if not prompt or not prompt.strip():
            raise ValidationError("Prompt must not be empty", field="prompt")
        config = config or GenerationConfig()
        count = config.number_of_artifacts or 1

        logger.info(
            f"{__name__}:generate - START mode={self._mode} count={count} "
            f"prompt_len={len(prompt)}"
        )

        if self._mode == "simulated":
            artifacts = [render_image_placeholder(prompt, i, config) for i in range(count)]
        else:
            artifacts = await self._generate_with_provider(prompt, config, count)

        logger.info(f"{__name__}:generate - END generated={len(artifacts)}")
        return artifacts

    async def _generate_with_provider(
        self,
        prompt: str,
        config: GenerationConfig,
        count: int,
    ) -> list[GeneratedArtifact]:
        provider_config = types.GenerateImagesConfig(
            number_of_images=count,
            aspect_ratio=config.aspect_ratio,
        )
        try:
            response = await asyncio.to_thread(
                self._google_client.models.generate_images,
                model=self._model_id,
                prompt=build_image_prompt(prompt, config.style),
                config=provider_config,
            )
        except Exception as e:
            logger.error(
                f"{__name__}:_generate_with_provider - {type(e).__name__}: {e}",
                exc_info=True,
            )
            raise describe_provider_error(e, provider="imagen") from e

        generated = [
            item.image
            for item in (response.generated_images or [])
            if item.image is not None and item.image.image_bytes
        ]
        if not generated:
            raise ProviderError(
                "No images were returned. The prompt may have been filtered.",
                kind=ProviderError.CONTENT_POLICY,
                provider="imagen",
            )

        artifacts = []
        for image in generated:
            mime_type = image.mime_type or DEFAULT_IMAGE_MIME_TYPE
            artifacts.append(
                GeneratedArtifact(
                    url=to_data_url(image.image_bytes, mime_type),
                    prompt=prompt,
                    mime_type=mime_type,
                    config=config,
                )
            )
        return artifacts
