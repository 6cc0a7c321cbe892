"""
Learning module service orchestrator.

Generates learning content for a topic, persists it as a module, and
produces the module's illustration on request.

Dependencies: learnhub.core.learning, learnhub.core.generation, learnhub.boundary.db
System role: Learning module use case orchestration
"""

import logging
from typing import Any

from learnhub.application.services.record_access import get_owned_record
from learnhub.boundary.db.document_store import LEARNING_MODULES, DocumentStore
from learnhub.core.exceptions import RecordNotFoundError, ValidationError
from learnhub.core.generation.image_client import ImageGenerationClient
from learnhub.core.jobs.models import GenerationConfig
from learnhub.core.learning.content_generator import LearningContentGenerator

logger = logging.getLogger(__name__)


class LearningModuleService:
    """Learning module service orchestrator."""

    def __init__(
        self,
        store: DocumentStore,
        content_generator: LearningContentGenerator | None = None,
        image_client: ImageGenerationClient | None = None,
    ) -> None:
        """
        Initialize learning module service.

        Args:
            store: Document store holding user records
            content_generator: Generator for module text content (needed by create_module)
            image_client: Image client (needed by generate_module_image)
        """
        self.store = store
        self.content_generator = content_generator
        self.image_client = image_client

    async def create_module(self, user_id: str, topic: str, grade: str) -> dict[str, Any]:
        """
        Generate and persist a learning module.

        Returns:
            dict: Stored module

        Raises:
            ValidationError: If topic or grade is blank
            ProviderError: If content generation fails
            StoreError: If the module cannot be saved
        """
        if self.content_generator is None:
            raise RuntimeError("LearningModuleService requires a content generator")
        content = await self.content_generator.generate_all(topic.strip(), grade.strip())
        record = content.model_dump(by_alias=True)
        record["user_id"] = user_id

        module_id = await self.store.add(LEARNING_MODULES, record)
        logger.info(
            "Learning module created",
            extra={"module_id": module_id, "user_id": user_id, "topic": content.topic},
        )
        return await self._reload(module_id)

    async def list_modules(self, user_id: str) -> list[dict[str, Any]]:
        """List a user's modules, newest first."""
        return await self.store.query(LEARNING_MODULES, user_id)

    async def get_module(self, user_id: str, module_id: str) -> dict[str, Any]:
        """
        Get one module.

        Raises:
            RecordNotFoundError: If the module does not exist for this user
        """
        return await get_owned_record(self.store, LEARNING_MODULES, module_id, user_id)

    async def generate_module_image(self, user_id: str, module_id: str) -> dict[str, Any]:
        """
        Generate the module illustration from its stored image description.

        Returns:
            dict: Module with generated_image_url set

        Raises:
            RecordNotFoundError: If the module does not exist for this user
            ValidationError: If the module has no image description
            ProviderError: If image generation fails
        """
        if self.image_client is None:
            raise RuntimeError("LearningModuleService requires an image client")
        module = await get_owned_record(self.store, LEARNING_MODULES, module_id, user_id)
        description = (module.get("image_description") or "").strip()
        if not description:
            raise ValidationError("Module has no image description", field="image_description")

        artifacts = await self.image_client.generate(
            description, GenerationConfig(number_of_artifacts=1)
        )
        await self.store.update(
            LEARNING_MODULES, module_id, {"generated_image_url": artifacts[0].url}
        )
        logger.info("Module image generated", extra={"module_id": module_id})
        return await self._reload(module_id)

    async def _reload(self, module_id: str) -> dict[str, Any]:
        record = await self.store.get(LEARNING_MODULES, module_id)
        if record is None:
            raise RecordNotFoundError(LEARNING_MODULES, module_id)
        return record
