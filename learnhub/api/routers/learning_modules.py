"""
Learning module API endpoints.

Routes:
- GET /learning-modules - List the caller's modules (newest first)
- POST /learning-modules - Generate and store a module for a topic and grade
- GET /learning-modules/{id} - Get one module
- POST /learning-modules/{id}/image - Generate the module illustration

Dependencies: learnhub.application.services, learnhub.models
System role: Learning module HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from learnhub.api.deps import (
    get_current_user_id,
    get_learning_module_service,
    get_module_authoring_service,
)
from learnhub.api.routers.router_utils import handle_service_errors
from learnhub.application.services import LearningModuleService
from learnhub.models.learning_module import (
    CreateLearningModuleRequest,
    LearningModuleResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/learning-modules", tags=["learning-modules"])


@router.get("", response_model=list[LearningModuleResponse])
@handle_service_errors
async def list_learning_modules(
    user_id: str = Depends(get_current_user_id),
    module_service: LearningModuleService = Depends(get_learning_module_service),
) -> list[LearningModuleResponse]:
    """List the caller's learning modules."""
    modules = await module_service.list_modules(user_id)
    return [LearningModuleResponse.model_validate(module) for module in modules]


@router.post("", response_model=LearningModuleResponse, status_code=201)
@handle_service_errors
async def create_learning_module(
    request: CreateLearningModuleRequest,
    user_id: str = Depends(get_current_user_id),
    module_service: LearningModuleService = Depends(get_module_authoring_service),
) -> LearningModuleResponse:
    """
    Generate a learning module.

    Produces tutorial, quiz, video script and image description with Gemini,
    then stores the module for the caller.

    Raises:
        HTTPException(400): Blank topic or grade
        HTTPException(502): Gemini request failed
    """
    module = await module_service.create_module(user_id, request.topic, request.grade)
    return LearningModuleResponse.model_validate(module)


@router.get("/{module_id}", response_model=LearningModuleResponse)
@handle_service_errors
async def get_learning_module(
    module_id: str,
    user_id: str = Depends(get_current_user_id),
    module_service: LearningModuleService = Depends(get_learning_module_service),
) -> LearningModuleResponse:
    module = await module_service.get_module(user_id, module_id)
    return LearningModuleResponse.model_validate(module)


@router.post("/{module_id}/image", response_model=LearningModuleResponse)
@handle_service_errors
async def generate_learning_module_image(
    module_id: str,
    user_id: str = Depends(get_current_user_id),
    module_service: LearningModuleService = Depends(get_learning_module_service),
) -> LearningModuleResponse:
    """
    Generate the module illustration from its image description.

    Raises:
        HTTPException(404): Module not found
        HTTPException(400): Module has no image description
    """
    module = await module_service.generate_module_image(user_id, module_id)
    return LearningModuleResponse.model_validate(module)
