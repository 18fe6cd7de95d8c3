"""Template and template collection API endpoints."""

import logging

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_current_user, get_db, get_ownership_guard
from app.core.ownership import OwnershipGuard
from app.core.storage import get_storage
from app.core.validation import (
    CollectionUuidParams,
    SharedTemplateParams,
    UserCollectionParams,
    UserIdParams,
    UserTemplateParams,
    collection_uuid_params,
    shared_template_params,
    user_collection_params,
    user_id_params,
    user_template_params,
)
from app.domains.template.service import TemplateService
from app.exceptions.base import InternalServerError
from app.exceptions.resource import CollectionNotFoundError
from app.schemas.template import (
    TemplateCollectionCreate,
    TemplateCollectionResponse,
    TemplateCollectionUpdate,
    TemplateCreate,
    TemplateResponse,
    TemplateUpdate,
)
from models.user import User

logger = logging.getLogger(__name__)

shared_router = APIRouter(prefix="/api/shared/collections", tags=["shared"])
router = APIRouter(prefix="/api/users/{user_id}/collections", tags=["collections"])


def get_template_service(db: AsyncSession = Depends(get_db)) -> TemplateService:
    return TemplateService(db, get_storage())


# ===== Shared collections =====


@shared_router.get("")
async def get_shared_collections(service: TemplateService = Depends(get_template_service)):
    """Read all shared template collections including their templates.

    Served from the listing cache; collection and template writes drop the
    cached entry.
    """
    return await service.list_shared_collections()


@shared_router.get("/{uuid}")
async def get_shared_collection(
    params: CollectionUuidParams = Depends(collection_uuid_params),
    service: TemplateService = Depends(get_template_service),
):
    """Read one shared collection with its templates."""
    collection = await service.get_shared_collection(params.uuid)
    if collection is None:
        raise CollectionNotFoundError()
    return {"collection": TemplateCollectionResponse.model_validate(collection)}


@shared_router.patch("/{uuid}")
async def update_shared_collection(
    params: CollectionUuidParams = Depends(collection_uuid_params),
    collection_data: TemplateCollectionUpdate = Body(...),
    current_user: User = Depends(get_current_user),
    guard: OwnershipGuard = Depends(get_ownership_guard),
    service: TemplateService = Depends(get_template_service),
):
    """Update one of the caller's collections."""
    collection = await guard.owned_collection(current_user.id, params.uuid)

    try:
        collection = await service.update_collection(collection, collection_data)
    except SQLAlchemyError as e:
        logger.error(f"Error updating template collection: {str(e)}")
        raise InternalServerError(data={"error": str(e)}) from e

    return {"collection": TemplateCollectionResponse.model_validate(collection)}


@shared_router.delete("/{uuid}")
async def delete_shared_collection(
    params: CollectionUuidParams = Depends(collection_uuid_params),
    current_user: User = Depends(get_current_user),
    guard: OwnershipGuard = Depends(get_ownership_guard),
    service: TemplateService = Depends(get_template_service),
):
    """Delete a template collection and its templates."""
    collection = await guard.owned_collection(current_user.id, params.uuid)

    try:
        return await service.delete_collection(collection.id)
    except SQLAlchemyError as e:
        logger.error(f"Error deleting template collection: {str(e)}")
        raise InternalServerError(data={"error": str(e)}) from e


@shared_router.get("/{uuid}/templates/{id}")
async def get_shared_template(
    params: SharedTemplateParams = Depends(shared_template_params),
    guard: OwnershipGuard = Depends(get_ownership_guard),
):
    """Read a template of a shared collection."""
    template = await guard.shared_template(params.uuid, params.id)
    return {"template": TemplateResponse.model_validate(template)}


@shared_router.patch("/{uuid}/templates/{id}")
async def update_shared_template(
    params: SharedTemplateParams = Depends(shared_template_params),
    template_data: TemplateUpdate = Body(...),
    current_user: User = Depends(get_current_user),
    guard: OwnershipGuard = Depends(get_ownership_guard),
    service: TemplateService = Depends(get_template_service),
):
    """Update a template of one of the caller's collections."""
    template = await guard.owned_template(current_user.id, params.uuid, params.id)

    try:
        template = await service.update_template(template, template_data)
    except SQLAlchemyError as e:
        logger.error(f"Error updating template: {str(e)}")
        raise InternalServerError("Failed to update template", data={"error": str(e)}) from e

    return {"template": TemplateResponse.model_validate(template)}


@shared_router.delete("/{uuid}/templates/{id}")
async def delete_shared_template(
    params: SharedTemplateParams = Depends(shared_template_params),
    current_user: User = Depends(get_current_user),
    guard: OwnershipGuard = Depends(get_ownership_guard),
    service: TemplateService = Depends(get_template_service),
):
    """Delete a template of one of the caller's collections."""
    await guard.owned_template(current_user.id, params.uuid, params.id)

    try:
        await service.delete_template(params.id)
        return {"success": True}
    except SQLAlchemyError as e:
        logger.error(f"Error deleting template: {str(e)}")
        raise InternalServerError("Failed to delete template", data={"error": str(e)}) from e


# ===== User collections =====


@router.get("")
async def get_user_collections(
    params: UserIdParams = Depends(user_id_params),
    current_user: User = Depends(get_current_user),
    service: TemplateService = Depends(get_template_service),
):
    """List the user's own collections, shared or not."""
    OwnershipGuard.ensure_same_user(params.user_id, current_user.id)

    collections = await service.list_user_collections(params.user_id)
    return {"collections": [TemplateCollectionResponse.model_validate(c) for c in collections]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user_collection(
    params: UserIdParams = Depends(user_id_params),
    collection_data: TemplateCollectionCreate = Body(...),
    current_user: User = Depends(get_current_user),
    service: TemplateService = Depends(get_template_service),
):
    """Create a template collection."""
    OwnershipGuard.ensure_same_user(params.user_id, current_user.id)

    try:
        collection = await service.create_collection(params.user_id, collection_data)
    except SQLAlchemyError as e:
        logger.error(f"Error creating template collection: {str(e)}")
        raise InternalServerError(
            "Failed to create template collection", data={"error": str(e)}
        ) from e

    return {"collection": TemplateCollectionResponse.model_validate(collection)}


@router.patch("/{uuid}")
async def update_user_collection(
    params: UserCollectionParams = Depends(user_collection_params),
    collection_data: TemplateCollectionUpdate = Body(...),
    current_user: User = Depends(get_current_user),
    guard: OwnershipGuard = Depends(get_ownership_guard),
    service: TemplateService = Depends(get_template_service),
):
    """Rename, describe or share one of the user's collections."""
    guard.ensure_same_user(params.user_id, current_user.id)
    collection = await guard.owned_collection(params.user_id, params.uuid)

    try:
        collection = await service.update_collection(collection, collection_data)
    except SQLAlchemyError as e:
        logger.error(f"Error updating template collection: {str(e)}")
        raise InternalServerError(data={"error": str(e)}) from e

    return {"collection": TemplateCollectionResponse.model_validate(collection)}


@router.delete("/{uuid}")
async def delete_user_collection(
    params: UserCollectionParams = Depends(user_collection_params),
    current_user: User = Depends(get_current_user),
    guard: OwnershipGuard = Depends(get_ownership_guard),
    service: TemplateService = Depends(get_template_service),
):
    """Delete one of the user's collections and its templates."""
    guard.ensure_same_user(params.user_id, current_user.id)
    collection = await guard.owned_collection(params.user_id, params.uuid)

    try:
        return await service.delete_collection(collection.id)
    except SQLAlchemyError as e:
        logger.error(f"Error deleting template collection: {str(e)}")
        raise InternalServerError(data={"error": str(e)}) from e


@router.post("/{uuid}/templates", status_code=status.HTTP_201_CREATED)
async def create_user_template(
    params: UserCollectionParams = Depends(user_collection_params),
    template_data: TemplateCreate = Body(...),
    current_user: User = Depends(get_current_user),
    guard: OwnershipGuard = Depends(get_ownership_guard),
    service: TemplateService = Depends(get_template_service),
):
    """Add a template to one of the user's collections."""
    guard.ensure_same_user(params.user_id, current_user.id)
    collection = await guard.owned_collection(params.user_id, params.uuid)

    try:
        template = await service.create_template(params.user_id, collection.id, template_data)
    except SQLAlchemyError as e:
        logger.error(f"Error creating template: {str(e)}")
        raise InternalServerError("Failed to create template", data={"error": str(e)}) from e

    return {"template": TemplateResponse.model_validate(template)}


@router.get("/{uuid}/templates/{id}")
async def get_user_template(
    params: UserTemplateParams = Depends(user_template_params),
    current_user: User = Depends(get_current_user),
    guard: OwnershipGuard = Depends(get_ownership_guard),
):
    """Read a template of one of the user's collections."""
    guard.ensure_same_user(params.user_id, current_user.id)
    template = await guard.owned_template(params.user_id, params.uuid, params.id)
    return {"template": TemplateResponse.model_validate(template)}


@router.patch("/{uuid}/templates/{id}")
async def update_user_template(
    params: UserTemplateParams = Depends(user_template_params),
    template_data: TemplateUpdate = Body(...),
    current_user: User = Depends(get_current_user),
    guard: OwnershipGuard = Depends(get_ownership_guard),
    service: TemplateService = Depends(get_template_service),
):
    """Update a template of one of the user's collections."""
    guard.ensure_same_user(params.user_id, current_user.id)
    template = await guard.owned_template(params.user_id, params.uuid, params.id)

    try:
        template = await service.update_template(template, template_data)
    except SQLAlchemyError as e:
        logger.error(f"Error updating template: {str(e)}")
        raise InternalServerError("Failed to update template", data={"error": str(e)}) from e

    return {"template": TemplateResponse.model_validate(template)}


@router.delete("/{uuid}/templates/{id}")
async def delete_user_template(
    params: UserTemplateParams = Depends(user_template_params),
    current_user: User = Depends(get_current_user),
    guard: OwnershipGuard = Depends(get_ownership_guard),
    service: TemplateService = Depends(get_template_service),
):
    """Delete a template of one of the user's collections."""
    guard.ensure_same_user(params.user_id, current_user.id)
    await guard.owned_template(params.user_id, params.uuid, params.id)

    try:
        return await service.delete_template(params.id)
    except SQLAlchemyError as e:
        logger.error(f"Error deleting template: {str(e)}")
        raise InternalServerError("Failed to delete template", data={"error": str(e)}) from e
