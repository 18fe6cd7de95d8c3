"""Typed parsing of path and query identifiers.

Every route receives its identifiers as one of the bundles below. The
functions here are pure: they never touch the store, so a malformed
identifier is rejected with a 400 before any query runs.
"""

import re
from typing import Annotated, Any, TypeVar
from uuid import UUID

from fastapi import Path, Query
from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from app.exceptions.base import BadRequestError
from app.shared.ordering import OrderBy, parse_order_by

_DIGITS = re.compile(r"[0-9]+")

CHAT_ORDERABLE_COLUMNS = ("id", "created_at", "updated_at", "title", "model")
ORDER_DIRECTIONS = ("asc", "desc")


def _parse_numeric_id(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError("must be a non-negative integer")
    if isinstance(value, int):
        if value < 0:
            raise ValueError("must be a non-negative integer")
        return value
    if isinstance(value, str) and _DIGITS.fullmatch(value):
        return int(value)
    raise ValueError("must be a non-negative integer")


NumericId = Annotated[int, BeforeValidator(_parse_numeric_id)]


class IdentifierParams(BaseModel):
    """Base for validated identifier bundles."""

    model_config = ConfigDict(frozen=True)


class UserIdParams(IdentifierParams):
    user_id: NumericId


class ChatIdParams(UserIdParams):
    chat_id: NumericId


class InstallationIdParams(UserIdParams):
    installation_id: NumericId


class ProjectIdParams(UserIdParams):
    project_id: NumericId


class UserCollectionParams(UserIdParams):
    uuid: UUID


class UserTemplateParams(UserCollectionParams):
    id: NumericId


class CollectionUuidParams(IdentifierParams):
    uuid: UUID


class SharedTemplateParams(CollectionUuidParams):
    id: NumericId


class ShareUuidParams(IdentifierParams):
    uuid: UUID


P = TypeVar("P", bound=IdentifierParams)


def validate_params(params_model: type[P], **raw: Any) -> P:
    """Parse raw path values into ``params_model`` or raise a 400 naming the bad fields."""
    try:
        return params_model.model_validate(raw)
    except PydanticValidationError as e:
        errors = [
            {
                "field": ".".join(str(part) for part in error["loc"]),
                "message": str(error["msg"]),
            }
            for error in e.errors()
        ]
        fields = ", ".join(error["field"] for error in errors)
        raise BadRequestError(message=f"Invalid {fields}", data=errors) from e


def validate_order_by(order_by: str | None) -> list[OrderBy] | None:
    """Parse an ordering string and check it against the sortable conversation fields."""
    if order_by is None:
        return None

    orders = parse_order_by(order_by)
    for order in orders:
        if order.column not in CHAT_ORDERABLE_COLUMNS or order.direction not in ORDER_DIRECTIONS:
            raise BadRequestError(
                message="order_by must be a comma-separated list of 'column:direction' pairs",
                data={
                    "field": "order_by",
                    "columns": list(CHAT_ORDERABLE_COLUMNS),
                    "directions": list(ORDER_DIRECTIONS),
                },
            )
    return orders


# FastAPI dependencies


def user_id_params(user_id: str = Path(..., description="User ID")) -> UserIdParams:
    return validate_params(UserIdParams, user_id=user_id)


def chat_id_params(
    user_id: str = Path(..., description="User ID"),
    chat_id: str = Path(..., description="Chat conversation ID"),
) -> ChatIdParams:
    return validate_params(ChatIdParams, user_id=user_id, chat_id=chat_id)


def installation_id_params(
    user_id: str = Path(..., description="User ID"),
    installation_id: str = Path(..., description="Installation ID"),
) -> InstallationIdParams:
    return validate_params(InstallationIdParams, user_id=user_id, installation_id=installation_id)


def project_id_params(
    user_id: str = Path(..., description="User ID"),
    project_id: str = Path(..., description="Project ID"),
) -> ProjectIdParams:
    return validate_params(ProjectIdParams, user_id=user_id, project_id=project_id)


def user_collection_params(
    user_id: str = Path(..., description="User ID"),
    uuid: str = Path(..., description="Collection UUID"),
) -> UserCollectionParams:
    return validate_params(UserCollectionParams, user_id=user_id, uuid=uuid)


def user_template_params(
    user_id: str = Path(..., description="User ID"),
    uuid: str = Path(..., description="Collection UUID"),
    id: str = Path(..., description="Template ID"),
) -> UserTemplateParams:
    return validate_params(UserTemplateParams, user_id=user_id, uuid=uuid, id=id)


def collection_uuid_params(uuid: str = Path(..., description="Collection UUID")) -> CollectionUuidParams:
    return validate_params(CollectionUuidParams, uuid=uuid)


def shared_template_params(
    uuid: str = Path(..., description="Collection UUID"),
    id: str = Path(..., description="Template ID"),
) -> SharedTemplateParams:
    return validate_params(SharedTemplateParams, uuid=uuid, id=id)


def share_uuid_params(uuid: str = Path(..., description="Share UUID")) -> ShareUuidParams:
    return validate_params(ShareUuidParams, uuid=uuid)


def order_by_query(
    order_by: str | None = Query(None, description="Comma-separated 'column:direction' pairs"),
) -> list[OrderBy] | None:
    return validate_order_by(order_by)
