"""
Memos Backend — Tag Route Handlers
===================================

What:  POST /api/tag, GET /api/tag, GET /api/tag/suggestion, POST /api/tag/delete.
Why:   HTTP entry points for managing a user's tags.
How:   Resolve the user, decode the body, delegate to TagService, wrap the
       result in the `{"data": ...}` envelope.
Who:   Called by the memos web client (tag sidebar and editor autocomplete).

Request bodies are decoded by hand rather than declared as pydantic body
parameters: FastAPI would answer malformed JSON with 422, while this API
reports it as 400 "Malformed post tag request".
"""

import logging
from typing import List, Type, TypeVar

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.auth import CurrentUser, get_current_user
from app.exceptions import ValidationError
from app.schemas.common import DataResponse, ErrorResponse, compose_response
from app.schemas.tag import TagDeleteRequest, TagUpsertRequest
from app.services.tag_service import tag_service
from app.store import Store, get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Tag"])

BodyT = TypeVar("BodyT", bound=BaseModel)


async def _decode_body(request: Request, model: Type[BodyT]) -> BodyT:
    """Parse the raw JSON body into `model`, mapping any decode failure to 400."""
    body = await request.body()
    try:
        return model.model_validate_json(body)
    except PydanticValidationError as e:
        logger.debug("Malformed %s body: %s", request.url.path, e.errors())
        raise ValidationError(message="Malformed post tag request") from e


def _json_body(model: Type[BaseModel]) -> dict:
    # Documents the hand-decoded body in the OpenAPI schema
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }


_ERRORS = {
    400: {"description": "Malformed body or empty name", "model": ErrorResponse},
    401: {"description": "No authenticated user", "model": ErrorResponse},
    500: {"description": "Store or activity failure", "model": ErrorResponse},
}


@router.post(
    "/tag",
    response_model=DataResponse[str],
    responses=_ERRORS,
    openapi_extra=_json_body(TagUpsertRequest),
    summary="Create a tag (upsert)",
)
async def create_tag(
    request: Request,
    user: CurrentUser = Depends(get_current_user),
    store: Store = Depends(get_store),
) -> DataResponse[str]:
    """
    Create a tag for the caller, or keep the existing one with that name.

    Records a `tag.create` activity on success. Returns the tag name.
    """
    tag_upsert = await _decode_body(request, TagUpsertRequest)
    tag = await tag_service.upsert_tag(store, user.id, tag_upsert.name)
    return compose_response(tag.name)


@router.get(
    "/tag",
    response_model=DataResponse[List[str]],
    responses={k: v for k, v in _ERRORS.items() if k != 400},
    summary="List the caller's tags",
)
async def list_tags(
    user: CurrentUser = Depends(get_current_user),
    store: Store = Depends(get_store),
) -> DataResponse[List[str]]:
    names = await tag_service.list_tag_names(store, user.id)
    return compose_response(names)


@router.get(
    "/tag/suggestion",
    response_model=DataResponse[List[str]],
    responses={k: v for k, v in _ERRORS.items() if k != 400},
    summary="Suggest unregistered hashtags",
    description=(
        "Scans the caller's non-archived memos for #hashtags and returns, in "
        "alphabetical order, the ones that are not registered tags yet."
    ),
)
async def suggest_tags(
    user: CurrentUser = Depends(get_current_user),
    store: Store = Depends(get_store),
) -> DataResponse[List[str]]:
    suggestions = await tag_service.suggest_tags(store, user.id)
    return compose_response(suggestions)


@router.post(
    "/tag/delete",
    response_model=DataResponse[bool],
    responses={**_ERRORS, 404: {"description": "Tag not found", "model": ErrorResponse}},
    openapi_extra=_json_body(TagDeleteRequest),
    summary="Delete a tag by name",
)
async def delete_tag(
    request: Request,
    user: CurrentUser = Depends(get_current_user),
    store: Store = Depends(get_store),
) -> DataResponse[bool]:
    tag_delete = await _decode_body(request, TagDeleteRequest)
    await tag_service.delete_tag(store, user.id, tag_delete.name)
    return compose_response(True)
