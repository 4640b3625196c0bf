"""
Person endpoints for API v1.

These routes expose list, get, create, replace and delete operations
on the in‑memory person collection.  Every response body is JSON:
records on success, ``{"error": ...}`` on failure and
``{"message": ...}`` after a delete.

Creating a person answers 200 rather than 201; existing clients
depend on that status.
"""

import logging
from typing import Any, Dict, List, Union

from fastapi import APIRouter, Body, Depends, Request, status
from fastapi.responses import JSONResponse

from person_registry_api.app.core.errors import (
    INTERNAL_SERVER_ERROR,
    PERSON_NOT_FOUND,
    error_response,
)
from person_registry_api.app.schemas.person import validate_person
from person_registry_api.app.services.person_service import PersonService

logger = logging.getLogger(__name__)

router = APIRouter()

PERSON_DELETED = "Person deleted successfully"

PersonResponse = Union[Dict[str, Any], JSONResponse]


def get_person_service(request: Request) -> PersonService:
    """Build a service bound to the application's person store."""
    return PersonService(request.app.state.person_store)


def _allow_unknown_fields(request: Request) -> bool:
    return request.app.state.settings.person_allow_unknown_fields


@router.get("", response_model=None)
async def list_persons(
    service: PersonService = Depends(get_person_service),
) -> Union[List[Dict[str, Any]], JSONResponse]:
    """Return all persons in insertion order."""
    try:
        return await service.list_persons()
    except Exception:
        logger.exception("Failed to list persons")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_SERVER_ERROR)


@router.get("/{person_id}", response_model=None)
async def get_person(
    person_id: str,
    service: PersonService = Depends(get_person_service),
) -> PersonResponse:
    """Retrieve a single person by id.

    Returns HTTP 404 if no record has this id.
    """
    try:
        person = await service.get_person(person_id)
        if person is None:
            return error_response(status.HTTP_404_NOT_FOUND, PERSON_NOT_FOUND)
        return person
    except Exception:
        logger.exception("Failed to fetch person %s", person_id)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_SERVER_ERROR)


@router.post("", response_model=None, status_code=status.HTTP_200_OK)
async def create_person(
    request: Request,
    payload: Any = Body(None),
    service: PersonService = Depends(get_person_service),
) -> PersonResponse:
    """Create a person with a generated id.

    The body must contain ``name``, ``age`` and ``hobbies``; otherwise
    the first violated rule is returned with HTTP 400.
    """
    try:
        result = validate_person(payload, allow_unknown_fields=_allow_unknown_fields(request))
        if not result.ok:
            return error_response(status.HTTP_400_BAD_REQUEST, result.message)
        return await service.create_person(result.data)
    except Exception:
        logger.exception("Failed to create person")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_SERVER_ERROR)


@router.put("/{person_id}", response_model=None)
async def replace_person(
    person_id: str,
    request: Request,
    payload: Any = Body(None),
    service: PersonService = Depends(get_person_service),
) -> PersonResponse:
    """Replace a person wholesale.

    The payload is validated before the lookup, so an invalid body
    yields 400 even for an unknown id.  Fields missing from the body
    are removed from the stored record.
    """
    try:
        result = validate_person(payload, allow_unknown_fields=_allow_unknown_fields(request))
        if not result.ok:
            return error_response(status.HTTP_400_BAD_REQUEST, result.message)
        person = await service.replace_person(person_id, result.data)
        if person is None:
            return error_response(status.HTTP_404_NOT_FOUND, PERSON_NOT_FOUND)
        return person
    except Exception:
        logger.exception("Failed to replace person %s", person_id)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_SERVER_ERROR)


@router.delete("/{person_id}", response_model=None)
async def delete_person(
    person_id: str,
    service: PersonService = Depends(get_person_service),
) -> PersonResponse:
    """Delete a person by id.

    Returns HTTP 404 if no record has this id.
    """
    try:
        deleted = await service.delete_person(person_id)
        if not deleted:
            return error_response(status.HTTP_404_NOT_FOUND, PERSON_NOT_FOUND)
        return {"message": PERSON_DELETED}
    except Exception:
        logger.exception("Failed to delete person %s", person_id)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_SERVER_ERROR)
