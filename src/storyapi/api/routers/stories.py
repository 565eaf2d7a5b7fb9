"""Stories router.

CRUD endpoints for stories. Every route sits behind the authentication
gate; create and update bodies are validated against StoryCreate and
StoryUpdate before the handler runs.
"""

from typing import Any

from fastapi import APIRouter, Depends, Response, status

from storyapi.api.deps import StoryHandler, require_auth
from storyapi.models.schemas import (
    ErrorMessageBody,
    StoryCreate,
    StoryCreated,
    StoryNotFoundBody,
    StoryRead,
    StoryUpdate,
)

router = APIRouter(dependencies=[Depends(require_auth)])

STORE_FAILURE: dict[int | str, dict[str, Any]] = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorMessageBody, "description": "Store failure"},
}
NOT_FOUND: dict[int | str, dict[str, Any]] = {
    status.HTTP_404_NOT_FOUND: {"model": StoryNotFoundBody, "description": "No story with this ID"},
}


@router.get("/", include_in_schema=False)
@router.get(
    "",
    summary="Returns a list of all stories from the database",
    responses={status.HTTP_200_OK: {"model": list[StoryRead]}, **STORE_FAILURE},
)
async def list_stories(handler: StoryHandler) -> Response:
    """Get a list of all stories in the database."""
    result = await handler.list_stories()
    return result.to_response()


@router.get(
    "/{story_id}",
    summary="Query the database for a story with the given ID",
    responses={status.HTTP_200_OK: {"model": StoryRead}, **NOT_FOUND, **STORE_FAILURE},
)
async def get_story(story_id: str, handler: StoryHandler) -> Response:
    """Search the database for a specific story.

    The ID is passed to the store as received.
    """
    result = await handler.get_story(story_id)
    return result.to_response()


@router.post("/", status_code=status.HTTP_201_CREATED, include_in_schema=False)
@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Post a new story and return its ID",
    responses={status.HTTP_201_CREATED: {"model": StoryCreated}, **STORE_FAILURE},
)
async def create_story(story: StoryCreate, handler: StoryHandler) -> Response:
    """Add a story to the database."""
    result = await handler.create_story(story)
    return result.to_response()


@router.put(
    "/{story_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update the story with the given ID",
    responses={**NOT_FOUND, **STORE_FAILURE},
)
async def update_story(story_id: str, changes: StoryUpdate, handler: StoryHandler) -> Response:
    """Apply a partial update to a story."""
    result = await handler.update_story(story_id, changes)
    return result.to_response()


@router.delete(
    "/{story_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete the story with the given ID",
    responses={**NOT_FOUND, **STORE_FAILURE},
)
async def delete_story(story_id: str, handler: StoryHandler) -> Response:
    """Delete a story from the database."""
    result = await handler.delete_story(story_id)
    return result.to_response()
