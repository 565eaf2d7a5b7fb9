"""Request handler for the story resource.

Maps each store outcome to an HTTP status code and JSON body. The handler
runs only after the auth gate (and, for writes, the validation gate) has
passed, so it never re-checks credentials or payloads.

Every store failure is caught here and reported as 500 ``{"message": ...}``.
Zero matching rows on get/update/delete is reported as 404
``{"error": "StoryNotFound"}`` whether the ID never existed or the write
simply matched nothing.
"""

import logging
from dataclasses import dataclass
from typing import Any

from fastapi import Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from storyapi.models.schemas import StoryCreate, StoryUpdate
from storyapi.services.story_store import StoreError, StoryStore

logger = logging.getLogger(__name__)

NOT_FOUND_BODY = {"error": "StoryNotFound"}


@dataclass(frozen=True)
class HandlerResult:
    """Status code and JSON body for one handled request. ``body=None`` means no content."""

    status_code: int
    body: Any = None

    def to_response(self) -> Response:
        if self.body is None:
            return Response(status_code=self.status_code)
        return JSONResponse(status_code=self.status_code, content=jsonable_encoder(self.body))


def _not_found() -> HandlerResult:
    return HandlerResult(status.HTTP_404_NOT_FOUND, dict(NOT_FOUND_BODY))


def _store_failure(operation: str, exc: StoreError) -> HandlerResult:
    logger.error(f"Story store failed during {operation}: {exc.message}")
    return HandlerResult(status.HTTP_500_INTERNAL_SERVER_ERROR, {"message": exc.message})


class StoryRequestHandler:
    """Turns story requests into responses.

    Built once at application startup with its store and shared by every
    request. It holds no per-request state.
    """

    def __init__(self, store: StoryStore):
        self.store = store

    async def list_stories(self) -> HandlerResult:
        try:
            stories = await self.store.get_all()
        except StoreError as e:
            return _store_failure("list", e)
        return HandlerResult(status.HTTP_200_OK, stories)

    async def get_story(self, story_id: str) -> HandlerResult:
        try:
            matches = await self.store.get_by_id(story_id)
        except StoreError as e:
            return _store_failure("get", e)

        if len(matches) > 0:
            return HandlerResult(status.HTTP_200_OK, matches[0])
        logger.info(f"Story {story_id!r} not found")
        return _not_found()

    async def create_story(self, story: StoryCreate) -> HandlerResult:
        try:
            [new_id] = await self.store.add(story)
        except StoreError as e:
            return _store_failure("create", e)
        return HandlerResult(status.HTTP_201_CREATED, {"ID": new_id})

    async def update_story(self, story_id: str, changes: StoryUpdate) -> HandlerResult:
        try:
            count = await self.store.update(story_id, changes)
        except StoreError as e:
            return _store_failure("update", e)

        if count > 0:
            return HandlerResult(status.HTTP_204_NO_CONTENT)
        logger.info(f"Story {story_id!r} not updated: no matching row")
        return _not_found()

    async def delete_story(self, story_id: str) -> HandlerResult:
        try:
            count = await self.store.remove(story_id)
        except StoreError as e:
            return _store_failure("delete", e)

        if count > 0:
            return HandlerResult(status.HTTP_204_NO_CONTENT)
        logger.info(f"Story {story_id!r} not deleted: no matching row")
        return _not_found()
