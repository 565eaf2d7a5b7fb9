"""Story API - authenticated CRUD over stories.

A small FastAPI service that stores stories (writing and drawing prompts
with a link to the story PDF) and maps every data-store outcome to a
fixed HTTP status code and JSON body.

Quick Start:
    uvicorn storyapi.api.main:app

    # Or embed the handler directly
    from storyapi import StoryRequestHandler, StoryStore

    handler = StoryRequestHandler(StoryStore(session_factory))
    result = await handler.get_story("1")
    print(result.status_code, result.body)
"""

__version__ = "0.1.0"

from storyapi.api.handlers import HandlerResult, StoryRequestHandler
from storyapi.services.story_store import StoreError, StoryStore

__all__ = [
    # Version
    "__version__",
    # Handler
    "StoryRequestHandler",
    "HandlerResult",
    # Store
    "StoryStore",
    "StoreError",
]
