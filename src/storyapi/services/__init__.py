"""Backend services for the Story API.

Services:
- story_store: SQLAlchemy data access for stories

Usage:
    from storyapi.services import StoryStore

    store = StoryStore(session_factory)
    stories = await store.get_all()
"""

from .story_store import StoreError, StoryStore, parse_story_id

__all__ = [
    "StoreError",
    "StoryStore",
    "parse_story_id",
]
