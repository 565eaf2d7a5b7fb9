"""OpenAPI configuration for the Story API.

Adds API description, tag metadata, the bearer security scheme and
schema examples to the generated document.
"""

from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from storyapi.core.config import get_settings

API_TITLE = "Story API"
API_DESCRIPTION = """
# Story API

Create, read, update and delete stories: creative writing and drawing
prompts with a link to the story PDF.

## Authentication

Every `/api/stories` route requires a JWT bearer token.

```
Authorization: Bearer <your-jwt-token>
```

## Errors

| Code | Body | Description |
|------|------|-------------|
| 400 | `{"error": "InvalidStory", "details": [...]}` | Request body failed validation |
| 401 | `{"error": "...", "details": {}}` | Missing or invalid auth |
| 404 | `{"error": "StoryNotFound"}` | No story matched the ID |
| 500 | `{"message": "..."}` | The data store failed |
"""

TAGS_METADATA = [
    {
        "name": "health",
        "description": "Health check and system status endpoints",
    },
    {
        "name": "stories",
        "description": "Create and manage stories",
    },
]


STORY_OPERATIONS = [
    ("get", "/api/stories"),
    ("post", "/api/stories"),
    ("get", "/api/stories/{story_id}"),
    ("put", "/api/stories/{story_id}"),
    ("delete", "/api/stories/{story_id}"),
]


def missing_story_operations(schema: dict[str, Any]) -> list[str]:
    """List story operations or auth pieces absent from a generated schema.

    Returns:
        Human-readable problems, empty when the schema is complete
    """
    paths = schema.get("paths", {})
    problems = [
        f"{method.upper()} {path}"
        for method, path in STORY_OPERATIONS
        if method not in paths.get(path, {})
    ]
    schemes = schema.get("components", {}).get("securitySchemes", {})
    if schemes.get("HTTPBearer", {}).get("scheme") != "bearer":
        problems.append("HTTPBearer security scheme")
    return problems


def custom_openapi(app: FastAPI) -> dict[str, Any]:
    """Generate custom OpenAPI schema with enhanced documentation.

    Args:
        app: FastAPI application instance

    Returns:
        OpenAPI schema dictionary
    """
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=API_TITLE,
        version=get_settings().app_version,
        description=API_DESCRIPTION,
        routes=app.routes,
        tags=TAGS_METADATA,
    )

    if "components" not in openapi_schema:
        openapi_schema["components"] = {}

    openapi_schema["components"].setdefault("securitySchemes", {})["HTTPBearer"] = {
        "type": "http",
        "scheme": "bearer",
        "bearerFormat": "JWT",
    }

    _add_schema_examples(openapi_schema)

    app.openapi_schema = openapi_schema
    return app.openapi_schema


def _add_schema_examples(schema: dict[str, Any]) -> None:
    """Add examples to schema definitions in place."""
    schemas = schema.get("components", {}).get("schemas", {})

    if "StoryRead" in schemas:
        schemas["StoryRead"]["example"] = {
            "id": 1,
            "title": "The Lost Kite",
            "url": "https://example.com/stories/lost-kite.pdf",
            "writing_prompt": "Write about the day the kite flew away.",
            "drawing_prompt": "Draw where the kite landed.",
            "created_at": "2025-01-15T10:30:00Z",
            "updated_at": "2025-01-15T10:30:00Z",
        }

    if "StoryCreate" in schemas:
        schemas["StoryCreate"]["example"] = {
            "title": "The Lost Kite",
            "url": "https://example.com/stories/lost-kite.pdf",
            "writing_prompt": "Write about the day the kite flew away.",
            "drawing_prompt": "Draw where the kite landed.",
        }

    if "StoryCreated" in schemas:
        schemas["StoryCreated"]["example"] = {"ID": 1}
