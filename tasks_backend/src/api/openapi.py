"""
OpenAPI document generation for the ToDo list API.

The document is derived from the same pydantic schemas and route declarations
that validate requests, built once on first use and cached on the app.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

OPENAPI_VERSION = "3.0.0"
API_TITLE = "Sample ToDo list API"
API_VERSION = "v1"
API_DESCRIPTION = (
    "This API exhibits how you can provide a comprehensible API documentation using "
    "[FastAPI](https://fastapi.tiangolo.com), "
    "[Swagger UI](https://swagger.io/docs/open-source-tools/swagger-ui/), "
    "and [Redoc](https://redocly.com/docs/redoc/)."
)
API_LOGO = {
    "url": "https://placehold.co/260x100/EEE/31343C?font=montserrat&text=Sample%20ToDo%0AAPI",
    "altText": "Sample ToDo API logo",
}

openapi_tags: List[Dict[str, Any]] = [
    {"name": "Task", "description": "Manipulation on ToDo list"},
]


def _to_openapi_30(node: Any) -> Any:
    """
    Rewrite the JSON Schema 2020-12 constructs pydantic emits into their
    OpenAPI 3.0 equivalents, in place:
    - anyOf with a {"type": "null"} member becomes "nullable": true
    - schema-level "examples": [x, ...] becomes "example": x
    - a "default": null on a non-nullable schema is dropped
    """
    if isinstance(node, list):
        for item in node:
            _to_openapi_30(item)
        return node
    if not isinstance(node, dict):
        return node

    for value in node.values():
        _to_openapi_30(value)

    any_of = node.get("anyOf")
    if isinstance(any_of, list) and {"type": "null"} in any_of:
        members = [m for m in any_of if m != {"type": "null"}]
        del node["anyOf"]
        if len(members) == 1:
            for key, value in members[0].items():
                node.setdefault(key, value)
        elif members:
            node["anyOf"] = members
        node["nullable"] = True

    examples = node.get("examples")
    if isinstance(examples, list):
        del node["examples"]
        if examples:
            node.setdefault("example", examples[0])

    if "default" in node and node["default"] is None and not node.get("nullable"):
        del node["default"]
    return node


def _ensure_tags(schema: Dict[str, Any]) -> None:
    """
    Ensure the document carries the declared tag metadata without duplicating
    tags that are already present.
    """
    existing_tags: List[Dict[str, Any]] = schema.get("tags", []) or []
    existing_names = {t.get("name") for t in existing_tags if isinstance(t, dict)}
    for tag in openapi_tags:
        if tag.get("name") not in existing_names:
            existing_tags.append(tag)
    if existing_tags:
        schema["tags"] = existing_tags


# PUBLIC_INTERFACE
def build_openapi_schema(app: FastAPI) -> Dict[str, Any]:
    """
    Build the OpenAPI document for the given app from its registered routes.
    """
    schema = get_openapi(
        title=API_TITLE,
        version=API_VERSION,
        openapi_version=OPENAPI_VERSION,
        description=API_DESCRIPTION,
        routes=app.routes,
        tags=openapi_tags,
    )
    _to_openapi_30(schema.get("paths", {}))
    _to_openapi_30(schema.get("components", {}))
    schema["info"]["x-logo"] = dict(API_LOGO)
    _ensure_tags(schema)
    return schema


# PUBLIC_INTERFACE
def install_openapi(app: FastAPI) -> Callable[[], Dict[str, Any]]:
    """
    Replace app.openapi with a generator that builds the document once and
    serves the cached copy afterwards.
    """

    def openapi() -> Dict[str, Any]:
        if app.openapi_schema is None:
            app.openapi_schema = build_openapi_schema(app)
        return app.openapi_schema

    app.openapi = openapi  # type: ignore[method-assign]
    return openapi
