"""
Documentation helpers.

Request bodies are accepted as arbitrary JSON objects and stored exactly
as sent, so the pydantic schemas never validate anything at runtime.
They only describe the expected shape in the generated OpenAPI document.
"""

from typing import Any, Dict, Type

from pydantic import BaseModel


def documented_body(model: Type[BaseModel]) -> Dict[str, Any]:
    """Return ``openapi_extra`` describing the request body with ``model``.

    FastAPI merges this into the operation it generates for the
    ``Dict[str, Any]`` body parameter.
    """
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }
