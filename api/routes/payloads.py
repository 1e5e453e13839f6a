"""Strict JSON request decoding

A body must be exactly one JSON value no larger than the configured cap,
matching the target model with no unknown fields. Any violation is a 400
with the same opaque message.
"""
import json
from typing import Type, TypeVar

from fastapi import HTTPException, Request
from pydantic import BaseModel, ValidationError

from config import default_config
from middleware.errors import INVALID_PAYLOAD

ModelT = TypeVar("ModelT", bound=BaseModel)


def _reject_constant(name: str):
    raise ValueError(f"non-standard JSON constant: {name}")


async def read_capped_body(request: Request, limit: int) -> bytes:
    """Read the request body, failing once it exceeds limit bytes

    Raises:
        HTTPException: 400 when the body is too large
    """
    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            raise HTTPException(status_code=400, detail=INVALID_PAYLOAD)
    return bytes(body)


def parse_payload(raw: bytes, model: Type[ModelT]) -> ModelT:
    """Decode a single JSON value into model

    json.loads already rejects empty input and trailing data after the
    value. NaN and Infinity are not JSON. Strings must be valid UTF-8, so a
    lone surrogate escape is rejected. A literal null decodes as an empty
    object.

    Raises:
        HTTPException: 400 on any decoding or validation failure
    """
    try:
        payload = json.loads(raw, parse_constant=_reject_constant)
        if payload is None:
            payload = {}
        json.dumps(payload, ensure_ascii=False).encode("utf-8")
        return model.model_validate(payload)
    except (ValueError, ValidationError):
        raise HTTPException(status_code=400, detail=INVALID_PAYLOAD) from None


def json_body(model: Type[ModelT]):
    """Dependency factory: strict JSON body of the given model

    Usage:
        @router.post("/api/folders")
        async def create(req: CreateFolderRequest = Depends(json_body(CreateFolderRequest))):
            ...
    """

    async def dependency(request: Request) -> ModelT:
        limit = getattr(request.app.state, "max_body_bytes", default_config.server.max_body_bytes)
        raw = await read_capped_body(request, limit)
        return parse_payload(raw, model)

    return dependency
