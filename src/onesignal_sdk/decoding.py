"""Turns OneSignal HTTP responses into typed values or SDK errors."""

from __future__ import annotations

import functools
import logging
import typing
from typing import Any, Optional

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from .exceptions import APIError, DecodeError, InternalServerError
from .models.common import ErrorResponse

SUCCESS_STATUSES = (httpx.codes.OK, httpx.codes.NO_CONTENT)


@functools.lru_cache(maxsize=None)
def type_adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


def check_error_response(response: httpx.Response) -> None:
    """Raise the SDK error matching ``response``'s status, if any."""
    status = response.status_code
    if status in SUCCESS_STATUSES:
        return
    if status == httpx.codes.INTERNAL_SERVER_ERROR:
        raise InternalServerError(response=response)
    try:
        payload = ErrorResponse.model_validate_json(response.content)
    except ValidationError as exc:
        raise DecodeError(f"couldn't decode response body JSON: {exc}", response=response) from exc
    raise APIError(payload.messages, response=response)


def empty_value(shape: Any) -> Any:
    """Zero value returned for a successful response without a body."""
    if shape is None:
        return None
    origin = typing.get_origin(shape) or shape
    if origin is list:
        return []
    if origin is dict:
        return {}
    if isinstance(shape, type) and issubclass(shape, BaseModel):
        return shape.model_construct()
    return None


def decode_response(
    response: httpx.Response,
    shape: Any,
    logger: Optional[logging.Logger] = None,
) -> Any:
    # httpx has already buffered the body, so logging it does not consume it.
    if logger is not None:
        logger.debug("[OneSignal] response status=%s body: %s", response.status_code, response.text)

    check_error_response(response)

    content = response.content
    if not content.strip():
        return empty_value(shape)
    if shape is None:
        return None
    try:
        return type_adapter(shape).validate_json(content)
    except ValidationError as exc:
        raise DecodeError(f"couldn't decode response body JSON: {exc}", response=response) from exc


__all__ = ["check_error_response", "decode_response", "empty_value", "type_adapter"]
