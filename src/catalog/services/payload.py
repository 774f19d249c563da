# src/catalog/services/payload.py
from __future__ import annotations

import logging
from collections.abc import AsyncIterable
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from catalog.core.metrics import PAYLOAD_REJECTIONS
from catalog.domain.ports import MalformedPayloadError, PayloadTooLargeError

logger = logging.getLogger(__name__)

MAX_PAYLOAD_BYTES = 262_144  # 256 KiB

ModelT = TypeVar("ModelT", bound=BaseModel)


async def read_bounded_body(
    chunks: AsyncIterable[bytes], max_bytes: int = MAX_PAYLOAD_BYTES
) -> bytes:
    """
    Buffers a streamed request body, chunk by chunk.

    The size check runs before each chunk is appended, so an oversized body
    is rejected as soon as the limit would be crossed and the rest of the
    stream is never read.

    Raises:
        PayloadTooLargeError: If the body would exceed ``max_bytes``.
    """
    body = bytearray()
    async for chunk in chunks:
        if len(body) + len(chunk) > max_bytes:
            PAYLOAD_REJECTIONS.labels(reason="too_large").inc()
            logger.warning("Rejected request body larger than %d bytes", max_bytes)
            raise PayloadTooLargeError(max_bytes)
        body.extend(chunk)
    return bytes(body)


def decode_product(body: bytes, model: type[ModelT]) -> ModelT:
    """Decodes a JSON body into ``model``, raising MalformedPayloadError on any mismatch."""
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        PAYLOAD_REJECTIONS.labels(reason="malformed").inc()
        first = e.errors()[0] if e.error_count() else {}
        location = ".".join(str(part) for part in first.get("loc", ())) or "body"
        raise MalformedPayloadError(f"{location}: {first.get('msg', 'invalid')}") from e
