"""Request handling for the image service: uploads and image operations."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from functools import partial
from http import HTTPStatus
from pathlib import Path
from typing import Any, Callable

from .ids import generate_transaction_id
from .processing import (
    ImageProcessingError,
    process_blur,
    process_gray,
    process_resize,
)

log = logging.getLogger(__name__)

GREETING = "Hello from the image server!"
UPLOAD_SUFFIX = "upload.jpg"
OUTPUT_SUFFIX = "output.jpg"

INVALID_JSON = "Invalid Json Body"
MISSING_PARAMETER = "Missing Parameter"
PROCESS_FAILED = "Failed to Process Image"
UPLOAD_FAILED = "Failed to upload the image."
UNSUPPORTED_METHOD = "Unsupported method."
UNSUPPORTED_TARGET = "Unsupported target."
UNSUPPORTED_FILTER = "Unsupported filter type."


@dataclass(frozen=True)
class Response:
    """An HTTP response produced by the service."""

    status: HTTPStatus
    body: bytes
    content_type: str = "text/plain"

    @classmethod
    def text(cls, status: HTTPStatus, message: str) -> Response:
        return cls(status, message.encode("utf-8"))

    @classmethod
    def failure(cls, message: str) -> Response:
        return cls.text(HTTPStatus.INTERNAL_SERVER_ERROR, message)

    @property
    def text_body(self) -> str:
        return self.body.decode("utf-8")


def _int_param(doc: dict[str, Any], key: str) -> int | None:
    value = doc.get(key)
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _size_params(doc: dict[str, Any]) -> tuple[int, int] | None:
    width = _int_param(doc, "width")
    height = _int_param(doc, "height")
    if width is None or height is None:
        return None
    return width, height


class ImageService:
    """Stores uploaded images in a media directory and transforms them on request."""

    def __init__(self, media_dir: str | os.PathLike) -> None:
        self.media_dir = Path(media_dir)

    def handle(self, method: str, target: str, body: bytes) -> Response:
        """Dispatch one request and return the response to send."""
        method = method.upper()
        if method == "GET":
            return Response.text(HTTPStatus.OK, GREETING)
        if method == "POST":
            if target == "/upload":
                return self.upload(body)
            return self.process(target, body)
        return Response.text(HTTPStatus.BAD_REQUEST, UNSUPPORTED_METHOD)

    def upload(self, body: bytes) -> Response:
        """Store ``body`` as a new image and report its file name as JSON."""
        file_name = generate_transaction_id() + UPLOAD_SUFFIX
        try:
            (self.media_dir / file_name).write_bytes(body)
        except OSError as exc:
            log.error("failed to store upload %s: %s", file_name, exc)
            return Response.failure(UPLOAD_FAILED)
        payload = {
            "status": "sucess",
            "message": "Image uploaded successfully",
            "fileName": file_name,
        }
        text = json.dumps(payload, separators=(",", ":")) + "\n"
        return Response.text(HTTPStatus.OK, text)

    def process(self, target: str, body: bytes) -> Response:
        """Apply the operation named by ``target`` to the image named in the JSON body."""
        try:
            doc = json.loads(body)
        except ValueError:
            return Response.failure(INVALID_JSON)
        if not isinstance(doc, dict):
            return Response.failure(MISSING_PARAMETER)

        file_name = doc.get("fileName")
        if not isinstance(file_name, str) or not file_name:
            return Response.failure(MISSING_PARAMETER)
        if Path(file_name).name != file_name:
            return Response.failure(PROCESS_FAILED)

        source = self.media_dir / file_name
        output = self.media_dir / (file_name.split("upload", 1)[0] + OUTPUT_SUFFIX)

        operation: Callable[[], Path]
        if target == "/grayscale":
            operation = partial(process_gray, source, output)
        elif target == "/resize":
            size = _size_params(doc)
            if size is None:
                return Response.failure(MISSING_PARAMETER)
            operation = partial(process_resize, source, output, *size)
        elif target == "/filter":
            filter_type = doc.get("filterType")
            if not isinstance(filter_type, str):
                return Response.failure(MISSING_PARAMETER)
            if filter_type != "blur":
                return Response.text(HTTPStatus.BAD_REQUEST, UNSUPPORTED_FILTER)
            size = _size_params(doc)
            if size is None:
                return Response.failure(MISSING_PARAMETER)
            operation = partial(process_blur, source, output, *size)
        else:
            return Response.text(HTTPStatus.NOT_FOUND, UNSUPPORTED_TARGET)

        try:
            operation()
        except ImageProcessingError as exc:
            log.error("%s failed: %s", target, exc)
            return Response.failure(PROCESS_FAILED)
        return self._image_response(output)

    def _image_response(self, path: Path) -> Response:
        try:
            data = path.read_bytes()
        except OSError:
            return Response.failure(PROCESS_FAILED)
        return Response(HTTPStatus.OK, data, "image/jpeg")