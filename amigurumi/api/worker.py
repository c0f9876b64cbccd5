"""
Request/response message handler for running the compiler off the UI thread.

Each request is a JSON object ``{"id", "type", "payload"}``; each reply is
``{"id", "type": "SUCCESS" | "ERROR", "payload"}`` and always echoes the
request id so the caller can correlate asynchronous replies. Supported types:

  GENERATE_PATTERN  payload {"profile" | "anchors": [...], "config": {...}}
                    → the compiled pattern
  VALIDATE_PROFILE  payload: anchors → a validation report
  VALIDATE_CONFIG   payload: config, or {"config": {...}, "profile": [...]}
                    → a validation report

handle_message never raises: every failure becomes an ERROR reply carrying an
ErrorPayload.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any

import pydantic
from pydantic import BaseModel, Field

from amigurumi.api.compile import CompileError, compile_request
from amigurumi.api.payloads import CompileRequest, ErrorPayload
from amigurumi.api.validate import validate_config, validate_profile

logger = logging.getLogger(__name__)


class MessageType(str, Enum):
    GENERATE_PATTERN = "GENERATE_PATTERN"
    VALIDATE_PROFILE = "VALIDATE_PROFILE"
    VALIDATE_CONFIG = "VALIDATE_CONFIG"


class ReplyType(str, Enum):
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


class WorkerRequest(BaseModel):
    id: str | int | None = Field(default=None, description="Caller-chosen correlation id")
    type: str
    payload: Any = None


class WorkerReply(BaseModel):
    id: str | int | None = None
    type: ReplyType
    payload: Any = None


def handle_message(raw: str) -> str:
    """Answer one JSON request message with one JSON reply message."""
    try:
        request = WorkerRequest.model_validate_json(raw)
    except pydantic.ValidationError as exc:
        return _error(
            _peek_id(raw), ErrorPayload(stage="input", code="invalid_message", message=str(exc))
        )

    try:
        payload = _dispatch(request)
    except CompileError as exc:
        return _error(request.id, exc.error)
    except pydantic.ValidationError as exc:
        return _error(
            request.id, ErrorPayload(stage="input", code="invalid_payload", message=str(exc))
        )
    except Exception as exc:
        logger.exception("Unhandled error answering %s request %r", request.type, request.id)
        return _error(
            request.id, ErrorPayload(stage="internal", code="internal_error", message=str(exc))
        )

    reply = WorkerReply(id=request.id, type=ReplyType.SUCCESS, payload=payload)
    return reply.model_dump_json()


# ── Helpers ───────────────────────────────────────────────────────────────────


def _dispatch(request: WorkerRequest) -> dict[str, Any]:
    match request.type:
        case MessageType.GENERATE_PATTERN.value:
            compile_in = CompileRequest.model_validate(request.payload)
            return compile_request(compile_in).model_dump(mode="json")
        case MessageType.VALIDATE_PROFILE.value:
            return validate_profile(request.payload).model_dump(mode="json")
        case MessageType.VALIDATE_CONFIG.value:
            return validate_config(request.payload).model_dump(mode="json")
        case _:
            raise CompileError(
                ErrorPayload(
                    stage="input",
                    code="unknown_message_type",
                    message=f"Unknown message type: {request.type}",
                )
            )


def _error(request_id: str | int | None, error: ErrorPayload) -> str:
    reply = WorkerReply(id=request_id, type=ReplyType.ERROR, payload=error.model_dump())
    return reply.model_dump_json()


def _peek_id(raw: str) -> str | int | None:
    """Best-effort id recovery from a message that failed validation."""
    try:
        data = json.loads(raw)
    except (TypeError, ValueError):
        return None
    if isinstance(data, dict) and isinstance(data.get("id"), (str, int)):
        return data["id"]
    return None
