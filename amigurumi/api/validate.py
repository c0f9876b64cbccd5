"""
Public input validation API.

validate_profile() and validate_config() check a raw payload (a JSON string
or an already-decoded object) against the payload schema and then against the
compiler's invariants. They return a ValidationReport listing every problem
so the editing surface can show them all at once; they never raise on bad
input.
"""

from __future__ import annotations

import logging
from typing import Any

import pydantic
from pydantic import TypeAdapter

from amigurumi.api.payloads import (
    AnchorPayload,
    ConfigPayload,
    ValidationIssue,
    ValidationReport,
    to_anchor_points,
)
from amigurumi.validator.config import validate_config as check_config
from amigurumi.validator.profile import validate_anchors

logger = logging.getLogger(__name__)

_ANCHOR_LIST: TypeAdapter[list[AnchorPayload]] = TypeAdapter(list[AnchorPayload])
_JSON: TypeAdapter[Any] = TypeAdapter(Any)


def field_path(prefix: str, loc: tuple[int | str, ...]) -> str:
    """Render a pydantic error location as ``prefix[0].radius_cm``."""
    path = prefix
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else part
    return path


def issues_from_pydantic(
    exc: pydantic.ValidationError, prefix: str = ""
) -> list[ValidationIssue]:
    """Convert a pydantic ValidationError into one issue per failing field."""
    return [
        ValidationIssue(
            field=field_path(prefix, tuple(err["loc"])) or "payload",
            message=err["msg"],
            code=err["type"],
        )
        for err in exc.errors()
    ]


def parse_anchors(payload: Any) -> list[AnchorPayload]:
    """
    Parse a profile payload.

    Accepts a JSON string or a decoded object, either a bare list of anchors
    or a mapping with an ``anchors`` (or ``profile``) list.

    Raises
    ------
    pydantic.ValidationError
        If the payload does not match the anchor schema.
    """
    if isinstance(payload, (str, bytes)):
        payload = _decode(payload)
    if isinstance(payload, dict):
        payload = payload.get("anchors", payload.get("profile", payload))
    return _ANCHOR_LIST.validate_python(payload)


def parse_config(payload: Any) -> ConfigPayload:
    """
    Parse a config payload from a JSON string or a decoded mapping.

    Raises
    ------
    pydantic.ValidationError
        If the payload does not match the config schema.
    """
    if isinstance(payload, (str, bytes)):
        return ConfigPayload.model_validate_json(payload)
    return ConfigPayload.model_validate(payload)


def validate_profile(payload: Any) -> ValidationReport:
    """
    Validate a profile payload.

    Parameters
    ----------
    payload:
        Anchors as a JSON string, a list of ``{radius_cm, height_cm}``
        mappings, or a mapping holding that list under ``anchors``.

    Returns
    -------
    ValidationReport
        Always returned — never raises.
    """
    try:
        anchors = parse_anchors(payload)
    except pydantic.ValidationError as exc:
        logger.debug("Profile payload rejected: %d schema errors", exc.error_count())
        return ValidationReport.from_issues(issues_from_pydantic(exc, prefix="anchors"))

    errors = validate_anchors(to_anchor_points(anchors))
    return ValidationReport.from_issues([ValidationIssue.from_error(e) for e in errors])


def validate_config(payload: Any, profile: Any = None) -> ValidationReport:
    """
    Validate a config payload, and its fit to a profile when one is given.

    Parameters
    ----------
    payload:
        Config as a JSON string or decoded mapping, or a mapping holding the
        config under ``config`` next to an optional ``profile`` (or
        ``anchors``) list.
    profile:
        Optional anchors payload, in any form validate_profile() accepts.
        Takes precedence over a profile carried inside *payload*.

    Returns
    -------
    ValidationReport
        Always returned — never raises. A total height that disagrees with
        the profile's drawn height is reported as a warning and does not
        fail the report.
    """
    try:
        if isinstance(payload, (str, bytes)):
            payload = _decode(payload)
        if isinstance(payload, dict) and "config" in payload:
            if profile is None:
                profile = payload.get("profile", payload.get("anchors"))
            payload = payload["config"]
        config = parse_config(payload).to_config()
    except pydantic.ValidationError as exc:
        logger.debug("Config payload rejected: %d schema errors", exc.error_count())
        return ValidationReport.from_issues(issues_from_pydantic(exc))
    except ValueError as exc:
        return ValidationReport.from_issues(
            [ValidationIssue(field="config", message=str(exc), code="invalid_config")]
        )

    issues: list[ValidationIssue] = []
    anchors = None
    if profile is not None:
        try:
            anchors = to_anchor_points(parse_anchors(profile))
        except pydantic.ValidationError as exc:
            issues.extend(issues_from_pydantic(exc, prefix="profile"))

    errors = check_config(config, anchors)
    issues.extend(ValidationIssue.from_error(e) for e in errors)
    return ValidationReport.from_issues(issues)


# ── Helpers ───────────────────────────────────────────────────────────────────


def _decode(raw: str | bytes) -> Any:
    """Decode JSON with pydantic so syntax errors surface as ValidationErrors."""
    return _JSON.validate_json(raw)
