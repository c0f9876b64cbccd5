"""
Public compile API.

compile_pattern_json() takes the anchors and config as JSON strings, runs the
full pipeline, and returns the compiled Pattern as JSON. Output is
deterministic: the same inputs always produce byte-identical JSON.
"""

from __future__ import annotations

import logging

import pydantic

from amigurumi.api.payloads import CompileRequest, ErrorPayload, PatternPayload, to_anchor_points
from amigurumi.api.validate import parse_anchors, parse_config
from amigurumi.estimates.registry import EstimatesRegistry
from amigurumi.orchestrator.pipeline import PipelineError, compile_pattern

logger = logging.getLogger(__name__)


class CompileError(Exception):
    """Compilation failed; ``error`` carries the structured payload for the caller."""

    def __init__(self, error: ErrorPayload) -> None:
        super().__init__(f"[{error.stage}] {error.message}")
        self.error = error


def compile_request(
    request: CompileRequest, registry: EstimatesRegistry | None = None
) -> PatternPayload:
    """
    Compile an already-parsed request.

    Raises
    ------
    CompileError
        If any pipeline stage fails.
    """
    try:
        config = request.config.to_config()
    except ValueError as exc:
        raise CompileError(
            ErrorPayload(stage="input", code="invalid_config", message=str(exc))
        ) from exc

    try:
        pattern = compile_pattern(to_anchor_points(request.anchors), config, registry)
    except PipelineError as exc:
        logger.warning("Compilation failed at %s: %s", exc.stage, exc.detail)
        raise CompileError(
            ErrorPayload(stage=exc.stage, code=exc.code, message=exc.detail)
        ) from exc

    return PatternPayload.from_pattern(pattern)


def compile_pattern_json(
    anchors_json: str,
    config_json: str,
    registry: EstimatesRegistry | None = None,
) -> str:
    """
    Compile a profile and config, both given as JSON, into pattern JSON.

    Parameters
    ----------
    anchors_json:
        JSON list of ``{"radius_cm", "height_cm"}`` objects, bottom pole first
        (or an object holding that list under ``"anchors"``).
    config_json:
        JSON object with ``total_height_cm``, ``gauge`` and optional
        ``decrease_style`` / ``stagger_shaping``.
    registry:
        Estimate constants; defaults to the packaged table.

    Returns
    -------
    str
        The serialized pattern: ``rows`` (``row_number``,
        ``target_stitch_count``, ``actions``, ``instruction``) and ``metadata``.

    Raises
    ------
    CompileError
        If either payload is malformed (``stage == "input"``) or a pipeline
        stage fails (``stage`` names it).
    """
    try:
        request = CompileRequest(
            anchors=parse_anchors(anchors_json),
            config=parse_config(config_json),
        )
    except pydantic.ValidationError as exc:
        raise CompileError(
            ErrorPayload(stage="input", code="invalid_payload", message=str(exc))
        ) from exc

    return compile_request(request, registry).model_dump_json()
