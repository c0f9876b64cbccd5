"""
Estimate constants registry: loads the empirical time and yarn constants from
YAML and exposes them read-only.

The registry is a module-level singleton; call get_registry() to obtain it.
The table is loaded and validated once at import time. Nothing writes to the
registry after startup.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, cast

import yaml

_DATA_DIR = Path(__file__).parent / "data"
_FILENAME = "estimates.yaml"


@dataclass(frozen=True)
class TimeConstants:
    base_seconds_per_stitch: float
    reference_hook_mm: float
    hook_exponent: float


@dataclass(frozen=True)
class YarnConstants:
    yarn_widths_per_stitch: float
    tail_allowance_cm: float


class EstimatesRegistry:
    """
    Read-only table of estimate constants.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_registry() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = data_dir

        # Type annotations only; actual assignment happens in _load
        self.time: TimeConstants
        self.yarn: YarnConstants
        self.raw: MappingProxyType[str, Any]

        self._load()
        self._validate()

    def _load_yaml(self, filename: str) -> dict[str, Any]:
        path = self._data_dir / filename
        try:
            with open(path) as f:
                return cast(dict[str, Any], yaml.safe_load(f))
        except FileNotFoundError:
            raise FileNotFoundError(f"Estimates data file not found: {path}") from None
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to parse estimates data file {path}: {exc}") from exc

    def _load(self) -> None:
        data = self._load_yaml(_FILENAME)
        try:
            self.time = TimeConstants(
                base_seconds_per_stitch=float(data["time"]["base_seconds_per_stitch"]),
                reference_hook_mm=float(data["time"]["reference_hook_mm"]),
                hook_exponent=float(data["time"]["hook_exponent"]),
            )
            self.yarn = YarnConstants(
                yarn_widths_per_stitch=float(data["yarn"]["yarn_widths_per_stitch"]),
                tail_allowance_cm=float(data["yarn"]["tail_allowance_cm"]),
            )
        except (KeyError, TypeError) as exc:
            raise ValueError(f"Estimates data file is missing a constant: {exc}") from exc
        self.raw = MappingProxyType(data)

    def _validate(self) -> None:
        errors: list[str] = []
        if self.time.base_seconds_per_stitch <= 0:
            errors.append("time.base_seconds_per_stitch must be positive")
        if self.time.reference_hook_mm <= 0:
            errors.append("time.reference_hook_mm must be positive")
        if self.yarn.yarn_widths_per_stitch <= 0:
            errors.append("yarn.yarn_widths_per_stitch must be positive")
        if self.yarn.tail_allowance_cm < 0:
            errors.append("yarn.tail_allowance_cm must be >= 0")

        if errors:
            raise ValueError(
                "Estimates registry validation failed:\n"
                + "\n".join(f"  • {e}" for e in errors)
            )


# ── Module-level singleton ─────────────────────────────────────────────────────

_registry: EstimatesRegistry = EstimatesRegistry()


def get_registry() -> EstimatesRegistry:
    """Return the module-level registry singleton."""
    return _registry
