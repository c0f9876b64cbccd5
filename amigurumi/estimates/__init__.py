"""estimates — metadata aggregator and its constants registry."""

from amigurumi.estimates.aggregator import aggregate, seconds_per_stitch, yarn_cm_per_stitch
from amigurumi.estimates.registry import EstimatesRegistry, get_registry

__all__ = [
    "EstimatesRegistry",
    "aggregate",
    "get_registry",
    "seconds_per_stitch",
    "yarn_cm_per_stitch",
]
