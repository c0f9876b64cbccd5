"""profile — curve builder and profile sampler public API."""

from amigurumi.profile.builder import (
    NotMonotonicError,
    OpenPoleError,
    ProfileError,
    TooFewPointsError,
    build_profile,
    check_anchors,
)
from amigurumi.profile.sampler import radius_at_height

__all__ = [
    "ProfileError",
    "TooFewPointsError",
    "NotMonotonicError",
    "OpenPoleError",
    "build_profile",
    "check_anchors",
    "radius_at_height",
]
