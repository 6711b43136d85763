"""Turn object detections from a photo into a completable platformer level."""

from .__about__ import __version__
from .config import BuildSettings
from .level_builder import BuildReport, build_level, build_level_with_report
from .models import Detection, DetectionResponse, Scene
from .reachability import ReachabilityError, TraversalLimits, find_violations

__all__ = [
    "__version__",
    "BuildReport",
    "BuildSettings",
    "Detection",
    "DetectionResponse",
    "ReachabilityError",
    "Scene",
    "TraversalLimits",
    "build_level",
    "build_level_with_report",
    "find_violations",
]
