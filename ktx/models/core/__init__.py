"""Core domain models."""

from ktx.models.core.connectivity import ConnectivityStatus
from ktx.models.core.import_path import ImportPath, ImportSegment
from ktx.models.core.profile import Configuration, Profile

__all__ = [
    "Configuration",
    "ConnectivityStatus",
    "ImportPath",
    "ImportSegment",
    "Profile",
]
