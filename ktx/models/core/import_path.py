"""Drill-down paths through a cloud provider's resource hierarchy.

Segment layout per provider (the first segment names the provider):

- aws:   aws -> profile -> region -> cluster
- gcp:   gcp -> project -> cluster (zone as secondary id)
- azure: azure -> subscription -> cluster (resource group as secondary id)

Terminality and "listing clusters" are derived from the path length and the
provider on every call; nothing is cached on the path.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ktx.constants.enums import CloudProvider
from ktx.errors import ImportPathError


@dataclass(frozen=True)
class ImportSegment:
    """One resolved step of an import path."""

    id: str
    label: str
    secondary_id: str | None = None


@dataclass(frozen=True)
class ImportPath:
    """Immutable sequence of import segments."""

    segments: tuple[ImportSegment, ...] = ()

    TERMINAL_LENGTHS: ClassVar[dict[CloudProvider, int]] = {
        CloudProvider.AWS: 4,
        CloudProvider.GCP: 3,
        CloudProvider.AZURE: 3,
    }

    @classmethod
    def of(cls, *segments: ImportSegment | tuple) -> ImportPath:
        """Build a path from segments or ``(id, label[, secondary_id])`` tuples."""
        return cls(
            tuple(
                segment if isinstance(segment, ImportSegment) else ImportSegment(*segment)
                for segment in segments
            )
        )

    def __len__(self) -> int:
        return len(self.segments)

    @property
    def is_empty(self) -> bool:
        return not self.segments

    @property
    def provider(self) -> CloudProvider | None:
        if self.is_empty:
            return None
        try:
            return CloudProvider(self.segments[0].id)
        except ValueError:
            return None

    @property
    def is_terminal(self) -> bool:
        """True when the path resolves exactly one cluster."""
        provider = self.provider
        if provider is None:
            return False
        return len(self) == self.TERMINAL_LENGTHS[provider]

    @property
    def is_listing_clusters(self) -> bool:
        """True when the options at this path are clusters."""
        provider = self.provider
        if provider is None:
            return False
        return len(self) == self.TERMINAL_LENGTHS[provider] - 1

    def append(self, segment: ImportSegment) -> ImportPath:
        return ImportPath(self.segments + (segment,))

    @property
    def labels(self) -> list[str]:
        return [segment.label for segment in self.segments]

    def _segment_id(self, provider: CloudProvider, index: int, what: str) -> str:
        if self.provider != provider or len(self) <= index:
            raise ImportPathError(f"Import path has no {what}")
        return self.segments[index].id

    # AWS ------------------------------------------------------------------

    @property
    def aws_profile(self) -> str:
        return self._segment_id(CloudProvider.AWS, 1, "AWS profile")

    @property
    def aws_region(self) -> str:
        return self._segment_id(CloudProvider.AWS, 2, "AWS region")

    # GCP ------------------------------------------------------------------

    @property
    def gcp_project(self) -> str:
        return self._segment_id(CloudProvider.GCP, 1, "GCP project")

    @property
    def gcp_zone(self) -> str:
        if self.provider != CloudProvider.GCP or not self.is_terminal:
            raise ImportPathError("Import path has no GKE zone")
        return self.segments[-1].secondary_id or ""

    # Azure ----------------------------------------------------------------

    @property
    def azure_subscription(self) -> str:
        return self._segment_id(CloudProvider.AZURE, 1, "Azure subscription")

    @property
    def azure_resource_group(self) -> str:
        if self.provider != CloudProvider.AZURE or not self.is_terminal:
            raise ImportPathError("Import path has no Azure resource group")
        return self.segments[-1].secondary_id or ""

    # Terminal -------------------------------------------------------------

    @property
    def cluster_id(self) -> str:
        if not self.is_terminal:
            raise ImportPathError("Import path does not resolve a cluster")
        return self.segments[-1].id


__all__ = [
    "ImportPath",
    "ImportSegment",
]
