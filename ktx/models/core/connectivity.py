"""Connectivity status of a profile's cluster endpoint."""

from __future__ import annotations

from dataclasses import dataclass

from ktx.constants.enums import HealthState
from ktx.constants.values import (
    STATUS_HEALTHY_TEMPLATE,
    STATUS_UNHEALTHY,
    STATUS_UNKNOWN,
)


@dataclass(frozen=True)
class ConnectivityStatus:
    """Tagged connectivity value: unknown, healthy with a version, or unhealthy."""

    state: HealthState = HealthState.UNKNOWN
    version: str = ""

    @classmethod
    def unknown(cls) -> ConnectivityStatus:
        return cls(HealthState.UNKNOWN)

    @classmethod
    def healthy(cls, version: str) -> ConnectivityStatus:
        return cls(HealthState.HEALTHY, version)

    @classmethod
    def unhealthy(cls) -> ConnectivityStatus:
        return cls(HealthState.UNHEALTHY)

    @property
    def is_healthy(self) -> bool:
        return self.state == HealthState.HEALTHY

    @property
    def label(self) -> str:
        if self.state == HealthState.HEALTHY:
            return STATUS_HEALTHY_TEMPLATE.format(version=self.version)
        if self.state == HealthState.UNHEALTHY:
            return STATUS_UNHEALTHY
        return STATUS_UNKNOWN


__all__ = ["ConnectivityStatus"]
