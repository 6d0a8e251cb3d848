"""Kubeconfig profile and configuration models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

CONTEXTS_KEY = "contexts"
CURRENT_CONTEXT_KEY = "current-context"


class Profile(BaseModel):
    """A named connection profile (a kubeconfig context).

    The raw context body is kept as-is so keys this tool does not know
    about survive a save.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    context: dict[str, Any] = Field(default_factory=dict)

    @property
    def cluster(self) -> str:
        return str(self.context.get("cluster") or "")

    @property
    def user(self) -> str:
        return str(self.context.get("user") or "")

    @property
    def namespace(self) -> str:
        return str(self.context.get("namespace") or "")

    def matches(self, filter_text: str) -> bool:
        """Return True when the name contains filter_text, ignoring case."""
        return filter_text.lower() in self.name.lower()

    @classmethod
    def from_named_context(cls, entry: dict[str, Any]) -> Profile:
        """Build a profile from a ``{name, context}`` kubeconfig entry."""
        return cls(
            name=str(entry.get("name") or ""),
            context=dict(entry.get("context") or {}),
        )

    def to_named_context(self) -> dict[str, Any]:
        return {"name": self.name, "context": dict(self.context)}


class Configuration(BaseModel):
    """Ordered set of profiles plus the current-profile pointer.

    Edits never happen in place: ``without_profile`` and
    ``with_current_profile`` return new configurations.
    """

    model_config = ConfigDict(frozen=True)

    path: str = ""
    profiles: tuple[Profile, ...] = ()
    current_profile: str | None = None
    document: dict[str, Any] = Field(default_factory=dict)

    @property
    def profile_names(self) -> list[str]:
        return [profile.name for profile in self.profiles]

    def get_profile(self, name: str) -> Profile | None:
        for profile in self.profiles:
            if profile.name == name:
                return profile
        return None

    def is_current(self, name: str) -> bool:
        return self.current_profile is not None and self.current_profile == name

    def filtered(self, filter_text: str) -> list[Profile]:
        """Return profiles whose name contains filter_text (case-insensitive)."""
        return [profile for profile in self.profiles if profile.matches(filter_text)]

    def without_profile(self, name: str) -> Configuration:
        """Return a copy without the named profile, order preserved.

        The current-profile pointer is cleared when it referenced the removed
        profile.
        """
        current = None if self.current_profile == name else self.current_profile
        return self.model_copy(
            update={
                "profiles": tuple(p for p in self.profiles if p.name != name),
                "current_profile": current,
            }
        )

    def with_current_profile(self, name: str) -> Configuration:
        return self.model_copy(update={"current_profile": name})

    @classmethod
    def from_document(cls, document: dict[str, Any], path: str = "") -> Configuration:
        """Build a configuration from a parsed kubeconfig document."""
        rest = {
            key: value
            for key, value in document.items()
            if key not in (CONTEXTS_KEY, CURRENT_CONTEXT_KEY)
        }
        contexts = document.get(CONTEXTS_KEY) or []
        profiles = tuple(
            Profile.from_named_context(entry)
            for entry in contexts
            if isinstance(entry, dict)
        )
        current = document.get(CURRENT_CONTEXT_KEY) or None
        return cls(
            path=path,
            profiles=profiles,
            current_profile=str(current) if current is not None else None,
            document=rest,
        )

    def to_document(self) -> dict[str, Any]:
        """Serialize back into a kubeconfig document."""
        document: dict[str, Any] = {}
        for key, value in self.document.items():
            document[key] = value
            if key == "clusters":
                # Keep the conventional kubeconfig key order.
                document[CONTEXTS_KEY] = []
                document[CURRENT_CONTEXT_KEY] = ""
        document[CONTEXTS_KEY] = [p.to_named_context() for p in self.profiles]
        document[CURRENT_CONTEXT_KEY] = self.current_profile or ""
        return document


__all__ = [
    "Configuration",
    "Profile",
]
