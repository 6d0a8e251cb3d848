"""Shared fixtures for the ktx test suite."""

from __future__ import annotations

import asyncio
import json
import os
import stat
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml

from ktx.controllers.cloud.cli import CloudCli
from ktx.controllers.cloud.controller import CloudImportController
from ktx.controllers.cluster.controller import ConnectivityProber
from ktx.controllers.kubeconfig.store import KubeconfigStore
from ktx.errors import CloudCliError, ClusterClientError
from ktx.models.core.profile import Configuration
from ktx.models.events.events import SemanticEvent
from ktx.models.state.app_state import AppState
from ktx.runtime.bus import EventBus
from ktx.runtime.core import KtxCore

# =============================================================================
# Kubeconfig fixtures
# =============================================================================


def _kubeconfig_document() -> dict[str, Any]:
    return {
        "apiVersion": "v1",
        "kind": "Config",
        "preferences": {},
        "clusters": [
            {"name": name, "cluster": {"server": f"https://{name}.example.com"}}
            for name in ("dev-cluster", "prod-cluster", "stage-cluster")
        ],
        "contexts": [
            {"name": "dev", "context": {"cluster": "dev-cluster", "user": "dev-user"}},
            {
                "name": "prod",
                "context": {
                    "cluster": "prod-cluster",
                    "user": "prod-user",
                    "namespace": "payments",
                },
            },
            {"name": "stage", "context": {"cluster": "stage-cluster", "user": "stage-user"}},
        ],
        "current-context": "dev",
        "users": [
            {"name": name, "user": {"token": f"{name}-token"}}
            for name in ("dev-user", "prod-user", "stage-user")
        ],
    }


@pytest.fixture
def kubeconfig_document() -> dict[str, Any]:
    """A three-context kubeconfig document (dev is current)."""
    return _kubeconfig_document()


@pytest.fixture
def kubeconfig_path(tmp_path: Path, kubeconfig_document: dict[str, Any]) -> Path:
    path = tmp_path / "config"
    path.write_text(yaml.safe_dump(kubeconfig_document, sort_keys=False), encoding="utf-8")
    return path


@pytest.fixture
def store(kubeconfig_path: Path) -> KubeconfigStore:
    return KubeconfigStore(kubeconfig_path)


@pytest.fixture
def configuration(store: KubeconfigStore) -> Configuration:
    return store.load_sync()


# =============================================================================
# Fake collaborators
# =============================================================================


class FakeCloudCli(CloudCli):
    """CloudCli answering from a table of canned outputs.

    Unknown commands fail like a missing program would.
    """

    def __init__(self) -> None:
        super().__init__(timeout=1)
        self.responses: dict[tuple[str, ...], Any] = {}
        self.calls: list[tuple[str, ...]] = []

    def add(self, program: str, args: list[str], output: Any) -> None:
        """Register output for a command; dicts and lists are JSON-encoded."""
        if isinstance(output, (dict, list)):
            output = json.dumps(output)
        self.responses[(program, *args)] = output

    def fail(self, program: str, args: list[str], message: str = "boom") -> None:
        self.responses[(program, *args)] = CloudCliError(
            program, message, returncode=1, stderr=message
        )

    async def run(self, program: str, args: Any) -> str:
        command = (program, *args)
        self.calls.append(command)
        response = self.responses.get(command)
        if response is None:
            raise CloudCliError(program, f"{program}: command not found")
        if isinstance(response, Exception):
            raise response
        return response


class FakeClusterClient:
    def __init__(self, factory: FakeClientFactory, name: str) -> None:
        self._factory = factory
        self._name = name

    async def fetch_version(self) -> str:
        factory = self._factory
        factory.in_flight += 1
        factory.max_in_flight = max(factory.max_in_flight, factory.in_flight)
        try:
            await asyncio.sleep(factory.latency)
            result = factory.versions.get(self._name)
            if result is None:
                raise ClusterClientError(f"{self._name}: connection refused")
            return result
        finally:
            factory.in_flight -= 1


class FakeClientFactory:
    """Client factory recording how many probes run at the same time."""

    def __init__(self, versions: dict[str, str] | None = None, latency: float = 0.01) -> None:
        self.versions = versions or {}
        self.latency = latency
        self.in_flight = 0
        self.max_in_flight = 0
        self.built: list[str] = []

    def __call__(self, configuration: Configuration, name: str) -> FakeClusterClient:
        self.built.append(name)
        return FakeClusterClient(self, name)


@pytest.fixture
def fake_cli() -> FakeCloudCli:
    return FakeCloudCli()


@pytest.fixture
def client_factory() -> FakeClientFactory:
    return FakeClientFactory({"dev": "1.27", "stage": "1.29"})


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def drain() -> Callable[[EventBus], list[SemanticEvent]]:
    """Return a helper collecting every event currently queued on a bus."""

    def _drain(event_bus: EventBus) -> list[SemanticEvent]:
        events = []
        while (event := event_bus.receive_nowait()) is not None:
            events.append(event)
        return events

    return _drain


@pytest.fixture
def core(
    store: KubeconfigStore,
    configuration: Configuration,
    bus: EventBus,
    fake_cli: FakeCloudCli,
    client_factory: FakeClientFactory,
) -> KtxCore:
    """A started core wired to fakes, with all delays set to zero."""
    prober = ConnectivityProber(bus, client_factory, max_concurrent=10, spawn_delay=0)
    importer = CloudImportController(bus, fake_cli, settle_delay=0, batch_delay=0)
    ktx_core = KtxCore(AppState(configuration), store, prober, importer, bus)
    ktx_core.start()
    return ktx_core


# =============================================================================
# Stand-in executables
# =============================================================================


@pytest.fixture
def install_program(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Callable[[str, str], Path]:
    """Return a helper placing a Python script on PATH under a program name.

    The directory is prepended to PATH, so installed names shadow any real
    ``aws``, ``gcloud``, ``az`` or ``kubectl``.
    """
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")

    def _install(name: str, source: str) -> Path:
        script = bin_dir / name
        script.write_text(f"#!{sys.executable}\n{source}\n", encoding="utf-8")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return _install
