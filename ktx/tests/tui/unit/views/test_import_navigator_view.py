"""Unit tests for the cloud import navigator view."""

from __future__ import annotations

import asyncio

import pytest
from rich.console import Console

from ktx.constants.values import NO_IMPORT_OPTIONS
from ktx.controllers.cloud.controller import CloudImportController
from ktx.models.core.import_path import ImportPath, ImportSegment
from ktx.models.core.profile import Configuration
from ktx.models.events.events import (
    KeyInput,
    PopView,
    PushSuccessMessage,
    RefreshConfig,
    ShowImportView,
)
from ktx.models.state.app_state import AppState
from ktx.runtime.bus import EventBus
from ktx.views.import_navigator import ImportNavigatorView

AWS = ("aws", "AWS")
REGION_PATH = ImportPath.of(AWS, ("default", "default"), ("us-east-1", "us-east-1"))
ENTER = KeyInput("enter", "\r")


def _plain(renderable: object) -> str:
    console = Console(width=100, record=True, color_system=None)
    with console.capture() as capture:
        console.print(renderable)
    return capture.get()


@pytest.fixture
def state(configuration: Configuration) -> AppState:
    return AppState(configuration)


@pytest.fixture
def importer(bus: EventBus, fake_cli) -> CloudImportController:
    return CloudImportController(bus, fake_cli, settle_delay=0, batch_delay=0)


@pytest.fixture
def eks_cli(fake_cli):
    fake_cli.add(
        "aws",
        ["--profile", "default", "--output", "json", "eks", "list-clusters", "--region", "us-east-1"],
        {"clusters": ["demo", "billing"]},
    )
    for name in ("demo", "billing"):
        fake_cli.add(
            "aws",
            [
                "--region",
                "us-east-1",
                "--profile",
                "default",
                "eks",
                "update-kubeconfig",
                "--name",
                name,
            ],
            "Updated context",
        )
    return fake_cli


async def _navigator(bus: EventBus, importer: CloudImportController, path: ImportPath):
    view = ImportNavigatorView(bus, importer, path)
    await view.load_options()
    return view


@pytest.mark.unit
@pytest.mark.fast
class TestImportNavigatorLoading:
    @pytest.mark.asyncio
    async def test_root_lists_configured_providers(
        self, bus: EventBus, importer: CloudImportController, fake_cli
    ) -> None:
        fake_cli.add("aws", ["configure", "list-profiles"], "default\n")
        fake_cli.add("gcloud", ["--format", "json", "info"], {"config": {"account": "me@example.com"}})
        view = await _navigator(bus, importer, ImportPath())
        assert [o.label for o in view.view_state.options] == ["AWS", "GCP"]
        assert view.view_state.selected == 0

    @pytest.mark.asyncio
    async def test_empty_level_has_no_selection(
        self, bus: EventBus, importer: CloudImportController, fake_cli, state: AppState
    ) -> None:
        view = await _navigator(bus, importer, ImportPath())
        assert view.view_state.options == []
        assert view.view_state.selected is None
        assert NO_IMPORT_OPTIONS in _plain(view.render(state, view.view_state))


@pytest.mark.unit
@pytest.mark.fast
class TestImportNavigatorKeys:
    @pytest.mark.asyncio
    async def test_enter_descends_one_level(
        self, bus: EventBus, importer: CloudImportController, fake_cli, state: AppState, drain
    ) -> None:
        fake_cli.add("aws", ["configure", "list-profiles"], "default\nstaging\n")
        view = await _navigator(bus, importer, ImportPath.of(AWS))
        await view.handle_event(KeyInput("j", "j"), state)
        await view.handle_event(drain(bus)[0], state)
        await view.handle_event(ENTER, state)
        assert drain(bus) == [ShowImportView(ImportPath.of(AWS, ("staging", "staging")))]

    @pytest.mark.asyncio
    async def test_enter_on_cluster_imports_it(
        self, bus: EventBus, importer: CloudImportController, eks_cli, state: AppState, drain
    ) -> None:
        view = await _navigator(bus, importer, REGION_PATH)
        await view.handle_event(ENTER, state)
        assert drain(bus) == [
            PushSuccessMessage("Successfully imported demo"),
            RefreshConfig(),
        ]
        assert eks_cli.calls[-1][-1] == "demo"
        assert not state.config_lock.locked()

    @pytest.mark.asyncio
    async def test_import_all_imports_filtered_clusters(
        self, bus: EventBus, importer: CloudImportController, eks_cli, state: AppState, drain
    ) -> None:
        view = await _navigator(bus, importer, REGION_PATH)
        await view.handle_event(KeyInput("a", "a"), state)
        await asyncio.wait_for(_idle(importer), 1)
        assert drain(bus) == [
            PushSuccessMessage("Successfully imported demo"),
            RefreshConfig(),
            PushSuccessMessage("Successfully imported billing"),
            RefreshConfig(),
        ]

    @pytest.mark.asyncio
    async def test_import_all_respects_filter(
        self, bus: EventBus, importer: CloudImportController, eks_cli, state: AppState, drain
    ) -> None:
        view = await _navigator(bus, importer, REGION_PATH)
        await view.update_filter("bill", state)
        await view.handle_event(KeyInput("a", "a"), state)
        await asyncio.wait_for(_idle(importer), 1)
        assert drain(bus) == [
            PushSuccessMessage("Successfully imported billing"),
            RefreshConfig(),
        ]

    @pytest.mark.asyncio
    async def test_import_all_only_when_listing_clusters(
        self, bus: EventBus, importer: CloudImportController, fake_cli, state: AppState, drain
    ) -> None:
        fake_cli.add("aws", ["configure", "list-profiles"], "default\n")
        view = await _navigator(bus, importer, ImportPath.of(AWS))
        assert await view.handle_event(KeyInput("a", "a"), state) is None
        assert importer.active_tasks == 0
        assert drain(bus) == []

    @pytest.mark.asyncio
    async def test_escape_pops(
        self, bus: EventBus, importer: CloudImportController, state: AppState, drain
    ) -> None:
        view = await _navigator(bus, importer, ImportPath())
        await view.handle_event(KeyInput("escape", "\x1b"), state)
        assert drain(bus) == [PopView()]

    @pytest.mark.asyncio
    async def test_q_is_not_bound(
        self, bus: EventBus, importer: CloudImportController, state: AppState
    ) -> None:
        view = await _navigator(bus, importer, ImportPath())
        q = KeyInput("q", "q")
        assert await view.handle_event(q, state) is q


@pytest.mark.unit
@pytest.mark.fast
class TestImportNavigatorRender:
    @pytest.mark.asyncio
    async def test_breadcrumb_and_options(
        self, bus: EventBus, importer: CloudImportController, eks_cli, state: AppState
    ) -> None:
        view = await _navigator(bus, importer, REGION_PATH)
        text = _plain(view.render(state, view.view_state))
        assert "AWS / default / us-east-1" in text
        assert "demo" in text
        assert "billing" in text

    def test_key_help_depends_on_level(
        self, bus: EventBus, importer: CloudImportController, state: AppState
    ) -> None:
        clusters = ImportNavigatorView(bus, importer, REGION_PATH)
        regions = ImportNavigatorView(bus, importer, ImportPath.of(AWS))
        assert "a - import all" in clusters.key_help(state).plain
        assert "import all" not in regions.key_help(state).plain

    def test_options_filter_ignores_case(self, bus: EventBus, importer: CloudImportController) -> None:
        view = ImportNavigatorView(bus, importer, REGION_PATH)
        view.view_state.options = [ImportSegment("demo", "Demo"), ImportSegment("x", "other")]
        view.view_state.filter = "DEM"
        assert [o.id for o in view.view_state.filtered_options()] == ["demo"]


async def _idle(importer: CloudImportController) -> None:
    while importer.active_tasks:
        await asyncio.sleep(0.005)
