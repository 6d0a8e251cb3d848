"""Unit tests for KtxCore dispatch, write discipline and the input/event loop."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from pathlib import Path

import pytest
import yaml

from ktx.constants.enums import HealthState, MessageKind
from ktx.controllers.cloud.cli import CloudCli
from ktx.controllers.cloud.controller import CloudImportController
from ktx.controllers.kubeconfig.store import KubeconfigStore
from ktx.errors import ConfigSaveError
from ktx.models.core.import_path import ImportPath
from ktx.models.events.events import (
    DeleteProfile,
    Event,
    Exit,
    KeyInput,
    PushErrorMessage,
    RefreshConfig,
    ResizeInput,
    SemanticEvent,
    SetProfile,
    ShowImportView,
    TestConnections as ConnectivityCheck,
)
from ktx.runtime.core import KtxCore
from ktx.runtime.renderer import RenderLoop
from ktx.views.confirmation import ConfirmationDialogView
from ktx.views.import_navigator import ImportNavigatorView
from ktx.views.profile_list import ProfileListView


def key(name: str, character: str | None = None) -> KeyInput:
    if character is None and len(name) == 1:
        character = name
    return KeyInput(name, character)


async def settle(core: KtxCore) -> list[SemanticEvent]:
    """Dispatch queued bus events until the bus is empty or Exit shows up."""
    seen = []
    while (event := core.bus.receive_nowait()) is not None:
        seen.append(event)
        if isinstance(event, Exit):
            break
        await core.dispatch(event)
    return seen


async def press(core: KtxCore, *events: Event) -> list[SemanticEvent]:
    seen = []
    for event in events:
        await core.dispatch(event)
        seen.extend(await settle(core))
    return seen


async def wait_until(predicate: Callable[[], bool], timeout: float = 1.0) -> None:
    async def _poll() -> None:
        while not predicate():
            await asyncio.sleep(0.005)

    await asyncio.wait_for(_poll(), timeout)


# =============================================================================
# Start and navigation
# =============================================================================


@pytest.mark.unit
@pytest.mark.fast
class TestCoreStart:
    """The profile list is the one and only base view."""

    def test_start_pushes_profile_list_once(self, core: KtxCore) -> None:
        core.start()
        assert len(core.stack) == 1
        assert isinstance(core.focused, ProfileListView)

    @pytest.mark.asyncio
    async def test_navigation_round_trips_through_bus(self, core: KtxCore) -> None:
        await press(core, key("j"), key("j"), key("j"))
        assert core.focused.view_state.selected == 2

    @pytest.mark.asyncio
    async def test_unhandled_input_is_dropped(self, core: KtxCore) -> None:
        assert await press(core, key("x")) == []

    @pytest.mark.asyncio
    async def test_resize_updates_terminal_size(self, core: KtxCore) -> None:
        await core.dispatch(ResizeInput(120, 50))
        assert core.state.terminal_size == (120, 50)


# =============================================================================
# Profile edits
# =============================================================================


@pytest.mark.unit
@pytest.mark.fast
class TestProfileEdits:
    """Switching and deleting profiles persist under the write guard."""

    @pytest.mark.asyncio
    async def test_enter_switches_and_persists(self, core: KtxCore, store: KubeconfigStore) -> None:
        seen = await press(core, key("j"), key("enter", "\r"))
        assert SetProfile("prod") in seen
        assert core.state.configuration.current_profile == "prod"
        assert store.load_sync().current_profile == "prod"
        assert core.state.last_message is not None
        assert core.state.last_message.kind is MessageKind.SUCCESS

    @pytest.mark.asyncio
    async def test_delete_asks_then_deletes(self, core: KtxCore, store: KubeconfigStore) -> None:
        await press(core, key("j"), key("d"))
        assert isinstance(core.focused, ConfirmationDialogView)
        assert "prod" in core.focused.content

        await press(core, key("y"))
        assert len(core.stack) == 1
        assert core.state.configuration.profile_names == ["dev", "stage"]
        assert store.load_sync().profile_names == ["dev", "stage"]

    @pytest.mark.asyncio
    async def test_deleting_current_profile_clears_current(
        self, core: KtxCore, store: KubeconfigStore
    ) -> None:
        await press(core, key("d"), key("y"))
        assert store.load_sync().current_profile is None

    @pytest.mark.asyncio
    async def test_reject_keeps_profile(self, core: KtxCore, store: KubeconfigStore) -> None:
        await press(core, key("d"), key("n"))
        assert len(core.stack) == 1
        assert store.load_sync().profile_names == ["dev", "prod", "stage"]

    @pytest.mark.asyncio
    async def test_save_failure_is_reported_and_change_stands(
        self, core: KtxCore, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        async def failing_save(configuration: object) -> None:
            raise ConfigSaveError("disk full")

        monkeypatch.setattr(core.store, "save", failing_save)
        seen = await press(core, SetProfile("stage"))
        assert PushErrorMessage("disk full") in seen
        assert core.state.configuration.current_profile == "stage"
        assert core.state.last_message is not None
        assert core.state.last_message.kind is MessageKind.ERROR

    @pytest.mark.asyncio
    async def test_write_waits_for_write_guard(self, core: KtxCore, store: KubeconfigStore) -> None:
        async with core.state.config_lock:
            task = asyncio.create_task(core.dispatch(SetProfile("stage")))
            await asyncio.sleep(0.02)
            assert store.load_sync().current_profile == "dev"
        await asyncio.wait_for(task, 1)
        assert store.load_sync().current_profile == "stage"

    @pytest.mark.asyncio
    async def test_delete_event_pushes_dialog(self, core: KtxCore) -> None:
        await core.dispatch(DeleteProfile("stage"))
        assert isinstance(core.focused, ConfirmationDialogView)


# =============================================================================
# Filter mode
# =============================================================================


@pytest.mark.unit
@pytest.mark.fast
class TestFilterMode:
    """While filtering, key input edits the focused view's filter."""

    @pytest.mark.asyncio
    async def test_filter_editing(self, core: KtxCore) -> None:
        await press(core, key("slash", "/"))
        assert core.state.is_filter_on

        await press(core, key("p"), key("r"), key("q"))
        assert await core.focused.get_filter() == "prq"
        assert len(core.stack) == 1

        await press(core, key("backspace", "\x7f"))
        assert await core.focused.get_filter() == "pr"

        await press(core, key("enter", "\r"))
        assert not core.state.is_filter_on
        assert await core.focused.get_filter() == "pr"

    @pytest.mark.asyncio
    async def test_escape_leaves_filter_mode(self, core: KtxCore) -> None:
        await press(core, key("slash", "/"), key("escape", "\x1b"))
        assert not core.state.is_filter_on

    @pytest.mark.asyncio
    async def test_filter_reclamps_selection(self, core: KtxCore) -> None:
        await press(core, key("G"))
        assert core.focused.view_state.selected == 2
        await press(core, key("slash", "/"), key("d"), key("e"), key("v"))
        assert core.focused.view_state.selected == 0

    @pytest.mark.asyncio
    async def test_filter_does_not_touch_configuration(self, core: KtxCore) -> None:
        await press(core, key("slash", "/"), key("z"), key("enter", "\r"))
        assert core.state.configuration.profile_names == ["dev", "prod", "stage"]

    @pytest.mark.asyncio
    async def test_resize_is_ignored_by_filter(self, core: KtxCore) -> None:
        await press(core, key("slash", "/"), ResizeInput(100, 40))
        assert await core.focused.get_filter() == ""
        assert core.state.terminal_size == (100, 40)


# =============================================================================
# Stack and other app events
# =============================================================================


@pytest.mark.unit
@pytest.mark.fast
class TestAppEvents:
    """Orchestrator handling of bubbled semantic events."""

    @pytest.mark.asyncio
    async def test_escape_on_base_view_exits(self, core: KtxCore) -> None:
        seen = await press(core, key("escape", "\x1b"))
        assert isinstance(seen[-1], Exit)
        assert len(core.stack) == 1

    @pytest.mark.asyncio
    async def test_show_import_view_pushes_loaded_view(self, core: KtxCore, fake_cli) -> None:
        fake_cli.add("aws", ["configure", "list-profiles"], "default\nprod\n")
        await core.dispatch(ShowImportView(ImportPath.of(("aws", "AWS"))))
        assert isinstance(core.focused, ImportNavigatorView)
        assert [o.id for o in core.focused.view_state.options] == ["default", "prod"]

    @pytest.mark.asyncio
    async def test_failed_import_load_does_not_push(self, core: KtxCore) -> None:
        await core.dispatch(ShowImportView(ImportPath.of(("aws", "AWS"))))
        assert len(core.stack) == 1
        error = core.bus.receive_nowait()
        assert isinstance(error, PushErrorMessage)
        assert "aws" in error.text

    @pytest.mark.asyncio
    async def test_test_connections_records_results(self, core: KtxCore) -> None:
        await core.dispatch(ConnectivityCheck())
        assert core.state.last_message is not None
        assert core.state.last_message.kind is MessageKind.INFO
        await wait_until(lambda: core.prober.active_tasks == 0)
        await settle(core)
        assert core.state.connectivity_for("dev").version == "1.27"
        assert core.state.connectivity_for("prod").state is HealthState.UNHEALTHY
        assert core.state.connectivity_for("stage").state is HealthState.HEALTHY

    @pytest.mark.asyncio
    async def test_refresh_reloads_from_store(
        self, core: KtxCore, kubeconfig_path: Path
    ) -> None:
        document = yaml.safe_load(kubeconfig_path.read_text())
        document["contexts"].append({"name": "qa", "context": {"cluster": "dev-cluster"}})
        kubeconfig_path.write_text(yaml.safe_dump(document))
        await core.dispatch(RefreshConfig())
        assert core.state.configuration.profile_names == ["dev", "prod", "stage", "qa"]


@pytest.mark.unit
class TestImportWithRealCli:
    """ShowImportView against provider programs found on PATH."""

    @pytest.mark.asyncio
    async def test_undecodable_cli_output_is_replaced(
        self, core: KtxCore, install_program
    ) -> None:
        install_program("aws", r"import sys; sys.stdout.buffer.write(b'prof\xffile\n')")
        install_program("gcloud", "import sys; sys.exit(1)")
        install_program("az", "import sys; sys.exit(1)")
        core.importer = CloudImportController(
            core.bus, CloudCli(timeout=10), settle_delay=0, batch_delay=0
        )

        await core.dispatch(ShowImportView(ImportPath()))
        assert isinstance(core.focused, ImportNavigatorView)
        assert [o.id for o in core.focused.view_state.options] == ["aws"]

        await core.dispatch(ShowImportView(ImportPath.of(("aws", "AWS"))))
        assert [o.id for o in core.focused.view_state.options] == ["prof\ufffdile"]
        assert core.bus.empty()


# =============================================================================
# Input/Event loop
# =============================================================================


@pytest.mark.unit
@pytest.mark.fast
class TestEventLoop:
    """The loop races input against the bus and stops on Exit."""

    @pytest.mark.asyncio
    async def test_quit_key_ends_loop(self, core: KtxCore) -> None:
        frames = []
        renderer = RenderLoop(core, frames.append)
        inputs: asyncio.Queue = asyncio.Queue()
        inputs.put_nowait(key("q"))
        await asyncio.wait_for(core.run(inputs, renderer), 1)
        assert core.bus.closed
        await asyncio.wait_for(renderer.run(), 1)
        assert len(frames) == 1

    @pytest.mark.asyncio
    async def test_bus_and_input_both_processed(self, core: KtxCore) -> None:
        renderer = RenderLoop(core, lambda frame: None)
        inputs: asyncio.Queue = asyncio.Queue()
        core.bus.emit(SetProfile("stage"))
        inputs.put_nowait(key("j"))
        inputs.put_nowait(key("q"))
        await asyncio.wait_for(core.run(inputs, renderer), 1)
        assert core.state.configuration.current_profile == "stage"
        assert core.focused.view_state.selected == 1
