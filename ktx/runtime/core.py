"""Application core: dispatch, view stack ownership and the input/event loop."""

from __future__ import annotations

import asyncio
import logging
from functools import partial
from typing import TYPE_CHECKING, Any

from ktx.constants.enums import MessageKind
from ktx.constants.values import (
    DELETE_CONFIRMATION_TEMPLATE,
    PROFILE_DELETED_TEMPLATE,
    PROFILE_SELECTED_TEMPLATE,
    TEST_CONNECTIONS_TEMPLATE,
)
from ktx.controllers.cloud.cli import CloudCli
from ktx.controllers.cloud.controller import CloudImportController
from ktx.controllers.cluster.controller import ConnectivityProber
from ktx.controllers.cluster.fetchers.version_fetcher import ClusterClient
from ktx.controllers.kubeconfig.store import KubeconfigStore
from ktx.errors import KtxError
from ktx.keyboard.navigation import FILTER_DELETE_KEY, FILTER_EXIT_KEYS
from ktx.models.events.events import (
    ConnectivityResult,
    DeleteProfile,
    DeleteProfileConfirm,
    DialogConfirm,
    DialogReject,
    EnterFilterMode,
    Event,
    Exit,
    ExitFilterMode,
    InputEvent,
    KeyInput,
    PopView,
    PushErrorMessage,
    PushInfoMessage,
    PushSuccessMessage,
    RefreshConfig,
    ResizeInput,
    SemanticEvent,
    SetProfile,
    ShowImportView,
    TestConnections,
)
from ktx.models.core.profile import Configuration
from ktx.models.state.app_settings import AppSettings
from ktx.models.state.app_state import AppState
from ktx.runtime.bus import EventBus
from ktx.runtime.view_stack import ViewStack
from ktx.views.base_view import View
from ktx.views.confirmation import ConfirmationDialogView
from ktx.views.import_navigator import ImportNavigatorView
from ktx.views.profile_list import ProfileListView

if TYPE_CHECKING:
    from ktx.runtime.renderer import RenderLoop

logger = logging.getLogger(__name__)

MESSAGE_EVENTS: dict[type[SemanticEvent], MessageKind] = {
    PushErrorMessage: MessageKind.ERROR,
    PushInfoMessage: MessageKind.INFO,
    PushSuccessMessage: MessageKind.SUCCESS,
}


class KtxCore:
    """Owns the shared state, the view stack and the event bus.

    Every event is dispatched with the state lock held. Writes to the
    kubeconfig file additionally take the write guard, so they never overlap
    with a cloud import running in the background.
    """

    def __init__(
        self,
        state: AppState,
        store: KubeconfigStore,
        prober: ConnectivityProber,
        importer: CloudImportController,
        bus: EventBus,
    ) -> None:
        self.state = state
        self.store = store
        self.prober = prober
        self.importer = importer
        self.bus = bus
        self.stack = ViewStack()
        self._started = False

    @classmethod
    def build(
        cls,
        store: KubeconfigStore,
        configuration: Configuration,
        settings: AppSettings | None = None,
    ) -> KtxCore:
        """Wire a core, its bus and its controllers from settings."""
        settings = settings or AppSettings()
        bus = EventBus()
        prober = ConnectivityProber(
            bus,
            partial(ClusterClient.build, request_timeout=settings.probe_request_timeout),
            max_concurrent=settings.probe_max_concurrent,
            spawn_delay=settings.probe_spawn_delay_seconds,
        )
        importer = CloudImportController(
            bus,
            CloudCli(settings.cloud_cli_timeout_seconds, kubeconfig_path=str(store.path)),
            settle_delay=settings.import_settle_seconds,
            batch_delay=settings.import_batch_delay_seconds,
        )
        return cls(AppState(configuration), store, prober, importer, bus)

    def start(self) -> None:
        """Push the profile list as the base view (once)."""
        if self._started:
            return
        self.stack.push(ProfileListView(self.bus))
        self._started = True

    @property
    def focused(self) -> View:
        return self.stack.top()

    # Dispatch -------------------------------------------------------------

    async def dispatch(self, event: Event) -> None:
        """Route one event through the focused view and the orchestrator.

        Recoverable errors are logged and reported on the status line.
        """
        async with self.state.lock:
            try:
                await self._dispatch(event)
            except (KtxError, OSError) as e:
                logger.warning("Handling %s failed: %s", type(event).__name__, e)
                self.bus.emit(PushErrorMessage(str(e)))

    async def _dispatch(self, event: Event) -> None:
        if isinstance(event, ResizeInput):
            self.state.terminal_size = (event.width, event.height)

        view = self.focused
        if isinstance(event, InputEvent) and self.state.is_filter_on:
            if isinstance(event, KeyInput):
                await self._edit_filter(view, event)
            return

        bubbled = await view.handle_event(event, self.state)
        if bubbled is None or isinstance(bubbled, InputEvent):
            return
        await self._handle_app_event(bubbled)

    async def _edit_filter(self, view: View, key: KeyInput) -> None:
        text = await view.get_filter()
        if key.name in FILTER_EXIT_KEYS:
            self.bus.emit(ExitFilterMode())
        elif key.name == FILTER_DELETE_KEY:
            text = text[:-1]
        elif key.is_printable:
            text += key.character or ""
        await view.update_filter(text, self.state)

    async def _handle_app_event(self, event: Event) -> None:
        state = self.state
        if isinstance(event, EnterFilterMode):
            state.is_filter_on = True
        elif isinstance(event, ExitFilterMode):
            state.is_filter_on = False
        elif isinstance(event, TestConnections):
            self.prober.probe_all(state.configuration)
            state.push_message(
                MessageKind.INFO,
                TEST_CONNECTIONS_TEMPLATE.format(count=len(state.configuration.profiles)),
            )
        elif isinstance(event, ConnectivityResult):
            state.set_connectivity(event.profile_name, event.status)
        elif isinstance(event, DeleteProfile):
            self.stack.push(
                ConfirmationDialogView(
                    self.bus,
                    DELETE_CONFIRMATION_TEMPLATE.format(name=event.name),
                    DeleteProfileConfirm(event.name),
                )
            )
        elif isinstance(event, ShowImportView):
            view = ImportNavigatorView(self.bus, self.importer, event.path)
            await view.load_options()
            self.stack.push(view)
        elif isinstance(event, (PopView, DialogConfirm, DialogReject)):
            if not self.stack.pop():
                self.bus.emit(Exit())
        elif isinstance(event, DeleteProfileConfirm):
            state.configuration = state.configuration.without_profile(event.name)
            await self._write_configuration()
            state.push_message(
                MessageKind.SUCCESS, PROFILE_DELETED_TEMPLATE.format(name=event.name)
            )
        elif isinstance(event, SetProfile):
            state.configuration = state.configuration.with_current_profile(event.name)
            await self._write_configuration()
            state.push_message(
                MessageKind.SUCCESS, PROFILE_SELECTED_TEMPLATE.format(name=event.name)
            )
        elif type(event) in MESSAGE_EVENTS:
            state.push_message(MESSAGE_EVENTS[type(event)], event.text)  # type: ignore[attr-defined]
        elif isinstance(event, RefreshConfig):
            async with state.config_lock:
                state.configuration = await self.store.load()
        else:
            logger.debug("Unhandled event %s", event)

    async def _write_configuration(self) -> None:
        """Persist the configuration under the write guard.

        On failure the in-memory change stands and the error propagates to
        :meth:`dispatch`.
        """
        async with self.state.config_lock:
            await self.store.save(self.state.configuration)

    # Input/Event loop -----------------------------------------------------

    async def run(self, inputs: asyncio.Queue[InputEvent], renderer: RenderLoop) -> None:
        """Race raw input against the bus until an Exit event arrives.

        Whichever receive loses the race stays pending for the next
        iteration, so no input or event is ever dropped.
        """
        self.start()
        renderer.request_render()
        input_task: asyncio.Task[Any] | None = None
        bus_task: asyncio.Task[Any] | None = None
        try:
            while True:
                if input_task is None:
                    input_task = asyncio.create_task(inputs.get(), name="ktx-input")
                if bus_task is None:
                    bus_task = asyncio.create_task(self.bus.receive(), name="ktx-bus")

                done, _ = await asyncio.wait(
                    {input_task, bus_task}, return_when=asyncio.FIRST_COMPLETED
                )
                exiting = False
                if input_task in done:
                    event = input_task.result()
                    input_task = None
                    await self.dispatch(event)
                if bus_task in done:
                    event = bus_task.result()
                    bus_task = None
                    if isinstance(event, Exit):
                        exiting = True
                    else:
                        await self.dispatch(event)
                renderer.request_render()
                if exiting:
                    logger.info("Exit requested")
                    break
        finally:
            for task in (input_task, bus_task):
                if task is not None and not task.done():
                    task.cancel()
            renderer.stop()
            self.bus.close()


__all__ = ["KtxCore"]
