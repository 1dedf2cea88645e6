"""
Dependency Injection Container

This module wires the feedback store, the session and the views together.
Views are created lazily and mounted on first use; ``aclose`` unmounts them
and releases the HTTP client.
"""

import logging

from feedback_tracker.domain import IFeedbackStore, ISessionProvider
from feedback_tracker.infrastructure import (
    Settings,
    get_settings,
    HttpFeedbackStore,
    create_demo_store,
    ConfiguredSessionProvider,
)
from feedback_tracker.application import (
    ManagerConsole,
    EmployeeFeedbackViewer,
    NavigationShell,
)


logger = logging.getLogger(__name__)


class Container:
    """
    Dependency Injection Container.

    Composition root of the console: every dependency is created and wired
    here, once per process.
    """

    def __init__(self, settings: Settings | None = None):
        self._settings = settings or get_settings()

        # Infrastructure layer
        self._feedback_store: IFeedbackStore | None = None
        self._session_provider: ISessionProvider | None = None

        # Application layer - views
        self._navigation: NavigationShell | None = None
        self._manager_console: ManagerConsole | None = None
        self._employee_viewer: EmployeeFeedbackViewer | None = None

    @property
    def settings(self) -> Settings:
        """Get application settings."""
        return self._settings

    @property
    def feedback_store(self) -> IFeedbackStore:
        """Get or create the feedback store."""
        if self._feedback_store is None:
            if self._settings.use_mock_store:
                self._feedback_store = create_demo_store(self._settings.current_employee_id or 1)
            else:
                self._feedback_store = HttpFeedbackStore(self._settings)
        return self._feedback_store

    @property
    def session_provider(self) -> ISessionProvider:
        """Get or create the session provider."""
        if self._session_provider is None:
            self._session_provider = ConfiguredSessionProvider(self._settings)
        return self._session_provider

    @property
    def navigation(self) -> NavigationShell:
        if self._navigation is None:
            self._navigation = NavigationShell(self.session_provider)
        return self._navigation

    @property
    def manager_console(self) -> ManagerConsole:
        if self._manager_console is None:
            self._manager_console = ManagerConsole(self.feedback_store)
        return self._manager_console

    @property
    def employee_viewer(self) -> EmployeeFeedbackViewer:
        if self._employee_viewer is None:
            self._employee_viewer = EmployeeFeedbackViewer(self.feedback_store)
        return self._employee_viewer

    def unmount_views(self) -> None:
        """Tear down every mounted view, cancelling its requests."""
        for view in (self._manager_console, self._employee_viewer):
            if view is not None and view.mounted:
                view.unmount()
                logger.info(f"Unmounted {view.name}")

    async def aclose(self) -> None:
        self.unmount_views()
        if isinstance(self._feedback_store, HttpFeedbackStore):
            await self._feedback_store.aclose()


def create_container(settings: Settings | None = None) -> Container:
    """Factory function to create a new container instance."""
    return Container(settings)
