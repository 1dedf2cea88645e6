from fastapi import HTTPException

from feedback_tracker.application import (
    EmployeeFeedbackViewer,
    ManagerConsole,
    NavigationShell,
)
from feedback_tracker.container import Container


_container: Container | None = None


def set_container(container: Container) -> None:
    """Set the global container for dependency injection."""
    global _container
    _container = container


def get_container() -> Container:
    """Get the global container."""
    if _container is None:
        raise RuntimeError("Container not initialized. Call set_container() first.")
    return _container


def get_navigation() -> NavigationShell:
    """Dependency provider for the navigation shell."""
    return get_container().navigation


def _require_view(navigation: NavigationShell, view: str) -> None:
    if navigation.user is None:
        raise HTTPException(status_code=401, detail="Not signed in")
    if not navigation.can_view(view):
        raise HTTPException(status_code=403, detail=f"Your role cannot open the {view} view")


async def get_manager_console() -> ManagerConsole:
    """Dependency provider for the manager console, mounted on first use."""
    container = get_container()
    _require_view(container.navigation, "manager")
    console = container.manager_console
    if not console.mounted:
        await console.mount()
    return console


async def get_employee_viewer() -> EmployeeFeedbackViewer:
    """Dependency provider for the employee viewer, mounted on first use."""
    container = get_container()
    _require_view(container.navigation, "employee")
    viewer = container.employee_viewer
    if not viewer.mounted:
        await viewer.mount()
    return viewer
