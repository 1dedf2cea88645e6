from .api import router
from .schemas import (
    NavigationDTO,
    ManagerConsoleDTO,
    EditorDTO,
    EditorFieldsDTO,
    EmployeeViewerDTO,
    ActionResultDTO,
)
from .dependencies import set_container, get_container

__all__ = [
    "router",
    "NavigationDTO",
    "ManagerConsoleDTO",
    "EditorDTO",
    "EditorFieldsDTO",
    "EmployeeViewerDTO",
    "ActionResultDTO",
    "set_container",
    "get_container",
]
