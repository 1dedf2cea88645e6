from .base import BaseView
from .feedback_editor import FeedbackEditor
from .manager_console import ManagerConsole
from .employee_viewer import EmployeeFeedbackViewer
from .navigation import NavigationShell

__all__ = [
    "BaseView",
    "FeedbackEditor",
    "ManagerConsole",
    "EmployeeFeedbackViewer",
    "NavigationShell",
]
