from .scope import ViewScope
from .views import (
    BaseView,
    FeedbackEditor,
    ManagerConsole,
    EmployeeFeedbackViewer,
    NavigationShell,
)

__all__ = [
    "ViewScope",
    "BaseView",
    "FeedbackEditor",
    "ManagerConsole",
    "EmployeeFeedbackViewer",
    "NavigationShell",
]
