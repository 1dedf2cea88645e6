from typing import Dict, List, Optional

from feedback_tracker.domain import CurrentUser, ISessionProvider, NavLink, Role


VIEW_ROLES: Dict[str, Role] = {
    "manager": Role.MANAGER,
    "employee": Role.EMPLOYEE,
}


class NavigationShell:
    """Role-gated navigation for the signed-in user."""

    def __init__(self, session: ISessionProvider):
        self._session = session

    @property
    def user(self) -> Optional[CurrentUser]:
        return self._session.current_user()

    def links(self) -> List[NavLink]:
        links = [NavLink(label="Home", path="/", icon="home")]
        user = self.user
        if user is None:
            return links
        if user.role == Role.MANAGER:
            links.append(NavLink(label="Manager Dashboard", path="/manager", icon="dashboard"))
        elif user.role == Role.EMPLOYEE:
            links.append(NavLink(label="Employee Dashboard", path="/employee", icon="dashboard"))
        return links

    def account_links(self) -> List[NavLink]:
        """Login/Register when signed out; signed-in users get 'Sign out' instead."""
        if self.user is not None:
            return []
        return [
            NavLink(label="Login", path="/login", icon="login"),
            NavLink(label="Register", path="/register", icon="user-plus"),
        ]

    def can_view(self, view: str) -> bool:
        user = self.user
        required = VIEW_ROLES.get(view)
        if user is None or required is None:
            return False
        return user.role == required

    def sign_out(self) -> None:
        self._session.logout()
