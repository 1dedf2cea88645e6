from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from feedback_tracker.domain import (
    CurrentUser,
    DeleteConfirmation,
    FeedbackItem,
    NavLink,
    TeamRosterEntry,
)
from feedback_tracker.application import (
    EmployeeFeedbackViewer,
    FeedbackEditor,
    ManagerConsole,
    NavigationShell,
)


class NavLinkDTO(BaseModel):
    """Data transfer object for a navigation link."""
    label: str
    path: str
    icon: Optional[str] = None

    @classmethod
    def from_domain(cls, link: NavLink) -> "NavLinkDTO":
        return cls(label=link.label, path=link.path, icon=link.icon)


class UserDTO(BaseModel):
    email: str
    role: str
    name: Optional[str] = None

    @classmethod
    def from_domain(cls, user: CurrentUser) -> "UserDTO":
        return cls(email=user.email, role=user.role.value, name=user.name)


class NavigationDTO(BaseModel):
    """Response DTO for the navigation shell."""
    links: List[NavLinkDTO]
    account_links: List[NavLinkDTO]
    user: Optional[UserDTO] = None
    can_sign_out: bool = False

    @classmethod
    def from_view(cls, nav: NavigationShell) -> "NavigationDTO":
        user = nav.user
        return cls(
            links=[NavLinkDTO.from_domain(link) for link in nav.links()],
            account_links=[NavLinkDTO.from_domain(link) for link in nav.account_links()],
            user=UserDTO.from_domain(user) if user else None,
            can_sign_out=user is not None,
        )


class EmployeeDTO(BaseModel):
    id: int
    name: str
    email: str


class SentimentCountsDTO(BaseModel):
    POSITIVE: int
    NEUTRAL: int
    NEGATIVE: int


class RosterEntryDTO(BaseModel):
    """Data transfer object for one roster row."""
    employee: EmployeeDTO
    feedback_count: int
    sentiments: SentimentCountsDTO

    @classmethod
    def from_domain(cls, entry: TeamRosterEntry) -> "RosterEntryDTO":
        return cls(
            employee=EmployeeDTO(
                id=entry.employee.id,
                name=entry.employee.name,
                email=entry.employee.email,
            ),
            feedback_count=entry.feedback_count,
            sentiments=SentimentCountsDTO(**entry.sentiments.to_dict()),
        )


class FeedbackItemDTO(BaseModel):
    """Data transfer object for a feedback item."""
    id: int
    employee_id: int
    strengths: str
    areas_to_improve: str
    sentiment: str
    sentiment_label: str
    acknowledged: bool
    status: str
    created_at: datetime

    @classmethod
    def from_domain(cls, item: FeedbackItem) -> "FeedbackItemDTO":
        return cls(
            id=item.id,
            employee_id=item.employee_id,
            strengths=item.strengths,
            areas_to_improve=item.areas_to_improve,
            sentiment=item.sentiment.value,
            sentiment_label=item.sentiment.label,
            acknowledged=item.acknowledged,
            status=item.status_label,
            created_at=item.created_at,
        )


class ConfirmationDTO(BaseModel):
    feedback_id: int
    title: str
    message: str
    confirm_label: str
    cancel_label: str

    @classmethod
    def from_domain(cls, confirmation: DeleteConfirmation) -> "ConfirmationDTO":
        return cls(
            feedback_id=confirmation.feedback_id,
            title=confirmation.title,
            message=confirmation.message,
            confirm_label=confirmation.confirm_label,
            cancel_label=confirmation.cancel_label,
        )


class EditorDTO(BaseModel):
    """State of the feedback editor modal."""
    opened: bool
    title: str
    submit_label: str
    is_editing: bool
    employee_id: Optional[int] = None
    feedback_id: Optional[int] = None
    strengths: str
    areas_to_improve: str
    sentiment: Optional[str] = None
    submitting: bool
    can_close: bool
    error: Optional[str] = None

    @classmethod
    def from_view(cls, editor: FeedbackEditor) -> "EditorDTO":
        return cls(
            opened=editor.opened,
            title=editor.title,
            submit_label=editor.submit_label,
            is_editing=editor.is_editing,
            employee_id=editor.employee.id if editor.employee else None,
            feedback_id=editor.editing.id if editor.editing else None,
            strengths=editor.strengths,
            areas_to_improve=editor.areas_to_improve,
            sentiment=editor.sentiment.value if editor.sentiment else None,
            submitting=editor.submitting,
            can_close=editor.can_close,
            error=editor.error,
        )


class EditorFieldsDTO(BaseModel):
    """Request DTO for editor field edits. Omitted fields stay unchanged."""
    strengths: Optional[str] = None
    areas_to_improve: Optional[str] = None
    sentiment: Optional[str] = None


class ManagerConsoleDTO(BaseModel):
    """Response DTO for the manager console."""
    roster: List[RosterEntryDTO]
    roster_loading: bool
    roster_version: int
    selected_employee_id: Optional[int] = None
    feedback: List[FeedbackItemDTO]
    feedback_loading: bool
    error: Optional[str] = None
    confirmation: Optional[ConfirmationDTO] = None
    editor: EditorDTO
    busy_actions: List[str]

    @classmethod
    def from_view(cls, console: ManagerConsole) -> "ManagerConsoleDTO":
        return cls(
            roster=[RosterEntryDTO.from_domain(e) for e in console.roster],
            roster_loading=console.roster_loading,
            roster_version=console.roster_version,
            selected_employee_id=console.selected.employee.id if console.selected else None,
            feedback=[FeedbackItemDTO.from_domain(f) for f in console.feedback],
            feedback_loading=console.feedback_loading,
            error=console.error,
            confirmation=ConfirmationDTO.from_domain(console.confirmation) if console.confirmation else None,
            editor=EditorDTO.from_view(console.editor),
            busy_actions=sorted(console.busy_actions),
        )


class EmployeeViewerDTO(BaseModel):
    """Response DTO for the employee feedback viewer."""
    timeline: List[FeedbackItemDTO]
    loading: bool
    pending_count: int
    error: Optional[str] = None
    busy_actions: List[str]

    @classmethod
    def from_view(cls, viewer: EmployeeFeedbackViewer) -> "EmployeeViewerDTO":
        return cls(
            timeline=[FeedbackItemDTO.from_domain(i) for i in viewer.timeline],
            loading=viewer.loading,
            pending_count=viewer.pending_count,
            error=viewer.error,
            busy_actions=sorted(viewer.busy_actions),
        )


class ActionResultDTO(BaseModel):
    """Outcome of a user action."""
    ok: bool
    message: Optional[str] = None
