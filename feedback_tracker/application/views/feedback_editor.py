import logging
from typing import Awaitable, Callable, Optional, Union

from feedback_tracker.domain import (
    ClientValidationError,
    Employee,
    FeedbackClientError,
    FeedbackDraft,
    FeedbackItem,
    IFeedbackStore,
    Sentiment,
    ServerError,
    ViewClosedError,
)
from feedback_tracker.application.views.base import BaseView


logger = logging.getLogger(__name__)

_UNSET = object()

SUBMIT = "submit"


class FeedbackEditor(BaseView):
    """Modal form producing a validated feedback payload for create or update.

    Mode follows ``editing``: with an item the editor updates it, without one
    it creates a new item for ``employee``.
    """

    name = "feedback-editor"

    VALIDATION_MESSAGE = "Please fill in all fields"

    def __init__(
        self,
        store: IFeedbackStore,
        on_success: Optional[Callable[[], Awaitable[None]]] = None,
    ):
        super().__init__()
        self._store = store
        self.on_success = on_success
        self.opened = False
        self.employee: Optional[Employee] = None
        self.editing: Optional[FeedbackItem] = None
        self.strengths = ""
        self.areas_to_improve = ""
        self.sentiment: Optional[Sentiment] = None

    @property
    def is_editing(self) -> bool:
        return self.editing is not None

    @property
    def submitting(self) -> bool:
        return self.is_busy(SUBMIT)

    @property
    def can_close(self) -> bool:
        return not self.submitting

    @property
    def title(self) -> str:
        name = self.employee.name if self.employee else ""
        return f"{'Edit' if self.is_editing else 'Give'} Feedback - {name}"

    @property
    def submit_label(self) -> str:
        return "Update Feedback" if self.is_editing else "Submit Feedback"

    def open(self, employee: Employee, editing: Optional[FeedbackItem] = None) -> bool:
        """Open the modal, resetting every field from ``editing`` or to empty."""
        if self.submitting:
            logger.debug("Editor is submitting, ignoring open request")
            return False

        self.employee = employee
        self.editing = editing
        if editing is not None:
            self.strengths = editing.strengths.strip()
            self.areas_to_improve = editing.areas_to_improve.strip()
            self.sentiment = editing.sentiment
        else:
            self.strengths = ""
            self.areas_to_improve = ""
            self.sentiment = None
        self.error = None
        self.opened = True
        self._open()
        return True

    def update(
        self,
        strengths: Optional[str] = None,
        areas_to_improve: Optional[str] = None,
        sentiment: Union[Sentiment, str, None, object] = _UNSET,
    ) -> bool:
        """Apply field edits. Inputs are disabled while submitting."""
        if self.submitting:
            return False
        if strengths is not None:
            self.strengths = strengths
        if areas_to_improve is not None:
            self.areas_to_improve = areas_to_improve
        if sentiment is not _UNSET:
            self.sentiment = Sentiment.parse(sentiment) if sentiment is not None else None
        return True

    def unmount(self) -> None:
        """Tear the modal down with its view; reopening starts a fresh scope."""
        super().unmount()
        self.opened = False

    def close(self) -> bool:
        """Close the modal. No-op while a submission is in flight."""
        if self.submitting:
            logger.debug("Editor is submitting, ignoring close request")
            return False
        self.opened = False
        return True

    def validate(self) -> FeedbackDraft:
        strengths = self.strengths.strip()
        areas = self.areas_to_improve.strip()
        if self.employee is None or not strengths or not areas or self.sentiment is None:
            raise ClientValidationError(self.VALIDATION_MESSAGE)
        return FeedbackDraft(
            employee_id=self.employee.id,
            strengths=strengths,
            areas_to_improve=areas,
            sentiment=self.sentiment,
        )

    async def submit(self) -> bool:
        """
        Validate and send the form.

        Returns:
            True when the store confirmed the create/update and the success
            callback ran; False otherwise, with ``error`` describing why.
        """
        if not self.opened or self.submitting:
            return False

        try:
            draft = self.validate()
        except ClientValidationError as e:
            self.error = str(e)
            logger.info(f"Feedback form rejected: {e}")
            return False

        self._begin(SUBMIT)
        self.error = None
        try:
            if self.editing is not None:
                await self._call(self._store.update_feedback(self.editing.id, draft))
            else:
                await self._call(self._store.create_feedback(draft))
        except ViewClosedError:
            logger.debug("Editor closed before the submission settled")
            return False
        except FeedbackClientError as e:
            logger.error(f"Error submitting feedback: {e}")
            message = e.message if isinstance(e, ServerError) else None
            self.error = message or f"Failed to {'update' if self.is_editing else 'create'} feedback"
            return False
        finally:
            self._end(SUBMIT)

        if self.on_success is not None:
            await self.on_success()
        return True
