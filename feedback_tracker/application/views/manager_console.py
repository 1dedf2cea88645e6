import asyncio
import logging
from typing import List, Optional

from feedback_tracker.domain import (
    DeleteConfirmation,
    FeedbackClientError,
    FeedbackItem,
    IFeedbackStore,
    TeamRosterEntry,
    ViewClosedError,
)
from feedback_tracker.application.views.base import BaseView
from feedback_tracker.application.views.feedback_editor import FeedbackEditor


logger = logging.getLogger(__name__)


class ManagerConsole(BaseView):
    """Roster of direct reports plus the feedback of the selected employee.

    Mutations never patch the roster locally: after a create, update or
    delete the console bumps ``roster_version`` and refetches, so the
    aggregates always come from the store.
    """

    name = "manager-console"

    def __init__(self, store: IFeedbackStore, editor: Optional[FeedbackEditor] = None):
        super().__init__()
        self._store = store
        self.roster: List[TeamRosterEntry] = []
        self.roster_loading = False
        self.roster_version = 0
        self.selected: Optional[TeamRosterEntry] = None
        self.feedback: List[FeedbackItem] = []
        self.feedback_loading = False
        self.confirmation: Optional[DeleteConfirmation] = None
        self._roster_ticket = 0
        self._feedback_ticket = 0
        self.editor = editor or FeedbackEditor(store)
        self.editor.on_success = self.handle_feedback_success

    async def mount(self) -> None:
        self._open()
        await self.load_roster()

    def unmount(self) -> None:
        super().unmount()
        self.editor.unmount()

    def find_entry(self, employee_id: int) -> Optional[TeamRosterEntry]:
        return next((e for e in self.roster if e.employee.id == employee_id), None)

    def find_feedback(self, feedback_id: int) -> Optional[FeedbackItem]:
        return next((f for f in self.feedback if f.id == feedback_id), None)

    async def load_roster(self, reset_error: bool = True) -> bool:
        """Fetch the roster. Returns False when it failed or was abandoned."""
        self._roster_ticket += 1
        ticket = self._roster_ticket
        self.roster_loading = True
        if reset_error:
            self.error = None
        try:
            try:
                roster = await self._call(self._store.fetch_roster())
            except ViewClosedError:
                return False
            except FeedbackClientError as e:
                self.error = "Failed to load team data"
                logger.error(f"Error fetching team: {e}")
                return False

            self.roster = roster
            if self.selected is not None:
                # Keep the selection pointing at the fresh aggregates.
                self.selected = self.find_entry(self.selected.employee.id) or self.selected
            return True
        finally:
            # Only the latest fetch owns the spinner.
            if ticket == self._roster_ticket:
                self.roster_loading = False

    async def invalidate_roster(self, reset_error: bool = True) -> bool:
        """Mark the roster stale after a mutation and reload it."""
        self.roster_version += 1
        logger.debug(f"Roster invalidated (version {self.roster_version})")
        return await self.load_roster(reset_error=reset_error)

    async def select_employee(self, entry: TeamRosterEntry) -> bool:
        self.selected = entry
        return await self._load_feedback(entry)

    async def open_create(self, entry: TeamRosterEntry) -> bool:
        """Open an empty editor for ``entry``, selecting it if needed."""
        opened = self.editor.open(entry.employee)
        if self.selected is None or self.selected.employee.id != entry.employee.id:
            await self.select_employee(entry)
        return opened

    def open_edit(self, item: FeedbackItem) -> bool:
        """Open the editor pre-filled from an item of the selected employee."""
        if self.selected is None:
            logger.warning(f"Cannot edit feedback {item.id} without a selected employee")
            return False
        return self.editor.open(self.selected.employee, editing=item)

    def request_delete(self, feedback_id: int) -> DeleteConfirmation:
        """Ask for confirmation. Nothing is sent until ``confirm_delete``."""
        self.confirmation = DeleteConfirmation(feedback_id=feedback_id)
        return self.confirmation

    def cancel_delete(self) -> None:
        self.confirmation = None

    async def confirm_delete(self) -> bool:
        confirmation = self.confirmation
        if confirmation is None:
            return False
        action = f"delete:{confirmation.feedback_id}"
        if not self._begin(action):
            return False

        self.confirmation = None
        self.error = None
        try:
            try:
                await self._call(self._store.delete_feedback(confirmation.feedback_id))
            except ViewClosedError:
                return False
            except FeedbackClientError as e:
                self.error = "Failed to delete feedback"
                logger.error(f"Error deleting feedback {confirmation.feedback_id}: {e}")
                return False

            logger.info(f"Feedback {confirmation.feedback_id} deleted")
            await self._refresh_after_mutation()
            return True
        finally:
            self._end(action)

    async def handle_feedback_success(self) -> None:
        """Success callback of the editor."""
        self.editor.close()
        self.error = None
        await self._refresh_after_mutation()

    async def _refresh_after_mutation(self) -> None:
        # Follow-up fetches keep any error they raise; the mutation itself
        # already succeeded.
        await asyncio.gather(
            self.invalidate_roster(reset_error=False),
            self._refresh_selected(),
        )

    async def _refresh_selected(self) -> bool:
        if self.selected is None:
            return True
        return await self._load_feedback(self.selected, reset_error=False)

    async def _load_feedback(self, entry: TeamRosterEntry, reset_error: bool = True) -> bool:
        employee_id = entry.employee.id
        self._feedback_ticket += 1
        ticket = self._feedback_ticket
        self.feedback_loading = True
        if reset_error:
            self.error = None
        try:
            try:
                items = await self._call(self._store.fetch_feedback(employee_id))
            except ViewClosedError:
                return False
            except FeedbackClientError as e:
                self.error = "Failed to load feedback"
                logger.error(f"Error fetching feedback for employee {employee_id}: {e}")
                return False

            if self.selected is None or self.selected.employee.id != employee_id:
                logger.debug(f"Dropping feedback of employee {employee_id}, no longer selected")
                return False
            self.feedback = items
            return True
        finally:
            if ticket == self._feedback_ticket:
                self.feedback_loading = False
