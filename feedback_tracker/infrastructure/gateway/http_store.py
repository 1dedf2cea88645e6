import logging
from typing import Any, List, Optional

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from feedback_tracker.domain import (
    FeedbackDraft,
    FeedbackItem,
    IFeedbackStore,
    ServerError,
    TeamRosterEntry,
    TransportError,
)
from feedback_tracker.infrastructure.config import Settings
from feedback_tracker.infrastructure.gateway.schemas import (
    FeedbackItemWire,
    RosterResponseWire,
    TimelineResponseWire,
)


logger = logging.getLogger(__name__)

_feedback_list = TypeAdapter(List[FeedbackItemWire])


class HttpFeedbackStore(IFeedbackStore):
    """httpx-based implementation of the remote feedback store."""

    def __init__(self, settings: Settings, client: Optional[httpx.AsyncClient] = None):
        self._settings = settings
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=settings.api_base_url,
            headers=self._auth_headers(settings),
            timeout=settings.request_timeout_seconds,
        )

    @staticmethod
    def _auth_headers(settings: Settings) -> dict:
        if not settings.api_token:
            return {}
        return {"Authorization": f"Bearer {settings.api_token}"}

    async def aclose(self) -> None:
        """Close the underlying client if this store created it."""
        if self._owns_client:
            await self._client.aclose()

    async def fetch_employee_timeline(self) -> List[FeedbackItem]:
        data = await self._request("GET", "/employee-dashboard")
        body = self._parse(TimelineResponseWire, data)
        return [item.to_domain() for item in body.timeline]

    async def acknowledge(self, feedback_id: int) -> None:
        await self._request("POST", f"/acknowledge/{feedback_id}")
        logger.info(f"Feedback {feedback_id} acknowledged")

    async def fetch_roster(self) -> List[TeamRosterEntry]:
        data = await self._request("GET", "/dashboard")
        body = self._parse(RosterResponseWire, data)
        return [entry.to_domain() for entry in body.team]

    async def fetch_feedback(self, employee_id: int) -> List[FeedbackItem]:
        data = await self._request("GET", f"/feedback/{employee_id}")
        try:
            items = _feedback_list.validate_python(data)
        except ValidationError as e:
            raise ServerError(200, f"Unexpected feedback list payload: {e.error_count()} errors") from e
        return [item.to_domain() for item in items]

    async def create_feedback(self, draft: FeedbackDraft) -> Optional[FeedbackItem]:
        data = await self._request("POST", "/feedback", json=draft.to_payload())
        logger.info(f"Feedback created for employee {draft.employee_id}")
        return self._echo(data)

    async def update_feedback(self, feedback_id: int, draft: FeedbackDraft) -> Optional[FeedbackItem]:
        data = await self._request("PUT", f"/feedback/{feedback_id}", json=draft.to_payload())
        logger.info(f"Feedback {feedback_id} updated")
        return self._echo(data)

    async def delete_feedback(self, feedback_id: int) -> None:
        await self._request("DELETE", f"/feedback/{feedback_id}")
        logger.info(f"Feedback {feedback_id} deleted")

    async def _request(self, method: str, path: str, json: Optional[dict] = None) -> Any:
        """Issue a request and return the decoded JSON body (None when empty).

        Raises TransportError when no response arrives and ServerError for any
        non-2xx status.
        """
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise TransportError(f"{method} {path} failed: {e}") from e

        if response.is_error:
            message = self._error_message(response)
            logger.warning(f"{method} {path} returned {response.status_code}: {message}")
            raise ServerError(response.status_code, message)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ServerError(response.status_code, "Response body is not valid JSON") from e

    @staticmethod
    def _error_message(response: httpx.Response) -> Optional[str]:
        """Server-provided message from an error body, if there is one."""
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, dict):
            message = body.get("message") or body.get("detail")
            if isinstance(message, str) and message.strip():
                return message
        return None

    @staticmethod
    def _echo(data: Any) -> Optional[FeedbackItem]:
        """Item echoed back by a create/update; only the 2xx status is required."""
        try:
            return FeedbackItemWire.model_validate(data).to_domain()
        except ValidationError:
            logger.debug("Mutation response did not echo a feedback item")
            return None

    @staticmethod
    def _parse(model: type[BaseModel], data: Any) -> Any:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise ServerError(200, f"Unexpected {model.__name__} payload: {e.error_count()} errors") from e
