"""
API tests for the console presentation layer.

The application runs against the seeded in-memory store:
employee 1 (Alice) has two items, employee 2 (Bob) one, employee 3 none.
"""
import pytest
from fastapi.testclient import TestClient

from feedback_tracker.container import Container
from feedback_tracker.infrastructure import Settings
from feedback_tracker.main import create_app


def make_client(role="Manager", email="boss@example.com", employee_id=1):
    settings = Settings(
        use_mock_store=True,
        user_email=email,
        user_role=role,
        current_employee_id=employee_id,
    )
    return TestClient(create_app(container=Container(settings)))


@pytest.fixture
def manager():
    with make_client() as client:
        yield client


@pytest.fixture
def employee():
    with make_client(role="Employee", email="alice@example.com") as client:
        yield client


def roster_entry(state, employee_id):
    return next(e for e in state["roster"] if e["employee"]["id"] == employee_id)


class TestNavigationRoutes:

    def test_manager_navigation(self, manager):
        body = manager.get("/").json()

        assert [link["label"] for link in body["links"]] == ["Home", "Manager Dashboard"]
        assert body["user"]["email"] == "boss@example.com"
        assert body["can_sign_out"] is True

    def test_signed_out_navigation(self):
        with make_client(email="") as client:
            body = client.get("/").json()

            assert [link["label"] for link in body["account_links"]] == ["Login", "Register"]
            assert client.get("/manager").status_code == 401

    def test_logout_locks_views(self, manager):
        assert manager.get("/manager").status_code == 200

        body = manager.post("/session/logout").json()

        assert body["user"] is None
        assert manager.get("/manager").status_code == 401

    def test_manager_cannot_open_employee_view(self, manager):
        assert manager.get("/employee").status_code == 403

    def test_employee_cannot_open_manager_view(self, employee):
        assert employee.get("/manager").status_code == 403


class TestManagerRoutes:

    def test_console_mounts_with_roster(self, manager):
        state = manager.get("/manager").json()

        assert len(state["roster"]) == 3
        assert roster_entry(state, 1)["feedback_count"] == 2
        assert state["roster_loading"] is False
        assert state["selected_employee_id"] is None

    def test_select_employee_loads_feedback(self, manager):
        state = manager.post("/manager/employees/1/select").json()

        assert state["selected_employee_id"] == 1
        assert len(state["feedback"]) == 2
        assert {f["sentiment_label"] for f in state["feedback"]} == {"Positive", "Neutral"}

    def test_unknown_employee_is_404(self, manager):
        assert manager.post("/manager/employees/99/select").status_code == 404

    def test_create_flow(self, manager):
        editor = manager.post("/manager/employees/3/feedback/new").json()
        assert editor["opened"] is True
        assert editor["title"] == "Give Feedback - Carol White"
        assert editor["strengths"] == ""

        manager.put("/manager/editor", json={
            "strengths": "  Calm under pressure ",
            "areas_to_improve": "Share context earlier",
            "sentiment": "positive",
        })
        editor = manager.post("/manager/editor/submit").json()

        assert editor["opened"] is False
        assert editor["error"] is None
        state = manager.get("/manager").json()
        assert roster_entry(state, 3)["feedback_count"] == 1
        assert roster_entry(state, 3)["sentiments"]["POSITIVE"] == 1
        assert [f["strengths"] for f in state["feedback"]] == ["Calm under pressure"]
        assert state["roster_version"] == 1

    def test_submit_incomplete_form_keeps_editor_open(self, manager):
        manager.post("/manager/employees/2/feedback/new")
        manager.put("/manager/editor", json={"strengths": "Only this"})

        editor = manager.post("/manager/editor/submit").json()

        assert editor["opened"] is True
        assert editor["error"] == "Please fill in all fields"
        assert roster_entry(manager.get("/manager").json(), 2)["feedback_count"] == 1

    def test_invalid_sentiment_is_rejected(self, manager):
        manager.post("/manager/employees/2/feedback/new")

        response = manager.put("/manager/editor", json={"sentiment": "AMAZING"})

        assert response.status_code == 422

    def test_edit_flow_prefills_editor(self, manager):
        state = manager.post("/manager/employees/2/select").json()
        feedback_id = state["feedback"][0]["id"]

        editor = manager.post(f"/manager/feedback/{feedback_id}/edit").json()

        assert editor["is_editing"] is True
        assert editor["feedback_id"] == feedback_id
        assert editor["sentiment"] == "NEGATIVE"
        assert editor["strengths"] == "Strong debugging skills"

    def test_close_editor(self, manager):
        manager.post("/manager/employees/2/feedback/new")

        editor = manager.post("/manager/editor/close").json()

        assert editor["opened"] is False

    def test_delete_requires_confirmation(self, manager):
        state = manager.post("/manager/employees/1/select").json()
        positive = next(f for f in state["feedback"] if f["sentiment"] == "POSITIVE")

        state = manager.post(f"/manager/feedback/{positive['id']}/delete").json()
        assert state["confirmation"]["message"] == "Are you sure you want to delete this feedback?"
        assert len(state["feedback"]) == 2

        state = manager.post("/manager/confirmation/cancel").json()
        assert state["confirmation"] is None
        assert len(state["feedback"]) == 2

        manager.post(f"/manager/feedback/{positive['id']}/delete")
        state = manager.post("/manager/confirmation/confirm").json()

        assert positive["id"] not in [f["id"] for f in state["feedback"]]
        entry = roster_entry(state, 1)
        assert entry["feedback_count"] == 1
        assert entry["sentiments"] == {"POSITIVE": 0, "NEUTRAL": 1, "NEGATIVE": 0}

    def test_confirm_without_request_is_conflict(self, manager):
        assert manager.post("/manager/confirmation/confirm").status_code == 409


class TestEmployeeRoutes:

    def test_timeline_newest_first(self, employee):
        state = employee.get("/employee").json()

        assert [f["id"] for f in state["timeline"]] == [2, 1]
        assert state["pending_count"] == 1
        assert state["loading"] is False

    def test_acknowledge_pending_item(self, employee):
        result = employee.post("/employee/feedback/2/acknowledge").json()

        assert result == {"ok": True, "message": None}
        state = employee.get("/employee").json()
        assert [f["status"] for f in state["timeline"]] == ["Acknowledged", "Acknowledged"]
        assert state["pending_count"] == 0

    def test_acknowledge_twice_is_a_noop(self, employee):
        employee.post("/employee/feedback/2/acknowledge")

        result = employee.post("/employee/feedback/2/acknowledge").json()

        assert result["ok"] is False
        assert result["message"] == "Already acknowledged"

    def test_acknowledge_foreign_item_is_404(self, employee):
        assert employee.post("/employee/feedback/3/acknowledge").status_code == 404
