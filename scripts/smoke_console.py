"""
Smoke script for a running Feedback Tracker Console.
Walks the manager flow (select, create, delete) against a live console.

Start the console first, e.g.:
    USE_MOCK_STORE=true FEEDBACK_USER_EMAIL=boss@example.com uvicorn feedback_tracker.main:app

Usage: python scripts/smoke_console.py [base_url]
"""

import json
import sys
from typing import Any

import requests

BASE_URL = sys.argv[1] if len(sys.argv) > 1 else "http://127.0.0.1:8000"


def print_header(title: str) -> None:
    """Print a formatted header."""
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60)


def print_result(name: str, success: bool, response: Any = None) -> None:
    """Print check result."""
    status = "✓ PASS" if success else "✗ FAIL"
    print(f"\n{status} - {name}")
    if response:
        if isinstance(response, dict):
            print(json.dumps(response, indent=2, default=str)[:500])
        else:
            print(str(response)[:500])


def check_navigation() -> bool:
    """Navigation shell answers for the configured user."""
    try:
        response = requests.get(f"{BASE_URL}/")
        body = response.json()
        success = response.status_code == 200 and body.get("user") is not None
        print_result("Navigation", success, body)
        return success
    except requests.RequestException as e:
        print_result("Navigation", False, str(e))
        return False


def check_roster() -> dict | None:
    """Manager console mounts and lists the team."""
    try:
        response = requests.get(f"{BASE_URL}/manager")
        success = response.status_code == 200
        body = response.json() if success else response.text
        print_result("Roster", success, {"team": len(body["roster"])} if success else body)
        return body if success else None
    except requests.RequestException as e:
        print_result("Roster", False, str(e))
        return None


def check_create(employee_id: int) -> bool:
    """Create feedback through the editor and confirm the roster count moved."""
    try:
        before = requests.get(f"{BASE_URL}/manager").json()
        count_before = next(
            e["feedback_count"] for e in before["roster"] if e["employee"]["id"] == employee_id
        )
        requests.post(f"{BASE_URL}/manager/employees/{employee_id}/feedback/new")
        requests.put(f"{BASE_URL}/manager/editor", json={
            "strengths": "Smoke-tested strengths",
            "areas_to_improve": "Smoke-tested areas",
            "sentiment": "NEUTRAL",
        })
        editor = requests.post(f"{BASE_URL}/manager/editor/submit").json()
        after = requests.get(f"{BASE_URL}/manager").json()
        count_after = next(
            e["feedback_count"] for e in after["roster"] if e["employee"]["id"] == employee_id
        )
        success = not editor["opened"] and count_after == count_before + 1
        print_result("Create feedback", success, {"before": count_before, "after": count_after, "error": editor["error"]})
        return success
    except requests.RequestException as e:
        print_result("Create feedback", False, str(e))
        return False


def check_delete(employee_id: int) -> bool:
    """Delete the newest feedback item of an employee after confirming."""
    try:
        state = requests.post(f"{BASE_URL}/manager/employees/{employee_id}/select").json()
        if not state["feedback"]:
            print_result("Delete feedback", False, "No feedback to delete")
            return False
        feedback_id = state["feedback"][0]["id"]
        requests.post(f"{BASE_URL}/manager/feedback/{feedback_id}/delete")
        state = requests.post(f"{BASE_URL}/manager/confirmation/confirm").json()
        success = feedback_id not in [f["id"] for f in state["feedback"]] and state["error"] is None
        print_result("Delete feedback", success, {"deleted": feedback_id, "remaining": len(state["feedback"])})
        return success
    except requests.RequestException as e:
        print_result("Delete feedback", False, str(e))
        return False


def main():
    """Run all smoke checks."""
    print_header("FEEDBACK TRACKER CONSOLE - SMOKE CHECKS")
    print(f"  Base URL: {BASE_URL}")

    results = {"passed": 0, "failed": 0}

    def record(ok: bool) -> None:
        results["passed" if ok else "failed"] += 1

    print_header("CHECK 1: Navigation")
    record(check_navigation())

    print_header("CHECK 2: Roster")
    roster = check_roster()
    record(roster is not None)

    if roster and roster["roster"]:
        employee_id = roster["roster"][0]["employee"]["id"]

        print_header("CHECK 3: Create Feedback")
        record(check_create(employee_id))

        print_header("CHECK 4: Delete Feedback")
        record(check_delete(employee_id))

    print("\n" + "=" * 60)
    print("  SUMMARY")
    print("=" * 60)
    print(f"\n  ✓ Passed: {results['passed']}")
    print(f"  ✗ Failed: {results['failed']}")
    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
