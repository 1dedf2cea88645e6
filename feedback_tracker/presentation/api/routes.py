from fastapi import APIRouter, Depends, HTTPException

from feedback_tracker.presentation.schemas import (
    ActionResultDTO,
    EditorDTO,
    EditorFieldsDTO,
    EmployeeViewerDTO,
    ManagerConsoleDTO,
    NavigationDTO,
)
from feedback_tracker.application import (
    EmployeeFeedbackViewer,
    ManagerConsole,
    NavigationShell,
)
from feedback_tracker.presentation.dependencies import (
    get_container,
    get_employee_viewer,
    get_manager_console,
    get_navigation,
)


router = APIRouter()


def _entry_or_404(console: ManagerConsole, employee_id: int):
    entry = console.find_entry(employee_id)
    if entry is None:
        raise HTTPException(status_code=404, detail=f"Employee {employee_id} is not in your team")
    return entry


@router.get("/", response_model=NavigationDTO)
async def navigation(nav: NavigationShell = Depends(get_navigation)) -> NavigationDTO:
    """Navigation shell for the signed-in user."""
    return NavigationDTO.from_view(nav)


@router.post("/session/logout", response_model=NavigationDTO)
async def logout(nav: NavigationShell = Depends(get_navigation)) -> NavigationDTO:
    """Sign out and tear down the mounted views."""
    nav.sign_out()
    get_container().unmount_views()
    return NavigationDTO.from_view(nav)


# Manager console

@router.get("/manager", response_model=ManagerConsoleDTO)
async def manager_console(console: ManagerConsole = Depends(get_manager_console)) -> ManagerConsoleDTO:
    return ManagerConsoleDTO.from_view(console)


@router.post("/manager/refresh", response_model=ManagerConsoleDTO)
async def refresh_roster(console: ManagerConsole = Depends(get_manager_console)) -> ManagerConsoleDTO:
    await console.load_roster()
    return ManagerConsoleDTO.from_view(console)


@router.post("/manager/employees/{employee_id}/select", response_model=ManagerConsoleDTO)
async def select_employee(
    employee_id: int,
    console: ManagerConsole = Depends(get_manager_console),
) -> ManagerConsoleDTO:
    """Select a team member and load their feedback."""
    await console.select_employee(_entry_or_404(console, employee_id))
    return ManagerConsoleDTO.from_view(console)


@router.post("/manager/employees/{employee_id}/feedback/new", response_model=EditorDTO)
async def open_create(
    employee_id: int,
    console: ManagerConsole = Depends(get_manager_console),
) -> EditorDTO:
    """Open an empty feedback editor for a team member."""
    await console.open_create(_entry_or_404(console, employee_id))
    return EditorDTO.from_view(console.editor)


@router.post("/manager/feedback/{feedback_id}/edit", response_model=EditorDTO)
async def open_edit(
    feedback_id: int,
    console: ManagerConsole = Depends(get_manager_console),
) -> EditorDTO:
    """Open the editor pre-filled from a feedback item of the selected employee."""
    item = console.find_feedback(feedback_id)
    if item is None:
        raise HTTPException(status_code=404, detail=f"Feedback {feedback_id} is not displayed")
    console.open_edit(item)
    return EditorDTO.from_view(console.editor)


@router.get("/manager/editor", response_model=EditorDTO)
async def editor_state(console: ManagerConsole = Depends(get_manager_console)) -> EditorDTO:
    return EditorDTO.from_view(console.editor)


@router.put("/manager/editor", response_model=EditorDTO)
async def edit_fields(
    fields: EditorFieldsDTO,
    console: ManagerConsole = Depends(get_manager_console),
) -> EditorDTO:
    """Apply field edits; omitted fields are left as they are."""
    editor = console.editor
    if not editor.opened:
        raise HTTPException(status_code=409, detail="Editor is not open")
    changes = {}
    if "sentiment" in fields.model_fields_set:
        changes["sentiment"] = fields.sentiment
    try:
        applied = editor.update(
            strengths=fields.strengths,
            areas_to_improve=fields.areas_to_improve,
            **changes,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if not applied:
        raise HTTPException(status_code=409, detail="Submission in progress")
    return EditorDTO.from_view(editor)


@router.post("/manager/editor/submit", response_model=EditorDTO)
async def submit_editor(console: ManagerConsole = Depends(get_manager_console)) -> EditorDTO:
    """Submit the editor. Validation and server errors come back in ``error``."""
    editor = console.editor
    if not editor.opened:
        raise HTTPException(status_code=409, detail="Editor is not open")
    await editor.submit()
    return EditorDTO.from_view(editor)


@router.post("/manager/editor/close", response_model=EditorDTO)
async def close_editor(console: ManagerConsole = Depends(get_manager_console)) -> EditorDTO:
    if not console.editor.close():
        raise HTTPException(status_code=409, detail="Cannot close while submitting")
    return EditorDTO.from_view(console.editor)


@router.post("/manager/feedback/{feedback_id}/delete", response_model=ManagerConsoleDTO)
async def request_delete(
    feedback_id: int,
    console: ManagerConsole = Depends(get_manager_console),
) -> ManagerConsoleDTO:
    """Ask for confirmation before deleting a feedback item."""
    if console.find_feedback(feedback_id) is None:
        raise HTTPException(status_code=404, detail=f"Feedback {feedback_id} is not displayed")
    console.request_delete(feedback_id)
    return ManagerConsoleDTO.from_view(console)


@router.post("/manager/confirmation/confirm", response_model=ManagerConsoleDTO)
async def confirm_delete(console: ManagerConsole = Depends(get_manager_console)) -> ManagerConsoleDTO:
    if console.confirmation is None:
        raise HTTPException(status_code=409, detail="Nothing to confirm")
    await console.confirm_delete()
    return ManagerConsoleDTO.from_view(console)


@router.post("/manager/confirmation/cancel", response_model=ManagerConsoleDTO)
async def cancel_delete(console: ManagerConsole = Depends(get_manager_console)) -> ManagerConsoleDTO:
    console.cancel_delete()
    return ManagerConsoleDTO.from_view(console)


# Employee viewer

@router.get("/employee", response_model=EmployeeViewerDTO)
async def employee_viewer(viewer: EmployeeFeedbackViewer = Depends(get_employee_viewer)) -> EmployeeViewerDTO:
    return EmployeeViewerDTO.from_view(viewer)


@router.post("/employee/feedback/{feedback_id}/acknowledge", response_model=ActionResultDTO)
async def acknowledge(
    feedback_id: int,
    viewer: EmployeeFeedbackViewer = Depends(get_employee_viewer),
) -> ActionResultDTO:
    """Acknowledge a pending feedback item."""
    item = viewer.find(feedback_id)
    if item is None:
        raise HTTPException(status_code=404, detail=f"Feedback {feedback_id} is not in your timeline")
    if item.acknowledged:
        return ActionResultDTO(ok=False, message="Already acknowledged")
    ok = await viewer.acknowledge(feedback_id)
    return ActionResultDTO(ok=ok, message=None if ok else viewer.error)
