"""Tracker routes.

Every mutating route returns the refreshed tracker snapshot so a client can
re-render from a single response.
"""

from fastapi import APIRouter, Form, Request
from fastapi.responses import JSONResponse

from ...services.tracker import DailyTracker
from ...utils.calendar import parse_day

router = APIRouter(prefix="/tracker", tags=["tracker"])


def get_tracker(request: Request) -> DailyTracker:
    """Get the tracker session from app state."""
    return request.app.state.tracker


def error_response(error: ValueError) -> JSONResponse:
    return JSONResponse({"error": str(error)}, status_code=400)


@router.get("")
async def snapshot(request: Request):
    """Full view of the session."""
    return get_tracker(request).snapshot()


@router.get("/days")
async def visible_days(request: Request):
    """The five visible days."""
    return [d.to_dict() for d in get_tracker(request).visible_days()]


@router.get("/progress")
async def weekly_progress(request: Request):
    """Workout days this week against the goal."""
    return get_tracker(request).weekly_progress().to_dict()


@router.get("/history")
async def history(request: Request):
    """Logged workouts up to today, newest day first."""
    return [h.to_dict() for h in get_tracker(request).history()]


@router.post("/toggle")
async def toggle(request: Request, activity: str = Form(...)):
    """Check or uncheck an activity for the day being edited."""
    tracker = get_tracker(request)
    try:
        tracker.toggle(activity)
    except ValueError as e:
        return error_response(e)
    return tracker.snapshot()


@router.post("/lift-type")
async def set_lift_type(request: Request, lift_type: str = Form("")):
    """Choose the lift subtype. An empty value clears it."""
    tracker = get_tracker(request)
    try:
        tracker.set_lift_type(lift_type)
    except ValueError as e:
        return error_response(e)
    return tracker.snapshot()


@router.post("/edit")
async def begin_edit(request: Request, day: str = Form(...)):
    """Start editing a specific day (YYYY-MM-DD)."""
    tracker = get_tracker(request)
    try:
        tracker.begin_edit(parse_day(day))
    except ValueError as e:
        return error_response(e)
    return tracker.snapshot()


@router.post("/commit")
async def commit(request: Request):
    """Save the selection as the workouts for the day being edited."""
    tracker = get_tracker(request)
    committed = tracker.commit()
    return {"committed": committed, **tracker.snapshot()}


@router.post("/reset")
async def reset_to_today(request: Request):
    """Abandon editing another day."""
    tracker = get_tracker(request)
    tracker.reset_to_today()
    return tracker.snapshot()


@router.post("/today")
async def jump_to_today(request: Request):
    """Center the window on today and go back to editing today."""
    tracker = get_tracker(request)
    tracker.jump_to_today()
    return tracker.snapshot()


@router.post("/step")
async def step(request: Request, direction: str = Form(...)):
    """Move the visible window by one day."""
    tracker = get_tracker(request)
    try:
        tracker.step(direction)
    except ValueError as e:
        return error_response(e)
    return tracker.snapshot()


@router.post("/goal")
async def set_goal(request: Request, goal: str = Form("")):
    """Set the weekly goal. Invalid input is clamped, never rejected."""
    tracker = get_tracker(request)
    tracker.set_goal(goal)
    return tracker.snapshot()


@router.post("/workouts/{workout_id}")
async def update_workout(
    request: Request,
    workout_id: str,
    field: str = Form(...),
    value: str = Form(""),
):
    """Edit the duration or notes of a logged workout."""
    tracker = get_tracker(request)
    try:
        tracker.set_field(workout_id, field, value)
    except ValueError as e:
        return error_response(e)
    return tracker.snapshot()
