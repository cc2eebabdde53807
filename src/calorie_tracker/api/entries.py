"""Entry, goal and summary endpoints for authenticated users."""

from __future__ import annotations

from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, Header, Query, Request

from calorie_tracker.api.models import CreateEntryRequest, UpdateGoalsRequest
from calorie_tracker.domain.entries import AuthenticatedUser
from calorie_tracker.domain.errors import ValidationError
from calorie_tracker.services.entries import HISTORY_DAYS

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer

router = APIRouter(prefix="/api", tags=["entries"])


def _get_container(request: Request) -> AppContainer:
    return request.app.state.container


async def require_user(
    request: Request,
    authorization: str | None = Header(default=None),
) -> AuthenticatedUser:
    """Resolve the caller from a Supabase bearer token."""
    container = _get_container(request)
    return container.auth_service.authenticate(authorization)


@router.post("/entries", status_code=201)
async def create_entry(
    body: CreateEntryRequest,
    request: Request,
    user: AuthenticatedUser = Depends(require_user),
) -> dict[str, object]:
    """Log a food entry for the caller."""
    container = _get_container(request)
    entry = container.entry_service.add_entry(user.id, body.to_draft())
    return {"entry": entry}


@router.get("/entries/today")
async def today_summary(
    request: Request,
    tz: str = "UTC",
    user: AuthenticatedUser = Depends(require_user),
) -> dict[str, object]:
    """Return today's entries, nutrient totals and goal progress."""
    container = _get_container(request)
    progress = container.entry_service.get_daily_progress(user.id, _checked_tz(tz))
    return {
        "date": progress.summary.date,
        "total_calories": progress.summary.total_calories,
        "entries": progress.summary.entries,
        "totals": progress.totals,
        "goals": progress.goals,
        "remaining_calories": progress.remaining_calories,
        "progress_percent": progress.progress_percent,
    }


@router.get("/history")
async def history(
    request: Request,
    days: int = Query(default=HISTORY_DAYS, ge=1, le=365),
    tz: str = "UTC",
    user: AuthenticatedUser = Depends(require_user),
) -> dict[str, object]:
    """Return entries grouped by day, newest day first."""
    container = _get_container(request)
    return {
        "days": container.entry_service.get_history(user.id, _checked_tz(tz), days)
    }


@router.get("/goals")
async def get_goals(
    request: Request, user: AuthenticatedUser = Depends(require_user)
) -> dict[str, object]:
    """Return the caller's nutrient goals."""
    container = _get_container(request)
    return {"goals": container.goals_service.get_goals(user.id)}


@router.put("/goals")
async def save_goals(
    body: UpdateGoalsRequest,
    request: Request,
    user: AuthenticatedUser = Depends(require_user),
) -> dict[str, object]:
    """Create or update the caller's nutrient goals."""
    container = _get_container(request)
    goals = container.goals_service.save_goals(user.id, body.model_dump())
    return {"goals": goals}


def _checked_tz(value: str) -> str:
    try:
        ZoneInfo(value)
    except (ValueError, KeyError) as exc:
        raise ValidationError(f"Unknown timezone: {value}") from exc
    return value
