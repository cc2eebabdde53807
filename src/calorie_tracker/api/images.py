"""Meal photo upload endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, Request, UploadFile

from calorie_tracker.api.entries import require_user
from calorie_tracker.domain.entries import AuthenticatedUser

router = APIRouter(prefix="/api", tags=["images"])


@router.post("/images", status_code=201)
async def upload_image(
    request: Request,
    file: UploadFile = File(...),
    user: AuthenticatedUser = Depends(require_user),
) -> dict[str, str]:
    """Store a meal photo and return the body expected by recognize-food."""
    content = await file.read()
    stored = request.app.state.container.image_service.upload(
        user.id, file.filename, content, file.content_type
    )
    return {"imageUrl": stored.public_url, "fileName": stored.path}
