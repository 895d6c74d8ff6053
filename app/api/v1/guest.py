import uuid

from fastapi import APIRouter, Cookie, Response

from app.core.config import settings
from app.core.guest_store import ensure_guest
from app.schemas.prediction import GuestSessionResponse

router = APIRouter()


@router.post("/guest/session", response_model=GuestSessionResponse, response_model_by_alias=True)
async def guest_session(
    response: Response,
    guest_id: str | None = Cookie(default=None, alias=settings.guest_cookie_name),
):
    if not guest_id:
        guest_id = uuid.uuid4().hex
        response.set_cookie(
            key=settings.guest_cookie_name,
            value=guest_id,
            max_age=settings.guest_cookie_max_age_days * 24 * 3600,
            httponly=True,
            samesite="lax",
        )
    record = ensure_guest(guest_id)
    used = record["predictions_count"]
    limit = settings.max_guest_predictions
    return GuestSessionResponse(
        guest_id=guest_id,
        predictions_count=used,
        limit=limit,
        remaining=max(limit - used, 0),
    )
