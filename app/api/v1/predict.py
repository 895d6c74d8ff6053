import logging

from fastapi import APIRouter, Cookie, Query, Request, status
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.guest_store import GuestLimitReached, register_guest_prediction
from app.core.rate_limit import rate_limit
from app.schemas.prediction import LimitReachedResponse, PredictionResult, ProfileInput
from app.services.prediction_service import predict_professions

router = APIRouter()
logger = logging.getLogger(__name__)

GUEST_LIMIT_MESSAGE = "Guest prediction limit reached. Please sign up for unlimited predictions."


@router.post(
    "/suggest-profession",
    response_model=PredictionResult,
    summary="Suggest Professions",
    description="Send the profile to the model and return parsed career suggestions.",
    responses={403: {"model": LimitReachedResponse, "description": "Guest prediction limit reached"}},
)
@rate_limit()
async def suggest_profession(
    request: Request,
    payload: ProfileInput,
    count: int | None = Query(default=None, ge=1, le=settings.prediction_max_target_count),
    guest_id: str | None = Cookie(default=None, alias=settings.guest_cookie_name),
):
    _ = request
    if guest_id:
        try:
            used = register_guest_prediction(guest_id, settings.max_guest_predictions)
            logger.info("guest_prediction_counted guest=%s used=%s", guest_id[:8], used)
        except GuestLimitReached as exc:
            logger.info("guest_limit_reached guest=%s limit=%s", guest_id[:8], exc.limit)
            body = LimitReachedResponse(error=GUEST_LIMIT_MESSAGE)
            return JSONResponse(
                status_code=status.HTTP_403_FORBIDDEN,
                content=body.model_dump(by_alias=True),
            )

    return await predict_professions(payload, target_count=count)
