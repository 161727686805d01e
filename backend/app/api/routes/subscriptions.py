import logging
from typing import Any

from fastapi import APIRouter

from app.api.deps import SubscriberStoreDep
from app.core.errors import PersistenceError
from app.models import ErrorResponse, Message, SubscribeRequest

router = APIRouter(tags=["subscriptions"])
logger = logging.getLogger(__name__)


@router.post(
    "/subscribe",
    response_model=Message,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def subscribe(*, subscribe_in: SubscribeRequest | None = None, store: SubscriberStoreDep) -> Any:
    subscribe_in = subscribe_in or SubscribeRequest()
    try:
        added = store.subscribe(subscribe_in.email)
    except PersistenceError as exc:
        logger.error("Email subscription error: %s", exc)
        raise PersistenceError("Failed to save email.") from exc

    if not added:
        return Message(message="Email already subscribed.")
    return Message(message="Subscription successful!")
