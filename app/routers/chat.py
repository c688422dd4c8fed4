"""Public AI chat route."""

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends

from app.core.errors import UpstreamError
from app.routers.deps import get_chat_relay
from app.schemas.chat import ChatResponse
from app.services.chat_service import ChatRelay, parse_chat_input

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/chat", tags=["chat"])

CHAT_FAILED_MESSAGE = "Sohbet hatası oluştu"


@router.post("", response_model=ChatResponse)
def chat(
    chat_relay: Annotated[ChatRelay, Depends(get_chat_relay)],
    payload: Annotated[dict[str, Any], Body()],
):
    chat_input = parse_chat_input(payload)
    try:
        reply = chat_relay.converse(chat_input.messages)
    except UpstreamError as exc:
        logger.error("Chat error: %s", exc.message)
        raise UpstreamError(CHAT_FAILED_MESSAGE) from exc
    return ChatResponse(message=reply)
