"""Chat relay schemas."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class ChatMessageInput(BaseModel):
    role: Literal["user", "assistant"]
    content: str = Field(max_length=4000)


class ChatInput(BaseModel):
    """Full conversation history supplied by the client on every call."""

    messages: list[ChatMessageInput]


class ChatResponse(BaseModel):
    message: str
