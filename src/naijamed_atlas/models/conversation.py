"""Conversation and view-state models for a research session."""

import time
from enum import Enum

from pydantic import BaseModel, Field


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class AppMode(str, Enum):
    """Where a session is in its landing -> searching -> results cycle."""

    LANDING = "landing"
    SEARCHING = "searching"
    RESULTS = "results"


class ConversationTurn(BaseModel):
    role: Role
    text: str
    timestamp: float = Field(default_factory=time.time)
    is_error: bool = False
