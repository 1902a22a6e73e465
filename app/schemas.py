from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Section(str, Enum):
    TRENDING = "trending"
    FEATURED = "featured"


class Listing(BaseModel):
    title: str = Field(..., description="Display title of the lot")
    bid: str = Field(..., description="Current bid, already formatted (e.g. '$2,750')")
    deadline: str = Field(..., description="ISO 8601 local timestamp when bidding closes")


class AuctionCreate(BaseModel):
    # Presence is checked by the handler so a missing field maps to a 400, not a 422.
    section: Optional[str] = None
    title: Optional[str] = None
    bid: Optional[str] = None
    deadline: Optional[str] = None


class SignupRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
