from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from .scoring.bowling import MAX_PINS


class RollIn(BaseModel):
    pins: int = Field(..., ge=0, le=MAX_PINS)

    model_config = ConfigDict(extra="forbid")

    @field_validator("pins", mode="before")
    @classmethod
    def _reject_bool(cls, value):
        # Reject booleans explicitly (bool is a subclass of int in Python)
        if isinstance(value, bool):
            raise ValueError("pins must be an integer")
        return value


class EventIn(BaseModel):
    type: Literal["ROLL"]
    # Strict so the engine sees the raw value; range is checked by the engine
    pins: Optional[StrictInt] = None


class GameOut(BaseModel):
    id: str
    rolls: List[int]


class FrameOut(BaseModel):
    kind: Literal["strike", "spare", "open"]
    rolls: List[int]
    score: int
    cumulative: int


class GameSummaryOut(BaseModel):
    """Frames resolved so far; ``total`` is set once all ten are scored."""

    id: str
    rolls: List[int]
    frames: List[FrameOut]
    complete: bool
    total: Optional[int] = None


class ScoreOut(BaseModel):
    id: str
    total: int
