"""Pydantic data models — the shared business objects.

Upstream records use camelCase keys; models expose snake_case attributes
and serialize back to camelCase with ``by_alias=True``.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ErrorCode(str, Enum):
    """Structured error codes surfaced to callers."""

    CHARACTER_NOT_FOUND = "CHARACTER_NOT_FOUND"
    MOVE_NOT_FOUND = "MOVE_NOT_FOUND"
    NETWORK_ERROR = "NETWORK_ERROR"
    INVALID_INPUT = "INVALID_INPUT"


class Move(BaseModel):
    """A single move record from a character's frame data."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    move_number: Optional[int] = Field(None, alias="moveNumber")
    command: str = ""
    name: Optional[str] = None
    hit_level: str = Field("", alias="hitLevel")
    damage: str = ""
    startup: Optional[str] = None
    block: str = ""
    hit: str = ""
    counter_hit: str = Field("", alias="counterHit")
    notes: Optional[str] = None
    wavu_id: Optional[str] = Field(None, alias="wavuId")
    tags: Optional[dict[str, Optional[str]]] = None
    transitions: Optional[list[str]] = None
    recovery: Optional[str] = None
    strategic_importance: Optional[int] = Field(None, alias="strategicImportance")

    # Missing and null frame strings both read as "".
    @field_validator("block", "hit", "counter_hit", "damage", "hit_level", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return "" if value is None else value


class FilterSpec(BaseModel):
    """Optional bounds for ``search_moves``. ``None`` means unconstrained."""

    model_config = ConfigDict(populate_by_name=True)

    hit_level: Optional[Literal["h", "m", "l", "s"]] = Field(None, alias="hitLevel")
    min_damage: Optional[int] = Field(None, alias="minDamage")
    max_startup: Optional[int] = Field(None, alias="maxStartup")
    min_block: Optional[int] = Field(None, alias="minBlock")
    max_block: Optional[int] = Field(None, alias="maxBlock")
    min_hit: Optional[int] = Field(None, alias="minHit")
    min_counter_hit: Optional[int] = Field(None, alias="minCounterHit")
    counter_hit_launchers: Optional[bool] = Field(None, alias="counterHitLaunchers")
    safe_on_block: Optional[bool] = Field(None, alias="safeOnBlock")
    has_tag: Optional[str] = Field(None, alias="hasTag")
    limit: Optional[int] = Field(None, ge=1)


class SimilarityCandidate(BaseModel):
    """A roster entry scored against a user-supplied name."""

    name: str
    similarity: float = Field(ge=0.0, le=1.0)


class ErrorDetail(BaseModel):
    """Structured error payload, rich enough for automated recovery."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    code: ErrorCode
    input: str
    suggestions: Optional[list[SimilarityCandidate]] = None
    did_you_mean: Optional[str] = Field(None, alias="didYouMean")
    action: Optional[str] = None
    alternatives: Optional[list[str]] = None


class KeyMoves(BaseModel):
    """The handful of moves worth learning first for a character."""

    model_config = ConfigDict(populate_by_name=True)

    character: str
    launchers: list[Move] = Field(default_factory=list, description="Counter hit +20 or better")
    fast_pokes: list[Move] = Field(default_factory=list, alias="fastPokes", description="i12 or faster, -10 or better on block")
    safe_moves: list[Move] = Field(default_factory=list, alias="safeMoves", description="-10 or better on block")
    heat_engagers: list[Move] = Field(default_factory=list, alias="heatEngagers")
