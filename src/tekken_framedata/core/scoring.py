"""Strategic importance scoring for moves.

A single additive heuristic: safety on block, startup speed, reward on hit,
utility properties and hit level. The weights are a fixed contract; callers
rank and compare moves by them, so changing one changes every ranking.
"""

from __future__ import annotations

from typing import Optional

from .frames import is_launcher_reward, parse_frame
from .models import Move


def _safety_score(block: Optional[int]) -> int:
    if block is None:
        return 0
    if block > 0:
        return 15  # plus on block
    if block >= -4:
        return 10
    if block >= -9:
        return 5
    if block >= -13:
        return -5  # jab punishable
    if block >= -15:
        return -10  # launch punishable
    return -15


def _speed_score(startup: Optional[int]) -> int:
    if startup is None:
        return 0
    if startup <= 12:
        return 10
    if startup <= 14:
        return 7
    if startup <= 16:
        return 5
    if startup <= 20:
        return 2
    return -2


def _utility_score(move: Move) -> int:
    score = 0
    tags = move.tags or {}
    if tags.get("he"):
        score += 15
    if tags.get("pc"):
        score += 7
    if tags.get("trn"):
        score += 5
    if tags.get("bbr"):
        score += 5

    notes = (move.notes or "").lower()
    if "homing" in notes:
        score += 10
    if move.transitions and "DSS" in move.transitions:
        score += 12
    if "guaranteed" in notes:
        score += 15
    return score


def score_move(move: Move) -> int:
    """Compute the strategic importance of a move. Pure and deterministic."""
    block = parse_frame(move.block)
    startup = parse_frame(move.startup)
    hit = parse_frame(move.hit)

    score = _safety_score(block) + _speed_score(startup)

    launcher = is_launcher_reward(move.hit) or is_launcher_reward(move.counter_hit)
    if launcher:
        score += 20
    elif hit is not None and hit > 15:
        score += 10
    if "c" in move.hit or "c" in move.counter_hit:
        score += 5  # forces crouch

    score += _utility_score(move)

    if "m" in move.hit_level:
        score += 5
    if "l" in move.hit_level:
        score += 15 if launcher else 3
    if "h" in move.hit_level and startup is not None and startup > 12:
        score -= 3

    return score


def decorate(move: Move) -> Move:
    """Return a copy of ``move`` with ``strategic_importance`` filled in."""
    return move.model_copy(update={"strategic_importance": score_move(move)})
