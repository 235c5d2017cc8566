"""Move filtering.

Every ``FilterSpec`` constraint is AND'ed, in declaration order, with one
exception: ``has_tag`` is itself an ordered OR of special cases (see
``matches_tag``). The result keeps the movelist order; ``limit`` truncates
last.
"""

from __future__ import annotations

import re
from typing import Callable, Iterable

from .frames import is_launcher_reward, is_launcher_structural, parse_frame
from .models import FilterSpec, Move

SAFE_BLOCK_THRESHOLD = -10

_DAMAGE_RE = re.compile(r"(\d+)")
_CHARGE_NOTE_RES = (
    re.compile(r"\d+f charge"),  # "26f charge"
    re.compile(r"\d+~\d+f charge"),  # "0~26f charge"
)

CH_LAUNCHER_ALIASES = frozenset({"chl", "launcher", "ch launcher"})
CHARGE_ALIASES = frozenset({"charge", "hold"})
HEAT_ALIASES = frozenset({"heat", "h"})
HEAT_MOVE_PREFIX = "H."


def first_damage(damage: str) -> int:
    """First number in a damage string ("10,12,20" -> 10); 0 when absent."""
    match = _DAMAGE_RE.search(damage or "")
    return int(match.group(1)) if match else 0


def _tag_key_matches(search_tag: str, tag: str) -> bool:
    tag = tag.lower()
    if tag == search_tag:
        return True
    if search_tag == "he":
        return tag == "heat engager"
    if search_tag == "heat":
        return "heat" in tag
    if search_tag == "tornado":
        return tag == "tornado"
    if search_tag == "wall":
        return "wall" in tag
    if search_tag == "screw":
        return "screw" in tag
    if search_tag in ("gb", "guard break"):
        return "guard break" in tag
    if search_tag in ("rb", "reversal break"):
        return "reversal break" in tag
    if search_tag in CHARGE_ALIASES:
        return "charge" in tag or "hold" in tag
    return False


def _is_ch_launcher(move: Move, search_tag: str) -> bool:
    return search_tag in CH_LAUNCHER_ALIASES and is_launcher_reward(move.counter_hit)


def _is_charge_move(move: Move, search_tag: str) -> bool:
    if search_tag not in CHARGE_ALIASES or not move.notes:
        return False
    notes = move.notes.lower()
    if "charge" in notes or "hold" in notes:
        return True
    return any(pattern.search(move.notes) for pattern in _CHARGE_NOTE_RES)


def _is_safe(move: Move, search_tag: str) -> bool:
    if search_tag != "safe":
        return False
    block = parse_frame(move.block)
    return block is not None and block >= SAFE_BLOCK_THRESHOLD


def _is_heat_move(move: Move, search_tag: str) -> bool:
    return search_tag in HEAT_ALIASES and move.command.startswith(HEAT_MOVE_PREFIX)


def _has_tag_entry(move: Move, search_tag: str) -> bool:
    if not move.tags:
        return False
    return any(_tag_key_matches(search_tag, tag) for tag in move.tags)


# Order matters: the first rule that matches includes the move.
TAG_RULES: tuple[Callable[[Move, str], bool], ...] = (
    _is_ch_launcher,
    _is_charge_move,
    _is_safe,
    _is_heat_move,
    _has_tag_entry,
)


def matches_tag(move: Move, tag: str) -> bool:
    """Evaluate a ``has_tag`` request against one move.

    Rules, in order: counter hit launcher aliases ("chl", "launcher",
    "ch launcher"), charge notes ("charge", "hold"), "safe" (-10 or better on
    block), heat moves ("heat", "h": commands starting with "H."), then tag
    keys including the alias table. A tag no rule recognizes excludes the move.
    """
    search_tag = tag.lower()
    return any(rule(move, search_tag) for rule in TAG_RULES)


def _within(value, low=None, high=None) -> bool:
    if value is None:
        return False
    if low is not None and value < low:
        return False
    if high is not None and value > high:
        return False
    return True


def move_matches(move: Move, spec: FilterSpec) -> bool:
    """True when ``move`` satisfies every constraint in ``spec``."""
    if spec.hit_level and spec.hit_level not in move.hit_level:
        return False

    if spec.min_damage is not None and first_damage(move.damage) < spec.min_damage:
        return False

    # Moves without startup data are kept; unlike the other frame bounds.
    if spec.max_startup is not None and move.startup:
        if not _within(parse_frame(move.startup), high=spec.max_startup):
            return False

    if spec.min_block is not None or spec.max_block is not None:
        if not _within(parse_frame(move.block), low=spec.min_block, high=spec.max_block):
            return False

    if spec.min_hit is not None and not _within(parse_frame(move.hit), low=spec.min_hit):
        return False

    if spec.min_counter_hit is not None and not _within(parse_frame(move.counter_hit), low=spec.min_counter_hit):
        return False

    if spec.counter_hit_launchers is True and not is_launcher_structural(move.counter_hit):
        return False

    if spec.safe_on_block is True and not _within(parse_frame(move.block), low=SAFE_BLOCK_THRESHOLD):
        return False

    if spec.has_tag and not matches_tag(move, spec.has_tag):
        return False

    return True


def filter_moves(moves: Iterable[Move], spec: FilterSpec) -> list[Move]:
    """Apply ``spec`` to ``moves``, preserving order, then truncate to ``spec.limit``."""
    filtered = [move for move in moves if move_matches(move, spec)]
    if spec.limit:
        return filtered[: spec.limit]
    return filtered
