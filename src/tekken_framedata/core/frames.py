"""Frame notation parsing and launcher detection.

Frame strings come from the community database as free text: "i14",
"i15~17", "+5", "-12", "+23a", "+31a (+21)", "-9c". Everything here is
total: bad input yields ``None``/``False``, never an exception.
"""

from __future__ import annotations

import re
from typing import Optional

_STARTUP_RE = re.compile(r"i(\d+)")
_SIGNED_RE = re.compile(r"([+-]?\d+)")
_PLUS_RE = re.compile(r"\+(\d+)")

LAUNCHER_THRESHOLD = 20


def parse_frame(frame_str: Optional[str]) -> Optional[int]:
    """Parse a frame string to a number ("+5" -> 5, "-12" -> -12, "i14" -> 14)."""
    if not frame_str:
        return None

    if frame_str.startswith("i"):
        match = _STARTUP_RE.search(frame_str)
        return int(match.group(1)) if match else None

    match = _SIGNED_RE.search(frame_str)
    return int(match.group(1)) if match else None


def is_launcher_structural(frame_str: Optional[str]) -> bool:
    """Launcher by notation shape: airborne marker without a parenthetical, or +20 and up.

    "+23a" -> True, "+25" -> True, "+15a" -> False, "a" -> True.
    """
    if not frame_str:
        return False

    if "a" in frame_str and "(" not in frame_str:
        match = _SIGNED_RE.search(frame_str)
        if match is None or int(match.group(1)) >= LAUNCHER_THRESHOLD:
            return True

    match = _PLUS_RE.search(frame_str)
    if match:
        return int(match.group(1)) >= LAUNCHER_THRESHOLD
    return False


def is_launcher_reward(frame_str: Optional[str]) -> bool:
    """Launcher by payoff: airborne marker AND an advantage of +20 or more.

    "+23a" -> True, "+15a" -> False, "+25" -> False.
    """
    if not frame_str:
        return False

    if "a" not in frame_str.lower():
        return False

    match = _SIGNED_RE.search(frame_str)
    if not match:
        return False
    return int(match.group(1)) >= LAUNCHER_THRESHOLD
