"""Tekken 8 character roster and fuzzy name matching.

The roster is closed: names outside it are rejected before any upstream
request. Rejections carry ranked suggestions so callers can auto-correct.
"""

from __future__ import annotations

from .models import ErrorCode, ErrorDetail, SimilarityCandidate

# Update this list when new characters are released
TEKKEN8_CHARACTERS: tuple[str, ...] = (
    "alisa",
    "anna",
    "asuka",
    "armor-king",
    "azucena",
    "bryan",
    "claudio",
    "clive",
    "devil-jin",
    "dragunov",
    "eddy",
    "fahkumram",
    "feng",
    "heihachi",
    "hwoarang",
    "jack-8",
    "jin",
    "jun",
    "kazuya",
    "king",
    "kuma",
    "lars",
    "law",
    "lee",
    "leo",
    "leroy",
    "lidia",
    "lili",
    "nina",
    "panda",
    "paul",
    "raven",
    "reina",
    "shaheen",
    "steve",
    "victor",
    "xiaoyu",
    "yoshimitsu",
    "zafina",
)

DID_YOU_MEAN_THRESHOLD = 0.6
SUGGESTION_LIMIT = 3


def list_characters() -> list[str]:
    """Return a snapshot of the roster in canonical order."""
    return list(TEKKEN8_CHARACTERS)


def is_valid_character(name: str) -> bool:
    return name.lower() in TEKKEN8_CHARACTERS


def levenshtein(a: str, b: str) -> int:
    """Edit distance between two strings (insert, delete, substitute)."""
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            if ca == cb:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j - 1], previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def similarity(a: str, b: str) -> float:
    """Case-insensitive similarity in [0, 1]; 1 means identical."""
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    return 1 - levenshtein(a.lower(), b.lower()) / max_len


def find_similar_characters(name: str, limit: int = SUGGESTION_LIMIT) -> list[SimilarityCandidate]:
    """Rank roster entries by similarity to ``name``. Ties keep roster order."""
    scored = [SimilarityCandidate(name=char, similarity=similarity(name, char)) for char in TEKKEN8_CHARACTERS]
    scored.sort(key=lambda c: c.similarity, reverse=True)
    return scored[:limit]


def character_not_found(name: str) -> ErrorDetail:
    """Build the structured error for a name that is not on the roster."""
    suggestions = find_similar_characters(name)
    best = suggestions[0]
    confident = best.similarity > DID_YOU_MEAN_THRESHOLD

    if confident:
        action = f'Did you mean "{best.name}"? The server can auto-correct this for you.'
    else:
        action = "Please use list_characters() to see all available characters."

    similar = ", ".join(f"{s.name} ({round(s.similarity * 100)}% match)" for s in suggestions)
    return ErrorDetail(
        message=f'Character "{name}" not found',
        code=ErrorCode.CHARACTER_NOT_FOUND,
        input=name,
        suggestions=suggestions,
        did_you_mean=best.name if confident else None,
        action=action,
        alternatives=[
            "Use list_characters() to see all available characters",
            f"Similar names: {similar}",
        ],
    )
