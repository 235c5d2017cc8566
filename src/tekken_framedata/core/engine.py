"""Frame data engine — validated, cached, scored access to movelists.

``FrameDataEngine`` owns its ``TTLCache``; there is no module-level cache.
The upstream fetcher is injectable so tests can run without a network.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Awaitable, Callable, Optional

from pydantic import ValidationError

from .cache import DEFAULT_TTL_SECONDS, TTLCache
from .clients import tekkendocs
from .errors import CharacterNotFoundError, InvalidInputError, InvalidPayloadError, MoveNotFoundError
from .models import FilterSpec, KeyMoves, Move
from .roster import character_not_found, is_valid_character, list_characters
from .scoring import decorate
from .search import filter_moves

logger = logging.getLogger(__name__)

MOVES_FIELD = "framesNormal"

Fetcher = Callable[[str], Awaitable[Any]]


class FrameDataEngine:
    """Query and rank a character's moves."""

    def __init__(
        self,
        fetcher: Optional[Fetcher] = None,
        cache: Optional[TTLCache] = None,
        ttl: float = DEFAULT_TTL_SECONDS,
        key_func: Optional[Callable[[str], str]] = None,
    ):
        self.fetcher = fetcher or tekkendocs.fetch_framedata
        self.cache = cache if cache is not None else TTLCache()
        self.ttl = ttl
        self.key_func = key_func or tekkendocs.framedata_url

    @staticmethod
    def list_characters() -> list[str]:
        return list_characters()

    @staticmethod
    def _normalize_character(character: str) -> str:
        name = (character or "").strip().lower()
        if not name:
            raise InvalidInputError("Character name must not be empty", input=character or "")
        if not is_valid_character(name):
            logger.info("Unknown character requested: %r", name)
            raise CharacterNotFoundError(character_not_found(name))
        return name

    async def _fetch_payload(self, character: str) -> Any:
        return await self.cache.get_or_fetch(
            self.key_func(character),
            lambda: self.fetcher(character),
            self.ttl,
        )

    async def get_movelist(self, character: str) -> list[Move]:
        """Return every move for ``character``, each scored with strategic importance.

        Raises:
            InvalidInputError: empty character name.
            CharacterNotFoundError: name not on the roster (carries suggestions).
            InvalidPayloadError: upstream payload has no move array.
                Individual malformed records are logged and skipped.
            httpx.HTTPError: upstream fetch failed.
        """
        name = self._normalize_character(character)
        payload = await self._fetch_payload(name)

        records = payload.get(MOVES_FIELD) if isinstance(payload, Mapping) else None
        if not isinstance(records, list):
            logger.error("Unexpected API response structure for %s: %r", name, type(payload).__name__)
            raise InvalidPayloadError(f"Invalid response structure from TekkenDocs API for character: {name}")

        moves = []
        for record in records:
            try:
                move = Move.model_validate(record)
            except ValidationError as exc:
                logger.warning("Skipping malformed move record for %s: %s", name, exc.errors()[0]["msg"])
                continue
            moves.append(decorate(move))
        return moves

    async def get_move(self, character: str, command: str) -> Optional[Move]:
        """Find a move by exact, case-insensitive command. First match wins."""
        if not command or not command.strip():
            raise InvalidInputError("Move command must not be empty", input=command or "")

        wanted = command.lower()
        for move in await self.get_movelist(character):
            if move.command and move.command.lower() == wanted:
                return move
        return None

    async def require_move(self, character: str, command: str) -> Move:
        """Like ``get_move`` but raises ``MoveNotFoundError`` instead of returning None."""
        move = await self.get_move(character, command)
        if move is None:
            raise MoveNotFoundError(character, command)
        return move

    async def search_moves(self, character: str, spec: Optional[FilterSpec] = None) -> list[Move]:
        """Filter the decorated movelist. An empty spec returns it unchanged.

        ``FilterSpec`` itself rejects a ``limit`` below 1 with a pydantic
        ``ValidationError`` at construction, before this is called.
        """
        moves = await self.get_movelist(character)
        return filter_moves(moves, spec or FilterSpec())

    async def get_key_moves(self, character: str) -> KeyMoves:
        """Best launchers, fast pokes, safe moves and heat engagers, five of each."""
        moves = await self.get_movelist(character)
        return KeyMoves(
            character=self._normalize_character(character),
            launchers=filter_moves(moves, FilterSpec(min_counter_hit=20, limit=5)),
            fast_pokes=filter_moves(moves, FilterSpec(max_startup=12, min_block=-10, limit=5)),
            safe_moves=filter_moves(moves, FilterSpec(min_block=-10, limit=5)),
            heat_engagers=filter_moves(moves, FilterSpec(has_tag="he", limit=5)),
        )
