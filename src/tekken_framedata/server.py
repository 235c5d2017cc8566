"""Tekken Frame Data MCP Server.

FastMCP server with 5 tools and 2 resources over the frame data engine.
Run: tekken-framedata-mcp
"""

from __future__ import annotations

import json
import logging
import os
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable, Literal, Optional

import httpx
from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations
from pydantic import ValidationError

from .core.engine import FrameDataEngine
from .core.errors import FrameDataError
from .core.models import ErrorCode, ErrorDetail, FilterSpec, Move

logger = logging.getLogger(__name__)

READ_ONLY = ToolAnnotations(readOnlyHint=True, destructiveHint=False, idempotentHint=True, openWorldHint=True)

engine = FrameDataEngine()


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncIterator[None]:
    """Configure logging on stderr; stdout belongs to the stdio transport."""
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    logger.info("Tekken frame data server starting (%d characters)", len(engine.list_characters()))
    yield


mcp = FastMCP(
    "Tekken Frame Data",
    instructions="Tekken 8 frame data from TekkenDocs — look up moves, find safe moves, launchers, fast pokes and heat engagers, ranked by strategic importance.",
    lifespan=lifespan,
)


def _dump_moves(moves: list[Move]) -> list[dict]:
    return [m.model_dump(mode="json", by_alias=True, exclude_none=True) for m in moves]


def _error(detail: ErrorDetail) -> dict:
    return {"error": detail.model_dump(mode="json", by_alias=True, exclude_none=True)}


async def _guarded(call: Callable[[], Awaitable[dict]], character: str) -> dict:
    """Run a tool body, turning engine and network failures into structured errors."""
    try:
        return await call()
    except FrameDataError as exc:
        return _error(exc.detail)
    except httpx.HTTPError as exc:
        logger.warning("Frame data fetch failed for %s: %s", character, exc)
        return _error(ErrorDetail(
            message=f"TekkenDocs request failed: {exc}",
            code=ErrorCode.NETWORK_ERROR,
            input=character,
            action="Retry shortly; the upstream frame data service may be unavailable.",
        ))


# ─── Resources ────────────────────────────────────────────────────────────────


@mcp.resource("tekken://characters", mime_type="text/plain")
def characters_resource() -> str:
    """All Tekken 8 characters, one per line."""
    return "\n".join(engine.list_characters())


@mcp.resource("tekken://characters/{character}/movelist", mime_type="application/json")
async def movelist_resource(character: str) -> str:
    """Complete movelist for a character."""
    moves = await engine.get_movelist(character)
    return json.dumps(_dump_moves(moves), indent=2)


# ─── Tools ────────────────────────────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def list_characters() -> dict:
    """Return the available Tekken 8 characters."""
    characters = engine.list_characters()
    return {"characters": characters, "count": len(characters)}


@mcp.tool(annotations=READ_ONLY)
async def get_movelist(character: str) -> dict:
    """Complete movelist for a character, each move scored by strategic importance.

    Args:
        character: Character name (e.g., 'jin', 'devil-jin').
    """
    async def call() -> dict:
        moves = await engine.get_movelist(character)
        return {"character": character.lower(), "moves": _dump_moves(moves), "count": len(moves)}

    return await _guarded(call, character)


@mcp.tool(annotations=READ_ONLY)
async def get_move(character: str, command: str) -> dict:
    """Retrieve frame data for a specific move.

    Args:
        character: Character name.
        command: Move command input (e.g., 'd/f+2', '1,2'). Case-insensitive.
    """
    async def call() -> dict:
        move = await engine.require_move(character, command)
        return {"character": character.lower(), "move": move.model_dump(mode="json", by_alias=True, exclude_none=True)}

    return await _guarded(call, character)


@mcp.tool(annotations=READ_ONLY)
async def search_moves(
    character: str,
    hitLevel: Optional[Literal["h", "m", "l", "s"]] = None,
    minDamage: Optional[int] = None,
    maxStartup: Optional[int] = None,
    minBlock: Optional[int] = None,
    maxBlock: Optional[int] = None,
    minHit: Optional[int] = None,
    minCounterHit: Optional[int] = None,
    counterHitLaunchers: Optional[bool] = None,
    safeOnBlock: Optional[bool] = None,
    hasTag: Optional[str] = None,
    limit: Optional[int] = None,
) -> dict:
    """Search and filter moves by frame data. Great for finding safe moves, launchers, fast attacks, etc.

    Args:
        character: Character name.
        hitLevel: h=high, m=mid, l=low, s=special.
        minDamage: Minimum damage of the first hit.
        maxStartup: Maximum startup frames (for fast moves).
        minBlock: Minimum block advantage (for safe moves, e.g. -10).
        maxBlock: Maximum block advantage (for unsafe moves).
        minHit: Minimum hit advantage (for plus frames).
        minCounterHit: Minimum counter hit advantage (for launchers).
        counterHitLaunchers: Only moves that launch on counter hit.
        safeOnBlock: Only moves that are -10 or better on block.
        hasTag: he=heat engager, heat, trn/tornado, chl/launcher, gb/guard break,
                rb/reversal break, charge/hold, safe, wall, screw, or any raw tag.
        limit: Maximum number of results. Default all.
    """
    try:
        spec = FilterSpec(
            hitLevel=hitLevel,
            minDamage=minDamage,
            maxStartup=maxStartup,
            minBlock=minBlock,
            maxBlock=maxBlock,
            minHit=minHit,
            minCounterHit=minCounterHit,
            counterHitLaunchers=counterHitLaunchers,
            safeOnBlock=safeOnBlock,
            hasTag=hasTag,
            limit=limit,
        )
    except ValidationError as exc:
        return _error(ErrorDetail(message=f"Invalid filters: {exc.errors()[0]['msg']}", code=ErrorCode.INVALID_INPUT, input=character))

    async def call() -> dict:
        moves = await engine.search_moves(character, spec)
        return {
            "character": character.lower(),
            "filters": spec.model_dump(by_alias=True, exclude_none=True),
            "moves": _dump_moves(moves),
            "count": len(moves),
        }

    return await _guarded(call, character)


@mcp.tool(annotations=READ_ONLY)
async def get_key_moves(character: str) -> dict:
    """The most important moves for a character: best launchers, fast pokes, safe moves and heat engagers.

    Args:
        character: Character name.
    """
    async def call() -> dict:
        key_moves = await engine.get_key_moves(character)
        return key_moves.model_dump(mode="json", by_alias=True, exclude_none=True)

    return await _guarded(call, character)


def main():
    """Entry point for the CLI command."""
    transport = os.environ.get("MCP_TRANSPORT", "stdio")
    mcp.run(transport=transport)


if __name__ == "__main__":
    main()
