"""Tekken Frame Data MCP Server.

Ask your AI about Tekken 8 frame data — safe moves, launchers, fast pokes,
heat engagers. Moves are fetched from TekkenDocs, scored by strategic
importance, and filterable by frame advantage, startup and tags.
"""

__version__ = "0.1.0"

from .core.engine import FrameDataEngine
