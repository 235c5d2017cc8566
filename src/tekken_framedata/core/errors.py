"""Exceptions raised by the frame data engine."""

from __future__ import annotations

from .models import ErrorCode, ErrorDetail


class FrameDataError(Exception):
    """Base error carrying a structured ``ErrorDetail`` payload."""

    def __init__(self, detail: ErrorDetail):
        super().__init__(detail.message)
        self.detail = detail

    @property
    def code(self) -> ErrorCode:
        return self.detail.code


class InvalidInputError(FrameDataError):
    """Malformed or empty identifier, rejected before any I/O."""

    def __init__(self, message: str, input: str = ""):
        super().__init__(ErrorDetail(message=message, code=ErrorCode.INVALID_INPUT, input=input))


class CharacterNotFoundError(FrameDataError):
    """Name is not on the roster. ``detail`` carries fuzzy suggestions."""

    @property
    def did_you_mean(self):
        return self.detail.did_you_mean


class MoveNotFoundError(FrameDataError):
    """No move with the requested command exists for the character."""

    def __init__(self, character: str, command: str):
        super().__init__(ErrorDetail(
            message=f"Move {command} not found for {character}",
            code=ErrorCode.MOVE_NOT_FOUND,
            input=command,
            action=f"Use get_movelist('{character}') or search_moves to find valid commands.",
        ))


class InvalidPayloadError(ValueError):
    """Upstream payload does not expose the expected move array."""
