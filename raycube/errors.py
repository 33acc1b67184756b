"""Error codes raised while loading a scene description, with their messages."""

from __future__ import annotations

from enum import Enum, auto

__all__ = ["ErrorCode", "CubError", "error_message"]


class ErrorCode(Enum):
    """Every kind of problem a scene description can have."""

    MULTIRES = auto()
    BADSCREEN = auto()
    MULTINO = auto()
    BADNO = auto()
    MULTISO = auto()
    BADSO = auto()
    MULTIWE = auto()
    BADWE = auto()
    MULTIEA = auto()
    BADEA = auto()
    MULTISPRITE = auto()
    BADSPRITE = auto()
    MULTIFLOOR = auto()
    BADFLOOR = auto()
    MULTICEIL = auto()
    BADCEIL = auto()
    INVALIDMAP = auto()
    INVALIDCHAR = auto()
    MISSINGPARAMS = auto()
    PARSING_ERROR = auto()
    NOT_CUB_ERROR = auto()
    INVALID_FILE = auto()


_MESSAGES = {
    ErrorCode.MULTIRES: "multiple resolutions",
    ErrorCode.BADSCREEN: "invalid screensize!",
    ErrorCode.MULTINO: "multiple north textures",
    ErrorCode.BADNO: "can't open north textures",
    ErrorCode.MULTISO: "multiple south textures",
    ErrorCode.BADSO: "can't open south textures",
    ErrorCode.MULTIWE: "multiple west textures",
    ErrorCode.BADWE: "can't open west textures",
    ErrorCode.MULTIEA: "multiple east textures",
    ErrorCode.BADEA: "can't open east textures",
    ErrorCode.MULTISPRITE: "multiple sprite textures",
    ErrorCode.BADSPRITE: "can't open sprite textures",
    ErrorCode.MULTIFLOOR: "multiple floor colors",
    ErrorCode.BADFLOOR: "invalid floor colors",
    ErrorCode.MULTICEIL: "multiple ceiling colors",
    ErrorCode.BADCEIL: "invalid ceiling colors",
    ErrorCode.INVALIDMAP: "invalid map",
    ErrorCode.INVALIDCHAR: "invalid character in cub text",
    ErrorCode.MISSINGPARAMS: "missing at least one parameter",
    ErrorCode.PARSING_ERROR: "there was an error while parsing",
    ErrorCode.NOT_CUB_ERROR: "please cub",
    ErrorCode.INVALID_FILE: "invalid file",
}


def error_message(code: ErrorCode) -> str:
    """Return the user-facing message for an error code."""
    return _MESSAGES[ErrorCode(code)]


class CubError(Exception):
    """A scene description could not be used; carries its ErrorCode."""

    def __init__(self, code: ErrorCode) -> None:
        self.code = ErrorCode(code)
        super().__init__(error_message(self.code))