from enum import Enum


class ErrorKind(str, Enum):
    MALFORMED_MESSAGE = "malformed_message"
    WRONG_CREDENTIALS = "wrong_credentials"
    UNREGISTERED_CONNECTION = "unregistered_connection"
    UNKNOWN_OR_INVALID_TARGET = "unknown_or_invalid_target"


class GameError(Exception):
    kind: ErrorKind


class MalformedMessage(GameError):
    kind = ErrorKind.MALFORMED_MESSAGE


class WrongCredentials(GameError):
    kind = ErrorKind.WRONG_CREDENTIALS

    def __init__(self, name: str):
        super().__init__(f"Wrong password for player {name}")
        self.name = name


class UnregisteredConnection(GameError):
    kind = ErrorKind.UNREGISTERED_CONNECTION


class UnknownOrInvalidTarget(GameError):
    kind = ErrorKind.UNKNOWN_OR_INVALID_TARGET
