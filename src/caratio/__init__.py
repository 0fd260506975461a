import caratio.version
from _caratio.errors import (
    CaratSyntaxError,
    DuplicateTokenError,
    ExpectedButFoundError,
    RequiredFieldMissingError,
    UnexpectedTokenError,
    WrongFileModeError,
)
from _caratio.reader import CaratReader, Slot
from _caratio.reading import open_reader, read_tokens
from _caratio.token import Token
from _caratio.values import ValueKind

__author__ = """Carat developers"""

__version__ = caratio.version.version

__all__ = [
    "CaratReader",
    "CaratSyntaxError",
    "DuplicateTokenError",
    "ExpectedButFoundError",
    "RequiredFieldMissingError",
    "Slot",
    "Token",
    "UnexpectedTokenError",
    "ValueKind",
    "WrongFileModeError",
    "open_reader",
    "read_tokens",
]
