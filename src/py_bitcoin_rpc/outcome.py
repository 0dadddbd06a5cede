# Copyright (c) 2023-2024, Andrey Dubovik <andrei@dubovik.eu>

"""Tagged outcomes of a remote procedure call."""

# Load standard packages
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """A reason a remote procedure call did not produce a result."""

    TRANSPORT_FAILURE = 'transport failure'
    MALFORMED_RESPONSE = 'malformed response'
    REMOTE_ERROR = 'remote error'


@dataclass(eq=False)
class RPCError(Exception):
    """A failed remote procedure call, raised on explicit request only."""

    kind: ErrorKind
    detail: str
    code: None | int = None

    def __str__(self) -> str:
        code = '' if self.code is None else f' {self.code}'
        return f'{self.kind.value}{code}: {self.detail}'


class Outcome(ABC):
    """A prototype for the result of a remote procedure call."""

    @property
    @abstractmethod
    def value(self) -> Any:
        """Get the result, or None when there is nothing to return."""

    @abstractmethod
    def __bool__(self) -> bool:
        pass

    def unwrap(self) -> Any:
        """Get the result, raise RPCError if the call failed."""
        return self.value


@dataclass(frozen=True)
class Ok(Outcome):
    """A call succeeded and returned some data."""

    result: Any

    @property
    def value(self) -> Any:
        return self.result

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class OkNull(Outcome):
    """A call succeeded without returning any data."""

    @property
    def value(self) -> None:
        return None

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class Err(Outcome):
    """A call failed in transit, on decoding or on the node."""

    kind: ErrorKind
    detail: str
    code: None | int = None

    @property
    def value(self) -> None:
        return None

    def __bool__(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise RPCError(self.kind, self.detail, self.code)
