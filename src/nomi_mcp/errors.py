"""Error type shared by the dispatcher and the Nomi API client.

Every failure that can happen while serving a tool call is a ``NomiError``
tagged with an ``ErrorKind``. The dispatcher converts these into error
envelopes; nothing else in the call path catches them.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Categories of per-call failure."""

    MISSING_ARGUMENTS = "missing_arguments"
    CONFIGURATION = "configuration"
    UNKNOWN_OPERATION = "unknown_operation"
    REMOTE = "remote"
    TRANSPORT = "transport"


class NomiError(Exception):
    """A failure while serving one tool invocation.

    Attributes:
        kind: Failure category.
        message: Human-readable message reported back to the host.
        operation: Tool name, when the failure concerns a specific tool.
        status_code: HTTP status, for ``ErrorKind.REMOTE``.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        operation: str | None = None,
        status_code: int | None = None,
    ) -> None:
        self.kind = kind
        self.message = message
        self.operation = operation
        self.status_code = status_code
        super().__init__(message)

    @classmethod
    def missing_arguments(cls, detail: str = "No arguments provided") -> NomiError:
        return cls(ErrorKind.MISSING_ARGUMENTS, detail)

    @classmethod
    def configuration(cls, message: str) -> NomiError:
        return cls(ErrorKind.CONFIGURATION, message)

    @classmethod
    def unknown_operation(cls, name: str) -> NomiError:
        return cls(ErrorKind.UNKNOWN_OPERATION, f"Unknown tool: {name}", operation=name)

    @classmethod
    def remote(cls, category: str, status_code: int) -> NomiError:
        return cls(ErrorKind.REMOTE, f"API Error: {category}", status_code=status_code)

    @classmethod
    def transport(cls, detail: str) -> NomiError:
        return cls(ErrorKind.TRANSPORT, f"API Error: {detail}")
