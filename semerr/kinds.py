"""Semantic error types modelled on the gRPC canonical error codes."""

from __future__ import annotations

from enum import IntEnum
from typing import ClassVar


class Code(IntEnum):
    """A gRPC canonical error code."""

    OK = 0
    CANCELED = 1
    UNKNOWN = 2
    INVALID_ARGUMENT = 3
    DEADLINE_EXCEEDED = 4
    NOT_FOUND = 5
    ALREADY_EXISTS = 6
    PERMISSION_DENIED = 7
    RESOURCE_EXHAUSTED = 8
    FAILED_PRECONDITION = 9
    ABORTED = 10
    OUT_OF_RANGE = 11
    UNIMPLEMENTED = 12
    INTERNAL = 13
    UNAVAILABLE = 14
    DATA_LOSS = 15
    UNAUTHENTICATED = 16


class SemanticError(Exception):
    """Base class of all semantic errors.

    A semantic error may stand alone or wrap another exception. Its message is
    the wrapped exception's message, or a fixed description when there is none.
    """

    code: ClassVar[Code]
    status: ClassVar[int]
    description: ClassVar[str]

    def __init_subclass__(
        cls,
        *,
        code: Code | None = None,
        status: int | None = None,
        description: str | None = None,
        **kwargs: object,
    ) -> None:
        super().__init_subclass__(**kwargs)
        if code is not None:
            cls.code = code
        if status is not None:
            cls.status = status
        if description is not None:
            cls.description = description

    def __init__(self, err: BaseException | None = None) -> None:
        super().__init__(*(() if err is None else (err,)))
        self.err = err
        if err is not None:
            self.__cause__ = err

    def __str__(self) -> str:
        if self.err is None:
            return self.description
        return str(self.err)

    def __repr__(self) -> str:
        if self.err is None:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self.err!r})"

    def unwrap(self) -> BaseException | None:
        """Return the wrapped exception, if any."""
        return self.err

    def grpc_code(self) -> Code:
        """Return the gRPC code of this error kind."""
        return self.code

    def http_status(self) -> int:
        """Return the HTTP status of this error kind."""
        return self.status


class CanceledError(
    SemanticError, code=Code.CANCELED, status=499, description="canceled"
):
    """Semantic error for Canceled."""


class UnknownError(
    SemanticError, code=Code.UNKNOWN, status=500, description="unknown"
):
    """Semantic error for Unknown."""


class InvalidArgumentError(
    SemanticError,
    code=Code.INVALID_ARGUMENT,
    status=400,
    description="invalid argument",
):
    """Semantic error for InvalidArgument."""


class DeadlineExceededError(
    SemanticError,
    code=Code.DEADLINE_EXCEEDED,
    status=504,
    description="deadline exceeded",
):
    """Semantic error for DeadlineExceeded."""


class NotFoundError(
    SemanticError, code=Code.NOT_FOUND, status=404, description="not found"
):
    """Semantic error for NotFound."""


class AlreadyExistsError(
    SemanticError,
    code=Code.ALREADY_EXISTS,
    status=409,
    description="already exists",
):
    """Semantic error for AlreadyExists."""


class PermissionDeniedError(
    SemanticError,
    code=Code.PERMISSION_DENIED,
    status=403,
    description="permission denied",
):
    """Semantic error for PermissionDenied."""


class ResourceExhaustedError(
    SemanticError,
    code=Code.RESOURCE_EXHAUSTED,
    status=429,
    description="resource exhausted",
):
    """Semantic error for ResourceExhausted."""


class FailedPreconditionError(
    SemanticError,
    code=Code.FAILED_PRECONDITION,
    status=400,
    description="failed precondition",
):
    """Semantic error for FailedPrecondition."""


class AbortedError(
    SemanticError, code=Code.ABORTED, status=409, description="aborted"
):
    """Semantic error for Aborted."""


class OutOfRangeError(
    SemanticError, code=Code.OUT_OF_RANGE, status=400, description="out of range"
):
    """Semantic error for OutOfRange."""


class UnimplementedError(
    SemanticError,
    code=Code.UNIMPLEMENTED,
    status=501,
    description="unimplemented",
):
    """Semantic error for Unimplemented."""


class InternalError(
    SemanticError, code=Code.INTERNAL, status=500, description="internal"
):
    """Semantic error for Internal."""


class UnavailableError(
    SemanticError, code=Code.UNAVAILABLE, status=503, description="unavailable"
):
    """Semantic error for Unavailable."""


class DataLossError(
    SemanticError, code=Code.DATA_LOSS, status=500, description="data loss"
):
    """Semantic error for DataLoss."""


class UnauthenticatedError(
    SemanticError,
    code=Code.UNAUTHENTICATED,
    status=401,
    description="unauthenticated",
):
    """Semantic error for Unauthenticated."""