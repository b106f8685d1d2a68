"""Conversion between exceptions, gRPC codes and HTTP statuses."""

from __future__ import annotations

from typing import TypeVar

from semerr.kinds import (
    AbortedError,
    AlreadyExistsError,
    CanceledError,
    Code,
    DataLossError,
    DeadlineExceededError,
    FailedPreconditionError,
    InternalError,
    InvalidArgumentError,
    NotFoundError,
    OutOfRangeError,
    PermissionDeniedError,
    ResourceExhaustedError,
    SemanticError,
    UnauthenticatedError,
    UnavailableError,
    UnimplementedError,
    UnknownError,
)

_E = TypeVar("_E", bound=BaseException)

_ALL_KINDS: tuple[type[SemanticError], ...] = (
    CanceledError,
    UnknownError,
    InvalidArgumentError,
    DeadlineExceededError,
    NotFoundError,
    AlreadyExistsError,
    PermissionDeniedError,
    ResourceExhaustedError,
    FailedPreconditionError,
    AbortedError,
    OutOfRangeError,
    UnimplementedError,
    InternalError,
    UnavailableError,
    DataLossError,
    UnauthenticatedError,
)

# Kinds whose HTTP status clashes with a better suited kind.
_HTTP_SKIP: frozenset[type[SemanticError]] = frozenset(
    {
        FailedPreconditionError,  # 400, InvalidArgument
        OutOfRangeError,  # 400, InvalidArgument
        AbortedError,  # 409, AlreadyExists
        DataLossError,  # 500, Internal
        UnknownError,  # 500, Internal
    }
)

_FROM_CODE: dict[int, type[SemanticError]] = {
    int(cls().grpc_code()): cls for cls in _ALL_KINDS
}

_FROM_STATUS: dict[int, type[SemanticError]] = {
    cls().http_status(): cls for cls in _ALL_KINDS if cls not in _HTTP_SKIP
}

_UNKNOWN = UnknownError()


def find_semantic(err: BaseException | None) -> SemanticError | None:
    """Return the first semantic error in err's chain of causes, if any."""
    seen: set[int] = set()
    current = err
    while current is not None and id(current) not in seen:
        if isinstance(current, SemanticError):
            return current
        seen.add(id(current))
        if current.__cause__ is not None:
            current = current.__cause__
        elif not current.__suppress_context__:
            current = current.__context__
        else:
            current = None
    return None


def grpc_code(err: BaseException | None) -> tuple[Code, bool]:
    """Return the gRPC code for err and whether it is known.

    None gives (OK, True); a semantic error gives its code and True; anything
    else gives (UNKNOWN, False).
    """
    if err is None:
        return Code.OK, True
    found = find_semantic(err)
    if found is not None:
        return found.grpc_code(), True
    return _UNKNOWN.grpc_code(), False


def http_status(err: BaseException | None) -> tuple[int, bool]:
    """Return the HTTP status for err and whether it is known.

    None gives (200, True); a semantic error gives its status and True;
    anything else gives (500, False).
    """
    if err is None:
        return 200, True
    found = find_semantic(err)
    if found is not None:
        return found.http_status(), True
    return _UNKNOWN.http_status(), False


def from_grpc_code(code: int, err: _E | None) -> SemanticError | _E | None:
    """Wrap err in the semantic error for code; OK or unmapped returns err."""
    kind = _FROM_CODE.get(code)
    if kind is None:
        return err
    return kind(err)


def from_http_status(status: int, err: _E | None) -> SemanticError | _E | None:
    """Wrap err in the semantic error for status; 200 or unmapped returns err.

    Where several kinds share a status, the best suited one is chosen.
    """
    kind = _FROM_STATUS.get(status)
    if kind is None:
        return err
    return kind(err)