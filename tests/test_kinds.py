import pytest

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

KINDS = [
    (CanceledError, 1, 499, "canceled"),
    (UnknownError, 2, 500, "unknown"),
    (InvalidArgumentError, 3, 400, "invalid argument"),
    (DeadlineExceededError, 4, 504, "deadline exceeded"),
    (NotFoundError, 5, 404, "not found"),
    (AlreadyExistsError, 6, 409, "already exists"),
    (PermissionDeniedError, 7, 403, "permission denied"),
    (ResourceExhaustedError, 8, 429, "resource exhausted"),
    (FailedPreconditionError, 9, 400, "failed precondition"),
    (AbortedError, 10, 409, "aborted"),
    (OutOfRangeError, 11, 400, "out of range"),
    (UnimplementedError, 12, 501, "unimplemented"),
    (InternalError, 13, 500, "internal"),
    (UnavailableError, 14, 503, "unavailable"),
    (DataLossError, 15, 500, "data loss"),
    (UnauthenticatedError, 16, 401, "unauthenticated"),
]


def test_standalone():
    err = NotFoundError()
    assert str(err) == "not found"
    assert err.grpc_code() == 5
    assert err.http_status() == 404


def test_annotate():
    err = NotFoundError(ValueError("user not found"))
    assert str(err) == "user not found"
    assert isinstance(err, NotFoundError)
    assert err.grpc_code() == 5
    assert err.http_status() == 404


@pytest.mark.parametrize("cls,code,status,desc", KINDS)
def test_kind_properties(cls, code, status, desc):
    err = cls()
    assert str(err) == desc
    assert err.grpc_code() == Code(code)
    assert err.http_status() == status
    assert err.unwrap() is None


@pytest.mark.parametrize("cls,code,status,desc", KINDS)
def test_kind_wraps(cls, code, status, desc):
    inner = RuntimeError("boom")
    err = cls(inner)
    assert str(err) == "boom"
    assert err.unwrap() is inner
    assert err.__cause__ is inner
    assert err.grpc_code() == Code(code)
    assert err.http_status() == status


def test_is_catchable_as_base():
    err = PermissionDeniedError()
    with pytest.raises(SemanticError) as info:
        raise err
    assert info.value is err
    assert err.grpc_code() == Code.PERMISSION_DENIED
    assert err.http_status() == 403


def test_code_values():
    assert Code(0) is Code.OK
    assert Code(5) is Code.NOT_FOUND
    assert Code(16) is Code.UNAUTHENTICATED
    assert len(Code) == 17
    with pytest.raises(ValueError):
        Code(999)


def test_repr():
    assert repr(NotFoundError()) == "NotFoundError()"
    assert repr(NotFoundError(ValueError("x"))) == "NotFoundError(ValueError('x'))"


def test_distinct_codes():
    found = {Code(cls().grpc_code()) for cls, *_ in KINDS}
    assert len(found) == len(KINDS)
    assert found == set(Code) - {Code.OK}