# semerr

Semantic exceptions for Python. Each exception type stands for one of the
gRPC canonical error codes and carries the matching gRPC code and HTTP status,
so handling code can translate failures without its own lookup tables.

The package has no dependencies outside the standard library. It is a library
only; it has no command-line entry point.

## Installing

```
pip install semerr
```

## Raising semantic errors

Use an exception on its own, and its message is a fixed description:

```python
from semerr.kinds import Code, NotFoundError

err = NotFoundError()
str(err)                          # "not found"
err.grpc_code()                   # Code.NOT_FOUND (an IntEnum, equal to 5)
err.http_status()                 # 404
err.unwrap()                      # None
```

Or wrap an existing exception to give it a meaning. The message is then the
wrapped exception's message, and the wrapped exception becomes `__cause__`:

```python
from semerr.kinds import InvalidArgumentError

cause = ValueError("invalid user name: too long")
err = InvalidArgumentError(cause)
str(err)                  # "invalid user name: too long"
err.unwrap() is cause     # True
err.__cause__ is cause    # True
```

All types derive from `SemanticError` (itself an `Exception`), so a single
`except SemanticError` catches every one of them, and `except NotFoundError`
catches just one kind. Each type also exposes its values as the class
attributes `code`, `status` and `description`.

`Code` is an `IntEnum` of the gRPC canonical codes, from `Code.OK` (0) to
`Code.UNAUTHENTICATED` (16).

## Converting to gRPC codes and HTTP statuses

`grpc_code` and `http_status` in `semerr.mapping` return a pair
`(value, ok)`:

```python
from semerr.kinds import NotFoundError
from semerr.mapping import grpc_code, http_status

grpc_code(None)                  # (Code.OK, True)       no error means OK
grpc_code(NotFoundError())       # (Code.NOT_FOUND, True)
grpc_code(RuntimeError("boom"))  # (Code.UNKNOWN, False) not semantic

http_status(None)                # (200, True)
http_status(NotFoundError())     # (404, True)
http_status(RuntimeError())      # (500, False)
```

Semantic errors are looked for along the exception's `__cause__` chain, and
along `__context__` where the context is not suppressed, so an exception
raised from or while handling a semantic error is recognised too:

```python
from semerr.mapping import find_semantic

try:
    try:
        raise NotFoundError()
    except NotFoundError as inner:
        raise RuntimeError("user 10 lookup failed") from inner
except RuntimeError as outer:
    grpc_code(outer)        # (Code.NOT_FOUND, True)
    find_semantic(outer)    # the NotFoundError instance
```

`find_semantic(err)` returns the first semantic error in that chain, or
`None`.

## Converting back

```python
from semerr.kinds import Code, NotFoundError
from semerr.mapping import from_grpc_code, from_http_status

err = from_grpc_code(Code.NOT_FOUND, LookupError("user not found"))
isinstance(err, NotFoundError)  # True
str(err)                        # "user not found"

err = from_http_status(404, LookupError("user not found"))
isinstance(err, NotFoundError)  # True
```

Plain integers work as codes too. `Code.OK`, status 200 and any unmapped
value return the given error unchanged (including `None`). Passing `None`
for a mapped value gives a standalone semantic error.

Several codes share an HTTP status; for those, `from_http_status` picks the
best suited type: 400 gives `InvalidArgumentError`, 409 gives
`AlreadyExistsError`, and 500 gives `InternalError`.

## Error types

| Type | gRPC code | HTTP status | Description |
| --- | --- | --- | --- |
| `CanceledError` | 1 | 499 | canceled |
| `UnknownError` | 2 | 500 | unknown |
| `InvalidArgumentError` | 3 | 400 | invalid argument |
| `DeadlineExceededError` | 4 | 504 | deadline exceeded |
| `NotFoundError` | 5 | 404 | not found |
| `AlreadyExistsError` | 6 | 409 | already exists |
| `PermissionDeniedError` | 7 | 403 | permission denied |
| `ResourceExhaustedError` | 8 | 429 | resource exhausted |
| `FailedPreconditionError` | 9 | 400 | failed precondition |
| `AbortedError` | 10 | 409 | aborted |
| `OutOfRangeError` | 11 | 400 | out of range |
| `UnimplementedError` | 12 | 501 | unimplemented |
| `InternalError` | 13 | 500 | internal |
| `UnavailableError` | 14 | 503 | unavailable |
| `DataLossError` | 15 | 500 | data loss |
| `UnauthenticatedError` | 16 | 401 | unauthenticated |

## Running the tests

```
pip install -e ".[test]"
pytest
```