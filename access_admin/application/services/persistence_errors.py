"""Classification of raw persistence errors into the failure kinds the service translates.

SQLAlchemy wraps driver errors (DBAPIError.orig); the asyncpg adapter keeps
the original asyncpg error as __cause__. The SQLSTATE is read from
whichever of those carries it (sqlstate for asyncpg/psycopg 3, pgcode for
psycopg2).
"""

from __future__ import annotations

from enum import Enum

from sqlalchemy import exc as sa_exc

from access_admin.domain.enums import DBErrorCode


class PersistenceFailure(str, Enum):
    """Kinds of persistence failure the user service distinguishes."""

    UNIQUE_VIOLATION = "unique_violation"
    FOREIGN_KEY_VIOLATION = "foreign_key_violation"
    NOT_NULL_VIOLATION = "not_null_violation"
    TIMEOUT = "timeout"
    UNKNOWN = "unknown"


_SQLSTATE_FAILURES: dict[str, PersistenceFailure] = {
    DBErrorCode.PG_UNIQUE_CONSTRAINT_VIOLATION.value: PersistenceFailure.UNIQUE_VIOLATION,
    DBErrorCode.PG_FOREIGN_KEY_CONSTRAINT_VIOLATION.value: PersistenceFailure.FOREIGN_KEY_VIOLATION,
    DBErrorCode.PG_NOT_NULL_CONSTRAINT_VIOLATION.value: PersistenceFailure.NOT_NULL_VIOLATION,
    DBErrorCode.PG_QUERY_CANCELED.value: PersistenceFailure.TIMEOUT,
}


def _error_chain(error: BaseException) -> list[BaseException]:
    """error, its wrapped driver error (orig) and their causes, without repeats."""
    chain: list[BaseException] = []
    pending: list[BaseException | None] = [error]
    while pending:
        current = pending.pop(0)
        if current is None or any(current is seen for seen in chain):
            continue
        chain.append(current)
        orig = getattr(current, "orig", None)
        pending.append(orig if isinstance(orig, BaseException) else None)
        pending.append(current.__cause__)
    return chain


def get_sqlstate(error: BaseException) -> str | None:
    """Return the SQLSTATE carried by error or any wrapped error, else None."""
    for candidate in _error_chain(error):
        for attr in ("sqlstate", "pgcode"):
            code = getattr(candidate, attr, None)
            if isinstance(code, str) and code:
                return code
    return None


def is_timeout(error: BaseException) -> bool:
    """True for driver/pool timeouts and statements canceled by the server."""
    for candidate in _error_chain(error):
        # asyncio.TimeoutError is an alias of the builtin since Python 3.11.
        if isinstance(candidate, (TimeoutError, sa_exc.TimeoutError)):
            return True
    return get_sqlstate(error) == DBErrorCode.PG_QUERY_CANCELED.value


def classify_persistence_error(error: BaseException) -> PersistenceFailure:
    """Classify error into a PersistenceFailure (UNKNOWN when unrecognized)."""
    if is_timeout(error):
        return PersistenceFailure.TIMEOUT
    sqlstate = get_sqlstate(error)
    if sqlstate is None:
        return PersistenceFailure.UNKNOWN
    return _SQLSTATE_FAILURES.get(sqlstate, PersistenceFailure.UNKNOWN)
