"""
Error classification.

Maps any error surfaced by a lower layer to an HTTP status code and a
sanitized, client-safe message. Rules are evaluated in a fixed order;
the first matching rule wins and anything unmatched is a 500.
The client message is always the generic reason phrase of the status,
never the error's own text. The original error stays available on
`APIError.cause` for server-side logging.
"""

from dataclasses import dataclass
from http import HTTPStatus
from typing import Callable

from sqlalchemy.exc import IntegrityError, NoResultFound

from app.domain.blog.errors import BlogNotFoundError

# https://www.postgresql.org/docs/current/errcodes-appendix.html
PG_UNIQUE_VIOLATION = "23505"
# https://www.sqlite.org/rescode.html
SQLITE_CONSTRAINT_PRIMARYKEY = 1555
SQLITE_CONSTRAINT_UNIQUE = 2067


@dataclass(frozen=True)
class APIError:
    """Request-scoped result of classifying an error.

    Attributes:
        status_code: HTTP status code to answer with.
        cause: The original error, for server-side logs only.
        message: Sanitized reason phrase for the client.
    """

    status_code: int
    cause: BaseException
    message: str

    def to_body(self) -> dict[str, int | str]:
        """Return the JSON body sent to the client."""
        return {"code": self.status_code, "message": self.message}


def is_not_found(exc: BaseException) -> bool:
    """True for the store's "no matching row" signal."""
    return isinstance(exc, (BlogNotFoundError, NoResultFound))


def is_duplicate_key(exc: BaseException) -> bool:
    """True when the driver reports a unique-constraint violation.

    psycopg exposes the SQLSTATE as `sqlstate`, psycopg2 as `pgcode`;
    sqlite3 exposes its extended result code as `sqlite_errorcode`.
    """
    if not isinstance(exc, IntegrityError):
        return False
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate == PG_UNIQUE_VIOLATION:
        return True
    return getattr(orig, "sqlite_errorcode", None) in (
        SQLITE_CONSTRAINT_PRIMARYKEY,
        SQLITE_CONSTRAINT_UNIQUE,
    )


def is_not_implemented(exc: BaseException) -> bool:
    return isinstance(exc, NotImplementedError)


@dataclass(frozen=True)
class ClassificationRule:
    """A (predicate, status) pair of the classification table."""

    matches: Callable[[BaseException], bool]
    status: HTTPStatus


CLASSIFICATION_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule(is_not_found, HTTPStatus.NOT_FOUND),
    ClassificationRule(is_duplicate_key, HTTPStatus.CONFLICT),
    ClassificationRule(is_not_implemented, HTTPStatus.NOT_IMPLEMENTED),
)
DEFAULT_STATUS = HTTPStatus.INTERNAL_SERVER_ERROR


def classify(exc: BaseException) -> APIError:
    """Classify `exc` into an APIError.

    Args:
        exc: Any error raised while serving a request.

    Returns:
        The APIError of the first matching rule, or a 500.
    """
    status = next(
        (rule.status for rule in CLASSIFICATION_RULES if rule.matches(exc)),
        DEFAULT_STATUS,
    )
    return APIError(status_code=status.value, cause=exc, message=status.phrase)
