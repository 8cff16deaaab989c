import contextlib

from sqlalchemy.exc import IntegrityError, SQLAlchemyError


class PortfolioError(Exception):
    """Base class for every error raised by the portfolio domain."""


class ValidationError(PortfolioError, ValueError):
    """
    Raised when an input payload is malformed or out of range.

    Attributes:
        errors (list[dict]): Field-level details, each entry shaped as
            ``{"field": <dotted path>, "message": <reason>}``.
    """

    def __init__(self, message: str, errors: list[dict] | None = None):
        super().__init__(message)
        self.errors = errors or []


class NotFoundError(PortfolioError, LookupError):
    """Raised when an update or delete targets an id that does not exist."""


class ConflictError(PortfolioError):
    """Raised when the personal info singleton invariant would be violated."""


class StoreError(PortfolioError, RuntimeError):
    """Raised when the underlying store fails (connection loss, constraint violation)."""


@contextlib.contextmanager
def store_errors(action: str, conflict_on_integrity: bool = False):
    """
    Translate SQLAlchemy failures raised inside the block into domain errors.

    Domain errors raised inside the block pass through untouched.

    Args:
        action (str): Short description of the operation, used in the message.
        conflict_on_integrity (bool): When True an IntegrityError is reported
            as ConflictError instead of StoreError.

    Raises:
        ConflictError: On IntegrityError when ``conflict_on_integrity`` is set.
        StoreError: On any other SQLAlchemyError.
    """
    try:
        yield
    except IntegrityError as e:
        if conflict_on_integrity:
            raise ConflictError(f"{action} conflicts with an existing record") from e
        raise StoreError(f"{action} violated a store constraint") from e
    except SQLAlchemyError as e:
        raise StoreError(f"{action} failed: {type(e).__name__}") from e
