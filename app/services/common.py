from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import DomainError
from app.core.logging import get_logger


def commit(db: Session, *, on_integrity_error: DomainError) -> None:
    """Commit the session's transaction, rolling back on any failure.

    A constraint violation at this point means a concurrent request changed
    the rows after the application-level checks ran (a duplicate insert, a
    deleted teacher). The caller gets ``on_integrity_error``, the same error
    its own check would have raised.
    """
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        get_logger().warning(
            "db.integrity_error",
            error=type(on_integrity_error).__name__,
            detail=str(exc.orig),
        )
        raise on_integrity_error from exc
    except Exception:
        db.rollback()
        raise
