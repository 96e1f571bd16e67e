"""
Request-scoped database sessions.

Every inbound request gets its own Session. Operations commit explicitly
through their repository's ``save()``; anything left uncommitted when the
request ends is rolled back.
"""
from collections.abc import Generator

from sqlalchemy.orm import Session, sessionmaker


def session_scope(session_factory: sessionmaker) -> Generator[Session, None, None]:
    """
    Yield a session for the duration of one request.

    Usage in FastAPI dependencies:
        def get_db_session() -> Generator[Session, None, None]:
            yield from session_scope(factory)
    """
    db = session_factory()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
