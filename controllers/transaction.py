# controllers/transaction.py

from contextlib import contextmanager

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from extensions import db
from controllers.errors import StorageError


class SessionBound:
    """
    Base for the controllers: holds the session they work on. Without an
    explicit one they use the application's Flask-SQLAlchemy session.
    """

    def __init__(self, session=None):
        self._session = session

    @property
    def session(self):
        return self._session if self._session is not None else db.session


@contextmanager
def atomic(session, what, commit=True, reraise=()):
    """
    Run the block as one unit: commit at the end, roll everything back on
    any error. Database errors leave as StorageError unless listed in
    *reraise*; domain errors propagate unchanged.
    """
    try:
        yield session
        if commit:
            session.commit()
    except reraise:
        session.rollback()
        raise
    except SQLAlchemyError as exc:
        session.rollback()
        detail = getattr(exc, "orig", None) or exc
        current_app.logger.error("💥 %s failed, rolled back: %s", what, detail)
        raise StorageError(f"{what} failed: {detail}") from exc
    except Exception:
        session.rollback()
        raise
