"""Persisted presentation preference (dark theme) on a durable key/value surface."""
import logging

from sqlalchemy.exc import SQLAlchemyError

from config import DARK_MODE_KEY
from src.models.database import SessionLocal, with_db
from src.models.preference import Preference

logger = logging.getLogger(__name__)


class SqlKeyValueStore:
    """String key/value pairs stored in the ``preferences`` table."""

    def __init__(self, session_factory=None):
        self.session_factory = session_factory or SessionLocal

    def get(self, key: str) -> str | None:
        with with_db(self.session_factory) as db:
            row = db.get(Preference, key)
            return row.value if row is not None else None

    def set(self, key: str, value: str) -> None:
        with with_db(self.session_factory) as db:
            try:
                row = db.get(Preference, key)
                if row is None:
                    db.add(Preference(key=key, value=value))
                else:
                    row.value = value
                db.commit()
            except SQLAlchemyError:
                db.rollback()
                raise


class PreferenceStore:
    """Dark-theme flag: read once at startup, written on every change."""

    def __init__(self, kv=None, key: str = DARK_MODE_KEY):
        self.kv = kv if kv is not None else SqlKeyValueStore()
        self.key = key
        self._last: bool | None = None

    @property
    def value(self) -> bool:
        """Current flag: the last value read or successfully written."""
        return bool(self._last)

    def read(self) -> bool:
        """Return the stored flag; absent, unreadable, or unknown values mean False."""
        try:
            raw = self.kv.get(self.key)
        except SQLAlchemyError:
            logger.warning("Could not read preference %r, using default", self.key, exc_info=True)
            raw = None
        self._last = raw == "true"
        return self._last

    def write(self, dark: bool) -> None:
        """Persist *dark*. Storage failures are logged and otherwise ignored."""
        dark = bool(dark)
        if dark == self._last:
            return
        try:
            self.kv.set(self.key, "true" if dark else "false")
        except SQLAlchemyError:
            logger.warning("Could not save preference %r", self.key, exc_info=True)
            return
        self._last = dark
