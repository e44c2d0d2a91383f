"""Remote user directory: one-shot fetch into an in-memory collection."""
import logging

import requests

from config import USERS_API_URL, USERS_API_TIMEOUT
from src.models.user import Collection, LoadStatus, UserRecord

logger = logging.getLogger(__name__)


class UserDirectoryError(Exception):
    """Raised when the user directory cannot be fetched or parsed."""


class UserDirectoryClient:
    """Plain HTTP client for the user directory endpoint."""

    def __init__(self, url: str = USERS_API_URL, timeout: float = USERS_API_TIMEOUT):
        self.url = url
        self.timeout = timeout

    def fetch_users(self) -> list[UserRecord]:
        """GET the whole directory in one round trip.

        Returns records in the order the server sent them. Raises
        UserDirectoryError on any transport, status, or payload problem.
        """
        try:
            resp = requests.get(self.url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise UserDirectoryError(f"Failed to fetch data: {exc}") from exc

        try:
            data = resp.json()
        except ValueError as exc:
            raise UserDirectoryError("Failed to parse data: response is not valid JSON") from exc

        if not isinstance(data, list):
            raise UserDirectoryError(
                f"Failed to parse data: expected a list, got {type(data).__name__}"
            )
        try:
            return [UserRecord.from_dict(item) for item in data]
        except ValueError as exc:
            raise UserDirectoryError(f"Failed to parse data: {exc}") from exc


class CollectionStore:
    """Holds the loaded collection. Loads at most once per session."""

    def __init__(self, client: UserDirectoryClient | None = None):
        self.client = client or UserDirectoryClient()
        self._collection = Collection()

    @property
    def collection(self) -> Collection:
        return self._collection

    def load(self) -> Collection:
        """Perform the single fetch attempt and return the terminal collection.

        Never raises; failures are reported through ``Collection.reason``.
        Calling again after the first attempt returns the same result.
        """
        if self._collection.status is not LoadStatus.PENDING:
            return self._collection

        logger.info("Fetching users from %s", self.client.url)
        try:
            users = self.client.fetch_users()
        except UserDirectoryError as exc:
            logger.warning("User directory load failed: %s", exc)
            self._collection = Collection.failed(str(exc))
        else:
            logger.info("Loaded %d users", len(users))
            self._collection = Collection.ready(users)
        return self._collection
