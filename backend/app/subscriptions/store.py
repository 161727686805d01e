import json
import logging
import os
import threading
from pathlib import Path
from typing import Any

from app.core.config import settings
from app.core.errors import InvalidEmailError, PersistenceError

logger = logging.getLogger(__name__)


def normalize_email(email: Any) -> str:
    """Trim the address and require an "@"; nothing stricter is checked."""
    text = email.strip() if isinstance(email, str) else ""
    if not text or "@" not in text:
        raise InvalidEmailError()
    return text


class SubscriberStore:
    """
    Ordered, deduplicated list of subscriber emails kept in a JSON array file.
    Each addition rewrites the whole file; one writer at a time per store.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self._lock = threading.Lock()

    def load(self) -> list[str]:
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise PersistenceError(f"Unable to read subscribers from {self.path}: {e}") from e
        if not isinstance(data, list):
            raise PersistenceError(f"Subscriber file {self.path} does not hold a JSON array")
        return data

    def _write(self, emails: list[str]) -> None:
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(emails, indent=2), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as e:
            raise PersistenceError(f"Unable to write subscribers to {self.path}: {e}") from e

    def subscribe(self, email: Any) -> bool:
        """Add ``email``. Returns False when it was already subscribed."""
        address = normalize_email(email)
        with self._lock:
            emails = self.load()
            if address in emails:
                return False
            emails.append(address)
            self._write(emails)
        logger.info("New subscriber: %s", address)
        return True


_subscriber_store_instance = None


def get_subscriber_store() -> SubscriberStore:
    global _subscriber_store_instance
    if _subscriber_store_instance is None:
        _subscriber_store_instance = SubscriberStore(settings.SUBSCRIBERS_FILE)
    return _subscriber_store_instance
