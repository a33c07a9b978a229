"""Short-lived storage for a category chosen before its recipe form is submitted."""

import threading
import time
import uuid
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from loguru import logger

from recipe_models import RecipeCategory


@dataclass(frozen=True)
class PendingSubmission:
    category: RecipeCategory
    expires_at: float


class PendingSubmissionStore:
    """Maps correlation tokens to pending categories until they are taken or expire."""

    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.monotonic):
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._pending: Dict[str, PendingSubmission] = {}
        self._lock = threading.Lock()

    def put(self, category: RecipeCategory) -> str:
        if not isinstance(category, RecipeCategory):
            raise TypeError("category must be a RecipeCategory")

        token = uuid.uuid4().hex
        with self._lock:
            self._pending[token] = PendingSubmission(category, self._clock() + self.ttl_seconds)
        logger.debug(f"Stored pending {category.label} submission {token}")
        return token

    def take(self, token: str) -> Optional[RecipeCategory]:
        """Remove and return the category for token, or None when unknown or expired."""
        with self._lock:
            pending = self._pending.pop(token, None)

        if pending is None:
            logger.debug(f"No pending submission for {token}")
            return None
        if pending.expires_at <= self._clock():
            logger.info(f"Pending submission {token} expired")
            return None
        return pending.category

    def purge_expired(self) -> int:
        now = self._clock()
        with self._lock:
            expired = [token for token, pending in self._pending.items() if pending.expires_at <= now]
            for token in expired:
                del self._pending[token]

        if expired:
            logger.debug(f"Purged {len(expired)} expired pending submissions")
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._pending)
