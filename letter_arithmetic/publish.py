"""Publishing only the newest render.

Renders are triggered on every edit and may finish out of order. Each request
takes a monotonically increasing id from :meth:`LatestResultSink.begin`; a
result is committed only if its id is higher than the last committed one, so a
superseded render never replaces a newer result.
"""

import itertools
import logging
import threading
from typing import Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LatestResultSink(Generic[T]):
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ids = itertools.count(1)
        self._committed_id = 0
        self._latest: Optional[T] = None

    def begin(self) -> int:
        """Register a new request and return its id."""
        with self._lock:
            return next(self._ids)

    def commit(self, request_id: int, result: T) -> bool:
        """Publish ``result`` unless a newer request has already been committed.

        Returns:
            bool: ``True`` if the result became the latest one.
        """
        with self._lock:
            if request_id <= self._committed_id:
                logger.debug(
                    "discarding stale result %d (committed %d)",
                    request_id,
                    self._committed_id,
                )
                return False
            self._committed_id = request_id
            self._latest = result
            return True

    @property
    def latest(self) -> Optional[T]:
        with self._lock:
            return self._latest

    @property
    def committed_id(self) -> int:
        with self._lock:
            return self._committed_id
