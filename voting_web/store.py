"""In-memory vote counters shared by every request of one application."""
import logging
import threading
from typing import Iterable, Tuple

from .models import OPTION_IDS, InvalidOptionError, VoteTally

logger = logging.getLogger(__name__)


class VoteStore:
    """
    Lock-guarded vote counters for a fixed set of options.

    The option set is fixed when the store is created. Counts start at zero,
    only grow through increment() and are lost when the process exits.
    """

    def __init__(self, options: Iterable[str] = OPTION_IDS):
        self._options: Tuple[str, ...] = tuple(options)
        if not self._options:
            raise ValueError("VoteStore needs at least one option")
        self._counts: VoteTally = {option: 0 for option in self._options}
        self._lock = threading.Lock()

    @property
    def options(self) -> Tuple[str, ...]:
        """Option identifiers in display order."""
        return self._options

    def get(self) -> VoteTally:
        """Return a snapshot of the current counts."""
        with self._lock:
            return dict(self._counts)

    def total(self) -> int:
        """Total number of votes recorded."""
        with self._lock:
            return sum(self._counts.values())

    def increment(self, option: str) -> int:
        """
        Add one vote for option.

        Args:
            option: Option identifier

        Returns:
            int: The option's new count

        Raises:
            InvalidOptionError: option is not part of this store
        """
        if not isinstance(option, str) or option not in self._counts:
            raise InvalidOptionError(option)

        with self._lock:
            self._counts[option] += 1
            count = self._counts[option]

        logger.debug(f"Vote counted: option={option}, count={count}")
        return count
