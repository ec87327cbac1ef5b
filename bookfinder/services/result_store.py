import logging
import threading
from collections.abc import Callable, Iterable

from bookfinder.models import BookRecord

logger = logging.getLogger(__name__)

Observer = Callable[[tuple[BookRecord, ...]], None]


class ResultStore:
    """Holds the result set of the most recent search.

    The set is an immutable tuple that is only ever swapped out whole, so a
    reader always sees either the previous set or the new one. Writers are
    serialized by a lock; observers are notified once per ``replace`` with
    the snapshot that was just installed. An observer that raises is logged
    and does not stop the others from being notified.
    """

    def __init__(self) -> None:
        self._records: tuple[BookRecord, ...] = ()
        self._observers: list[Observer] = []
        self._lock = threading.Lock()

    @property
    def records(self) -> tuple[BookRecord, ...]:
        return self._records

    def replace(self, records: Iterable[BookRecord]) -> None:
        snapshot = tuple(records)
        with self._lock:
            self._records = snapshot
            observers = list(self._observers)
        for observer in observers:
            try:
                observer(snapshot)
            except Exception:
                logger.exception("Result observer %r failed", observer)

    def find_by_id(self, book_id: str) -> BookRecord | None:
        # Result sets are a single page, a scan is enough.
        for record in self._records:
            if record.id == book_id:
                return record
        return None

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        with self._lock:
            self._observers.append(observer)

        def unsubscribe() -> None:
            with self._lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return unsubscribe
