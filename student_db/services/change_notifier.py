# /student_db/services/change_notifier.py

from typing import Callable, List

from ..utils.logging import get_logger

logger = get_logger("notify")

Listener = Callable[[], None]


class ChangeNotifier:
    """
    Explicit subscription point for "state changed" callbacks.

    Notifications carry no payload; listeners read the current state back from
    the object they subscribed to. A listener that raises is logged and the
    remaining listeners still run.
    """

    def __init__(self):
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Registers `listener` and returns a function that removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                logger.exception("Listener %r failed while handling a change notification", listener)
