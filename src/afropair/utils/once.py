"""One-shot initialization primitive for lazily loaded tables."""

import threading
from typing import Callable


class LoadOnce:
    """Run a loader exactly once, even when called from several threads.

    Callers arriving while the first load is running block on the lock and
    then see the finished state. If the loader raises, the state stays
    unloaded and the next call retries.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._done = False

    @property
    def done(self) -> bool:
        return self._done

    def run(self, loader: Callable[[], None]) -> bool:
        """Invoke ``loader`` if nothing has been loaded yet.

        Returns:
            True if this call performed the load, False if it was a no-op.
        """
        if self._done:
            return False
        with self._lock:
            if self._done:
                return False
            loader()
            self._done = True
            return True
