"""Background execution of suggestion passes.

A UI thread must not block on a ranking pass, but passes on one engine must
not overlap and a result computed for an outdated query is worthless.
``SuggestionWorker`` runs passes on a single worker thread and tags each
submission with a generation number: a newer ``submit`` (or ``cancel``)
cancels work that has not started yet and makes any running pass discard
its result. Only the newest query ever reaches ``on_done``.
"""

from __future__ import annotations

import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Generic, TypeVar

from fuzzy_suggest.engine import SuggestionEngine
from fuzzy_suggest.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

Suggestions = list[tuple[T, str]]


class SuggestionWorker(Generic[T]):
    def __init__(self, engine: SuggestionEngine[T]) -> None:
        self._engine = engine
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="fuzzy-suggest")
        # Reentrant so that on_done, which runs under the lock, may call submit().
        self._lock = threading.RLock()
        self._generation = 0
        self._pending: Future | None = None

    @property
    def generation(self) -> int:
        return self._generation

    def _supersede(self) -> int:
        # Caller holds self._lock.
        self._generation += 1
        if self._pending is not None and self._pending.cancel():
            logger.debug("Cancelled queued query before it started")
        self._pending = None
        return self._generation

    def _is_current(self, generation: int) -> bool:
        with self._lock:
            return generation == self._generation

    def submit(
        self,
        query: str,
        on_done: Callable[[Suggestions], None] | None = None,
    ) -> Future:
        """Schedule a pass for ``query``, superseding every earlier submission.

        The returned future resolves to the suggestion list, or to ``None``
        when a newer query arrived before the pass finished. ``on_done`` runs
        on the worker thread, while the worker lock is held, and only for a
        result that is still current.
        """
        with self._lock:
            generation = self._supersede()
            future = self._executor.submit(self._run, generation, query, on_done)
            self._pending = future
        return future

    def cancel(self) -> None:
        """Supersede in-flight and queued work without scheduling a new pass."""
        with self._lock:
            self._supersede()

    def _run(
        self,
        generation: int,
        query: str,
        on_done: Callable[[Suggestions], None] | None,
    ) -> Suggestions | None:
        if not self._is_current(generation):
            logger.debug("Skipping superseded query %r", query)
            return None
        suggestions = self._engine.suggest(query)
        # Check and delivery are one step: a submit() or cancel() from another
        # thread waits until on_done has returned.
        with self._lock:
            if not self._is_current(generation):
                logger.debug("Discarding result of superseded query %r", query)
                return None
            if on_done is not None:
                on_done(suggestions)
        return suggestions

    def shutdown(self, wait: bool = True) -> None:
        self.cancel()
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "SuggestionWorker[T]":
        return self

    def __exit__(self, *_exc) -> None:
        self.shutdown()
