from __future__ import annotations

from typing import Callable, Generic, Iterable, NamedTuple, TypeVar

from fuzzy_suggest.config import EngineConfig, validate_count
from fuzzy_suggest.exceptions import RepresentationError
from fuzzy_suggest.logger import get_logger
from fuzzy_suggest.metric import Metric, damerau_levenshtein, get_metric

logger = get_logger(__name__)

T = TypeVar("T")

# Marks a memoized slot whose representation could not be computed.
_FAILED = object()


class ScoredCandidate(NamedTuple, Generic[T]):
    item: T
    representation: str
    distance: int


def _equals_ignore_case(a: str, b: str) -> bool:
    # Character by character, so "ß" never matches "SS".
    if len(a) != len(b):
        return False
    return all(x == y or x.upper() == y.upper() or x.lower() == y.lower() for x, y in zip(a, b))


class SuggestionEngine(Generic[T]):
    """Ranks a fixed set of candidate items against a query string.

    Every pass scores all candidates with ``metric(representation, query)``,
    keeps those within ``max_distance`` (``None`` means no ceiling), sorts
    them by distance keeping candidate order on ties, and truncates the
    result to ``max_results`` entries.

    With ``memoize=True`` the representation of every item is computed once,
    here in the constructor, and reused for the engine's lifetime. Otherwise
    it is recomputed on each pass. Items only need to support whatever the
    representation function does with them; they are never hashed.
    """

    def __init__(
        self,
        items: Iterable[T],
        max_results: int = 5,
        max_distance: int | None = None,
        *,
        memoize: bool = False,
        representation: Callable[[T], str] = str,
        metric: Metric | str = damerau_levenshtein,
    ) -> None:
        validate_count(max_results, "max_results")
        validate_count(max_distance, "max_distance", allow_none=True)

        self._items: tuple[T, ...] = tuple(items)
        self.max_results = max_results
        self.max_distance = max_distance
        self.memoize = memoize
        self._representation = representation
        self._metric: Metric = get_metric(metric) if isinstance(metric, str) else metric

        self._reps: list[object] | None = None
        if memoize:
            self._reps = [self._compute_representation(item) for item in self._items]

        logger.debug(
            "Engine ready: %d candidates, max_results=%d, max_distance=%s, memoize=%s",
            len(self._items),
            max_results,
            max_distance,
            memoize,
        )

    @classmethod
    def from_config(
        cls,
        items: Iterable[T],
        config: EngineConfig,
        representation: Callable[[T], str] = str,
    ) -> SuggestionEngine[T]:
        return cls(
            items,
            config.max_results,
            config.max_distance,
            memoize=config.memoize,
            representation=representation,
            metric=config.metric,
        )

    @property
    def items(self) -> tuple[T, ...]:
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def _compute_representation(self, item: T) -> object:
        try:
            rep = self._representation(item)
            if not isinstance(rep, str):
                raise RepresentationError(
                    f"representation returned {type(rep).__name__}, expected str"
                )
        except Exception as exc:
            logger.warning("Skipping candidate %r: representation failed: %s", item, exc, exc_info=True)
            return _FAILED
        return rep

    def _representations(self) -> Iterable[tuple[T, str]]:
        """Yield ``(item, representation)`` for every usable candidate, in order."""
        if self._reps is not None:
            pairs = zip(self._items, self._reps)
        else:
            pairs = ((item, self._compute_representation(item)) for item in self._items)
        for item, rep in pairs:
            if rep is _FAILED:
                continue
            yield item, rep  # type: ignore[misc]

    def rank(self, query: str) -> list[ScoredCandidate[T]]:
        """Score every candidate and return the survivors with their distances."""
        if self.max_results == 0:
            return []

        scored = [
            ScoredCandidate(item, rep, self._metric(rep, query))
            for item, rep in self._representations()
        ]
        if self.max_distance is not None:
            scored = [c for c in scored if c.distance <= self.max_distance]
        # sorted() is stable: equal distances keep candidate order.
        ranked = sorted(scored, key=lambda c: c.distance)[: self.max_results]

        logger.debug(
            "Query %r: %d candidates, %d within distance, %d returned",
            query,
            len(self._items),
            len(scored),
            len(ranked),
        )
        return ranked

    def suggest(self, query: str) -> list[tuple[T, str]]:
        return [(c.item, c.representation) for c in self.rank(query)]

    def exact_match(self, query: str) -> T | None:
        """Return the first item whose representation equals ``query`` ignoring case.

        Representations are not required to be unique; when several items
        share one, the earliest candidate wins.
        """
        for item, rep in self._representations():
            if _equals_ignore_case(rep, query):
                return item
        return None
