"""
In-memory load catalog.

The catalog is built once at startup and handed to request handlers
through dependency injection. Its contents never change afterwards, so
it is safe to share between concurrent requests without locking.
"""

from typing import Iterable, Optional, Sequence

import structlog

from carrier_sales.exceptions import LoadNotFoundError
from carrier_sales.models.load import Load, LoadSearchCriteria, LoadSearchResult
from carrier_sales.monitoring.metrics import load_search_results, load_searches_total

logger = structlog.get_logger(__name__)


class LoadCatalog:
    """
    Immutable collection of loads with lookup and filtering.

    Search is a linear scan; the board is small and static, so there is
    no index and no pagination.
    """

    def __init__(self, loads: Iterable[Load]):
        self._loads: tuple[Load, ...] = tuple(loads)
        self._by_id: dict[str, Load] = {}
        for load in self._loads:
            # First occurrence wins, matching the loader's dedup rule
            self._by_id.setdefault(load.load_id, load)

    def __len__(self) -> int:
        return len(self._loads)

    def get_all(self) -> list[Load]:
        """Return every load in original load order."""
        return list(self._loads)

    def get_by_id(self, load_id: str) -> Load:
        """
        Return the load with exactly this identifier (case-sensitive).

        Raises:
            LoadNotFoundError: No load has this identifier
        """
        load = self._by_id.get(load_id)
        if load is None:
            raise LoadNotFoundError(load_id)
        return load

    def search(self, criteria: Optional[LoadSearchCriteria] = None) -> LoadSearchResult:
        """
        Filter loads by all supplied criteria (AND semantics).

        Args:
            criteria: Optional predicates; None or an all-empty criteria
                object returns the whole catalog

        Returns:
            LoadSearchResult with matching loads in catalog order
        """
        criteria = criteria or LoadSearchCriteria()
        matches = filter_loads(
            self._loads,
            origin=criteria.origin,
            destination=criteria.destination,
            equipment_type=criteria.equipment_type,
            min_rate=criteria.min_rate,
            max_rate=criteria.max_rate,
        )

        filtered = any(
            value not in (None, "")
            for value in criteria.model_dump().values()
        )
        load_searches_total.labels(filtered=str(filtered).lower()).inc()
        load_search_results.observe(len(matches))

        logger.debug(
            "Load search",
            criteria=criteria.model_dump(exclude_none=True),
            matches=len(matches),
        )
        return LoadSearchResult(data=matches, count=len(matches))


def filter_loads(
    loads: Sequence[Load],
    origin: Optional[str] = None,
    destination: Optional[str] = None,
    equipment_type: Optional[str] = None,
    min_rate: Optional[float] = None,
    max_rate: Optional[float] = None,
) -> list[Load]:
    """Apply each supplied predicate in turn, preserving input order."""
    rows = list(loads)
    if origin:
        needle = origin.lower()
        rows = [r for r in rows if needle in r.origin.lower()]
    if destination:
        needle = destination.lower()
        rows = [r for r in rows if needle in r.destination.lower()]
    if equipment_type:
        wanted = equipment_type.lower()
        rows = [r for r in rows if r.equipment_type.lower() == wanted]
    if min_rate is not None:
        rows = [r for r in rows if r.loadboard_rate >= min_rate]
    if max_rate is not None:
        rows = [r for r in rows if r.loadboard_rate <= max_rate]
    return rows
