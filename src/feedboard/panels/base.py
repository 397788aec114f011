"""Fetch-merge orchestration shared by the three panel controllers."""

from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Any, Callable, List, Optional, Sequence, TypeVar

from feedboard.errors import DashboardError
from feedboard.state.models import ChartSeries, PanelState
from feedboard.state.store import (
    Action,
    ChartLoaded,
    LoadFailed,
    LoadStarted,
    PanelStore,
    Reset,
    SearchFailed,
    Selected,
    SelectionCleared,
    Ticket,
)
from feedboard.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

DEFAULTS = "defaults"
SEARCH = "search"
HISTORY = "history"


def gather(calls: Sequence[Callable[[], T]], max_workers: int = 8) -> List[T]:
    """Run ``calls`` concurrently and return their results in order.

    Waits for every call to settle, then re-raises the first failure (in
    call order) if any failed. Nothing partial is returned.
    """
    if not calls:
        return []
    with ThreadPoolExecutor(max_workers=max(1, min(len(calls), max_workers))) as pool:
        futures = [pool.submit(call) for call in calls]
        wait(futures)
    for future in futures:
        error = future.exception()
        if error is not None:
            raise error
    return [future.result() for future in futures]


class PanelController(ABC):
    """Coordinates remote calls for one panel and merges them into its store.

    Subclasses provide the fetch and merge steps; this class owns the
    loading/error transitions and request tickets.
    """

    name: str = "panel"
    load_error: str = "Failed to fetch data"
    search_error: str = "Failed to fetch data"
    clear_chart_on_deselect: bool = False

    def __init__(self, store: Optional[PanelStore] = None, max_workers: int = 8):
        self.store = store or PanelStore(self.name)
        self.max_workers = max_workers
        self._mounted = False

    @property
    def state(self) -> PanelState:
        return self.store.state

    # ---- lifecycle ----
    def mount(self) -> bool:
        """Trigger the initial load the first time the panel is shown."""
        if self._mounted:
            return False
        self._mounted = True
        self.load_defaults()
        return True

    def unmount(self) -> None:
        """Drop in-flight results and reset the panel to its initial state."""
        self.store.invalidate()
        self.store.dispatch(Reset())
        self._mounted = False

    # ---- operations ----
    def load_defaults(self) -> bool:
        """Load the default entities (all-or-nothing).

        Returns:
            True if the results were applied to the store.
        """
        ticket = self.store.issue(DEFAULTS)
        self.store.dispatch(LoadStarted())
        try:
            results = self._fetch_defaults()
        except DashboardError as e:
            logger.error(f"[{self.name}] Initial load failed: {e}")
            self.store.dispatch(LoadFailed(self.load_error), ticket)
            return False

        applied = self._apply_all(self._merge_defaults(results), ticket)
        if applied:
            logger.info(f"[{self.name}] Loaded {len(self.state.entities)} entities")
            self._after_defaults()
        return applied

    def refresh(self) -> bool:
        return self.load_defaults()

    def search(self, term: str) -> bool:
        """Fetch one entity by name/id and upsert it; blank terms are ignored."""
        term = (term or "").strip()
        if not term:
            return False
        ticket = self.store.issue(SEARCH)
        try:
            entity = self._fetch_one(term)
        except DashboardError as e:
            logger.warning(f"[{self.name}] Search for {term!r} failed: {e}")
            self.store.dispatch(SearchFailed(self.search_error), ticket)
            return False
        return self.store.dispatch(self._merge_one(entity), ticket)

    def load_history(self, key: Optional[str] = None) -> bool:
        """Load the chart series; failures are logged and never surfaced."""
        ticket = self.store.issue(HISTORY)
        try:
            series = self._fetch_history(key)
        except DashboardError as e:
            logger.warning(f"[{self.name}] History fetch failed for {key or 'global'}: {e}")
            return False
        if series is None:
            logger.info(f"[{self.name}] Nothing to chart")
            return False
        return self.store.dispatch(ChartLoaded(series), ticket)

    def select(self, key: str) -> bool:
        self.store.dispatch(Selected(key))
        selected = self.state.selected
        return selected is not None and selected.key == key

    def clear(self) -> None:
        if self.clear_chart_on_deselect:
            # a history request still in flight must not repaint the chart
            self.store.issue(HISTORY)
        self.store.dispatch(SelectionCleared(clear_chart=self.clear_chart_on_deselect))

    # ---- helpers ----
    def _apply_all(self, actions: Sequence[Action], ticket: Ticket) -> bool:
        applied = True
        for action in actions:
            applied = self.store.dispatch(action, ticket) and applied
        return applied

    def _gather(self, calls: Sequence[Callable[[], Any]]) -> List[Any]:
        return gather(calls, self.max_workers)

    def _after_defaults(self) -> None:
        pass

    # ---- subclass hooks ----
    @abstractmethod
    def _fetch_defaults(self) -> Any:
        """Fetch everything the initial load needs; raise on any failure."""

    @abstractmethod
    def _merge_defaults(self, results: Any) -> Sequence[Action]:
        """Turn fetched defaults into store actions."""

    @abstractmethod
    def _fetch_one(self, term: str) -> Any:
        """Fetch the entity matching a search term."""

    @abstractmethod
    def _merge_one(self, entity: Any) -> Action:
        """Store action that upserts a searched entity."""

    def _fetch_history(self, key: Optional[str]) -> Optional[ChartSeries]:
        """Fetch the chart series for ``key``; None when there is nothing to chart."""
        return None
