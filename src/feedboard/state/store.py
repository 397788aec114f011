"""Per-panel state store.

State changes only through :meth:`PanelStore.dispatch` with one of the
action types below; :func:`reduce` is the pure transition function. Each
request a controller makes is tagged with a :class:`Ticket` from
:meth:`PanelStore.issue`; a response whose ticket has been superseded on its
channel is dropped instead of applied.
"""

import threading
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Sequence, Union

from feedboard.state.models import ChartSeries, PanelState
from feedboard.utils.logging import get_logger

logger = get_logger(__name__)


# ---- Actions ----
@dataclass(frozen=True)
class LoadStarted:
    pass


@dataclass(frozen=True)
class EntitiesReplaced:
    entities: Sequence[Any]


@dataclass(frozen=True)
class EntitiesUpserted:
    """Replace same-key entries in place, append new keys."""
    entities: Sequence[Any]


@dataclass(frozen=True)
class EntityPromoted:
    """Move/insert an entity at the front and keep at most ``limit``."""
    entity: Any
    limit: int


@dataclass(frozen=True)
class LoadFailed:
    error: str


@dataclass(frozen=True)
class SearchFailed:
    error: str


@dataclass(frozen=True)
class Selected:
    key: str


@dataclass(frozen=True)
class SelectionCleared:
    clear_chart: bool = False


@dataclass(frozen=True)
class ChartLoaded:
    series: ChartSeries


@dataclass(frozen=True)
class ExtrasUpdated:
    values: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Reset:
    pass


Action = Union[
    LoadStarted, EntitiesReplaced, EntitiesUpserted, EntityPromoted, LoadFailed,
    SearchFailed, Selected, SelectionCleared, ChartLoaded, ExtrasUpdated, Reset,
]


# ---- Merge rules ----
def upsert_in_place(current: Sequence[Any], incoming: Sequence[Any]) -> List[Any]:
    """Merge ``incoming`` into ``current`` by key, preserving positions.

    An incoming entity whose key exists replaces that entry where it stands;
    unknown keys are appended in arrival order. Duplicate keys within
    ``incoming`` collapse to the last one.
    """
    merged = list(current)
    index = {e.key: i for i, e in enumerate(merged)}
    for entity in incoming:
        pos = index.get(entity.key)
        if pos is None:
            index[entity.key] = len(merged)
            merged.append(entity)
        else:
            merged[pos] = entity
    return merged


def promote_front(current: Sequence[Any], entity: Any, limit: int) -> List[Any]:
    """Put ``entity`` first, drop any older copy of its key, keep ``limit`` items."""
    rest = [e for e in current if e.key != entity.key]
    return [entity, *rest][:limit]


def _dedupe(entities: Sequence[Any]) -> List[Any]:
    return upsert_in_place([], entities)


def _refresh_selected(state: PanelState) -> Optional[Any]:
    # follow the freshest copy of the selected entity; drop it once its key is gone
    if state.selected is None:
        return None
    for entity in state.entities:
        if entity.key == state.selected.key:
            return entity
    return None


def reduce(state: PanelState, action: Action) -> PanelState:
    """Return the state that results from applying ``action`` to ``state``."""
    if isinstance(action, LoadStarted):
        return replace(state, loading=True, error=None)
    if isinstance(action, EntitiesReplaced):
        new = replace(state, entities=_dedupe(action.entities), loading=False, error=None)
        return replace(new, selected=_refresh_selected(new))
    if isinstance(action, EntitiesUpserted):
        new = replace(state, entities=upsert_in_place(state.entities, action.entities),
                      loading=False, error=None)
        return replace(new, selected=_refresh_selected(new))
    if isinstance(action, EntityPromoted):
        new = replace(state, entities=promote_front(state.entities, action.entity, action.limit),
                      loading=False, error=None)
        return replace(new, selected=_refresh_selected(new))
    if isinstance(action, LoadFailed):
        return replace(state, loading=False, error=action.error)
    if isinstance(action, SearchFailed):
        return replace(state, error=action.error)
    if isinstance(action, Selected):
        for entity in state.entities:
            if entity.key == action.key:
                return replace(state, selected=entity)
        logger.debug(f"Ignoring selection of unknown key {action.key!r}")
        return state
    if isinstance(action, SelectionCleared):
        if action.clear_chart:
            return replace(state, selected=None, chart_series=None)
        return replace(state, selected=None)
    if isinstance(action, ChartLoaded):
        return replace(state, chart_series=action.series)
    if isinstance(action, ExtrasUpdated):
        return replace(state, extras={**state.extras, **action.values})
    if isinstance(action, Reset):
        return PanelState()
    raise TypeError(f"Unknown action: {action!r}")


# ---- Store ----
@dataclass(frozen=True)
class Ticket:
    channel: str
    generation: int


class PanelStore:
    """Thread-safe holder of one panel's :class:`PanelState`."""

    def __init__(self, name: str, discard_stale: bool = True):
        self.name = name
        self.discard_stale = discard_stale
        self._state: PanelState = PanelState()
        self._generations: Dict[str, int] = {}
        self._lock = threading.RLock()

    @property
    def state(self) -> PanelState:
        with self._lock:
            return self._state

    def issue(self, channel: str) -> Ticket:
        """Start a request on ``channel``; older tickets on it become stale."""
        with self._lock:
            generation = self._generations.get(channel, 0) + 1
            self._generations[channel] = generation
            return Ticket(channel, generation)

    def is_current(self, ticket: Ticket) -> bool:
        with self._lock:
            return self._generations.get(ticket.channel, 0) == ticket.generation

    def invalidate(self) -> None:
        """Make every outstanding ticket stale."""
        with self._lock:
            for channel in list(self._generations):
                self._generations[channel] += 1

    def dispatch(self, action: Action, ticket: Optional[Ticket] = None) -> bool:
        """Apply ``action`` unless ``ticket`` is stale.

        Returns:
            True if the action was applied.
        """
        with self._lock:
            if ticket is not None and self.discard_stale and not self.is_current(ticket):
                logger.info(
                    f"[{self.name}] Discarding stale {type(action).__name__} "
                    f"({ticket.channel} #{ticket.generation})"
                )
                return False
            self._state = reduce(self._state, action)
        return True
