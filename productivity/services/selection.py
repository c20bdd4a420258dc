"""Toggle-style row selection for the worker and station tables."""

from __future__ import annotations

from typing import Generic, Iterable, Optional, Protocol, TypeVar, Union


class _HasId(Protocol):
    id: Union[str, int]


T = TypeVar("T", bound=_HasId)


class RowSelection(Generic[T]):
    """Either nothing is selected or exactly one row is.

    Clicking a row selects it; clicking the row that is already selected
    clears the selection.
    """

    def __init__(self) -> None:
        self.selected: Optional[T] = None

    @property
    def selected_id(self) -> Optional[Union[str, int]]:
        return self.selected.id if self.selected is not None else None

    def click(self, entity: T) -> Optional[T]:
        if self.selected_id == entity.id:
            self.selected = None
        else:
            self.selected = entity
        return self.selected

    def clear(self) -> None:
        self.selected = None

    def rebind(self, entities: Iterable[T]) -> Optional[T]:
        """Point the selection at the same id in a fresh list, or clear it."""

        current = self.selected_id
        if current is None:
            return None
        self.selected = next((e for e in entities if e.id == current), None)
        return self.selected
