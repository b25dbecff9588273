from typing import Iterator

from dtpredict.core.outcomes import Outcome

WINDOW_SIZE = 5


class OutcomeBuffer:
    """Most recent outcomes entered for the current cycle, capped at ``capacity``.

    Appending to a full buffer is a no-op rather than an error; callers read
    ``is_full()`` to gate their input.
    """

    def __init__(self, capacity: int = WINDOW_SIZE):
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self.capacity = capacity
        self._items: list[Outcome] = []

    def append(self, outcome: Outcome) -> bool:
        if len(self._items) >= self.capacity:
            return False
        self._items.append(Outcome(outcome))
        return True

    def remove_last(self) -> Outcome | None:
        if not self._items:
            return None
        return self._items.pop()

    def clear(self):
        self._items.clear()

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def snapshot(self) -> tuple[Outcome, ...]:
        return tuple(self._items)

    @property
    def last(self) -> Outcome | None:
        return self._items[-1] if self._items else None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Outcome]:
        return iter(tuple(self._items))

    def __repr__(self) -> str:
        seq = "".join(o.short for o in self._items)
        return f"OutcomeBuffer({seq!r}, capacity={self.capacity})"
