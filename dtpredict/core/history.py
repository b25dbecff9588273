from typing import Iterator

from dtpredict.core.outcomes import Outcome


class HistoryLog:
    """Outcomes consumed by completed prediction cycles, oldest first."""

    def __init__(self):
        self._items: list[Outcome] = []

    def append(self, outcome: Outcome):
        self._items.append(Outcome(outcome))

    def reset(self):
        self._items.clear()

    def count(self, outcome: Outcome) -> int:
        return self._items.count(Outcome(outcome))

    def summary(self) -> dict:
        return {
            "total": len(self._items),
            "dragon": self.count(Outcome.DRAGON),
            "tiger": self.count(Outcome.TIGER),
            "tie": self.count(Outcome.TIE),
        }

    def to_list(self) -> list[Outcome]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Outcome]:
        return iter(tuple(self._items))
