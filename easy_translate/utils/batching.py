from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from ..config import require_positive_int


@dataclass(frozen=True, slots=True)
class Batch:
    index: int
    start: int
    texts: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.texts)

    @property
    def end(self) -> int:
        return self.start + len(self.texts)


def partition(items: Sequence[str], *, batch_size: int) -> List[Batch]:
    require_positive_int("batch_size", batch_size)
    batches: List[Batch] = []
    for start in range(0, len(items), batch_size):
        batches.append(Batch(index=len(batches), start=start, texts=tuple(items[start:start + batch_size])))
    return batches
