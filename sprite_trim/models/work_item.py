from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple


@dataclass(frozen=True)
class WorkItem:
    """One input file and the path its result is written to."""
    input_path: Path
    output_path: Path


@dataclass
class ItemOutcome:
    """
    Result of processing a single WorkItem.
    Exactly one of output_size / error is set.
    """
    item: WorkItem
    output_size: Tuple[int, int] | None = None  # (width, height) of the written image
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BatchReport:
    """Aggregated outcomes of one batch run, in completion order."""
    outcomes: List[ItemOutcome] = field(default_factory=list)

    def add(self, outcome: ItemOutcome) -> None:
        self.outcomes.append(outcome)

    @property
    def succeeded(self) -> List[ItemOutcome]:
        return [o for o in self.outcomes if o.ok]

    @property
    def failed(self) -> List[ItemOutcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def ok(self) -> bool:
        return not self.failed
