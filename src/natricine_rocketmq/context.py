"""Runtime task context used to derive default identities."""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class RuntimeContext(Protocol):
    """Anything that can report a stable per-task identifier."""

    def this_task_id(self) -> int:
        """Return the identifier of the running task."""
        ...


@dataclass(frozen=True)
class TaskContext:
    """Minimal RuntimeContext for callers without a topology engine."""

    task_id: int

    def this_task_id(self) -> int:
        return self.task_id
