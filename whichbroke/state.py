"""In-memory record of the probes made during one search."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ProbeStep:
    """Record of a single checkout + build."""
    commit: str
    result: str  # "pass", "fail", "error"
    exit_code: Optional[int]
    timestamp: str
    duration_seconds: float


@dataclass
class SearchLog:
    """Probes made so far, in the order they ran.

    Lives for one invocation only. Nothing here is written to disk.
    """
    steps: List[ProbeStep] = field(default_factory=list)

    def add_step(self, step: ProbeStep):
        """Add a step to the history.

        Args:
            step: ProbeStep to add.
        """
        self.steps.append(step)

    def count(self, result: str) -> int:
        return sum(1 for step in self.steps if step.result == result)

    def get_total_duration(self) -> float:
        """Get the total duration of all steps in seconds."""
        return sum(step.duration_seconds for step in self.steps)
