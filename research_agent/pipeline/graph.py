"""Contract every pipeline graph node implements.

The graph executor (outside this package) asks each node whether it should
run for the current state and, if so, awaits ``process`` and threads the
returned state on to the next node.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

S = TypeVar("S")


class GraphNode(ABC, Generic[S]):
    """Abstract base for a unit of work in the agent's execution graph."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Stable identifier used for graph wiring and in logs."""

    @abstractmethod
    async def process(self, state: S) -> S:
        """Run the node and return the updated state."""

    def should_execute(self, state: S | None) -> bool:
        """Whether the executor should invoke ``process`` for this state."""
        return state is not None
