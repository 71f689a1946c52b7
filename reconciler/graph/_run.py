"""
Graph runner — thin layer over nodnod.

Nodes are discovered from the target; inputs are injected by runtime type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, cast
from collections.abc import Callable, Coroutine

from nodnod import Scope, Value, EventLoopAgent, Node


type AgentRun = Callable[[Scope, dict[type[Any], Scope]], Coroutine[Any, Any, None]]


class UnresolvedTarget(Exception):
    """The graph finished without producing the target node."""


# ═══════════════════════════════════════════════════════════════════════════════
# Run — fluent awaitable builder
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(slots=True, frozen=True)
class Run[T]:
    """
    Fluent runner for a node.

    A fresh agent and scope per run: concurrent deliveries share nothing.

    Example:
        node = await run(AcknowledgementNode).labelled("reconcile").inject(spec)
    """

    _target: type[T]
    _values: tuple[object, ...] = ()
    _label: str = "run"

    def inject(self, value: object) -> Run[T]:
        """Inject a value under its runtime type."""
        return Run(self._target, (*self._values, value), self._label)

    def labelled(self, label: str) -> Run[T]:
        """Scope label, shown by nodnod when a node fails."""
        return Run(self._target, self._values, label)

    def __await__(self) -> Any:
        return self._execute().__await__()

    async def _execute(self) -> T:
        agent = EventLoopAgent.build({cast(type[Node[Any, Any]], self._target)})
        agent_run = cast(AgentRun, getattr(agent, "run"))

        scope = Scope(detail=self._label)
        async with scope:
            for value in self._values:
                scope.push(Value(type(value), value))

            await agent_run(scope, {})

            produced = scope.get(self._target)
            if produced is None:
                raise UnresolvedTarget(f"{self._target.__name__} was not produced")
            return cast(T, produced.value)


def run[T](target: type[T]) -> Run[T]:
    """
    Run a node with auto-discovery of its dependencies.

    Example:
        node = await run(AcknowledgementNode).inject(spec)
    """
    return Run(target)


__all__ = ("UnresolvedTarget", "Run", "run")
