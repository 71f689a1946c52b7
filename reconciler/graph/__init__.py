"""
Graph — routing graphs over nodnod.

    from reconciler import graph as G

    @G.node
    class LookupNode:
        @classmethod
        async def __compose__(cls, fresh: FreshEventNode) -> "LookupNode":
            ...

    node = await G.run(AcknowledgementNode).inject(spec)
"""

from nodnod import scalar_node as node

from reconciler.graph._run import (
    UnresolvedTarget,
    Run,
    run,
)

__all__ = (
    "node",
    "UnresolvedTarget",
    "Run",
    "run",
)
