from typing import Self

from reconciler.wire._endpoint import Endpoint


class Application:
    """Endpoints to be compiled onto one web application."""

    def __init__(self) -> None:
        self.endpoints: list[Endpoint] = []

    def mount(self, *endps: Endpoint) -> Self:
        """
        Add endpoints.

        Note: every endpoint needs at least one exposure; one without would
        compile to no routes.
        """
        for endp in endps:
            if not endp.exposures:
                raise ValueError("endpoint has no exposures; call expose() before mount()")
        self.endpoints.extend(endps)
        return self


def application() -> Application:
    return Application()
