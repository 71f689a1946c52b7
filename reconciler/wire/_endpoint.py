from __future__ import annotations

from dataclasses import dataclass, field

from reconciler.pipeline import Reconciler
from reconciler.wire._types import Codec, Exposure, Trigger
from reconciler.wire.codecs.webhook import WebhookCodec


@dataclass(slots=True)
class Endpoint:
    reconciler: Reconciler
    exposures: list[Exposure] = field(default_factory=list[Exposure])

    @classmethod
    def from_reconciler(cls, reconciler: Reconciler) -> Endpoint:
        return cls(reconciler=reconciler)

    def expose(self, trigger: Trigger, codec: Codec | None = None) -> Endpoint:
        """Default codec reads the signature header named in the reconciler's settings."""
        if codec is None:
            codec = WebhookCodec(signature_header=self.reconciler.settings.signature_header)
        return Endpoint(
            reconciler=self.reconciler, exposures=[*self.exposures, (trigger, codec)]
        )


def endpoint(reconciler: Reconciler) -> Endpoint:
    return Endpoint.from_reconciler(reconciler)
