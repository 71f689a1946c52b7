from typing import Any

from reconciler.wire.codecs.webhook import WebhookCodec


# compiler supports HTTPRouteTrigger + WebhookCodec; other pairs are skipped
type Trigger = Any
type Codec = WebhookCodec | Any
type Exposure = tuple[Trigger, Codec]
