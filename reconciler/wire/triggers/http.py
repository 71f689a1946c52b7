from dataclasses import dataclass, field
from typing import Literal


type Method = Literal["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"]
type Path = str
type Header = str
type Headers = frozenset[str]


@dataclass(frozen=True, slots=True)
class HTTPRouteTrigger:
    """
    HTTP exposure of an endpoint.

    headers: request headers the handler reads (the signature header).
    """

    method: Method
    path: Path
    headers: Headers = field(default_factory=lambda: frozenset())
