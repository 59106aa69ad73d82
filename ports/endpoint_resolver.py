from __future__ import annotations

from typing import Protocol


class EndpointResolverPort(Protocol):
    def resolve(self, name: str) -> str:
        """Return the base URL registered under a logical endpoint name."""
        ...
