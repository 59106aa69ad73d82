from .endpoint_resolver import EndpointResolverPort
from .source import SourcePort

__all__ = [
    "EndpointResolverPort",
    "SourcePort",
]
