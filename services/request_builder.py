from __future__ import annotations

import logging
from typing import Optional, Union

from models.selection import DEFAULT_SIZE, Mode, Size
from ports.endpoint_resolver import EndpointResolverPort
from services.errors import EndpointResolutionError


logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT_NAME = "Heroku_Datasource"


def build_endpoint(
    mode: Union[Mode, str, None],
    size: Union[Size, str, None],
    resolver: EndpointResolverPort,
    endpoint_name: str = DEFAULT_ENDPOINT_NAME,
) -> str:
    """Validate the selection and return `<base><mode>[?size=<size>]`.

    Both parameters are checked before the resolver is consulted, so bad
    input never reaches the network layer.
    """
    parsed_mode = Mode.parse(mode)
    parsed_size = Size.parse(size)

    try:
        base_url = resolver.resolve(endpoint_name)
    except EndpointResolutionError:
        raise
    except Exception as exc:
        raise EndpointResolutionError(endpoint_name, str(exc)) from exc

    endpoint = base_url + parsed_mode.value
    if parsed_mode is not Mode.COMPLETE:
        endpoint += "?size=" + (parsed_size or DEFAULT_SIZE).value

    logger.debug(
        f"Built datasource endpoint {endpoint}",
        extra={"step": "build", "status": "ok", "provider": endpoint_name},
    )
    return endpoint


def describe_selection(mode: Union[Mode, str], size: Union[Size, str, None]) -> str:
    """Human label for a selection, e.g. 'partial/small' or 'complete'."""
    parsed_mode = Mode.parse(mode)
    if parsed_mode is Mode.COMPLETE:
        return parsed_mode.value
    parsed_size: Optional[Size] = Size.parse(size)
    return f"{parsed_mode.value}/{(parsed_size or DEFAULT_SIZE).value}"
