"""General tools for URL building."""
from typing import Iterable, Mapping, Union

from .builder import UrlBuilder
from .errors import InvalidParameter

Params = Union[Mapping[str, Union[str, int]], Iterable[tuple[str, Union[str, int]]]]


def build_url(
    hostname: str, resources: Iterable[str] = (), params: Params = ()
) -> str:
    """Builds a URL in a single call. Parameter values are stringified."""
    builder = UrlBuilder().set_hostname(hostname)

    for resource in resources:
        builder.add_resource(resource)

    pairs = params.items() if isinstance(params, Mapping) else params
    for key, value in pairs:
        builder.add_parameter(key, str(value))

    return builder.build()


def parse_parameter(text: str) -> tuple[str, str]:
    """Splits a "<key>=<value>" string. Only the first "=" separates them."""
    key, sep, value = text.partition("=")

    if not sep:
        raise InvalidParameter(
            f'Parameter "{text}" does not match the "<key>=<value>" format.'
        )

    return key, value
