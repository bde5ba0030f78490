"""Helper functions for url_builder's unit tests."""
from typing import Any, Iterable

from url_builder import UrlBuilder

Call = tuple[str, tuple[str, ...]]


def apply_calls(builder: UrlBuilder, calls: Iterable[Call]) -> UrlBuilder:
    """Calls each `(method_name, args)` in order on `builder`."""
    for method_name, args in calls:
        getattr(builder, method_name)(*args)
    return builder


def snapshot(builder: UrlBuilder) -> tuple[Any, ...]:
    """Everything a builder has accumulated so far."""
    return builder.hostname, builder.resources, builder.parameters


def ignore_unused(
    *args: Any, reason: str = "Pyright emmits an info that LSP is not able to ignore."
) -> None:
    """Shuts up language-servers' warnings about an unused variable/function/fixture."""
    _ = args, reason
