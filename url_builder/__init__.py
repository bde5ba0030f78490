"""A package of tools for building URLs step by step."""
from typing import Callable, cast

from importlib_metadata import version

from .builder import UrlBuilder
from .errors import AlreadySetError, DuplicateHostnameError, MissingHostnameError

_version = cast(Callable[[str], str], version)

__version__ = _version(__package__)
__all__ = [
    "__version__",
    "AlreadySetError",
    "DuplicateHostnameError",
    "MissingHostnameError",
    "UrlBuilder",
]
