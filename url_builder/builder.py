"""The URL builder: accumulates URL parts and renders them on demand."""
import logging
from typing import Optional

from .errors import DuplicateHostnameError, MissingHostnameError

logger = logging.getLogger(__name__)


class UrlBuilder:
    """
    Builds a URL from a hostname, nested resources and query parameters.

    Every mutator returns the builder itself, so calls can be chained:

        UrlBuilder()
            .set_hostname("http://www.example.com")
            .add_resource("resource")
            .add_parameter("parameter1", "12")
            .build()

    Resources and parameters keep their own call order, but are independent
    of each other: they may be added interleaved.
    """

    def __init__(self) -> None:
        self._hostname: Optional[str] = None
        self._resources: list[str] = []
        self._parameters: list[tuple[str, str]] = []

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(hostname={self._hostname!r},"
            f" resources={self._resources!r}, parameters={self._parameters!r})"
        )

    @property
    def hostname(self) -> Optional[str]:
        """The hostname (base URL), if already set."""
        return self._hostname

    @property
    def resources(self) -> tuple[str, ...]:
        return tuple(self._resources)

    @property
    def parameters(self) -> tuple[tuple[str, str], ...]:
        return tuple(self._parameters)

    def set_hostname(self, hostname: str) -> "UrlBuilder":
        """
        Sets the URL's hostname. Raises `DuplicateHostnameError` if it was
        already set.
        """
        if hostname is None:
            raise TypeError("Hostname must not be None.")

        if self._hostname is not None:
            logger.warning(
                "Rejected hostname %r: already set to %r", hostname, self._hostname
            )
            raise DuplicateHostnameError(
                f'Hostname is already set to "{self._hostname}".'
            )

        self._hostname = hostname
        logger.debug("Hostname set to %r", hostname)
        return self

    def add_resource(self, segment: str) -> "UrlBuilder":
        """
        Appends a (nested) resource to the URL's path. Raises
        `MissingHostnameError` if no hostname was set yet.
        """
        if segment is None:
            raise TypeError("Resource must not be None.")

        if self._hostname is None:
            logger.warning("Rejected resource %r: no hostname set", segment)
            raise MissingHostnameError(
                f'Cannot add resource "{segment}" before setting a hostname.'
            )

        self._resources.append(segment)
        logger.debug("Resource %r added", segment)
        return self

    def add_parameter(self, key: str, value: str) -> "UrlBuilder":
        """Appends a query parameter. Keys may repeat; nothing is escaped."""
        if key is None or value is None:
            raise TypeError("Parameter key and value must not be None.")

        self._parameters.append((key, value))
        logger.debug("Parameter %r=%r added", key, value)
        return self

    def build(self) -> str:
        """
        Renders the URL as `<hostname>[/<resources>...][?<key>=<value>&...]`.
        Raises `MissingHostnameError` if no hostname was provided.
        """
        if not self._hostname:
            logger.warning("Rejected build: no hostname set")
            raise MissingHostnameError("Cannot build a URL without a hostname.")

        url = self._hostname + "".join(f"/{segment}" for segment in self._resources)

        if self._parameters:
            url += "?" + "&".join(f"{k}={v}" for k, v in self._parameters)

        logger.debug("Built URL %r", url)
        return url
