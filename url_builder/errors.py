"""Common errors that may be thrown."""


class AlreadySetError(Exception):
    """Thrown when a value that may be assigned only once is assigned again."""


class DuplicateHostnameError(AlreadySetError):
    """Thrown when a builder receives a hostname after already having one."""


class MissingHostnameError(Exception):
    """
    Thrown when an operation that depends on the hostname (adding resources or
    building the URL) is used before a hostname is set.
    """


class InvalidPreset(Exception):
    """Thrown when a presets file contains a malformed entry."""


class InvalidParameter(ValueError):
    """Thrown when a parameter string is not in the "<key>=<value>" format."""


class UnknownPreset(KeyError):
    """Thrown when a preset is looked up by a name no preset has."""
