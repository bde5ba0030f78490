"""Named URLs declared in TOML files."""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from .builder import UrlBuilder
from .errors import InvalidPreset, UnknownPreset


@dataclass(frozen=True)
class UrlPreset:
    """A single named URL and all the parts needed to build it."""

    name: str
    hostname: str
    resources: list[str] = field(default_factory=list)
    parameters: list[tuple[str, str]] = field(default_factory=list)

    def builder(self) -> UrlBuilder:
        """Creates a new builder already fed with this preset's parts."""
        builder = UrlBuilder().set_hostname(self.hostname)
        for resource in self.resources:
            builder.add_resource(resource)
        for key, value in self.parameters:
            builder.add_parameter(key, value)
        return builder

    def build(self) -> str:
        return self.builder().build()


@dataclass
class Presets:
    """All presets found in a file, by name."""

    presets: Mapping[str, UrlPreset]

    def get(self, name: str) -> UrlPreset:
        """Searches preset by name. Raises `UnknownPreset` if there is none."""
        try:
            return self.presets[name]
        except KeyError:
            known = ", ".join(sorted(self.presets)) or "none"
            raise UnknownPreset(
                f'Unknown preset "{name}" (known presets: {known}).'
            ) from None


def _parse_parameters(name: str, raw: Any) -> list[tuple[str, str]]:
    if isinstance(raw, Mapping):
        return [(str(key), str(value)) for key, value in raw.items()]

    if not isinstance(raw, list):
        raise InvalidPreset(f'Preset "{name}": "parameters" must be a list or table.')

    parameters: list[tuple[str, str]] = []
    for pair in raw:
        if not isinstance(pair, list) or len(pair) != 2:
            raise InvalidPreset(
                f'Preset "{name}": parameter {pair!r} is not a [key, value] pair.'
            )
        key, value = pair
        parameters.append((str(key), str(value)))
    return parameters


def parse_preset(name: str, raw: Mapping[str, Any]) -> UrlPreset:
    """Validates a single preset table into an `UrlPreset`."""
    if not isinstance(raw, Mapping):
        raise InvalidPreset(f'Preset "{name}" must be a table.')

    hostname = raw.get("hostname")
    if not isinstance(hostname, str) or not hostname:
        raise InvalidPreset(f'Preset "{name}" has no "hostname".')

    resources = raw.get("resources", [])
    if not isinstance(resources, list):
        raise InvalidPreset(f'Preset "{name}": "resources" must be a list.')

    return UrlPreset(
        name=name,
        hostname=hostname,
        resources=[str(resource) for resource in resources],
        parameters=_parse_parameters(name, raw.get("parameters", [])),
    )


def load_presets(path: Path) -> Presets:
    """Loads a TOML file containing `[presets.<name>]` tables."""
    import toml

    try:
        with open(path, encoding="utf-8") as f:
            toml_contents = toml.load(f)
    except (toml.TomlDecodeError, UnicodeDecodeError) as error:
        raise InvalidPreset(f"{path} is not a valid TOML file: {error}") from error

    presets = toml_contents.get("presets", {})
    if not isinstance(presets, Mapping):
        raise InvalidPreset(f'{path}: "presets" must be a table.')

    return Presets(
        presets={name: parse_preset(name, preset) for name, preset in presets.items()}
    )
