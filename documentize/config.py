"""Configuration loading for documentize (.documentize.yml)."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .errors import ConfigError
from .models import MetaTag

CONFIG_FILENAME = ".documentize.yml"

DATA_ATTRIBUTE_PATTERN = re.compile(r"^data-[a-zA-Z_-][a-zA-Z0-9_-]*$")

DEFAULT_MARKER_ATTRIBUTE = "data-documentize"
DEFAULT_DESCRIPTION_ATTRIBUTE = "data-description"
DEFAULT_EVENTS_ATTRIBUTE = "data-symbol-events"
DEFAULT_PROPS_ATTRIBUTE = "data-symbol-props"
DEFAULT_SLOTS_ATTRIBUTE = "data-symbol-slots"

DEFAULT_EVENTS_SYMBOL = "$$Events"
DEFAULT_PROPS_SYMBOL = "$$Props"
DEFAULT_SLOTS_SYMBOL = "$$Slots"


@dataclass
class DataAttributes:
    """Names of the marker tag attributes documentize reads."""

    marker: str = DEFAULT_MARKER_ATTRIBUTE
    description: str = DEFAULT_DESCRIPTION_ATTRIBUTE
    events: str = DEFAULT_EVENTS_ATTRIBUTE
    props: str = DEFAULT_PROPS_ATTRIBUTE
    slots: str = DEFAULT_SLOTS_ATTRIBUTE


@dataclass
class SymbolNames:
    """Declarations resolved when the marker tag does not name one."""

    events: str = DEFAULT_EVENTS_SYMBOL
    props: str = DEFAULT_PROPS_SYMBOL
    slots: str = DEFAULT_SLOTS_SYMBOL


@dataclass
class DocumentizeConfig:
    """Represents the settings defined in .documentize.yml."""

    root: Path
    data_attributes: DataAttributes = field(default_factory=DataAttributes)
    symbols: SymbolNames = field(default_factory=SymbolNames)
    verbose: bool = False
    include: List[str] = field(default_factory=lambda: ["**/*.svelte"])
    exclude: List[str] = field(default_factory=list)
    output_dir: Optional[Path] = None
    declaration_files: List[Path] = field(default_factory=list)

    def validate(self) -> "DocumentizeConfig":
        """Check every configured data attribute name.

        Raises:
            ConfigError: naming the first invalid attribute setting.
        """
        for setting in ("marker", "description", "events", "props", "slots"):
            value = getattr(self.data_attributes, setting)
            if not DATA_ATTRIBUTE_PATTERN.match(value):
                raise ConfigError(
                    f"Invalid {setting} data-attribute '{value}'. "
                    f"Expected format '{DATA_ATTRIBUTE_PATTERN.pattern}'."
                )
        return self


@dataclass(frozen=True)
class ComponentSymbols:
    """Declaration names to resolve for one component."""

    events: str
    props: str
    slots: str


def resolve_component_symbols(meta_tag: MetaTag, config: DocumentizeConfig) -> ComponentSymbols:
    """Apply a marker tag's symbol overrides on top of the configured names."""
    attributes = config.data_attributes
    symbols = config.symbols
    return ComponentSymbols(
        events=meta_tag.get(attributes.events) or symbols.events,
        props=meta_tag.get(attributes.props) or symbols.props,
        slots=meta_tag.get(attributes.slots) or symbols.slots,
    )


def load_config(config_path: Path) -> DocumentizeConfig:
    """Load and validate configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return DocumentizeConfig(root=root).validate()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = DocumentizeConfig(root=root)

    attributes_data = _as_dict(data.get("data_attributes"))
    for setting in ("marker", "description", "events", "props", "slots"):
        value = _as_str(attributes_data.get(setting))
        if value:
            setattr(config.data_attributes, setting, value)

    symbols_data = _as_dict(data.get("symbols"))
    for setting in ("events", "props", "slots"):
        value = _as_str(symbols_data.get(setting))
        if value:
            setattr(config.symbols, setting, value)

    verbose = _as_bool(data.get("verbose"))
    if verbose is not None:
        config.verbose = verbose

    include = _as_str_list(data.get("include"))
    if include:
        config.include = include
    config.exclude = _as_str_list(data.get("exclude"))

    output_dir = _as_str(data.get("output_dir"))
    config.output_dir = root / output_dir if output_dir else None
    config.declaration_files = [root / item for item in _as_str_list(data.get("declarations"))]

    return config.validate()


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ComponentSymbols",
    "DataAttributes",
    "DocumentizeConfig",
    "SymbolNames",
    "load_config",
    "resolve_component_symbols",
]
