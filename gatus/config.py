"""Loading and validation of the main configuration."""

from __future__ import annotations

import logging
import os
import re
import stat
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, Mapping

import yaml

from gatus import maintenance, ui, web
from gatus.connectivity import ConnectivityConfig
from gatus.maintenance import MaintenanceConfig
from gatus.ui import UIConfig
from gatus.web import WebConfig

DEFAULT_CONFIGURATION_FILE_PATH = "config/config.yaml"
DEFAULT_FALLBACK_CONFIGURATION_FILE_PATH = "config/config.yml"

_LITERAL_DOLLAR = "__GATUS_LITERAL_DOLLAR_SIGN__"
_ENV_REFERENCE = re.compile(
    r"\$(?:\{([^}]*)\}|(\{)|([*#$@!?\-0-9])|([A-Za-z_][A-Za-z0-9_]*))"
)

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when the configuration cannot be loaded or is invalid."""


class NoEndpointError(ConfigError):
    def __init__(self) -> None:
        super().__init__("configuration should contain at least 1 endpoint")


class ConfigFileNotFoundError(ConfigError):
    def __init__(self) -> None:
        super().__init__("configuration file not found")


@dataclass
class Config:
    """The main configuration.

    Sections whose handling lives elsewhere (security, alerting, storage,
    remote and the endpoints themselves) are kept as parsed YAML.
    """

    endpoints: list[Any] = field(default_factory=list)
    debug: bool = False
    metrics: bool = False
    skip_invalid_config_update: bool = False
    disable_monitoring_lock: bool = False
    security: Any = None
    alerting: Any = None
    storage: Any = None
    remote: Any = None
    web: WebConfig | None = None
    ui: UIConfig | None = None
    maintenance: MaintenanceConfig | None = None
    connectivity: ConnectivityConfig | None = None
    config_path: str = ""
    last_file_mod_time: float = 0.0

    def has_loaded_configuration_been_modified(self) -> bool:
        """Return whether a loaded file changed since the configuration was read."""
        last = int(self.last_file_mod_time)
        try:
            info = os.stat(self.config_path)
        except OSError:
            return False
        if stat.S_ISDIR(info.st_mode):
            return any(last < _mtime_seconds(path) for path in iter_config_files(self.config_path))
        return info.st_mtime != 0 and last < int(info.st_mtime)

    def update_last_file_mod_time(self) -> None:
        self.last_file_mod_time = time.time()


def _mtime_seconds(path: Path) -> int:
    try:
        return int(path.stat().st_mtime)
    except OSError:
        return 0


def expand_env(text: str) -> str:
    """Replace ``$NAME`` and ``${NAME}`` with environment values, or nothing if unset."""

    def substitute(match: re.Match[str]) -> str:
        name = match.group(1) if match.group(1) is not None else (match.group(3) or match.group(4))
        if not name:
            return ""
        return os.environ.get(name, "")

    return _ENV_REFERENCE.sub(substitute, text)


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Merge two mappings: nested mappings merge, lists concatenate.

    A key holding any other value in both raises :class:`ConfigError`.
    """
    merged = dict(base)
    for key, value in override.items():
        if key not in merged or merged[key] is None:
            merged[key] = value
            continue
        existing = merged[key]
        if isinstance(existing, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(existing, value)
        elif isinstance(existing, list) and isinstance(value, list):
            merged[key] = [*existing, *value]
        else:
            raise ConfigError(f"error merging key {key!r}: key with primitive value defined more than once")
    return merged


def _has_config_extension(name: str) -> bool:
    return name.endswith(".yml") or name.endswith(".yaml")


def iter_config_files(path: str | os.PathLike[str] | None) -> Iterator[Path]:
    """Yield the YAML files under ``path`` in lexical order, recursively."""
    if not path:
        return
    root = Path(path)
    if root.is_dir():
        yield from _walk(root)
    elif root.is_file() and _has_config_extension(root.name):
        yield root


def _walk(directory: Path) -> Iterator[Path]:
    try:
        entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
    except OSError:
        return
    for entry in entries:
        if entry.is_dir():
            yield from _walk(entry)
        elif _has_config_extension(entry.name):
            yield entry


def _section(data: Mapping[str, Any], key: str) -> Any:
    return data.get(key)


def parse_and_validate(text: str) -> Config:
    """Parse configuration text, expanding environment variables, and validate it.

    ``$$`` stands for a literal ``$``.
    """
    text = text.replace("$$", _LITERAL_DOLLAR)
    text = expand_env(text)
    text = text.replace(_LITERAL_DOLLAR, "$")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid configuration: {exc}") from exc
    if data is None:
        raise NoEndpointError()
    if not isinstance(data, Mapping):
        raise ConfigError("invalid configuration: top level must be a mapping")
    endpoints = data.get("endpoints")
    if not endpoints:
        raise NoEndpointError()
    if not isinstance(endpoints, list):
        raise ConfigError("invalid configuration: endpoints must be a list")

    config = Config(
        endpoints=endpoints,
        debug=bool(data.get("debug", False)),
        metrics=bool(data.get("metrics", False)),
        skip_invalid_config_update=bool(data.get("skip-invalid-config-update", False)),
        disable_monitoring_lock=bool(data.get("disable-monitoring-lock", False)),
        security=_section(data, "security"),
        alerting=_section(data, "alerting"),
        storage=_section(data, "storage"),
        remote=_section(data, "remote"),
    )
    if config.alerting is None:
        logger.info("Alerting is not configured")

    web_data = data.get("web")
    if web_data is None:
        config.web = web.default_config()
    else:
        config.web = WebConfig.from_dict(web_data)
        config.web.validate_and_set_defaults()

    ui_data = data.get("ui")
    if ui_data is None:
        config.ui = ui.default_config()
    else:
        config.ui = UIConfig.from_dict(ui_data)
        config.ui.validate_and_set_defaults()

    maintenance_data = data.get("maintenance")
    if maintenance_data is None:
        config.maintenance = maintenance.default_config()
    else:
        config.maintenance = MaintenanceConfig.from_dict(maintenance_data)
        config.maintenance.validate_and_set_defaults()

    connectivity_data = data.get("connectivity")
    if connectivity_data is not None:
        config.connectivity = ConnectivityConfig.from_dict(connectivity_data)
        config.connectivity.validate_and_set_defaults()

    return config


def _read_directory(directory: str) -> str:
    merged: dict[str, Any] = {}
    for path in iter_config_files(directory):
        logger.info("Reading configuration from %s", path)
        try:
            content = path.read_text(encoding="utf-8")
            document = yaml.safe_load(content)
        except OSError as exc:
            raise ConfigError(
                f"error reading configuration from directory {directory}: "
                f"error reading configuration from file {path}: {exc}"
            ) from exc
        except yaml.YAMLError as exc:
            raise ConfigError(f"error reading configuration from directory {directory}: {exc}") from exc
        if document is None:
            continue
        if not isinstance(document, Mapping):
            raise ConfigError(
                f"error reading configuration from directory {directory}: {path} must hold a mapping"
            )
        try:
            merged = deep_merge(merged, document)
        except ConfigError as exc:
            raise ConfigError(f"error reading configuration from directory {directory}: {exc}") from exc
    if not merged:
        return ""
    return yaml.safe_dump(merged, sort_keys=False, allow_unicode=True)


def load_configuration(config_path: str | None = None) -> Config:
    """Load the configuration from a file or a directory of YAML files.

    Falls back to the default paths when ``config_path`` is empty or missing.
    """
    candidates = (config_path, DEFAULT_CONFIGURATION_FILE_PATH, DEFAULT_FALLBACK_CONFIGURATION_FILE_PATH)
    used_path = next((candidate for candidate in candidates if candidate and os.path.exists(candidate)), None)
    if used_path is None:
        raise ConfigFileNotFoundError()
    if os.path.isdir(used_path):
        text = _read_directory(used_path)
    else:
        logger.info("Reading configuration from configFile=%s", used_path)
        text = Path(used_path).read_text(encoding="utf-8")
    if not text:
        raise ConfigFileNotFoundError()
    config = parse_and_validate(text)
    config.config_path = used_path
    config.update_last_file_mod_time()
    return config