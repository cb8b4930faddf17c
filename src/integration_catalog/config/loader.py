"""Load a :class:`~integration_catalog.config.config.Config` from YAML.

The file layout mirrors the dataclass tree::

    default_provider: anthropic
    api_key: sk-...
    channels:
      telegram:
        bot_token: "123:abc"
        allowed_users: [alice]
      webhook:
        port: 9000
    browser:
      enabled: true

Unknown keys are rejected rather than ignored so that a typo in a
section name does not silently leave an integration unconfigured.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import fields
from pathlib import Path
from types import UnionType
from typing import Any, Union, get_args, get_origin, get_type_hints

import yaml

from integration_catalog.config.config import (
    BrowserConfig,
    ChannelsConfig,
    Config,
    DiscordConfig,
    IMessageConfig,
    MatrixConfig,
    SlackConfig,
    TelegramConfig,
    WebhookConfig,
)
from integration_catalog.errors import ConfigError

logger = logging.getLogger(__name__)

_CHANNEL_SECTIONS: dict[str, type] = {
    "telegram": TelegramConfig,
    "discord": DiscordConfig,
    "slack": SlackConfig,
    "webhook": WebhookConfig,
    "imessage": IMessageConfig,
    "matrix": MatrixConfig,
}

_TYPE_NAMES: dict[type, str] = {str: "a string", int: "an integer", bool: "a boolean"}


def _check_keys(cls: type, data: Mapping[Any, Any], where: str, path: str | None) -> None:
    known = {f.name for f in fields(cls)}
    unknown = sorted(str(key) for key in data if key not in known)
    if unknown:
        raise ConfigError(f"unknown key(s) in {where}: {', '.join(unknown)}", path)


def _matches(hint: Any, value: Any) -> bool:
    origin = get_origin(hint)
    if origin in (Union, UnionType):
        return any(_matches(arg, value) for arg in get_args(hint))
    if origin is tuple:
        item = get_args(hint)[0]
        return isinstance(value, tuple) and all(_matches(item, v) for v in value)
    if hint is type(None):
        return value is None
    if hint is int:
        # bool is an int subclass; ``port: true`` is a mistake, not 1.
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, hint)


def _describe(hint: Any) -> str:
    origin = get_origin(hint)
    if origin in (Union, UnionType):
        return " or ".join(_describe(arg) for arg in get_args(hint) if arg is not type(None))
    if origin is tuple:
        return "a list of strings"
    return _TYPE_NAMES[hint]


def _check_fields(cls: type, values: Mapping[str, Any], where: str, path: str | None) -> None:
    """Raise ``ConfigError`` for the first value that does not match its annotation."""
    hints = get_type_hints(cls)
    for key, value in values.items():
        hint = hints[key]
        if not _matches(hint, value):
            raise ConfigError(f"{where}{key} must be {_describe(hint)}", path)


def _build_section(cls: type, data: Any, where: str, path: str | None) -> Any:
    """Instantiate the dataclass *cls* from a mapping, rejecting unknown keys."""
    if not isinstance(data, Mapping):
        raise ConfigError(
            f"{where} must be a mapping, got {type(data).__name__}", path
        )
    _check_keys(cls, data, where, path)
    # YAML sequences arrive as lists; the frozen dataclasses hold tuples.
    kwargs = {
        key: tuple(value) if isinstance(value, list) else value
        for key, value in data.items()
    }
    _check_fields(cls, kwargs, f"{where}.", path)
    try:
        return cls(**kwargs)
    except TypeError as exc:
        raise ConfigError(f"invalid {where}: {exc}", path) from None


def config_from_dict(data: Mapping[str, Any], path: str | None = None) -> Config:
    """Build a ``Config`` from a plain mapping.

    Parameters
    ----------
    data:
        Parsed configuration document.
    path:
        Source file name, used only in error messages.

    Returns
    -------
    Config
        The configuration snapshot.  Missing keys take their defaults.

    Raises
    ------
    ConfigError
        If a key is unknown or a value does not match its field type.
    """
    _check_keys(Config, data, "configuration", path)

    kwargs: dict[str, Any] = {
        key: data[key] for key in ("api_key", "default_provider", "platform") if key in data
    }
    _check_fields(Config, kwargs, "", path)

    raw_channels = data.get("channels")
    if raw_channels is not None:
        if not isinstance(raw_channels, Mapping):
            raise ConfigError("channels must be a mapping", path)
        _check_keys(ChannelsConfig, raw_channels, "channels", path)
        kwargs["channels"] = ChannelsConfig(
            **{
                name: _build_section(_CHANNEL_SECTIONS[name], section, f"channels.{name}", path)
                for name, section in raw_channels.items()
                if section is not None
            }
        )

    raw_browser = data.get("browser")
    if raw_browser is not None:
        kwargs["browser"] = _build_section(BrowserConfig, raw_browser, "browser", path)

    return Config(**kwargs)


def load_config(path: str | Path | None = None) -> Config:
    """Read a YAML configuration file.

    Parameters
    ----------
    path:
        File to read.  ``None`` returns the default ``Config()``.

    Returns
    -------
    Config
        The loaded configuration snapshot.

    Raises
    ------
    ConfigError
        If the file cannot be read, is not valid YAML, or does not
        describe a valid configuration.
    """
    if path is None:
        return Config()

    display = str(path)
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError("configuration file not found", display) from None
    except OSError as exc:
        raise ConfigError(f"cannot read configuration: {exc}", display) from None

    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML: {exc}", display) from None

    if document is None:
        logger.debug("Configuration file %s is empty; using defaults", display)
        return Config()
    if not isinstance(document, Mapping):
        raise ConfigError(
            f"top level must be a mapping, got {type(document).__name__}", display
        )

    config = config_from_dict(document, display)
    logger.debug("Loaded configuration from %s", display)
    return config
