"""Layered config loading: defaults < YAML < REELPRESS_* env < CLI."""

from __future__ import annotations

from copy import deepcopy
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterable, Mapping

import structlog
import yaml
from dotenv import load_dotenv
from pydantic import AliasChoices, AliasPath

from .defaults import DEFAULT_CONFIG
from .schema import AppConfig, EnvOverrides

log = structlog.get_logger(__name__)

_TOP_LEVEL_KEYS = ("app_name", "environment")


@lru_cache(maxsize=1)
def _section_paths() -> dict[str, tuple[str, str]]:
    """Map flat field names to their YAML ``(section, key)``.

    Read from the ``AliasPath`` entries declared on :class:`AppConfig`, so
    a new sectioned field needs no change here.
    """
    paths: dict[str, tuple[str, str]] = {}
    for name, field in AppConfig.model_fields.items():
        alias = field.validation_alias
        if not isinstance(alias, AliasChoices):
            continue
        for choice in alias.choices:
            if isinstance(choice, AliasPath) and len(choice.path) == 2:
                section, key = choice.path
                paths[name] = (str(section), str(key))
    return paths


def _sectioned(layer: Mapping[str, Any]) -> dict[str, Any]:
    """Rewrite one layer into the sectioned shape; flat keys move into sections."""
    paths = _section_paths()
    sections = {section for section, _ in paths.values()}

    out: dict[str, Any] = {
        key: layer[key] for key in _TOP_LEVEL_KEYS if key in layer
    }
    for section in sections:
        block = layer.get(section)
        if isinstance(block, Mapping):
            out[section] = dict(block)
    for flat_key, (section, key) in paths.items():
        if flat_key in layer:
            out.setdefault(section, {})[key] = layer[flat_key]
    return out


def _merge_into(target: dict[str, Any], layer: Mapping[str, Any]) -> None:
    for key, value in layer.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            _merge_into(current, value)
        else:
            target[key] = value


def _yaml_layer(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        raise FileNotFoundError(config_path)
    parsed = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise ValueError(f"Config YAML must be a mapping, got: {type(parsed)!r}")
    return parsed


def _layers(
    config_path: Path | None, cli_overrides: Mapping[str, Any]
) -> Iterable[Mapping[str, Any]]:
    # Lowest precedence first.
    yield deepcopy(DEFAULT_CONFIG)
    if config_path is not None:
        yield _yaml_layer(config_path)
    yield EnvOverrides().to_update_dict()
    yield cli_overrides


def load_config(
    *,
    config_path: Path | None = None,
    dotenv_path: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> AppConfig:
    """Merge every config layer and validate the result once.

    A ``.env`` file, when given, feeds the environment layer without
    overriding variables that are already set. Nothing is written to disk.

    Raises:
        FileNotFoundError: ``config_path`` or ``dotenv_path`` does not exist.
        ValueError: The YAML file is not a mapping.
        pydantic.ValidationError: The merged values are invalid.
    """
    if dotenv_path is not None:
        if not dotenv_path.exists():
            raise FileNotFoundError(dotenv_path)
        load_dotenv(dotenv_path, override=False)

    merged: dict[str, Any] = {}
    for layer in _layers(config_path, cli_overrides or {}):
        _merge_into(merged, _sectioned(layer))

    config = AppConfig.model_validate(merged)
    log.debug(
        "config_loaded",
        config_path=str(config_path) if config_path else None,
        environment=config.environment,
    )
    return config
