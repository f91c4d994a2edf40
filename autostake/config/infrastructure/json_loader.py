"""JSON networks loader — reads, merges local overrides, interpolates, validates."""

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from autostake.config.domain.network import NetworkConfig
from autostake.config.domain.observer import ConfigObserver
from autostake.config.infrastructure.env_interpolation import (
    find_missing_vars,
    resolve_networks,
)
from autostake.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class JsonNetworksLoader:
    """Loads the list of NetworkConfig records for one autostake run."""

    def __init__(
        self, observer: ConfigObserver, environ: Mapping[str, str] = os.environ
    ) -> None:
        self._observer = observer
        self._environ = environ

    def load(self, path: Path, overrides_path: Path | None = None) -> list[NetworkConfig]:
        """
        Load networks from ``path`` and apply the optional local overrides file.

        A missing overrides file is ignored. An unreadable or malformed one is
        reported to the observer and the base networks are used unchanged.

        Raises:
            ConfigLoadError: if the networks file does not exist.
            ConfigValidationError: if the networks file is not valid JSON, is not a
                list, repeats a network name, or violates the NetworkConfig schema.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
        """
        raw = _read_networks(path=path)
        _check_unique_names(raw=raw)

        overrides = self._read_overrides(path=overrides_path)
        if overrides:
            raw = override_networks(networks=raw, overrides=overrides)
            self._observer.overrides_applied(
                path=str(overrides_path), network_names=sorted(overrides.keys())
            )

        missing = find_missing_vars(networks=raw, environ=self._environ)
        if missing:
            raise MissingEnvVarsError(missing)

        networks = _build_networks(
            raw=resolve_networks(networks=raw, environ=self._environ)
        )
        self._observer.networks_loaded(path=str(path), total_networks=len(networks))
        return networks

    def _read_overrides(self, path: Path | None) -> dict[str, Any]:
        if path is None or not path.exists():
            return {}
        try:
            with path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, json.JSONDecodeError) as exc:
            self._observer.overrides_invalid(path=str(path), reason=str(exc))
            return {}
        if not isinstance(data, dict):
            self._observer.overrides_invalid(
                path=str(path), reason="expected an object keyed by network name"
            )
            return {}
        return data


def override_networks(
    networks: list[dict[str, Any]], overrides: dict[str, Any]
) -> list[dict[str, Any]]:
    """
    Deep-merge ``overrides`` into ``networks`` by network name.

    Names only present in ``overrides`` become new networks. Lists in an override
    replace the base list rather than being merged. The result is sorted by name.
    """
    by_name = {network["name"]: network for network in networks}
    names = sorted(set(by_name) | set(overrides))

    merged: list[dict[str, Any]] = []
    for name in names:
        network = by_name.get(name) or {"name": name}
        override = overrides.get(name)
        if isinstance(override, dict):
            network = _deep_merge(base=network, override=override)
        merged.append(network)
    return merged


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _deep_merge(base=result[key], override=value)
        else:
            result[key] = value
    return result


def _read_networks(path: Path) -> list[dict[str, Any]]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except json.JSONDecodeError as exc:
        raise ConfigValidationError(f"{path} is not valid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise ConfigValidationError(f"{path} must contain a list of networks")

    unnamed = [
        str(index)
        for index, item in enumerate(data)
        if not isinstance(item, dict) or not item.get("name")
    ]
    if unnamed:
        raise ConfigValidationError(
            f"network entries without a name at index {', '.join(unnamed)}"
        )
    return data


def _check_unique_names(raw: list[dict[str, Any]]) -> None:
    seen: set[str] = set()
    duplicates: list[str] = []
    for item in raw:
        name = item["name"]
        if name in seen and name not in duplicates:
            duplicates.append(name)
        seen.add(name)
    if duplicates:
        raise ConfigValidationError(
            f"duplicate network names: {', '.join(duplicates)}"
        )


def _build_networks(raw: Any) -> list[NetworkConfig]:
    try:
        return [NetworkConfig.model_validate(item) for item in raw]
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
