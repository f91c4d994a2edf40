"""${ENV_VAR} references inside network records, resolved against an environment mapping."""

import re
from collections.abc import Iterator, Mapping
from typing import Any

_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


def find_missing_vars(
    networks: list[dict[str, Any]], environ: Mapping[str, str]
) -> dict[str, list[str]]:
    """Map each unset variable to the names of the networks that reference it.

    Variables and network names keep their first-seen order.
    """
    missing: dict[str, list[str]] = {}
    for network in networks:
        for var_name in _references(network):
            if var_name in environ:
                continue
            referenced_by = missing.setdefault(var_name, [])
            if network["name"] not in referenced_by:
                referenced_by.append(network["name"])
    return missing


def resolve_networks(
    networks: list[dict[str, Any]], environ: Mapping[str, str]
) -> list[dict[str, Any]]:
    """Return copies of ``networks`` with every reference substituted.

    Call ``find_missing_vars`` first; an unset variable raises KeyError here.
    """
    return [_resolve(network, environ) for network in networks]


def _references(value: Any) -> Iterator[str]:
    if isinstance(value, str):
        for match in _ENV_VAR_PATTERN.finditer(value):
            yield match.group(1)
    elif isinstance(value, list):
        for item in value:
            yield from _references(item)
    elif isinstance(value, dict):
        for item in value.values():
            yield from _references(item)


def _resolve(value: Any, environ: Mapping[str, str]) -> Any:
    if isinstance(value, str):
        return _ENV_VAR_PATTERN.sub(lambda m: environ[m.group(1)], value)
    if isinstance(value, list):
        return [_resolve(item, environ) for item in value]
    if isinstance(value, dict):
        return {key: _resolve(item, environ) for key, item in value.items()}
    return value
