from __future__ import annotations

from typing import Any, Mapping

from npm_connector.config import DEFAULT_PACKAGE


def resolve_config(config_params: Mapping[str, Any] | None) -> dict[str, Any]:
    """Fill in missing config values and normalize the package list.

    A missing or blank ``package`` falls back to ``DEFAULT_PACKAGE``. The
    comma-separated list is trimmed element by element and empty entries are
    dropped, so resolving an already resolved config returns it unchanged.
    Package names are not checked against the registry.
    """
    resolved = dict(config_params or {})
    raw_package = str(resolved.get("package") or "")
    packages = [name.strip() for name in raw_package.split(",") if name.strip()]
    resolved["package"] = ",".join(packages) if packages else DEFAULT_PACKAGE
    return resolved


def package_list(config_params: Mapping[str, Any]) -> list[str]:
    return str(config_params["package"]).split(",")
