from __future__ import annotations

import os
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[2]


def _unquote_env_value(value: str) -> str:
    stripped = value.strip()
    if len(stripped) >= 2 and stripped[0] == stripped[-1] and stripped[0] in {"'", '"'}:
        return stripped[1:-1]
    return stripped


def _load_env_file(path: Path) -> None:
    if not path.exists():
        return
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export ") :].strip()
        if "=" not in line:
            continue
        key, raw_value = line.split("=", 1)
        key = key.strip()
        if not key or key in os.environ:
            continue
        os.environ[key] = _unquote_env_value(raw_value)


_load_env_file(ROOT_DIR / ".env")

NPM_DOWNLOADS_BASE_URL = (
    os.getenv("NPM_DOWNLOADS_BASE_URL") or ""
).strip().rstrip("/") or "https://api.npmjs.org/downloads/range"

DEFAULT_PACKAGE = (
    os.getenv("NPM_CONNECTOR_DEFAULT_PACKAGE") or ""
).strip() or "googleapis"

REQUEST_TIMEOUT_SECONDS = int(os.getenv("NPM_CONNECTOR_TIMEOUT_SECONDS", "30"))

AUTH_HELP_URL = "https://www.example.org/connector-auth-help"
