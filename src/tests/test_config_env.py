import os
from pathlib import Path

from npm_connector import config


def test_load_env_file_parses_export_and_quotes(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("NPM_CONNECTOR_DEFAULT_PACKAGE", raising=False)
    monkeypatch.delenv("NPM_CONNECTOR_TIMEOUT_SECONDS", raising=False)

    env_file = tmp_path / ".env"
    env_file.write_text(
        "\n".join(
            [
                "# comment",
                "export NPM_CONNECTOR_DEFAULT_PACKAGE='left-pad'",
                'NPM_CONNECTOR_TIMEOUT_SECONDS="45"',
                "not a setting",
            ]
        ),
        encoding="utf-8",
    )

    config._load_env_file(env_file)

    assert os.getenv("NPM_CONNECTOR_DEFAULT_PACKAGE") == "left-pad"
    assert os.getenv("NPM_CONNECTOR_TIMEOUT_SECONDS") == "45"


def test_load_env_file_does_not_override_existing_env(
    tmp_path: Path, monkeypatch
) -> None:
    monkeypatch.setenv("NPM_CONNECTOR_DEFAULT_PACKAGE", "from-shell")

    env_file = tmp_path / ".env"
    env_file.write_text("NPM_CONNECTOR_DEFAULT_PACKAGE=from-file\n", encoding="utf-8")

    config._load_env_file(env_file)

    assert os.getenv("NPM_CONNECTOR_DEFAULT_PACKAGE") == "from-shell"


def test_load_env_file_ignores_missing_file(tmp_path: Path) -> None:
    config._load_env_file(tmp_path / "missing.env")
