"""Fixtures — settings and sample reports."""

from pathlib import Path

import pytest

from src.config import Settings
from tests.factories import URL, make_node, make_violation

SETTINGS_ENV_NAMES = (
    "CHROMEDRIVER_PATH",
    "OUTPUT_DIRECTORY",
    "AXE_COMMAND",
    "DEBUG",
    "EXTRANEOUS",
    "VERBOSE",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep settings from the developer shell out of every test."""
    for name in SETTINGS_ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        _env_file=None,
        output_directory=str(tmp_path / "reports"),
        debug=False,
        extraneous=False,
        verbose=False,
    )


@pytest.fixture
def two_rule_report() -> list[dict]:
    """Two violated rules with 2 and 3 nodes."""
    return [
        {
            "url": URL,
            "violations": [
                make_violation(
                    "image-alt",
                    nodes=[
                        make_node(target=["#logo", "img"]),
                        make_node(html="<img src=b.png>", target=["#hero"]),
                    ],
                ),
                make_violation(
                    "color-contrast",
                    tags=["cat.color", "wcag2aa"],
                    nodes=[make_node(html=f"<p>{i}</p>", target=[f"p:nth-child({i})"]) for i in range(1, 4)],
                ),
            ],
        }
    ]
