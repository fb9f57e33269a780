"""Command line entrypoint tests."""

from unittest.mock import AsyncMock, patch

import pytest

from src.config import Settings
from src.main import build_parser, main, resolve_settings


def _settings(**overrides) -> Settings:
    defaults = dict(_env_file=None, debug=False, extraneous=False, verbose=False)
    defaults.update(overrides)
    return Settings(**defaults)


def test_resolve_settings_without_flags_keeps_environment():
    settings = _settings(verbose=True, output_directory="reports")
    args = build_parser().parse_args(["https://example.com/"])
    assert resolve_settings(args, settings) == settings


def test_resolve_settings_flags_override():
    args = build_parser().parse_args(
        [
            "https://example.com/",
            "--verbose",
            "--extraneous",
            "--chromedriver-path",
            "/opt/chromedriver",
            "--output-directory",
            "out",
        ]
    )
    resolved = resolve_settings(args, _settings())
    assert resolved.verbose is True
    assert resolved.extraneous is True
    assert resolved.debug is False
    assert resolved.chromedriver_path == "/opt/chromedriver"
    assert resolved.output_directory == "out"


@patch("src.main.setup_logging")
@patch("src.main.run_scan", new_callable=AsyncMock)
@patch("src.main.get_settings")
def test_main_missing_url_exits_1(mock_get_settings, mock_run_scan, mock_setup_logging):
    mock_get_settings.return_value = _settings()

    with pytest.raises(SystemExit) as exc_info:
        main([])

    assert exc_info.value.code == 1
    mock_run_scan.assert_not_called()


@patch("src.main.setup_logging")
@patch("src.main.run_scan", new_callable=AsyncMock)
@patch("src.main.get_settings")
def test_main_exits_with_pipeline_code(mock_get_settings, mock_run_scan, mock_setup_logging):
    settings = _settings()
    mock_get_settings.return_value = settings
    mock_run_scan.return_value = 0

    with pytest.raises(SystemExit) as exc_info:
        main(["https://example.com/"])

    assert exc_info.value.code == 0
    mock_run_scan.assert_awaited_once_with("https://example.com/", settings)
    mock_setup_logging.assert_called_once_with("INFO")


@patch("src.main.setup_logging")
@patch("src.main.run_scan", new_callable=AsyncMock)
@patch("src.main.get_settings")
def test_main_debug_raises_log_level(mock_get_settings, mock_run_scan, mock_setup_logging):
    mock_get_settings.return_value = _settings()
    mock_run_scan.return_value = 1

    with pytest.raises(SystemExit) as exc_info:
        main(["https://example.com/", "--debug"])

    assert exc_info.value.code == 1
    mock_setup_logging.assert_called_once_with("DEBUG")
    assert mock_run_scan.await_args.args[1].debug is True


@pytest.mark.parametrize("argv", [["--no-such-flag"], ["https://example.com/", "https://example.org/"]])
@patch("src.main.run_scan", new_callable=AsyncMock)
def test_main_bad_arguments_exit_1(mock_run_scan, argv, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)

    assert exc_info.value.code == 1
    assert "error:" in capsys.readouterr().err
    mock_run_scan.assert_not_called()
