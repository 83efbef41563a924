"""Tests for the command-line driver."""

from unittest.mock import patch

import pytest

from src.cli import build_parser, main
from src.core.config import Config
from src.orchestrator import QueryResult


@pytest.fixture
def mock_runner_class():
    with patch("src.cli.load_config", return_value=Config()), \
            patch("src.cli.QueryRunner") as runner_class:
        yield runner_class


class TestBuildParser:
    """Tests for build_parser()."""

    def test_parses_dates_and_options(self):
        args = build_parser().parse_args(
            ["2024-05-01", "2024-05-10", "--timeout", "2.5", "--config", "c.yaml"]
        )

        assert args.start == "2024-05-01"
        assert args.end == "2024-05-10"
        assert args.timeout == 2.5
        assert args.config == "c.yaml"

    def test_dates_are_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["2024-05-01"])

    @pytest.mark.parametrize("timeout", ["0", "-1", "soon"])
    def test_rejects_invalid_timeout(self, timeout, capsys):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["2024-05-01", "2024-05-10", "--timeout", timeout])

        assert exc_info.value.code == 2
        assert "--timeout" in capsys.readouterr().err


class TestMain:
    """Tests for main()."""

    def test_prints_report(self, mock_runner_class, capsys):
        mock_runner_class.return_value.run_query.return_value = QueryResult(
            report="Terremotos:\n\n",
        )

        exit_code = main(["2024-05-01", "2024-05-10"])

        assert exit_code == 0
        assert capsys.readouterr().out == "Terremotos:\n\n"

    def test_prints_error_to_stderr(self, mock_runner_class, capsys):
        mock_runner_class.return_value.run_query.return_value = QueryResult(
            error="Formato de fecha inválido. Usa el formato YYYY-MM-DD.",
        )

        exit_code = main(["bad", "2024-05-10"])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.out == ""
        assert "Formato de fecha inválido" in captured.err

    def test_timeout_option_overrides_config(self, mock_runner_class):
        mock_runner_class.return_value.run_query.return_value = QueryResult(report="")

        main(["2024-05-01", "2024-05-10", "--timeout", "3"])

        config = mock_runner_class.call_args[0][0]
        assert config.request_timeout_seconds == 3.0

    def test_invalid_config_exits_with_message(self, capsys):
        with patch(
            "src.cli.load_config",
            side_effect=ValueError("Invalid configuration: request_timeout_seconds"),
        ), patch("src.cli.QueryRunner") as runner_class:
            exit_code = main(["2024-05-01", "2024-05-10"])

        assert exit_code == 2
        assert "request_timeout_seconds" in capsys.readouterr().err
        runner_class.assert_not_called()

    def test_configures_logging_before_loading_config(self, mock_runner_class):
        calls = []
        mock_runner_class.return_value.run_query.return_value = QueryResult(report="")

        with patch(
            "src.cli.logging.basicConfig",
            side_effect=lambda **kwargs: calls.append("logging"),
        ), patch(
            "src.cli.load_config",
            side_effect=lambda path: calls.append("config") or Config(),
        ):
            main(["2024-05-01", "2024-05-10"])

        assert calls == ["logging", "config"]
