"""Tests for vpncheck.py.

Tests CLI argument parsing, main workflow, and exit code handling.
"""

import json
import sys
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from config import ExitCode
from enums import Provider
from exceptions import EnumerationError
from vpncheck import main, parse_arguments


def _args(**overrides) -> Mock:
    args = Mock()
    args.verbose = False
    args.log_file = None
    args.providers = None
    args.export = None
    args.output = None
    for key, value in overrides.items():
        setattr(args, key, value)
    return args


class TestParseArguments:
    """Tests for parse_arguments function."""

    def test_no_arguments(self) -> None:
        args = parse_arguments([])

        assert args.verbose is False
        assert args.log_file is None
        assert args.providers is None
        assert args.export is None
        assert args.output is None

    def test_reads_sys_argv(self, monkeypatch) -> None:
        monkeypatch.setattr(sys, "argv", ["vpncheck", "-v"])

        assert parse_arguments().verbose is True

    def test_repeated_provider(self) -> None:
        args = parse_arguments(["-p", "tailscale", "--provider", "mullvad"])

        assert args.providers == [Provider.TAILSCALE, Provider.MULLVAD]

    def test_unknown_provider_rejected(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            parse_arguments(["-p", "nordvpn"])

        assert exc_info.value.code == 2  # argparse usage error

    def test_export_with_output(self) -> None:
        args = parse_arguments(["--export", "json", "--output", "report.json"])

        assert args.export == "json"
        assert args.output == Path("report.json")

    def test_output_without_export_exits(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            parse_arguments(["--output", "report.json"])

        assert exc_info.value.code == ExitCode.INVALID_ARGUMENTS


@patch("vpncheck.setup_logging")
@patch("vpncheck.check_dependencies", return_value=True)
class TestMain:
    """Tests for main function."""

    @patch("vpncheck.format_output")
    @patch("vpncheck.collect_provider_matches")
    @patch("vpncheck.parse_arguments")
    def test_table_output(
        self, mock_parse, mock_collect, mock_format, mock_deps, mock_logging, sample_results
    ) -> None:
        mock_parse.return_value = _args(providers=[Provider.TAILSCALE])
        mock_collect.return_value = sample_results

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == ExitCode.SUCCESS
        mock_collect.assert_called_once_with([Provider.TAILSCALE])
        mock_format.assert_called_once_with(sample_results)

    @patch("vpncheck.collect_provider_matches")
    @patch("vpncheck.parse_arguments")
    def test_json_to_stdout(
        self, mock_parse, mock_collect, mock_deps, mock_logging, sample_results, capsys
    ) -> None:
        mock_parse.return_value = _args(export="json")
        mock_collect.return_value = sample_results

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == ExitCode.SUCCESS
        data = json.loads(capsys.readouterr().out)
        assert data["metadata"]["summary"]["detected_providers"] == ["mullvad", "tailscale"]

    @patch("vpncheck.collect_provider_matches")
    @patch("vpncheck.parse_arguments")
    def test_json_to_file(
        self, mock_parse, mock_collect, mock_deps, mock_logging, sample_results, tmp_path
    ) -> None:
        output = tmp_path / "report.json"
        mock_parse.return_value = _args(export="json", output=output)
        mock_collect.return_value = sample_results

        with pytest.raises(SystemExit):
            main()

        assert json.loads(output.read_text())["metadata"]["provider_count"] == 7

    @patch("vpncheck.format_output")
    @patch("vpncheck.collect_provider_matches")
    @patch("vpncheck.parse_arguments")
    def test_nothing_detected_is_success(
        self, mock_parse, mock_collect, mock_format, mock_deps, mock_logging
    ) -> None:
        mock_parse.return_value = _args()
        mock_collect.return_value = []

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == ExitCode.SUCCESS

    @patch("vpncheck.collect_provider_matches")
    @patch("vpncheck.parse_arguments")
    def test_enumeration_failure(
        self, mock_parse, mock_collect, mock_deps, mock_logging
    ) -> None:
        mock_parse.return_value = _args()
        mock_collect.side_effect = EnumerationError("failed to list network interfaces")

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == ExitCode.ENUMERATION_FAILED

    @patch("vpncheck.collect_provider_matches")
    @patch("vpncheck.parse_arguments")
    def test_unexpected_error(self, mock_parse, mock_collect, mock_deps, mock_logging) -> None:
        mock_parse.return_value = _args()
        mock_collect.side_effect = OSError("disk full")

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == ExitCode.GENERAL_ERROR

    @patch("vpncheck.collect_provider_matches")
    @patch("vpncheck.parse_arguments")
    def test_keyboard_interrupt(self, mock_parse, mock_collect, mock_deps, mock_logging) -> None:
        mock_parse.return_value = _args()
        mock_collect.side_effect = KeyboardInterrupt()

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == ExitCode.GENERAL_ERROR

    @patch("vpncheck.collect_provider_matches")
    @patch("vpncheck.parse_arguments")
    def test_missing_dependencies(
        self, mock_parse, mock_collect, mock_deps, mock_logging
    ) -> None:
        mock_parse.return_value = _args()
        mock_deps.return_value = False

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == ExitCode.MISSING_DEPENDENCIES
        mock_collect.assert_not_called()
