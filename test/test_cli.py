"""Tests for the click command-line interface."""

from __future__ import annotations

import json
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from QueryParser.cli import cli
from QueryParser.core.errors import InternalParseError
from QueryParser.utils.log import log


def _config_yaml(formats: str = "[console]", queries: str = "") -> str:
    return f"""
log:
  level: INFO
  to_file: false
  dir: log

output:
  base_dir: output
  formats: {formats}
{queries}
"""


class TestParseCommand(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()

    def tearDown(self) -> None:
        for handler in list(log.handlers):
            handler.close()
            log.removeHandler(handler)

    def _invoke(self, args: list[str], config_text: str):
        with self.runner.isolated_filesystem():
            Path("config").mkdir()
            Path("config/default.yml").write_text(config_text, encoding="utf-8")
            result = self.runner.invoke(cli, args)
            json_files = sorted(Path("output/json").glob("*.json")) if Path("output/json").exists() else []
            payloads = [json.loads(p.read_text(encoding="utf-8")) for p in json_files]
        return result, payloads

    def test_parse_argument_to_console(self) -> None:
        result, _ = self._invoke(["parse", "--", '-k:"a b",c'], _config_yaml())
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("[{k [a b c] true}]", result.output)

    def test_configured_queries_are_used(self) -> None:
        queries = "queries:\n  - 'a:b'\n  - 'c d'\n"
        result, payloads = self._invoke(["parse"], _config_yaml("[json]", queries))
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(len(payloads), 1)
        self.assertEqual(
            payloads[0],
            [
                {"query": "a:b", "nodes": [{"key": "a", "values": ["b"], "negative": False}]},
                {
                    "query": "c d",
                    "nodes": [
                        {"key": "", "values": ["c"], "negative": False},
                        {"key": "", "values": ["d"], "negative": False},
                    ],
                },
            ],
        )

    def test_invalid_query_aborts_after_other_queries(self) -> None:
        result, payloads = self._invoke(["parse", "a!", "k:v"], _config_yaml("[json]"))
        self.assertEqual(result.exit_code, 1)
        self.assertIn("  a!", result.output)
        self.assertIn("   ^ invalid character", result.output)
        self.assertEqual(payloads[0], [{"query": "k:v", "nodes": [{"key": "k", "values": ["v"], "negative": False}]}])

    def test_internal_failure_is_reported_without_caret(self) -> None:
        with patch("QueryParser.cli.commands.parse", side_effect=InternalParseError("internal parse failure: boom")):
            result, payloads = self._invoke(["parse", "k:v"], _config_yaml("[json]"))
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Failed to parse 'k:v': internal parse failure: boom", result.output)
        self.assertNotIn("^", result.output)
        self.assertEqual(payloads, [])

    def test_no_queries_is_usage_error(self) -> None:
        result, _ = self._invoke(["parse"], _config_yaml())
        self.assertEqual(result.exit_code, 2)
        self.assertIn("No query given", result.output)

    def test_invalid_config_is_reported(self) -> None:
        result, _ = self._invoke(["parse", "k:v"], _config_yaml("[xml]"))
        self.assertEqual(result.exit_code, 1)
        self.assertIn("unknown formats", result.output)


if __name__ == "__main__":
    unittest.main()
