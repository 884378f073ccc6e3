"""Tests for layered config parsing and validation."""

import sys
import tempfile
import unittest
from copy import deepcopy
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from QueryParser.config import load_config, load_config_with_defaults, parse_config_dict


_BASE_YAML = """
log:
  level: INFO
  to_file: false
  dir: log

output:
  base_dir: output
  formats: [console]

queries:
  - "k:v"
"""


def _base_raw_config() -> dict:
    return {
        "log": {"level": "INFO", "to_file": True, "dir": "log"},
        "output": {"base_dir": "output", "formats": ["console", "json"]},
        "queries": ["a:b", "  ", "-c"],
    }


class TestParseConfigDict(unittest.TestCase):
    def test_valid_config(self) -> None:
        cfg = parse_config_dict(_base_raw_config())
        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertTrue(cfg.runtime.to_file)
        self.assertEqual(cfg.output.formats, ("console", "json"))
        self.assertEqual(cfg.queries, ("a:b", "-c"))

    def test_level_is_uppercased(self) -> None:
        raw = _base_raw_config()
        raw["log"]["level"] = "debug"
        self.assertEqual(parse_config_dict(raw).runtime.level, "DEBUG")

    def test_queries_are_optional(self) -> None:
        raw = _base_raw_config()
        del raw["queries"]
        self.assertEqual(parse_config_dict(raw).queries, ())

    def test_missing_section(self) -> None:
        raw = _base_raw_config()
        del raw["output"]
        with self.assertRaisesRegex(ValueError, "Missing required config: output"):
            parse_config_dict(raw)

    def test_log_fields_default_when_missing(self) -> None:
        raw = _base_raw_config()
        del raw["log"]["dir"]
        del raw["log"]["level"]
        runtime = parse_config_dict(raw).runtime
        self.assertEqual((runtime.level, runtime.to_file, runtime.dir), ("INFO", True, "log"))

    def test_log_section_is_optional(self) -> None:
        raw = _base_raw_config()
        del raw["log"]
        runtime = parse_config_dict(raw).runtime
        self.assertEqual((runtime.level, runtime.to_file, runtime.dir), ("INFO", False, "log"))

    def test_blank_log_dir_only_matters_for_file_logging(self) -> None:
        raw = _base_raw_config()
        raw["log"]["dir"] = "  "
        with self.assertRaisesRegex(ValueError, "log.dir must not be empty"):
            parse_config_dict(raw)
        raw["log"]["to_file"] = False
        self.assertEqual(parse_config_dict(raw).runtime.dir, "  ")

    def test_wrong_types(self) -> None:
        cases = [
            (("log", "to_file"), "yes", "log.to_file must be a boolean"),
            (("output", "formats"), "console", "output.formats must be a list"),
        ]
        for (section, field), value, message in cases:
            with self.subTest(field=field):
                raw = deepcopy(_base_raw_config())
                raw[section][field] = value
                with self.assertRaisesRegex(TypeError, message):
                    parse_config_dict(raw)

    def test_query_items_must_be_strings(self) -> None:
        raw = _base_raw_config()
        raw["queries"] = ["a:b", 3]
        with self.assertRaisesRegex(TypeError, r"queries\[1\] must be a string"):
            parse_config_dict(raw)

    def test_unknown_level(self) -> None:
        raw = _base_raw_config()
        raw["log"]["level"] = "LOUD"
        with self.assertRaisesRegex(ValueError, "log.level"):
            parse_config_dict(raw)

    def test_unknown_format(self) -> None:
        raw = _base_raw_config()
        raw["output"]["formats"] = ["console", "xml"]
        with self.assertRaisesRegex(ValueError, "unknown formats"):
            parse_config_dict(raw)

    def test_empty_formats(self) -> None:
        raw = _base_raw_config()
        raw["output"]["formats"] = []
        with self.assertRaisesRegex(ValueError, "at least one format"):
            parse_config_dict(raw)


class TestConfigOverride(unittest.TestCase):
    def test_override_merges_with_defaults(self) -> None:
        override_yaml = """
log:
  level: DEBUG

output:
  formats: [json]

queries:
  - "x:y"
  - "-z"
"""
        with tempfile.TemporaryDirectory() as tmp:
            override_path = Path(tmp) / "override.yml"
            override_path.write_text(override_yaml, encoding="utf-8")

            cfg = load_config_with_defaults(override_path, _defaults_text=_BASE_YAML)

        self.assertEqual(cfg.runtime.level, "DEBUG")
        self.assertEqual(cfg.runtime.dir, "log")
        self.assertEqual(cfg.output.base_dir, "output")
        self.assertEqual(cfg.output.formats, ("json",))
        self.assertEqual(cfg.queries, ("x:y", "-z"))

    def test_empty_override_uses_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            override_path = Path(tmp) / "override.yml"
            override_path.write_text("{}", encoding="utf-8")

            cfg = load_config_with_defaults(override_path, _defaults_text=_BASE_YAML)

        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertEqual(cfg.output.formats, ("console",))
        self.assertEqual(cfg.queries, ("k:v",))

    def test_non_mapping_root_is_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "bad.yml"
            path.write_text("- a\n- b\n", encoding="utf-8")
            with self.assertRaisesRegex(ValueError, "Config root must be a mapping"):
                load_config(path)

    def test_shipped_default_config_is_valid(self) -> None:
        cfg = load_config(REPO_ROOT / "config" / "default.yml")
        self.assertEqual(cfg.output.formats, ("console",))
        self.assertTrue(cfg.queries)


if __name__ == "__main__":
    unittest.main()
