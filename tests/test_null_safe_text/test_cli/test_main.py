"""Tests for the CLI main module."""

import json
from unittest.mock import patch

import pytest

from null_safe_text.cli.main import (
    TextProcessor,
    create_argument_parser,
    format_results,
    load_config,
    main,
)
from null_safe_text.shared.config import OutputFormat, TextConfig
from null_safe_text.shared.result import OperationResult


class TestTextProcessor:
    """Test the operation runner."""

    def test_decode_null_token(self):
        processor = TextProcessor(TextConfig(null_token="NIL"))
        assert processor.decode("NIL") is None
        assert processor.decode("<null>") == "<null>"
        assert processor.decode(None) is None

    def test_run_wraps_result(self):
        processor = TextProcessor(TextConfig())
        result = processor.run("trim", {"text": " a "}, lambda: "a")

        assert result.operation == "trim"
        assert result.value == "a"
        assert result.processing_time_ms >= 0

    def test_classify(self):
        results = TextProcessor(TextConfig()).classify(["", " ", "a"])

        assert [r.value for r in results[:3]] == [
            {"empty": True, "blank": True},
            {"empty": False, "blank": True},
            {"empty": False, "blank": False},
        ]
        aggregate = results[-1].value
        assert aggregate["contain_empty"] is True
        assert aggregate["is_all_blank"] is False
        assert aggregate["first_non_blank"] == "a"

    def test_classify_without_texts(self):
        aggregate = TextProcessor(TextConfig()).classify([])[-1].value
        assert aggregate["contain_empty"] is True
        assert aggregate["is_all_empty"] is True

    def test_find_variants(self):
        processor = TextProcessor(TextConfig())
        assert processor.find("aabaabaa", "ab").value == 1
        assert processor.find("aabaabaa", "ab", last=True).value == 4
        assert processor.find("aabaabaa", "a", ordinal=2).value == 1
        assert processor.find("aabaabaa", "a", ordinal=2, last=True).value == 6

    def test_equals_variants(self):
        processor = TextProcessor(TextConfig())
        single = processor.equals("abc", ["ABC"], ignore_case=True)
        many = processor.equals("abc", ["x", "abc"], ignore_case=False)

        assert single.operation == "equals_ignore_case"
        assert single.value is True
        assert many.operation == "equals_any"
        assert many.value is True

    def test_strip_trim_truncate_compare(self):
        processor = TextProcessor(TextConfig())
        assert processor.strip("yxabc  ", "xyz", "start").value == "abc  "
        assert processor.trim("   ", "null", False).value is None
        assert processor.trim(" a b ", "same", True).value == "ab"
        assert processor.truncate("abcdefghijklmno", 3, 5).value == "fgh"
        assert processor.compare(None, "a", False, False).value > 0


class TestArgumentParser:
    """Test argument parser creation."""

    def test_find_command(self):
        args = create_argument_parser().parse_args(["find", "abc", "b", "--from", "1", "--last", "-n", "2"])

        assert args.command == "find"
        assert args.from_index == 1
        assert args.last is True
        assert args.ordinal == 2

    def test_global_options(self):
        args = create_argument_parser().parse_args(
            ["--format", "json", "--null-token", "NIL", "trim", "x", "--to", "empty"]
        )

        assert args.format == "json"
        assert args.null_token == "NIL"
        assert args.to == "empty"

    def test_load_config_overrides(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"ignore_case": True, "output_format": "text"}))
        args = create_argument_parser().parse_args(
            ["--config", str(path), "--format", "json", "classify"]
        )

        config = load_config(args)

        assert config.ignore_case is True
        assert config.output_format == OutputFormat.JSON


class TestFormatResults:
    """Test result formatting."""

    def test_format_json(self):
        results = [OperationResult("trim", {"text": " a "}, "a", 0.1)]
        data = json.loads(format_results(results, "<null>", OutputFormat.JSON))

        assert data[0]["operation"] == "trim"
        assert data[0]["value"] == "a"

    def test_format_text(self):
        results = [
            OperationResult("trim_to_null", {}, None),
            OperationResult("equals", {}, True),
            OperationResult("index_of", {}, 4),
            OperationResult("truncate", {}, "fgh"),
            OperationResult("classify", {}, {"empty": False, "blank": True}),
        ]

        output = format_results(results, "<null>", OutputFormat.TEXT)

        assert output.splitlines() == [
            "trim_to_null: <null>",
            "equals: true",
            "index_of: 4",
            'truncate: "fgh"',
            "classify: empty=false, blank=true",
        ]


class TestMainFunction:
    """Test main CLI function."""

    def test_main_no_args(self):
        with patch("builtins.print"):
            assert main([]) == 1

    def test_main_find(self, capsys):
        assert main(["find", "aabaabaa", "a", "--ordinal", "2"]) == 0
        assert capsys.readouterr().out.strip() == "ordinal_index_of: 1"

    def test_main_null_token(self, capsys):
        assert main(["compare", "<null>", "a"]) == 0
        assert capsys.readouterr().out.strip() == "compare: -1"

    def test_main_nulls_last(self, capsys):
        assert main(["compare", "<null>", "a", "--nulls-last"]) == 0
        assert capsys.readouterr().out.strip() == "compare: 1"

    def test_main_custom_null_token_json(self, capsys):
        assert main(["--format", "json", "--null-token", "NIL", "truncate", "NIL", "3"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data[0]["value"] is None
        assert data[0]["arguments"]["text"] is None

    def test_main_strip_uses_config_chars(self, tmp_path, capsys):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"strip_chars": "xyz"}))

        assert main(["--config", str(path), "strip", "yxabczz"]) == 0
        assert capsys.readouterr().out.strip() == 'strip: "abc"'

    def test_main_invalid_ordinal(self, capsys):
        assert main(["find", "abc", "a", "--ordinal", "0"]) == 2
        assert "--ordinal must be a positive number" in capsys.readouterr().err

    def test_main_ordinal_with_from_rejected(self, capsys):
        assert main(["find", "aabaabaa", "a", "--ordinal", "2", "--from", "3"]) == 2
        assert "--from cannot be combined with --ordinal" in capsys.readouterr().err

    def test_main_invalid_config(self, tmp_path, capsys):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"null_token": ""}))

        assert main(["--config", str(path), "classify", "a"]) == 2
        assert "null_token" in capsys.readouterr().err

    def test_main_keyboard_interrupt(self):
        with patch("null_safe_text.cli.main.dispatch", side_effect=KeyboardInterrupt):
            with patch("builtins.print"):
                assert main(["classify"]) == 130

    def test_unknown_command(self):
        with pytest.raises(SystemExit):
            with patch("sys.stderr"):
                main(["unknown"])
