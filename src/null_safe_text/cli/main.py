"""Main CLI entry point for the null-safe-text command-line tool.

Runs the sequence operations on command-line arguments. A configurable token
(``<null>`` by default) stands for None so that null handling can be exercised
from a shell.
"""

import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from null_safe_text import __version__
from null_safe_text.assertions import AssertionFailure, is_true
from null_safe_text.sequence import classifier, comparator, matcher, transformer
from null_safe_text.shared.config import ConfigError, OutputFormat, TextConfig
from null_safe_text.shared.logging import get_logger
from null_safe_text.shared.result import OperationResult


class TextProcessor:
    """Runs named operations and wraps their outcome in ``OperationResult``."""

    def __init__(self, config: TextConfig):
        self.config = config
        self.logger = get_logger(__name__, config.correlation_id, "cli_processor")

    def decode(self, value: Optional[str]) -> Optional[str]:
        """Map the configured null token to None."""
        if value is None or value == self.config.null_token:
            return None
        return value

    def run(self, operation: str, arguments: Dict[str, Any], func: Callable[[], Any]) -> OperationResult:
        start = time.perf_counter()
        value = func()
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        self.logger.debug(
            f"Ran {operation}",
            extra={"operation": operation, "processing_time_ms": elapsed_ms},
        )
        return OperationResult(
            operation=operation,
            arguments=arguments,
            value=value,
            processing_time_ms=elapsed_ms,
        )

    def classify(self, texts: List[Optional[str]]) -> List[OperationResult]:
        results = [
            self.run(
                "classify",
                {"text": text},
                lambda text=text: {
                    "empty": classifier.is_empty(text),
                    "blank": classifier.is_blank(text),
                },
            )
            for text in texts
        ]
        results.append(self.run(
            "aggregate",
            {"texts": texts},
            lambda: {
                "contain_empty": classifier.contain_empty(*texts),
                "contain_blank": classifier.contain_blank(*texts),
                "is_all_empty": classifier.is_all_empty(*texts),
                "is_all_blank": classifier.is_all_blank(*texts),
                "first_non_blank": classifier.first_non_blank(*texts),
            },
        ))
        return results

    def find(
        self,
        text: Optional[str],
        sub: Optional[str],
        from_index: Optional[int] = None,
        last: bool = False,
        ordinal: Optional[int] = None,
    ) -> OperationResult:
        arguments = {"text": text, "sub": sub, "from": from_index, "last": last, "ordinal": ordinal}
        if ordinal is not None:
            return self.run(
                "ordinal_index_of", arguments,
                lambda: matcher.ordinal_index_of(text, sub, ordinal, from_end=last),
            )
        if last:
            return self.run(
                "last_index_of", arguments,
                lambda: matcher.last_index_of(text, sub, from_index),
            )
        return self.run(
            "index_of", arguments,
            lambda: matcher.index_of(text, sub, from_index or 0),
        )

    def equals(self, text: Optional[str], others: List[Optional[str]], ignore_case: bool) -> OperationResult:
        arguments = {"text": text, "others": others, "ignore_case": ignore_case}
        if len(others) == 1:
            func = matcher.equals_ignore_case if ignore_case else matcher.equals
            return self.run(func.__name__, arguments, lambda: func(text, others[0]))
        func = matcher.equals_any_ignore_case if ignore_case else matcher.equals_any
        return self.run(func.__name__, arguments, lambda: func(text, *others))

    def strip(self, text: Optional[str], chars: Optional[str], side: str) -> OperationResult:
        funcs = {
            "both": transformer.strip,
            "start": transformer.strip_start,
            "end": transformer.strip_end,
        }
        func = funcs[side]
        return self.run(
            func.__name__, {"text": text, "chars": chars},
            lambda: func(text, chars),
        )

    def trim(self, text: Optional[str], to: str, remove_all: bool) -> OperationResult:
        if remove_all:
            funcs = {"same": transformer.trims, "null": transformer.trims_to_null,
                     "empty": transformer.trims_to_empty}
        else:
            funcs = {"same": transformer.trim, "null": transformer.trim_to_null,
                     "empty": transformer.trim_to_empty}
        func = funcs[to]
        return self.run(func.__name__, {"text": text}, lambda: func(text))

    def truncate(self, text: Optional[str], max_length: int, offset: int) -> OperationResult:
        return self.run(
            "truncate", {"text": text, "offset": offset, "max_length": max_length},
            lambda: transformer.truncate(text, offset, max_length),
        )

    def compare(
        self,
        text1: Optional[str],
        text2: Optional[str],
        ignore_case: bool,
        null_is_less: bool,
    ) -> OperationResult:
        func = comparator.compare_ignore_case if ignore_case else comparator.compare
        return self.run(
            func.__name__,
            {"a": text1, "b": text2, "null_is_less": null_is_less},
            lambda: func(text1, text2, null_is_less),
        )


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="null-safe-text",
        description="Null-safe text classification, search, stripping and comparison"
    )

    parser.add_argument("--version", action="version", version=__version__)

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Classify command
    classify_parser = subparsers.add_parser("classify", help="Report empty/blank status")
    classify_parser.add_argument("texts", nargs="*", help="Texts to classify")

    # Find command
    find_parser = subparsers.add_parser("find", help="Search for a substring")
    find_parser.add_argument("text", help="Text to search")
    find_parser.add_argument("sub", help="Substring to look for")
    find_parser.add_argument(
        "--from",
        dest="from_index",
        type=int,
        help="Start position of the search"
    )
    find_parser.add_argument(
        "--last",
        action="store_true",
        help="Search backwards from the end"
    )
    find_parser.add_argument(
        "--ordinal", "-n",
        type=int,
        help="Find the N-th non-overlapping occurrence (not combinable with --from)"
    )

    # Equals command
    equals_parser = subparsers.add_parser("equals", help="Compare texts for equality")
    equals_parser.add_argument("text", help="Text to compare")
    equals_parser.add_argument("others", nargs="+", help="Candidate texts")
    equals_parser.add_argument(
        "--ignore-case", "-i",
        action="store_true",
        help="Ignore case differences"
    )

    # Strip command
    strip_parser = subparsers.add_parser("strip", help="Strip characters from the ends")
    strip_parser.add_argument("text", help="Text to strip")
    strip_parser.add_argument(
        "--chars",
        help="Characters to strip (default: whitespace)"
    )
    strip_parser.add_argument(
        "--side",
        choices=["both", "start", "end"],
        default="both",
        help="Which end to strip (default: both)"
    )

    # Trim command
    trim_parser = subparsers.add_parser("trim", help="Trim whitespace")
    trim_parser.add_argument("text", help="Text to trim")
    trim_parser.add_argument(
        "--to",
        choices=["same", "null", "empty"],
        default="same",
        help="How an empty result is reported (default: same)"
    )
    trim_parser.add_argument(
        "--all",
        dest="remove_all",
        action="store_true",
        help="Remove every whitespace character"
    )

    # Truncate command
    truncate_parser = subparsers.add_parser("truncate", help="Cut a window out of a text")
    truncate_parser.add_argument("text", help="Text to truncate")
    truncate_parser.add_argument("max_length", type=int, help="Maximum length kept")
    truncate_parser.add_argument(
        "--offset",
        type=int,
        default=0,
        help="Start position (default: 0)"
    )

    # Compare command
    compare_parser = subparsers.add_parser("compare", help="Order two texts")
    compare_parser.add_argument("a", help="First text")
    compare_parser.add_argument("b", help="Second text")
    compare_parser.add_argument(
        "--ignore-case", "-i",
        action="store_true",
        help="Compare case-folded characters"
    )
    compare_parser.add_argument(
        "--nulls-last",
        action="store_true",
        help="Sort null after any text"
    )

    # Global options
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="Configuration file path"
    )
    parser.add_argument(
        "--format", "-f",
        choices=[fmt.value for fmt in OutputFormat],
        help="Output format (default: from configuration, else text)"
    )
    parser.add_argument(
        "--null-token",
        help="Argument spelling that stands for null (default: <null>)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet output"
    )

    return parser


def load_config(args: argparse.Namespace) -> TextConfig:
    """Build the effective configuration from file and command-line overrides."""
    data: Dict[str, Any] = {}
    if args.config is not None:
        data = TextConfig.from_file(args.config).to_dict()
    if args.format:
        data["output_format"] = args.format
    if args.null_token is not None:
        data["null_token"] = args.null_token
    return TextConfig.from_dict(data)


def format_results(results: List[OperationResult], null_token: str, format_type: OutputFormat) -> str:
    """Format operation results for output."""
    if format_type == OutputFormat.JSON:
        return json.dumps([result.to_dict() for result in results], indent=2)

    def render(value: Any) -> str:
        if value is None:
            return null_token
        if isinstance(value, str):
            return json.dumps(value, ensure_ascii=False)
        if isinstance(value, dict):
            return ", ".join(f"{key}={render(item)}" for key, item in value.items())
        return str(value).lower() if isinstance(value, bool) else str(value)

    return "\n".join(f"{result.operation}: {render(result.value)}" for result in results)


def dispatch(processor: TextProcessor, args: argparse.Namespace) -> List[OperationResult]:
    """Route parsed arguments to the matching processor operation."""
    decode = processor.decode
    config = processor.config

    if args.command == "classify":
        return processor.classify([decode(text) for text in args.texts])
    if args.command == "find":
        is_true(args.ordinal is None or args.ordinal > 0,
                "--ordinal must be a positive number, got %s", args.ordinal)
        is_true(args.ordinal is None or args.from_index is None,
                "--from cannot be combined with --ordinal")
        return [processor.find(decode(args.text), decode(args.sub), args.from_index,
                               args.last, args.ordinal)]
    if args.command == "equals":
        ignore_case = args.ignore_case or config.ignore_case
        return [processor.equals(decode(args.text), [decode(o) for o in args.others], ignore_case)]
    if args.command == "strip":
        chars = args.chars if args.chars is not None else config.strip_chars
        return [processor.strip(decode(args.text), decode(chars), args.side)]
    if args.command == "trim":
        return [processor.trim(decode(args.text), args.to, args.remove_all)]
    if args.command == "truncate":
        return [processor.truncate(decode(args.text), args.max_length, args.offset)]
    if args.command == "compare":
        ignore_case = args.ignore_case or config.ignore_case
        null_is_less = config.null_is_less and not args.nulls_last
        return [processor.compare(decode(args.a), decode(args.b), ignore_case, null_is_less)]
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # Set up logging verbosity
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    elif args.quiet:
        logging.basicConfig(level=logging.ERROR)

    logger = get_logger(__name__, None, "cli")
    try:
        config = load_config(args)
        logger = logger.bind(config.correlation_id)
        processor = TextProcessor(config)
        results = dispatch(processor, args)
    except (ConfigError, AssertionFailure) as e:
        logger.debug("Command failed", extra={"command": args.command, "reason": str(e)})
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return 130  # Standard exit code for SIGINT

    print(format_results(results, config.null_token, config.output_format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
