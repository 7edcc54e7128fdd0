#!/usr/bin/env python3
"""
Quick Start Guide for null-safe-text.

Walks through classification, searching, trimming and comparison, and shows
how the assertion layer turns the same checks into preconditions.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from null_safe_text import assertions
from null_safe_text.sequence import (
    compare,
    contain_empty,
    equals_any,
    first_non_blank,
    index_of,
    is_blank,
    is_empty,
    max_of,
    ordinal_index_of,
    strip,
    strip_start,
    trim_to_null,
    truncate,
)


def classification_example():
    print("\nStep 1: Null, empty and blank")
    print("-" * 30)

    for value in [None, "", "  \t", "text"]:
        print(f"{value!r:>8}: empty={is_empty(value)}, blank={is_blank(value)}")

    print(f"first_non_blank(None, ' ', 'x') = {first_non_blank(None, ' ', 'x')!r}")
    print(f"contain_empty() = {contain_empty()}  (no arguments counts as empty)")


def search_example():
    print("\nStep 2: Searching")
    print("-" * 30)

    text = "aabaabaa"
    print(f"index_of({text!r}, 'ab') = {index_of(text, 'ab')}")
    for ordinal in range(1, 4):
        print(f"occurrence {ordinal} of 'a' = {ordinal_index_of(text, 'a', ordinal)}")
    print(f"equals_any(None, None) = {equals_any(None, None)}, equals_any(None) = {equals_any(None)}")


def transformation_example():
    print("\nStep 3: Trimming and truncation")
    print("-" * 30)

    print(f"strip_start('yxabc  ', 'xyz') = {strip_start('yxabc  ', 'xyz')!r}")
    print(f"strip(' abc ', None) = {strip(' abc ', None)!r}")
    print(f"trim_to_null('   ') = {trim_to_null('   ')!r}")
    print(f"truncate('abcdefghijklmno', 5, 3) = {truncate('abcdefghijklmno', 5, 3)!r}")


def comparison_example():
    print("\nStep 4: Ordering with nulls")
    print("-" * 30)

    names = ["pear", None, "Apple", "banana"]
    print(f"compare(None, 'a') = {compare(None, 'a')}")
    print(f"compare(None, 'a', null_is_less=False) = {compare(None, 'a', False)}")
    print(f"max_of(*{names}) = {max_of(*names)!r}")


def precondition_example():
    print("\nStep 5: Preconditions")
    print("-" * 30)

    for value in ["user", "   ", None]:
        try:
            assertions.not_blank(value, "username must not be blank")
            print(f"{value!r}: accepted")
        except assertions.AssertionFailure as e:
            print(f"{value!r}: {type(e).__name__}: {e}")


if __name__ == "__main__":
    classification_example()
    search_example()
    transformation_example()
    comparison_example()
    precondition_example()
