"""
Call-site capture and payload rendering tests.
"""

from __future__ import annotations

import sys
from collections import OrderedDict
from dataclasses import dataclass

from sitelog.records import CallSite, render_payload


def _capture_here() -> CallSite:
    return CallSite.capture()


def _capture_two_up() -> CallSite:
    return _capture_here_nested()


def _capture_here_nested() -> CallSite:
    return CallSite.capture(stacklevel=2)


class TestCallSiteCapture:
    def test_captures_caller_of_capturing_function(self) -> None:
        expected_line = sys._getframe().f_lineno + 1
        site = _capture_here()

        assert site.file == __file__
        assert site.line == expected_line
        assert site.function.endswith("test_captures_caller_of_capturing_function")

    def test_stacklevel_walks_further_up(self) -> None:
        site = _capture_two_up()
        assert site.function.endswith("test_stacklevel_walks_further_up")

    def test_column_is_one_based_and_distinguishes_calls(self) -> None:
        first, second = _capture_here(), _capture_here()
        assert first.column is not None
        assert first.column >= 1
        assert second.column > first.column

    def test_explicit_site(self) -> None:
        site = CallSite(file="/app/src/view.py", function="render", line=12)
        assert site.column is None


@dataclass
class Point:
    x: int
    y: int


class Unprintable:
    def __str__(self) -> str:
        raise RuntimeError("no text")


class TestRenderPayload:
    def test_string_passes_through(self) -> None:
        assert render_payload("hello") == "hello"

    def test_bytes_are_decoded(self) -> None:
        assert render_payload(b"caf\xc3\xa9") == "café"
        assert render_payload(b"\xff") == "�"

    def test_numbers_use_str(self) -> None:
        assert render_payload(42) == "42"
        assert render_payload(None) == "None"

    def test_dict_renders_as_indented_json(self) -> None:
        assert render_payload({"status": 200}) == '{\n  "status": 200\n}'

    def test_list_and_tuple(self) -> None:
        assert render_payload([1, 2]) == "[\n  1,\n  2\n]"
        assert render_payload(("a",)) == '[\n  "a"\n]'

    def test_set_is_sorted(self) -> None:
        assert render_payload({3, 1, 2}) == "[\n  1,\n  2,\n  3\n]"

    def test_mapping_subclass_and_non_string_keys(self) -> None:
        assert render_payload(OrderedDict([(1, "one")])) == '{\n  "1": "one"\n}'

    def test_dataclass(self) -> None:
        assert render_payload(Point(1, 2)) == '{\n  "x": 1,\n  "y": 2\n}'

    def test_unserialisable_members_use_str(self) -> None:
        value = object()
        assert render_payload({"value": value}) == '{\n  "value": "' + str(value) + '"\n}'

    def test_exception(self) -> None:
        assert render_payload(ValueError("bad input")) == "ValueError: bad input"

    def test_unprintable_object(self) -> None:
        assert render_payload(Unprintable()) == "<unprintable Unprintable>"
