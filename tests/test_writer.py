"""Tests for the writer and parse/write round trips."""

import pytest

from artemis_ast.document import Document
from artemis_ast.errors import NumberFormat
from artemis_ast.reader import parse
from artemis_ast.values import VDict, VFloat, VInteger, VList, VText
from artemis_ast.writer import dump_value, dumps, format_float, quote


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

def test_quote_plain():
    assert quote("hello") == '"hello"'

def test_quote_escapes():
    assert quote('a"b\\c\nd\te') == r'"a\"b\\c\nd\te"'

def test_integer():
    assert dump_value(VInteger(-42)) == "-42"

@pytest.mark.parametrize("value, text", [
    (2.0, "2.0"),
    (-3.0, "-3.0"),
    (2.2, "2.2"),
    (0.1, "0.1"),
    (1e-05, "0.00001"),
    (1e16, "10000000000000000.0"),
])
def test_format_float(value, text):
    assert format_float(value) == text

def test_format_float_rejects_nan():
    with pytest.raises(ValueError):
        format_float(float("nan"))


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------

def test_empty_list():
    assert dump_value(VList([])) == "{}"

def test_list_layout():
    v = VList([VInteger(1), VList([VText("a")])])
    assert dump_value(v) == '{\n\t1,\n\t{\n\t\t"a"\n\t}\n}'

def test_dict_in_list():
    v = VList([VText("bg"), VDict({"time": VInteger(2000)})])
    assert dump_value(v) == '{\n\t"bg",\n\ttime=2000\n}'

def test_empty_dict_omitted_from_list():
    v = VList([VDict({}), VDict({"line": VInteger(1)})])
    assert dump_value(v) == "{\n\tline=1\n}"

def test_multi_key_dict():
    v = VDict({"a": VInteger(1), "b": VInteger(2)})
    assert dump_value(v, 1) == "a=1,\n\tb=2"

def test_rejects_foreign_values():
    with pytest.raises(TypeError):
        dump_value("plain str")


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------

def test_dumps_document():
    doc = Document({"astver": VFloat(2.0), "ast": VList([])})
    assert dumps(doc) == "astver = 2.0\nast = {}\n"

def test_dumps_empty_document():
    assert dumps(Document()) == ""

def test_dumps_keeps_source_order():
    out = dumps(parse("z = 1\na = 2"))
    assert out.index("z = 1") < out.index("a = 2")


# ---------------------------------------------------------------------------
# Round trips
# ---------------------------------------------------------------------------

ROUND_TRIP_SOURCES = [
    'a = "quote \\" backslash \\\\ tab \\t newline \\n"',
    "a = {1, -2, 3.5, -0.25, 2.0}",
    'a = {x = y, z = {"w"}, q = r = 1}',
    "a = {{}, {{}}, {{1}}}",
    'a = {bare, "text"}\nb = 1',
]

@pytest.mark.parametrize("source", ROUND_TRIP_SOURCES)
def test_round_trip(source):
    doc = parse(source)
    assert parse(dumps(doc)) == doc

def test_round_trip_is_stable():
    doc = parse('a = {x = "y", {1, 2}}')
    once = dumps(doc)
    assert dumps(parse(once)) == once

def test_huge_float_rejected_before_writing():
    with pytest.raises(NumberFormat):
        parse("a = " + "9" * 400 + ".0")
