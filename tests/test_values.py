"""Tests for artemis_ast.values and artemis_ast.document."""

from artemis_ast.document import Document
from artemis_ast.values import VDict, VFloat, VInteger, VList, VText, to_python


class TestValueTypes:
    def test_scalars(self):
        assert VInteger(1).value == 1
        assert VFloat(2.5).value == 2.5
        assert VText("a").value == "a"

    def test_dict_equality_ignores_order(self):
        a = VDict({"x": VInteger(1), "y": VInteger(2)})
        b = VDict({"y": VInteger(2), "x": VInteger(1)})
        assert a == b

    def test_list_equality_respects_order(self):
        assert VList([VInteger(1), VInteger(2)]) != VList([VInteger(2), VInteger(1)])

    def test_integer_and_float_differ(self):
        assert VInteger(2) != VFloat(2.0)


class TestToPython:
    def test_nested(self):
        v = VList([VText("bg"), VDict({"time": VInteger(2000)}), VFloat(1.5)])
        assert to_python(v) == ["bg", {"time": 2000}, 1.5]


class TestDocument:
    def test_astver_integer(self):
        assert Document({"astver": VInteger(3)}).astver == 3

    def test_astver_missing(self):
        assert Document().astver is None

    def test_ast_wrong_type(self):
        assert Document({"ast": VText("x")}).ast is None

    def test_mapping_access(self):
        doc = Document({"a": VInteger(1)})
        assert doc["a"] == VInteger(1)
        assert "a" in doc
        assert list(doc.keys()) == ["a"]
