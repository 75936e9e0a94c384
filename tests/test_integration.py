"""End-to-end tests on a real-shaped script dump."""

import copy

from artemis_ast import dumps, extract, merge, parse, prune, to_python


SCRIPT = r"""astver = 2.0
ast = {
    block_00000 = {
        {"savetitle", text="俺たちの新しい日常"},
        {"bg", time=2000, file="bg001a", path=":bg/"},
        {"se", file="seアラーム", loop=1, id=1},
        {"fg", ch="妃愛", size="no", mode=1, path=":fg/hiy[表情]/", file="hiy_nob0700", ex05="hiy_nob0000", face="b0032", head="hiy_nob", lv=2.2, id=20},
        {"text"},
        text = {
            vo = {
                {"vo", file="fem_hiy_00052", ch="hiy"},
            },
            ja = {
                {
                    name = {"妃愛"},
                    "「お兄、あさー……むふー……」",
                    {"rt2"},
                },
            },
        },
        linknext = "block_00001",
        line = 18,
    },
    block_00001 = {
        text = {
            ja = {
                {
                    "「起きてー」\n「ほら」",
                    {"rt2"},
                },
            },
        },
        line = 25,
    },
}
"""


def test_parse_sample():
    doc = parse(SCRIPT)
    assert doc.astver == 2.0
    assert len(doc.ast.items) == 2
    block = to_python(doc.ast.items[0])["block_00000"]
    assert block[0] == ["savetitle", {"text": "俺たちの新しい日常"}]
    assert block[3][-2] == {"lv": 2.2}
    assert block[-1] == {"line": 18}


def test_extract_sample():
    assert extract(parse(SCRIPT)) == [
        "「お兄、あさー……むふー……」",
        "「起きてー」\n「ほら」",
    ]


def test_round_trip_sample():
    doc = parse(SCRIPT)
    assert parse(dumps(doc)) == doc


def test_translate_cycle():
    doc = parse(SCRIPT)
    lines = extract(doc)
    translated = [f"[zh] {line}" for line in lines]
    merged_text = dumps(merge(doc, translated))
    assert extract(parse(merged_text)) == translated
    assert 'savetitle' in merged_text


def test_prune_sample():
    doc = prune(parse(SCRIPT))
    out = dumps(doc)
    assert "妃愛" not in out
    assert "savetitle" not in out
    assert 'linknext="block_00001"' in out
    assert "line=18" in out
    assert "line=25" in out
    assert prune(copy.deepcopy(doc)) == doc
