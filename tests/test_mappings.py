import pytest

from katarunner.katas.mappings import format_debug, hashmap, main, pair


def test_pair_keeps_order():
    assert pair("a", 1) == ("a", 1)


def test_hashmap_matches_dict_of_entries():
    entries = [("hash", "map"), ("Key", "my_string")]
    assert hashmap(*entries) == dict(entries)


def test_hashmap_keeps_insertion_order():
    result = hashmap(("b", 1), ("a", 2))
    assert list(result) == ["b", "a"]


def test_hashmap_later_key_wins():
    assert hashmap(("k", 1), ("k", 2)) == {"k": 2}


def test_hashmap_empty():
    assert hashmap() == {}


@pytest.mark.parametrize("entry", [("only",), ("a", 1, 2), ["a", 1], "ab"])
def test_hashmap_rejects_non_pairs(entry):
    with pytest.raises(TypeError):
        hashmap(entry)


def test_format_debug_map():
    text = format_debug({"hash": "map", "Key": "my_string"})
    assert text == '{\n    "hash": "map",\n    "Key": "my_string",\n}'


def test_format_debug_tuple():
    assert format_debug(("a", 1)) == '(\n    "a",\n    1,\n)'


def test_format_debug_empty_list():
    assert format_debug([]) == "[]"


def test_format_debug_escapes_quotes():
    assert format_debug('say "hi"') == '"say \\"hi\\""'


def test_format_debug_nested_indentation_grows():
    lines = format_debug([("x", 1)]).splitlines()
    assert lines[1] == "    ("
    assert lines[2] == '        "x",'


def test_main_prints_maps(capsys):
    main()
    out = capsys.readouterr().out
    assert '"hash": "map",' in out
    assert '"Key": "value",' in out