import pytest

from textstack import textops
from textstack.array import TextArray
from textstack.stack import TextStack


def _array(*items):
    arr = TextArray()
    for item in items:
        arr.append_string(item)
    return arr


def test_append_and_join():
    arr = TextArray()
    arr.append(TextStack.from_string("aaa"))
    arr.append(TextStack.from_string("bbb"))
    assert len(arr) == 2
    assert str(arr.join(",")) == "aaa,bbb"


def test_join_edge_cases():
    assert str(TextArray().join(",")) == ""
    assert str(_array("x").join(",")) == "x"
    pair = _array("a", "b")
    assert str(pair.join(None)) == str(pair[0]) + str(pair[1])


@pytest.mark.parametrize(
    "text, target",
    [("a,b,c", ","), (",lead", ","), ("trail,", ","), ("", ","), ("none", ","), ("x--y", "-")],
)
def test_split_then_join_round_trip(text, target):
    assert str(TextArray.split(text, target).join(target)) == text


def test_split_pieces():
    assert [str(s) for s in TextArray.split("a,b,c", ",")] == ["a", "b", "c"]


def test_split_multichar_target_keeps_tail_of_match():
    assert [str(s) for s in TextArray.split("a,,b", ",,")] == ["a", ",b"]


@pytest.mark.parametrize("target", ["", "zz"])
def test_split_without_match_gives_whole_text(target):
    parts = TextArray.split("no match here", target)
    assert len(parts) == 1
    assert str(parts[0]) == "no match here"


def test_map_builds_new_array():
    arr = _array("aaaaa", "bbb")
    mapped = arr.map(TextStack.upper)
    assert [str(s) for s in mapped] == [textops.upper("aaaaa"), textops.upper("bbb")]
    assert [str(s) for s in arr] == ["aaaaa", "bbb"]


def test_filter_returns_copies():
    arr = _array("aaaaa", "123", "aaaaa", "444")
    nums = arr.filter(TextStack.is_a_num)
    assert [str(s) for s in nums] == ["123", "444"]
    nums[0].text("9")
    assert str(arr[1]) == "123"


def test_foreach_mutates_in_place():
    arr = _array("aaaaa", "aaaaa")
    arr.foreach(TextStack.self_upper)
    assert all(str(s) == textops.upper("aaaaa") for s in arr)


def test_includes():
    arr = _array("aaa", "bbb")
    assert arr.includes("bbb")
    assert not arr.includes("bb")


def test_represent_prints_each(capsys):
    items = ("aaa", "bbb")
    _array(*items).represent()
    assert capsys.readouterr().out == "".join(f"{item}\n" for item in items)


def test_indexing_and_iteration_keep_identity():
    first = TextStack.from_string("one")
    second = TextStack.from_string("two")
    source = [first, second]
    arr = TextArray(source)
    source.append(TextStack.empty())
    assert len(arr) == 2
    assert arr[1] is second
    assert list(arr) == [first, second]