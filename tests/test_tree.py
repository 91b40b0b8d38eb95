import random

import pytest

from hiertree import (
    DuplicatePathError,
    InvalidPathError,
    Node,
    PathElem,
    as_elements,
    build_tree,
    inspect,
    list_entries,
)


def mk_elems(paths):
    return [PathElem.from_path(p) for p in paths]


@pytest.mark.parametrize(
    "paths, expected",
    [
        ([], []),
        (["bar", "foo"], ["bar*", "foo*"]),
        (["foo", "foo/bar"], ["foo*>", "[foo/]bar*"]),
        (["foo/bar", "foo/baz"], ["foo>", "[foo/]bar*", "[foo/]baz*"]),
        (["foo", "foo/bar", "foo/baz"], ["foo*>", "[foo/]bar*", "[foo/]baz*"]),
        (["foo/bar/baz"], ["foo>", "[foo/]bar>", "[foo/bar/]baz*"]),
        (["foo/bar", "foo/bar/baz"], ["foo>", "[foo/]bar*>", "[foo/bar/]baz*"]),
        (
            ["foo/bar/baz", "foo/bar/qux"],
            ["foo>", "[foo/]bar>", "[foo/bar/]baz*", "[foo/bar/]qux*"],
        ),
        (
            ["foo/bar/baz/bud", "foo/bar/qux/qup"],
            [
                "foo>",
                "[foo/]bar>",
                "[foo/bar/]baz>",
                "[foo/bar/baz/]bud*",
                "[foo/bar/]qux>",
                "[foo/bar/qux/]qup*",
            ],
        ),
        (
            ["foo/bar/baz/qux", "foo/bar"],
            ["foo>", "[foo/]bar*>", "[foo/bar/]baz>", "[foo/bar/baz/]qux*"],
        ),
        (["foo/bar", "baz/qux"], ["baz>", "[baz/]qux*", "foo>", "[foo/]bar*"]),
        (
            ["foo/bar", "baz/qux", "foo/baz"],
            ["baz>", "[baz/]qux*", "foo>", "[foo/]bar*", "[foo/]baz*"],
        ),
    ],
)
def test_list(paths, expected):
    assert inspect(list_entries(mk_elems(paths))) == expected


@pytest.mark.parametrize(
    "paths, error, kind",
    [
        (["/"], "invalid", InvalidPathError),
        ([""], "invalid", InvalidPathError),
        (["", ""], "invalid", InvalidPathError),
        (["bar//"], "invalid", InvalidPathError),
        (["bar", "bar"], "duplicate", DuplicatePathError),
        (["bar/", "bar"], "invalid", InvalidPathError),
        (["a/b", "a/b", "c"], "duplicate", DuplicatePathError),
    ],
)
def test_list_errors(paths, error, kind):
    with pytest.raises(kind) as exc:
        list_entries(mk_elems(paths))
    assert error in str(exc.value)


def test_duplicate_error_names_the_path():
    with pytest.raises(DuplicatePathError) as exc:
        build_tree(mk_elems(["x", "bar", "bar"]))
    assert "bar" in str(exc.value)
    assert exc.value.path == ("bar",)


def test_empty_path_components_are_invalid():
    with pytest.raises(InvalidPathError):
        build_tree([PathElem(())])


def test_build_tree_shapes_nodes():
    foo, bar = PathElem.from_path("foo"), PathElem.from_path("foo/bar")
    forest = build_tree([bar, foo])

    assert forest == [Node("foo", foo, (Node("bar", bar),))]
    assert forest[0].element is foo
    assert forest[0].children[0].is_leaf
    assert not forest[0].is_stub


def test_stub_node_has_no_element():
    forest = build_tree(mk_elems(["a/b", "a/c"]))
    assert len(forest) == 1
    assert forest[0].is_stub
    assert [c.name for c in forest[0].children] == ["b", "c"]


def test_input_is_not_mutated():
    elems = mk_elems(["b", "a/x", "a"])
    snapshot = list(elems)
    build_tree(elems)
    assert elems == snapshot


def test_components_are_not_split_on_delimiter():
    forest = build_tree(list(as_elements([["a/b"], ["a", "b"]])))
    assert [n.name for n in forest] == ["a", "a/b"]


def test_max_depth():
    elems = mk_elems(["a/b/c"])
    assert len(build_tree(elems, max_depth=3)) == 1
    with pytest.raises(InvalidPathError):
        build_tree(elems, max_depth=2)


def test_permutations_give_identical_listing():
    paths = ["a/b/c", "a", "b/c", "a/b/d", "b", "c/d/e/f", "a/e"]
    expected = inspect(list_entries(mk_elems(paths)))
    rng = random.Random(7)
    for _ in range(20):
        shuffled = paths[:]
        rng.shuffle(shuffled)
        assert inspect(list_entries(mk_elems(shuffled))) == expected


def test_entry_properties_hold():
    paths = ["a/b/c", "a", "b/c", "a/b/d", "c/d/e/f", "a/e", "d"]
    comps = {tuple(p.split("/")) for p in paths}
    prefixes = {c[:i] for c in comps for i in range(1, len(c) + 1)}

    entries = list_entries(mk_elems(paths))

    assert len(entries) == len(prefixes)
    for e in entries:
        full = tuple(e.path.split("/"))
        extended = any(len(c) > len(full) and c[: len(full)] == full for c in comps)
        assert e.leaf == (not extended)
        assert (e.element is None) == (full not in comps)


def test_custom_element_type():
    class Record:
        def __init__(self, *parts):
            self.parts = parts

        def path_components(self):
            return self.parts

    r1, r2 = Record("ns", "one"), Record("ns", "two")
    entries = list_entries([r2, r1])
    assert [e.element for e in entries] == [None, r1, r2]


def test_non_string_component_is_invalid():
    with pytest.raises(InvalidPathError) as exc:
        build_tree([PathElem(("a", "b")), PathElem(("a", 1))])
    assert exc.value.path == ("a", 1)


def test_depth_checked_before_sorting():
    with pytest.raises(InvalidPathError):
        build_tree([PathElem(("a", "b", "c")), PathElem(("a", 2))], max_depth=2)
