import suite
from sortedseq import (
    assert_sorted, assert_sorted_by, assert_sorted_pairs, S, KV, SortOrder,
    SortedSequence, SortedKeyValueSequence, SequenceNotSortedError, InvalidSortOrderError
)

test = suite.test
assert_that = suite.assert_that
raises = suite.raises

# --- helper data ---
first_char = lambda s: s[0]
seq1 = assert_sorted_by(["1a", "2b", "2c"], first_char)
seq2 = assert_sorted_by(["2x", "2y", "3z"], first_char)


# --- construction ---

@test("factories build the right kinds of sequence")
def test_factory_kinds():
    assert_that(isinstance(assert_sorted([1, 2]), SortedSequence), "assert_sorted")
    assert_that(isinstance(assert_sorted_by(['a'], first_char), SortedSequence), "assert_sorted_by")
    assert_that(isinstance(assert_sorted_pairs([(1, 'a')]), SortedKeyValueSequence), "assert_sorted_pairs")
    assert_that(S is assert_sorted and KV is assert_sorted_pairs, "aliases")
    assert_that(assert_sorted([1]).sort_order is SortOrder.ASCENDING, "ascending by default")


@test("key selector sequences yield the elements")
def test_key_selector_ascending():
    assert_that(assert_sorted_by(["az", "by", "cx"], first_char).to.list() == ["az", "by", "cx"], "ascending")
    desc = assert_sorted_by(["az", "by", "cx"], lambda s: s[-1], SortOrder.DESCENDING)
    assert_that(desc.to.list() == ["az", "by", "cx"], "descending by last character")


@test("unsorted elements raise on traversal")
def test_unsorted_elements():
    with raises(SequenceNotSortedError):
        assert_sorted([1, 3, 2], SortOrder.ASCENDING).to.list()


@test("as_sorted_key_values exposes the derived keys")
def test_as_sorted_key_values():
    kv = assert_sorted_by(["az", "by", "cx"], first_char).as_sorted_key_values()
    assert_that(kv.to.list() == [('a', "az"), ('b', "by"), ('c', "cx")], "ascending keys")
    desc = assert_sorted_by(["az", "by", "cx"], lambda s: s[-1], 'descending').as_sorted_key_values()
    assert_that(desc.to.list() == [('z', "az"), ('y', "by"), ('x', "cx")], "descending keys")
    assert_that(desc.sort_order is SortOrder.DESCENDING, "order carries over")
    assert_that(kv.as_sorted_key_values() is kv, "a key-value sequence converts to itself")

# --- single-sequence operations ---

@test("filters on element sequences")
def test_element_filters():
    assert_that(assert_sorted([1, 2, 3]).filter_by_key(lambda k: k % 2 == 0).to.list() == [2], "filter_by_key")
    words = assert_sorted_by(["a1", "b2", "c3"], first_char)
    assert_that(words.filter_by_value(lambda w: w[-1] > '1').to.list() == ["b2", "c3"], "filter_by_value")
    assert_that(words.filter(lambda w: w[-1] > '1').to.list() == ["b2", "c3"], "filter sees elements")


@test("distinct and group on element sequences")
def test_element_distinct_group():
    assert_that(assert_sorted([1, 1, 2]).distinct_by_key().to.list() == [1, 2], "distinct ascending")
    assert_that(assert_sorted([2, 1, 1], SortOrder.DESCENDING).distinct_by_key().to.list() == [2, 1],
                "distinct descending")
    grouped = assert_sorted([3, 2, 2, 1], SortOrder.DESCENDING).group_by_key()
    assert_that(grouped.to.list() == [[3], [2, 2], [1]], "group descending")
    assert_that(isinstance(grouped, SortedSequence), "still an element sequence")


@test("map_values on element sequences keeps the derived keys")
def test_element_map_values():
    mapped = assert_sorted_by(["a1", "b2"], first_char).map_values(str.upper)
    assert_that(mapped.to.list() == ["A1", "B2"], "mapped elements")
    assert_that(mapped.as_sorted_key_values().to.keys() == ['a', 'b'], "keys untouched")

# --- zips and joins ---

@test("zip operations on element sequences")
def test_element_zips():
    assert_that(seq1.full_outer_zip_by_key(seq2).to.list() ==
                [("1a", None), ("2b", "2x"), ("2c", "2y"), (None, "3z")], "full outer")
    concat = lambda k, a, b: f"{a or ''}{b or ''}"
    assert_that(seq1.full_outer_zip_by_key(seq2, concat).to.list() == ["1a", "2b2x", "2c2y", "3z"],
                "full outer merged")
    assert_that(seq1.inner_zip_by_key(seq2).to.list() == [("2b", "2x"), ("2c", "2y")], "inner")
    assert_that(seq1.left_outer_zip_by_key(seq2).to.list() == [("1a", None), ("2b", "2x"), ("2c", "2y")],
                "left outer")
    assert_that(seq1.right_outer_zip_by_key(seq2).to.list() == [("2b", "2x"), ("2c", "2y"), (None, "3z")],
                "right outer")


@test("join operations on element sequences")
def test_element_joins():
    full = seq1.full_outer_join_by_key(seq2).to.list()
    expected = [("1a", None), ("2b", "2x"), ("2b", "2y"), ("2c", "2x"), ("2c", "2y"), (None, "3z")]
    assert_that(full == expected, f"full outer: {full}")
    inner = seq1.inner_join_by_key(seq2, lambda k, a, b: a + b).to.list()
    assert_that(inner == ["2b2x", "2b2y", "2c2x", "2c2y"], f"inner: {inner}")


@test("element and key-value sequences combine")
def test_mixed_operands():
    kv = assert_sorted_pairs([('2', 'two'), ('3', 'three')])
    result = seq1.inner_zip_by_key(kv).to.list()
    assert_that(result == [("2b", "two")], f"unexpected: {result}")
    with raises(InvalidSortOrderError):
        seq1.inner_zip_by_key(assert_sorted_pairs([('2', 'two')], SortOrder.DESCENDING))

# --- interleave ---

@test("interleave_by_key on element sequences")
def test_element_interleave():
    l = assert_sorted_by(["a1", "b2", "b4"], first_char)
    r = assert_sorted_by(["b3", "c4"], first_char)
    assert_that(l.interleave_by_key(r).to.list() == ["a1", "b2", "b3", "b4", "c4"], "ascending")
    l_desc = assert_sorted_by(["c1", "b2"], first_char, SortOrder.DESCENDING)
    r_desc = assert_sorted_by(["b3", "a4"], first_char, SortOrder.DESCENDING)
    assert_that(l_desc.interleave_by_key(r_desc).to.list() == ["c1", "b2", "b3", "a4"], "descending")


@test("repr describes order and validation")
def test_repr():
    assert_that("ASCENDING" in repr(assert_sorted([1])), "element sequence repr")
    assert_that("verify=False" in repr(assert_sorted_pairs([]).map_values(str)), "derived repr")


if __name__ == "__main__":
    suite.run(title="sortedseq sequence test")
