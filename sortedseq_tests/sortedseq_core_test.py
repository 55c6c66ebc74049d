from itertools import count

import suite
from dgen import Generator
from sortedseq import assert_sorted, assert_sorted_pairs, SortOrder, SequenceNotSortedError, empty

test = suite.test
assert_that = suite.assert_that
raises = suite.raises

# helper data
pairs = assert_sorted_pairs([(1, 'a'), (2, 'b'), (2, 'c'), (3, 'd')])
desc_pairs = assert_sorted_pairs([(3, 'd'), (2, 'c'), (2, 'b'), (1, 'a')], SortOrder.DESCENDING)


# --- map_values ---

@test("map_values transforms values and keeps keys")
def test_map_values_basic():
    result = pairs.map_values(str.upper).to.list()
    assert_that(result == [(1, 'A'), (2, 'B'), (2, 'C'), (3, 'D')], f"unexpected result: {result}")


@test("map_values output is not re-validated")
def test_map_values_skips_validation():
    mapped = pairs.map_values(lambda v: -ord(v))
    assert_that(not mapped.as_sorted_key_values().verifies_on_traversal, "derived sequences trust their order")
    assert_that(mapped.to.values() == [-97, -98, -99, -100], "values may run in any direction")


@test("map_values keeps the sort order")
def test_map_values_sort_order():
    assert_that(desc_pairs.map_values(len).sort_order is SortOrder.DESCENDING, "order propagates")


@test("map_values still validates the source")
def test_map_values_validates_source():
    with raises(SequenceNotSortedError, "source violation should surface through the transform"):
        assert_sorted_pairs([(2, 'a'), (1, 'b')]).map_values(str.upper).to.list()

# --- filters ---

@test("filter_by_key keeps matching keys")
def test_filter_by_key():
    result = pairs.filter_by_key(lambda k: k % 2 == 0).to.list()
    assert_that(result == [(2, 'b'), (2, 'c')], f"unexpected result: {result}")


@test("filter_by_value keeps matching values")
def test_filter_by_value():
    result = pairs.filter_by_value(lambda v: v in 'ad').to.list()
    assert_that(result == [(1, 'a'), (3, 'd')], f"unexpected result: {result}")


@test("filter sees whole pairs on key-value sequences")
def test_filter_pairs():
    result = pairs.filter(lambda kv: kv[0] == 2 and kv[1] == 'c').to.list()
    assert_that(result == [(2, 'c')], f"unexpected result: {result}")


@test("filters preserve descending order")
def test_filter_descending():
    result = desc_pairs.filter_by_key(lambda k: k != 2).to.list()
    assert_that(result == [(3, 'd'), (1, 'a')], f"unexpected result: {result}")
    assert_that(desc_pairs.filter(lambda kv: True).sort_order is SortOrder.DESCENDING, "order propagates")

# --- distinct_by_key ---

@test("distinct_by_key keeps the first pair of each key")
def test_distinct_basic():
    result = pairs.distinct_by_key().to.list()
    assert_that(result == [(1, 'a'), (2, 'b'), (3, 'd')], f"unexpected result: {result}")


@test("distinct_by_key descending")
def test_distinct_descending():
    result = assert_sorted_pairs([(2, 'c'), (1, 'b'), (1, 'a')], 'desc').distinct_by_key().to.list()
    assert_that(result == [(2, 'c'), (1, 'b')], f"unexpected result: {result}")


@test("distinct_by_key handles falsy keys and empty input")
def test_distinct_edges():
    result = assert_sorted_pairs([(0, 'x'), (0, 'y'), (1, 'z')]).distinct_by_key().to.list()
    assert_that(result == [(0, 'x'), (1, 'z')], f"zero is a key like any other: {result}")
    assert_that(empty().distinct_by_key().to.list() == [], "empty stays empty")


@test("distinct_by_key is idempotent")
def test_distinct_idempotent():
    gen = Generator(seed=3)
    for order in (SortOrder.ASCENDING, SortOrder.DESCENDING):
        data = assert_sorted_pairs(gen.pairs(60, low=0, high=15, sort_order=order), order)
        once = data.distinct_by_key().to.list()
        twice = data.distinct_by_key().distinct_by_key().to.list()
        assert_that(once == twice, f"{order.name}: applying twice should change nothing")
        keys = [k for k, _ in once]
        assert_that(len(keys) == len(set(keys)), f"{order.name}: keys should be unique")

# --- slicing ---

@test("take and skip slice by position")
def test_take_skip():
    assert_that(pairs.take(2).to.keys() == [1, 2], "take(2)")
    assert_that(pairs.skip(3).to.list() == [(3, 'd')], "skip(3)")
    assert_that(pairs.take(0).to.list() == [], "take(0)")
    with raises(ValueError):
        pairs.take(-1)
    with raises(ValueError):
        pairs.skip(-1)


@test("take_while_key and skip_while_key slice by key")
def test_while_key():
    assert_that(pairs.take_while_key(lambda k: k < 3).to.keys() == [1, 2, 2], "take while below 3")
    assert_that(pairs.skip_while_key(lambda k: k < 2).to.keys() == [2, 2, 3], "skip while below 2")


@test("between_keys keeps an inclusive key range")
def test_between_keys():
    assert_that(pairs.between_keys(2, 3).to.keys() == [2, 2, 3], "ascending range")
    assert_that(desc_pairs.between_keys(1, 2).to.keys() == [2, 2, 1], "descending range uses the same bounds")
    assert_that(pairs.between_keys(5, 9).to.list() == [], "range past the data")
    with raises(ValueError):
        pairs.between_keys(3, 1)


@test("between_keys stops pulling past the far bound")
def test_between_keys_infinite():
    naturals = assert_sorted(count())
    assert_that(naturals.between_keys(5, 8).to.list() == [5, 6, 7, 8], "works on an infinite sequence")
    countdown = assert_sorted(count(100, -1), SortOrder.DESCENDING)
    assert_that(countdown.between_keys(95, 97).to.list() == [97, 96, 95], "descending infinite sequence")


@test("between_keys never reaches a violation beyond the range")
def test_between_keys_stops_before_violation():
    result = assert_sorted([1, 2, 3, 4, 0]).between_keys(1, 2).to.list()
    assert_that(result == [1, 2], f"the unsorted tail is never pulled: {result}")

# --- chaining ---

@test("transforms compose lazily")
def test_chaining():
    pulled = []

    def source():
        for pair in [(1, 'a'), (2, 'b'), (3, 'c'), (4, 'd')]:
            pulled.append(pair[0])
            yield pair

    chained = assert_sorted_pairs(source()).filter_by_key(lambda k: k > 1).map_values(str.upper).take(1)
    assert_that(pulled == [], "nothing is pulled before traversal")
    assert_that(chained.to.list() == [(2, 'B')], "chain result")
    assert_that(pulled == [1, 2], f"only as much as needed is pulled: {pulled}")


if __name__ == "__main__":
    suite.run(title="sortedseq core test")
