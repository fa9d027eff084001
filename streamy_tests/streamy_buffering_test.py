import suite
from dgen import from_schema
from streamy import S, of, empty, from_range, from_supplier

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

# --- test data schemas ---
person_schema = {
    'id': {'_provider': 'sequence'},
    'name': 'word',
    'city': {'_provider': 'choice', 'from': ['ny', 'la', 'chi']},
    'score': ('pyint', {'min_value': 80, 'max_value': 100})
}


def _counting_source(data):
    """a stream over data that records how many times it was iterated"""
    passes = []

    def factory():
        passes.append(1)
        return iter(data)

    return from_supplier(factory), passes


# --- distinct ---

@test("distinct removes duplicates while preserving order")
def test_distinct_basic():
    assert_that(of(1, 2, 2, 3, 1).distinct().to.list() == [1, 2, 3], "first occurrence order")


@test("distinct handles empty sequences")
def test_distinct_empty():
    assert_that(empty().distinct().to.list() == [], "distinct on empty should be empty")


@test("distinct with all same elements")
def test_distinct_all_same():
    assert_that(of(5, 5, 5, 5).distinct().to.list() == [5], "single element")


@test("distinct keeps one None")
def test_distinct_none():
    assert_that(of(None, 1, None).distinct().to.list() == [None, 1], "None is a value like any other")


@test("distinct works on unhashable elements")
def test_distinct_unhashable():
    data = of({'a': 1}, {'a': 1}, [1], {'a': 2}, [1])
    assert_that(data.distinct().to.list() == [{'a': 1}, [1], {'a': 2}], "equality scan for dicts and lists")


@test("distinct starts with a clean slate on every iteration")
def test_distinct_fresh_state():
    unique = of(1, 1, 2).distinct()
    assert_that(unique.to.list() == [1, 2], "first pass")
    assert_that(unique.to.list() == [1, 2], "second pass is not filtered by the first")


@test("distinct is lazy")
def test_distinct_lazy():
    pulled = []
    result = S(range(100)).map(lambda x: pulled.append(x) or x % 3).distinct().take(2).to.list()
    assert_that(result == [0, 1], "two distinct residues")
    assert_that(pulled == [0, 1], "only two elements read")


@test("distinct on generated record fields")
def test_distinct_records():
    cities = from_schema(person_schema, seed=42).take(30).map(lambda p: p['city']).distinct().to.list()
    assert_that(len(cities) <= 3, "at most 3 unique cities")
    assert_that(len(cities) == len(set(cities)), "each city appears once")


# --- sorted ---

@test("sorted with a comparator orders ascending")
def test_sorted_comparator():
    result = of(3, 1, 2).sorted(lambda a, b: a - b).to.list()
    assert_that(result == [1, 2, 3], "ascending")


@test("sorted without arguments uses natural order")
def test_sorted_natural():
    assert_that(of('b', 'c', 'a').sorted().to.list() == ['a', 'b', 'c'], "natural order")


@test("sorted with key and reverse")
def test_sorted_key_reverse():
    words = of('ccc', 'a', 'bb')
    assert_that(words.sorted(key=len).to.list() == ['a', 'bb', 'ccc'], "by length")
    assert_that(words.sorted(key=len, reverse=True).to.list() == ['ccc', 'bb', 'a'], "by length, descending")


@test("sorted is stable")
def test_sorted_stable():
    pairs = of(('b', 1), ('a', 1), ('c', 0), ('d', 1))
    result = pairs.sorted(lambda x, y: x[1] - y[1]).to.list()
    assert_that(result == [('c', 0), ('b', 1), ('a', 1), ('d', 1)], "ties keep their original order")


@test("sorted rejects both comparator and key")
def test_sorted_both():
    assert_raises(ValueError, lambda: of(1).sorted(lambda a, b: 0, key=abs), "ambiguous ordering")


@test("sorted propagates comparator errors")
def test_sorted_comparator_error():
    def bad(a, b):
        raise RuntimeError("no order")

    st = of(2, 1).sorted(bad)
    assert_raises(RuntimeError, st.to.list, "error reaches the caller")
    assert_that(of(2, 1).sorted().to.list() == [1, 2], "nothing is left broken")


@test("sorted re-reads the source on every iteration")
def test_sorted_rematerializes():
    source, passes = _counting_source([2, 3, 1])
    ordered = source.sorted()
    assert_that(passes == [], "nothing read before iteration")
    ordered.to.list()
    ordered.to.list()
    assert_that(len(passes) == 2, "one source pass per iteration")


@test("sorted sees changes to the source between iterations")
def test_sorted_no_cache():
    data = [3, 1]
    ordered = S(data).sorted()
    assert_that(ordered.to.list() == [1, 3], "first pass")
    data.append(2)
    assert_that(ordered.to.list() == [1, 2, 3], "second pass re-sorts")


@test("sorted records by score")
def test_sorted_records():
    people = from_schema(person_schema, seed=3).take(15)
    scores = people.sorted(key=lambda p: p['score']).map(lambda p: p['score']).to.list()
    assert_that(scores == sorted(scores), "scores ascending")
    assert_that(len(scores) == 15, "nobody lost")


# --- reverse ---

@test("reverse inverts the order")
def test_reverse():
    assert_that(from_range(0, 4).reverse().to.list() == [3, 2, 1, 0], "back to front")
    assert_that(empty().reverse().to.list() == [], "empty stays empty")


@test("reverse re-reads the source on every iteration")
def test_reverse_rematerializes():
    source, passes = _counting_source([1, 2])
    backwards = source.reverse()
    assert_that(backwards.to.list() == [2, 1], "first pass")
    assert_that(backwards.to.list() == [2, 1], "second pass")
    assert_that(len(passes) == 2, "source read twice")


# --- separate ---

@test("separate removes excluded values")
def test_separate():
    assert_that(of(1, 2, 3, 4).separate([2, 4]).to.list() == [1, 3], "evens removed")


@test("separate reads the exclusion once, at call time")
def test_separate_reads_exclusion_once():
    exclusion, passes = _counting_source([2])
    remaining = of(1, 2, 3).separate(exclusion)
    assert_that(len(passes) == 1, "exclusion materialized immediately")
    remaining.to.list()
    remaining.to.list()
    assert_that(len(passes) == 1, "and never again")


@test("separate accepts a one-shot exclusion iterable")
def test_separate_generator_exclusion():
    remaining = of(1, 2, 3).separate(x for x in [1, 3])
    assert_that(remaining.to.list() == [2], "first pass")
    assert_that(remaining.to.list() == [2], "second pass still excludes")


@test("separate handles None and unhashable values")
def test_separate_none_unhashable():
    assert_that(of(None, 0, 1).separate([None]).to.list() == [0, 1], "None excludes only None")
    assert_that(of([1], [2]).separate([[2]]).to.list() == [[1]], "lists compared by value")


@test("separate stays lazy over the primary stream")
def test_separate_lazy():
    pulled = []
    result = S(range(100)).map(lambda x: pulled.append(x) or x).separate([0]).take(1).to.list()
    assert_that(result == [1], "0 is excluded")
    assert_that(pulled == [0, 1], "only two elements read")


if __name__ == "__main__":
    suite.main(title="streamy buffering operations test suite")
