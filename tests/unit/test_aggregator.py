import itertools

from comment_scanner.core.aggregator import Aggregator, aggregate
from comment_scanner.core.models import FileScanResult, ScanCounters


def make_result(name: str, non_blank: int, commented: int) -> FileScanResult:
    return FileScanResult(path=name, extension=".py", counters=ScanCounters(non_blank, commented))


RESULTS = [
    make_result("a.py", 10, 3),
    make_result("b.py", 4, 4),
    make_result("c.py", 0, 0),
    make_result("d.py", 7, 1),
]


def test_counters_add_pairwise():
    total = ScanCounters(3, 1) + ScanCounters(5, 2)
    assert total == ScanCounters(8, 3)


def test_empty_aggregator():
    agg = Aggregator()
    assert agg.total_files == 0
    assert agg.as_dict() == {
        "files": 0,
        "non_blank_lines": 0,
        "commented_lines": 0,
        "code_lines": 0,
        "comment_density": 0.0,
    }


def test_aggregate_sums_files():
    agg = aggregate(RESULTS)
    assert agg.total_files == 4
    assert agg.totals == ScanCounters(21, 8)
    assert agg.as_dict()["comment_density"] == round(8 / 21, 4)


def test_aggregation_is_order_independent():
    expected = aggregate(RESULTS).totals
    for perm in itertools.permutations(RESULTS):
        assert aggregate(perm).totals == expected


def test_merge_matches_single_fold():
    left = aggregate(RESULTS[:2])
    right = aggregate(RESULTS[2:])
    assert left.merge(right).totals == right.merge(left).totals == aggregate(RESULTS).totals
    assert left.merge(right).total_files == 4


def test_add_does_not_mutate_file_counters():
    agg = Aggregator()
    first = make_result("a.py", 2, 1)
    agg.add(first)
    agg.add(make_result("b.py", 3, 3))
    assert first.counters == ScanCounters(2, 1)
    assert agg.totals == ScanCounters(5, 4)


def test_counter_density_and_code_lines():
    counters = ScanCounters(8, 2)
    assert counters.code_lines == 6
    assert counters.density == 0.25
    assert ScanCounters().density == 0.0
