import pytest
from packages.engine import (
    ALL_CORRECT, FeedbackPattern, MalformedWordError, bucket_sizes, enumerate_patterns, partition,
)

P = FeedbackPattern.from_string

CANDIDATES = ["crane", "slate", "plane", "shale", "trace", "cared", "racer", "scoop",
              "level", "belle", "erase", "geese", "sassy", "there"]


@pytest.mark.parametrize("guess", ["slate", "speed", "eerie", "zzzzz", "level"])
def test_partition_is_total_and_disjoint(guess):
    buckets = partition(guess, CANDIDATES)
    assert list(buckets) == list(enumerate_patterns())

    seen = []
    for words in buckets.values():
        seen.extend(words)
    assert sorted(seen) == sorted(CANDIDATES)          # union is C, nothing twice


def test_partition_matches_bucket_sizes():
    buckets = partition("slate", CANDIDATES)
    nonempty = {p: len(ws) for p, ws in buckets.items() if ws}
    assert nonempty == bucket_sizes("slate", CANDIDATES)


def test_partition_scenario_buckets():
    buckets = partition("slate", ["crane", "slate", "plane", "shale"])
    assert buckets[P("--G-G")] == ["crane"]
    assert buckets[P("-GG-G")] == ["plane"]
    assert buckets[P("GYG-G")] == ["shale"]
    assert buckets[ALL_CORRECT] == ["slate"]
    assert sum(1 for ws in buckets.values() if ws) == 4


def test_partition_keeps_input_order():
    buckets = partition("zzzzz", ["shale", "crane", "plane"])
    assert buckets[P("-----")] == ["shale", "crane", "plane"]


def test_partition_of_empty_set_has_only_empty_buckets():
    buckets = partition("crane", [])
    assert len(buckets) == 243 and not any(buckets.values())


def test_partition_rejects_malformed_candidates():
    with pytest.raises(MalformedWordError):
        partition("crane", ["crane", "sla te"])
