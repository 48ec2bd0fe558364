import itertools

import pytest

from deadends.analysis.dead_ends import link_extremity, find_dead_ends, count_dead_ends, dead_end_table
from deadends.gfa_operations.gfa_ops import Link
from deadends.params import START, END


@pytest.mark.parametrize("is_first_endpoint, strand, extremity", [
    (True, 1, END),
    (True, -1, START),
    (False, 1, START),
    (False, -1, END),
])
def test_link_extremity(is_first_endpoint, strand, extremity):
    assert link_extremity(is_first_endpoint, strand) == extremity


def test_link_extremity_bad_strand():
    with pytest.raises(ValueError):
        link_extremity(True, 0)


def test_circular_single_segment():
    assert count_dead_ends(["1"], [Link("1", 1, "1", 1)]) == 0


def test_unlinked_segment():
    assert count_dead_ends(["1"], []) == 2


def test_empty_graph():
    assert count_dead_ends([], []) == 0


def test_linear_chain():
    # 1+ -> 2+ -> 3+ leaves the start of 1 and the end of 3
    segments = ["1", "2", "3"]
    links = [Link("1", 1, "2", 1), Link("2", 1, "3", 1)]
    assert find_dead_ends(segments, links) == ({"1"}, {"3"})
    assert count_dead_ends(segments, links) == 2


def test_reverse_strands():
    # 1- -> 2- joins the start of 1 to the end of 2
    assert find_dead_ends(["1", "2"], [Link("1", -1, "2", -1)]) == ({"2"}, {"1"})


def test_duplicate_link():
    segments = ["1", "2"]
    link = Link("1", 1, "2", -1)
    assert count_dead_ends(segments, [link, link]) == count_dead_ends(segments, [link]) == 2


def test_link_order():
    segments = ["a", "b", "c", "d"]
    links = [Link("a", 1, "b", 1), Link("b", -1, "c", 1), Link("c", 1, "a", -1), Link("d", -1, "d", 1)]
    counts = {count_dead_ends(segments, list(p)) for p in itertools.permutations(links)}
    assert counts == {count_dead_ends(segments, links)}


def test_unknown_segment_in_link():
    assert count_dead_ends(["1"], [Link("x", 1, "y", 1)]) == 2


def test_bounds():
    segments = ["1", "2", "3", "4"]
    links = [Link("1", 1, "2", 1), Link("3", -1, "1", -1)]
    count = count_dead_ends(segments, links)
    assert 0 <= count <= 2 * len(segments)
    # 4 has no links and contributes both of its extremities
    assert ("4", [START, END]) in dead_end_table(segments, links)


def test_dead_end_table():
    segments = ["1", "2", "3"]
    links = [Link("1", 1, "2", 1), Link("2", 1, "1", 1)]
    assert dead_end_table(segments, links) == [("3", [START, END])]
    assert dead_end_table(["1", "2"], [Link("1", 1, "2", 1)]) == [("1", [START]), ("2", [END])]
