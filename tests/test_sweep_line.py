import pytest

from contestlib.sweep_line import (
    find_intersecting_pair,
    main,
    segment_to_remove,
    segments_intersect,
)

SAMPLE = [(2, 1, 6, 1), (4, 0, 1, 5), (5, 6, 5, 5), (2, 7, 1, 3)]


def test_crossing_segments():
    assert segments_intersect((0, 0, 4, 4), (0, 4, 4, 0))


def test_touching_at_endpoint():
    assert segments_intersect((0, 0, 2, 2), (2, 2, 5, 0))


def test_disjoint_parallel_segments():
    assert not segments_intersect((0, 0, 4, 0), (0, 1, 4, 1))


def test_intersection_is_symmetric():
    a, b = (0, 0, 3, 1), (1, 5, 2, -5)
    assert segments_intersect(a, b) == segments_intersect(b, a)


def test_no_pair_among_disjoint_segments():
    segs = [(0, 0, 4, 0), (0, 1, 4, 1), (0, 2, 4, 2)]
    assert find_intersecting_pair(segs) is None


def test_pair_found_actually_intersects():
    pair = find_intersecting_pair(SAMPLE)
    assert pair is not None
    i, j = pair
    assert i < j
    assert segments_intersect(SAMPLE[i], SAMPLE[j])


def test_endpoint_order_does_not_matter():
    flipped = [(x2, y2, x1, y1) for x1, y1, x2, y2 in SAMPLE]
    assert find_intersecting_pair(flipped) == find_intersecting_pair(SAMPLE)


def test_sample_removal():
    assert segment_to_remove(SAMPLE) == 1


def test_removal_leaves_rest_disjoint():
    idx = segment_to_remove(SAMPLE)
    rest = [s for i, s in enumerate(SAMPLE) if i != idx]
    assert find_intersecting_pair(rest) is None


def test_removal_without_intersection_raises():
    with pytest.raises(ValueError):
        segment_to_remove([(0, 0, 1, 0), (0, 5, 1, 5)])


def test_main_reads_and_writes_files(tmp_path):
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    lines = [str(len(SAMPLE))] + [" ".join(map(str, s)) for s in SAMPLE]
    src.write_text("\n".join(lines) + "\n")
    assert main([str(src), str(dst)]) == 0
    assert dst.read_text() == f"{segment_to_remove(SAMPLE) + 1}\n"


def test_main_rejects_truncated_input(tmp_path):
    src = tmp_path / "in.txt"
    src.write_text("3\n0 0 1 1\n")
    with pytest.raises(ValueError):
        main([str(src), str(tmp_path / "out.txt")])