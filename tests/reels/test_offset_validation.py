import pytest

from reelmatch.reels.validation import (
    has_minimum_tiles_per_type,
    is_match_free,
    is_valid_stop,
    tile_counts,
)

CYCLIC = tuple('ABCABC')
STRIPS = (CYCLIC, CYCLIC, CYCLIC)
TYPES = ('A', 'B', 'C')


def test_aligned_offsets_create_horizontal_match():
    assert not is_match_free(STRIPS, (0, 0, 0))
    assert not is_match_free(STRIPS, (1, 4, 1)), 'Offsets equal modulo the period still line up'


def test_staggered_offsets_are_match_free_and_balanced():
    offsets = (0, 1, 2)
    assert is_match_free(STRIPS, offsets)
    assert tile_counts(STRIPS, offsets) == {'A': 3, 'B': 3, 'C': 3}
    assert is_valid_stop(STRIPS, offsets, TYPES, 3)


def test_vertical_run_is_rejected():
    strips = (tuple('AAABCB'), CYCLIC, CYCLIC)
    assert not is_match_free(strips, (0, 1, 2))
    assert is_match_free(strips, (3, 1, 2))


def test_vertical_run_across_strip_wrap_is_rejected():
    strips = (tuple('ABCBAA'), CYCLIC, CYCLIC)
    assert not is_match_free(strips, (4, 1, 2)), 'Rows 0-2 read A, A, A across the wrap'


def test_balance_threshold():
    offsets = (0, 1, 2)
    assert has_minimum_tiles_per_type(STRIPS, offsets, TYPES, 3)
    assert not has_minimum_tiles_per_type(STRIPS, offsets, TYPES, 4)
    assert not is_valid_stop(STRIPS, offsets, TYPES, 4)


def test_missing_type_fails_balance():
    assert not has_minimum_tiles_per_type(STRIPS, (0, 1, 2), TYPES + ('D',), 1)


def test_offsets_are_read_modulo_strip_length():
    assert is_valid_stop(STRIPS, (6, 7, 8), TYPES, 3)
    assert is_valid_stop(STRIPS, (-6, -5, -4), TYPES, 3)


def test_offset_count_must_match_columns():
    with pytest.raises(ValueError):
        is_match_free(STRIPS, (0, 1))
