import pytest

from reelmatch.errors import ConfigurationError
from reelmatch.reels.sequences import (
    generate_column_sequence,
    generate_column_sequences,
    validate_parameters,
)
from tests.helpers import SEVEN_TYPES


def test_one_strip_per_column_with_requested_length():
    strips = generate_column_sequences(5, SEVEN_TYPES, 32)
    assert len(strips) == 5
    for strip in strips:
        assert len(strip) == 32
        assert set(strip) <= set(SEVEN_TYPES)


def test_strips_never_hold_three_in_a_row():
    for grid_size, types in ((5, SEVEN_TYPES), (7, SEVEN_TYPES), (4, ('a', 'b', 'c'))):
        for strip in generate_column_sequences(grid_size, types, grid_size * 4):
            for i in range(len(strip) - 2):
                assert not (strip[i] == strip[i + 1] == strip[i + 2]), f'Run at {i} in {strip}'


def test_least_used_type_wins_and_ties_follow_catalog_order():
    strip = generate_column_sequence(0, ['x', 'y', 'z'], 7, [])
    assert strip == ('x', 'y', 'z', 'x', 'y', 'z', 'x')


def test_usage_stays_balanced_within_each_strip():
    for strip in generate_column_sequences(5, SEVEN_TYPES, 32):
        counts = [strip.count(t) for t in SEVEN_TYPES]
        assert max(counts) - min(counts) <= 1, counts


def test_generation_is_deterministic():
    first = generate_column_sequences(7, SEVEN_TYPES, 32)
    second = generate_column_sequences(7, SEVEN_TYPES, 32)
    assert first == second


def test_left_neighbour_pair_blocks_repeating_its_value():
    # Left column shows C, C at rows 2-3; this column already has C at row 2.
    left = ('a', 'b', 'c', 'c', 'a', 'b')
    strip = generate_column_sequence(1, ['a', 'b', 'c'], 6, [left], grid_size=4)
    assert strip[2] == 'c'
    assert strip[3] != 'c'


@pytest.mark.parametrize(
    'grid_size, types, min_tiles, column_length',
    [
        (0, SEVEN_TYPES, 3, 32),
        (5, (), 3, 32),
        (5, ('a', 'b'), 1, 32),
        (5, ('a', 'b', 'a'), 1, 32),
        (5, SEVEN_TYPES, -1, 32),
        (5, SEVEN_TYPES, 3, 9),
        (5, SEVEN_TYPES, 4, 32),
    ],
)
def test_infeasible_parameters_raise_configuration_error(grid_size, types, min_tiles, column_length):
    with pytest.raises(ConfigurationError):
        validate_parameters(grid_size, types, min_tiles, column_length)


def test_feasible_parameters_pass():
    validate_parameters(5, SEVEN_TYPES, 3, 32)
    validate_parameters(5, SEVEN_TYPES, 3, 10)


def test_configuration_error_is_a_value_error():
    assert issubclass(ConfigurationError, ValueError)
