import logging
import random

from reelmatch.reels.matches import has_match
from reelmatch.reels.materializer import materialize
from reelmatch.reels.pool import build_stop_offset_pool, sample_stop_offsets
from reelmatch.reels.sequences import generate_column_sequences
from tests.helpers import SEVEN_TYPES, count_tiles

CYCLIC = tuple('ABCABC')
STRIPS = (CYCLIC, CYCLIC, CYCLIC)


def test_pool_fills_for_feasible_configuration():
    strips = generate_column_sequences(5, SEVEN_TYPES, 32)
    pool = build_stop_offset_pool(strips, SEVEN_TYPES, 3, random.Random(1234))
    assert len(pool) >= 1, 'Expected at least one valid stop'
    assert not pool.degraded
    assert pool.attempts <= 1000
    assert len(pool) <= 100


def test_every_pooled_stop_is_match_free_and_balanced():
    strips = generate_column_sequences(5, SEVEN_TYPES, 32)
    pool = build_stop_offset_pool(strips, SEVEN_TYPES, 3, random.Random(99))
    for offsets in pool:
        assert len(offsets) == 5
        assert all(0 <= o < 32 for o in offsets)
        grid = materialize(strips, offsets)
        assert not has_match(grid), f'Stop {offsets} shows a match'
        counts = count_tiles(grid)
        assert all(counts.get(t, 0) >= 3 for t in SEVEN_TYPES), counts


def test_pool_entries_are_unique():
    pool = build_stop_offset_pool(STRIPS, 'ABC', 3, random.Random(5), target_pool_size=150, max_attempts=2000)
    assert len(set(pool.offsets)) == len(pool.offsets)
    # 6**3 stops exist and 1 in 9 lines up a row, so at most 192 are valid.
    assert len(pool) <= 192


def test_pool_stops_at_target_size():
    pool = build_stop_offset_pool(STRIPS, 'ABC', 3, random.Random(3), target_pool_size=5)
    assert len(pool) == 5


def test_exhausted_attempts_fall_back_to_zero_offsets(caplog):
    with caplog.at_level(logging.WARNING, logger='reelmatch.reels.pool'):
        pool = build_stop_offset_pool(STRIPS, 'ABC', 3, random.Random(3), max_attempts=0)
    assert pool.degraded
    assert pool.offsets == ((0, 0, 0),)
    assert (0, 0, 0) in pool
    assert any('relaxing constraints' in record.getMessage() for record in caplog.records)


def test_impossible_balance_degrades_pool():
    pool = build_stop_offset_pool(STRIPS, 'ABC', 4, random.Random(3), max_attempts=50)
    assert pool.degraded
    assert pool.attempts == 50


def test_sampling_draws_from_pool_with_replacement():
    pool = build_stop_offset_pool(STRIPS, 'ABC', 3, random.Random(8), target_pool_size=3)
    rng = random.Random(21)
    draws = [sample_stop_offsets(pool, rng) for _ in range(30)]
    assert all(d in pool for d in draws)
    assert len(set(draws)) < len(draws), 'Thirty draws from three stops must repeat'


def test_sampling_is_reproducible_with_seed():
    pool = build_stop_offset_pool(STRIPS, 'ABC', 3, random.Random(8), target_pool_size=20)
    first = [pool.sample(random.Random(4)) for _ in range(3)]
    second = [pool.sample(random.Random(4)) for _ in range(3)]
    assert first == second
