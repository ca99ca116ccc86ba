import logging

import pytest

from polycubes import counter
from polycubes.counter import (CounterConfig, canonicalize_fixed, count_extensions_from,
	count_fixed_polycubes, count_fixed_polycubes_bfs, count_fixed_polycubes_parallel,
	count_free_polycubes, count_polycubes, fixed_key, generate_starting_polycubes, valid_extensions)
from polycubes.generator import generate_polycubes

# https://oeis.org/A001931
fixed_counts = [0, 1, 3, 15, 86, 534, 3481]

def test_config_defaults():
	config = CounterConfig()
	assert config.threads >= 1
	assert config.key_mode == 'hash'
	assert not config.show_progress

def test_config_rejects_unknown_key_mode():
	with pytest.raises(ValueError):
		CounterConfig(key_mode='crc')

def test_canonicalize_fixed_is_translation_only():
	a = ((3, 4, 5), (4, 4, 5))
	b = ((0, 0, 0), (1, 0, 0))
	assert canonicalize_fixed(a) == b
	assert canonicalize_fixed(((1, 0, 0), (0, 0, 0))) == b
	# the same domino turned on its side is a different fixed polycube
	assert canonicalize_fixed(((0, 0, 0), (0, 1, 0))) != b

def test_fixed_key_modes():
	positions = ((0, 0, 0), (1, 0, 0))
	assert fixed_key(positions, 'signature') == positions
	assert fixed_key(positions, 'hash') == hash(positions)

def test_valid_extensions():
	assert len(valid_extensions(((0, 0, 0),))) == 6
	extensions = valid_extensions(((0, 0, 0), (1, 0, 0)))
	assert len(extensions) == 10
	assert (0, 0, 0) not in extensions

@pytest.mark.parametrize('key_mode', ['hash', 'signature'])
@pytest.mark.parametrize('n', [1, 2, 3, 4, 5])
def test_bfs_counts_fixed_polycubes(n, key_mode):
	assert count_fixed_polycubes_bfs(n, CounterConfig(threads=1, key_mode=key_mode)) == fixed_counts[n]

def test_starting_polycubes():
	assert generate_starting_polycubes(1) == [((0, 0, 0),)]
	assert generate_starting_polycubes(2) == [((0, 0, 0), (1, 0, 0))]
	seeds = generate_starting_polycubes(3)
	assert len(seeds) == 15
	assert len(set(seeds)) == 15
	assert all(canonicalize_fixed(seed) == seed for seed in seeds)
	assert len(generate_starting_polycubes(4)) == 86

def test_depth_first_completion_with_one_seen_set():
	assert count_extensions_from(((0, 0, 0),), 4, set(), 'signature') == fixed_counts[5]
	assert count_extensions_from(((0, 0, 0), (1, 0, 0)), 0, set()) == 1

def test_parallel_count_never_undercounts():
	config = CounterConfig(threads=2, key_mode='signature')
	# each seed only dedupes its own branches, so shapes reachable from
	#   several seeds are counted more than once
	assert count_fixed_polycubes_parallel(5, config) >= fixed_counts[5]
	assert count_fixed_polycubes_parallel(3, config) == fixed_counts[3]

def test_small_fixed_counts_come_from_the_generator():
	config = CounterConfig(threads=1)
	assert count_fixed_polycubes(1, config) == 1
	assert count_fixed_polycubes(2, config) == 1
	assert count_fixed_polycubes(6, config) == 166

@pytest.mark.parametrize('n', [1, 2, 3, 4, 5, 6])
def test_count_without_symmetry_matches_generator_for_small_n(n):
	assert count_polycubes(n, False) == len(generate_polycubes(n, False, workers=0))

def test_count_with_symmetry():
	assert count_polycubes(6, True) == 166
	assert count_polycubes(1, True) == 1
	assert count_polycubes(11, True) == 2522522
	assert count_polycubes(12, True) == 18598427

def test_count_rejects_zero():
	with pytest.raises(ValueError):
		count_polycubes(0, True)

def test_free_count_above_twelve_is_labeled_estimate(monkeypatch, caplog):
	monkeypatch.setattr(counter, 'count_fixed_polycubes', lambda n, config: 24 * 1000 + 23)
	with caplog.at_level(logging.WARNING, logger='polycubes.counter'):
		assert count_free_polycubes(13, CounterConfig(threads=1)) == 1000
	assert 'approximation' in caplog.text

@pytest.mark.slow
def test_fixed_count_exceeds_free_count_for_eight():
	config = CounterConfig(threads=1)
	fixed = count_polycubes(8, False, config)
	free = count_polycubes(8, True, config)
	assert free == 6922
	assert fixed == 162913
	assert fixed > free

@pytest.mark.slow
def test_parallel_fixed_count_for_eight():
	fixed = count_polycubes(8, False, CounterConfig(threads=2))
	assert fixed >= 162913
	assert fixed > count_polycubes(8, True)
