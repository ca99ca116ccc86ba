import logging
import os

from polycubes.cache import load_from_cache, save_to_cache
from polycubes.growth import expand_polycube
from polycubes.known_counts import get_known_count
from polycubes.parallel import expand_in_parallel
from polycubes.polycube import Polycube
from polycubes.registry import LocalRegistry
from polycubes.rotation import SIGNATURE_MODES

log = logging.getLogger(__name__)

def default_workers():
	return os.cpu_count() or 1

def expand_all(base_shapes, *, mode='signature', workers=0, shards=1):
	# 0 workers means do everything in this process, like the
	#   single-threaded mode of the original counting script
	if workers == 0:
		registry = LocalRegistry()
		found = []
		for base in base_shapes:
			found.extend(expand_polycube(base, registry, mode=mode))
		return found
	return expand_in_parallel(base_shapes, workers=workers, mode=mode, shards=shards)

# generate all rotationally unique polycubes of size n
def generate_polycubes(n, use_cache=True, *, workers=None, mode='signature', cache_dir=None, shards=1):
	if workers is None:
		workers = default_workers()
	if workers < 0:
		raise ValueError(f'workers must be >= 0, got {workers}')
	if mode not in SIGNATURE_MODES:
		raise ValueError(f'unknown signature mode [{mode}], expected one of {SIGNATURE_MODES}')

	if n < 1:
		return []
	elif n == 1:
		return [Polycube.unit_cube()]
	elif n == 2:
		return [Polycube.domino()]

	if use_cache:
		polycubes = load_from_cache(n, cache_dir)
		if polycubes is not None:
			return polycubes

	base_cubes = generate_polycubes(n - 1, use_cache, workers=workers, mode=mode, cache_dir=cache_dir, shards=shards)
	log.info(f'processing {len(base_cubes)} base polycubes of size {n-1}')

	polycubes = expand_all(base_cubes, mode=mode, workers=workers, shards=shards)
	# the workers finish in whatever order they like, so sort to hand back
	#   the same list every time
	polycubes.sort(key=lambda polycube: polycube.cubes)
	log.info(f'found {len(polycubes)} unique polycubes of size {n}')

	# a failed save is only logged, we still have the polycubes in memory
	if use_cache:
		save_to_cache(polycubes, n, cache_dir)

	return polycubes

def check_against_known(n, found):
	expected = get_known_count(n)
	if expected is None:
		return (True, f'no reference count available for n={n}')
	if found < expected:
		return (False, f'WARNING: missing {expected - found} polycubes! (expected {expected})')
	if found > expected:
		return (False, f'WARNING: found {found - expected} extra polycubes! (expected {expected})')
	return (True, f'count matches the expected count of {expected}')
