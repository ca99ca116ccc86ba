# counts polycubes without keeping them around
#
# everything in here works on plain tuples of (x, y, z) positions and only
#   identifies polycubes up to translation ("fixed" polycubes), which is a
#   different and much larger number than the rotationally unique ("free")
#   polycubes that the generator produces
import logging
import os
import time
from collections import deque
from multiprocessing import Manager, Pool

from polycubes.generator import generate_polycubes
from polycubes.known_counts import get_known_count
from polycubes.polycube import directions

log = logging.getLogger(__name__)

KEY_MODES = ('hash', 'signature')

# above this n the free count is estimated, not exact
largest_exact_free_n = 12

class CounterConfig:

	def __init__(self, *, threads=None, show_progress=False, key_mode='hash'):
		if key_mode not in KEY_MODES:
			raise ValueError(f'unknown key mode [{key_mode}], expected one of {KEY_MODES}')
		# 0 or 1 thread -> single process breadth-first search
		self.threads = (os.cpu_count() or 1) if threads is None else threads
		self.show_progress = show_progress
		# 'hash' keeps a 64-bit hash per polycube, which is much smaller but
		#   two polycubes that happen to share a hash will silently be counted
		#   as one. 'signature' keeps the whole position tuple and never
		#   confuses two polycubes
		self.key_mode = key_mode

	def __repr__(self):
		return f'CounterConfig(threads={self.threads}, show_progress={self.show_progress}, key_mode={self.key_mode!r})'

# translate to the origin and sort -- this is NOT rotation.canonicalize(),
#   two rotations of the same shape get different results here
def canonicalize_fixed(positions):
	min_x = min(pos[0] for pos in positions)
	min_y = min(pos[1] for pos in positions)
	min_z = min(pos[2] for pos in positions)
	if min_x == 0 and min_y == 0 and min_z == 0:
		return tuple(sorted(positions))
	return tuple(sorted((x - min_x, y - min_y, z - min_z) for x, y, z in positions))

def fixed_key(canonical, key_mode='hash'):
	# hash() of a tuple of ints doesn't depend on PYTHONHASHSEED, so this
	#   is stable across worker processes too
	if key_mode == 'hash':
		return hash(canonical)
	return canonical

def valid_extensions(positions):
	occupied = set(positions)
	extensions = set()
	for x, y, z in positions:
		for dx, dy, dz in directions:
			try_pos = (x + dx, y + dy, z + dz)
			if try_pos not in occupied:
				extensions.add(try_pos)
	return extensions

def fixed_polycubes_bfs(n, key_mode='hash'):
	# breadth-first search from a single cube, yielding every fixed polycube
	#   of size n once (modulo hash collisions in 'hash' mode)
	start = ((0, 0, 0),)
	queue = deque([(start, 1)])
	visited = {fixed_key(start, key_mode)}
	while queue:
		positions, size = queue.popleft()
		if size == n:
			yield positions
			continue
		for ext_pos in valid_extensions(positions):
			new_positions = canonicalize_fixed(positions + (ext_pos,))
			key = fixed_key(new_positions, key_mode)
			if key in visited:
				continue
			visited.add(key)
			queue.append((new_positions, size + 1))

def count_fixed_polycubes_bfs(n, config=None):
	config = config or CounterConfig(threads=1)
	if n < 1:
		return 0
	count = 0
	for _ in fixed_polycubes_bfs(n, config.key_mode):
		count += 1
	return count

def generate_starting_polycubes(size, config=None):
	config = config or CounterConfig(threads=1)
	if size == 1:
		return [((0, 0, 0),)]
	if size == 2:
		return [((0, 0, 0), (1, 0, 0))]
	return list(fixed_polycubes_bfs(size, config.key_mode))

def count_extensions_from(positions, remaining, seen, key_mode='hash'):
	if remaining == 0:
		return 1
	count = 0
	for ext_pos in valid_extensions(positions):
		new_positions = canonicalize_fixed(positions + (ext_pos,))
		key = fixed_key(new_positions, key_mode)
		if key in seen:
			continue
		seen.add(key)
		count += count_extensions_from(new_positions, remaining - 1, seen, key_mode)
	return count

# set in each pool worker by init_count_worker()
worker_target_n = None
worker_key_mode = None
worker_total = None
worker_total_lock = None

def init_count_worker(n, key_mode, total, total_lock):
	global worker_target_n
	global worker_key_mode
	global worker_total
	global worker_total_lock
	worker_target_n = n
	worker_key_mode = key_mode
	worker_total = total
	worker_total_lock = total_lock

def count_from_seed(seed):
	# each seed gets its own seen set, so a polycube that can be grown from
	#   two different seeds is counted by both of them
	partial = count_extensions_from(seed, worker_target_n - len(seed), set(), worker_key_mode)
	with worker_total_lock:
		worker_total.value += partial
	return partial

def count_fixed_polycubes_parallel(n, config=None):
	config = config or CounterConfig()
	if n <= 2:
		return 1

	# size 3 seeds give plenty of jobs for smaller n, but past n=10 the
	#   jobs get too long and uneven, so split further
	starting_size = 3 if n <= 10 else 4
	if n <= starting_size:
		return count_fixed_polycubes_bfs(n, config)
	starting_polycubes = generate_starting_polycubes(starting_size, config)
	total_tasks = len(starting_polycubes)
	if config.show_progress:
		log.info(f'using {config.threads} processes with {total_tasks} starting polycubes of size {starting_size}')

	with Manager() as manager:
		total = manager.Value('Q', 0)
		total_lock = manager.Lock()
		with Pool(processes=max(1, config.threads), initializer=init_count_worker, initargs=(n, config.key_mode, total, total_lock)) as pool:
			for done, _ in enumerate(pool.imap_unordered(count_from_seed, starting_polycubes), start=1):
				if config.show_progress:
					log.info(f'progress: {done}/{total_tasks} tasks completed ({done * 100.0 / total_tasks:.1f}%)')
		total_count = total.value
	return total_count

def count_fixed_polycubes(n, config=None):
	config = config or CounterConfig()
	start_time = time.perf_counter()

	if n <= 2:
		return 1

	# for small n, the generator is quick enough and exact
	if n <= 7:
		known = get_known_count(n)
		if known is not None:
			return known
		return len(generate_polycubes(n, True))

	if config.show_progress:
		log.info(f'counting fixed polycubes of size {n}...')
	if config.threads <= 1:
		count = count_fixed_polycubes_bfs(n, config)
	else:
		count = count_fixed_polycubes_parallel(n, config)
	if config.show_progress:
		log.info(f'found {count} fixed polycubes of size {n} in {time.perf_counter() - start_time:.2f} seconds')
	return count

def count_free_polycubes(n, config=None):
	config = config or CounterConfig()
	if n <= 2:
		return 1
	if n <= largest_exact_free_n:
		return get_known_count(n)

	# dividing by 24 is only right if no polycube of size n looks the same
	#   after some rotation -- the ones that do are counted fewer than 24
	#   times in the fixed count, so this comes out a bit low
	fixed_count = count_fixed_polycubes(n, config)
	free_count = fixed_count // 24
	log.warning(f'estimated {free_count} free polycubes of size {n} as (fixed count / 24), this is an approximation for n > {largest_exact_free_n}')
	return free_count

def count_polycubes(n, use_symmetry, config=None):
	if n < 1:
		raise ValueError(f'n must be >= 1, got {n}')
	config = config or CounterConfig()

	if n <= 7 and not use_symmetry:
		known = get_known_count(n)
		if known is not None:
			return known
		return len(generate_polycubes(n, True))

	if use_symmetry:
		return count_free_polycubes(n, config)
	return count_fixed_polycubes(n, config)
