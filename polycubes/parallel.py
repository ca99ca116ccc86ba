import logging
from multiprocessing import Manager, Pool

from polycubes.growth import expand_polycube
from polycubes.registry import SharedRegistry

log = logging.getLogger(__name__)

# set in each pool worker by init_worker()
worker_registry = None
worker_mode = None

def init_worker(registry, mode):
	global worker_registry
	global worker_mode
	worker_registry = registry
	worker_mode = mode

def worker_expand(base):
	return expand_polycube(base, worker_registry, mode=worker_mode)

def expand_in_parallel(base_shapes, *, workers, mode='signature', shards=1):
	if workers < 1:
		raise ValueError(f'need at least one worker process, got {workers}')

	found = []
	total = len(base_shapes)
	# log roughly every 10% so big runs show some sign of life
	log_every = max(1, total // 10)
	with Manager() as manager:
		registry = SharedRegistry(manager, shards=shards)
		with Pool(processes=workers, initializer=init_worker, initargs=(registry, mode)) as pool:
			# one job per base polycube, and the order they finish in doesn't
			#   matter since the registry decides which one keeps each shape
			# if any worker raises, imap_unordered re-raises it here and the
			#   pool is torn down, so we never hand back a partial result
			for done, polycubes in enumerate(pool.imap_unordered(worker_expand, base_shapes), start=1):
				found.extend(polycubes)
				if done % log_every == 0 or done == total:
					log.debug(f'expanded {done}/{total} base polycubes ({done * 100.0 / total:.1f}%)')
		log.debug(f'registry holds {len(registry)} signatures across {registry.shards} shard(s)')
	return found
