import gzip
import json
import logging
import os
import zlib
from pathlib import Path

from polycubes.polycube import Polycube

log = logging.getLogger(__name__)

class CacheError(Exception):
	pass

def cache_path(n, cache_dir=None):
	cache_dir = Path.cwd() if cache_dir is None else Path(cache_dir)
	return cache_dir.joinpath(f'cubes_{n}.json.gz')

def save_to_cache(polycubes, n, cache_dir=None):
	path = cache_path(n, cache_dir)
	json_content = {
		'n': n,
		'count': len(polycubes),
		'polycubes': [polycube.to_list() for polycube in polycubes],
	}
	# write next to the real file first and then move it into place, so
	#   a crash halfway through can't leave a truncated cache behind
	tmp_path = path.with_name(f'{path.name}.tmp')
	try:
		# thanks to https://stackoverflow.com/a/49535758/259456
		#   for showing how to write gzip compressed content
		#   to a file
		with gzip.open(tmp_path, 'wt', encoding='ascii') as f:
			json.dump(json_content, f, separators=(',', ':'))
		os.replace(tmp_path, path)
	except (OSError, TypeError, ValueError) as e:
		log.warning(f'could not save {len(polycubes)} polycubes of size {n} to cache [{path}]: {e}')
		try:
			tmp_path.unlink()
		except OSError:
			pass
		return False
	log.info(f'saved {len(polycubes)} polycubes of size {n} to cache [{path}]')
	return True

def parse_cache_content(json_content, n):
	if not isinstance(json_content, dict):
		raise CacheError('cache content is not an object')
	if json_content.get('n') != n:
		raise CacheError(f'cache is for n={json_content.get("n")!r}, expected n={n}')
	raw_polycubes = json_content.get('polycubes')
	if not isinstance(raw_polycubes, list):
		raise CacheError('cache has no polycubes list')
	if json_content.get('count') != len(raw_polycubes):
		raise CacheError(f'cache says it has {json_content.get("count")!r} polycubes but holds {len(raw_polycubes)}')
	polycubes = []
	for raw in raw_polycubes:
		if not isinstance(raw, list):
			raise CacheError(f'not a polycube: {raw!r}')
		try:
			polycube = Polycube.from_list(raw)
		except (TypeError, ValueError) as e:
			raise CacheError(str(e)) from e
		if polycube.n != n:
			raise CacheError(f'found a polycube with {polycube.n} cubes in the cache for n={n}')
		polycubes.append(polycube)
	return polycubes

def load_from_cache(n, cache_dir=None):
	path = cache_path(n, cache_dir)
	if not path.is_file():
		log.debug(f'no cache file for n={n} at [{path}]')
		return None
	try:
		with gzip.open(path, 'rt', encoding='ascii') as f:
			json_content = json.loads(f.read())
		polycubes = parse_cache_content(json_content, n)
	# a broken cache is no different from a missing one, we just regenerate
	except (OSError, EOFError, zlib.error, UnicodeDecodeError, ValueError, CacheError) as e:
		log.warning(f'ignoring unusable cache file [{path}]: {e}')
		return None
	log.info(f'loaded {len(polycubes)} polycubes of size {n} from cache [{path}]')
	return polycubes
