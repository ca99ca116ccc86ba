import argparse
import logging
import sys
import time

from polycubes.counter import CounterConfig, count_polycubes
from polycubes.generator import check_against_known, generate_polycubes
from polycubes.known_counts import get_known_count
from polycubes.polycube import DisconnectedPolycube

def build_arg_parser():
	arg_parser = argparse.ArgumentParser(prog='polycubes',
		description='Generate or count the (rotationally) unique polycubes containing n cubes')
	arg_parser.add_argument('-n', metavar='<n>', type=int, required=True,
		help='the number of cubes in each polycube (>0)')
	arg_parser.add_argument('--threads', metavar='<threads>', type=int, required=False, default=None,
		help='0 for single-process, or >0 for the number of worker processes (default=number of cpus)')
	arg_parser.add_argument('--no-cache', action='store_true',
		help='always regenerate, and don\'t write cache files')
	arg_parser.add_argument('--cache-dir', metavar='<dir>', required=False, default=None,
		help='directory for cubes_<n>.json.gz cache files (default=current directory)')
	arg_parser.add_argument('--hash-signatures', action='store_true',
		help='dedupe on 64-bit hashes instead of full signatures (smaller, but collisions are possible)')
	arg_parser.add_argument('--shards', metavar='<shards>', type=int, required=False, default=1,
		help='number of independently locked pieces of the shared signature set (default=1)')
	arg_parser.add_argument('--count', action='store_true',
		help='only count polycubes, without keeping them in memory')
	arg_parser.add_argument('--symmetry', action='store_true',
		help='with --count, count rotationally unique (free) polycubes instead of fixed ones')
	arg_parser.add_argument('-v', '--verbose', action='store_true',
		help='print progress details')
	return arg_parser

def main(argv=None):
	arg_parser = build_arg_parser()
	args = arg_parser.parse_args(argv)

	# reject bad input here, before it reaches the generator or counter
	if args.n < 1 or (args.threads is not None and args.threads < 0) or args.shards < 1:
		arg_parser.print_help()
		return 1

	logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
		format='%(asctime)s %(levelname)s %(name)s: %(message)s')

	start_time = time.perf_counter()
	try:
		if args.count:
			config = CounterConfig(
				threads=args.threads,
				show_progress=args.verbose,
				key_mode='hash' if args.hash_signatures else 'signature')
			count = count_polycubes(args.n, args.symmetry, config)
			kind = 'free' if args.symmetry or args.n <= 7 else 'fixed'
			print(f'counted {count} {kind} polycubes of size {args.n}')
			ok = True
			if kind == 'free' and get_known_count(args.n) is not None:
				ok, verdict = check_against_known(args.n, count)
				print(verdict)
		else:
			polycubes = generate_polycubes(args.n, not args.no_cache,
				workers=args.threads,
				mode='hash' if args.hash_signatures else 'signature',
				cache_dir=args.cache_dir,
				shards=args.shards)
			print(f'generated {len(polycubes)} unique polycubes of size {args.n}')
			if polycubes:
				# longest side of any polycube's bounding box
				max_dim = max(max(polycube.dimensions()) for polycube in polycubes)
				print(f'maximum dimension: {max_dim}')
			ok, verdict = check_against_known(args.n, len(polycubes))
			print(verdict)
	except DisconnectedPolycube as e:
		print(f'internal error, generated a polycube that is not face-connected: {e}', file=sys.stderr)
		return 2
	print(f'elapsed seconds: {time.perf_counter() - start_time:.2f}')
	return 0 if ok else 3

if __name__ == '__main__':
	sys.exit(main())
