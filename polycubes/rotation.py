import hashlib
from itertools import permutations, product

from polycubes.polycube import Pos, Polycube

SIGNATURE_MODES = ('signature', 'hash')

def permutation_parity(perm):
	# number of swaps needed to sort the permutation, mod 2
	perm = list(perm)
	swaps = 0
	for i in range(len(perm)):
		while perm[i] != i:
			j = perm[i]
			perm[i], perm[j] = perm[j], perm[i]
			swaps += 1
	return swaps % 2

def generate_rotation_matrices():
	# every 3x3 matrix with exactly one +1 or -1 in each row and column is
	#   a symmetry of the cube (48 of them), and the ones with determinant
	#   +1 are the 24 proper rotations -- the other 24 are mirror images
	matrices = []
	for perm in permutations(range(3)):
		for signs in product((1, -1), repeat=3):
			det = (-1 if permutation_parity(perm) else 1) * signs[0] * signs[1] * signs[2]
			if det != 1:
				continue
			matrices.append(tuple(
				tuple(signs[row] if col == perm[row] else 0 for col in range(3))
				for row in range(3)))
	return matrices

# each of the 24 possible rotations of a 3d object
ROTATIONS = generate_rotation_matrices()

def apply_rotation(polycube, rotation):
	(a, b, c), (d, e, f), (g, h, i) = rotation
	return Polycube([
		Pos(a*x + b*y + c*z, d*x + e*y + f*z, g*x + h*y + i*z)
		for x, y, z in polycube.cubes])

def all_rotations(polycube):
	return [apply_rotation(polycube, rotation).normalize() for rotation in ROTATIONS]

def encode_positions(positions):
	return ''.join(f'{x},{y},{z};' for x, y, z in positions)

# 8 bytes is plenty to tell shapes apart for the sizes we can generate,
#   but unlike the literal encoding two different shapes could in theory
#   end up with the same value
def hash_signature(encoded):
	return int.from_bytes(hashlib.blake2b(encoded.encode('ascii'), digest_size=8).digest(), 'big')

def canonicalize(polycube, *, mode='signature'):
	if mode not in SIGNATURE_MODES:
		raise ValueError(f'unknown signature mode [{mode}], expected one of {SIGNATURE_MODES}')

	best = None
	for rotated in all_rotations(polycube):
		# sorting compares x, then y, then z for each position, and the
		#   list comparison below walks the positions in order
		candidate = sorted(rotated.cubes)
		if best is None or candidate < best:
			best = candidate

	encoded = encode_positions(best if best is not None else [])
	if mode == 'hash':
		return (Polycube(best or []), hash_signature(encoded))
	return (Polycube(best or []), encoded)

def signature_of(polycube, *, mode='signature'):
	return canonicalize(polycube, mode=mode)[1]
