from polycubes.polycube import DisconnectedPolycube
from polycubes.rotation import canonicalize

def expand_polycube(base, registry, *, mode='signature'):
	found = []
	# for each empty position next to a cube, add a cube
	for try_pos in base.expansion_positions():
		# create p+1
		candidate = base.expand(pos=try_pos)

		# the new cube always touches an existing one, so this can only
		#   fail if something upstream is broken
		if not candidate.is_face_connected():
			raise DisconnectedPolycube(f'expanding {base!r} at {tuple(try_pos)} produced a disconnected polycube')

		# canonicalizing is the expensive part and only touches our own
		#   data, so only the claim below has to talk to the other workers
		canonical, signature = canonicalize(candidate, mode=mode)
		if registry.claim(signature):
			found.append(canonical)
	return found
