from collections import deque, namedtuple

# a single cube position in the polycube
Pos = namedtuple('Pos', ['x', 'y', 'z'])

# minus x, plus x, minus y, plus y, minus z, plus z
directions = [(-1, 0, 0), (1, 0, 0), (0, -1, 0), (0, 1, 0), (0, 0, -1), (0, 0, 1)]

class DisconnectedPolycube(Exception):
	pass

def adjacent_positions(pos):
	x, y, z = pos
	return [Pos(x + dx, y + dy, z + dz) for dx, dy, dz in directions]

def is_face_connected(positions):
	# works on any sequence of (x, y, z) tuples so the counter can share it
	if len(positions) <= 1:
		return True
	occupied = set(positions)
	start = positions[0]
	visited = {start}
	queue = deque([start])
	while queue:
		x, y, z = queue.popleft()
		for dx, dy, dz in directions:
			neighbor = (x + dx, y + dy, z + dz)
			if neighbor in occupied and neighbor not in visited:
				visited.add(neighbor)
				queue.append(neighbor)
	return len(visited) == len(occupied)

class Polycube:

	def __init__(self, cubes=()):
		# positions of cubes in this polycube, in the order they were added
		self.cubes = [Pos(*pos) for pos in cubes]
		# number of cubes in this polycube
		self.n = len(self.cubes)

	@classmethod
	def unit_cube(cls):
		return cls([Pos(0, 0, 0)])

	@classmethod
	def domino(cls):
		return cls([Pos(0, 0, 0), Pos(1, 0, 0)])

	def copy(self):
		return Polycube(self.cubes)

	def __len__(self):
		return self.n

	def __iter__(self):
		return iter(self.cubes)

	def __eq__(self, other):
		if not isinstance(other, Polycube):
			return NotImplemented
		return self.cubes == other.cubes

	def __hash__(self):
		return hash(tuple(self.cubes))

	def __repr__(self):
		return f'Polycube({[tuple(pos) for pos in self.cubes]})'

	# every empty position that touches at least one of our cubes
	def expansion_positions(self):
		occupied = set(self.cubes)
		frontier = set()
		for cube_pos in self.cubes:
			for try_pos in adjacent_positions(cube_pos):
				if try_pos not in occupied:
					frontier.add(try_pos)
		return frontier

	def expand(self, *, pos):
		pos = Pos(*pos)
		if pos in self.cubes:
			raise ValueError(f'position {tuple(pos)} is already part of the polycube')
		return Polycube(self.cubes + [pos])

	def normalize(self):
		if not self.cubes:
			return self.copy()
		min_x = min(pos.x for pos in self.cubes)
		min_y = min(pos.y for pos in self.cubes)
		min_z = min(pos.z for pos in self.cubes)
		return Polycube([Pos(x - min_x, y - min_y, z - min_z) for x, y, z in self.cubes])

	def is_normalized(self):
		if not self.cubes:
			return True
		return all(min(axis) == 0 for axis in zip(*self.cubes))

	def is_face_connected(self):
		return is_face_connected(self.cubes)

	# bounding box size along x, y and z
	def dimensions(self):
		if not self.cubes:
			return (0, 0, 0)
		return tuple(max(axis) - min(axis) + 1 for axis in zip(*self.cubes))

	def to_list(self):
		return [list(pos) for pos in self.cubes]

	@classmethod
	def from_list(cls, cubes):
		positions = []
		for pos in cubes:
			if len(pos) != 3 or not all(isinstance(v, int) and not isinstance(v, bool) for v in pos):
				raise ValueError(f'not a cube position: {pos!r}')
			positions.append(Pos(*pos))
		if len(set(positions)) != len(positions):
			raise ValueError('duplicate cube positions')
		return cls(positions)
