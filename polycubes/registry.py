import zlib

# which shard a signature belongs to -- this has to come out the same in
#   every worker process, so we can't use hash() on strings (it is salted
#   per process unless PYTHONHASHSEED is set)
def shard_index(signature, shards):
	if shards == 1:
		return 0
	if isinstance(signature, int):
		return signature % shards
	return zlib.crc32(signature.encode('ascii')) % shards

class LocalRegistry:

	def __init__(self):
		self.claimed = set()

	def claim(self, signature):
		# insert-if-absent: True means the caller found a new canonical polycube
		if signature in self.claimed:
			return False
		self.claimed.add(signature)
		return True

	def __len__(self):
		return len(self.claimed)

	def __contains__(self, signature):
		return signature in self.claimed

class SharedRegistry:

	# the dicts and locks live in the Manager's server process, and we only
	#   hold proxies to them here, which means this object can be pickled
	#   and handed to every worker in the pool
	def __init__(self, manager, *, shards=1):
		if shards < 1:
			raise ValueError(f'need at least one shard, got {shards}')
		self.claimed = [manager.dict() for _ in range(shards)]
		self.locks = [manager.Lock() for _ in range(shards)]

	@property
	def shards(self):
		return len(self.locks)

	def claim(self, signature):
		i = shard_index(signature, len(self.locks))
		# the membership test and the insert have to happen under the same
		#   lock, otherwise two workers could both see the signature as
		#   missing and both keep a polycube for it
		with self.locks[i]:
			if signature in self.claimed[i]:
				return False
			self.claimed[i][signature] = True
			return True

	def __len__(self):
		return sum(len(claimed) for claimed in self.claimed)

	def __contains__(self, signature):
		return signature in self.claimed[shard_index(signature, len(self.locks))]
