from polycubes.counter import CounterConfig, count_polycubes
from polycubes.generator import generate_polycubes
from polycubes.known_counts import get_known_count
from polycubes.polycube import DisconnectedPolycube, Polycube, Pos
from polycubes.rotation import canonicalize

__version__ = '0.1.0'
