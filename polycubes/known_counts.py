# from https://oeis.org/A000162
# these are the number of unique polycubes of size n (up to rotation,
#   mirror images are counted separately), which is kind of funny to
#   put in a program that calculates these values -- but these are
#   needed to check what the generator and the counter come up with
well_known_n_counts = [
	0,
	1,
	1,
	2,
	8,
	29,
	166,
	1023,
	6922,
	48311,
	346543,
	2522522,
	18598427,
	138462649,
	1039496297,
	7859514470,
	59795121480,
	457409613979,
	3516009200564,
]

def get_known_count(n):
	# no entry just means there is no reference value to compare against
	if n < 1 or n >= len(well_known_n_counts):
		return None
	return well_known_n_counts[n]
