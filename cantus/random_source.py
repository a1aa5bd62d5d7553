import math
import random
import typing


@typing.runtime_checkable
class RandomSource (typing.Protocol):

	"""
	Protocol for uniform random providers used by Choice.
	"""

	def sample (self) -> float:

		"""
		Return a value in the half-open interval [0, 1).
		"""

		...


class SystemRandomSource:

	"""
	A RandomSource backed by ``random.Random``. Pass a seed for repeatable output.
	"""

	def __init__ (self, seed: typing.Optional[int] = None) -> None:

		"""
		Initialize the underlying generator, optionally seeded.
		"""

		self.rng = random.Random(seed)


	def sample (self) -> float:

		"""
		Return the next value from the underlying generator.
		"""

		return self.rng.random()


def choose_index (source: RandomSource, count: int) -> int:

	"""
	Map one sample from a random source uniformly onto ``range(count)``.
	"""

	if count <= 0:
		raise ValueError("Count must be positive")

	index = int(math.floor(source.sample() * count))

	# Guard against sources that return exactly 1.0.
	return min(max(index, 0), count - 1)
