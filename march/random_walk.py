import logging
import random
import typing

import march.errors
import march.weighted_graph


logger = logging.getLogger(__name__)

OptionType = typing.TypeVar("OptionType")


def choose_weighted (options: typing.Sequence[typing.Tuple[OptionType, int]], rng: random.Random) -> OptionType:

	"""
	Choose one item from a list of weighted options.

	Each option is picked with probability ``weight / total``.  Options are
	scanned in order, so a seeded ``rng`` always picks the same option.

	Raises:
		ValueError: If ``options`` is empty.
		InvariantViolation: If any weight is not positive.  Edge weights are
			counts of observed transitions and start at 1, so this means the
			graph is corrupt - it is never treated as "no options".
	"""

	if not options:
		raise ValueError("Options cannot be empty")

	total_weight = 0

	for option, weight in options:
		if weight <= 0:
			raise march.errors.InvariantViolation(f"Non-positive weight {weight} for option {option!r}")
		total_weight += weight

	roll = rng.randrange(total_weight)
	accum = 0

	for option, weight in options:
		accum += weight
		if roll < accum:
			return option

	raise march.errors.InvariantViolation(f"Roll {roll} fell outside total weight {total_weight}")


class RandomWalk:

	"""
	A weighted random walk over a :class:`~march.weighted_graph.WeightedGraph`.

	The walk holds only its current node and its randomness source; the
	graph is passed to every :meth:`step`, so one graph can serve any number
	of independent walks.
	"""

	def __init__ (self, start: march.weighted_graph.NodeId, rng: typing.Optional[random.Random] = None) -> None:

		"""
		Begin a walk at ``start``.
		"""

		self.current = start
		self.rng = rng or random.Random()


	def step (self, graph: march.weighted_graph.WeightedGraph) -> typing.Optional[march.weighted_graph.NodeId]:

		"""
		Advance to a neighbour chosen proportionally to edge weight.

		Returns the new current node, or ``None`` when the current node has
		no outgoing edges (a dead end - the walk is over and stays put).
		"""

		options = list(graph.edges_from(self.current))

		if not options:
			return None

		self.current = choose_weighted(options, self.rng)

		return self.current


	def iter (self, graph: march.weighted_graph.WeightedGraph) -> typing.Iterator[march.weighted_graph.NodeId]:

		"""
		Yield successive nodes of the walk until a dead end is reached.

		May never finish if the graph cycles without reaching a dead end;
		consumers bound it themselves.
		"""

		steps = 0

		while True:
			node = self.step(graph)

			if node is None:
				logger.debug(f"Walk reached a dead end after {steps} steps")
				return

			steps += 1
			yield node
