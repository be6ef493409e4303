"""First-order Markov chain over arbitrary hashable items.

:class:`Chain` builds a :class:`~march.weighted_graph.WeightedGraph` from
training sequences and samples new sequences from it:

- **Ingestion.** ``feed()`` threads each sequence from the Start node,
  through one node per distinct item, to the End node, adding 1 to the
  weight of every transition it passes.  Repeated items share a node and
  repeated transitions share an edge, so common paths grow heavier.
- **Generation.** ``generate()`` and ``generate_iter()`` run a weighted
  :class:`~march.random_walk.RandomWalk` from Start and return the data
  values visited until End (or a dead end) is reached.

Example:
	```python
	import march

	chain = march.Chain(seed=1)
	chain.feed("the quick brown fox jumped over the lazy dog".split())

	print(" ".join(chain.generate()))
	```
"""

import logging
import random
import typing

import march.errors
import march.item
import march.random_walk
import march.weighted_graph


logger = logging.getLogger(__name__)

ValueType = typing.TypeVar("ValueType", bound=typing.Hashable)
NodeId = march.weighted_graph.NodeId


class Chain (typing.Generic[ValueType]):

	"""A Markov chain with sentinel start and end nodes."""

	def __init__ (self, rng: typing.Optional[random.Random] = None, seed: typing.Optional[int] = None) -> None:

		"""Create an empty chain.

		Parameters:
			rng: Randomness source used by generation when no per-call
				``rng`` is given.
			seed: Seed for a new ``random.Random`` when ``rng`` is omitted.
				Two chains fed the same data with the same seed generate the
				same sequences.

		Raises:
			ValueError: If both ``rng`` and ``seed`` are given.
		"""

		if rng is not None and seed is not None:
			raise ValueError("Pass either rng or seed, not both")

		self._graph = march.weighted_graph.WeightedGraph()
		self._start = self._graph.add_node(march.item.START)
		self._end = self._graph.add_node(march.item.END)

		# Data item -> node.  Sentinels are never indexed.
		self._index: typing.Dict[march.item.Item, NodeId] = {}

		self.rng = rng if rng is not None else random.Random(seed)


	@property
	def graph (self) -> march.weighted_graph.WeightedGraph:

		"""The underlying transition graph."""

		return self._graph

	@property
	def start (self) -> NodeId:

		"""The start sentinel's node id."""

		return self._start

	@property
	def end (self) -> NodeId:

		"""The end sentinel's node id."""

		return self._end


	def __len__ (self) -> int:

		return len(self._index)

	def __contains__ (self, value: object) -> bool:

		return march.item.Item.data(value) in self._index


	def ensure_node (self, value: ValueType) -> NodeId:

		"""Return the node holding ``value``, creating it on first sight."""

		item = march.item.Item.data(value)
		node = self._index.get(item)

		if node is None:
			node = self._graph.add_node(item)
			self._index[item] = node

		return node


	def bump_edge (self, source: NodeId, target: NodeId) -> None:

		"""Add one observed transition from ``source`` to ``target``."""

		self._graph.bump_edge(source, target)


	def edges_from (self, node: NodeId) -> typing.Iterator[typing.Tuple[NodeId, int]]:

		"""Yield ``(target, weight)`` for a node's outgoing edges."""

		return self._graph.edges_from(node)


	def get_item (self, node: NodeId) -> march.item.Item:

		"""Return the item stored on a node."""

		return self._graph.get_item(node)


	def get_weight (self, source: NodeId, target: NodeId) -> int:

		"""Return the weight of ``source -> target`` (0 if never observed)."""

		return self._graph.get_weight(source, target)


	def feed (self, values: typing.Iterable[ValueType]) -> "Chain[ValueType]":

		"""Train the chain on one sequence of values.

		Each consecutive pair of values (plus Start before the first and End
		after the last) adds 1 to its edge weight.  An empty sequence changes
		nothing.  Returns the chain, so calls can be chained::

			chain.feed([1, 2, 3, 5]).feed([3, 9, 2])
		"""

		previous = self._start
		count = 0

		for value in values:
			node = self.ensure_node(value)
			self._graph.bump_edge(previous, node)
			previous = node
			count += 1

		if count:
			self._graph.bump_edge(previous, self._end)

		logger.debug(f"Fed {count} items; chain now has {len(self._index)} data nodes")

		return self


	def walker (self, rng: typing.Optional[random.Random] = None) -> march.random_walk.RandomWalk:

		"""Return a new random walk positioned at the start node."""

		return march.random_walk.RandomWalk(self._start, rng or self.rng)


	def generate_iter (self, rng: typing.Optional[random.Random] = None) -> typing.Iterator[ValueType]:

		"""Lazily sample one sequence from the chain.

		Values are produced one walk step at a time.  The iterator ends when
		the walk reaches End or a node with no outgoing edges.  Cyclic graphs
		can produce arbitrarily long sequences - bound them with
		``itertools.islice``.  Abandoning the iterator early needs no cleanup.

		Raises:
			InvariantViolation: If the walk steps onto the Start node.
		"""

		walk = self.walker(rng)

		for node in walk.iter(self._graph):
			item = self._graph.get_item(node)

			if item.is_data:
				yield typing.cast(ValueType, item.value)

			elif item.is_end:
				return

			else:
				raise march.errors.InvariantViolation(f"Walk re-entered the start node via an edge into node {node}")


	def generate (self, rng: typing.Optional[random.Random] = None) -> typing.List[ValueType]:

		"""Sample one complete sequence from the chain.

		An unfed chain returns an empty list.
		"""

		values = list(self.generate_iter(rng))

		logger.debug(f"Generated {len(values)} items")

		return values
