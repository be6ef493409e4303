import typing

import march.item


NodeId = typing.NewType("NodeId", int)


class WeightedGraph:

	"""
	A directed graph of items with integer transition counts on its edges.

	Nodes live in an arena and are addressed by the :data:`NodeId` handed out
	by :meth:`add_node`.  Each node keeps its outgoing edges in an
	insertion-ordered ``target -> weight`` dict, so listing a node's
	transitions costs only its out-degree.
	"""

	def __init__ (self) -> None:

		"""
		Initialize an empty weighted graph.
		"""

		self._items: typing.List[march.item.Item] = []
		self._edges: typing.List[typing.Dict[NodeId, int]] = []


	def __len__ (self) -> int:

		return len(self._items)


	def _check_node (self, node: NodeId) -> None:

		if not 0 <= node < len(self._items):
			raise KeyError(f"Unknown node id: {node}")


	def add_node (self, item: march.item.Item) -> NodeId:

		"""
		Append a node holding ``item`` and return its id.

		No deduplication happens here - adding an equal item twice creates
		two nodes.
		"""

		node = NodeId(len(self._items))

		self._items.append(item)
		self._edges.append({})

		return node


	def add_transition (self, source: NodeId, target: NodeId, weight: int) -> None:

		"""
		Add a weighted transition between two nodes.
		"""

		if weight <= 0:
			raise ValueError("Weight must be positive")

		self._check_node(source)
		self._check_node(target)

		edges = self._edges[source]

		# If a transition already exists, accumulate to strengthen the edge.
		if target in edges:
			edges[target] += weight

		else:
			edges[target] = weight


	def bump_edge (self, source: NodeId, target: NodeId) -> None:

		"""
		Record one observed transition from ``source`` to ``target``.
		"""

		self.add_transition(source, target, 1)


	def edges_from (self, source: NodeId) -> typing.Iterator[typing.Tuple[NodeId, int]]:

		"""
		Yield ``(target, weight)`` for each outgoing edge, in insertion order.
		"""

		self._check_node(source)

		# Snapshot: callers may bump edges while iterating.
		return iter(list(self._edges[source].items()))


	def get_weight (self, source: NodeId, target: NodeId) -> int:

		"""
		Return the weight of ``source -> target``, or 0 when there is no edge.
		"""

		self._check_node(source)
		self._check_node(target)

		return self._edges[source].get(target, 0)


	def get_item (self, node: NodeId) -> march.item.Item:

		"""
		Return the item stored on a node.
		"""

		self._check_node(node)

		return self._items[node]


	def out_degree (self, node: NodeId) -> int:

		"""Return the number of distinct outgoing edges of a node."""

		self._check_node(node)

		return len(self._edges[node])


	def nodes (self) -> typing.Iterator[NodeId]:

		"""Yield every node id in creation order."""

		return (NodeId(index) for index in range(len(self._items)))


	def edge_count (self) -> int:

		"""Return the number of distinct edges in the graph."""

		return sum(len(edges) for edges in self._edges)
