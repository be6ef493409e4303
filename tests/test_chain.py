import itertools
import random

import pytest

import march
import march.chain
import march.errors


FOX_WORDS = "the quick brown fox jumped over the lazy dog".split()


def _structure (chain: march.chain.Chain) -> set:

	"""Return every edge of the chain as (source item, target item, weight)."""

	return {
		(chain.get_item(source), chain.get_item(target), weight)
		for source in chain.graph.nodes()
		for target, weight in chain.edges_from(source)
	}


# --- Ingestion ---


def test_new_chain_has_only_sentinels () -> None:

	"""A fresh chain holds Start and End and nothing else."""

	chain = march.Chain()

	assert len(chain.graph) == 2
	assert len(chain) == 0
	assert chain.graph.edge_count() == 0
	assert chain.get_item(chain.start) == march.START
	assert chain.get_item(chain.end) == march.END


def test_ensure_node_is_idempotent () -> None:

	"""Equal values map to one node, created once."""

	chain = march.Chain()

	first = chain.ensure_node("x")
	second = chain.ensure_node("x")

	assert first == second
	assert len(chain) == 1
	assert len(chain.graph) == 3
	assert chain.get_item(first) == march.Item.data("x")


def test_ensure_node_does_not_touch_edges () -> None:

	"""Looking up an existing value leaves the graph unchanged."""

	chain = march.Chain()
	chain.feed(["a", "b"])
	edges_before = _structure(chain)

	chain.ensure_node("a")

	assert _structure(chain) == edges_before


def test_feed_threads_start_to_end () -> None:

	"""Feeding a sequence links Start, each item in order, then End."""

	chain = march.Chain()
	chain.feed(["a", "b", "c"])

	a = chain.ensure_node("a")
	b = chain.ensure_node("b")
	c = chain.ensure_node("c")

	assert list(chain.edges_from(chain.start)) == [(a, 1)]
	assert list(chain.edges_from(a)) == [(b, 1)]
	assert list(chain.edges_from(b)) == [(c, 1)]
	assert list(chain.edges_from(c)) == [(chain.end, 1)]
	assert list(chain.edges_from(chain.end)) == []


def test_feed_empty_sequence_is_a_no_op () -> None:

	"""An empty sequence adds no nodes and no Start -> End edge."""

	chain = march.Chain()
	chain.feed(["a"])
	nodes_before = len(chain.graph)
	edges_before = _structure(chain)

	chain.feed([])

	assert len(chain.graph) == nodes_before
	assert _structure(chain) == edges_before
	assert chain.get_weight(chain.start, chain.end) == 0


def test_feed_single_item_has_no_self_loop () -> None:

	"""One item yields Start -> item -> End and nothing else."""

	chain = march.Chain()
	chain.feed(["solo"])
	node = chain.ensure_node("solo")

	assert chain.get_weight(chain.start, node) == 1
	assert chain.get_weight(node, chain.end) == 1
	assert chain.get_weight(node, node) == 0
	assert chain.graph.edge_count() == 2


def test_feed_accumulates_weight () -> None:

	"""Feeding the same pair N times gives weight N on every edge of the path."""

	chain = march.Chain()

	for _ in range(5):
		chain.feed(["x", "y"])

	x = chain.ensure_node("x")
	y = chain.ensure_node("y")

	assert chain.get_weight(chain.start, x) == 5
	assert chain.get_weight(x, y) == 5
	assert chain.get_weight(y, chain.end) == 5
	assert len(chain) == 2


def test_feed_shares_nodes_across_calls () -> None:

	"""Overlapping items in separate feeds reuse nodes and reinforce edges."""

	chain = march.Chain()
	chain.feed([1, 2, 3, 5]).feed([3, 9, 2])

	assert len(chain) == 5

	two = chain.ensure_node(2)
	three = chain.ensure_node(3)

	assert chain.get_weight(two, three) == 1
	assert chain.get_weight(chain.ensure_node(9), two) == 1
	assert chain.get_weight(two, chain.end) == 1
	assert chain.get_weight(chain.start, three) == 1


def test_feed_returns_chain () -> None:

	"""feed() returns the chain it was called on."""

	chain = march.Chain()

	assert chain.feed(["a"]) is chain


def test_feed_accepts_any_iterable () -> None:

	"""Generators and bytes are valid input sequences."""

	chain = march.Chain()
	chain.feed(word for word in ["a", "b"])
	chain.feed(b"ab")

	assert "a" in chain
	assert ord("a") in chain
	assert len(chain) == 4


def test_structure_is_independent_of_randomness () -> None:

	"""Edge weights depend only on what was fed, never on the seed."""

	sequences = [FOX_WORDS, ["the", "dog"], [], ["over", "the", "fox"]]

	first = march.Chain(seed=1)
	second = march.Chain(seed=999)

	for sequence in sequences:
		first.feed(sequence)
		second.feed(sequence)

	first.generate()

	assert _structure(first) == _structure(second)


def test_fox_sentence_structure (fox_chain) -> None:

	"""'the' branches to 'quick' and 'lazy' with weight 1 each."""

	the = fox_chain.ensure_node("the")
	quick = fox_chain.ensure_node("quick")
	lazy = fox_chain.ensure_node("lazy")

	assert len(fox_chain) == 8
	assert fox_chain.graph.out_degree(the) == 2
	assert list(fox_chain.edges_from(the)) == [(quick, 1), (lazy, 1)]
	assert fox_chain.get_weight(fox_chain.ensure_node("over"), the) == 1
	assert fox_chain.graph.edge_count() == 10


# --- Generation ---


def test_unfed_chain_generates_nothing () -> None:

	"""With no outgoing edges from Start, generation is empty, not an error."""

	chain = march.Chain(seed=3)

	assert chain.generate() == []
	assert list(chain.generate_iter()) == []


def test_single_token_round_trip () -> None:

	"""A chain fed one token can only ever produce that token."""

	chain = march.Chain()
	chain.feed(["a"])

	for seed in range(25):
		assert chain.generate(rng=random.Random(seed)) == ["a"]


def test_fox_generation_ends_at_dog (fox_chain) -> None:

	"""Every walk starts at 'the', ends at 'dog' and uses known words."""

	for _ in range(20):
		words = fox_chain.generate()

		assert words[0] == "the"
		assert words[-1] == "dog"
		assert set(words) <= set(FOX_WORDS)


def test_seeded_generation_is_repeatable (fox_chain) -> None:

	"""The same seed over the same graph gives the same sequence."""

	first = fox_chain.generate(rng=random.Random(42))
	second = fox_chain.generate(rng=random.Random(42))

	assert first == second


def test_chains_with_same_seed_agree () -> None:

	"""Two chains built identically with the same seed generate identically."""

	a = march.Chain(seed=5).feed(FOX_WORDS)
	b = march.Chain(seed=5).feed(FOX_WORDS)

	assert [a.generate() for _ in range(10)] == [b.generate() for _ in range(10)]


def test_generate_iter_matches_generate () -> None:

	"""The lazy and eager forms follow the same walk for the same rolls."""

	chain = march.Chain().feed(FOX_WORDS).feed(["the", "fox", "slept"])

	assert list(chain.generate_iter(rng=random.Random(8))) == chain.generate(rng=random.Random(8))


def test_generate_iter_is_bounded_by_islice () -> None:

	"""Taking k items from an endless cycle yields exactly k items."""

	chain = march.Chain()
	loop = chain.ensure_node("loop")
	chain.bump_edge(chain.start, loop)

	chain.bump_edge(loop, loop)

	taken = list(itertools.islice(chain.generate_iter(rng=random.Random(0)), 7))

	assert taken == ["loop"] * 7


def test_generate_iter_never_exceeds_k (fox_chain) -> None:

	"""islice never yields more than requested."""

	for k in range(5):
		assert len(list(itertools.islice(fox_chain.generate_iter(), k))) <= k


def test_generate_iter_is_independent_per_call (fox_chain) -> None:

	"""Each call starts its own walk from Start."""

	first = fox_chain.generate_iter()
	second = fox_chain.generate_iter()

	assert next(first) == "the"
	assert next(second) == "the"


def test_dead_end_stops_generation () -> None:

	"""A node with no way out ends the sequence early without error."""

	chain = march.Chain()
	a = chain.ensure_node("a")
	b = chain.ensure_node("b")
	chain.bump_edge(chain.start, a)
	chain.bump_edge(a, b)

	assert chain.generate() == ["a", "b"]
	assert list(chain.generate_iter()) == ["a", "b"]


def test_start_reentry_is_an_invariant_violation () -> None:

	"""An edge back into Start surfaces as an error when walked."""

	chain = march.Chain()
	a = chain.ensure_node("a")
	chain.bump_edge(chain.start, a)
	chain.bump_edge(a, chain.start)

	with pytest.raises(march.errors.InvariantViolation):
		chain.generate()

	words = chain.generate_iter()

	assert next(words) == "a"

	with pytest.raises(march.InvariantViolation):
		next(words)


def test_generation_does_not_mutate_graph (fox_chain) -> None:

	"""Walking the chain leaves nodes and weights untouched."""

	before = _structure(fox_chain)

	for _ in range(10):
		fox_chain.generate()

	assert _structure(fox_chain) == before


def test_walker_starts_at_start (fox_chain) -> None:

	"""walker() positions a new walk on the start node."""

	walk = fox_chain.walker(random.Random(1))

	assert walk.current == fox_chain.start
	assert walk.step(fox_chain.graph) == fox_chain.ensure_node("the")


def test_generic_items () -> None:

	"""Tuples, ints and None all work as items."""

	chain = march.Chain(seed=2)
	chain.feed([(0, 0), None, 7])

	assert chain.generate() == [(0, 0), None, 7]


def test_rng_and_seed_together_raise () -> None:

	"""A chain takes either an rng or a seed, never both."""

	with pytest.raises(ValueError, match="not both"):
		march.Chain(rng=random.Random(1), seed=1)


def test_explicit_rng_is_used () -> None:

	"""A supplied rng becomes the chain's randomness source."""

	rng = random.Random(3)
	chain = march.Chain(rng=rng)

	assert chain.rng is rng
