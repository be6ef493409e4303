import typing

import pytest

import march.chain


FOX_SENTENCE = "the quick brown fox jumped over the lazy dog"


class FixedRng:

	"""Randomness stub that replays a fixed list of rolls."""

	def __init__ (self, rolls: typing.List[int]) -> None:

		"""Store the rolls to hand out, in order."""

		self.rolls = list(rolls)
		self.calls: typing.List[int] = []

	def randrange (self, stop: int) -> int:

		"""Return the next stored roll, recording the requested range."""

		self.calls.append(stop)
		return self.rolls.pop(0)


@pytest.fixture
def fox_chain () -> march.chain.Chain[str]:

	"""A seeded chain fed the classic pangram once."""

	chain: march.chain.Chain[str] = march.chain.Chain(seed=1)
	chain.feed(FOX_SENTENCE.split())
	return chain


@pytest.fixture
def fixed_rng () -> typing.Type[FixedRng]:

	"""Factory for randomness stubs with predetermined rolls."""

	return FixedRng
