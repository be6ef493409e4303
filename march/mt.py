"""Load Markov chains exported by the MT chat bot (https://mt.ziad87.net).

An MT export is a JSON object with two keys::

	{
		"starter": ["the", "a"],
		"chains": {"the": ["cat", "dog", true], "cat": [true]}
	}

``starter`` lists words that may open a sentence.  ``chains`` maps each word
to the words observed after it, where ``true`` marks the end of a sentence.
Duplicate entries count as repeated observations.
"""

import json
import logging
import random
import time
import typing

import march.chain
import march.errors


logger = logging.getLogger(__name__)


def build_mt_chain (
	data: typing.Any,
	rng: typing.Optional[random.Random] = None,
	seed: typing.Optional[int] = None
) -> "march.chain.Chain[str]":

	"""Replay an MT transition table into a new chain.

	Parameters:
		data: The decoded JSON document.
		rng: Randomness source for the new chain.
		seed: Seed for the new chain when ``rng`` is omitted.

	Raises:
		ChainFormatError: If the document does not have the MT shape.
	"""

	if not isinstance(data, dict):
		raise march.errors.ChainFormatError("MT export must be a JSON object")

	starter = data.get("starter")
	chains = data.get("chains")

	if not isinstance(starter, list):
		raise march.errors.ChainFormatError("MT export needs a 'starter' list")

	if not isinstance(chains, dict):
		raise march.errors.ChainFormatError("MT export needs a 'chains' object")

	chain: march.chain.Chain[str] = march.chain.Chain(rng=rng, seed=seed)

	for word in starter:

		if not isinstance(word, str):
			raise march.errors.ChainFormatError(f"Starter entries must be strings, got {word!r}")

		chain.bump_edge(chain.start, chain.ensure_node(word))

	for key, targets in chains.items():

		if not isinstance(targets, list):
			raise march.errors.ChainFormatError(f"Transitions for {key!r} must be a list")

		key_node = chain.ensure_node(key)

		for target in targets:

			# JSON true is the only valid non-string target.
			if target is True:
				target_node = chain.end

			elif isinstance(target, str):
				target_node = chain.ensure_node(target)

			else:
				raise march.errors.ChainFormatError(f"Invalid transition target {target!r} for {key!r}")

			chain.bump_edge(key_node, target_node)

	return chain


def load_mt_chain (
	path: str,
	rng: typing.Optional[random.Random] = None,
	seed: typing.Optional[int] = None
) -> "march.chain.Chain[str]":

	"""Read an MT export file and build a chain from it."""

	started = time.perf_counter()

	with open(path, "r", encoding="utf-8") as f:
		try:
			data = json.load(f)
		except json.JSONDecodeError as e:
			raise march.errors.ChainFormatError(f"{path} is not valid JSON: {e}") from e
		except UnicodeDecodeError as e:
			raise march.errors.ChainFormatError(f"{path} is not valid UTF-8: {e}") from e

	chain = build_mt_chain(data, rng=rng, seed=seed)

	elapsed_ms = (time.perf_counter() - started) * 1000.0
	logger.info(f"Chain loaded from {path} in {elapsed_ms:.2f} ms ({len(chain)} words)")

	return chain
