"""Generate sentences from text files or an MT export.

Usage::

    python -m march corpus.txt
    python -m march corpus.txt more.txt --seed 7 --count 5 --max-items 20
    python -m march --mt chain.json

Each non-blank line of a text file is one training sentence.  Defaults for
generation are read from ``march.yaml`` (see :func:`load_config`); flags on
the command line win.
"""

import argparse
import itertools
import logging
import os
import sys
import time
import typing

import yaml

import march.chain
import march.errors
import march.mt


logger = logging.getLogger(__name__)


def load_config (config_path: str = 'march.yaml') -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		config = yaml.safe_load(f) or {}

	if not isinstance(config, dict):
		logger.warning(f"Config file {config_path} does not hold a mapping. Using defaults.")
		return {}

	return config


def read_sentences (path: str, lowercase: bool = True) -> typing.Iterator[typing.List[str]]:

	"""Yield each non-blank line of a text file as a list of words."""

	with open(path, 'r', encoding='utf-8') as f:
		for line in f:
			if lowercase:
				line = line.lower()

			words = line.split()

			if words:
				yield words


def _build_parser () -> argparse.ArgumentParser:

	parser = argparse.ArgumentParser(prog="march", description="Generate text from a first-order Markov chain")
	parser.add_argument("texts", nargs="*", metavar="TEXT", help="Text files to train on, one sentence per line")
	parser.add_argument("--mt", metavar="FILE", help="Load an MT chain export (JSON) instead of training on text")
	parser.add_argument("--config", default="march.yaml", help="YAML config file (default: march.yaml)")
	parser.add_argument("--seed", type=int, default=None, help="Random seed for repeatable output")
	parser.add_argument("--count", type=int, default=None, help="Number of sentences to generate (default: 1)")
	parser.add_argument("--max-items", type=int, default=None, help="Stop each sentence after this many words")
	parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

	return parser


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Main entry point for the march command-line tool.
	"""

	parser = _build_parser()
	args = parser.parse_args(argv)

	if args.texts and args.mt:
		parser.error("give either text files or --mt, not both")

	if not args.texts and not args.mt:
		parser.error("nothing to train on: give text files or --mt")

	logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

	config = load_config(args.config)
	generation = config.get('generation') or {}
	text = config.get('text') or {}

	seed = args.seed if args.seed is not None else generation.get('seed')
	count = args.count if args.count is not None else generation.get('count')
	max_items = args.max_items if args.max_items is not None else generation.get('max_items')

	# A null in the config means "use the default".
	if count is None:
		count = 1

	if count < 0:
		parser.error(f"count must not be negative, got {count}")

	if max_items is not None and max_items < 0:
		parser.error(f"max-items must not be negative, got {max_items}")

	lowercase = text.get('lowercase', True)

	try:
		if args.mt:
			chain = march.mt.load_mt_chain(args.mt, seed=seed)

		else:
			chain = march.chain.Chain(seed=seed)
			started = time.perf_counter()

			for path in args.texts:
				for words in read_sentences(path, lowercase=lowercase):
					chain.feed(words)

			elapsed_ms = (time.perf_counter() - started) * 1000.0
			logger.info(f"Chain trained in {elapsed_ms:.2f} ms ({len(chain)} words)")

	except (march.errors.MarchError, OSError, UnicodeDecodeError) as e:
		logger.error(f"Could not build chain: {e}")
		return 1

	started = time.perf_counter()

	for _ in range(count):

		if max_items is None:
			words = chain.generate()

		else:
			words = list(itertools.islice(chain.generate_iter(), max_items))

		print(" ".join(words))

	elapsed_ms = (time.perf_counter() - started) * 1000.0
	logger.info(f"Generated {count} sentences in {elapsed_ms:.2f} ms")

	return 0


if __name__ == "__main__":
	sys.exit(main())
