"""Load an exported chain from MT (https://mt.ziad87.net) and generate from it.

Usage:
    python examples/mt_loader.py chain.json
"""

import logging
import sys
import time

import march.mt

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main () -> None:

	if len(sys.argv) != 2:
		print("Usage: mt_loader.py [chain.json]")
		sys.exit(1)

	chain = march.mt.load_mt_chain(sys.argv[1])

	started = time.perf_counter()
	words = chain.generate()
	elapsed_ms = (time.perf_counter() - started) * 1000.0

	print(" ".join(words))
	logger.info(f"Generated in {elapsed_ms:.2f} ms")


if __name__ == "__main__":
	main()
