"""Take at most ten words from a lazily generated sentence.

The training sentence loops back on itself ("over the"), so a walk can in
principle run for a long time.  ``itertools.islice`` caps it.
"""

import itertools
import logging

import march

logging.basicConfig(level=logging.INFO)

MAX_WORDS = 10

chain = march.Chain()

sentence = "The quick brown fox jumped over the lazy dog".lower()
chain.feed(sentence.split())

for word in itertools.islice(chain.generate_iter(), MAX_WORDS):
	print(word, end=" ")

print()
