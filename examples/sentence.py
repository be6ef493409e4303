"""Generate a sentence from a single training sentence."""

import logging

import march

logging.basicConfig(level=logging.INFO)

chain = march.Chain()

sentence = "The quick brown fox jumped over the lazy dog".lower()
chain.feed(sentence.split())

print(" ".join(chain.generate()))
