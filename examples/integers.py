"""Items need not be words - any hashable value works.

Two sequences of small integers share the values 2 and 3, so the chain can
cross from one sequence into the other.  A fixed seed makes the output
repeatable.
"""

import logging

import march

logging.basicConfig(level=logging.DEBUG)

chain: march.Chain[int] = march.Chain(seed=7)
chain.feed([1, 2, 3, 5]).feed([3, 9, 2])

print(chain.generate())
