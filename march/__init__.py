"""
march - a first-order Markov chain for any hashable items.

Feed it sequences of words, bytes, tokens or any other hashable values and
it learns how often each item follows another.  Ask it to generate and it
walks those transitions at random, weighted by how often they were seen,
from an implicit start marker to an implicit end marker.

- **Generic items.** Anything hashable works; text is only one use.
- **Incremental training.** ``feed()`` can be called any number of times;
  shared items and transitions accumulate weight.
- **Eager or lazy output.** ``generate()`` returns a list,
  ``generate_iter()`` yields values one at a time so long walks can be cut
  short with ``itertools.islice``.
- **Repeatable.** Pass ``seed=`` (or your own ``random.Random``) for
  deterministic output.
- **Importable tables.** ``ensure_node()`` and ``bump_edge()`` let loaders
  replay an existing transition table - see :mod:`march.mt`.

Minimal example:

    ```python
    import march

    chain = march.Chain(seed=42)
    chain.feed("the quick brown fox jumped over the lazy dog".split())

    print(" ".join(chain.generate()))
    ```

Package-level exports: ``Chain``, ``Item``, ``START``, ``END``,
``RandomWalk``, ``MarchError``, ``InvariantViolation``, ``ChainFormatError``.
"""

import march.chain
import march.errors
import march.item
import march.random_walk


Chain = march.chain.Chain
Item = march.item.Item
START = march.item.START
END = march.item.END
RandomWalk = march.random_walk.RandomWalk
MarchError = march.errors.MarchError
InvariantViolation = march.errors.InvariantViolation
ChainFormatError = march.errors.ChainFormatError
