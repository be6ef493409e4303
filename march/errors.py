"""Exception types raised by march."""


class MarchError(Exception):

	"""Base class for errors raised by march."""


class InvariantViolation(MarchError, RuntimeError):

	"""
	An internal invariant of the chain was broken.

	Raised when sampling meets an edge set whose weights cannot form a
	distribution, or when a walk steps back onto the Start node.  These
	conditions cannot arise through ``feed()`` alone; they indicate a graph
	wired incorrectly through ``bump_edge()`` or a bug.
	"""


class ChainFormatError(MarchError, ValueError):

	"""Exported chain data could not be understood."""
