"""Chain items - the payload stored on every graph node.

An :class:`Item` is one of three kinds:

- ``"start"`` - the sentinel every walk begins from (:data:`START`).
- ``"end"`` - the sentinel that terminates a walk (:data:`END`).
- ``"data"`` - a user value, built with :meth:`Item.data`.

Items compare and hash by ``(kind, value)``, so two data items are equal
exactly when their values are, and the sentinels never collide with data -
not even with ``Item.data(None)``.
"""

import dataclasses
import typing


KIND_START = "start"
KIND_END = "end"
KIND_DATA = "data"

ITEM_KINDS = (KIND_START, KIND_END, KIND_DATA)

ValueType = typing.TypeVar("ValueType", bound=typing.Hashable)


@dataclasses.dataclass(frozen=True)
class Item (typing.Generic[ValueType]):

	"""
	A start marker, an end marker, or a wrapped user value.
	"""

	kind: str
	value: typing.Optional[ValueType] = None


	def __post_init__ (self) -> None:

		if self.kind not in ITEM_KINDS:
			raise ValueError(f"Unknown item kind: {self.kind!r}")

		if self.kind != KIND_DATA and self.value is not None:
			raise ValueError(f"A {self.kind} item cannot carry a value")


	@classmethod
	def data (cls, value: ValueType) -> "Item[ValueType]":

		"""Wrap a user value."""

		return cls(KIND_DATA, value)


	@property
	def is_start (self) -> bool:

		"""Return True for the start sentinel."""

		return self.kind == KIND_START

	@property
	def is_end (self) -> bool:

		"""Return True for the end sentinel."""

		return self.kind == KIND_END

	@property
	def is_data (self) -> bool:

		"""Return True for a wrapped user value."""

		return self.kind == KIND_DATA


	def __repr__ (self) -> str:

		if self.kind == KIND_DATA:
			return f"Item.data({self.value!r})"

		return f"Item({self.kind!r})"


START: Item = Item(KIND_START)
END: Item = Item(KIND_END)
