import dataclasses
import typing


@dataclasses.dataclass(frozen=True)
class ChordProgression:

	"""
	An ordered sequence of chord labels, one per simultaneity window of a phrase.
	"""

	labels: typing.Tuple[str, ...] = ()


	def __post_init__ (self) -> None:

		# Accept any iterable of labels but always store a tuple.
		object.__setattr__(self, "labels", tuple(self.labels))


	def __len__ (self) -> int:

		return len(self.labels)


	def __iter__ (self) -> typing.Iterator[str]:

		return iter(self.labels)


	def __getitem__ (self, index: int) -> str:

		return self.labels[index]


	def __str__ (self) -> str:

		return " - ".join(self.labels)
