"""Chord analysis boundary.

Snippets and the segmenter never analyse harmony themselves. They ask a
:class:`ChordOracle` four questions:

- which chords fit a multiset of pitch classes, with weights
- which scale goes with a chord
- which pitch classes are the chord's own tones
- how many semitones separate two chords

Anything that implements these four methods can be passed in (tests use
small fakes). :class:`TemplateChordOracle` is the default: it scores every
root and quality in :data:`motivic.chords.CHORD_INTERVALS` against the
observed pitch classes.

Chord names use the :meth:`motivic.chords.Chord.name` format (``"C"``,
``"Am"``, ``"G7"``, ``"F#dim"``).
"""

import collections
import dataclasses
import logging
import typing

import motivic.chords
import motivic.intervals


logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class ChordCandidate:

	"""
	A chord name and how well it fits an observed set of pitch classes.
	"""

	name: str
	weight: float


	def __str__ (self) -> str:

		return f"{self.name}: {self.weight:g}"


class ChordOracle (typing.Protocol):

	"""
	The chord-analysis capability consumed by snippets and the segmenter.
	"""

	def candidate_chords (self, pitch_classes: typing.Sequence[int]) -> typing.List[ChordCandidate]:

		"""
		Return weighted chord candidates, best first; empty when nothing fits.
		"""

		...


	def scale_for (self, chord: str) -> typing.Optional[typing.List[int]]:

		"""
		Return the pitch classes of the scale that goes with ``chord``.
		"""

		...


	def chord_tones_for (self, chord: str) -> typing.Optional[typing.List[int]]:

		"""
		Return the pitch classes of the chord's own tones.
		"""

		...


	def offset_between (self, chord_a: str, chord_b: str) -> typing.Optional[int]:

		"""
		Return the semitones that transpose ``chord_b`` onto ``chord_a``.
		"""

		...


class TemplateChordOracle:

	"""
	Template-matching chord oracle built on the package's chord quality table.
	"""

	# Weight multiplier for a chord whose root does not sound.
	ROOT_ABSENT_FACTOR = 0.75


	def __init__ (self, max_candidates: int = 8) -> None:

		"""Initialise the oracle.

		Parameters:
			max_candidates: How many of the best candidates to return from
				:meth:`candidate_chords`.
		"""

		if max_candidates <= 0:
			raise ValueError("max_candidates must be positive")

		self.max_candidates = max_candidates


	def candidate_chords (self, pitch_classes: typing.Sequence[int]) -> typing.List[ChordCandidate]:

		"""Score every root and quality against a pitch-class multiset.

		A chord's weight is the share of sounding notes it explains times the
		share of its own tones that sound, reduced when its root is missing.
		Equal weights keep root order (C first) then quality order.

		Example:
			```python
			oracle = TemplateChordOracle()
			oracle.candidate_chords([0, 4, 7])[0]  # ChordCandidate(name="C", weight=1.0)
			```
		"""

		counts = collections.Counter(pc % 12 for pc in pitch_classes)
		total = sum(counts.values())

		if total == 0:
			return []

		present = set(counts)
		candidates: typing.List[ChordCandidate] = []

		for root_pc in range(12):

			for quality in motivic.chords.CHORD_INTERVALS:

				chord = motivic.chords.Chord(root_pc=root_pc, quality=quality)
				tones = set(chord.pitch_classes())

				explained = sum(count for pc, count in counts.items() if pc in tones)

				if explained == 0:
					continue

				weight = (explained / total) * (len(tones & present) / len(tones))

				if root_pc not in present:
					weight *= self.ROOT_ABSENT_FACTOR

				candidates.append(ChordCandidate(name=chord.name(), weight=round(weight, 4)))

		# sorted() is stable, so ties keep their encounter order.
		candidates = sorted(candidates, key=lambda candidate: -candidate.weight)

		return candidates[:self.max_candidates]


	def scale_for (self, chord: str) -> typing.Optional[typing.List[int]]:

		parsed = self._parse(chord)

		if parsed is None:
			return None

		scale_name = motivic.chords.CHORD_SCALES[parsed.quality]

		return motivic.intervals.scale_pitch_classes(parsed.root_pc, scale_name)


	def chord_tones_for (self, chord: str) -> typing.Optional[typing.List[int]]:

		parsed = self._parse(chord)

		if parsed is None:
			return None

		return parsed.pitch_classes()


	def offset_between (self, chord_a: str, chord_b: str) -> typing.Optional[int]:

		"""Return the root movement from ``chord_b`` to ``chord_a``.

		The result is the smallest signed movement, in the range -6 to 5.
		Qualities are not compared: a melody over ``"Am"`` moves to ``"C"``
		by +3.
		"""

		parsed_a = self._parse(chord_a)
		parsed_b = self._parse(chord_b)

		if parsed_a is None or parsed_b is None:
			return None

		return ((parsed_a.root_pc - parsed_b.root_pc + 6) % 12) - 6


	def _parse (self, chord: typing.Optional[str]) -> typing.Optional[motivic.chords.Chord]:

		if not chord:
			return None

		try:
			return motivic.chords.parse_chord_name(chord)

		except ValueError:
			logger.debug(f"Chord oracle cannot resolve {chord!r}")
			return None
