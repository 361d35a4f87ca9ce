import math
import random
import typing

import pytest

import motivic.chord_oracle
import motivic.note
import motivic.snippet


NoteBuilder = typing.Callable[..., typing.List[motivic.note.Note]]


class ScriptedOracle:

	"""Chord oracle stub that only recognises the pitch-class sets it is given."""

	def __init__ (self, chords: typing.Dict[typing.FrozenSet[int], str]) -> None:

		"""Store the pitch-class set to chord name table."""

		self.chords = chords


	def candidate_chords (self, pitch_classes: typing.Sequence[int]) -> typing.List[motivic.chord_oracle.ChordCandidate]:

		"""Return a single full-weight candidate for a known set, else nothing."""

		name = self.chords.get(frozenset(pc % 12 for pc in pitch_classes))

		if name is None:
			return []

		return [motivic.chord_oracle.ChordCandidate(name=name, weight=1.0)]


	def scale_for (self, chord: str) -> typing.Optional[typing.List[int]]:

		return None


	def chord_tones_for (self, chord: str) -> typing.Optional[typing.List[int]]:

		return None


	def offset_between (self, chord_a: str, chord_b: str) -> typing.Optional[int]:

		return None


def build_notes (
	pitches: typing.Sequence[int],
	start: float = 0.0,
	duration: float = 1.0,
	velocity: int = 100
) -> typing.List[motivic.note.Note]:

	"""Build back-to-back notes, one per pitch, each ``duration`` beats long."""

	return [
		motivic.note.Note(pitch=pitch, start_time=start + i * duration, duration=duration, velocity=velocity)
		for i, pitch in enumerate(pitches)
	]


def check_invariants (snippet: motivic.snippet.Snippet) -> None:

	"""Assert what every normalised snippet guarantees to callers."""

	assert len(snippet.notes) == len(snippet.canonical_notes)
	assert all(0 <= pitch <= 11 for pitch in snippet.canonical_pitches)

	if snippet.notes:
		assert 0.0 <= snippet.notes[0].start_time < 1.0
		assert snippet.end_time == math.ceil(max(note.end_time for note in snippet.notes))

	else:
		assert snippet.end_time == 0.0


@pytest.fixture
def oracle () -> motivic.chord_oracle.TemplateChordOracle:

	"""Default template-matching oracle."""

	return motivic.chord_oracle.TemplateChordOracle()


@pytest.fixture
def rng () -> random.Random:

	"""Seeded random generator so randomised operators are reproducible."""

	return random.Random(42)


@pytest.fixture
def notes () -> NoteBuilder:

	"""Expose the back-to-back note builder to tests."""

	return build_notes


@pytest.fixture
def invariants () -> typing.Callable[[motivic.snippet.Snippet], None]:

	"""Expose the snippet invariant check to tests."""

	return check_invariants


@pytest.fixture
def scripted_oracle () -> typing.Type[ScriptedOracle]:

	"""Expose the scripted oracle stub so tests can give it their own chord table."""

	return ScriptedOracle
