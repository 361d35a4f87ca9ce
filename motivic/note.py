"""The note value type.

A :class:`Note` is one pitched event from a performed or composed line. Notes
are frozen: every transformation returns a new note via
``dataclasses.replace``, so snippets built from the same source never share
mutable state.

Times are in beats (1.0 = one quarter note) measured from the start of the
source stream.
"""

import dataclasses
import math
import typing

import motivic.chords
import motivic.constants.durations
import motivic.constants.velocity
import motivic.intervals


@dataclasses.dataclass(frozen=True)
class BarBeat:

	"""
	A 1-based bar / beat display position, plus the fraction through the beat.
	"""

	bar: int
	beat: int
	sub_beat: float


	def __str__ (self) -> str:

		return f"{self.bar}:{self.beat}:{self.sub_beat:.2f}"


@dataclasses.dataclass(frozen=True)
class Note:

	"""
	A single note event: pitch, timing in beats, and MIDI velocities.
	"""

	pitch: int
	start_time: float
	duration: float
	velocity: int = motivic.constants.velocity.DEFAULT_VELOCITY
	release_velocity: int = motivic.constants.velocity.DEFAULT_RELEASE_VELOCITY
	channel: int = 0


	def __post_init__ (self) -> None:

		if self.duration < 0:
			raise ValueError(f"Note duration cannot be negative: {self.duration}")


	@property
	def pitch_class (self) -> int:

		"""
		The pitch reduced to a single octave (0–11).
		"""

		return self.pitch % 12


	@property
	def end_time (self) -> float:

		return self.start_time + self.duration


	@property
	def name (self) -> str:

		"""
		Note name with octave, where 60 is ``"C4"``.
		"""

		return f"{motivic.chords.PC_TO_NOTE_NAME[self.pitch % 12]}{self.pitch // 12 - 1}"


	def bar_beat (self, beats_per_bar: int = 4) -> BarBeat:

		"""Return the display position of this note's start.

		Parameters:
			beats_per_bar: Time signature numerator.

		Example:
			```python
			Note(pitch=60, start_time=5.5, duration=1.0).bar_beat(4)  # BarBeat(bar=2, beat=2, sub_beat=0.5)
			```
		"""

		if beats_per_bar <= 0:
			raise ValueError("Beats per bar must be positive")

		whole_beats = math.floor(self.start_time)
		bar, beat = divmod(whole_beats, beats_per_bar)

		return BarBeat(bar=bar + 1, beat=beat + 1, sub_beat=self.start_time - whole_beats)


	def transpose (self, half_steps: int) -> "Note":

		"""
		Return a copy moved by ``half_steps`` semitones.
		"""

		return dataclasses.replace(self, pitch=self.pitch + half_steps)


	def transpose_diatonic (self, steps: int, octaves: int = 0, major: bool = True) -> "Note":

		"""
		Return a copy moved by scale steps in the C major (or minor) reference scale.
		"""

		return dataclasses.replace(
			self,
			pitch = motivic.intervals.transpose_diatonic(self.pitch, steps, octaves=octaves, major=major)
		)


	def articulate (self, articulation: typing.Union[str, typing.Callable[["Note"], "Note"]]) -> "Note":

		"""Return a copy with an articulation applied.

		Parameters:
			articulation: One of ``"staccato"``, ``"staccatissimo"``,
				``"accent"``, ``"marcato"``, or any callable that takes a
				``Note`` and returns a ``Note``.

		Raises:
			ValueError: If a named articulation is not recognised.
		"""

		if callable(articulation):
			return articulation(self)

		if articulation not in ARTICULATIONS:
			available = ", ".join(sorted(ARTICULATIONS))
			raise ValueError(f"Unknown articulation: {articulation!r}. Available: {available}")

		return ARTICULATIONS[articulation](self)


	def __str__ (self) -> str:

		return (
			f"{self.name} ({self.pitch}) start={self.start_time:.3f} dur={self.duration:.3f} "
			f"vel={self.velocity} ch={self.channel}"
		)


def _shorten (ratio: float) -> typing.Callable[[Note], Note]:

	def apply (note: Note) -> Note:
		return dataclasses.replace(note, duration=note.duration * ratio)

	return apply


def _accent (note: Note) -> Note:

	velocity = min(motivic.constants.velocity.MAX_VELOCITY, note.velocity + motivic.constants.velocity.ACCENT_BOOST)

	return dataclasses.replace(note, velocity=velocity)


def _marcato (note: Note) -> Note:

	return _shorten(motivic.constants.durations.STACCATO_RATIO)(_accent(note))


ARTICULATIONS: typing.Dict[str, typing.Callable[[Note], Note]] = {
	"staccato": _shorten(motivic.constants.durations.STACCATO_RATIO),
	"staccatissimo": _shorten(motivic.constants.durations.STACCATISSIMO_RATIO),
	"accent": _accent,
	"marcato": _marcato,
}
