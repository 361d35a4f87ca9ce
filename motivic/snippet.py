"""Snippets: short reusable motifs and their transformations.

A :class:`Snippet` owns an ordered list of notes (the performance pitches and
timing) and a canonical shadow of the same length in which every pitch is
reduced to a pitch class. Two snippets are equal when their canonical pitch
sequences match, which is how recurring motifs are recognised regardless of
octave.

Canonical pitches are measured in the snippet's own frame: chromatic
transposition (including the shift part of :meth:`Snippet.transpose_to_chord`)
is tracked in :attr:`Snippet.transposition`, so a motif moved to a new key
keeps its identity while its notes and best-fit chord follow the new key.

Every public operator that changes the notes ends with a single
:meth:`Snippet.normalize` call, so the invariants below hold whenever a caller
can observe the snippet:

- ``len(notes) == len(canonical_notes)``
- every canonical pitch is in 0–11
- ``end_time`` is the ceiling of the latest note end
- ``best_chord`` is the first highest-weight chord candidate

Example:
	```python
	import motivic.note
	import motivic.snippet

	notes = [
		motivic.note.Note(pitch=60, start_time=0.0, duration=1.0),
		motivic.note.Note(pitch=64, start_time=1.0, duration=1.0),
		motivic.note.Note(pitch=67, start_time=2.0, duration=1.0),
	]

	snippet = motivic.snippet.Snippet(notes)
	snippet.best_chord          # "C"
	snippet.transpose_to_chord("Am")
	snippet.retrograde()
	```
"""

import dataclasses
import logging
import math
import random
import typing

import motivic.chord_oracle
import motivic.constants.durations
import motivic.constants.velocity
import motivic.intervals
import motivic.note


logger = logging.getLogger(__name__)


Articulation = typing.Union[str, typing.Callable[[motivic.note.Note], motivic.note.Note]]
LeapBands = typing.Sequence[typing.Tuple[int, typing.Optional[int], int]]

# Octave corrections after merging: (smallest leap, largest leap or None, octaves to fold back).
# Even merges measure each note against the first note of the receiving snippet.
MERGE_LEAP_BANDS: LeapBands = ((9, 13, 1), (14, None, 2))

# Beat merges measure each note against its predecessor.
MERGE_BY_BEAT_LEAP_BANDS: LeapBands = ((9, 17, 1), (18, None, 2))

# Furthest whole-beat shift applied when a fragment is cut out.
FRAGMENT_MAX_BEAT_OFFSET = 12


def _end_beat (notes: typing.Sequence[motivic.note.Note]) -> float:

	"""
	Return the whole beat at or after the latest note end.
	"""

	if not notes:
		return 0.0

	# Rounding first stops float noise (2.9999999) from landing on the wrong beat.
	return float(math.ceil(round(max(note.end_time for note in notes), 9)))


def _octave_correction (leap: int, bands: LeapBands) -> int:

	"""
	Return the semitones that fold a leap back toward its reference note.
	"""

	size = abs(leap)

	for low, high, octaves in bands:
		if size >= low and (high is None or size <= high):
			return -12 * octaves if leap > 0 else 12 * octaves

	return 0


def _clamp_velocity (velocity: float) -> int:

	return int(max(motivic.constants.velocity.MIN_VELOCITY, min(motivic.constants.velocity.MAX_VELOCITY, round(velocity))))


def _weighted_run (count: int, first_weight: float, rng: random.Random) -> typing.Tuple[int, int]:

	"""Choose the contiguous run of positions taken from the first source.

	Returns:
		``(start, length)`` where ``length`` is ``first_weight`` of ``count``
		(rounded half up) and ``start`` is uniform over every position the run
		fits.
	"""

	first_weight = max(0.0, min(1.0, first_weight))
	length = min(count, int(first_weight * count + 0.5))
	start = rng.randint(0, count - length)

	return start, length


class Snippet:

	"""
	An ordered, mutable motif with a canonical pitch-class shadow and chord analysis.
	"""

	def __init__ (
		self,
		notes: typing.Optional[typing.Iterable[motivic.note.Note]] = None,
		oracle: typing.Optional[motivic.chord_oracle.ChordOracle] = None,
		rng: typing.Optional[random.Random] = None,
		transposition: int = 0,
		normalize_notes: bool = True
	) -> None:

		"""Create a snippet, optionally from a list of notes.

		Parameters:
			notes: Notes to copy in, in order. When given (and
				``normalize_notes`` is true) the snippet is normalised once.
			oracle: Chord oracle used for analysis and chord-aware operators.
				Defaults to :class:`~motivic.chord_oracle.TemplateChordOracle`.
			rng: Random generator for the randomised operators when none is
				passed per call. Defaults to a fresh ``random.Random()``.
			transposition: Chromatic offset of this snippet's frame; canonical
				pitches are measured after removing it.
			normalize_notes: Set to ``False`` to keep the given start times
				untouched and skip chord analysis.
		"""

		self.oracle: motivic.chord_oracle.ChordOracle = oracle if oracle is not None else motivic.chord_oracle.TemplateChordOracle()
		self.rng: random.Random = rng or random.Random()

		self._notes: typing.List[motivic.note.Note] = []
		self._canonical_notes: typing.List[motivic.note.Note] = []
		self._transposition = transposition
		self._occurrence_count = 1
		self._chord_candidates: typing.List[motivic.chord_oracle.ChordCandidate] = []
		self._best_chord: typing.Optional[str] = None
		self._end_time = 0.0

		if notes is not None:

			for note in notes:
				self.add_note(note)

			if normalize_notes:
				self.normalize()


	# ------------------------------------------------------------------
	# Read access
	# ------------------------------------------------------------------

	@property
	def notes (self) -> typing.Tuple[motivic.note.Note, ...]:

		return tuple(self._notes)


	@property
	def canonical_notes (self) -> typing.Tuple[motivic.note.Note, ...]:

		return tuple(self._canonical_notes)


	@property
	def pitches (self) -> typing.List[int]:

		return [note.pitch for note in self._notes]


	@property
	def canonical_pitches (self) -> typing.List[int]:

		return [note.pitch for note in self._canonical_notes]


	@property
	def count (self) -> int:

		return len(self._notes)


	@property
	def occurrence_count (self) -> int:

		return self._occurrence_count


	@property
	def chord_candidates (self) -> typing.Tuple[motivic.chord_oracle.ChordCandidate, ...]:

		return tuple(self._chord_candidates)


	@property
	def best_chord (self) -> typing.Optional[str]:

		return self._best_chord


	@property
	def end_time (self) -> float:

		return self._end_time


	@property
	def transposition (self) -> int:

		return self._transposition


	def __len__ (self) -> int:

		return len(self._notes)


	def __eq__ (self, other: object) -> bool:

		if not isinstance(other, Snippet):
			return NotImplemented

		return self.canonical_pitches == other.canonical_pitches


	def __hash__ (self) -> int:

		"""Hash the canonical pitches, consistent with equality.

		The hash changes whenever an operator changes the canonical pitches,
		so a snippet must not be mutated while it is a set member or a dict
		key. :class:`~motivic.library.SnippetLibrary` keeps snippets in a list
		for this reason.
		"""

		return hash(tuple(self.canonical_pitches))


	def __repr__ (self) -> str:

		return f"Snippet(pitches={self.pitches}, best_chord={self._best_chord!r}, end_time={self._end_time:g})"


	def __str__ (self) -> str:

		return self.describe()


	# ------------------------------------------------------------------
	# Construction and bookkeeping
	# ------------------------------------------------------------------

	def add_note (self, note: motivic.note.Note) -> None:

		"""Append a note without normalising.

		The canonical copy and ``end_time`` are updated straight away; start
		times are only shifted and chords only analysed by :meth:`normalize`,
		which the segmenter calls once the snippet is complete.
		"""

		self._notes.append(note)
		self._canonical_notes.append(self._canonical(note))
		self._end_time = _end_beat(self._notes)


	def copy (self) -> "Snippet":

		"""Return an independent copy sharing only the (stateless) oracle.

		The copy gets its own random generator, started from the source
		generator's current state, so random operators on one never advance
		the other.
		"""

		rng = random.Random()
		rng.setstate(self.rng.getstate())

		duplicate = Snippet(oracle=self.oracle, rng=rng, transposition=self._transposition)

		duplicate._notes = list(self._notes)
		duplicate._canonical_notes = list(self._canonical_notes)
		duplicate._occurrence_count = self._occurrence_count
		duplicate._chord_candidates = list(self._chord_candidates)
		duplicate._best_chord = self._best_chord
		duplicate._end_time = self._end_time

		return duplicate


	def increment_occurrences (self) -> None:

		"""
		Record one more sighting of this motif.
		"""

		self._occurrence_count += 1


	def normalize (self) -> None:

		"""Zero-transpose the snippet and refresh its chord analysis.

		Shifts every note back by the whole beats before the first note so the
		snippet starts inside beat 0, rebuilds the canonical pitch classes,
		recomputes ``end_time`` and asks the oracle which chords fit the
		sounding pitch classes. Normalising twice changes nothing.
		"""

		if not self._notes:
			self._canonical_notes = []
			self._chord_candidates = []
			self._best_chord = None
			self._end_time = 0.0
			return

		offset = math.floor(self._notes[0].start_time)

		if offset != 0:
			self._notes = [dataclasses.replace(note, start_time=note.start_time - offset) for note in self._notes]

		self._canonical_notes = [self._canonical(note) for note in self._notes]
		self._end_time = _end_beat(self._notes)

		self._chord_candidates = list(self.oracle.candidate_chords([note.pitch_class for note in self._notes]))
		self._best_chord = self._highest_weight_chord()


	def _canonical (self, note: motivic.note.Note) -> motivic.note.Note:

		return dataclasses.replace(note, pitch=(note.pitch - self._transposition) % 12)


	def _highest_weight_chord (self) -> typing.Optional[str]:

		best: typing.Optional[motivic.chord_oracle.ChordCandidate] = None

		for candidate in self._chord_candidates:
			if candidate.weight > 0 and (best is None or candidate.weight > best.weight):
				best = candidate

		return best.name if best is not None else None


	def _valid_range (self, start_index: int, end_index: int) -> bool:

		return 0 <= start_index <= end_index < len(self._notes)


	# ------------------------------------------------------------------
	# Pitch operators
	# ------------------------------------------------------------------

	def transpose (self, half_steps: int) -> None:

		"""Transpose every note chromatically.

		Pitches are not wrapped into the MIDI range. The canonical shape is
		unchanged; ``notes`` and ``best_chord`` move to the new key.
		"""

		self._notes = [note.transpose(half_steps) for note in self._notes]
		self._transposition += half_steps

		self.normalize()


	def transpose_diatonic (self, steps: int, octaves: int = 0, major: bool = True) -> None:

		"""Move every note by scale steps in C major (or the C minor reference scale).

		Parameters:
			steps: Scale steps, negative for down.
			octaves: Extra whole octaves.
			major: ``False`` uses ``[0, 2, 3, 5, 7, 8, 10, 11]``.
		"""

		self._notes = [note.transpose_diatonic(steps, octaves=octaves, major=major) for note in self._notes]

		self.normalize()


	def transpose_to_chord (self, chord: str) -> bool:

		"""Fit the snippet to a new chord.

		The notes move by the oracle's offset from the current best chord to
		``chord``, then every note outside ``chord``'s scale moves to the
		nearer scale tone. When both neighbours are equally near, the one
		closer to the previous note wins, and after that the lower one.

		Parameters:
			chord: Target chord name, e.g. ``"Am"``.

		Returns:
			``True`` on success. ``False`` when the oracle cannot resolve the
			offset or returns no (or an empty) scale, in which case nothing
			changes.
		"""

		if self._best_chord is None:
			logger.warning(f"Cannot transpose to {chord!r}: snippet has no chord")
			return False

		offset = self.oracle.offset_between(chord, self._best_chord)
		scale = self.oracle.scale_for(chord)

		if offset is None or not scale:
			logger.warning(f"Cannot transpose snippet from {self._best_chord!r} to {chord!r}")
			return False

		scale_pcs = set(scale)
		fitted: typing.List[motivic.note.Note] = []
		previous_pitch: typing.Optional[int] = None

		for note in self._notes:

			pitch = note.pitch + offset

			if pitch % 12 not in scale_pcs:
				below, above = motivic.intervals.bracketing_pitches(pitch, scale_pcs)
				reference = previous_pitch if previous_pitch is not None else pitch
				pitch = min((below, above), key=lambda candidate: (abs(candidate - pitch), abs(candidate - reference)))

			fitted.append(dataclasses.replace(note, pitch=pitch))
			previous_pitch = pitch

		logger.debug(f"Transposed snippet from {self._best_chord!r} to {chord!r} ({offset:+d})")

		self._notes = fitted
		self._transposition += offset

		self.normalize()

		return True


	def invert (self, pivot: int) -> None:

		"""
		Mirror every pitch chromatically around ``pivot``.
		"""

		self._notes = [dataclasses.replace(note, pitch=2 * pivot - note.pitch) for note in self._notes]

		self.normalize()


	def invert_diatonic (self, pivot: int, major: bool = True) -> None:

		"""Mirror every pitch around ``pivot`` by scale steps.

		Each note's distance from the pivot is reduced to a step count through
		:data:`motivic.intervals.DIATONIC_INVERSION_STEPS` (a third above
		becomes a third below) and its octave band is reversed, up to two
		octaves either side.
		"""

		inverted: typing.List[motivic.note.Note] = []

		for note in self._notes:

			interval = note.pitch - pivot

			pitch = motivic.intervals.transpose_diatonic(
				pivot,
				motivic.intervals.inversion_steps(interval),
				octaves = motivic.intervals.inversion_octaves(interval),
				major = major
			)

			inverted.append(dataclasses.replace(note, pitch=pitch))

		self._notes = inverted

		self.normalize()


	def adjust_by_step (self, rng: typing.Optional[random.Random] = None) -> None:

		"""Nudge every note to a random nearby tone of the current chord.

		Each note picks uniformly from the chord-scale tones within two
		semitones of it and every chord tone reached by shifting the note's
		pitch class. A note already on a scale or chord tone can stay put.

		Parameters:
			rng: Random generator; defaults to the snippet's own.
		"""

		if rng is None:
			rng = self.rng

		if self._best_chord is None:
			return

		scale = self.oracle.scale_for(self._best_chord) or []
		chord_tones = self.oracle.chord_tones_for(self._best_chord) or []

		if not scale and not chord_tones:
			logger.warning(f"No scale or chord tones for {self._best_chord!r}; notes left unchanged")

		adjusted: typing.List[motivic.note.Note] = []

		for note in self._notes:
			candidates = self._step_candidates(note.pitch, scale, chord_tones)
			adjusted.append(dataclasses.replace(note, pitch=rng.choice(candidates)))

		self._notes = adjusted

		self.normalize()


	@staticmethod
	def _step_candidates (pitch: int, scale: typing.Sequence[int], chord_tones: typing.Sequence[int]) -> typing.List[int]:

		pc = pitch % 12
		candidates: typing.List[int] = []

		for scale_pc in scale:

			difference = pc - scale_pc

			# Fold across the octave so B is a step below C, not eleven above.
			if difference > 9:
				difference -= 12

			elif difference < -9:
				difference += 12

			if -3 < difference < 3:
				candidates.append(pitch - difference)

		for tone_pc in chord_tones:
			candidates.append(pitch - (pc - tone_pc))

		if not candidates:
			candidates.append(pitch)

		return candidates


	# ------------------------------------------------------------------
	# Time operators
	# ------------------------------------------------------------------

	def retrograde (self) -> None:

		"""
		Reverse the snippet in pitch and rhythm, placing the notes back to back.
		"""

		current_time = self._end_time % 1.0
		reversed_notes: typing.List[motivic.note.Note] = []

		for note in reversed(self._notes):
			reversed_notes.append(dataclasses.replace(note, start_time=current_time))
			current_time += note.duration

		self._notes = reversed_notes

		self.normalize()


	def retrograde_melody (self) -> None:

		"""
		Reverse the pitch order while every position keeps its timing.
		"""

		pitches = [note.pitch for note in reversed(self._notes)]

		self._notes = [dataclasses.replace(note, pitch=pitch) for note, pitch in zip(self._notes, pitches)]

		self.normalize()


	def retrograde_rhythm (self) -> None:

		"""
		Reverse the durations while the pitches keep their order.
		"""

		durations = [note.duration for note in reversed(self._notes)]
		current_time = self._end_time % 1.0
		rhythm: typing.List[motivic.note.Note] = []

		for note, duration in zip(self._notes, durations):
			rhythm.append(dataclasses.replace(note, start_time=current_time, duration=duration))
			current_time += duration

		self._notes = rhythm

		self.normalize()


	def augment (self, multiplier: float) -> "Snippet":

		"""Return a copy with every start time and duration scaled.

		The copy is not normalised; call :meth:`normalize` on it if needed.

		Parameters:
			multiplier: Scale factor, e.g. ``2.0`` for augmentation and
				``0.5`` for diminution.
		"""

		if multiplier <= 0:
			raise ValueError("Augmentation multiplier must be positive")

		scaled = [
			dataclasses.replace(note, start_time=note.start_time * multiplier, duration=note.duration * multiplier)
			for note in self._notes
		]

		augmented = Snippet(scaled, oracle=self.oracle, rng=self.rng, transposition=self._transposition, normalize_notes=False)

		# Pitches are unchanged, so the chord analysis still holds.
		augmented._chord_candidates = list(self._chord_candidates)
		augmented._best_chord = self._best_chord

		return augmented


	def fragment (self, start_index: int, end_index: int) -> "Snippet":

		"""Return the notes from ``start_index`` to ``end_index`` (inclusive) as a new snippet.

		The fragment is shifted back by whole beats (at most
		``FRAGMENT_MAX_BEAT_OFFSET``) so it starts inside its own first beat.
		An out-of-range or inverted range returns ``self`` unchanged.
		"""

		if not self._valid_range(start_index, end_index):
			logger.debug(f"Ignoring fragment range {start_index}-{end_index} on a {len(self._notes)}-note snippet")
			return self

		first_start = self._notes[start_index].start_time
		offset = max(0, min(FRAGMENT_MAX_BEAT_OFFSET, math.floor(first_start)))

		notes = [
			dataclasses.replace(note, start_time=note.start_time - offset)
			for note in self._notes[start_index:end_index + 1]
		]

		return Snippet(notes, oracle=self.oracle, rng=self.rng, transposition=self._transposition)


	# ------------------------------------------------------------------
	# Merging
	# ------------------------------------------------------------------

	def merge (self, other: "Snippet", first_weight: float, rng: typing.Optional[random.Random] = None) -> "Snippet":

		"""Replace this snippet with a note-by-note blend of itself and ``other``.

		``other`` is copied and fitted to this snippet's chord, both are cut
		to the shorter length, and a contiguous run of ``first_weight`` of the
		positions (at a random start) keeps this snippet's notes while the
		rest come from the fitted copy. Notes are then laid back to back and
		any note 9 or more semitones from this snippet's first note is folded
		back by one or two octaves.

		Parameters:
			other: The snippet to blend in (left untouched).
			first_weight: Share of positions taken from this snippet, 0.0–1.0.
			rng: Random generator; defaults to the snippet's own.

		Returns:
			``self``, for chaining.
		"""

		if rng is None:
			rng = self.rng

		if not self._notes or not len(other):
			logger.warning("Cannot merge with an empty snippet")
			return self

		fitted = self._fitted_copy(other)
		count = min(len(self._notes), len(fitted))
		run_start, run_length = _weighted_run(count, first_weight, rng)

		merged: typing.List[motivic.note.Note] = []
		current_time = 0.0

		for i in range(count):
			source = self._notes[i] if run_start <= i < run_start + run_length else fitted._notes[i]
			merged.append(dataclasses.replace(source, start_time=current_time))
			current_time += source.duration

		reference = self._notes[0].pitch

		self._notes = [
			note.transpose(_octave_correction(note.pitch - reference, MERGE_LEAP_BANDS))
			for note in merged
		]

		self.normalize()

		return self


	def merge_by_beat (
		self,
		other: "Snippet",
		first_weight: float,
		number_of_beats: typing.Optional[int] = None,
		rng: typing.Optional[random.Random] = None
	) -> "Snippet":

		"""Replace this snippet with a beat-by-beat blend of itself and ``other``.

		Works like :meth:`merge` but chooses whole beats instead of notes:
		each beat takes every note that starts in it from one source, with
		durations capped at one beat. Each note is then folded back by an
		octave or two if it leaps 9 or more semitones from the note before it.

		Parameters:
			other: The snippet to blend in (left untouched).
			first_weight: Share of beats taken from this snippet, 0.0–1.0.
			number_of_beats: Beats to cover; defaults to this snippet's length.
			rng: Random generator; defaults to the snippet's own.

		Returns:
			``self``, for chaining.
		"""

		if rng is None:
			rng = self.rng

		beats = int(number_of_beats if number_of_beats is not None else self._end_time)

		if not self._notes or not len(other) or beats <= 0:
			logger.warning("Cannot merge by beat: empty snippet or no beats")
			return self

		fitted = self._fitted_copy(other)
		run_start, run_length = _weighted_run(beats, first_weight, rng)

		merged: typing.List[motivic.note.Note] = []

		for beat in range(beats):

			source = self._notes if run_start <= beat < run_start + run_length else fitted._notes

			for note in source:
				if beat <= note.start_time < beat + 1:
					duration = min(note.duration, motivic.constants.durations.MAX_MERGED_DURATION)
					merged.append(dataclasses.replace(note, duration=duration))

		if not merged:
			logger.warning(f"Beat merge over {beats} beats found no notes; snippet left unchanged")
			return self

		clamped = [merged[0]]

		for note in merged[1:]:
			leap = note.pitch - clamped[-1].pitch
			clamped.append(note.transpose(_octave_correction(leap, MERGE_BY_BEAT_LEAP_BANDS)))

		self._notes = clamped

		self.normalize()

		return self


	def _fitted_copy (self, other: "Snippet") -> "Snippet":

		fitted = other.copy()

		if self._best_chord is not None:
			fitted.transpose_to_chord(self._best_chord)

		return fitted


	# ------------------------------------------------------------------
	# Expression
	# ------------------------------------------------------------------

	def dynamic_line (self, start_index: int, end_index: int, start_velocity: int, end_velocity: int) -> None:

		"""Apply a crescendo or decrescendo across an inclusive range of notes.

		Velocity moves by ``|end_velocity - start_velocity| / (end_index -
		start_index)`` per note and never drops below 0. A one-note range
		just sets that note's velocity. Invalid ranges are ignored.
		"""

		if not self._valid_range(start_index, end_index):
			logger.debug(f"Ignoring dynamic line range {start_index}-{end_index}")
			return

		notes = list(self._notes)

		if start_index == end_index:
			notes[start_index] = dataclasses.replace(notes[start_index], velocity=_clamp_velocity(start_velocity))

		else:
			increment = abs(end_velocity - start_velocity) / (end_index - start_index)
			velocity = float(start_velocity)

			for i in range(start_index, end_index + 1):

				notes[i] = dataclasses.replace(notes[i], velocity=_clamp_velocity(velocity))

				if end_velocity >= start_velocity:
					velocity += increment

				else:
					velocity = max(0.0, velocity - increment)

		self._notes = notes

		self.normalize()


	def articulate (self, start_index: int, end_index: int, articulation: Articulation) -> None:

		"""Apply an articulation to an inclusive range of notes.

		Parameters:
			start_index: First note.
			end_index: Last note.
			articulation: A name from :data:`motivic.note.ARTICULATIONS`
				(``"staccato"``, ``"accent"``, ...) or any ``Note -> Note``
				callable.
		"""

		if not self._valid_range(start_index, end_index):
			logger.debug(f"Ignoring articulation range {start_index}-{end_index}")
			return

		notes = list(self._notes)

		for i in range(start_index, end_index + 1):
			notes[i] = notes[i].articulate(articulation)

		self._notes = notes

		self.normalize()


	# ------------------------------------------------------------------
	# Text
	# ------------------------------------------------------------------

	def describe (self) -> str:

		"""
		Return a multi-line summary: notes, total duration per pitch, chord candidates.
		"""

		lines = [
			"Snippet:",
			f"\tOccurrences: {self._occurrence_count}",
			"\t" + "-" * 32,
		]

		durations: typing.Dict[int, float] = {}

		for note in self._notes:
			durations[note.pitch] = durations.get(note.pitch, 0.0) + note.duration
			lines.append(f"\t{note}")

		lines.append("\tNotes and durations:")
		lines.append("\t\t" + "   ".join(f"{pitch}: {duration:g}" for pitch, duration in sorted(durations.items())))
		lines.append("\tChord candidates: " + ", ".join(str(candidate) for candidate in self._chord_candidates))

		return "\n".join(lines)


	def info (self) -> str:

		"""
		Return a short summary: note count, chord, candidates and end time.
		"""

		candidates = "  ".join(str(candidate) for candidate in self._chord_candidates)

		return (
			f"Notes: {len(self._notes)},  Chord: {self._best_chord}\n"
			f"Possible chords: {candidates}\n"
			f"End time: {self._end_time:g}"
		)
