"""Partition a note stream into snippets or chord progressions.

The segmenter is best-effort: malformed input (no notes, notes out of start
order, markers out of order) produces an empty result and a logged warning,
never an exception.

Markers are phrase boundaries in beats, typically control-change 20 events
read by :func:`motivic.midi_file.read_midi_file`.
"""

import logging
import random
import typing

import motivic.chord_oracle
import motivic.chord_progression
import motivic.constants
import motivic.note
import motivic.snippet


logger = logging.getLogger(__name__)


class Segmenter:

	"""
	Splits notes into normalised snippets, or into per-phrase chord progressions.
	"""

	def __init__ (
		self,
		oracle: typing.Optional[motivic.chord_oracle.ChordOracle] = None,
		beats_per_bar: int = motivic.constants.DEFAULT_BEATS_PER_BAR,
		simultaneity_tolerance: float = motivic.constants.SIMULTANEITY_TOLERANCE,
		rng: typing.Optional[random.Random] = None
	) -> None:

		"""Configure the segmenter.

		Parameters:
			oracle: Chord oracle handed to every snippet created. Defaults to
				:class:`~motivic.chord_oracle.TemplateChordOracle`.
			beats_per_bar: Time signature numerator used by beat-boundary mode.
			simultaneity_tolerance: Notes starting within this many beats of a
				window's first note belong to the same chord. With 0 every
				note is its own window.
			rng: Random generator handed to every snippet created.
		"""

		if beats_per_bar <= 0:
			raise ValueError("Beats per bar must be positive")

		if simultaneity_tolerance < 0:
			raise ValueError("Simultaneity tolerance cannot be negative")

		self.oracle: motivic.chord_oracle.ChordOracle = oracle if oracle is not None else motivic.chord_oracle.TemplateChordOracle()
		self.beats_per_bar = beats_per_bar
		self.simultaneity_tolerance = simultaneity_tolerance
		self.rng: random.Random = rng or random.Random()


	def segment_into_snippets (
		self,
		notes: typing.Sequence[motivic.note.Note],
		markers: typing.Sequence[float] = ()
	) -> typing.List[motivic.snippet.Snippet]:

		"""Split a note stream into snippets.

		With markers, each marker closes a snippet holding the notes that start
		before it (and after the previous marker). A marker with no notes
		before it emits nothing, and notes after the last marker are dropped.

		Without markers, a new snippet starts whenever the beat within the bar
		goes backwards (a bar line was crossed), and the last snippet is
		emitted at the end of the stream.

		Parameters:
			notes: Notes sorted by start time.
			markers: Boundary times in beats, ascending.

		Returns:
			Normalised snippets in stream order.
		"""

		if not self._valid_input(notes, markers):
			return []

		if markers:
			snippets = self._split_at_markers(notes, markers)

		else:
			snippets = self._split_at_bar_lines(notes)

		for snippet in snippets:
			snippet.normalize()

		logger.debug(f"Segmented {len(notes)} notes into {len(snippets)} snippets")

		return snippets


	def segment_into_progressions (
		self,
		notes: typing.Sequence[motivic.note.Note],
		markers: typing.Sequence[float]
	) -> typing.List[motivic.chord_progression.ChordProgression]:

		"""Extract one chord progression per marker-delimited phrase.

		Within each phrase, a window opens at the next note and takes every
		following note that starts within ``simultaneity_tolerance`` of it;
		the window's best-fit chord is appended to the phrase's progression. A
		window with no chord ends that phrase early.

		One progression is returned per marker, so ``progressions[i]`` always
		belongs to the phrase closed by ``markers[i]``. Phrases without
		recognisable chords (or without notes) give an empty progression.

		Parameters:
			notes: Notes sorted by start time.
			markers: Phrase end times in beats, ascending. Required.
		"""

		if not markers:
			logger.warning("Chord progressions need phrase markers; none given")
			return []

		if not self._valid_input(notes, markers):
			return []

		progressions: typing.List[motivic.chord_progression.ChordProgression] = []
		cursor = 0

		for marker in markers:

			labels: typing.List[str] = []

			while cursor < len(notes) and notes[cursor].start_time < marker:

				window_start = notes[cursor].start_time
				window = motivic.snippet.Snippet(oracle=self.oracle, rng=self.rng)
				window.add_note(notes[cursor])
				cursor += 1

				while cursor < len(notes) and abs(notes[cursor].start_time - window_start) < self.simultaneity_tolerance:
					window.add_note(notes[cursor])
					cursor += 1

				window.normalize()

				if window.best_chord is None:
					logger.debug(f"No chord for the notes at beat {window_start:g}; ending phrase")
					break

				labels.append(window.best_chord)

			# Skip whatever is left of a phrase that ended early.
			while cursor < len(notes) and notes[cursor].start_time < marker:
				cursor += 1

			progressions.append(motivic.chord_progression.ChordProgression(tuple(labels)))

		logger.debug(f"Extracted {len(progressions)} chord progressions from {len(markers)} phrases")

		return progressions


	def _new_snippet (self) -> motivic.snippet.Snippet:

		return motivic.snippet.Snippet(oracle=self.oracle, rng=self.rng)


	def _split_at_markers (
		self,
		notes: typing.Sequence[motivic.note.Note],
		markers: typing.Sequence[float]
	) -> typing.List[motivic.snippet.Snippet]:

		snippets: typing.List[motivic.snippet.Snippet] = []
		cursor = 0

		for marker in markers:

			if cursor >= len(notes):
				break

			snippet = self._new_snippet()

			while cursor < len(notes) and notes[cursor].start_time < marker:
				snippet.add_note(notes[cursor])
				cursor += 1

			if len(snippet):
				snippets.append(snippet)

		if cursor < len(notes):
			logger.info(f"{len(notes) - cursor} notes after the last marker were not segmented")

		return snippets


	def _split_at_bar_lines (self, notes: typing.Sequence[motivic.note.Note]) -> typing.List[motivic.snippet.Snippet]:

		snippets: typing.List[motivic.snippet.Snippet] = []
		snippet = self._new_snippet()
		previous_beat = 0

		for note in notes:

			beat = note.bar_beat(self.beats_per_bar).beat

			if beat < previous_beat:
				snippets.append(snippet)
				snippet = self._new_snippet()

			snippet.add_note(note)
			previous_beat = beat

		if len(snippet):
			snippets.append(snippet)

		return snippets


	def _valid_input (self, notes: typing.Sequence[motivic.note.Note], markers: typing.Sequence[float]) -> bool:

		if not notes:
			logger.warning("No notes to segment")
			return False

		if any(later.start_time < earlier.start_time for earlier, later in zip(notes, notes[1:])):
			logger.warning("Notes are not sorted by start time; nothing segmented")
			return False

		if any(later < earlier for earlier, later in zip(markers, markers[1:])):
			logger.warning("Markers are not in ascending order; nothing segmented")
			return False

		return True
