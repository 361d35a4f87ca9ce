"""A collection of snippets and chord progressions gathered from note streams.

The library is the dataset layer on top of the segmenter. Adding a snippet
whose canonical pitch sequence is already stored does not duplicate it;
the stored twin's occurrence count goes up instead, so frequently recurring
motifs stand out.

Example:
	```python
	import motivic.library

	library = motivic.library.SnippetLibrary()
	library.load_midi_snippets("phrases.mid")
	library.load_midi_progressions("chords.mid")

	print(library.describe())
	library.save_midi("dataset.mid")
	```
"""

import logging
import random
import typing

import motivic.chord_oracle
import motivic.chord_progression
import motivic.constants
import motivic.midi_file
import motivic.note
import motivic.segmenter
import motivic.snippet


logger = logging.getLogger(__name__)


class SnippetLibrary:

	"""
	Stores de-duplicated snippets (with occurrence counts) and chord progressions.
	"""

	def __init__ (
		self,
		oracle: typing.Optional[motivic.chord_oracle.ChordOracle] = None,
		segmenter: typing.Optional[motivic.segmenter.Segmenter] = None,
		rng: typing.Optional[random.Random] = None,
		marker_control: int = motivic.constants.MARKER_CONTROL
	) -> None:

		"""Create an empty library.

		Parameters:
			oracle: Chord oracle for the default segmenter.
			segmenter: Segmenter to use. When given, ``oracle`` and ``rng``
				are ignored in favour of the segmenter's own.
			rng: Random generator for the default segmenter.
			marker_control: Control-change number read as phrase markers from
				MIDI files.
		"""

		self.segmenter = segmenter if segmenter is not None else motivic.segmenter.Segmenter(oracle=oracle, rng=rng)
		self.marker_control = marker_control

		self.snippets: typing.List[motivic.snippet.Snippet] = []
		self.progressions: typing.List[motivic.chord_progression.ChordProgression] = []


	def add_snippet (self, snippet: motivic.snippet.Snippet) -> motivic.snippet.Snippet:

		"""Store a snippet, or count another occurrence of an equal one.

		Returns:
			The stored snippet: either ``snippet`` itself or its earlier twin.
		"""

		for stored in self.snippets:
			if stored == snippet:
				stored.increment_occurrences()
				logger.debug(f"Snippet {stored.canonical_pitches} seen {stored.occurrence_count} times")
				return stored

		self.snippets.append(snippet)

		return snippet


	def add_notes (self, notes: typing.Sequence[motivic.note.Note], markers: typing.Sequence[float] = ()) -> int:

		"""Segment a note stream and add every resulting snippet.

		Returns:
			How many snippets the stream produced (before de-duplication).
		"""

		snippets = self.segmenter.segment_into_snippets(notes, markers)

		for snippet in snippets:
			self.add_snippet(snippet)

		return len(snippets)


	def add_progressions (self, notes: typing.Sequence[motivic.note.Note], markers: typing.Sequence[float]) -> int:

		"""
		Extract chord progressions from a marked note stream and store them.
		"""

		progressions = self.segmenter.segment_into_progressions(notes, markers)
		self.progressions.extend(progressions)

		return len(progressions)


	def load_midi_snippets (self, path: str) -> int:

		"""Read a MIDI file and add its snippets.

		The file's time signature sets the segmenter's bar length for
		beat-boundary segmentation.
		"""

		data = motivic.midi_file.read_midi_file(path, marker_control=self.marker_control)
		self.segmenter.beats_per_bar = data.beats_per_bar

		count = self.add_notes(data.notes, data.markers)

		logger.info(f"Loaded {count} snippets from {path}; library holds {len(self.snippets)}")

		return count


	def load_midi_progressions (self, path: str) -> int:

		data = motivic.midi_file.read_midi_file(path, marker_control=self.marker_control)

		count = self.add_progressions(data.notes, data.markers)

		logger.info(f"Loaded {count} chord progressions from {path}")

		return count


	def save_midi (self, path: str, bpm: typing.Optional[float] = None) -> None:

		"""
		Write every stored snippet, in order, to a MIDI file.
		"""

		kwargs: typing.Dict[str, typing.Any] = {"beats_per_bar": self.segmenter.beats_per_bar}

		if bpm is not None:
			kwargs["bpm"] = bpm

		motivic.midi_file.write_snippets(path, self.snippets, **kwargs)


	def clear (self) -> None:

		self.snippets.clear()
		self.progressions.clear()


	def describe (self) -> str:

		"""
		Return a summary of every stored snippet and progression.
		"""

		lines = [f"Snippets ({len(self.snippets)}):"]
		lines.extend(snippet.describe() for snippet in self.snippets)

		lines.append(f"Chord progressions ({len(self.progressions)}):")
		lines.extend(f"\t{progression}" for progression in self.progressions)

		return "\n".join(lines)


	def __len__ (self) -> int:

		return len(self.snippets)
