"""Chord definitions and pitch class utilities.

This module provides chord quality definitions, pitch class mappings, and the `Chord` class
used by the default chord oracle to name, parse and spell chords.

Module-level constants:
- `NOTE_NAME_TO_PC`: Maps note names (e.g., `"C"`, `"F#"`, `"Bb"`) to pitch classes (0-11)
- `PC_TO_NOTE_NAME`: Maps pitch classes to note names
- `CHORD_INTERVALS`: Maps chord quality names to interval lists (semitones from root)
- `CHORD_SUFFIX`: Maps chord quality names to human-readable suffixes (e.g., `"m"`, `"7"`)
- `CHORD_SCALES`: Maps chord quality names to the scale a melody over that chord draws from

Module-level helpers:
- `key_name_to_pc(key_name)`: Validate a note name and return its pitch class (0–11).
- `parse_chord_name(name)`: Turn a chord label such as `"F#m7"` back into a `Chord`.
"""

import dataclasses
import typing


NOTE_NAME_TO_PC: typing.Dict[str, int] = {
	"C": 0,
	"C#": 1,
	"Db": 1,
	"D": 2,
	"D#": 3,
	"Eb": 3,
	"E": 4,
	"F": 5,
	"F#": 6,
	"Gb": 6,
	"G": 7,
	"G#": 8,
	"Ab": 8,
	"A": 9,
	"A#": 10,
	"Bb": 10,
	"B": 11,
}

PC_TO_NOTE_NAME: typing.List[str] = [
	"C",
	"C#",
	"D",
	"D#",
	"E",
	"F",
	"F#",
	"G",
	"G#",
	"A",
	"A#",
	"B",
]


def key_name_to_pc (key_name: str) -> int:

	"""Validate a note name and return its pitch class (0–11).

	Parameters:
		key_name: Note name (e.g. ``"C"``, ``"F#"``, ``"Bb"``).

	Returns:
		Pitch class integer (0–11).

	Raises:
		ValueError: If the name is not recognised.

	Example:
		```python
		key_name_to_pc("C")   # → 0
		key_name_to_pc("Bb")  # → 10
		```
	"""

	if key_name not in NOTE_NAME_TO_PC:
		raise ValueError(
			f"Unknown key name: {key_name!r}. Expected e.g. 'C', 'F#', 'Bb'."
		)

	return NOTE_NAME_TO_PC[key_name]


# Dict order is the tie-break order for equally weighted chord candidates.
CHORD_INTERVALS: typing.Dict[str, typing.List[int]] = {
	"major": [0, 4, 7],
	"minor": [0, 3, 7],
	"dominant_7th": [0, 4, 7, 10],
	"major_7th": [0, 4, 7, 11],
	"minor_7th": [0, 3, 7, 10],
	"diminished": [0, 3, 6],
	"augmented": [0, 4, 8],
	"half_diminished_7th": [0, 3, 6, 10],
	"sus2": [0, 2, 7],
	"sus4": [0, 5, 7],
}

CHORD_SUFFIX: typing.Dict[str, str] = {
	"major": "",
	"minor": "m",
	"dominant_7th": "7",
	"major_7th": "maj7",
	"minor_7th": "m7",
	"diminished": "dim",
	"augmented": "+",
	"half_diminished_7th": "m7b5",
	"sus2": "sus2",
	"sus4": "sus4",
}

SUFFIX_TO_QUALITY: typing.Dict[str, str] = {suffix: quality for quality, suffix in CHORD_SUFFIX.items()}

# Keys into motivic.intervals.INTERVAL_DEFINITIONS.
CHORD_SCALES: typing.Dict[str, str] = {
	"major": "major_ionian",
	"minor": "natural_minor",
	"dominant_7th": "mixolydian",
	"major_7th": "major_ionian",
	"minor_7th": "dorian_mode",
	"diminished": "locrian_mode",
	"augmented": "whole_tone",
	"half_diminished_7th": "locrian_mode",
	"sus2": "major_ionian",
	"sus4": "mixolydian",
}


@dataclasses.dataclass(frozen=True)
class Chord:

	"""
	Represents a chord as a root pitch class and quality.
	"""

	root_pc: int
	quality: str


	def intervals (self) -> typing.List[int]:

		"""
		Return the chord intervals for this chord quality.
		"""

		if self.quality not in CHORD_INTERVALS:
			raise ValueError(f"Unknown chord quality: {self.quality}")

		return CHORD_INTERVALS[self.quality]


	def pitch_classes (self) -> typing.List[int]:

		"""Return the chord tones as pitch classes, root first.

		Example:
			```python
			Chord(root_pc=9, quality="minor").pitch_classes()  # [9, 0, 4]
			```
		"""

		return [(self.root_pc + interval) % 12 for interval in self.intervals()]


	def transpose (self, half_steps: int) -> "Chord":

		"""
		Return the same quality rooted ``half_steps`` higher (or lower).
		"""

		return Chord(root_pc=(self.root_pc + half_steps) % 12, quality=self.quality)


	def name (self) -> str:

		"""
		Return a human-friendly chord name.
		"""

		root_name = PC_TO_NOTE_NAME[self.root_pc % 12]
		suffix = CHORD_SUFFIX.get(self.quality, "")

		return f"{root_name}{suffix}"


def parse_chord_name (name: str) -> Chord:

	"""Parse a chord label produced by :meth:`Chord.name`.

	Two-character roots (``"F#"``, ``"Bb"``) are tried before single letters,
	so flats are accepted as well as the sharps this module writes.

	Parameters:
		name: Chord label, e.g. ``"C"``, ``"Ebmaj7"``, ``"F#m7b5"``.

	Returns:
		The matching ``Chord``.

	Raises:
		ValueError: If the root or the suffix is not recognised.

	Example:
		```python
		parse_chord_name("Am")    # Chord(root_pc=9, quality="minor")
		parse_chord_name("Bb7")   # Chord(root_pc=10, quality="dominant_7th")
		```
	"""

	for root_length in (2, 1):

		root_name = name[:root_length]

		if root_name not in NOTE_NAME_TO_PC:
			continue

		suffix = name[root_length:]

		if suffix in SUFFIX_TO_QUALITY:
			return Chord(root_pc=NOTE_NAME_TO_PC[root_name], quality=SUFFIX_TO_QUALITY[suffix])

	raise ValueError(f"Unknown chord name: {name!r}")
