"""Scales, diatonic stepping and interval tables.

Pitch arithmetic shared by notes and snippets lives here: the named scale
registry used to answer "which scale goes with this chord", diatonic
transposition against the fixed C reference scales, the interval-inversion
table used by diatonic inversion, and scale-tone bracketing used when a melody
is fitted to a new chord.

All functions operate on **absolute MIDI pitches** unless the argument is
called ``*_pc`` / ``*_pcs``, in which case it is a pitch class (0–11).
"""

import math
import typing


INTERVAL_DEFINITIONS: typing.Dict[str, typing.List[int]] = {
	"chromatic": [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11],
	"dorian_mode": [0, 2, 3, 5, 7, 9, 10],
	"harmonic_minor": [0, 2, 3, 5, 7, 8, 11],
	"locrian_mode": [0, 1, 3, 5, 6, 8, 10],
	"lydian": [0, 2, 4, 6, 7, 9, 11],
	"major_ionian": [0, 2, 4, 5, 7, 9, 11],
	"major_pentatonic": [0, 2, 4, 7, 9],
	"minor_pentatonic": [0, 3, 5, 7, 10],
	"mixolydian": [0, 2, 4, 5, 7, 9, 10],
	"natural_minor": [0, 2, 3, 5, 7, 8, 10],
	"phrygian_mode": [0, 1, 3, 5, 7, 8, 10],
	"whole_tone": [0, 2, 4, 6, 8, 10],
}


# Reference scales for diatonic transposition and inversion, rooted on C.
MAJOR_SCALE: typing.List[int] = [0, 2, 4, 5, 7, 9, 11]

# Natural minor with the raised leading tone kept as an extra degree.
MINOR_SCALE: typing.List[int] = [0, 2, 3, 5, 7, 8, 10, 11]


# Semitone distance above (+) or below (-) the pivot, reduced to within an
# octave, mapped to the diatonic step count of its mirror image.
DIATONIC_INVERSION_STEPS: typing.Dict[int, int] = {
	1: -1, 2: -1,
	3: -2, 4: -2,
	5: -3, 6: -3,
	7: -4,
	8: -5, 9: -5,
	10: -6, 11: -6,
	-1: 1, -2: 1,
	-3: 2, -4: 2,
	-5: 3, -6: 3,
	-7: 4,
	-8: 5, -9: 5,
	-10: 6, -11: 6,
}

# Widest displacement (in octaves) diatonic inversion recovers from the pivot.
MAX_INVERSION_OCTAVES = 2


def get_intervals (name: str) -> typing.List[int]:

	"""
	Return a named interval list from the registry.
	"""

	if name not in INTERVAL_DEFINITIONS:
		raise ValueError(f"Unknown interval set: {name}")

	return list(INTERVAL_DEFINITIONS[name])


def scale_pitch_classes (root_pc: int, scale_name: str) -> typing.List[int]:

	"""
	Return the sorted pitch classes of a named scale built on ``root_pc``.

	Example:
		```python
		scale_pitch_classes(9, "natural_minor")  # → [0, 2, 4, 5, 7, 9, 11]
		```
	"""

	return sorted((root_pc + interval) % 12 for interval in get_intervals(scale_name))


def reference_scale (major: bool = True) -> typing.List[int]:

	"""
	Return the C reference scale used for diatonic movement.
	"""

	return MAJOR_SCALE if major else MINOR_SCALE


def transpose_diatonic (pitch: int, steps: int, octaves: int = 0, major: bool = True) -> int:

	"""Move a pitch by scale steps along the C major or C minor reference scale.

	A pitch that is not on the scale is measured from the scale tone below it
	and keeps that chromatic alteration after the move, so C# stepped up once in
	C major becomes D#.

	Parameters:
		pitch: MIDI note number.
		steps: Scale steps to move (negative moves down).
		octaves: Additional whole octaves to move.
		major: Use the major reference scale, otherwise the minor one.

	Returns:
		The new MIDI note number.

	Example:
		```python
		transpose_diatonic(60, 2)             # → 64  (C to E)
		transpose_diatonic(64, -1, octaves=1) # → 74  (E to D, an octave up)
		transpose_diatonic(71, 1)             # → 72  (B to C, crossing the octave)
		```
	"""

	scale = reference_scale(major)
	octave, pc = divmod(pitch, 12)

	degree = max(i for i, scale_pc in enumerate(scale) if scale_pc <= pc)
	alteration = pc - scale[degree]

	octave_shift, new_degree = divmod(degree + steps, len(scale))

	return (octave + octave_shift + octaves) * 12 + scale[new_degree] + alteration


def inversion_octaves (interval: int) -> int:

	"""Return the octave correction for a note ``interval`` semitones from the pivot.

	Intervals inside the first octave either side return 0; each further band
	of 12 semitones returns one octave in the opposite direction, up to
	``MAX_INVERSION_OCTAVES``.
	"""

	bands = int(abs(interval) // 12)

	if bands == 0 or bands > MAX_INVERSION_OCTAVES:
		return 0

	return -bands if interval > 0 else bands


def inversion_steps (interval: int) -> int:

	"""
	Return the inverted diatonic step count for an interval from the pivot.
	"""

	# Remainder keeps the sign of the interval.
	reduced = int(math.fmod(interval, 12))

	return DIATONIC_INVERSION_STEPS.get(reduced, 0)


def bracketing_pitches (pitch: int, scale_pcs: typing.Sequence[int]) -> typing.Tuple[int, int]:

	"""Return the nearest scale pitches at or below and at or above ``pitch``.

	Both values equal ``pitch`` when it is already on the scale.

	Example:
		```python
		bracketing_pitches(61, [0, 2, 4, 5, 7, 9, 11])  # → (60, 62)
		bracketing_pitches(58, [0, 2, 4, 7, 9])         # → (57, 60)
		```
	"""

	if not scale_pcs:
		raise ValueError("Scale cannot be empty")

	below = pitch
	while below % 12 not in scale_pcs:
		below -= 1

	above = pitch
	while above % 12 not in scale_pcs:
		above += 1

	return below, above
