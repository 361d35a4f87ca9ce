import random

import motivic.note
import motivic.snippet


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _c_major_triad (notes) -> motivic.snippet.Snippet:

	return motivic.snippet.Snippet(notes([60, 64, 67]))


# ---------------------------------------------------------------------------
# Construction and normalisation
# ---------------------------------------------------------------------------

def test_c_major_scenario (notes) -> None:

	"""C-E-G over three beats reads as C major, canonical [0, 4, 7]."""

	snippet = _c_major_triad(notes)

	assert snippet.canonical_pitches == [0, 4, 7]
	assert snippet.end_time == 3.0
	assert snippet.best_chord == "C"
	assert snippet.chord_candidates[0].name == "C"
	assert snippet.occurrence_count == 1
	assert len(snippet) == snippet.count == 3


def test_empty_snippet () -> None:

	snippet = motivic.snippet.Snippet()

	assert len(snippet) == 0
	assert snippet.end_time == 0.0
	assert snippet.best_chord is None
	assert snippet.chord_candidates == ()

	snippet.normalize()

	assert snippet.end_time == 0.0


def test_normalise_moves_into_first_beat (notes, invariants) -> None:

	"""Whole beats before the first note are removed; the fraction stays."""

	snippet = motivic.snippet.Snippet(notes([60, 62, 64], start=8.5))

	assert [note.start_time for note in snippet.notes] == [0.5, 1.5, 2.5]
	assert [note.start_time for note in snippet.canonical_notes] == [0.5, 1.5, 2.5]
	assert snippet.end_time == 4.0
	invariants(snippet)


def test_normalise_is_idempotent (notes) -> None:

	snippet = motivic.snippet.Snippet(notes([60, 62, 64], start=3.25, duration=0.75))
	before = (snippet.notes, snippet.canonical_notes, snippet.end_time, snippet.best_chord)

	snippet.normalize()

	assert (snippet.notes, snippet.canonical_notes, snippet.end_time, snippet.best_chord) == before


def test_end_time_rounds_up_to_whole_beat () -> None:

	snippet = motivic.snippet.Snippet([
		motivic.note.Note(pitch=60, start_time=0.0, duration=0.5),
		motivic.note.Note(pitch=62, start_time=0.5, duration=1.0),
	])

	assert snippet.end_time == 2.0


def test_end_time_uses_latest_ending_note () -> None:

	"""A long early note can outlast the last-starting one."""

	snippet = motivic.snippet.Snippet([
		motivic.note.Note(pitch=48, start_time=0.0, duration=4.0),
		motivic.note.Note(pitch=60, start_time=1.0, duration=0.5),
	])

	assert snippet.end_time == 4.0


def test_add_note_keeps_shadow_in_step () -> None:

	"""Appending does not normalise, but canonical notes and end time stay valid."""

	snippet = motivic.snippet.Snippet()
	snippet.add_note(motivic.note.Note(pitch=62, start_time=5.0, duration=1.0))
	snippet.add_note(motivic.note.Note(pitch=78, start_time=6.0, duration=0.5))

	assert [note.start_time for note in snippet.notes] == [5.0, 6.0]
	assert snippet.canonical_pitches == [2, 6]
	assert snippet.end_time == 7.0
	assert snippet.best_chord is None


def test_constructor_copies_input (notes) -> None:

	source = notes([60, 64, 67])
	snippet = motivic.snippet.Snippet(source)

	source.append(motivic.note.Note(pitch=72, start_time=3.0, duration=1.0))

	assert len(snippet) == 3


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------

def test_octave_equal_snippets_are_equal (notes) -> None:

	low = motivic.snippet.Snippet(notes([60, 64, 67]))
	high = motivic.snippet.Snippet(notes([72, 76, 79], duration=0.5))

	assert low == high
	assert hash(low) == hash(high)


def test_semitone_apart_snippets_differ (notes) -> None:

	assert motivic.snippet.Snippet(notes([61, 65, 68])) != motivic.snippet.Snippet(notes([60, 64, 67]))


def test_equality_is_positional (notes) -> None:

	assert motivic.snippet.Snippet(notes([60, 64, 67])) != motivic.snippet.Snippet(notes([64, 60, 67]))
	assert motivic.snippet.Snippet(notes([60, 64])) != motivic.snippet.Snippet(notes([60, 64, 67]))


def test_not_equal_to_other_types (notes) -> None:

	assert _c_major_triad(notes) != [0, 4, 7]


def test_copy_is_independent (notes) -> None:

	original = _c_major_triad(notes)
	original.increment_occurrences()

	duplicate = original.copy()
	duplicate.transpose(5)
	duplicate.increment_occurrences()

	assert original.pitches == [60, 64, 67]
	assert original.best_chord == "C"
	assert original.occurrence_count == 2
	assert duplicate.pitches == [65, 69, 72]
	assert duplicate.occurrence_count == 3
	assert duplicate.oracle is original.oracle


def test_copy_has_its_own_generator (notes) -> None:

	"""Random operators on a copy leave the source's generator where it was."""

	original = motivic.snippet.Snippet(notes([60, 64, 67, 72]), rng=random.Random(3))
	duplicate = original.copy()

	assert duplicate.rng is not original.rng

	duplicate.adjust_by_step()
	duplicate.adjust_by_step()

	assert original.rng.random() == random.Random(3).random()


def test_hash_follows_equality (notes) -> None:

	"""Octave-displaced motifs collapse to one set member."""

	low = _c_major_triad(notes)
	high = motivic.snippet.Snippet(notes([72, 76, 79]))
	minor = motivic.snippet.Snippet(notes([60, 63, 67]))

	assert hash(low) == hash(high)
	assert len({low, high, minor}) == 2


# ---------------------------------------------------------------------------
# Chromatic transposition
# ---------------------------------------------------------------------------

def test_transpose_keeps_canonical_shape (notes) -> None:

	"""Up a minor third: notes move, the canonical shape does not."""

	snippet = _c_major_triad(notes)
	snippet.transpose(3)

	assert snippet.pitches == [63, 67, 70]
	assert snippet.canonical_pitches == [0, 4, 7]
	assert snippet.transposition == 3
	assert snippet.best_chord == "D#"


def test_transposed_snippet_still_matches_original (notes) -> None:

	moved = _c_major_triad(notes)
	moved.transpose(-7)

	assert moved == _c_major_triad(notes)


def test_transpose_does_not_clamp_pitch (notes, invariants) -> None:

	snippet = motivic.snippet.Snippet(notes([120, 124]))
	snippet.transpose(12)

	assert snippet.pitches == [132, 136]
	invariants(snippet)


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

def test_describe (notes) -> None:

	snippet = motivic.snippet.Snippet(notes([60, 64, 60]))
	text = snippet.describe()

	assert "Occurrences: 1" in text
	assert "60: 2   64: 1" in text
	assert "Chord candidates: C: 0.6667" in text
	assert str(snippet) == text


def test_info (notes) -> None:

	text = _c_major_triad(notes).info()

	assert "Notes: 3" in text
	assert "Chord: C" in text
	assert "End time: 3" in text
