import pathlib

import mido
import pytest

import motivic.midi_file
import motivic.note
import motivic.snippet


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _write_file (path: pathlib.Path, messages: list, ticks_per_beat: int = 480) -> str:

	"""Write one track of (delta ticks, message) pairs to ``path``."""

	midi = mido.MidiFile(type=1, ticks_per_beat=ticks_per_beat)
	track = mido.MidiTrack()
	midi.tracks.append(track)

	for delta, message in messages:
		track.append(message.copy(time=delta))

	midi.save(str(path))

	return str(path)


# ---------------------------------------------------------------------------
# read_midi_file
# ---------------------------------------------------------------------------

def test_read_notes_markers_and_meta (tmp_path: pathlib.Path) -> None:

	path = _write_file(tmp_path / "phrase.mid", [
		(0, mido.MetaMessage('time_signature', numerator=3, denominator=4)),
		(0, mido.MetaMessage('set_tempo', tempo=mido.bpm2tempo(90))),
		(0, mido.Message('note_on', channel=1, note=60, velocity=90)),
		(480, mido.Message('note_off', channel=1, note=60, velocity=40)),
		(0, mido.Message('note_on', channel=1, note=64, velocity=80)),
		(240, mido.Message('note_on', channel=1, note=64, velocity=0)),
		(240, mido.Message('control_change', channel=0, control=20, value=127)),
	])

	data = motivic.midi_file.read_midi_file(path)

	assert data.notes == [
		motivic.note.Note(pitch=60, start_time=0.0, duration=1.0, velocity=90, release_velocity=40, channel=1),
		motivic.note.Note(pitch=64, start_time=1.0, duration=0.5, velocity=80, release_velocity=0, channel=1),
	]
	assert data.markers == [2.0]
	assert data.ticks_per_beat == 480
	assert data.beats_per_bar == 3
	assert data.bpm == pytest.approx(90)


def test_read_uses_defaults_without_meta (tmp_path: pathlib.Path) -> None:

	path = _write_file(tmp_path / "bare.mid", [
		(0, mido.Message('note_on', note=60, velocity=100)),
		(96, mido.Message('note_off', note=60)),
	], ticks_per_beat=96)

	data = motivic.midi_file.read_midi_file(path)

	assert data.notes[0].duration == 1.0
	assert data.markers == []
	assert data.beats_per_bar == 4
	assert data.bpm == 120.0


def test_read_custom_marker_control (tmp_path: pathlib.Path) -> None:

	path = _write_file(tmp_path / "markers.mid", [
		(960, mido.Message('control_change', control=20, value=127)),
		(0, mido.Message('control_change', control=64, value=127)),
	])

	assert motivic.midi_file.read_midi_file(path, marker_control=64).markers == [2.0]


def test_repeated_pitch_pairs_first_in_first_out (tmp_path: pathlib.Path) -> None:

	"""Overlapping notes on the same pitch close in the order they started."""

	path = _write_file(tmp_path / "overlap.mid", [
		(0, mido.Message('note_on', note=60, velocity=100)),
		(480, mido.Message('note_on', note=60, velocity=50)),
		(480, mido.Message('note_off', note=60)),
		(480, mido.Message('note_off', note=60)),
	])

	data = motivic.midi_file.read_midi_file(path)

	assert [(note.start_time, note.duration, note.velocity) for note in data.notes] == [(0.0, 2.0, 100), (1.0, 2.0, 50)]


def test_unfinished_notes_are_dropped (tmp_path: pathlib.Path, caplog: pytest.LogCaptureFixture) -> None:

	path = _write_file(tmp_path / "hanging.mid", [
		(0, mido.Message('note_on', note=60, velocity=100)),
		(480, mido.Message('note_on', note=62, velocity=100)),
		(480, mido.Message('note_off', note=62)),
	])

	data = motivic.midi_file.read_midi_file(path)

	assert [note.pitch for note in data.notes] == [62]
	assert "Dropped 1 notes" in caplog.text


def test_notes_from_all_tracks_are_merged_in_time_order (tmp_path: pathlib.Path) -> None:

	midi = mido.MidiFile(type=1, ticks_per_beat=480)

	for pitch, start in ((48, 480), (72, 0)):
		track = mido.MidiTrack()
		track.append(mido.Message('note_on', note=pitch, velocity=100, time=start))
		track.append(mido.Message('note_off', note=pitch, time=480))
		midi.tracks.append(track)

	path = str(tmp_path / "two_tracks.mid")
	midi.save(path)

	assert [note.pitch for note in motivic.midi_file.read_midi_file(path).notes] == [72, 48]


def test_missing_file_raises (tmp_path: pathlib.Path) -> None:

	with pytest.raises(OSError):
		motivic.midi_file.read_midi_file(str(tmp_path / "missing.mid"))


# ---------------------------------------------------------------------------
# write_snippets
# ---------------------------------------------------------------------------

def test_write_places_snippets_back_to_back (notes, tmp_path: pathlib.Path) -> None:

	path = str(tmp_path / "out.mid")

	first = motivic.snippet.Snippet(notes([60, 64], duration=0.5))
	second = motivic.snippet.Snippet(notes([67, 72]))

	motivic.midi_file.write_snippets(path, [first, second], bpm=140)

	midi = mido.MidiFile(path)

	assert midi.type == 1
	assert midi.ticks_per_beat == 480

	tempos = [message for message in midi.tracks[0] if message.type == 'set_tempo']
	assert tempos[0].tempo == mido.bpm2tempo(140)

	data = motivic.midi_file.read_midi_file(path)

	# The first snippet is one beat long, so the second starts at beat 1.
	assert [(note.pitch, note.start_time) for note in data.notes] == [(60, 0.0), (64, 0.5), (67, 1.0), (72, 2.0)]


def test_write_clamps_to_midi_range (tmp_path: pathlib.Path) -> None:

	path = str(tmp_path / "clamped.mid")
	snippet = motivic.snippet.Snippet([
		motivic.note.Note(pitch=130, start_time=0.0, duration=1.0, velocity=200),
		motivic.note.Note(pitch=-5, start_time=1.0, duration=1.0, velocity=64),
	])

	motivic.midi_file.write_snippets(path, [snippet])

	note_ons = [message for message in mido.MidiFile(path).tracks[1] if message.type == 'note_on']

	assert [(message.note, message.velocity) for message in note_ons] == [(127, 127), (0, 64)]
