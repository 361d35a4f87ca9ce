"""Standard MIDI file input and output, built on ``mido``.

Reading flattens every track into one list of :class:`~motivic.note.Note`
sorted by start time, plus the phrase markers (control-change 20 by default)
that the segmenter uses as snippet boundaries. All times are converted from
ticks to beats.

Writing lays snippets back to back on a single note track of a type 1 file,
with a separate conductor track carrying tempo and time signature.
"""

import collections
import dataclasses
import logging
import typing

import mido

import motivic.constants
import motivic.constants.velocity
import motivic.note
import motivic.snippet


logger = logging.getLogger(__name__)


@dataclasses.dataclass
class MidiFileData:

	"""
	The contents of a MIDI file in beats: notes, phrase markers and timing metadata.
	"""

	notes: typing.List[motivic.note.Note]
	markers: typing.List[float]
	ticks_per_beat: int
	beats_per_bar: int = motivic.constants.DEFAULT_BEATS_PER_BAR
	bpm: float = motivic.constants.DEFAULT_BPM


def _clamp_data_byte (value: int) -> int:

	return max(motivic.constants.velocity.MIN_VELOCITY, min(motivic.constants.velocity.MAX_VELOCITY, int(value)))


def read_midi_file (path: str, marker_control: int = motivic.constants.MARKER_CONTROL) -> MidiFileData:

	"""Read notes and phrase markers from a standard MIDI file.

	Note-on / note-off pairs are matched per channel and pitch, first in first
	out; a note-on with velocity 0 counts as a note-off. Notes still sounding
	at the end of their track are dropped. Only the first tempo and time
	signature are kept.

	Parameters:
		path: File to read.
		marker_control: Control-change number whose events are phrase markers.

	Returns:
		The notes (sorted by start time) and markers (ascending) in beats,
		with the file's resolution, time signature numerator and tempo.

	Raises:
		OSError: If the file cannot be opened.
		EOFError, OSError, ValueError: Whatever ``mido`` raises for a damaged file.
	"""

	midi = mido.MidiFile(path)
	ticks_per_beat = midi.ticks_per_beat

	notes: typing.List[motivic.note.Note] = []
	marker_ticks: typing.List[int] = []
	beats_per_bar: typing.Optional[int] = None
	bpm: typing.Optional[float] = None

	for track in midi.tracks:

		tick = 0
		sounding: typing.Dict[typing.Tuple[int, int], typing.Deque[typing.Tuple[int, int]]] = collections.defaultdict(collections.deque)

		for message in track:

			tick += message.time

			if message.type == 'note_on' and message.velocity > 0:
				sounding[(message.channel, message.note)].append((tick, message.velocity))

			elif message.type in ('note_on', 'note_off'):

				key = (message.channel, message.note)

				if not sounding[key]:
					logger.debug(f"Unmatched note-off for note {message.note} on channel {message.channel} at tick {tick}")
					continue

				start_tick, velocity = sounding[key].popleft()
				release_velocity = message.velocity if message.type == 'note_off' else 0

				notes.append(motivic.note.Note(
					pitch = message.note,
					start_time = start_tick / ticks_per_beat,
					duration = (tick - start_tick) / ticks_per_beat,
					velocity = velocity,
					release_velocity = release_velocity,
					channel = message.channel
				))

			elif message.type == 'control_change' and message.control == marker_control:
				marker_ticks.append(tick)

			elif message.type == 'set_tempo' and bpm is None:
				bpm = mido.tempo2bpm(message.tempo)

			elif message.type == 'time_signature' and beats_per_bar is None:
				beats_per_bar = message.numerator

		unfinished = sum(len(queue) for queue in sounding.values())

		if unfinished:
			logger.warning(f"Dropped {unfinished} notes with no note-off in {path}")

	notes.sort(key=lambda note: note.start_time)

	logger.info(f"Read {len(notes)} notes and {len(marker_ticks)} markers from {path}")

	return MidiFileData(
		notes = notes,
		markers = sorted(tick / ticks_per_beat for tick in marker_ticks),
		ticks_per_beat = ticks_per_beat,
		beats_per_bar = beats_per_bar or motivic.constants.DEFAULT_BEATS_PER_BAR,
		bpm = bpm or motivic.constants.DEFAULT_BPM
	)


def write_snippets (
	path: str,
	snippets: typing.Iterable[motivic.snippet.Snippet],
	bpm: float = motivic.constants.DEFAULT_BPM,
	beats_per_bar: int = motivic.constants.DEFAULT_BEATS_PER_BAR,
	ticks_per_beat: int = motivic.constants.DEFAULT_TICKS_PER_BEAT
) -> None:

	"""Write snippets one after another into a type 1 MIDI file.

	Each snippet starts where the previous one's ``end_time`` finishes. Pitch
	and velocities are clamped to 0–127.

	Parameters:
		path: File to write.
		snippets: Snippets in playback order.
		bpm: Tempo written to the conductor track.
		beats_per_bar: Time signature numerator written to the conductor track.
		ticks_per_beat: File resolution.
	"""

	midi = mido.MidiFile(type=1, ticks_per_beat=ticks_per_beat)

	conductor = mido.MidiTrack()
	midi.tracks.append(conductor)
	conductor.append(mido.MetaMessage('set_tempo', tempo=mido.bpm2tempo(bpm), time=0))
	conductor.append(mido.MetaMessage('time_signature', numerator=beats_per_bar, denominator=4, time=0))

	track = mido.MidiTrack()
	midi.tracks.append(track)

	# (absolute tick, order, message): note-offs sort before note-ons on the same tick.
	events: typing.List[typing.Tuple[int, int, mido.Message]] = []
	offset = 0.0
	snippet_count = 0

	for snippet in snippets:

		for note in snippet.notes:

			start_tick = max(0, round((offset + note.start_time) * ticks_per_beat))
			end_tick = max(start_tick, round((offset + note.end_time) * ticks_per_beat))
			pitch = _clamp_data_byte(note.pitch)

			events.append((start_tick, 1, mido.Message('note_on', channel=note.channel, note=pitch, velocity=_clamp_data_byte(note.velocity))))
			events.append((end_tick, 0, mido.Message('note_off', channel=note.channel, note=pitch, velocity=_clamp_data_byte(note.release_velocity))))

		offset += snippet.end_time
		snippet_count += 1

	events.sort(key=lambda event: (event[0], event[1]))

	last_tick = 0

	for tick, _, message in events:
		track.append(message.copy(time=tick - last_tick))
		last_tick = tick

	midi.save(path)

	logger.info(f"Wrote {snippet_count} snippets ({len(events) // 2} notes) to {path}")
