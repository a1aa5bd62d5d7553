import logging
import numbers
import typing

import mido

import cantus.constants
import cantus.events
import cantus.performance
import cantus.pitch


logger = logging.getLogger(__name__)


class MidiTranscription:

	"""Standard MIDI file performance of one or more surfaces.

	Each call to :meth:`perform` appends one track to a type 1 file. Durations
	in beats become ``round(duration * resolution)`` ticks.

	Example:
		```python
		transcription = cantus.midi_file.MidiTranscription()
		transcription.perform(surface, name="Example")
		transcription.save("example")    # writes example.mid
		```
	"""

	def __init__ (self, resolution: int = cantus.constants.MIDI_RESOLUTION) -> None:

		"""
		Create an empty MIDI file with ``resolution`` ticks per beat.
		"""

		if resolution <= 0:
			raise ValueError("Resolution must be positive")

		self.resolution = resolution
		self.midi_file = mido.MidiFile(type=1, ticks_per_beat=resolution)

		self._track: typing.Optional[mido.MidiTrack] = None
		self._channel = 0
		self._pending_ticks = 0
		self._sequence_count = 0


	def divisions (self, duration: cantus.events.Duration) -> int:

		"""
		Convert a duration in beats to MIDI ticks.
		"""

		if isinstance(duration, bool) or not isinstance(duration, numbers.Real):
			raise TypeError(f"Cannot convert {duration!r}:{type(duration).__name__} to midi time")

		return int(round(duration * self.resolution))


	def perform (
		self,
		surface: typing.Iterable[cantus.events.Event],
		name: typing.Optional[str] = None,
		channel: int = 0
	) -> "MidiTranscription":

		"""Append a track holding the performance of ``surface``.

		Tracks without a name are called "Untitled 1", "Untitled 2", and so on.
		Returns self so calls can be chained with :meth:`save`.
		"""

		if name is None:
			self._sequence_count += 1
			name = f"Untitled {self._sequence_count}"

		self._track = mido.MidiTrack()
		self._track.append(mido.MetaMessage("track_name", name=name, time=0))
		self._channel = channel
		self._pending_ticks = 0

		cantus.performance.perform_surface(surface, self)

		self._track.append(mido.MetaMessage("end_of_track", time=self._pending_ticks))
		self.midi_file.tracks.append(self._track)

		logger.debug(f"Performed track '{name}' ({len(self._track)} messages)")

		self._track = None

		return self


	def save (self, basename: str) -> str:

		"""
		Write the file to ``basename`` + ``.mid`` and return the filename.
		"""

		filename = basename + ".mid"

		self.midi_file.save(filename)
		logger.info(f"Saved {filename} ({len(self.midi_file.tracks)} tracks)")

		return filename


	def on_silence (self, event: cantus.events.Silence) -> None:

		self._pending_ticks += self.divisions(event.duration)


	def on_note (self, event: cantus.events.Note) -> None:

		self._sound([(event.pitch, event.effort)], event.duration)


	def on_chord (self, event: cantus.events.Chord) -> None:

		self._sound(list(event.pitch_with_effort()), event.duration)


	def _sound (self, voices: typing.List[typing.Tuple[int, int]], duration: cantus.events.Duration) -> None:

		"""
		Emit note_on for every voice, wait for the duration, then emit note_off for every voice.
		"""

		assert self._track is not None

		ticks = self.divisions(duration)

		for pitch, effort in voices:
			self._track.append(mido.Message("note_on", channel=self._channel, note=cantus.pitch.midi_pitch(pitch), velocity=effort, time=self._pending_ticks))
			self._pending_ticks = 0

		self._pending_ticks = ticks

		for pitch, effort in voices:
			self._track.append(mido.Message("note_off", channel=self._channel, note=cantus.pitch.midi_pitch(pitch), velocity=effort, time=self._pending_ticks))
			self._pending_ticks = 0
