"""Csound score output.

:class:`ScoreWriter` performs a surface as Csound ``i`` statements::

	i <instrument>	<start>	<duration>	<attribute>...

Start times and durations are in beats. Each note, and each pitch of a chord,
becomes one statement; silences only move the start time on. The attributes
written after the duration are declared per instrument:

- ``pitch``: Csound octave.pitch-class notation (MIDI 60 → ``8.00``)
- ``midi``: the MIDI note number
- ``hertz``: the frequency in hertz
- ``effort``: the effort (velocity)
"""

import logging
import pathlib
import typing

import cantus.events
import cantus.performance
import cantus.pitch


logger = logging.getLogger(__name__)

ATTRIBUTES = ("pitch", "midi", "hertz", "effort")


def format_number (value: typing.Union[int, float, cantus.events.Duration]) -> str:

	"""
	Format a time or duration in beats for a score statement (``1.5``, ``2``, ``0.333333``).
	"""

	return f"{float(value):g}"


def format_pitch (pitch: int) -> str:

	"""Format a MIDI note number in Csound octave.pitch-class notation.

	Example:
		```python
		format_pitch(60)   # → "8.00"
		format_pitch(69)   # → "8.09"
		```
	"""

	octave, pitch_class = divmod(pitch, 12)

	return f"{octave + 3}.{pitch_class:02d}"


class ScoreWriter:

	"""
	Performance visitor that renders a surface as a Csound score.
	"""

	def __init__ (self, instruments: typing.Optional[typing.Dict[int, typing.Sequence[str]]] = None) -> None:

		"""Declare the available instruments and the attributes each one receives.

		Parameters:
			instruments: Maps an instrument number to its attribute names, e.g.
				``{1: ["pitch", "effort"]}``.
		"""

		self.instruments: typing.Dict[int, typing.List[str]] = {}

		for instrument, attributes in (instruments or {}).items():

			unknown = [name for name in attributes if name not in ATTRIBUTES]

			if unknown:
				raise ValueError(f"Unknown attributes for instrument {instrument}: {unknown}. Expected some of {ATTRIBUTES}.")

			self.instruments[instrument] = list(attributes)

		self._instrument = 0
		self._time: cantus.events.Duration = 0
		self._lines: typing.List[str] = []


	def score (self, surface: typing.Iterable[cantus.events.Event], instrument: int = 1) -> str:

		"""Return the score text for ``surface`` played by ``instrument``.

		Raises:
			ValueError: If ``instrument`` has not been declared.
		"""

		if instrument not in self.instruments:
			raise ValueError(f"Instrument {instrument} is undefined!")

		self._instrument = instrument
		self._time = 0
		self._lines = []

		cantus.performance.perform_surface(surface, self)

		return "".join(line + "\n" for line in self._lines)


	def write (self, surface: typing.Iterable[cantus.events.Event], path: typing.Union[str, pathlib.Path], instrument: int = 1) -> None:

		"""
		Write the score for ``surface`` to ``path``.
		"""

		text = self.score(surface, instrument)

		pathlib.Path(path).write_text(text)
		logger.info(f"Saved {path} ({len(self._lines)} statements)")


	def on_silence (self, event: cantus.events.Silence) -> None:

		self._time += event.duration


	def on_note (self, event: cantus.events.Note) -> None:

		self._statement(event.pitch, event.effort, event.duration)
		self._time += event.duration


	def on_chord (self, event: cantus.events.Chord) -> None:

		for pitch, effort in event.pitch_with_effort():
			self._statement(pitch, effort, event.duration)

		self._time += event.duration


	def _statement (self, pitch: int, effort: int, duration: cantus.events.Duration) -> None:

		fields = [
			f"i {self._instrument}",
			format_number(self._time),
			format_number(duration),
		]

		for attribute in self.instruments[self._instrument]:
			fields.append(self._format_attribute(attribute, pitch, effort))

		self._lines.append("\t".join(fields))


	def _format_attribute (self, attribute: str, pitch: int, effort: int) -> str:

		if attribute == "pitch":
			return format_pitch(cantus.pitch.midi_pitch(pitch))

		if attribute == "midi":
			return str(cantus.pitch.midi_pitch(pitch))

		if attribute == "hertz":
			return f"{cantus.pitch.hertz(pitch):.3f}"

		return str(effort)
