"""Pitch classes and pitch conversion helpers.

Pitches are MIDI note numbers (``int``, C4 = 60) or frequencies in hertz
(``float``). The casts :func:`midi_pitch` and :func:`hertz` accept either
representation and normalise to the requested one.

Module-level constants:
- `PITCH_CLASSES`: The twelve canonical pitch classes, ordered by ordinal.
  Accidental names follow LilyPond (``cis``, ``dis``, ...).
"""

import dataclasses
import math
import typing


A4_HERTZ = 440.0
A4_NOTE_NUMBER = 69


@dataclasses.dataclass(frozen=True, order=True)
class PitchClass:

	"""
	One of the twelve pitch classes, ordered by ordinal (C = 0 ... B = 11).
	"""

	ordinal: int
	name: str = dataclasses.field(compare=False)


	@classmethod
	def for_pitch (cls, pitch: int) -> "PitchClass":

		"""Return the canonical pitch class of a MIDI note number.

		Works for any integer, including negative ones.

		Example:
			```python
			PitchClass.for_pitch(61).name   # → "cis"
			PitchClass.for_pitch(-1).name   # → "b"
			```
		"""

		return PITCH_CLASSES[((pitch % 12) + 12) % 12]


	def __str__ (self) -> str:

		return self.name


PITCH_CLASSES: typing.Tuple[PitchClass, ...] = tuple(
	PitchClass(ordinal=ordinal, name=name)
	for ordinal, name in enumerate([
		"c", "cis",
		"d", "dis",
		"e",
		"f", "fis",
		"g", "gis",
		"a", "ais",
		"b",
	])
)


def note_number_to_hertz (pitch: int) -> float:

	"""
	Convert a MIDI note number to a frequency in hertz (A4 = 440 Hz).
	"""

	return A4_HERTZ * (2 ** ((pitch - A4_NOTE_NUMBER) / 12.0))


def hertz_to_note_number (frequency: float) -> int:

	"""
	Convert a frequency in hertz to the nearest MIDI note number.
	"""

	if frequency <= 0:
		raise ValueError(f"Frequency must be positive, got {frequency}")

	return int(round(A4_NOTE_NUMBER + 12 * math.log2(frequency / A4_HERTZ)))


def _is_note_number (value: typing.Any) -> bool:

	# bool is an int subclass but never a pitch.
	return isinstance(value, int) and not isinstance(value, bool)


def midi_pitch (value: typing.Union[int, float]) -> int:

	"""Cast a pitch value to a MIDI note number.

	Integers are already note numbers; floats are taken as hertz.

	Raises:
		TypeError: For any other type.
	"""

	if _is_note_number(value):
		return value

	if isinstance(value, float):
		return hertz_to_note_number(value)

	raise TypeError(f"Cannot cast {type(value).__name__} to midi pitch")


def hertz (value: typing.Union[int, float]) -> float:

	"""Cast a pitch value to a frequency in hertz.

	Integers are taken as MIDI note numbers; floats are already hertz.

	Raises:
		TypeError: For any other type.
	"""

	if _is_note_number(value):
		return note_number_to_hertz(value)

	if isinstance(value, float):
		return value

	raise TypeError(f"Cannot cast {type(value).__name__} to hertz")
