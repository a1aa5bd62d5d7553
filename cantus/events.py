"""Musical events: the values a surface is made of.

An event is one concrete sound or silence with a duration in beats. Events are
immutable and compare by value, so ``Note(60, 1, 100) == Note(60, 1.0, 100)``.
Surfaces carry no absolute timestamps; a performer accumulates durations in
order (see :mod:`cantus.performance`).
"""

import dataclasses
import numbers
import typing

import cantus.pitch


Duration = typing.Union[int, float, numbers.Rational]
Effort = typing.Union[int, typing.Tuple[int, ...]]


class Event:

	"""
	Base class for Silence, Note and Chord.
	"""

	duration: Duration


	def is_blank (self) -> bool:

		"""
		Return True if the event has zero duration and so never reaches a surface.
		"""

		return self.duration == 0


	def perform (self, performance: typing.Any) -> typing.Any:

		"""
		Dispatch this event to the matching operation of a performance visitor.
		"""

		raise NotImplementedError("Subclass responsibility")


def _check_duration (duration: Duration) -> None:

	if duration < 0:
		raise ValueError(f"Duration cannot be negative, got {duration}")


@dataclasses.dataclass(frozen=True)
class Silence (Event):

	"""
	Remain silent for the duration.
	"""

	duration: Duration


	def __post_init__ (self) -> None:

		_check_duration(self.duration)


	def perform (self, performance: typing.Any) -> typing.Any:

		return performance.on_silence(self)


@dataclasses.dataclass(frozen=True)
class Note (Event):

	"""
	A steady pitch held for a duration, struck with a given effort (MIDI velocity).
	"""

	pitch: int
	duration: Duration
	effort: int


	def __post_init__ (self) -> None:

		_check_duration(self.duration)


	def perform (self, performance: typing.Any) -> typing.Any:

		return performance.on_note(self)


	def pitch_class (self) -> cantus.pitch.PitchClass:

		"""
		Return the pitch class of this note.
		"""

		return cantus.pitch.PitchClass.for_pitch(self.pitch)


	def transpose (self, semitones: int, duration: typing.Optional[Duration] = None, effort: typing.Optional[int] = None) -> "Note":

		"""
		Return a new note shifted by ``semitones``, optionally overriding duration and effort.
		"""

		return Note(
			pitch = self.pitch + semitones,
			duration = self.duration if duration is None else duration,
			effort = self.effort if effort is None else effort
		)


@dataclasses.dataclass(frozen=True)
class Chord (Event):

	"""A set of pitches sounding together for one duration.

	``effort`` is either a single velocity for every pitch or a sequence of
	velocities paired with the pitches cyclically: efforts ``(100, 80)`` over
	pitches ``(60, 64, 67)`` give 60→100, 64→80, 67→100.
	"""

	pitches: typing.Tuple[int, ...]
	duration: Duration
	effort: Effort


	def __post_init__ (self) -> None:

		_check_duration(self.duration)

		# Normalise sequences to tuples so chords stay hashable and immutable.
		object.__setattr__(self, "pitches", tuple(self.pitches))

		if not isinstance(self.effort, int):
			efforts = tuple(self.effort)

			if not efforts:
				raise ValueError("Chord effort sequence cannot be empty")

			object.__setattr__(self, "effort", efforts)


	def perform (self, performance: typing.Any) -> typing.Any:

		return performance.on_chord(self)


	def efforts (self) -> typing.Tuple[int, ...]:

		"""
		Return the effort values as a tuple, even when a single effort was given.
		"""

		if isinstance(self.effort, int):
			return (self.effort,)

		return self.effort


	def pitch_with_effort (self) -> typing.Iterator[typing.Tuple[int, int]]:

		"""
		Iterate over ``(pitch, effort)`` pairs, cycling through the efforts.
		"""

		efforts = self.efforts()

		for i, pitch in enumerate(self.pitches):
			yield pitch, efforts[i % len(efforts)]


	def pitch_classes (self) -> typing.List[cantus.pitch.PitchClass]:

		"""
		Return the pitch class of every pitch, in chord order.
		"""

		return [cantus.pitch.PitchClass.for_pitch(pitch) for pitch in self.pitches]


	def transpose (self, semitones: int, duration: typing.Optional[Duration] = None, effort: typing.Optional[Effort] = None) -> "Chord":

		"""
		Return a new chord with every pitch shifted by ``semitones``.
		"""

		return Chord(
			pitches = tuple(pitch + semitones for pitch in self.pitches),
			duration = self.duration if duration is None else duration,
			effort = self.effort if effort is None else effort
		)


TRANSPOSABLE = (Note, Chord)
