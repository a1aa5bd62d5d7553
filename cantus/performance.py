"""The contract between a generated surface and whatever performs it.

A performer receives each event of a surface in order through one of three
operations. Events carry relative durations only, so the performer keeps its
own running time offset. Performers must not mutate the events they receive.
"""

import typing

import cantus.events


@typing.runtime_checkable
class Performance (typing.Protocol):

	"""
	Protocol for performance visitors such as MIDI or Csound writers.
	"""

	def on_silence (self, event: cantus.events.Silence) -> typing.Any:

		...


	def on_note (self, event: cantus.events.Note) -> typing.Any:

		...


	def on_chord (self, event: cantus.events.Chord) -> typing.Any:

		...


def perform_surface (surface: typing.Iterable[cantus.events.Event], performance: Performance) -> None:

	"""
	Hand every event of a surface, in order and exactly once, to a performer.
	"""

	for event in surface:
		event.perform(performance)
