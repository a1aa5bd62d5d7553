"""Builder functions for composing structure graphs.

These wrap raw values into structure nodes and chain nodes into sequences.
They are ordinary functions; import the module and call them explicitly:

```python
import cantus.builders as b
import cantus.surface

head = b.seq(
	b.note(60),
	b.repeat(2, b.interval(2)),
	b.choice(b.chord([60, 64, 67], 2), b.rest(2)),
)

surface = cantus.surface.generate_surface(head)
```
"""

import typing

import cantus.constants.effort
import cantus.events
import cantus.random_source
import cantus.structure


def silence (duration: cantus.events.Duration = 1) -> cantus.structure.Constant:

	"""
	Return a structure that stays silent for ``duration`` beats.
	"""

	return cantus.structure.Constant(cantus.events.Silence(duration))


rest = silence


def note (
	pitch: int,
	duration: cantus.events.Duration = 1,
	effort: int = cantus.constants.effort.DEFAULT_EFFORT
) -> cantus.structure.Constant:

	"""
	Return a structure that plays one note.
	"""

	return cantus.structure.Constant(cantus.events.Note(pitch, duration, effort))


def chord (
	pitches: typing.Sequence[int],
	duration: cantus.events.Duration = 1,
	effort: cantus.events.Effort = cantus.constants.effort.DEFAULT_EFFORT
) -> cantus.structure.Constant:

	"""Return a structure that plays several pitches together.

	``effort`` may be a sequence, paired with the pitches cyclically.
	"""

	return cantus.structure.Constant(cantus.events.Chord(tuple(pitches), duration, effort))


def interval (
	semitones: int,
	duration: typing.Optional[cantus.events.Duration] = None,
	effort: typing.Optional[cantus.events.Effort] = None
) -> cantus.structure.Interval:

	"""
	Return a structure that transposes the most recent note or chord.
	"""

	return cantus.structure.Interval(semitones, duration, effort)


def choice (*structures: cantus.structure.StructureNode, rng: typing.Optional[cantus.random_source.RandomSource] = None) -> cantus.structure.Choice:

	"""
	Return a structure that picks one of ``structures`` at random each time it is reached.
	"""

	return cantus.structure.Choice(*structures, rng=rng)


def cycle (*structures: cantus.structure.StructureNode) -> cantus.structure.Cycle:

	"""
	Return a structure that steps through ``structures`` in turn each time it is reached.
	"""

	return cantus.structure.Cycle(*structures)


def repeat (repetitions: int, structure: cantus.structure.StructureNode) -> cantus.structure.Repeat:

	"""
	Return a structure that plays ``structure`` ``repetitions`` times before moving on.
	"""

	return cantus.structure.Repeat(repetitions, structure)


def fun (function: cantus.structure.GeneratorFunction) -> cantus.structure.FunctionNode:

	"""Lift ``function(surface_so_far) -> Event`` into a structure.

	The function receives the events generated so far and must not modify them.
	"""

	return cantus.structure.FunctionNode(function)


def seq (*structures: cantus.structure.StructureNode) -> typing.Optional[cantus.structure.StructureNode]:

	"""Chain structures one after another and return the head.

	Each structure is sequenced onto the last node of the previous structure's
	chain, so arguments that are already chains are joined end to end. The
	chains must be acyclic.
	"""

	if not structures:
		return None

	head, *tail = structures
	previous = head

	for structure in tail:
		previous.structure().last().sequence(structure)
		previous = structure

	return head
