"""Surface generation: walking a structure graph into an ordered list of events.

:class:`SurfaceGenerator` activates the head of a graph, asks each active node
for one event, drops blank (zero-duration) events and advances along the
continuations until a node has nowhere to go. All splicing happens lazily
during this single pass, once per activation.

A graph built to loop forever (say a Cycle whose branches keep returning to
it) generates forever. Nothing detects this. Use :meth:`SurfaceGenerator.step`,
iterate the generator lazily, or pass ``max_steps`` to
:meth:`SurfaceGenerator.generate` to bound such pieces:

```python
import itertools

first_bars = list(itertools.islice(cantus.surface.SurfaceGenerator(head), 32))
```
"""

import logging
import typing

import cantus.events
import cantus.structure


logger = logging.getLogger(__name__)

Surface = typing.Tuple[cantus.events.Event, ...]


class SurfaceGenerator:

	"""
	Re-enterable, single-pass generation of a surface from a structure graph.
	"""

	def __init__ (self, head: typing.Optional[cantus.structure.StructureNode]) -> None:

		"""
		Prepare to generate from ``head``; ``None`` yields an empty surface.
		"""

		self.head = head
		self.steps = 0
		self._events: typing.List[cantus.events.Event] = []
		self._cursor: typing.Optional[cantus.structure.StructureNode] = None
		self._started = False


	@property
	def finished (self) -> bool:

		"""
		True once the graph has no further node to activate.
		"""

		return self._started and self._cursor is None


	@property
	def surface (self) -> Surface:

		"""
		The non-blank events generated so far, as an immutable tuple.
		"""

		return tuple(self._events)


	def step (self) -> typing.Optional[cantus.events.Event]:

		"""Generate one event and advance the cursor.

		Returns the event produced by the active node (blank events are
		returned but not added to the surface), or ``None`` once finished.

		Raises:
			TypeError: If a node generates something that is not an Event.
		"""

		if not self._started:
			self._started = True
			self._cursor = self.head.activate() if self.head is not None else None

		if self._cursor is None:
			return None

		event = self._cursor.generate(self._events)

		if not isinstance(event, cantus.events.Event):
			raise TypeError(f"{self._cursor!r} generated {type(event).__name__}, expected an Event")

		if not event.is_blank():
			self._events.append(event)

		self.steps += 1
		self._cursor = self._cursor.advance()

		return event


	def __iter__ (self) -> typing.Iterator[cantus.events.Event]:

		"""
		Lazily yield each non-blank event as it is generated.
		"""

		while not self.finished:

			event = self.step()

			if event is not None and not event.is_blank():
				yield event


	def generate (self, max_steps: typing.Optional[int] = None) -> Surface:

		"""Run the generation loop and return the surface.

		Parameters:
			max_steps: Optional budget of generation steps for this call. With
				``None`` (the default) the loop runs until the graph ends, which
				for an endless graph is never.
		"""

		if max_steps is not None and max_steps < 0:
			raise ValueError("max_steps cannot be negative")

		logger.debug(f"Generating surface from {self.head!r}")

		taken = 0

		while not self.finished and (max_steps is None or taken < max_steps):
			self.step()
			taken += 1

		logger.debug(f"Generated {len(self._events)} events in {self.steps} steps")

		return self.surface


def generate_surface (head: typing.Optional[cantus.structure.StructureNode]) -> Surface:

	"""
	Generate the complete surface of a graph in one call.
	"""

	return SurfaceGenerator(head).generate()
