"""Composition graph: the structures that generate a surface.

A :class:`StructureNode` is a computation that produces events and decides
what happens next. Every node has one continuation link, set once with
:meth:`StructureNode.sequence` (or ``a >> b``), naming the node to activate
after the node's own subgraph finishes.

Branch-bearing nodes (:class:`Choice`, :class:`Cycle`, :class:`Repeat`) rewrite
links while a surface is generated: before handing control to a branch they
*splice* a continuation onto the tail of that branch, so control returns to
the right place when the branch ends. Graphs may therefore become cyclic.
Reachability (:meth:`StructureNode.includes`) and splicing track visited node
handles, so both terminate on any graph shape.

Nodes compare by identity. Every node (clones included) carries a unique
integer ``handle`` used for all membership bookkeeping.

Nodes are stateful: a :class:`Repeat` counts down, a :class:`Cycle` rotates
and splices change links. Build a graph, generate from it once, and rebuild it
to generate again. Nodes are not safe to activate from more than one thread.
"""

import copy
import itertools
import logging
import typing

import cantus.events
import cantus.random_source


logger = logging.getLogger(__name__)

SurfaceSoFar = typing.Sequence[cantus.events.Event]
GeneratorFunction = typing.Callable[[SurfaceSoFar], cantus.events.Event]

_handle_counter = itertools.count()


class SequencingError (RuntimeError):

	"""
	Raised when a continuation is set on a node that already has one.
	"""

	pass


class StructureNode:

	"""
	Base class for all composition graph nodes.
	"""

	def __init__ (self) -> None:

		"""
		Assign a fresh handle and an empty continuation slot.
		"""

		self.handle: int = next(_handle_counter)
		self._next: typing.Optional[StructureNode] = None


	def sequence (self, structure: "StructureNode") -> "StructureNode":

		"""Set the structure that is activated once this one has finished.

		Returns ``structure`` so calls can be chained.

		Raises:
			SequencingError: If a continuation is already set. Overwriting it
				would silently orphan part of the graph.
		"""

		if self._next is not None:
			raise SequencingError(f"{self!r} is already sequenced to {self._next!r}")

		self._next = structure

		return structure


	def __rshift__ (self, structure: "StructureNode") -> "StructureNode":

		"""
		``a >> b`` sequences ``b`` after ``a`` and returns ``b``, so ``a >> b >> c`` builds a chain.
		"""

		return self.sequence(structure)


	def has_next (self) -> bool:

		return self._next is not None


	def next_structure (self) -> typing.Optional["StructureNode"]:

		return self._next


	def activate (self) -> typing.Optional["StructureNode"]:

		"""
		Return the node that will actually generate the next event.
		"""

		return self


	def advance (self) -> typing.Optional["StructureNode"]:

		"""Activate and return the continuation, or ``None`` at the end of the graph.

		Activation may splice branches, so advancing and activating happen in
		one step, immediately before the next node is used.
		"""

		if self._next is None:
			return None

		return self._next.activate()


	def generate (self, surface: SurfaceSoFar) -> cantus.events.Event:

		"""
		Produce one event given everything generated before it. Call only after activation.
		"""

		raise NotImplementedError("Subclass responsibility")


	def branches (self) -> typing.List["StructureNode"]:

		"""
		Return the nodes this node owns besides its continuation.
		"""

		return []


	def structure (self) -> "StructureIterator":

		"""
		Iterate through the continuation chain starting at this node.
		"""

		return StructureIterator(self)


	def includes (self, target: "StructureNode") -> bool:

		"""Return True if ``target`` is reachable from this node.

		Follows continuations and descends into branches. Comparison is by
		identity and every node is visited at most once, so cyclic graphs are
		safe.
		"""

		visited: typing.Set[int] = set()
		pending: typing.List[StructureNode] = [self]

		while pending:

			node = pending.pop()

			if node.handle in visited:
				continue

			visited.add(node.handle)

			if node is target:
				return True

			pending.extend(node.branches())

			if node._next is not None:
				pending.append(node._next)

		return False


	def splice (self, target: "StructureNode", _visited: typing.Optional[typing.Set[int]] = None) -> None:

		"""Attach ``target`` at the end of this node's chain.

		Walks the continuation links to the tail and links ``target`` there.
		Branch-bearing nodes met on the way splice into their branches
		instead. Nodes already visited by this splice are skipped.
		"""

		visited: typing.Set[int] = set() if _visited is None else _visited
		node: typing.Optional[StructureNode] = self

		while node is not None and node.handle not in visited:
			visited.add(node.handle)
			node = node._splice_step(target, visited)


	def _splice_step (self, target: "StructureNode", visited: typing.Set[int]) -> typing.Optional["StructureNode"]:

		"""
		Splice at this node, returning the node to continue with (if any).
		"""

		if self._next is None:
			logger.debug(f"Splice: {self!r} → {target!r}")
			self._next = target
			return None

		return self._next


	def clone (self) -> "StructureNode":

		"""
		Return a shallow copy with its own handle and an empty continuation slot.
		"""

		twin = copy.copy(self)
		twin.handle = next(_handle_counter)
		twin._next = None

		return twin


	def __repr__ (self) -> str:

		return f"<{type(self).__name__} #{self.handle}>"


class Constant (StructureNode):

	"""
	Always generates a copy of one event.
	"""

	def __init__ (self, event: cantus.events.Event) -> None:

		super().__init__()
		self.event = event


	def generate (self, surface: SurfaceSoFar) -> cantus.events.Event:

		return copy.copy(self.event)


	def __repr__ (self) -> str:

		return f"<Constant #{self.handle} {self.event!r}>"


class Interval (StructureNode):

	"""Transposes the most recent note or chord already on the surface.

	With nothing to transpose (e.g. at the start of a surface) it generates a
	zero-duration Silence, which never reaches the surface.
	"""

	def __init__ (
		self,
		semitones: int,
		duration: typing.Optional[cantus.events.Duration] = None,
		effort: typing.Optional[cantus.events.Effort] = None
	) -> None:

		super().__init__()
		self.semitones = semitones
		self.duration = duration
		self.effort = effort


	def generate (self, surface: SurfaceSoFar) -> cantus.events.Event:

		for event in reversed(surface):
			if isinstance(event, cantus.events.TRANSPOSABLE):
				return event.transpose(self.semitones, self.duration, self.effort)

		return cantus.events.Silence(0)


class _Branching (StructureNode):

	"""
	Shared behaviour of Choice and Cycle: an ordered list of alternative branches.
	"""

	def __init__ (self, structures: typing.Sequence[StructureNode]) -> None:

		super().__init__()

		if not structures:
			raise ValueError(f"{type(self).__name__} needs at least one branch")

		self.structures: typing.List[StructureNode] = list(structures)


	def branches (self) -> typing.List[StructureNode]:

		return list(self.structures)


	def _splice_step (self, target: StructureNode, visited: typing.Set[int]) -> typing.Optional[StructureNode]:

		# Branches that already reach the target are left alone.
		for structure in self.structures:
			if not structure.includes(target):
				structure.splice(target, visited)

		return None


class Choice (_Branching):

	"""Chooses one branch uniformly at random each time it is activated, then proceeds.

	A chosen branch without a continuation is cloned and the clone is
	sequenced to this node's continuation, so separate activations never
	share one rewritten branch.
	"""

	def __init__ (self, *structures: StructureNode, rng: typing.Optional[cantus.random_source.RandomSource] = None) -> None:

		super().__init__(structures)
		self.rng = rng or cantus.random_source.SystemRandomSource()


	def activate (self) -> typing.Optional[StructureNode]:

		index = cantus.random_source.choose_index(self.rng, len(self.structures))
		structure = self.structures[index]

		logger.debug(f"Choice #{self.handle}: branch {index} of {len(self.structures)}")

		if not structure.has_next():
			structure = structure.clone()

			if self._next is not None:
				structure.sequence(self._next)

		return structure.activate()


class Cycle (_Branching):

	"""
	Activates its branches in round-robin order, returning to its own continuation after each.
	"""

	def __init__ (self, *structures: StructureNode) -> None:

		super().__init__(structures)

		# The first activation advances to index 0.
		self.position = len(self.structures) - 1


	def activate (self) -> typing.Optional[StructureNode]:

		self.position = (self.position + 1) % len(self.structures)
		structure = self.structures[self.position]

		logger.debug(f"Cycle #{self.handle}: branch {self.position} of {len(self.structures)}")

		if self._next is not None and not structure.includes(self._next):
			structure.splice(self._next)

		return structure.activate()


class Repeat (StructureNode):

	"""Activates its body a fixed number of times before proceeding.

	On each pass the Repeat splices itself onto the end of the body, so
	control comes back to it for the next countdown.
	"""

	def __init__ (self, repetitions: int, structure: StructureNode) -> None:

		super().__init__()

		if repetitions < 0:
			raise ValueError(f"Repetitions cannot be negative, got {repetitions}")

		self.remaining = repetitions
		self.body = structure


	def branches (self) -> typing.List[StructureNode]:

		return [self.body]


	def activate (self) -> typing.Optional[StructureNode]:

		if self.remaining == 0:
			return self.advance()

		self.remaining -= 1

		logger.debug(f"Repeat #{self.handle}: {self.remaining} remaining")

		if not self.body.includes(self):
			self.body.splice(self)

		return self.body.activate()


	def _splice_step (self, target: StructureNode, visited: typing.Set[int]) -> typing.Optional[StructureNode]:

		if not self.body.includes(target):
			self.body.splice(target, visited)

		return None


class FunctionNode (StructureNode):

	"""
	Lifts a function of the surface so far into a structure.
	"""

	def __init__ (self, function: GeneratorFunction) -> None:

		super().__init__()
		self.function = function


	def generate (self, surface: SurfaceSoFar) -> cantus.events.Event:

		return self.function(surface)


class StructureIterator:

	"""Lazy, restartable iteration over a chain of continuation links.

	Stops at the first node without a continuation. It does not descend into
	branches and does not detect cycles: only use it on chains known to be
	acyclic, such as freshly built sequences.
	"""

	def __init__ (self, head: typing.Optional[StructureNode]) -> None:

		self.head = head


	def __iter__ (self) -> typing.Iterator[StructureNode]:

		cursor = self.head

		while cursor is not None:
			yield cursor
			cursor = cursor.next_structure()


	def first (self) -> typing.Optional[StructureNode]:

		return self.head


	def last (self) -> typing.Optional[StructureNode]:

		"""
		Return the tail of the chain (the head itself if it has no continuation).
		"""

		tail = None

		for node in self:
			tail = node

		return tail


	def includes (self, structure: StructureNode) -> bool:

		"""
		Return True if ``structure`` (by identity) lies on the chain.
		"""

		return any(node is structure for node in self)


	__contains__ = includes
