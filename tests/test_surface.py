import itertools

import pytest

import cantus.builders as b
import cantus.events
import cantus.surface


def _note (pitch: int) -> cantus.events.Note:

	return cantus.events.Note(pitch, 1, 100)


def test_empty_head ():

	"""No head, no events."""

	generator = cantus.surface.SurfaceGenerator(None)

	assert generator.generate() == ()
	assert generator.finished


def test_linear_chain ():

	"""A two-note chain produces exactly those two notes."""

	head = b.note(60, 1, 100)
	head >> b.note(64, 1, 100)

	assert cantus.surface.generate_surface(head) == (_note(60), _note(64))


def test_blank_silence_never_reaches_surface ():

	"""Zero-length silences are dropped wherever they appear; real silences are kept."""

	head = b.seq(b.rest(0), b.note(60, 1, 100), b.rest(0), b.rest(2), b.note(64, 1, 100), b.rest(0))

	assert cantus.surface.generate_surface(head) == (_note(60), cantus.events.Silence(2), _note(64))


@pytest.mark.parametrize("index", [0, 1, 2])
def test_choice_follows_random_source (fixed_random, index):

	"""With a fixed source a Choice generates exactly what the chosen branch would."""

	branches = [b.note(60, 1, 100), b.chord([62, 65], 2, 90), b.rest(3)]
	alone = cantus.surface.generate_surface(b.seq(branches[index].clone()))

	choice = b.choice(*branches, rng=fixed_random.for_index(index, 3))

	assert cantus.surface.generate_surface(choice) == alone


def test_choice_returns_to_continuation (fixed_random):

	"""After the chosen branch, control moves on to the choice's continuation."""

	head = b.seq(
		b.note(60, 1, 100),
		b.choice(b.note(62, 1, 100), b.note(64, 1, 100), rng=fixed_random.for_index(1, 2)),
		b.note(72, 1, 100)
	)

	assert cantus.surface.generate_surface(head) == (_note(60), _note(64), _note(72))


def test_choice_inside_repeat (fixed_random):

	"""A repeated choice returns to the repeat after every pass."""

	choice = b.choice(b.note(60, 1, 100), rng=fixed_random(0.0))
	head = b.seq(b.repeat(3, choice), b.note(72, 1, 100))

	assert cantus.surface.generate_surface(head) == (_note(60), _note(60), _note(60), _note(72))


def test_cycle_round_robin ():

	"""A cycle reached four times plays its branches in order b0, b1, b0, b1."""

	head = b.repeat(4, b.cycle(b.note(60, 1, 100), b.note(62, 1, 100)))

	assert cantus.surface.generate_surface(head) == (_note(60), _note(62), _note(60), _note(62))


def test_cycle_with_continuation ():

	"""A cycle hands control to its continuation after the chosen branch."""

	head = b.seq(b.cycle(b.seq(b.note(60, 1, 100), b.note(61, 1, 100)), b.note(62, 1, 100)), b.note(72, 1, 100))

	assert cantus.surface.generate_surface(head) == (_note(60), _note(61), _note(72))


def test_repeat_then_continuation ():

	"""Repeat(3, C4) followed by C5 plays C4 three times, then C5."""

	head = b.repeat(3, b.note(60, 1, 100))
	head >> b.note(72, 1, 100)

	assert cantus.surface.generate_surface(head) == (_note(60), _note(60), _note(60), _note(72))


def test_repeat_of_a_phrase ():

	"""A multi-node body is repeated as a whole."""

	head = b.seq(b.repeat(2, b.seq(b.note(60, 1, 100), b.note(64, 1, 100))), b.note(67, 1, 100))

	assert cantus.surface.generate_surface(head) == (_note(60), _note(64), _note(60), _note(64), _note(67))


def test_zero_repeat_skips_body ():

	"""A repeat with nothing left goes straight to its continuation."""

	head = b.seq(b.repeat(0, b.note(60, 1, 100)), b.note(72, 1, 100))

	assert cantus.surface.generate_surface(head) == (_note(72),)


def test_interval_at_head_is_blank ():

	"""An interval with nothing before it produces no event."""

	assert cantus.surface.generate_surface(b.interval(2)) == ()


def test_interval_after_note ():

	"""An interval after C4 plays D4."""

	head = b.seq(b.note(60, 1, 100), b.interval(2))

	assert cantus.surface.generate_surface(head) == (_note(60), _note(62))


def test_interval_in_repeat_accumulates ():

	"""Each interval transposes the note generated just before it."""

	head = b.seq(b.note(60, 1, 100), b.repeat(3, b.interval(2)))

	assert cantus.surface.generate_surface(head) == (_note(60), _note(62), _note(64), _note(66))


def test_function_node_sees_surface_so_far ():

	"""Functions are handed everything generated before them."""

	head = b.seq(
		b.note(60, 1, 100),
		b.note(64, 1, 100),
		b.fun(lambda surface: cantus.events.Chord([event.pitch for event in surface], 2, 80))
	)

	assert cantus.surface.generate_surface(head)[-1] == cantus.events.Chord((60, 64), 2, 80)


def test_function_node_must_return_event ():

	"""A function returning something other than an Event is an error."""

	with pytest.raises(TypeError):
		cantus.surface.generate_surface(b.fun(lambda surface: None))


def test_step_by_step ():

	"""step() produces one event per call and None once finished."""

	generator = cantus.surface.SurfaceGenerator(b.seq(b.note(60, 1, 100), b.rest(0), b.note(64, 1, 100)))

	assert generator.step() == _note(60)
	assert generator.step() == cantus.events.Silence(0)
	assert not generator.finished
	assert generator.step() == _note(64)
	assert generator.finished
	assert generator.step() is None
	assert generator.surface == (_note(60), _note(64))
	assert generator.steps == 3


def test_endless_graph_with_budget ():

	"""A looping graph keeps generating; a step budget bounds each call."""

	head = b.note(60, 1, 100)
	head >> b.note(62, 1, 100) >> head

	generator = cantus.surface.SurfaceGenerator(head)

	assert generator.generate(max_steps=3) == (_note(60), _note(62), _note(60))
	assert not generator.finished
	assert generator.generate(max_steps=2) == (_note(60), _note(62), _note(60), _note(62), _note(60))


def test_endless_cycle_consumed_lazily ():

	"""Endless pieces can be consumed lazily with islice."""

	cycle = b.cycle(b.note(60, 1, 100), b.note(67, 1, 100))
	head = b.note(48, 1, 100)
	head >> cycle >> head

	events = list(itertools.islice(cantus.surface.SurfaceGenerator(head), 6))

	assert [event.pitch for event in events] == [48, 60, 48, 67, 48, 60]


def test_negative_budget_raises ():

	"""A negative step budget is rejected."""

	with pytest.raises(ValueError):
		cantus.surface.SurfaceGenerator(b.note(60)).generate(max_steps=-1)


def test_surface_is_independent_of_graph ():

	"""The surface is a tuple of events, unaffected by later graph changes."""

	head = b.note(60, 1, 100)
	surface = cantus.surface.generate_surface(head)

	head >> b.note(64, 1, 100)

	assert isinstance(surface, tuple)
	assert surface == (_note(60),)
