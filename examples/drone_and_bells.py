"""
cantus - Drone and Bells

An endless generative piece. A low drone note alternates with a bell figure
chosen at random from three phrases; one of the phrases climbs by intervals
from whatever the bells played last, so the line drifts upwards and back.

How it works
────────────
The drone links back to itself through a Cycle, so the graph never ends.
Generation is lazy: ``itertools.islice`` takes as many events as we ask
for and leaves the rest of the piece unplayed.

How to run
──────────
1. Run: python examples/drone_and_bells.py
2. Open drone_and_bells.mid in a DAW or a MIDI player.

Tweakable parameters
────────────────────
- EVENTS: How many events to render.
- SEED: Change it for a different path through the choices.
"""

import itertools
import logging

import cantus
import cantus.builders as b
import cantus.constants.durations as dur
import cantus.csound


logging.basicConfig(level=logging.INFO)

EVENTS = 64
SEED = 7

rng = cantus.SystemRandomSource(seed=SEED)

bells = b.choice(
	b.seq(b.note(72, dur.EIGHTH, 90), b.note(79, dur.EIGHTH, 80), b.note(76, dur.QUARTER, 70)),
	b.seq(b.interval(2, dur.EIGHTH), b.interval(3, dur.EIGHTH), b.rest(dur.QUARTER)),
	b.chord([72, 76, 79], dur.HALF, [90, 60]),
	rng = rng
)

drone = b.note(36, dur.WHOLE, 50)
drone >> b.cycle(bells, b.rest(dur.HALF)) >> drone

surface = list(itertools.islice(cantus.SurfaceGenerator(drone), EVENTS))

cantus.MidiTranscription().perform(surface, name="Drone and Bells").save("drone_and_bells")
cantus.csound.ScoreWriter(instruments={1: ["pitch", "effort"]}).write(surface, "drone_and_bells.sco")
