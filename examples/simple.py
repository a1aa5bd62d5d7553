import logging

import cantus
import cantus.builders as b
import cantus.constants.durations as dur


logging.basicConfig(level=logging.INFO)

# A C major arpeggio played three times, a step up, then a closing chord.
head = b.seq(
	b.repeat(3, b.seq(b.note(60, dur.EIGHTH), b.note(64, dur.EIGHTH), b.note(67, dur.QUARTER))),
	b.interval(2, dur.HALF),
	b.rest(dur.QUARTER),
	b.chord([60, 64, 67, 72], dur.WHOLE, [100, 70]),
)

surface = cantus.generate_surface(head)

for event in surface:
	print(event)

cantus.MidiTranscription().perform(surface, name="Simple").save("simple")
