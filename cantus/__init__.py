
"""
cantus - a generative engine for symbolic music.

A piece is a small graph of composition structures. Generating from the graph
walks it once and produces a *surface*: a flat, time-ordered tuple of events
(silences, notes and chords) that a performer writes out as a MIDI file or a
Csound score.

Structures:

- **Constant** - one fixed event (``note()``, ``chord()``, ``rest()``).
- **Interval** - transposes whatever note or chord came last (``interval()``).
- **Choice** - picks a branch at random each time it is reached (``choice()``).
- **Cycle** - steps through its branches in turn (``cycle()``).
- **Repeat** - plays its body a number of times, then moves on (``repeat()``).
- **FunctionNode** - any Python function of the surface so far (``fun()``).

Structures are chained with ``a >> b`` or ``seq(a, b, c)``. Choice, Cycle and
Repeat splice their continuation onto the end of the branch they hand control
to, so graphs can loop back on themselves: a piece ends when control reaches
a structure with nowhere left to go, and a piece built to loop plays forever.

Minimal example:

    ```python
    import cantus
    import cantus.builders as b

    head = b.seq(b.repeat(3, b.note(60)), b.note(72))
    surface = cantus.generate_surface(head)

    cantus.MidiTranscription().perform(surface, name="Example").save("example")
    ```

Randomness is injected per Choice (``rng=``) through any object with a
``sample()`` method returning a float in [0, 1), so pieces can be made
repeatable with ``SystemRandomSource(seed=42)``.

Package-level exports: ``SurfaceGenerator``, ``generate_surface``,
``Silence``, ``Note``, ``Chord``, ``PitchClass``, ``SystemRandomSource``,
``MidiTranscription``.
"""

import cantus.events
import cantus.midi_file
import cantus.pitch
import cantus.random_source
import cantus.surface


SurfaceGenerator = cantus.surface.SurfaceGenerator
generate_surface = cantus.surface.generate_surface
Silence = cantus.events.Silence
Note = cantus.events.Note
Chord = cantus.events.Chord
PitchClass = cantus.pitch.PitchClass
SystemRandomSource = cantus.random_source.SystemRandomSource
MidiTranscription = cantus.midi_file.MidiTranscription
