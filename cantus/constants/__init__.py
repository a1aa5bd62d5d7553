"""Constants for cantus.

- ``cantus.constants.durations`` - Beat-based durations for events
- ``cantus.constants.effort`` - Default effort (MIDI velocity) values

The default MIDI file resolution is re-exported here.
"""

# Ticks per beat used by cantus.midi_file.MidiTranscription.
MIDI_RESOLUTION = 96
