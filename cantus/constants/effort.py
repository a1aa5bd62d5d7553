"""Effort (MIDI velocity) constants.

Effort is the attack strength of a note or chord (0-127).
"""

DEFAULT_EFFORT = 64

MIN_EFFORT = 0
MAX_EFFORT = 127
