"""Beat-based duration constants for events.

All values are in **beats**, where 1.0 = one quarter note. Surfaces carry only
these relative durations; a performer turns them into time::

    import cantus.builders as b
    import cantus.constants.durations as dur

    b.note(60, dur.EIGHTH)
    b.rest(dur.DOTTED_QUARTER)
"""

import fractions

THIRTYSECOND = 0.125
SIXTEENTH = 0.25
DOTTED_SIXTEENTH = 0.375
TRIPLET_EIGHTH = fractions.Fraction(1, 3)
EIGHTH = 0.5
DOTTED_EIGHTH = 0.75
TRIPLET_QUARTER = fractions.Fraction(2, 3)
QUARTER = 1
DOTTED_QUARTER = 1.5
HALF = 2
DOTTED_HALF = 3
WHOLE = 4
