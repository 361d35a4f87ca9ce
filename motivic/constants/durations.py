"""Beat-based duration constants.

All values are in **beats**, where 1.0 = one quarter note::

    import motivic.constants.durations as dur

    note = motivic.note.Note(pitch=60, start_time=0.0, duration=dur.EIGHTH)
"""

THIRTYSECOND = 0.125
SIXTEENTH = 0.25
EIGHTH = 0.5
DOTTED_EIGHTH = 0.75
QUARTER = 1.0
DOTTED_QUARTER = 1.5
HALF = 2.0
WHOLE = 4.0

# Longest note kept when passages are merged beat by beat.
MAX_MERGED_DURATION = QUARTER

# Fraction of the written duration that sounds under each articulation.
STACCATO_RATIO = 0.5
STACCATISSIMO_RATIO = 0.25
