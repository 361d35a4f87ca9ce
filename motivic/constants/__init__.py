"""Constants for motivic.

This package contains two sets of constants:

- ``motivic.constants.durations`` - Beat-based durations used by articulations and segmentation
- ``motivic.constants.velocity`` - MIDI velocity constants

MIDI file constants used by the file adapter and the segmenter are defined
here directly.
"""

# Control-change number whose events mark phrase boundaries in an input file.
MARKER_CONTROL = 20

# Output resolution for written MIDI files.
DEFAULT_TICKS_PER_BEAT = 480

DEFAULT_BPM = 120.0
DEFAULT_BEATS_PER_BAR = 4

# Note starts closer than this (in beats) are one simultaneity when reading chords.
SIMULTANEITY_TOLERANCE = 0.05
