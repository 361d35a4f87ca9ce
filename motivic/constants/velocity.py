"""MIDI velocity constants.

Velocity is the MIDI attack strength (0-127). These constants define the
defaults used when notes are created without an explicit velocity and the
amounts applied by articulations.
"""

DEFAULT_VELOCITY = 100
DEFAULT_RELEASE_VELOCITY = 0

# Added by accent-style articulations.
ACCENT_BOOST = 20

# MIDI standard range
MIN_VELOCITY = 0
MAX_VELOCITY = 127
