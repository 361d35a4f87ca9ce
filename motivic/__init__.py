"""
Motivic - a motif extraction and transformation engine for MIDI note streams.

Motivic takes a flat, time-ordered stream of notes, cuts it into short
reusable fragments ("snippets"), and reduces each to a canonical pitch-class
shape so recurring motifs can be recognised and counted. Snippets can then be
reworked against any target harmony while staying musically coherent.

What it does:

- **Segmentation.** Split a stream at phrase markers (control-change 20 in
  a MIDI file) or at bar lines, or read the chord progression of each
  marked phrase.
- **Canonical motifs.** Snippets compare equal when their pitch-class
  sequences match, regardless of octave; a library counts repeats.
- **Harmony-aware transforms.** Chromatic and diatonic transposition,
  fitting a melody to a new chord, chromatic and diatonic inversion,
  stepwise chord-tone adjustment.
- **Rhythm and time.** Retrograde (whole, melody-only, rhythm-only),
  augmentation and diminution, fragments.
- **Recombination.** Probabilistic note-by-note and beat-by-beat merging
  of two snippets, seedable for reproducible results.
- **Expression.** Crescendo / decrescendo lines and articulations.
- **Pluggable analysis.** Chord detection goes through the ``ChordOracle``
  protocol; ``TemplateChordOracle`` is the built-in default.

Minimal example:

    ```python
    import random

    import motivic

    library = motivic.SnippetLibrary(rng=random.Random(1))
    library.load_midi_snippets("phrases.mid")

    first = library.snippets[0]
    first.transpose_to_chord("Am")
    first.merge(library.snippets[1], first_weight=0.5)

    print(first.describe())
    ```

Package-level exports: ``Note``, ``Snippet``, ``Segmenter``,
``ChordProgression``, ``TemplateChordOracle``, ``SnippetLibrary``.
"""

import motivic.chord_oracle
import motivic.chord_progression
import motivic.library
import motivic.note
import motivic.segmenter
import motivic.snippet


Note = motivic.note.Note
Snippet = motivic.snippet.Snippet
Segmenter = motivic.segmenter.Segmenter
ChordProgression = motivic.chord_progression.ChordProgression
TemplateChordOracle = motivic.chord_oracle.TemplateChordOracle
SnippetLibrary = motivic.library.SnippetLibrary
