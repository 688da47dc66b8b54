"""
pianopractice - scale, arpeggio and chord exercises for a MIDI keyboard.

Give it a practice configuration (a mode, a key, a scale or chord quality, a
hand and an octave) and it produces an immutable exercise: an ordered list of
steps, each holding the MIDI notes to play and how to play them. A tracker
then follows a player through the exercise note by note.

What it covers:

- **Scales.** Eight modes, one octave up and back down, either hand or both
  hands in parallel octaves.
- **Arpeggios.** Seven chord qualities over one or two octaves.
- **Chords by key.** The diatonic triads or seventh chords of any key, each
  walked through its inversions, or voice-led from degree to degree.
- **Chords by type.** One chord quality planed across all twelve roots, in
  chromatic or circle-of-fifths order.
- **Chord progressions.** A small library of named progressions (``I - V``,
  ``ii - V - I``, ``I - ♭VII - IV`` and more) in any key.
- **Key auto-progression.** Finish an exercise and the tracker moves on to
  the next key around the circle of fifths.

Minimal example:

    ```python
    import pianopractice

    settings = pianopractice.PracticeSettings(key=pianopractice.Key.G)
    exercise = settings.build_exercise()

    tracker = pianopractice.PracticeTracker(settings)
    tracker.events.on("highlighted_notes_changed", print)
    tracker.start()
    tracker.on_note_on(67)
    ```

Run ``python -m pianopractice --help`` for the command-line interface.

Package-level exports: ``PracticeSettings``, ``PracticeTracker``,
``PracticeMode``, ``Key``, ``Note``, ``HandSelection``, ``build_exercise``.
"""

import pianopractice.builders

# Register the built-in builders.
import pianopractice.builders.arpeggios
import pianopractice.builders.chord_progressions
import pianopractice.builders.chords_by_key
import pianopractice.builders.chords_by_type
import pianopractice.builders.scales

import pianopractice.config
import pianopractice.notes
import pianopractice.tracker


PracticeSettings = pianopractice.config.PracticeSettings
PracticeTracker = pianopractice.tracker.PracticeTracker
PracticeMode = pianopractice.builders.PracticeMode
Key = pianopractice.notes.Key
Note = pianopractice.notes.Note
HandSelection = pianopractice.notes.HandSelection
build_exercise = pianopractice.builders.build_exercise
