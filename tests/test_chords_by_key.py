import pianopractice.builders
import pianopractice.builders.chords_by_key
import pianopractice.chords
import pianopractice.exercise
import pianopractice.intervals
import pianopractice.notes


ChordsByKeyConfig = pianopractice.builders.chords_by_key.ChordsByKeyConfig
HandSelection = pianopractice.notes.HandSelection
Key = pianopractice.notes.Key


def _movement (voicings: list) -> int:

	"""Total semitone movement between consecutive same-size voicings."""

	return sum(
		sum(abs(a - b) for a, b in zip(first, second))
		for first, second in zip(voicings, voicings[1:])
	)


def test_diatonic_chord_names () -> None:

	chords = pianopractice.builders.chords_by_key.diatonic_chords(Key.C, pianopractice.intervals.ScaleType.MAJOR)

	assert [chord.name() for chord in chords] == ["C", "Dm", "Em", "F", "G", "Am", "B°"]


def test_triads_walk_an_inversion_arc () -> None:

	"""Root, 1st, 2nd, 1st on each of the seven degrees."""

	exercise = pianopractice.builders.build_exercise(ChordsByKeyConfig(key=Key.C))
	notes = [list(step.notes) for step in exercise]

	assert len(exercise) == 28
	assert notes[:4] == [[60, 64, 67], [64, 67, 72], [67, 72, 76], [64, 67, 72]]
	assert notes[4] == [62, 65, 69]
	assert all(step.step_type is pianopractice.exercise.StepType.SIMULTANEOUS for step in exercise)


def test_steps_carry_degree_and_numeral () -> None:

	exercise = pianopractice.builders.build_exercise(ChordsByKeyConfig(key=Key.C))
	label = exercise.steps[4].label

	assert label.display_name == "Dm"
	assert label.roman_numeral == "ii"
	assert label.degree == 2
	assert exercise.steps[5].label.display_name == "Dm (1st inv)"
	assert exercise.steps[24].label.roman_numeral == "vii°"


def test_seventh_chords_walk_a_longer_arc () -> None:

	exercise = pianopractice.builders.build_exercise(ChordsByKeyConfig(key=Key.C, include_seventh_chords=True))

	assert len(exercise) == 42
	assert list(exercise.steps[3].notes) == [71, 72, 76, 79]
	assert exercise.steps[0].label.roman_numeral == "Imaj7"
	assert exercise.title == "C Major (Ionian) Seventh Chords"


def test_title_for_triads () -> None:

	exercise = pianopractice.builders.build_exercise(ChordsByKeyConfig(key=Key.C))

	assert exercise.title == "C Major (Ionian) Triads"


def test_both_hands_double_the_chord () -> None:

	exercise = pianopractice.builders.build_exercise(ChordsByKeyConfig(key=Key.C, hand_selection=HandSelection.BOTH))

	assert all(len(step.notes) == 6 for step in exercise)
	assert list(exercise.steps[0].notes) == [48, 52, 55, 60, 64, 67]


def test_voice_leading_plays_one_chord_per_degree () -> None:

	"""Voice-led chords move no more than plain root-position chords would."""

	voice_led = pianopractice.builders.build_exercise(ChordsByKeyConfig(key=Key.C, voice_leading=True))
	root_position = [
		chord.tones(4)
		for chord in pianopractice.builders.chords_by_key.diatonic_chords(Key.C, pianopractice.intervals.ScaleType.MAJOR)
	]

	assert len(voice_led) == 7
	assert list(voice_led.steps[0].notes) == [60, 64, 67]
	assert _movement([list(step.notes) for step in voice_led]) <= _movement(root_position)


def test_voice_led_labels_name_the_inversion () -> None:

	exercise = pianopractice.builders.build_exercise(ChordsByKeyConfig(key=Key.C, voice_leading=True))

	for step in exercise:
		chord = step.label.chord
		pcs = sorted(note % 12 for note in step.notes)
		assert pcs == sorted(note % 12 for note in chord.tones(4))
		assert min(step.notes) % 12 == chord.tones(4)[0] % 12
