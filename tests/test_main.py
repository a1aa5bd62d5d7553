import sys

import mido

import cantus.__main__
import cantus.surface


class IndexRandomSource:

	"""Always selects one index of a two-way choice."""

	def __init__ (self, index: int) -> None:

		self.index = index


	def sample (self) -> float:

		return (self.index + 0.5) / 2


def test_load_config_missing_file (tmp_path):

	"""A missing config file gives an empty config."""

	assert cantus.__main__.load_config(str(tmp_path / "missing.yaml")) == {}


def test_load_config_reads_yaml (tmp_path):

	"""YAML config files are parsed into nested dicts."""

	path = tmp_path / "config.yaml"
	path.write_text("random:\n  seed: 3\nmidi:\n  resolution: 480\n")

	assert cantus.__main__.load_config(str(path)) == {"random": {"seed": 3}, "midi": {"resolution": 480}}


def test_load_config_empty_file (tmp_path):

	"""An empty config file also gives an empty config."""

	path = tmp_path / "config.yaml"
	path.write_text("")

	assert cantus.__main__.load_config(str(path)) == {}


def test_example_piece_ends_after_repeats ():

	"""Always taking the repeat branch plays the loop three more times, then the closing chord."""

	surface = cantus.surface.generate_surface(cantus.__main__.example(IndexRandomSource(1)))

	assert cantus.__main__.describe(surface) == "c, d, e, c, d, b, c, d, e, c, d, b, <c, g, c>"


def test_main_writes_midi_file (tmp_path, monkeypatch):

	"""The driver writes the configured MIDI file."""

	(tmp_path / "config.yaml").write_text("random:\n  seed: 1\noutput:\n  basename: demo\n  name: Demo\n")
	monkeypatch.chdir(tmp_path)
	monkeypatch.setattr(sys, "argv", ["cantus"])

	cantus.__main__.main()

	midi_file = mido.MidiFile(str(tmp_path / "demo.mid"))

	assert midi_file.tracks[0].name == "Demo"
