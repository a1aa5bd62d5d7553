import argparse
import logging
import os
import typing

import yaml

import cantus.builders as b
import cantus.constants
import cantus.events
import cantus.midi_file
import cantus.random_source
import cantus.structure
import cantus.surface


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def load_config (config_path: str = 'config.yaml') -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		return yaml.safe_load(f) or {}


def example (rng: cantus.random_source.RandomSource) -> cantus.structure.StructureNode:

	"""Build the demo piece.

	C and D, then alternately a step or a sixth above the D. After that the
	choice either starts over or spends one pass of a three-pass repeat of
	the same loop. The piece closes on a chord once the repeat is used up.
	"""

	start = b.note(60)

	start >> b.fun(lambda surface: cantus.events.Note(62, 1, 64)) >> b.cycle(b.interval(2), b.interval(9)) >> b.choice(
		start,
		b.seq(b.repeat(3, start), b.chord([60, 67, 72], 2, [127, 72, 96])),
		rng = rng
	)

	return start


def describe (surface: typing.Sequence[cantus.events.Event]) -> str:

	"""
	Render a surface as pitch-class names, chords in angle brackets.
	"""

	names = []

	for event in surface:
		if isinstance(event, cantus.events.Chord):
			names.append("<" + ", ".join(str(pc) for pc in event.pitch_classes()) + ">")
		elif isinstance(event, cantus.events.Note):
			names.append(str(event.pitch_class()))

	return ", ".join(names)


def main () -> None:

	"""
	Main entry point: generate the demo piece and write it as a MIDI file.
	"""

	parser = argparse.ArgumentParser(description="Generate the cantus demo piece as a MIDI file")
	parser.add_argument("--config", default="config.yaml", help="YAML configuration file")
	args = parser.parse_args()

	config = load_config(args.config)

	seed = config.get('random', {}).get('seed')
	max_steps = config.get('generation', {}).get('max_steps', 1000)
	resolution = config.get('midi', {}).get('resolution', cantus.constants.MIDI_RESOLUTION)
	channel = config.get('midi', {}).get('channel', 0)
	basename = config.get('output', {}).get('basename', 'example')
	name = config.get('output', {}).get('name', 'Example')

	logger.info(f"cantus starting (seed={seed})...")

	generator = cantus.surface.SurfaceGenerator(example(cantus.random_source.SystemRandomSource(seed)))
	surface = generator.generate(max_steps=max_steps)

	if not generator.finished:
		logger.warning(f"Stopped after {max_steps} steps; the piece had not ended.")

	logger.info(describe(surface))

	cantus.midi_file.MidiTranscription(resolution=resolution).perform(surface, name=name, channel=channel).save(basename)


if __name__ == "__main__":
	main()
