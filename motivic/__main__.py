import argparse
import logging
import os
import random
import sys
import typing

import yaml

import motivic.chord_oracle
import motivic.constants
import motivic.library
import motivic.segmenter


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


def build_library (config: dict) -> motivic.library.SnippetLibrary:

	"""Create a library whose oracle, segmenter and random generator follow ``config``.

	Recognised keys (all optional):

	```yaml
	segmentation:
	  beats_per_bar: 4
	  simultaneity_tolerance: 0.05
	  marker_control: 20
	oracle:
	  max_candidates: 8
	random:
	  seed: 1
	```
	"""

	segmentation = config.get('segmentation', {}) or {}
	oracle_config = config.get('oracle', {}) or {}
	seed = (config.get('random', {}) or {}).get('seed')

	rng = random.Random(seed)
	oracle = motivic.chord_oracle.TemplateChordOracle(max_candidates=oracle_config.get('max_candidates', 8))

	segmenter = motivic.segmenter.Segmenter(
		oracle = oracle,
		beats_per_bar = segmentation.get('beats_per_bar', motivic.constants.DEFAULT_BEATS_PER_BAR),
		simultaneity_tolerance = segmentation.get('simultaneity_tolerance', motivic.constants.SIMULTANEITY_TOLERANCE),
		rng = rng
	)

	return motivic.library.SnippetLibrary(
		segmenter = segmenter,
		marker_control = segmentation.get('marker_control', motivic.constants.MARKER_CONTROL)
	)


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Segment a MIDI file and print the snippets or chord progressions found.
	"""

	parser = argparse.ArgumentParser(prog="motivic", description="Extract reusable motifs from a MIDI file")
	parser.add_argument("midi_file", help="MIDI file to analyse")
	parser.add_argument("--config", default="config.yaml", help="YAML configuration file (default: config.yaml)")
	parser.add_argument("--progressions", action="store_true", help="Extract chord progressions instead of snippets")
	parser.add_argument("--output", help="Write the extracted snippets to this MIDI file")
	args = parser.parse_args(argv)

	logging.basicConfig(level=logging.INFO)

	library = build_library(load_config(args.config))

	try:
		if args.progressions:
			library.load_midi_progressions(args.midi_file)

		else:
			library.load_midi_snippets(args.midi_file)

	except (OSError, EOFError, ValueError) as e:
		logger.error(f"Could not read {args.midi_file}: {e}")
		return 1

	print(library.describe())

	if args.output:
		library.save_midi(args.output)

	return 0


if __name__ == '__main__':
	sys.exit(main())
