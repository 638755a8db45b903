# @Description: Vignetter command line entry point

import argparse
import os
import sys

import imageio.v2 as imageio
import yaml

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from core.datatypes import PipelineError
from core.pipeline import render_frame, run_pipeline, to_float_image, to_uint8_image
from presets.vignette_presets import get_default_manager
from utils.i18n import detect_language, preset_label


def parse_overrides(pairs):
    """
    Parses ["key=value", ...] into a settings dict; values go through YAML
    so numbers and booleans come out typed.
    """
    settings = {}
    for pair in pairs or []:
        if '=' not in pair:
            raise argparse.ArgumentTypeError(f"expected key=value, got '{pair}'")
        key, value = pair.split('=', 1)
        settings[key.strip()] = yaml.safe_load(value)
    return settings


def list_presets(lang):
    manager = get_default_manager()
    for name in manager.names():
        print(f"{name:<12} {preset_label(name, lang)}")


def apply_to_file(input_path, output_path, preset=None, settings=None):
    image = to_float_image(imageio.imread(input_path))
    out = render_frame(image, settings, preset=preset)
    out_dir = os.path.dirname(os.path.abspath(output_path))
    os.makedirs(out_dir, exist_ok=True)
    imageio.imwrite(output_path, to_uint8_image(out))
    print(f"[vignette] saved -> {output_path}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Apply the Vignetter effect to images"
    )
    parser.add_argument('input', nargs='?',
                        help="pipeline YAML config, or an input image when OUTPUT is given")
    parser.add_argument('output', nargs='?', help="output image (direct mode)")
    parser.add_argument('-p', '--preset', help="preset name, see --list-presets")
    parser.add_argument('-s', '--set', dest='overrides', action='append', metavar='KEY=VALUE',
                        help="override a setting, e.g. --set shape_type=star (repeatable)")
    parser.add_argument('--list-presets', action='store_true', help="list the built-in presets")
    parser.add_argument('--lang', default=os.environ.get('LANG'),
                        help="locale for preset names, e.g. en_US or de_DE")
    args = parser.parse_args(argv)

    if args.list_presets:
        list_presets(detect_language(args.lang))
        return 0

    if args.input is None:
        parser.error("an input is required")

    if args.output is None:
        return 0 if run_pipeline(args.input) else 1

    try:
        overrides = parse_overrides(args.overrides)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))
    try:
        apply_to_file(args.input, args.output, preset=args.preset, settings=overrides)
    except PipelineError as e:
        print(f"[Error] {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
