from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

import pygame

from .__about__ import __version__
from .config import BuildSettings, load_config, preview_size
from .level_builder import build_level_with_report
from .reachability import ReachabilityError
from .render_preview import export_scene_preview
from .scene_io import (
    SceneInputError,
    read_detection_response,
    scene_to_json,
    write_scene,
)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="photo-platformer",
        description="Build a platformer scene from a detection response JSON.",
    )
    parser.add_argument(
        "input",
        help="Detection response JSON file ('-' reads stdin).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Scene JSON output path (stdout when omitted).",
    )
    parser.add_argument(
        "--preview",
        type=Path,
        default=None,
        help="Also export a preview image to this path.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Config file path (defaults to the per-user config).",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when reachability repair leaves gaps.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    parser.add_argument("--version", action="version", version=__version__)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config, _ = load_config(args.config)
    settings = BuildSettings.from_config(config)
    try:
        response = read_detection_response(args.input)
        scene, report = build_level_with_report(response, settings)
        if (args.strict or settings.strict) and not report.converged:
            raise ReachabilityError(report.repair.residual)
        if args.output is None:
            sys.stdout.write(scene_to_json(scene) + "\n")
        else:
            write_scene(scene, args.output)
        if args.preview is not None:
            export_scene_preview(scene, args.preview, size=preview_size(config))
    except (SceneInputError, ReachabilityError, OSError, pygame.error) as exc:
        print(f"photo-platformer: {exc}", file=sys.stderr)
        return 1

    print(report.summary(), file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
