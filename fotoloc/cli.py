"""
Command-line interface for photo extraction.

Usage:
    python -m fotoloc extract <image_path> [<image_path> ...] [--output json|visual]
    python -m fotoloc --help
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import cv2

from .lines.segmentation import SegmentationStrategy


def setup_argparse() -> argparse.ArgumentParser:
    """Set up argument parser."""
    parser = argparse.ArgumentParser(
        prog="fotoloc",
        description="Locate photos in scanned pages",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    extract_parser = subparsers.add_parser(
        "extract",
        help="Find photo outlines and their straight edges",
    )
    extract_parser.add_argument(
        "image_paths",
        nargs="+",
        type=str,
        help="Paths to the input images",
    )
    extract_parser.add_argument(
        "--output",
        "-o",
        choices=["json", "visual"],
        default="json",
        help="Output format (default: json)",
    )
    extract_parser.add_argument(
        "--output-dir",
        type=str,
        default=".",
        help="Directory for visual output (default: current directory)",
    )
    extract_parser.add_argument(
        "--config",
        type=str,
        help="YAML configuration file",
    )
    extract_parser.add_argument(
        "--strategy",
        choices=[s.value for s in SegmentationStrategy],
        help="Line segmentation strategy (default: extending_decreasing_error)",
    )
    extract_parser.add_argument(
        "--max-line-error",
        type=float,
        help="Mean distance from a line as a fraction of its length (default: 0.04)",
    )
    extract_parser.add_argument(
        "--min-distance",
        type=float,
        help="Skip objects whose first and last pixels are closer (default: 100)",
    )
    extract_parser.add_argument(
        "--blur",
        type=int,
        help="Blur sigma before quantizing (default: 2)",
    )
    extract_parser.add_argument(
        "--quantize",
        type=int,
        help="Color bins per channel (default: 10)",
    )
    extract_parser.add_argument(
        "--include-boundary",
        action="store_true",
        help="Include boundary points in JSON output",
    )
    extract_parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Number of images processed in parallel (default: 1)",
    )

    return parser


def build_config(args):
    """Create the extraction config from a YAML file and command-line overrides."""
    from .config.extraction_config import ExtractionConfig

    if args.config:
        config = ExtractionConfig.from_yaml(args.config)
    else:
        config = ExtractionConfig.default()

    overrides = {
        "strategy": args.strategy,
        "max_line_error": args.max_line_error,
        "min_object_distance": args.min_distance,
        "blur_amount": args.blur,
        "quantize_levels": args.quantize,
    }
    data = config.to_dict()
    data.update({k: v for k, v in overrides.items() if v is not None})

    return ExtractionConfig.from_dict(data)


def cmd_extract(args) -> int:
    """Handle extract command."""
    from .pipeline import extract_batch
    from .visualization import draw_boundaries, draw_lines

    # Validate input paths
    files = []
    for path in args.image_paths:
        if Path(path).is_file():
            files.append(path)
        else:
            print(f"Warning: {path} not found", file=sys.stderr)

    try:
        config = build_config(args)
    except (OSError, ValueError) as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return 1

    results, errors = extract_batch(files, config, workers=args.workers)

    for path, message in errors.items():
        print(f"Warning: {message}", file=sys.stderr)

    if args.output == "json":
        output = {
            "config": config.to_dict(),
            "images": [
                {"file": path, "result": results[path].to_dict(args.include_boundary)}
                for path in files
                if path in results
            ],
        }
        print(json.dumps(output, indent=2))

    elif args.output == "visual":
        output_dir = Path(args.output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        # Numbered in input order
        for uid, path in enumerate(p for p in files if p in results):
            result = results[path]

            lines_path = output_dir / f"image{uid}.png"
            contours_path = output_dir / f"image{uid}_contours.png"

            cv2.imwrite(str(lines_path), draw_lines(result.quantized, result.objects))
            cv2.imwrite(str(contours_path), draw_boundaries(result.quantized, result.objects))

            print(f"Saving {lines_path}")
            print(f"Saving {contours_path}")

    missing = len(args.image_paths) - len(files)
    return 0 if missing == 0 and not errors else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = setup_argparse()
    args = parser.parse_args(argv)

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "extract":
        return cmd_extract(args)

    return 0


if __name__ == "__main__":
    sys.exit(main())
