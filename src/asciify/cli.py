import argparse
import sys
from pathlib import Path

from loguru import logger
from PIL import Image, UnidentifiedImageError

from asciify.charsets import CHARSETS
from asciify.config import DEFAULT_OPTIONS, LEGACY_OPTIONS
from asciify.converter import convert
from asciify.output import save_lines, write_lines
from asciify.pixels import PixelGrid
from asciify.terminal import get_terminal_width

EPILOG = """\
examples:
  asciify --width 80 --no-color image.png
  asciify --save output.txt image.jpg
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="asciify",
        description="Render an image as ASCII art",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("image", nargs="?", help="Path to input image (PNG or JPEG)")
    parser.add_argument(
        "-w", "--width", type=int, default=None, help="Output width in characters (default: 100, 80 with --legacy)"
    )
    parser.add_argument(
        "-s",
        "--scale",
        type=float,
        default=None,
        help="Vertical scale factor applied to the output height (default: 0.15, 0.5 with --legacy)",
    )
    parser.add_argument(
        "--color",
        "--colour",
        dest="colour",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Enable truecolor ANSI output (default: on, off with --legacy)",
    )
    parser.add_argument(
        "--legacy", action="store_true", help="Use the fixed-aspect preset: width 80, scale 0.5, no colour"
    )
    parser.add_argument("--fit", action="store_true", help="Use the terminal width instead of --width")
    parser.add_argument(
        "--charset", default="standard", choices=sorted(CHARSETS), help="Glyph palette to use (default: standard)"
    )
    parser.add_argument("--sequential", action="store_true", help="Render rows one at a time instead of in parallel")
    parser.add_argument("--workers", type=int, default=None, help="Number of worker threads for parallel rendering")
    parser.add_argument("--save", metavar="PATH", help="Save output to a file instead of printing to stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging on stderr")
    return parser


def _report_decode_failure(image_path: Path, exc: Exception) -> None:
    print(f"Error: Failed to decode image file '{image_path}': {exc}", file=sys.stderr)
    print("Hint: Ensure the file is a valid PNG or JPEG image.", file=sys.stderr)


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "WARNING")

    if args.image is None:
        print("Error: No image file specified\n", file=sys.stderr)
        parser.print_usage(sys.stderr)
        sys.exit(1)

    options = LEGACY_OPTIONS if args.legacy else DEFAULT_OPTIONS
    changes = {
        "palette": CHARSETS[args.charset],
        "parallel": not args.sequential,
        "max_workers": args.workers,
    }
    if args.fit:
        changes["width"] = get_terminal_width(options.width)
    elif args.width is not None:
        changes["width"] = args.width
    if args.scale is not None:
        changes["scale"] = args.scale
    if args.colour is not None:
        changes["colour"] = args.colour

    try:
        options = options.replace(**changes)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    image_path = Path(args.image)
    logger.debug("Loading image from {}", image_path)
    try:
        image = Image.open(image_path)
    except UnidentifiedImageError as exc:
        _report_decode_failure(image_path, exc)
        sys.exit(1)
    except OSError as exc:
        print(f"Error: Failed to open image file '{image_path}': {exc}", file=sys.stderr)
        sys.exit(1)

    # Pillow reads pixel data lazily, so truncated or corrupt files only fail here
    with image:
        try:
            grid = PixelGrid.from_image(image)
        except OSError as exc:
            _report_decode_failure(image_path, exc)
            sys.exit(1)
    art = convert(grid, options)

    if args.save:
        try:
            save_lines(art, args.save)
        except OSError as exc:
            print(f"Error: Failed to write to file '{args.save}': {exc}", file=sys.stderr)
            sys.exit(1)
        print(f"ASCII art saved to '{args.save}'")
    else:
        write_lines(art)


if __name__ == "__main__":
    main()
