"""
Command-line front end: ``chromahex <hex-color>``.

Prints the parsed RGBA channels, a terminal swatch, and the HSL, HSV and
CMYK equivalents. Exits 1 on bad arguments or an unparsable color.
"""
import argparse
import logging
import math
import os
import sys
from typing import Sequence, TextIO

from .colors import RGBA, HSL, HSV, CMYK
from .conversions import parse_hex, rgb_to_hsl, rgb_to_hsv, rgb_to_cmyk
from .errors import ColorParserError

# Package logger, so the handler also receives records from every core module
logger = logging.getLogger(__package__)

RESET = "\033[0m"
RED = "\033[31m"
SWATCH_WIDTH = 6
EXIT_FAILURE = 1


class ChromahexArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """Print usage plus an example to stderr and exit with status 1."""
        self.print_usage(sys.stderr)
        prog = self.prog
        print(f"Example: {prog} fff or {prog} '#ffcc00'", file=sys.stderr)
        logger.debug("argument error: %s", message)
        sys.exit(EXIT_FAILURE)


def build_parser() -> ChromahexArgumentParser:
    parser = ChromahexArgumentParser(
        prog="chromahex",
        description="Show a hex color as RGBA, HSL, HSV and CMYK.",
    )
    parser.add_argument("hex_color", metavar="<hex-color>",
                        help="3, 4, 6 or 8 hex digits, with or without a leading '#'")
    parser.add_argument("--no-color", action="store_true",
                        help="disable ANSI colors and the swatch (also set by NO_COLOR)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log debug output to stderr")
    return parser


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Attach a stderr handler to the package logger.

    Args:
        verbose: If True, log at DEBUG; otherwise only warnings and above

    Returns:
        Configured logger instance
    """
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    ))
    logger.addHandler(handler)
    return logger


def use_color(no_color_flag: bool) -> bool:
    return not no_color_flag and "NO_COLOR" not in os.environ


def rounded(value: float) -> int:
    """Round half away from zero; every channel printed here is non-negative."""
    return math.floor(value + 0.5)


def swatch(rgba: RGBA) -> str:
    r, g, b = rgba.rgb
    return f"\033[48;2;{r};{g};{b}m{' ' * SWATCH_WIDTH}{RESET}"


def render(text: str, rgba: RGBA, hsl: HSL, hsv: HSV, cmyk: CMYK, color: bool = True) -> str:
    digits = text[1:] if text.startswith("#") else text
    h, s, l = (rounded(x) for x in hsl)
    vh, vs, vv = (rounded(x) for x in hsv)
    c, m, y, k = (rounded(x) for x in cmyk)

    lines = [
        "",
        f" Hex Input: #{digits.upper()}",
        "",
    ]
    if color:
        lines.append(f"Color: {swatch(rgba)}")
    lines += [
        "",
        f"RGBA: rgba({rgba.red}, {rgba.green}, {rgba.blue}, {rgba.alpha})",
        f"    -> Red:   {rgba.red}",
        f"    -> Green: {rgba.green}",
        f"    -> Blue:  {rgba.blue}",
        f"    -> Alpha: {rgba.alpha}",
        "",
        f"HSL: hsl({h}°, {s}%, {l}%)",
        f"    -> Hue:        {h}°",
        f"    -> Saturation: {s}%",
        f"    -> Lightness:  {l}%",
        "",
        f"HSV: hsv({vh}°, {vs}%, {vv}%)",
        f"    -> Hue:        {vh}°",
        f"    -> Saturation: {vs}%",
        f"    -> Value:      {vv}%",
        "",
        f"CMYK: cmyk({c}%, {m}%, {y}%, {k}%)",
        f"    -> Cyan:    {c}%",
        f"    -> Magenta: {m}%",
        f"    -> Yellow:  {y}%",
        f"    -> Black:   {k}%",
        "",
    ]
    return "\n".join(lines)


def report_error(err: ColorParserError, color: bool, stream: TextIO) -> None:
    message = f"Error: {err}"
    if color:
        message = f"{RED}{message}{RESET}"
    print(message, file=stream)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    color = use_color(args.no_color)

    try:
        rgba = parse_hex(args.hex_color)
        hsl = rgb_to_hsl(rgba)
        hsv = rgb_to_hsv(rgba)
        cmyk = rgb_to_cmyk(rgba)
    except ColorParserError as err:
        logger.debug("rejected %r: %s", args.hex_color, err.kind.value)
        report_error(err, color, sys.stderr)
        return EXIT_FAILURE

    print(render(args.hex_color, rgba, hsl, hsv, cmyk, color=color))
    return 0


if __name__ == "__main__":
    sys.exit(main())
