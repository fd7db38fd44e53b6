import argparse
import dataclasses
import logging
import sys
import time

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from githook_shimmer import __version__
from githook_shimmer.config import describe_settings, load_settings
from githook_shimmer.errors import ShimmerError
from githook_shimmer.spinner import ConsoleSpinner

logger = logging.getLogger(__name__)

ENVIRONMENT_HELP = """\
Environment variables:

  shimmer animation:
    LLM_GITHOOK_SHIMMER_BASE_COLOR      base color outside the band (default: 120)
    LLM_GITHOOK_SHIMMER_HIGHLIGHT_COLOR color at the band center (default: 103)
      256-color mode: 0-255 (grayscale: 232-255)
      truecolor mode: "R,G,B" (e.g. "100,150,200")

  spinner:
    LLM_GITHOOK_SPINNER_COLOR           spinner color (default: same as base)
      named (black, red, green, yellow, blue, magenta, cyan, white),
      0-255 or "R,G,B"
    LLM_GITHOOK_SPINNER_STYLE           classic, dots, arrows, blocks, pulse,
                                        bouncing, circle, square, triangle,
                                        diamond (default: dots)

  animation parameters:
    LLM_GITHOOK_SHIMMER_SWEEP_SECONDS   duration of one sweep (default: 2.0)
    LLM_GITHOOK_SHIMMER_PADDING         padding characters (default: 10)
    LLM_GITHOOK_SHIMMER_BAND_WIDTH      half-width of the glow band (default: 5.0)
    LLM_GITHOOK_FPS                     frames per second (default: 30)
    LLM_GITHOOK_STATUS_TEXT             text to display
    LLM_GITHOOK_COLOR_MODE              256, truecolor or auto (default: 256)
    LLM_GITHOOK_CONFIG                  config file (default: ~/.llm_githook/shimmer.cfg)

Examples:

  # blue theme (bright cyan base, dark blue wave)
  LLM_GITHOOK_SHIMMER_BASE_COLOR=51 LLM_GITHOOK_SHIMMER_HIGHLIGHT_COLOR=17 githook-shimmer

  # truecolor gradient (bright pink base, dark purple wave)
  LLM_GITHOOK_COLOR_MODE=truecolor \\
  LLM_GITHOOK_SHIMMER_BASE_COLOR="255,100,200" \\
  LLM_GITHOOK_SHIMMER_HIGHLIGHT_COLOR="80,40,120" \\
  githook-shimmer
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="githook-shimmer",
        description="Shimmer animation demo - try color settings before using them in a hook",
        epilog=ENVIRONMENT_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"{__version__}",
        help="Show version and exit",
    )
    parser.add_argument(
        "--duration",
        "-d",
        type=float,
        help="Simulate a git operation for this many seconds, then exit",
    )
    parser.add_argument(
        "--text",
        "-t",
        type=str,
        help="Status text to animate (overrides LLM_GITHOOK_STATUS_TEXT)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log configuration details to stderr",
    )
    return parser


def print_banner(console: Console, settings) -> None:
    table = Table(show_header=False, box=None, padding=(0, 2))
    for label, value in describe_settings(settings).items():
        table.add_row(f"{label}:", str(value))
    console.print("[bold]Shimmer Animation Demo[/bold]")
    console.print("Current Configuration:")
    console.print(table)
    console.print()


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.duration is not None and args.duration < 0:
        parser.error("--duration must be >= 0")

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    console = Console()
    try:
        settings = load_settings()
    except ShimmerError as e:
        Console(stderr=True).print(
            f"[bold red]Invalid configuration:[/bold red] {escape(str(e))}"
        )
        return 2

    if args.text is not None:
        settings = dataclasses.replace(settings, status_text=args.text)
    logger.info(f"Using settings: {settings}")

    print_banner(console, settings)
    spinner = ConsoleSpinner(settings, console=console)
    try:
        if args.duration is not None:
            console.print(
                f"Simulating git commit operation for {args.duration:g} seconds..."
            )
            spinner.run(time.sleep, args.duration)
        else:
            console.print("Press Ctrl+C to exit.")
            with spinner:
                while True:
                    time.sleep(1)
    except KeyboardInterrupt:
        logger.debug("Interrupted, shutting down spinner")
    finally:
        spinner.stop()
    return 0


def main_entry():
    sys.exit(main())


if __name__ == "__main__":
    main_entry()
