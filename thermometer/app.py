"""
Application entry point — CLI parsing, dependency checks, Qt launch.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__

DEFAULT_MIN = -40
DEFAULT_MAX = 50


def _check_deps() -> list:
    missing = []
    try:
        import numpy  # noqa: F401
    except ImportError:
        missing.append("numpy")
    try:
        import PyQt5  # noqa: F401
    except ImportError:
        missing.append("PyQt5")
    return missing


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="thermometer",
        description="Thermometer — animated dual-scale analog thermometer.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "examples:\n"
            "  %(prog)s                          # -40..50 °C, starting at -40\n"
            "  %(prog)s --min -20 --max 120      # wider range\n"
            "  %(prog)s --initial 20             # start at room temperature\n"
            "  %(prog)s -v                       # verbose logging\n"
        ),
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--min", dest="minimum", type=int, default=DEFAULT_MIN,
                   help=f"Lowest temperature in °C (default {DEFAULT_MIN})")
    p.add_argument("--max", dest="maximum", type=int, default=DEFAULT_MAX,
                   help=f"Highest temperature in °C (default {DEFAULT_MAX})")
    p.add_argument("--initial", type=int, default=None,
                   help="Starting temperature in °C (default: --min)")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p.parse_args(argv)


def _validate(args: argparse.Namespace) -> Optional[str]:
    """Return an error message for inconsistent arguments, else None."""
    if args.maximum <= args.minimum:
        return "--max must be greater than --min."
    if args.initial is not None and not (args.minimum <= args.initial <= args.maximum):
        return f"--initial must be within {args.minimum}–{args.maximum}."
    return None


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    logger = logging.getLogger("thermometer")

    # Dependency check
    missing = _check_deps()
    if missing:
        print(f"ERROR: Missing packages: {', '.join(missing)}\n"
              f"Install: pip install {' '.join(missing)}", file=sys.stderr)
        sys.exit(1)

    # Validate
    error = _validate(args)
    if error:
        print(f"ERROR: {error}", file=sys.stderr)
        sys.exit(1)

    initial = args.minimum if args.initial is None else args.initial

    # Launch
    logger.info("Starting Thermometer v%s", __version__)
    logger.info("Range: %d..%d °C, initial %d °C", args.minimum, args.maximum, initial)

    from PyQt5.QtWidgets import QApplication
    from .main_window import MainWindow
    from .scales import DualScale

    app = QApplication(sys.argv)
    app.setStyle("Fusion")
    app.setApplicationName("Thermometer")
    app.setApplicationVersion(__version__)

    scale = DualScale(args.minimum, args.maximum)
    window = MainWindow(scale, initial)
    window.show()

    sys.exit(app.exec_())
