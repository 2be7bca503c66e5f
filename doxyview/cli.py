"""Command line entry point building a documentation view model."""

import argparse
import logging
from pathlib import Path

from doxyview.run_generation import run_generation


def configure_logging(*, verbose: bool, debug: bool) -> None:
    """Set up root logging; --debug wins over --verbose."""
    level = logging.WARNING
    if verbose:
        level = logging.INFO
    if debug:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: list[str] | None = None) -> int:
    """Run the view model generation."""
    ap = argparse.ArgumentParser(
        description=(
            "Resolve parsed Doxygen compounds into a cross-linked view model "
            "(permalinks, navigation trees, alphabetical indices)."
        ),
    )
    ap.add_argument(
        "input_dir",
        type=Path,
        help="Directory containing compound dumps (*.yml, *.yaml, *.json)",
    )
    ap.add_argument(
        "--out",
        type=Path,
        default=Path("view_model.json"),
        help="Report file to write (default: view_model.json)",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument("--verbose", action="store_true", help="Log progress")
    ap.add_argument("--debug", action="store_true", help="Log everything")
    args = ap.parse_args(argv)
    configure_logging(verbose=args.verbose, debug=args.debug)
    return run_generation(args)


if __name__ == "__main__":
    raise SystemExit(main())
