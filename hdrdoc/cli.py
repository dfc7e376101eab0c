"""CLI entrypoint for hdrdoc."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .generator import Generator
from .logging import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hdrdoc",
        description="Render the documented declarations of a header tree as HTML pages.",
    )
    parser.add_argument(
        "output_dir",
        help="Directory that receives the generated pages.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    parser.add_argument(
        "--root",
        default=".",
        help="Project root holding the header tree and README (defaults to current directory).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Configuration file (defaults to <root>/.hdrdoc.yml).",
    )
    parser.add_argument(
        "--resolve-markers",
        action="store_true",
        default=None,
        help="Show restored source instead of the folded text on each page.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for hdrdoc."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        config = load_config(Path(args.root), args.config)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")
    except (OSError, UnicodeError) as exc:
        parser.exit(1, f"Cannot read configuration: {exc}\n")
    config = config.with_overrides(resolve_markers=args.resolve_markers)

    try:
        report = Generator(config).run(Path(args.output_dir))
    except (FileNotFoundError, NotADirectoryError) as exc:
        parser.exit(1, f"{exc}\n")
    except (OSError, UnicodeError) as exc:
        parser.exit(1, f"hdrdoc failed: {exc}\nRun with --verbose for more details.\n")

    skipped = f", skipped {len(report.skipped)}" if report.skipped else ""
    print(f"Generated {len(report.pages)} page(s) and index in {_relativize(report.output_dir)}{skipped}")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
