"""CLI entrypoint for polydts."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .analysis import AnalysisError
from .config import CONFIG_FILENAME, ConfigError, load_config
from .logging import configure_logging, get_logger
from .pipeline import DeclarationGenerator
from .writer import OutputError

_EPILOG = """\
examples:
  polydts my-element.html
  polydts --outDir types my-element.html
  polydts --output types.d.ts my-element.html
  polydts analysis.json
"""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polydts",
        description="Convert Polymer component metadata into TypeScript declaration files.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "inputs",
        nargs="*",
        metavar="input",
        help=(
            "Source files or analysis JSON documents. Defaults to the main entry of every "
            "dependency declared in bower.json and package.json."
        ),
    )
    parser.add_argument(
        "-d",
        "--outDir",
        dest="out_dir",
        type=Path,
        default=None,
        help="Output all declarations to this folder, one file per module (default: types).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write every declaration into this single file instead.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help=f"Path to a {CONFIG_FILENAME} file or the directory holding it (default: cwd).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write debug logs to this file.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting.",
    )
    verbosity.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only report warnings and errors.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for polydts."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, quiet=args.quiet, log_file=args.log_file)
    logger = get_logger("cli")

    try:
        config = load_config(args.config or Path.cwd())
        # Inputs, dependency manifests and relative output paths are read from the cwd;
        # --config only locates the settings file.
        config = config.with_overrides(
            root=Path.cwd().resolve(),
            out_dir=args.out_dir.resolve() if args.out_dir else None,
            output=args.output.resolve() if args.output else None,
        )
        DeclarationGenerator(config).run(args.inputs)
    except (ConfigError, AnalysisError, OutputError) as exc:
        logger.error("%s", exc)
        parser.exit(1, f"polydts failed: {exc}\nRun with --verbose for more details.\n")
    except Exception as exc:  # pragma: no cover - defensive guard
        logger.exception("Unexpected failure")
        parser.exit(1, f"polydts failed: {exc}\nRun with --verbose for more details.\n")

    logger.debug("Generation finished")
    print("done")


if __name__ == "__main__":
    main(sys.argv[1:])
