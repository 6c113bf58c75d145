from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Sequence

from platformdirs import user_log_path

from ezsymlink import __version__
from ezsymlink.app import main as run_app
from ezsymlink.core.config import get_runtime_config
from ezsymlink.core.logging import configure_logging, get_logger, log_event
from ezsymlink.core.paths import APP_AUTHOR, APP_NAME

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ezsymlink",
        description="Link a source path into a destination, merging existing contents first",
    )

    parser.add_argument(
        "path",
        nargs="?",
        help="Optional path to acknowledge at startup.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Print version and exit.",
    )

    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Parse CLI arguments without launching the UI.",
    )

    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Print resolved runtime config to stdout.",
    )

    return parser


def handle_print_config() -> None:
    payload = {
        "runtime": get_runtime_config().model_dump(),
        "log_dir": str(user_log_path(APP_NAME, APP_AUTHOR)),
    }
    print(json.dumps(payload, indent=2))


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.print_config:
        handle_print_config()
        return

    config = get_runtime_config()
    configure_logging(
        level=config.log_level,
        format_name=config.log_format,
        log_dir=Path(user_log_path(APP_NAME, APP_AUTHOR)),
    )

    start_path = Path(args.path).expanduser() if args.path else None
    if start_path is not None:
        log_event(logger, "startup_path", path=str(start_path))

    if args.no_ui:
        return

    run_app(start_path=start_path, config=config)


if __name__ == "__main__":
    main()
