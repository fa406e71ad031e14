"""
Command line entry point: ``localekit generate`` and ``localekit init``.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from localekit import __version__
from localekit.core import LocalizationError, MessageGenerator
from localekit.infra.config import (
    ConfigAdapter,
    copy_default_config,
    default_config,
    load_config,
    save_config,
    save_config_file,
)
from localekit.infra.logger import setup_logging
from localekit.infra.paths import DEFAULT_CONFIG_FILENAME, SETTING_PATH

logger = logging.getLogger(__name__)

_OUTPUT_FLAGS = (
    ("--no-sort", "Keep discovery order instead of sorting message keys."),
    ("--group-locales", "Write one file per locale (messages-en.js, ...)."),
    ("--no-lib", "Write the messages only, without the Lang.js runtime."),
    ("--json", "Write a JSON document instead of a script."),
    ("--window-object", "Assign the messages to window.Lang.messages."),
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="localekit",
        description="Export locale message files to a JavaScript bundle.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    gen = subparsers.add_parser("generate", help="Generate the messages file.")
    gen.add_argument(
        "target",
        nargs="?",
        type=Path,
        help="Output file (default: 'target' from settings).",
    )
    gen.add_argument(
        "-s", "--source", type=Path, help="Lang directory to read messages from."
    )
    for flag, help_text in _OUTPUT_FLAGS:
        gen.add_argument(flag, action="store_true", help=help_text)
    gen.add_argument(
        "-c", "--compress", action="store_true", help="Minify the generated file."
    )
    gen.add_argument("--config", type=Path, help="Path to a settings file.")
    gen.add_argument("--log-level", help="Override the configured log level.")
    gen.set_defaults(func=cmd_generate)

    init = subparsers.add_parser("init", help="Create a sample settings file.")
    init.add_argument(
        "--path",
        type=Path,
        help=f"Where to write the settings (default: ./{DEFAULT_CONFIG_FILENAME}).",
    )
    init.add_argument(
        "--user",
        action="store_true",
        help="Write the user settings file (JSON) instead of a project file.",
    )
    init.add_argument(
        "--from",
        dest="from_file",
        type=Path,
        help="With --user, convert this TOML/JSON settings file.",
    )
    init.add_argument(
        "--force", action="store_true", help="Overwrite an existing file."
    )
    init.set_defaults(func=cmd_init)

    return parser


def _load_adapter(config_path: Path | None) -> ConfigAdapter | None:
    try:
        return ConfigAdapter(load_config(config_path))
    except FileNotFoundError:
        if config_path:
            logger.error("Settings file not found: %s", config_path)
            return None
        logger.debug("No settings file found, using defaults")
        return ConfigAdapter()
    except ValueError as e:
        logger.error("%s", e)
        return None


def cmd_generate(args: argparse.Namespace) -> int:
    setup_logging(args.log_level or "INFO")

    adapter = _load_adapter(args.config)
    if adapter is None:
        return 1
    if not args.log_level:
        setup_logging(adapter.get_log_level())

    try:
        config = adapter.get_generator_config(
            args.target,
            source=args.source,
            no_sort=args.no_sort,
            group_locales=args.group_locales,
            no_lib=args.no_lib,
            json=args.json,
            window_object=args.window_object,
            compress=args.compress,
        )
    except ValueError as e:
        logger.error("Invalid settings: %s", e)
        return 1

    generator = MessageGenerator.from_config(config)
    try:
        written = generator.generate(config.target_path, config.options)
    except LocalizationError as e:
        logger.error("Could not create messages file: %s", e)
        return 1

    logger.info("Created %d messages file(s)", len(written))
    return 0


def cmd_init(args: argparse.Namespace) -> int:
    setup_logging("INFO")

    if args.from_file and not args.user:
        logger.error("--from requires --user")
        return 1

    default_target = SETTING_PATH if args.user else Path(DEFAULT_CONFIG_FILENAME)
    target: Path = args.path or default_target
    if target.exists() and not args.force:
        logger.error("%s already exists (use --force to overwrite)", target)
        return 1

    try:
        if not args.user:
            copy_default_config(target)
        elif args.from_file:
            save_config_file(args.from_file, target)
        else:
            save_config(default_config(), target)
    except (OSError, ValueError) as e:
        logger.error("Could not write %s: %s", target, e)
        return 1

    logger.info("Settings written: %s", target)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
