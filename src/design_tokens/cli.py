"""Command-line interface for Design Tokens."""

import argparse
import glob
import sys
from pathlib import Path

from design_tokens import __version__
from design_tokens.build_config import BuildConfig, default_build_config, load_build_config
from design_tokens.config import get_settings
from design_tokens.exceptions import DesignTokenError
from design_tokens.logging_config import configure_logging
from design_tokens.parsers import load_tokens
from design_tokens.services.build import BuildService


def get_build_config(config_path: str | None) -> BuildConfig:
    """Load the build config from the given path, the settings, or the defaults."""
    if config_path:
        return load_build_config(Path(config_path))
    settings = get_settings()
    if settings.config_file:
        return load_build_config(settings.config_file)
    return default_build_config()


def find_sources(pattern: str) -> list[Path]:
    """Expand a source glob (``**`` allowed) into token files, skipping directories."""
    return [Path(p) for p in sorted(glob.glob(pattern, recursive=True)) if Path(p).is_file()]


def cmd_build(args: argparse.Namespace) -> int:
    """Build token outputs for the configured platforms."""
    settings = get_settings()
    pattern = args.source or settings.source_glob
    root = Path(args.build_root) if args.build_root else settings.build_root

    sources = find_sources(pattern)
    if not sources:
        print(f"Error: No token files match {pattern}")
        return 1

    try:
        config = get_build_config(args.config)
        tokens = load_tokens(sources)
        service = BuildService(config)
        built = service.build_all_platforms(tokens, args.platform or settings.platforms)

        if args.dry_run:
            for built_file in built:
                print(f"{built_file.platform}: {root / built_file.relative_path} ({built_file.token_count} tokens)")
            return 0

        written = service.write(built, root)
    except DesignTokenError as e:
        print(f"Error: {e.message}")
        return 1

    print(f"✓ Built {len(written)} file(s) from {len(tokens)} tokens")
    for path in written:
        print(f"  - {path}")
    return 0


def cmd_platforms(args: argparse.Namespace) -> int:
    """List configured platforms and their files."""
    try:
        config = get_build_config(args.config)
    except DesignTokenError as e:
        print(f"Error: {e.message}")
        return 1

    if not config.platforms:
        print("No platforms configured")
        return 0

    for name, platform in config.platforms.items():
        transforms = platform.transform_group or ", ".join(platform.transforms or [])
        print(f"{name} [{transforms}]")
        for file_config in platform.files:
            print(f"  - {platform.build_path}{file_config.destination} ({file_config.format})")
    return 0


def cmd_version(args: argparse.Namespace) -> int:
    """Show version information."""
    print(f"Design Tokens v{__version__}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="design-tokens",
        description="Design Tokens - Build CSS, SCSS, Less and JSON outputs from design tokens",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log per-file and per-token build events",
    )

    # options shared by commands that read the build config
    config_parent = argparse.ArgumentParser(add_help=False)
    config_parent.add_argument(
        "--config",
        "-c",
        help="Path to a JSON build config (default: DTK_CONFIG_FILE or the built-in web platforms)",
        default=None,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # build command
    build_parser = subparsers.add_parser(
        "build", parents=[config_parent], help="Build platform outputs"
    )
    build_parser.add_argument(
        "--source",
        "-s",
        help="Glob matching token source files (default: DTK_SOURCE_GLOB or tokens/*.json)",
        default=None,
    )
    build_parser.add_argument(
        "--platform",
        "-p",
        action="append",
        help="Platform to build (repeatable, default: DTK_PLATFORMS or all)",
        default=None,
    )
    build_parser.add_argument(
        "--build-root",
        "-o",
        help="Directory platform build paths are resolved against",
        default=None,
    )
    build_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Render outputs and list them without writing files",
    )
    build_parser.set_defaults(func=cmd_build)

    # platforms command
    platforms_parser = subparsers.add_parser(
        "platforms", parents=[config_parent], help="List configured platforms"
    )
    platforms_parser.set_defaults(func=cmd_platforms)

    # version command
    version_parser = subparsers.add_parser("version", help="Show version")
    version_parser.set_defaults(func=cmd_version)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(verbose=args.verbose)

    result: int = args.func(args)
    return result


if __name__ == "__main__":
    sys.exit(main())
