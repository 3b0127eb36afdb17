"""Command line entry point for resolving Win32 paths to kernel paths."""

import argparse
import dataclasses
import logging
import sys

from kernelpath.code_units import to_text
from kernelpath.errors import ConfigError, PathError
from kernelpath.existence import assume_exists, directory_exists
from kernelpath.kernel_path_resolver import KernelPathResolver
from kernelpath.load_config import load_config
from kernelpath.resolver_config import ResolverConfig

logger = logging.getLogger(__name__)


def _parse_drive_cwd(value: str) -> tuple[str, str]:
    letter, sep, path = value.partition("=")
    if not sep or len(letter) != 1 or not letter.isascii() or not letter.isalpha():
        msg = f"expected X=PATH, got {value!r}"
        raise argparse.ArgumentTypeError(msg)
    return letter.upper(), path


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    ap = argparse.ArgumentParser(
        prog="kernelpath",
        description="Resolve Win32 user paths to NT kernel object paths.",
    )
    ap.add_argument("paths", nargs="+", help="Paths to resolve")
    ap.add_argument("--config", help="Path to a YAML configuration file")
    ap.add_argument(
        "--policy",
        choices=["modern", "legacy"],
        help="Reserved device name matching algorithm (default: from config)",
    )
    ap.add_argument(
        "--extended-length",
        action="store_true",
        help="Lift the 259 code unit limit on Win32 paths",
    )
    ap.add_argument(
        "--lenient",
        action="store_true",
        help="Always read X:name as drive-relative, never as a stream",
    )
    ap.add_argument("--cwd", help="Process current directory (e.g. C:\\work)")
    ap.add_argument(
        "--drive-cwd",
        action="append",
        default=[],
        type=_parse_drive_cwd,
        metavar="X=PATH",
        help="Per-drive current directory (repeatable)",
    )
    ap.add_argument(
        "--check-existence",
        action="store_true",
        help="Check directories on the local filesystem instead of assuming they exist",
    )
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument(
        "--clean",
        action="store_true",
        help="Only clean each path; do not resolve it",
    )
    mode.add_argument(
        "--user-path",
        action="store_true",
        help="Convert verbatim paths to their Win32 form",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def build_resolver(args: argparse.Namespace) -> KernelPathResolver:
    """Combine the config file and command line overrides into a resolver."""
    raw = load_config(args.config)
    if args.policy:
        raw["device_policy"] = args.policy
    if args.extended_length:
        raw["extended_length"] = True
    if args.lenient:
        raw["drive_stream_strictness"] = "lenient"
    config = ResolverConfig.from_dict(raw)
    if args.drive_cwd:
        drives = dict(config.drive_directories)
        drives.update(dict(args.drive_cwd))
        config = dataclasses.replace(config, drive_directories=drives)

    exists = directory_exists if args.check_existence else assume_exists
    resolver = KernelPathResolver(config, exists=exists)
    if args.cwd:
        resolver.set_current_directory(args.cwd)
    return resolver


def main(argv: list[str] | None = None) -> int:
    """Run the command line tool."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        resolver = build_resolver(args)
    except (ConfigError, PathError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    status = 0
    for path in args.paths:
        try:
            if args.clean:
                print(to_text(resolver.clean(path)))
            elif args.user_path:
                print(to_text(resolver.to_user_path(path)))
            else:
                result = resolver.resolve(path)
                print(to_text(result.kernel_path))
                if result.deferred_parent is not None:
                    logger.warning(
                        "%s is only valid if %s exists",
                        path,
                        to_text(result.deferred_parent),
                    )
        except PathError as exc:
            print(f"error: {path}: {exc}", file=sys.stderr)
            status = 1
    return status


if __name__ == "__main__":
    raise SystemExit(main())
