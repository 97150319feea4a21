"""CLI entrypoints for documentize commands."""

from __future__ import annotations

import argparse
import difflib
import sys
from fnmatch import fnmatch
from pathlib import Path
from typing import List, Optional

from .assembler import render_metadata
from .errors import DocumentizeError
from .logging import configure_logging, get_logger
from .markup.meta_tag import locate_meta_tag
from .preprocessor import Preprocessor

_LOGGER = get_logger("cli")


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Report unresolved symbols and per-file progress.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_config_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to .documentize.yml or its directory (defaults to the target path).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="documentize",
        description="Document Svelte component events, props and slots from their TypeScript declarations.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_parser = subparsers.add_parser(
        "build",
        help="Replace marker tags with generated documentation.",
    )
    _add_verbose_option(build_parser, suppress_default=True)
    _add_config_option(build_parser)
    build_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Component file or directory to process (defaults to current directory).",
    )
    build_parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Write processed components under this directory instead of in place.",
    )
    build_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print a diff of the changes without writing files.",
    )

    show_parser = subparsers.add_parser(
        "show",
        help="Print the documentation generated for one component.",
    )
    _add_verbose_option(show_parser, suppress_default=True)
    _add_config_option(show_parser)
    show_parser.add_argument("file", help="Svelte component to document.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for documentize commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    verbose = bool(args.verbose)
    configure_logging(verbose=verbose)

    if args.command == "build":
        target = Path(args.path)
        config_path = args.config or (target if target.is_dir() else target.parent)
        try:
            preprocessor = Preprocessor.create(config_path, verbose=verbose or None)
        except (DocumentizeError, OSError) as exc:
            parser.exit(1, f"documentize build failed: {exc}\n")
        failures = _run_build(preprocessor, target, args.out, dry_run=bool(args.dry_run))
        if failures:
            parser.exit(1, f"documentize build failed for {failures} file(s).\nRun with --verbose for more details.\n")
    elif args.command == "show":
        path = Path(args.file)
        try:
            preprocessor = Preprocessor.create(args.config or path.parent, verbose=verbose or None)
            content = path.read_text(encoding="utf-8")
            meta_tag = locate_meta_tag(content, preprocessor.config.data_attributes.marker)
            if meta_tag is None:
                parser.exit(1, f"No meta tag found in {path}\n")
            metadata = preprocessor.extract_metadata(str(path), content, meta_tag)
        except (DocumentizeError, OSError) as exc:
            parser.exit(1, f"documentize show failed: {exc}\n")
        print(render_metadata(metadata).strip())
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def collect_components(target: Path, include: List[str], exclude: List[str]) -> List[Path]:
    """Return component files under ``target`` matching include but not exclude globs."""
    if target.is_file():
        return [target]
    found = set()
    for pattern in include:
        for path in target.glob(pattern):
            if not path.is_file():
                continue
            relative = path.relative_to(target).as_posix()
            if any(fnmatch(relative, skip) for skip in exclude):
                continue
            found.add(path)
    return sorted(found)


def _run_build(
    preprocessor: Preprocessor, target: Path, out: Optional[Path], *, dry_run: bool
) -> int:
    config = preprocessor.config
    out_dir = out or config.output_dir
    base = target if target.is_dir() else target.parent
    processed = skipped = failures = 0

    for path in collect_components(target, config.include, config.exclude):
        relative = path.relative_to(base)
        try:
            content = path.read_text(encoding="utf-8")
            result = preprocessor.markup(content, relative.as_posix())
        except (DocumentizeError, OSError, UnicodeDecodeError) as exc:
            _LOGGER.error("Failed to document %s: %s", relative, exc)
            failures += 1
            continue

        if result.processed:
            processed += 1
        else:
            skipped += 1

        if dry_run:
            if result.processed:
                diff = difflib.unified_diff(
                    content.splitlines(keepends=True),
                    result.content.splitlines(keepends=True),
                    fromfile=f"a/{relative.as_posix()}",
                    tofile=f"b/{relative.as_posix()}",
                )
                sys.stdout.writelines(diff)
            continue

        if out_dir is not None:
            destination = out_dir / relative
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination.write_text(result.content, encoding="utf-8")
        elif result.processed:
            path.write_text(result.content, encoding="utf-8")

    suffix = " (dry-run)" if dry_run else ""
    print(f"Documented {processed} component(s), skipped {skipped}{suffix}")
    return failures


if __name__ == "__main__":
    main(sys.argv[1:])
