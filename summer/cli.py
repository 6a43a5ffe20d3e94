from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from .engine import run_apply, run_check, run_list, run_render
from .errors import SummerUserError
from .intentions import IntentionOutcome
from .jsonic import dumps as jdumps
from .types import Caret, RunOptions
from .version import tool_version

# Outcomes that mean "the requested edit could not be offered"
_UNSUPPORTED = {IntentionOutcome.NOT_APPLICABLE.value, IntentionOutcome.NO_PRESENTER_CLASS.value}


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose or os.environ.get("SUMMER_DEBUG") else logging.WARNING
    logger = logging.getLogger("summer")
    logger.setLevel(level)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(h)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="summer",
        description="Caret-driven edits for Kotlin presenters (view-state proxy sync)",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument("--config", type=Path, help="path to summer.yaml (default: ./summer.yaml if present)")
    p.add_argument("--verbose", action="store_true", help="debug logging on stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    # Arguments shared by check/apply/render
    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("file", type=Path, help="Kotlin source file")
        where = sp.add_mutually_exclusive_group(required=True)
        where.add_argument("--at", metavar="LINE:COL", help="1-based caret position")
        where.add_argument("--offset", type=int, metavar="N", help="0-based character offset of the caret")
        sp.add_argument("--intention", metavar="NAME", help="run only this intention (see 'list intentions')")

    sp_check = sub.add_parser("check", help="JSON: intentions available at the caret")
    add_common(sp_check)

    sp_apply = sub.add_parser("apply", help="run the top intention at the caret and save the file (JSON report)")
    add_common(sp_apply)
    sp_apply.add_argument("--dry-run", action="store_true", help="do not write the file back")

    sp_render = sub.add_parser("render", help="print the edited source instead of saving it")
    add_common(sp_render)

    sp_list = sub.add_parser("list", help="lists of entities (JSON)")
    sp_list.add_argument("what", choices=["intentions"], help="what to list")

    return p


def _caret(ns: argparse.Namespace) -> Caret:
    if getattr(ns, "offset", None) is not None:
        return Caret(offset=ns.offset)
    return Caret.parse(ns.at)


def _opts(ns: argparse.Namespace) -> RunOptions:
    return RunOptions(
        config_path=ns.config,
        intention=getattr(ns, "intention", None),
        dry_run=bool(getattr(ns, "dry_run", False)),
    )


def main(argv: Optional[list[str]] = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(ns.verbose)

    try:
        if ns.cmd == "check":
            report = run_check(ns.file, _caret(ns), _opts(ns))
            sys.stdout.write(jdumps(report.model_dump(mode="json", by_alias=True)))
            return 0 if report.intentions else 1

        if ns.cmd == "apply":
            result = run_apply(ns.file, _caret(ns), _opts(ns))
            sys.stdout.write(jdumps(result.model_dump(mode="json", by_alias=True)))
            return 1 if result.outcome in _UNSUPPORTED else 0

        if ns.cmd == "render":
            sys.stdout.write(run_render(ns.file, _caret(ns), _opts(ns)))
            return 0

        if ns.cmd == "list":
            if ns.what == "intentions":
                sys.stdout.write(jdumps(run_list().model_dump(mode="json", by_alias=True)))
                return 0
            raise ValueError(f"Unknown list target: {ns.what}")

    except SummerUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2
    except ValueError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
