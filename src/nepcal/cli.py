from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys
from typing import Tuple


_DATE_RE = re.compile(r"^\d{1,4}-\d{1,2}-\d{1,2}$")


def _parse_ymd(s: str) -> Tuple[int, int, int]:
    """Split YYYY-MM-DD into ints without range checks; validation is the library's job."""
    if not _DATE_RE.match(s):
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {s!r}")
    y, m, d = map(int, s.split("-"))
    return y, m, d


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _fail(prog: str, err: Exception) -> int:
    print(f"{prog}: error: {err}", file=sys.stderr)
    return 2


def cmd_to_bs(ymd: Tuple[int, int, int]) -> int:
    import nepcal

    try:
        bs = nepcal.gregorian_to_nepali(*ymd)
    except nepcal.NepcalError as e:
        return _fail("nepcal to-bs", e)
    print(bs.isoformat())
    return 0

def cmd_to_ad(ymd: Tuple[int, int, int]) -> int:
    import nepcal

    try:
        ad = nepcal.nepali_to_gregorian(*ymd)
    except nepcal.NepcalError as e:
        return _fail("nepcal to-ad", e)
    print(ad.isoformat())
    return 0

def cmd_validate(calendar: str, ymd: Tuple[int, int, int]) -> int:
    import nepcal

    check = nepcal.validate_gregorian if calendar == "ad" else nepcal.validate_nepali
    res = check(*ymd)
    if res.valid:
        print("valid")
        return 0
    print(f"invalid: {res.error}")
    return 1


def _expand_shorthand(argv: list[str]) -> list[str]:
    """`nepcal [-v] YYYY-MM-DD` means `nepcal [-v] to-bs YYYY-MM-DD`."""
    i = 0
    while i < len(argv) and argv[i] in ("-v", "--verbose"):
        i += 1
    if i < len(argv) and _DATE_RE.match(argv[i]):
        return argv[:i] + ["to-bs"] + argv[i:]
    return argv


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    argv = _expand_shorthand(list(argv))

    # -v is accepted before or after the subcommand; SUPPRESS keeps a
    # subparser from resetting a flag given at the top level.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-v", "--verbose", action="store_true", default=argparse.SUPPRESS,
                        help="Log conversions at DEBUG level")

    p = argparse.ArgumentParser(prog="nepcal", description="Bikram Sambat calendar toolkit CLI.",
                                epilog="A bare YYYY-MM-DD is shorthand for `to-bs YYYY-MM-DD`.")
    p.add_argument("-v", "--verbose", action="store_true", help="Log conversions at DEBUG level")
    sub = p.add_subparsers(dest="cmd", required=True)

    # to-bs
    p_bs = sub.add_parser("to-bs", parents=[common], help="Gregorian (AD) -> Bikram Sambat (BS)",
                          description="Gregorian (AD) -> Bikram Sambat (BS)")
    p_bs.add_argument("date", type=_parse_ymd, help="AD date, YYYY-MM-DD")

    # to-ad
    p_ad = sub.add_parser("to-ad", parents=[common], help="Bikram Sambat (BS) -> Gregorian (AD)",
                          description="Bikram Sambat (BS) -> Gregorian (AD)")
    p_ad.add_argument("date", type=_parse_ymd, help="BS date, YYYY-MM-DD")

    # validate
    p_val = sub.add_parser("validate", parents=[common], help="Check a date in either calendar",
                           description="Check a date in either calendar")
    p_val.add_argument("calendar", choices=["ad", "bs"])
    p_val.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD")

    # diagnostics; remaining arguments go to the tool's own parser
    p_diag = sub.add_parser("diag", parents=[common], help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "year-lengths"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    if rest and args.cmd != "diag":
        p.error(f"unrecognized arguments: {' '.join(rest)}")

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "to-bs":
        return cmd_to_bs(args.date)

    if args.cmd == "to-ad":
        return cmd_to_ad(args.date)

    if args.cmd == "validate":
        return cmd_validate(args.calendar, args.date)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "nepcal.diagnostics.round_trip",
            "year-lengths": "nepcal.diagnostics.year_lengths",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
