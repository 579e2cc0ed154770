from __future__ import annotations

import argparse
from dataclasses import asdict
from datetime import date
import sys
import importlib
import inspect

from loguru import logger


def _parse_ymd(s: str) -> date:
    from calpick.core.time import parse_ymd
    return parse_ymd(s)


def _setup_logging(verbose: bool) -> None:
    if not verbose:
        return
    logger.remove()
    logger.add(sys.stderr, level="DEBUG", format="{time:HH:mm:ss} | {level: <8} | {message} | {extra}")
    logger.enable("calpick")


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


def _options(args: argparse.Namespace):
    from calpick.options import CalendarOptions, load_options

    opts = load_options(args.config) if args.config else CalendarOptions()
    overrides = {}
    if args.mode is not None:
        overrides["mode"] = args.mode
    if args.theme is not None:
        overrides["theme"] = args.theme
    if args.week_start is not None:
        overrides["week_starts_on"] = args.week_start
    if args.no_weekends:
        overrides["disable_weekends"] = True
    return opts.tweak(**overrides) if overrides else opts


def _add_option_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument("--config", help="JSON options file")
    p.add_argument("--mode", choices=["single", "range"])
    p.add_argument("--theme")
    p.add_argument("--week-start", type=int, choices=[0, 1])
    p.add_argument("--no-weekends", action="store_true", help="disable Saturdays and Sundays")


def _fmt_event(ev) -> str:
    from calpick.core.types import DateChanged
    if isinstance(ev, DateChanged):
        return f"date_change({ev.date})"
    return f"range_change({ev.start}, {ev.end})"


def cmd_month(argv: list[str]) -> int:
    import calpick
    from calpick.diagnostics.pretty_month import print_month

    p = argparse.ArgumentParser(prog="calpick month", description="Print a month grid, optionally after a sequence of clicks")
    p.add_argument("month", nargs="?", help="YYYY-MM (default: month of the last click, else today)")
    p.add_argument("--click", action="append", default=[], help="YYYY-MM-DD (repeatable, applied in order)")
    p.add_argument("--today", help="YYYY-MM-DD override for 'today'")
    _add_option_flags(p)
    args = p.parse_args(argv)

    opts = _options(args)
    today = _parse_ymd(args.today) if args.today else date.today()
    state = calpick.initial_state(opts.mode)
    clicks = [_parse_ymd(c) for c in args.click]
    for d in clicks:
        state = calpick.select(state, d, opts).state

    if args.month:
        shown = _parse_ymd(args.month + "-01")
    else:
        shown = clicks[-1] if clicks else today
    print_month(calpick.month_view(shown, state, opts, today=today))
    return 0


def cmd_select(argv: list[str]) -> int:
    import calpick

    p = argparse.ArgumentParser(prog="calpick select", description="Trace selection transitions for a sequence of clicks")
    p.add_argument("dates", nargs="+", help="YYYY-MM-DD clicks, in order")
    _add_option_flags(p)
    args = p.parse_args(argv)

    opts = _options(args)
    state = calpick.initial_state(opts.mode)
    print(f"start: {state.phase.value} {state}")
    for s in args.dates:
        res = calpick.select(state, _parse_ymd(s), opts)
        events = ", ".join(_fmt_event(e) for e in res.events) or "ignored"
        print(f"click {s}: {res.state.phase.value} {res.state}  [{events}]")
        state = res.state
    return 0


def cmd_themes(argv: list[str]) -> int:
    import calpick

    p = argparse.ArgumentParser(prog="calpick themes", description="List theme names")
    p.parse_args(argv)
    cat = calpick.get_catalog()
    for name in cat.list():
        kind = "monthly" if cat.is_monthly(name) else "static"
        print(f"{name:<12} {kind}")
    return 0


def cmd_theme(argv: list[str]) -> int:
    import calpick

    p = argparse.ArgumentParser(prog="calpick theme", description="Print the palette a theme resolves to")
    p.add_argument("name")
    p.add_argument("--month", type=int, choices=range(1, 13), metavar="{1..12}", default=date.today().month, help="1..12 (default: current month)")
    args = p.parse_args(argv)

    idx = args.month - 1
    palette = calpick.theme_for_month(args.name, idx)
    if calpick.get_catalog().is_monthly(args.name):
        print(f"{args.name} / {calpick.season_name(idx)}")
    for k, v in asdict(palette).items():
        if v is not None:
            print(f"  {k:<17} {v}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="calpick", description="Headless calendar / date-picker engine CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="log engine decisions to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("month", help="Print a month grid with selection markers")
    sub.add_parser("select", help="Trace selection transitions for a sequence of clicks")
    sub.add_parser("themes", help="List available themes")
    sub.add_parser("theme", help="Print the palette a theme resolves to")
    sub.add_parser("pretty-month", help="Print a bare month grid (diagnostics)")

    args, rest = p.parse_known_args(argv)
    _setup_logging(args.verbose)

    if args.cmd == "month":
        return cmd_month(rest)

    if args.cmd == "select":
        return cmd_select(rest)

    if args.cmd == "themes":
        return cmd_themes(rest)

    if args.cmd == "theme":
        return cmd_theme(rest)

    if args.cmd == "pretty-month":
        return _run_module_main("calpick.diagnostics.pretty_month", rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
