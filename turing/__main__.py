"""
CLI entry point. Run as: python -m turing [--checkers 2,7,14] [--script ...]
"""

import argparse
import sys

from .checkers import build_default_catalog
from .core.errors import LogicError
from .session import Prompter, SessionRecord, run_session
from .visualization import print_catalog, print_anomalies, print_history


def parse_ids(text: str) -> list:
    try:
        return [int(t) for t in text.split(",") if t.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected comma-separated IDs, got {text!r}") from None


def main(argv=None):
    parser = argparse.ArgumentParser(description="Turing machine code solver")
    parser.add_argument("--checkers", type=parse_ids, default=None,
                        help="Comma-separated checker IDs (default: ask)")
    parser.add_argument("--script", type=str, default="",
                        help="Comma-separated answers to replay before asking")
    parser.add_argument("--log",    type=str, default="turing.log",
                        help="File receiving every entered value (default turing.log)")
    parser.add_argument("--save",   type=str, default=None, help="Save session to file")
    parser.add_argument("--load",   type=str, default=None, help="Resume session from file")
    parser.add_argument("--keep-ambiguous", action="store_true",
                        help="Keep candidates that share a signature instead of evicting them")
    parser.add_argument("--list",   action="store_true", help="List checkers and exit")
    parser.add_argument("--quiet",  action="store_true", help="Less output")
    args = parser.parse_args(argv)

    catalog = build_default_catalog()

    if args.list:
        print_catalog(catalog)
        return

    record = None
    prompter = Prompter(script=args.script, log_path=args.log)

    try:
        if args.load:
            record = SessionRecord.load(args.load)
            print(f"Loaded session from {args.load} "
                  f"({len(record.observations)} observations)")
        engine, record = run_session(
            prompter, catalog,
            checker_ids=args.checkers,
            record=record,
            evict_ambiguous=not args.keep_ambiguous,
            save_path=args.save,
            verbose=not args.quiet,
        )
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return
    except (KeyError, LogicError, OSError, ValueError) as e:
        # KeyError wraps its message in quotes
        message = e.args[0] if isinstance(e, KeyError) and e.args else e
        print(f"ERROR : {message}")
        sys.exit(1)

    if not args.quiet:
        print_anomalies(engine)
        print_history(engine)

    if args.save:
        record.save(args.save)
        print(f"Session saved to {args.save}")


if __name__ == "__main__":
    main()
