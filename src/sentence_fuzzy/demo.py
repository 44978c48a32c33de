# src/sentence_fuzzy/demo.py
import argparse
import json
import logging
import sys


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sfz-demo",
        description="Rank candidates against a fuzzy query (lower score is better).",
    )
    parser.add_argument("needle", help="Query string, e.g. /u/b/s")
    parser.add_argument(
        "candidates",
        nargs="+",
        help="Strings to rank, e.g. /usr/local/bin/sh /usr/bin/ssh",
    )
    parser.add_argument(
        "--sep",
        action="append",
        default=[],
        dest="separators",
        help="Separator substring; repeat for several (applied in order)",
    )
    parser.add_argument("--profile", help="Named profile from penalty_profiles.json")
    parser.add_argument("--add", type=int, help="Penalty per unmatched hay char")
    parser.add_argument("--remove", type=int, help="Penalty per missing needle char")
    parser.add_argument("--move", type=int, help="Penalty per unit of disorder")
    parser.add_argument(
        "--top-k",
        type=int,
        default=10,
        dest="top_k",
        help="Max candidates to print",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    return parser


def main(argv=None):
    """CLI demo: rank candidates for a needle and print scores with highlight positions."""
    from dotenv import load_dotenv

    from .matching import (
        InvalidSeparator,
        PenaltyConfigError,
        add_penalty,
        load_penalty_profile,
        move_penalty,
        penalties_from_env,
        rank,
        remove_penalty,
    )
    from .matching.utils import ConfigFileNotFound, ConfigParseError, DataDirNotFound

    args = _build_parser().parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    load_dotenv()

    try:
        # profile < env < flags
        overrides = load_penalty_profile(args.profile) if args.profile else []
        overrides += penalties_from_env()
        if args.add is not None:
            overrides.append(add_penalty(args.add))
        if args.remove is not None:
            overrides.append(remove_penalty(args.remove))
        if args.move is not None:
            overrides.append(move_penalty(args.move))

        ranked = rank(overrides, args.separators, args.needle, args.candidates)
    except (
        InvalidSeparator,
        PenaltyConfigError,
        ConfigFileNotFound,
        ConfigParseError,
        DataDirNotFound,
    ) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    rows = [
        {
            "candidate": candidate,
            "score": result.score,
            "highlights": list(result.highlights()),
        }
        for candidate, result in ranked[: args.top_k]
    ]
    print(json.dumps(rows, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
