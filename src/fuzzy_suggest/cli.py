from __future__ import annotations

import argparse
import sys
from pathlib import Path

from prompt_toolkit import PromptSession

from fuzzy_suggest.candidates import DEFAULT_CANDIDATES_FILE, read_candidates
from fuzzy_suggest.config import EngineConfig, load_config
from fuzzy_suggest.engine import SuggestionEngine
from fuzzy_suggest.exceptions import CandidateSourceError, ConfigurationError
from fuzzy_suggest.logger import VALID_LEVELS, configure_logging, get_logger
from fuzzy_suggest.metric import METRICS

logger = get_logger(__name__)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fuzzy autocomplete suggestions from a candidate list")
    parser.add_argument("query", nargs="?", default="", help="query (omit for interactive mode)")
    parser.add_argument(
        "--candidates",
        default=DEFAULT_CANDIDATES_FILE,
        help="file with one candidate per line",
    )
    parser.add_argument("--limit", type=int, default=None, help="max suggestion count")
    parser.add_argument("--max-distance", type=int, default=None, help="max edit distance to keep")
    parser.add_argument("--metric", choices=sorted(METRICS), default=None, help="string metric")
    parser.add_argument(
        "--memoize",
        action="store_true",
        default=None,
        help="compute each candidate representation once",
    )
    parser.add_argument("--config", default=None, help="JSON engine config file")
    parser.add_argument("--log-level", choices=VALID_LEVELS, default="WARNING", help="log level")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> EngineConfig:
    base = load_config(Path(args.config)) if args.config else EngineConfig()
    return base.merged(
        max_results=args.limit,
        max_distance=args.max_distance,
        metric=args.metric,
        memoize=args.memoize,
    )


def format_suggestions(engine: SuggestionEngine[str], query: str) -> list[str]:
    ranked = engine.rank(query)
    if not ranked:
        lines = ["No suggestions"]
    else:
        lines = [
            f"{idx:2d}. [{candidate.distance:3d}] {candidate.representation}"
            for idx, candidate in enumerate(ranked, start=1)
        ]
    exact = engine.exact_match(query)
    if exact is not None:
        lines.append(f"Exact match: {exact}")
    return lines


def _interactive(engine: SuggestionEngine[str]) -> None:
    session: PromptSession[str] = PromptSession()
    while True:
        try:
            query = session.prompt("Query> ").strip()
        except (EOFError, KeyboardInterrupt):
            return
        if not query:
            return
        print("\n".join(format_suggestions(engine, query)))


def run(argv: list[str]) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = build_config(args)
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    try:
        candidates = read_candidates(Path(args.candidates))
    except CandidateSourceError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    engine = SuggestionEngine.from_config(candidates, config)

    query = args.query.strip()
    if query:
        print("\n".join(format_suggestions(engine, query)))
    else:
        _interactive(engine)
    return 0


def main() -> None:
    raise SystemExit(run(sys.argv[1:]))
