from __future__ import annotations

from pathlib import Path

from fuzzy_suggest.exceptions import CandidateSourceError
from fuzzy_suggest.logger import get_logger

logger = get_logger(__name__)

DEFAULT_CANDIDATES_FILE = "candidates.txt"


def parse_candidates(text: str) -> list[str]:
    seen: set[str] = set()
    parsed: list[str] = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if line not in seen:
            seen.add(line)
            parsed.append(line)
    return parsed


def read_candidates(path: Path) -> list[str]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CandidateSourceError(f"cannot read candidates from {path}: {exc}") from exc
    candidates = parse_candidates(text)
    logger.debug("Loaded %d candidates from %s", len(candidates), path)
    return candidates
