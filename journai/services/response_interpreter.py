"""
Tiered interpretation of free-form mood-analysis replies.

Tiers, first non-None result wins:
1. structured: the reply is (or embeds) a JSON object with mood/summary/reason
2. heuristic: ``key: value`` lines, last matching line per key wins
3. default: a fixed prompting result

``interpret`` never raises; a reply that cannot be read at all yields the
default analysis.
"""
from __future__ import annotations

import json
import logging
import re
from typing import Any, Callable, List, Optional, Sequence

from journai.models.mood import Mood
from journai.schemas.analysis import AnalysisResult
from journai.services.analysis_prompt import extract_reply_text
from journai.utils.enums_mapping import normalize_mood

logger = logging.getLogger(__name__)

DEFAULT_SUMMARY = "Please share your journal thoughts and experiences for analysis"
DEFAULT_REASON = (
    "Unable to analyze the provided content. "
    "Please write about your day, feelings, or experiences."
)

# Passed by callers when the upstream generation call failed outright.
FAILED_RESPONSE = None

Tier = Callable[[str], Optional[AnalysisResult]]

_FENCED_JSON_RE = re.compile(r"```(?:json)?\s*(\{.*?\})\s*```", re.DOTALL | re.IGNORECASE)
_LEADING_JUNK_RE = re.compile(r"^[\"']*")
_TRAILING_JUNK_RE = re.compile(r"[\"',]*$")

# Checked in this order; a line is assigned to the first key it mentions.
HEURISTIC_KEYS = ("mood", "summary", "reason")


def default_analysis() -> AnalysisResult:
    return AnalysisResult(mood=Mood.NEUTRAL, summary=DEFAULT_SUMMARY, reason=DEFAULT_REASON)


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _json_candidates(text: str) -> List[str]:
    stripped = text.strip()
    out = [stripped]
    fenced = _FENCED_JSON_RE.search(stripped)
    if fenced:
        out.append(fenced.group(1))
    start, end = stripped.find("{"), stripped.rfind("}")
    if 0 <= start < end:
        out.append(stripped[start : end + 1])
    return out


def parse_structured(text: str) -> Optional[AnalysisResult]:
    """Read the reply as a JSON object, bare or embedded in prose/code fences."""
    for candidate in _json_candidates(text):
        try:
            data = json.loads(candidate)
        except (ValueError, RecursionError):
            continue
        if not isinstance(data, dict):
            continue
        return AnalysisResult(
            mood=normalize_mood(data.get("mood")),
            summary=_as_text(data.get("summary")),
            reason=_as_text(data.get("reason")),
        )
    return None


def _extract_value(line: str) -> str:
    idx = line.find(":")
    if idx == -1:
        return ""
    value = line[idx + 1 :].strip()
    value = _LEADING_JUNK_RE.sub("", value)
    value = _TRAILING_JUNK_RE.sub("", value)
    return value.strip()


def parse_heuristic(text: str) -> Optional[AnalysisResult]:
    """Scan ``key: value`` lines; later lines overwrite earlier ones."""
    found = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        lowered = line.lower()
        for key in HEURISTIC_KEYS:
            if key in lowered:
                found[key] = _extract_value(line)
                break
    if not found:
        return None
    return AnalysisResult(
        mood=normalize_mood(found.get("mood")),
        summary=found.get("summary", ""),
        reason=found.get("reason", ""),
    )


class ResponseInterpreter:
    """Runs the parsing tiers in priority order."""

    def __init__(self, tiers: Optional[Sequence[Tier]] = None) -> None:
        self.tiers: List[Tier] = list(tiers) if tiers is not None else [parse_structured, parse_heuristic]

    def interpret(self, raw_text: Optional[str]) -> AnalysisResult:
        if not isinstance(raw_text, str) or not raw_text.strip():
            return default_analysis()

        for tier in self.tiers:
            name = getattr(tier, "__name__", repr(tier))
            try:
                result = tier(raw_text)
            except Exception:
                logger.warning("[analysis] tier %s failed, falling through", name, exc_info=True)
                continue
            if result is not None:
                logger.debug("[analysis] reply interpreted by tier %s", name)
                return result

        logger.info("[analysis] reply unreadable, using default analysis (len=%d)", len(raw_text))
        return default_analysis()

    def interpret_envelope(self, envelope: Any) -> AnalysisResult:
        """Unwrap a generation-service response and interpret its reply text."""
        return self.interpret(extract_reply_text(envelope))


_default_interpreter = ResponseInterpreter()


def interpret(raw_text: Optional[str]) -> AnalysisResult:
    return _default_interpreter.interpret(raw_text)


def interpret_envelope(envelope: Any) -> AnalysisResult:
    return _default_interpreter.interpret_envelope(envelope)
