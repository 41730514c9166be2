"""Prompt construction and reply-envelope unwrapping for journal mood analysis.

The generation call itself lives in the API layer; this module only shapes
what is sent and pulls the reply text back out of what is received.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from journai.utils.enums_mapping import MOOD_LOOKUP

logger = logging.getLogger(__name__)

MOOD_CHOICES = ", ".join(MOOD_LOOKUP)

ANALYSIS_PROMPT_TEMPLATE = """You are an expert emotional intelligence AI assistant. Analyze the following journal entry and return insights in a strictly formatted JSON.

JOURNAL ENTRY:
{journal_text}

TASK:
1. Determine the primary mood or emotion expressed in the text.
2. Generate a one-line summary of the user's day or emotional state.
3. Provide a brief reason explaining why this mood was identified.

RESPONSE FORMAT:
Respond ONLY with a valid JSON object in this exact format:
{{
  "mood": "[one of the following: {moods}]",
  "summary": "[one-line summary of the day/experience in 15-30 words]",
  "reason": "[brief explanation citing specific phrases or emotional indicators from the journal entry]"
}}

IMPORTANT INSTRUCTIONS:
- The mood must be one of these EXACT values: {moods}.
- Do not invent or choose any mood word outside of this list.
- Only include the JSON object in your response.
- The summary should be concise and reflect the emotional tone of the entry.
- The reason must clearly reference emotional signals or language from the journal.
- Use "neutral" for entries that don't express strong emotions or are matter-of-fact.
- Use "tired" for entries expressing physical or mental exhaustion, fatigue, or feeling drained.

Respond with only the JSON, and nothing else.
"""


def build_analysis_prompt(journal_text: str) -> str:
    return ANALYSIS_PROMPT_TEMPLATE.format(journal_text=journal_text or "", moods=MOOD_CHOICES)


def build_request_body(prompt: str) -> Dict[str, Any]:
    return {"contents": [{"parts": [{"text": prompt}]}]}


def extract_reply_text(envelope: Any) -> Optional[str]:
    """Return ``candidates[0].content.parts[0].text`` or None if the shape is missing.

    Accepts the decoded response dict or its raw JSON string.
    """
    if envelope is None:
        return None
    if isinstance(envelope, (str, bytes)):
        try:
            envelope = json.loads(envelope)
        except (ValueError, RecursionError):
            logger.debug("[analysis] reply envelope is not JSON")
            return None
    if not isinstance(envelope, dict):
        return None

    candidates = envelope.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return None
    first = candidates[0]
    content = first.get("content") if isinstance(first, dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
        return None
    text = parts[0].get("text")
    return text if isinstance(text, str) else None
