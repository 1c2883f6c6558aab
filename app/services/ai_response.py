"""
Response Parser - pull a JSON object out of raw model text.

The model is asked for bare JSON but often wraps it in prose or
markdown fences. We take everything from the first "{" to the last "}"
and try json.loads on it.

Known limitation: a reply with two separate JSON fragments spans both,
fails to parse, and comes back as the degraded object.
"""

import json
import logging
from typing import Any, Dict, Sequence

logger = logging.getLogger(__name__)


SUMMARY_FIELDS = ("summary", "key_insights", "strengths", "challenges", "recommended_preparation")
TIPS_FIELDS = ("tips", "common_questions", "skills_to_focus", "process_insights")


def _extract_json_object(text: str):
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        return None
    try:
        parsed = json.loads(text[start:end + 1])
    except (ValueError, RecursionError):
        return None
    return parsed if isinstance(parsed, dict) else None


def parse_response(
    raw_text: str,
    primary_field: str,
    fields: Sequence[str],
    primary_as_list: bool = False
) -> Dict[str, Any]:
    """
    Parse model output into a dict. Never raises.

    On success the parsed object is returned as-is (no schema checks).
    Otherwise the whole raw text goes into `primary_field` and every
    other expected field is an empty list.
    """
    raw_text = raw_text if isinstance(raw_text, str) else ("" if raw_text is None else str(raw_text))

    parsed = _extract_json_object(raw_text)
    if parsed is not None:
        return parsed

    logger.info("Model response contained no JSON object, using raw text")
    degraded: Dict[str, Any] = {field: [] for field in fields}
    degraded[primary_field] = [raw_text] if primary_as_list else raw_text
    return degraded


def parse_summary_response(raw_text: str) -> Dict[str, Any]:
    return parse_response(raw_text, "summary", SUMMARY_FIELDS)


def parse_preparation_response(raw_text: str) -> Dict[str, Any]:
    return parse_response(raw_text, "tips", TIPS_FIELDS, primary_as_list=True)
