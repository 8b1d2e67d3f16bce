# llm/normalizer.py
"""
Record Normalizer for generative-model event output
Repairs raw model text into canonical Event records:
- Strips markdown code fences, then parses into an untyped JSON tree
- Validates each record field by field; records that cannot become an
  Event (not an object, no title) are dropped
- Guarantees a non-empty, per-result unique id, an imageUrl and a link

Parse failure yields an empty list and is only distinguishable from a
genuinely empty answer through the log.
"""

import json
import re
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from urllib.parse import quote

from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from ..errors import ParseError
from ..schemas.event_schemas import Coordinates, Event, RecommendationLevel

PLACEHOLDER_IMAGE_URL = "https://picsum.photos/seed/{seed}/800/600"
FALLBACK_LINK_URL = "https://www.google.com/search?q={query}"

_WHITESPACE = re.compile(r"\s")
_TEXT_FIELDS = ("description", "date", "location", "category")
_OPTIONAL_TEXT_FIELDS = ("price", "justification")


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class NormalizationContext:
    """Per-fetch inputs for id/link synthesis"""
    city: str
    source_prefix: str = "evt"  # "evt" for daily recommendations, "search" for search
    timestamp_ms: int = field(default_factory=_now_ms)


def encode_uri_component(value: str) -> str:
    return quote(value, safe="-_.!~*'()")


def placeholder_image_url(title: str, index: Optional[int] = None) -> str:
    """Deterministic placeholder seeded by the whitespace-stripped title (+ index)"""
    seed = _WHITESPACE.sub("", title)
    if index is not None:
        seed = f"{seed}{index}"
    return PLACEHOLDER_IMAGE_URL.format(seed=quote(seed, safe=""))


def fallback_link(title: str, city: str) -> str:
    return FALLBACK_LINK_URL.format(query=encode_uri_component(f"{title} {city} tickets"))


def synthesize_id(context: NormalizationContext, index: int) -> str:
    """{sourcePrefix}-{cityPrefix3}-{index}-{timestamp}"""
    return f"{context.source_prefix}-{context.city[:3]}-{index}-{context.timestamp_ms}"


def extract_json_array(text: Optional[str]) -> List[Any]:
    """
    Strip code fences and parse a JSON array.

    Raises:
        ParseError: empty text, invalid JSON, or a non-array document
    """
    if not text or not text.strip():
        raise ParseError("Empty response", raw_text=text)

    clean = text.strip()
    if clean.startswith("```json"):
        clean = clean[7:]
    if clean.startswith("```"):
        clean = clean[3:]
    if clean.endswith("```"):
        clean = clean[:-3]

    try:
        parsed = json.loads(clean)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON: {e}", raw_text=text) from e

    if not isinstance(parsed, list):
        raise ParseError(f"Expected a JSON array, got {type(parsed).__name__}", raw_text=text)
    return parsed


def _as_text(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _as_level(value: Any) -> Optional[RecommendationLevel]:
    if not isinstance(value, str):
        return None
    for level in RecommendationLevel:
        if value.strip().lower() == level.value.lower():
            return level
    return None


def _as_coordinates(value: Any) -> Optional[Coordinates]:
    if not isinstance(value, dict):
        return None
    try:
        return Coordinates(lat=float(value["lat"]), lng=float(value["lng"]))
    except (KeyError, TypeError, ValueError):
        return None


class RecordNormalizer:
    """Turns raw model text into a list of valid Events, never raising"""

    def normalize(self, raw_text: Optional[str], context: NormalizationContext) -> List[Event]:
        try:
            records = extract_json_array(raw_text)
        except ParseError as e:
            logger.error(f"Failed to parse JSON from model response: {e} | raw={e.raw_text!r:.200}")
            return []

        events: List[Event] = []
        seen_ids = set()

        for index, record in enumerate(records):
            event = self.normalize_record(record, index, context)
            if event is None:
                continue
            if event.id in seen_ids:
                event.id = synthesize_id(context, index)
            seen_ids.add(event.id)
            events.append(event)

        dropped = len(records) - len(events)
        if dropped:
            logger.warning(f"Dropped {dropped} of {len(records)} malformed event records")

        logger.info(f"Normalized {len(events)} events for {context.city} ({context.source_prefix})")
        return events

    def normalize_record(
        self,
        record: Any,
        index: int,
        context: NormalizationContext
    ) -> Optional[Event]:
        """Validate one record; returns None when it cannot become an Event"""
        if not isinstance(record, dict):
            logger.debug(f"Skipping record {index}: not an object")
            return None

        title = _as_text(record.get("title"))
        if not title or not title.strip():
            logger.debug(f"Skipping record {index}: missing title")
            return None

        data: Dict[str, Any] = {"title": title}

        raw_id = _as_text(record.get("id"))
        data["id"] = raw_id.strip() if raw_id and raw_id.strip() else synthesize_id(context, index)

        for name in _TEXT_FIELDS:
            data[name] = _as_text(record.get(name)) or ""
        for name in _OPTIONAL_TEXT_FIELDS:
            data[name] = _as_text(record.get(name))

        image_url = _as_text(record.get("imageUrl"))
        data["imageUrl"] = image_url if image_url else placeholder_image_url(title, index)

        link = _as_text(record.get("link"))
        data["link"] = link if link else fallback_link(title, context.city)

        data["recommendationLevel"] = _as_level(record.get("recommendationLevel"))
        data["coordinates"] = _as_coordinates(record.get("coordinates"))

        if isinstance(record.get("isUserCreated"), bool):
            data["isUserCreated"] = record["isUserCreated"]

        try:
            return Event.model_validate(data)
        except PydanticValidationError as e:
            logger.debug(f"Skipping record {index}: {e}")
            return None
