"""Test doubles for collaborators and geolocation."""
from __future__ import annotations

import json
from datetime import datetime
from typing import List, Optional, Sequence, Tuple

from citysense.llm.collaborator import ChatReply

FIXED_NOW = datetime(2026, 10, 19, 9, 30)


class ScriptedCollaborator:
    """Returns queued responses in order and records every call."""

    def __init__(self, responses: Optional[List[str]] = None, error: Optional[Exception] = None,
                 chat_reply: Optional[ChatReply] = None):
        self.responses = list(responses or [])
        self.error = error
        self.chat_reply = chat_reply or ChatReply(text="Try the jazz club downtown.")
        self.calls: List[Tuple[str, bool]] = []
        self.chat_calls: List[Tuple[str, Sequence[Tuple[str, str]], str]] = []

    async def generate(self, prompt: str, enable_web_search: bool = False) -> str:
        self.calls.append((prompt, enable_web_search))
        if self.error is not None:
            raise self.error
        return self.responses.pop(0) if self.responses else ""

    async def chat(self, system_instruction, history, message, enable_web_search=True) -> ChatReply:
        self.chat_calls.append((system_instruction, list(history), message))
        if self.error is not None:
            raise self.error
        return self.chat_reply


class FixedGeolocation:
    def __init__(self, position=(25.7617, -80.1918), error: Optional[Exception] = None):
        self.position = position
        self.error = error
        self.calls = 0

    async def get_current_position(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.position


def make_raw_events(count: int, missing_ids: Sequence[int] = (), **overrides) -> str:
    records = []
    for i in range(count):
        record = {
            "id": f"mia-{i}",
            "title": f"Jazz Night {i}",
            "description": "Live quartet",
            "date": "Mon, Oct 19 • 8:00 PM",
            "location": "Ball & Chain, Little Havana",
            "category": "Music",
            "price": "$20",
            "recommendationLevel": "Highly Recommended" if i % 2 == 0 else "Consider",
            "justification": "Matches your love of jazz",
            "link": f"https://tickets.example.com/{i}",
            "imageUrl": f"https://img.example.com/{i}.jpg",
            "coordinates": {"lat": 25.76 + i / 100, "lng": -80.19},
        }
        record.update(overrides)
        if i in missing_ids:
            del record["id"]
        records.append(record)
    return json.dumps(records)


