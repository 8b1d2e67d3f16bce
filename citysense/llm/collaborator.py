# llm/collaborator.py
"""
Generative text collaborator
The model call is opaque to the rest of the service: prompt in, free text
out (ideally JSON, possibly malformed). All parsing is the caller's job.

Provider:
- If OPENAI_API_KEY is set: OpenAI Responses API (optional web search tool)
- Otherwise: UnconfiguredCollaborator, which fails every call with
  CollaboratorError so the dashboard lands in its Failed state
"""

import asyncio
from dataclasses import dataclass, field
from typing import Awaitable, List, Optional, Protocol, Sequence, Tuple, TypeVar

from loguru import logger
from openai import AsyncOpenAI, OpenAIError

from ..config import settings
from ..errors import CollaboratorError

T = TypeVar("T")

WEB_SEARCH_TOOL = {"type": "web_search_preview"}


@dataclass
class ChatReply:
    """Model reply for one concierge turn"""
    text: str
    sources: List[Tuple[str, str]] = field(default_factory=list)  # (title, url)


class GenerativeTextCollaborator(Protocol):

    async def generate(self, prompt: str, enable_web_search: bool = False) -> str: ...

    async def chat(
        self,
        system_instruction: str,
        history: Sequence[Tuple[str, str]],
        message: str,
        enable_web_search: bool = True
    ) -> ChatReply: ...


async def call_with_timeout(awaitable: Awaitable[T], timeout: Optional[float] = None) -> T:
    """Await a collaborator call, turning expiry into CollaboratorError"""
    timeout = settings.COLLABORATOR_TIMEOUT_SECONDS if timeout is None else timeout
    try:
        return await asyncio.wait_for(awaitable, timeout=timeout)
    except asyncio.TimeoutError as e:
        raise CollaboratorError(f"Collaborator call timed out after {timeout}s") from e


class OpenAICollaborator:
    """OpenAI-backed implementation"""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None,
                 client: Optional[AsyncOpenAI] = None):
        self.model = model or settings.OPENAI_MODEL
        self.client = client or AsyncOpenAI(api_key=api_key or settings.OPENAI_API_KEY)
        logger.info(f"✓ LLM Provider: OpenAI ({self.model})")

    def _tools(self, enable_web_search: bool) -> dict:
        return {"tools": [WEB_SEARCH_TOOL]} if enable_web_search else {}

    async def generate(self, prompt: str, enable_web_search: bool = False) -> str:
        try:
            response = await self.client.responses.create(
                model=self.model,
                input=prompt,
                **self._tools(enable_web_search)
            )
        except OpenAIError as e:
            logger.error(f"OpenAI API error: {e}")
            raise CollaboratorError(f"OpenAI API error: {e}") from e

        return response.output_text or ""

    async def chat(
        self,
        system_instruction: str,
        history: Sequence[Tuple[str, str]],
        message: str,
        enable_web_search: bool = True
    ) -> ChatReply:
        messages = [
            {"role": "assistant" if role == "model" else "user", "content": text}
            for role, text in history
        ]
        messages.append({"role": "user", "content": message})

        try:
            response = await self.client.responses.create(
                model=self.model,
                instructions=system_instruction,
                input=messages,
                **self._tools(enable_web_search)
            )
        except OpenAIError as e:
            logger.error(f"OpenAI chat error: {e}")
            raise CollaboratorError(f"OpenAI chat error: {e}") from e

        return ChatReply(text=response.output_text or "", sources=self._citations(response))

    @staticmethod
    def _citations(response) -> List[Tuple[str, str]]:
        sources = []
        for item in getattr(response, "output", None) or []:
            if getattr(item, "type", None) != "message":
                continue
            for content in getattr(item, "content", None) or []:
                for annotation in getattr(content, "annotations", None) or []:
                    if getattr(annotation, "type", None) != "url_citation":
                        continue
                    url = getattr(annotation, "url", None)
                    title = getattr(annotation, "title", None)
                    if url and title:
                        sources.append((title, url))
        return sources


class UnconfiguredCollaborator:
    """Stand-in used when no API key is configured"""

    async def generate(self, prompt: str, enable_web_search: bool = False) -> str:
        raise CollaboratorError("API key not found")

    async def chat(self, system_instruction, history, message, enable_web_search=True) -> ChatReply:
        raise CollaboratorError("API key not found")


def create_collaborator() -> GenerativeTextCollaborator:
    if settings.use_openai:
        return OpenAICollaborator()
    logger.warning("OPENAI_API_KEY not set; model calls will fail until it is configured")
    return UnconfiguredCollaborator()
