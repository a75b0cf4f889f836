from __future__ import annotations

import random
from typing import Callable, Mapping, Sequence

from moodbot.static.responses import DEFAULT_MESSAGE_RESPONSE, KEYWORD_RESPONSES, MOOD_RESPONSES

__all__ = ("ContextualResponder",)

Chooser = Callable[[Sequence[str]], str]


class ContextualResponder:
    """
    Canned replies for the chat and mood endpoints.

    A message is matched against ordered keyword groups. Without a message,
    one of the templates for the mood is picked with ``choose``.
    """

    def __init__(
        self,
        templates: Mapping[str, Sequence[str]] = MOOD_RESPONSES,
        keyword_responses: Sequence[tuple[Sequence[str], str]] = KEYWORD_RESPONSES,
        *,
        choose: Chooser = random.choice,
        fallback_mood: str = "neutral",
        default_response: str = DEFAULT_MESSAGE_RESPONSE,
    ) -> None:
        if fallback_mood not in templates:
            raise ValueError(f"No templates for fallback mood {fallback_mood!r}")

        self.templates = templates
        self.keyword_responses = keyword_responses
        self.choose = choose
        self.fallback_mood = fallback_mood
        self.default_response = default_response

    def respond_to_message(self, message: str) -> str:
        lowered = message.lower()
        for keywords, response in self.keyword_responses:
            if any(keyword in lowered for keyword in keywords):
                return response

        return self.default_response

    def respond_to_mood(self, mood: str | None) -> str:
        responses = self.templates.get(mood or self.fallback_mood) or self.templates[self.fallback_mood]
        return self.choose(responses)

    def respond(self, mood: str | None = None, message: str | None = None) -> str:
        if message:
            return self.respond_to_message(message)

        return self.respond_to_mood(mood)
