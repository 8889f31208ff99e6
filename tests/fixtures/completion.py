"""
Test doubles for the completion service
"""

from typing import List, Sequence

from boardroom.services.completion_service import CompletionService
from boardroom.services.exceptions import ExternalServiceError


def persona_name_from_prompt(system_prompt: str) -> str:
    """Recover the persona name from "You are <name>, <role>." """
    return system_prompt.split(",", 1)[0].replace("You are ", "", 1)


class StubCompletionService(CompletionService):
    """Deterministic completion stub that records every call"""

    def __init__(self, failing_personas: Sequence[str] = (), reply_template: str = "{name} says: noted."):
        self.failing_personas = set(failing_personas)
        self.reply_template = reply_template
        self.calls: List[dict] = []

    async def complete(self, messages, max_output_tokens, temperature):
        self.calls.append({
            "messages": list(messages),
            "max_output_tokens": max_output_tokens,
            "temperature": temperature
        })
        name = persona_name_from_prompt(messages[0].content)
        if name in self.failing_personas:
            raise ExternalServiceError(f"API error 500: upstream failure for {name}")
        return self.reply_template.format(name=name)
