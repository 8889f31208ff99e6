"""
Turns prior conversation messages into role-tagged turns for a completion call
"""

import logging
from typing import List, Optional

from boardroom.config.completion import OrchestratorConfig, ContextWindowMode
from boardroom.models.conversation import ChatRole, ChatTurn, Message, MessageType
from boardroom.repositories.message_repository import MessageRepository


logger = logging.getLogger(__name__)


def message_to_turn(message: Message) -> ChatTurn:
    """USER messages become user turns; everything else is attributed assistant text"""
    if message.type == MessageType.USER:
        return ChatTurn(role=ChatRole.USER, content=message.content)

    persona_name = getattr(message, "persona_name", None)
    content = f"{persona_name}: {message.content}" if persona_name else message.content
    return ChatTurn(role=ChatRole.ASSISTANT, content=content)


class ContextAssembler:
    """Loads a bounded slice of a conversation as completion context"""

    def __init__(
        self,
        message_repository: MessageRepository,
        config: Optional[OrchestratorConfig] = None
    ):
        self.messages = message_repository
        self.config = config or OrchestratorConfig()

    async def assemble(self, conversation_id: Optional[str]) -> List[ChatTurn]:
        if not conversation_id:
            return []

        newest_first = self.config.context_window_mode == ContextWindowMode.LATEST
        messages = await self.messages.list_for_context(
            conversation_id,
            limit=self.config.context_message_limit,
            newest_first=newest_first
        )
        logger.debug(
            f"Loaded {len(messages)} context messages for conversation {conversation_id} "
            f"({self.config.context_window_mode.value} window)"
        )
        return [message_to_turn(m) for m in messages]
