"""
Repository for Conversation reads
"""

from typing import Optional

from boardroom.models.conversation import Conversation
from boardroom.services.database import DatabaseManager
from boardroom.repositories.board_repository import BoardRepository
from boardroom.repositories.message_repository import MessageRepository
from boardroom.utils.db_utils import QueryBuilder, record_to_dict


class ConversationRepository:
    """Read-only access to conversations with their board and transcript"""

    def __init__(self, db_manager: DatabaseManager):
        self.db = db_manager
        self.schema = db_manager.schema
        self.table = "conversations"
        self.boards = BoardRepository(db_manager)
        self.messages = MessageRepository(db_manager)

    async def get_for_owner(self, conversation_id: str, user_id: str) -> Optional[Conversation]:
        """
        Get a conversation owned by ``user_id``, with its board roster and
        every message oldest first. Returns None when the conversation does
        not exist or belongs to someone else.
        """
        query, values = QueryBuilder.select(
            self.table,
            columns=["id", "title", "context", "user_id", "board_id", "created_at"],
            conditions={"id": conversation_id, "user_id": user_id},
            schema=self.schema
        )
        row = await self.db.execute_query(query, *values, fetch_one=True)
        if not row:
            return None

        data = record_to_dict(row)
        board = await self.boards.get_with_personas(data.pop("board_id"))
        if not board:
            return None

        messages = await self.messages.list_for_conversation(conversation_id)
        return Conversation(board=board, messages=messages, **data)
