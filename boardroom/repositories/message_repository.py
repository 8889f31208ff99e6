"""
Repository for conversation message reads
"""

from typing import List

from boardroom.models.conversation import Message, parse_message
from boardroom.services.database import DatabaseManager
from boardroom.utils.db_utils import record_to_dict


class MessageRepository:
    """Read-only access to conversation messages"""

    def __init__(self, db_manager: DatabaseManager):
        self.db = db_manager
        self.schema = db_manager.schema
        self.table = "messages"

    def _base_query(self) -> str:
        return f"""
        SELECT
            m.id, m.type, m.content, m.created_at,
            m.user_id, m.persona_id,
            p.name AS persona_name
        FROM {self.schema}.{self.table} m
        LEFT JOIN {self.schema}.personas p ON p.id = m.persona_id
        WHERE m.conversation_id = $1
        """

    async def list_for_conversation(self, conversation_id: str) -> List[Message]:
        """Full transcript, oldest first"""
        query = self._base_query() + "ORDER BY m.created_at ASC, m.id ASC"
        rows = await self.db.execute_query(query, conversation_id)
        return [parse_message(record_to_dict(row)) for row in rows]

    async def list_for_context(
        self,
        conversation_id: str,
        limit: int,
        newest_first: bool = False
    ) -> List[Message]:
        """
        Bounded slice of a conversation, always returned oldest first.

        With ``newest_first=False`` the limit is applied to an ascending
        query, giving the earliest ``limit`` messages. With
        ``newest_first=True`` the newest ``limit`` messages are fetched
        and put back into chronological order.
        """
        direction = "DESC" if newest_first else "ASC"
        query = self._base_query() + f"ORDER BY m.created_at {direction}, m.id {direction} LIMIT $2"
        rows = await self.db.execute_query(query, conversation_id, limit)

        messages = [parse_message(record_to_dict(row)) for row in rows]
        if newest_first:
            messages.reverse()
        return messages

