"""
Repository for Board and roster reads
"""

from typing import List, Optional

from boardroom.models.persona import Board, Persona
from boardroom.services.database import DatabaseManager
from boardroom.utils.db_utils import QueryBuilder, record_to_dict


class BoardRepository:
    """Read-only access to boards and their persona rosters"""

    def __init__(self, db_manager: DatabaseManager):
        self.db = db_manager
        self.schema = db_manager.schema
        self.table = "boards"

    async def get_by_id(self, board_id: str) -> Optional[Board]:
        """Get a board without its roster"""
        query, values = QueryBuilder.select(
            self.table,
            columns=["id", "name", "description", "user_id", "is_public", "created_at"],
            conditions={"id": board_id},
            schema=self.schema
        )
        row = await self.db.execute_query(query, *values, fetch_one=True)
        return Board(**record_to_dict(row)) if row else None

    async def get_with_personas(self, board_id: str) -> Optional[Board]:
        """Get a board with its roster in membership order"""
        board = await self.get_by_id(board_id)
        if not board:
            return None

        personas = await self.list_personas(board_id)
        return board.model_copy(update={"personas": personas})

    async def list_personas(self, board_id: str) -> List[Persona]:
        """List the personas on a board, preserving insertion order"""
        query = f"""
        SELECT
            p.id, p.name, p.role, p.description,
            p.personality, p.mindset, p.expertise
        FROM {self.schema}.board_personas bp
        JOIN {self.schema}.personas p ON p.id = bp.persona_id
        WHERE bp.board_id = $1
        ORDER BY bp.position ASC, bp.created_at ASC
        """
        rows = await self.db.execute_query(query, board_id)
        return [Persona(**record_to_dict(row)) for row in rows]
