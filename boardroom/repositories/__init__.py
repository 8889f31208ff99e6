"""
Repository layer for database reads
"""

from .board_repository import BoardRepository
from .message_repository import MessageRepository
from .conversation_repository import ConversationRepository

__all__ = [
    "BoardRepository",
    "MessageRepository",
    "ConversationRepository"
]
