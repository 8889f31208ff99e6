"""
Persona and Board models as read from storage
"""

import json
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator


class Persona(BaseModel):
    """A configured character a completion call is asked to role-play"""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: str
    name: str = Field(..., min_length=1)
    role: str = Field(..., description="Job title or function, e.g. 'Chief Financial Officer'")
    description: Optional[str] = None
    personality: Optional[str] = None
    mindset: Optional[str] = None
    expertise: List[str] = Field(
        default_factory=list,
        description="Ordered areas of expertise; stored as JSON text"
    )

    @field_validator("expertise", mode="before")
    @classmethod
    def parse_expertise(cls, value):
        """Accept the serialized JSON form used by storage"""
        if value is None:
            return []
        if isinstance(value, str):
            text = value.strip()
            if not text:
                return []
            try:
                parsed = json.loads(text)
            except json.JSONDecodeError:
                # Legacy rows hold a bare label rather than a JSON array
                return [text]
            if isinstance(parsed, str):
                return [parsed]
            return parsed
        return value

    @field_validator("expertise")
    @classmethod
    def drop_blank_expertise(cls, value: List[str]) -> List[str]:
        return [item.strip() for item in value if item and item.strip()]


class Board(BaseModel):
    """A named panel of personas assembled by a user"""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: Optional[str] = None
    user_id: str = Field(..., description="Owning user")
    is_public: bool = False
    personas: List[Persona] = Field(
        default_factory=list,
        description="Roster in board membership order"
    )
    created_at: Optional[datetime] = None

    def is_accessible_by(self, user_id: str) -> bool:
        """Public boards are readable by anyone, private ones only by their owner"""
        return self.is_public or self.user_id == user_id

    def find_persona(self, persona_id: Optional[str]) -> Optional[Persona]:
        if persona_id is None:
            return None
        for persona in self.personas:
            if persona.id == persona_id:
                return persona
        return None

    @property
    def persona_names(self) -> List[str]:
        return [p.name for p in self.personas]
