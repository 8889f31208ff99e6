"""
Renders a persona into an in-character system instruction
"""

from boardroom.models.persona import Persona


DEFAULT_PERSONALITY = "Professional and helpful"

BEHAVIOR_DIRECTIVE = (
    "Respond as this persona would, staying in character. "
    "Keep responses concise (2-3 sentences) and actionable.\n"
    "Focus on insights relevant to your expertise area."
)


class PersonaPromptBuilder:
    """Pure function of persona state; no I/O"""

    def build(self, persona: Persona) -> str:
        lines = [f"You are {persona.name}, {persona.role}."]
        if persona.description and persona.description.strip():
            lines.append(persona.description.strip())

        lines.append("")
        lines.append(f"Your personality: {self.personality_of(persona)}")
        lines.append(f"Your expertise: {self.expertise_of(persona)}")
        lines.append("")
        lines.append(BEHAVIOR_DIRECTIVE)
        return "\n".join(lines)

    @staticmethod
    def personality_of(persona: Persona) -> str:
        for candidate in (persona.personality, persona.mindset):
            if candidate and candidate.strip():
                return candidate.strip()
        return DEFAULT_PERSONALITY

    @staticmethod
    def expertise_of(persona: Persona) -> str:
        if persona.expertise:
            return ", ".join(persona.expertise)
        return persona.role
