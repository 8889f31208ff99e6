"""
Test fixtures for persona and board data
"""

import json

# Advisory board personas, in roster order
TEST_PERSONAS = [
    {
        "id": "persona_cfo",
        "name": "Morgan Hale",
        "role": "Chief Financial Officer",
        "description": "Former investment banker who now runs finance for a growth-stage SaaS company",
        "personality": "Analytical, cautious, numbers-first",
        "mindset": "Protect the runway",
        "expertise": json.dumps(["Financial Planning", "Fundraising", "Unit Economics"])
    },
    {
        "id": "persona_cmo",
        "name": "Riley Chen",
        "role": "Chief Marketing Officer",
        "description": "Built three consumer brands from zero to national reach",
        "personality": "Energetic and customer obsessed",
        "mindset": None,
        "expertise": json.dumps(["Brand Strategy", "Growth Marketing"])
    },
    {
        "id": "persona_cto",
        "name": "Sam Okafor",
        "role": "Chief Technology Officer",
        "description": None,
        "personality": None,
        "mindset": "Ship small, learn fast",
        "expertise": json.dumps(["Platform Architecture", "Engineering Leadership"])
    },
    {
        "id": "persona_coach",
        "name": "Jordan Blake",
        "role": "Executive Coach",
        "description": "",
        "personality": None,
        "mindset": None,
        "expertise": None
    },
    {
        "id": "persona_legal",
        "name": "Avery Stone",
        "role": "General Counsel",
        "description": "Corporate and employment law",
        "personality": "Measured",
        "mindset": None,
        "expertise": json.dumps(["Contracts", "Compliance"])
    }
]


def get_test_persona(persona_id: str) -> dict:
    """Get a specific test persona by id"""
    for persona in TEST_PERSONAS:
        if persona["id"] == persona_id:
            return persona
    return None
