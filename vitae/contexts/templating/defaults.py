"""
Default values for VITAE documents.

Provides shared defaults used by:
- section_renderer.py (sentinels and block layout)
- skill_bars.py (bar colors and scale)
- config_resolver.py (base config every user config is merged over)
"""

from typing import Any, Dict

# Text shown in place of an absent title, location, institution or timeline
NA_SENTINEL = "N/A"

# End label for positions without an end year
ONGOING_LABEL = "Present"

# Stands in for the bullet region of a record without descriptions
DESCRIPTION_PLACEHOLDER = "&nbsp;"

# Blank lines closing every rendered block
BLOCK_SEPARATOR = "\n\n\n"

DEFAULT_SKILL_BARS = {
    "out_of": 5,
    "bar_color": "#969696",
    "bar_background": "#d9d9d9",
}

DEFAULT_SECTIONS = [
    {"id": "education", "heading": "Education", "icon": "graduation-cap"},
    {"id": "industry_positions", "heading": "Industry Experience", "icon": "suitcase"},
    {"id": "research_positions", "heading": "Research Experience", "icon": "laptop"},
]


def get_default_config() -> Dict[str, Any]:
    """
    Get the complete default config structure with all expected keys.

    Paths default to None (tables not loaded). User configs are merged over
    this structure, so every key read elsewhere is guaranteed to exist.

    Returns:
        Dict with data, document and skill_bars sections
    """
    return {
        "data": {
            "positions": None,
            "skills": None,
            "text_blocks": None,
            "contact_info": None,
        },
        "document": {
            "name": "",
            "title": "",
            "template": "cv",
            "pdf_export": False,
            "resume_only": False,
            "intro_text_block": "intro",
            "aside_text_block": "aside",
            "sections": [dict(section) for section in DEFAULT_SECTIONS],
        },
        "skill_bars": DEFAULT_SKILL_BARS.copy(),
    }
