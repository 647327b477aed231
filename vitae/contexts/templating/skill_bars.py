"""Skill bar formatter: a skill level becomes a filled horizontal bar."""

from typing import Iterable, List

from vitae.contexts.intake.cv_data_structures import Skill
from vitae.contexts.templating.defaults import DEFAULT_SKILL_BARS
from vitae.contexts.templating.logger import _log_warning


def bar_width_percent(level: float, out_of: float) -> int:
    """
    Share of the bar to fill, as a whole percentage clamped to 0-100.

    Raises:
        ValueError: If out_of isn't positive
    """
    if out_of <= 0:
        raise ValueError(f"Skill scale must be positive, got out_of={out_of}")

    width = round(level / out_of * 100)
    if width < 0 or width > 100:
        _log_warning(f"Skill level {level} outside 0-{out_of}, clamping")
        width = min(max(width, 0), 100)
    return width


def skill_bar(
    skill: str,
    level: float,
    out_of: float = DEFAULT_SKILL_BARS["out_of"],
    bar_color: str = DEFAULT_SKILL_BARS["bar_color"],
    bar_background: str = DEFAULT_SKILL_BARS["bar_background"],
) -> str:
    """
    Render one skill as a ``div.skill-bar`` filled up to its level.

    Example:
        >>> skill_bar("Python", 4)
        '<div class="skill-bar" style="background:linear-gradient(to right, #969696 80%, #d9d9d9 80% 100%)">Python</div>'
    """
    width = bar_width_percent(level, out_of)
    return (
        f'<div class="skill-bar" style="background:linear-gradient(to right, '
        f'{bar_color} {width}%, {bar_background} {width}% 100%)">{skill}</div>'
    )


def skill_bars(skills: Iterable[Skill], **style) -> List[str]:
    """Render every skill, keeping table order."""
    return [skill_bar(skill.name, skill.level, **style) for skill in skills]
