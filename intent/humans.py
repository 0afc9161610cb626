"""
humans.txt generation (team credits).

Sections:
- /* TEAM */   always, one block per member
- /* THANKS */ only when there is something to thank
- /* SITE */   always, with the technology list split into
               Standards (anything mentioning HTML) and Components
"""

from .config import CreditsConfig, TeamMember


STANDARDS_TOKEN = 'html'


def classify_technology(technology: tuple[str, ...] | list[str]) -> tuple[list[str], list[str]]:
    """
    Split technology tags into (standards, components).

    A tag is a standard when it contains 'html' in any case; everything
    else is a component. Input order is kept within each bucket.
    """
    standards = []
    components = []
    for tag in technology:
        if STANDARDS_TOKEN in tag.lower():
            standards.append(tag)
        else:
            components.append(tag)
    return standards, components


def _member_lines(member: TeamMember) -> list[str]:
    lines = [f"{member.role}: {member.name}"]
    if member.link:
        lines.append(f"Contact: {member.link}")
    lines.append('')
    return lines


def render_credits(cfg: CreditsConfig) -> str:
    lines = ['/* TEAM */']
    for member in cfg.team:
        lines.extend(_member_lines(member))

    if cfg.thanks:
        lines.append('/* THANKS */')
        lines.extend(cfg.thanks)
        lines.append('')

    lines.extend([
        '/* SITE */',
        f"Last update: {cfg.last_update}",
        f"Language: {cfg.language}",
    ])

    standards, components = classify_technology(cfg.technology)
    if standards:
        lines.append(f"Standards: {', '.join(standards)}")
    if components:
        lines.append(f"Components: {', '.join(components)}")

    lines.append('')
    return '\n'.join(lines)
