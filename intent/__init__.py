"""
Intent declaration documents for crawlers and AI agents.

Primary interface:
    from intent import normalize, render_documents

    cfg = normalize(answers, formats={'llms', 'ai', 'robots', 'humans'})
    docs = render_documents(cfg)

    # Returns {format_key: text} in canonical order:
    # - llms   -> .well-known/llms.txt (JSON policy manifest)
    # - ai     -> ai.txt
    # - robots -> robots.txt
    # - humans -> humans.txt
"""

from .config import (
    CAPABILITIES,
    FORMATS,
    OUTPUT_PATHS,
    PERMISSION_CHOICES,
    CreditsConfig,
    NormalizedConfig,
    PolicyConfig,
    RobotsConfig,
    TeamMember,
)
from .normalize import normalize, split_list, coerce_number
from .policy import render_policy_json, render_policy_text
from .robots import render_robots
from .humans import render_credits, classify_technology


__all__ = [
    'normalize',
    'render_documents',
    'render_policy_json',
    'render_policy_text',
    'render_robots',
    'render_credits',
    'classify_technology',
    'split_list',
    'coerce_number',
    'CAPABILITIES',
    'FORMATS',
    'OUTPUT_PATHS',
    'PERMISSION_CHOICES',
    'CreditsConfig',
    'NormalizedConfig',
    'PolicyConfig',
    'RobotsConfig',
    'TeamMember',
]


def render_documents(cfg: NormalizedConfig) -> dict[str, str]:
    """
    Render every requested document.

    Args:
        cfg: Output of normalize()

    Returns:
        Dict of format key -> document text, in FORMATS order
    """
    documents = {}
    for key in FORMATS:
        if key not in cfg.formats:
            continue
        if key == 'llms':
            documents[key] = render_policy_json(cfg.policy)
        elif key == 'ai':
            documents[key] = render_policy_text(cfg.policy)
        elif key == 'robots':
            documents[key] = render_robots(cfg.robots)
        elif key == 'humans':
            documents[key] = render_credits(cfg.credits)
    return documents
