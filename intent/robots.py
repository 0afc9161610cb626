"""
robots.txt generation.

Emits a single user-agent group. Allow rules always precede Disallow rules,
whatever order they were supplied in; Crawl-delay and Sitemap are written
only when set.

Usage:
    from intent.robots import render_robots
    from intent.config import RobotsConfig

    text = render_robots(RobotsConfig(disallow_paths=('/admin/*',)))
"""

from .config import RobotsConfig


def render_robots(cfg: RobotsConfig) -> str:
    lines = [f"User-agent: {cfg.user_agent}"]
    lines.extend(f"Allow: {path}" for path in cfg.allow_paths)
    lines.extend(f"Disallow: {path}" for path in cfg.disallow_paths)

    if cfg.crawl_delay > 0:
        lines.append(f"Crawl-delay: {cfg.crawl_delay}")

    if cfg.sitemap:
        lines.append(f"Sitemap: {cfg.sitemap}")

    lines.append('')
    return '\n'.join(lines)
