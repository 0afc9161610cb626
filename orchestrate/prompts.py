"""
Interactive question flow.

Collects raw answers over input(). Every question shows its default and
Enter accepts it. Answers are returned as plain strings/lists; turning them
into typed records is intent.normalize's job.
"""

from __future__ import annotations

from datetime import date
from typing import Callable

from intent.config import (
    CAPABILITIES,
    DEFAULT_ALLOW_PATHS,
    DEFAULT_BASE_URL,
    DEFAULT_CONTACT,
    DEFAULT_CRAWL_DELAY,
    DEFAULT_LANGUAGE,
    DEFAULT_MODELS,
    DEFAULT_PERMISSION,
    DEFAULT_RATE_LIMIT_RPS,
    DEFAULT_ROLE,
    DEFAULT_SITE_NAME,
    DEFAULT_TECHNOLOGY,
    DEFAULT_USER_AGENT,
    FORMATS,
    LAST_UPDATE_FORMAT,
    PATH_FORMATS,
    PERMISSION_CHOICES,
    POLICY_FORMATS,
)


Ask = Callable[[str], str]

FILE_CHOICES = {
    'ai': 'ai.txt (AI/LLM policies)',
    'llms': 'llms.txt (LLM policies JSON)',
    'robots': 'robots.txt (Web crawler rules)',
    'humans': 'humans.txt (Team credits)',
}


class PromptAborted(Exception):
    """User closed stdin or hit Ctrl-C while answering."""


def _read(ask: Ask, message: str) -> str:
    try:
        return ask(message).strip()
    except (KeyboardInterrupt, EOFError) as exc:
        raise PromptAborted("Prompt aborted") from exc


def prompt_text(message: str, default: str = '', ask: Ask = input) -> str:
    suffix = f" [{default}]" if default else ''
    return _read(ask, f"{message}{suffix}: ") or default


def prompt_choice(message: str, choices: tuple[str, ...], default: str, ask: Ask = input) -> str:
    """Ask until the answer is one of choices."""
    while True:
        value = _read(ask, f"{message} ({'/'.join(choices)}) [{default}]: ").lower()
        if not value:
            return default
        if value in choices:
            return value
        print(f"Invalid response. Valid options: {', '.join(choices)}")


def prompt_checklist(
    message: str,
    choices: tuple[str, ...],
    default: tuple[str, ...],
    ask: Ask = input,
) -> list[str]:
    """Ask for a comma-separated subset of choices; result keeps choice order."""
    while True:
        value = _read(ask, f"{message} ({', '.join(choices)}) [{', '.join(default)}]: ")
        if not value:
            return list(default)
        picked = {item.strip().lower() for item in value.split(',') if item.strip()}
        invalid = sorted(picked.difference(choices))
        if not invalid and picked:
            return [choice for choice in choices if choice in picked]
        print(f"Invalid response. Valid options: {', '.join(choices)}")


def prompt_formats(ask: Ask = input) -> tuple[str, ...]:
    print("Which files would you like to generate?")
    for key in FORMATS:
        print(f"  {key:<7} {FILE_CHOICES[key]}")
    return tuple(prompt_checklist("Files", FORMATS, FORMATS, ask))


def prompt_team(ask: Ask = input) -> list[dict]:
    """Collect team members until an empty name is entered."""
    team = []
    while True:
        action = 'skip' if not team else 'finish'
        name = _read(ask, f"Team member name (or press Enter to {action}): ")
        if not name:
            return team
        role = prompt_text("Role/Title", DEFAULT_ROLE, ask)
        link = prompt_text("Contact link (GitHub, Twitter, website, etc.)", '', ask)
        team.append({'name': name, 'role': role, 'link': link})


def prompt_thanks(ask: Ask = input) -> list[str]:
    thanks = []
    while True:
        action = 'skip' if not thanks else 'finish'
        thank = _read(ask, f"Add a thank you (or press Enter to {action}): ")
        if not thank:
            return thanks
        thanks.append(thank)


def prompt_technology(ask: Ask = input) -> str:
    return prompt_text(
        "Technology stack (comma-separated, e.g., Node.js, React, HTML5)",
        ', '.join(DEFAULT_TECHNOLOGY),
        ask,
    )


def prompt_answers(
    formats: tuple[str, ...],
    ask: Ask = input,
    today: date | None = None,
) -> dict:
    """
    Ask the questions needed for the given formats.

    Returns:
        Raw answers dict keyed by prompt name (siteName, baseUrl, ...)
    """
    if today is None:
        today = date.today()
    wanted = set(formats)
    answers: dict = {}

    answers['siteName'] = prompt_text("Site / app name", DEFAULT_SITE_NAME, ask)
    answers['baseUrl'] = prompt_text("Public base URL", DEFAULT_BASE_URL, ask)

    if wanted & POLICY_FORMATS:
        answers['contact'] = prompt_text("Contact (for AI/LLM)", DEFAULT_CONTACT, ask)
        answers['models'] = prompt_text("Models (comma-separated)", ','.join(DEFAULT_MODELS), ask)
        answers['capabilities'] = prompt_checklist(
            "Capabilities allowed", CAPABILITIES, CAPABILITIES, ask)

    if wanted & PATH_FORMATS:
        answers['allowPaths'] = prompt_text(
            "Allow paths (comma-separated)", ','.join(DEFAULT_ALLOW_PATHS), ask)
        answers['disallowPaths'] = prompt_text("Disallow paths (comma-separated)", '', ask)

    if wanted & POLICY_FORMATS:
        answers['training'] = prompt_choice(
            "Training permission", PERMISSION_CHOICES, DEFAULT_PERMISSION, ask)
        answers['retention'] = prompt_choice(
            "Data retention permission", PERMISSION_CHOICES, DEFAULT_PERMISSION, ask)
        answers['commercialUse'] = prompt_choice(
            "Commercial use permission", PERMISSION_CHOICES, DEFAULT_PERMISSION, ask)
        answers['rateLimitRps'] = prompt_text(
            "Rate-limit RPS (for AI/LLM)", str(DEFAULT_RATE_LIMIT_RPS), ask)

    if 'robots' in wanted:
        answers['robotsUserAgent'] = prompt_text(
            "robots.txt User-agent", DEFAULT_USER_AGENT, ask)
        answers['robotsCrawlDelay'] = prompt_text(
            "robots.txt Crawl delay (seconds, 0 for none)", str(DEFAULT_CRAWL_DELAY), ask)
        answers['robotsSitemap'] = prompt_text(
            "robots.txt Sitemap URL (leave empty to skip)", '', ask)

    if 'humans' in wanted:
        answers['language'] = prompt_text("humans.txt Language", DEFAULT_LANGUAGE, ask)
        answers['lastUpdate'] = prompt_text(
            "humans.txt Last update (YYYY/MM/DD)", today.strftime(LAST_UPDATE_FORMAT), ask)

        print("\n--- Team Members ---")
        answers['team'] = prompt_team(ask)

        print("\n--- Thanks ---")
        answers['thanks'] = prompt_thanks(ask)

        print("\n--- Technology Stack ---")
        answers['technology'] = prompt_technology(ask)

    return answers
