"""
Raw answer normalization.

Turns loosely-typed answers (prompt input, JSON/YAML answers files) into the
frozen records in intent.config. Only the fields needed by the requested
formats are interpreted, so unrelated answers never have to be well-formed.

Malformed user input never raises here: lists are trimmed and filtered,
numbers fall back to their defaults, and permission values are kept as
given for the formatters to interpret.
"""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import Iterable

from .config import (
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
    POLICY_FORMATS,
    CreditsConfig,
    NormalizedConfig,
    PolicyConfig,
    RobotsConfig,
    TeamMember,
)


logger = logging.getLogger(__name__)

# Answers-file spellings accepted alongside the prompt keys
_ALIASES = {
    'siteName': 'site_name',
    'baseUrl': 'base_url',
    'allowPaths': 'allow_paths',
    'disallowPaths': 'disallow_paths',
    'commercialUse': 'commercial_use',
    'rateLimitRps': 'rate_limit_rps',
    'robotsUserAgent': 'robots_user_agent',
    'robotsCrawlDelay': 'robots_crawl_delay',
    'robotsSitemap': 'robots_sitemap',
    'lastUpdate': 'last_update',
}


def _get(raw: dict, key: str, default=None):
    if raw.get(key) is not None:
        return raw[key]
    alias = _ALIASES.get(key)
    if alias and raw.get(alias) is not None:
        return raw[alias]
    return default


def split_list(value) -> tuple[str, ...]:
    """Split a comma-separated string (or list) into trimmed, non-empty items."""
    if value is None:
        return ()
    if isinstance(value, str):
        items = value.split(',')
    elif isinstance(value, (list, tuple)):
        items = value
    else:
        items = [value]
    return tuple(s for s in (str(item).strip() for item in items) if s)


def coerce_number(value, default: int | float) -> int | float:
    """Parse a finite, non-negative number; integral values come back as int."""
    if isinstance(value, bool) or value is None:
        return default
    try:
        number = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    if not math.isfinite(number) or number < 0:
        return default
    if number.is_integer():
        return int(number)
    return number


def _text(raw: dict, key: str, default: str) -> str:
    value = _get(raw, key)
    if value is None:
        return default
    value = str(value).strip()
    return value or default


def _permission(raw: dict, key: str) -> str:
    # Passed through as given, whitespace included; the formatters decide what it means
    value = _get(raw, key)
    if value is None:
        return DEFAULT_PERMISSION
    return str(value)


def _capabilities(value) -> tuple[str, ...]:
    result: list[str] = []
    for tag in split_list(value):
        if tag not in CAPABILITIES:
            logger.warning("Dropping unknown capability %r", tag)
            continue
        if tag not in result:
            result.append(tag)
    return tuple(result)


def _team(value) -> tuple[TeamMember, ...]:
    if not value:
        return ()
    if not isinstance(value, (list, tuple)):
        value = [value]
    members = []
    for entry in value:
        if isinstance(entry, TeamMember):
            members.append(entry)
            continue
        if isinstance(entry, str):
            entry = {'name': entry}
        if not isinstance(entry, dict):
            logger.warning("Ignoring team entry of type %s", type(entry).__name__)
            continue
        name = str(entry.get('name') or '').strip()
        if not name:
            logger.warning("Ignoring team member without a name")
            continue
        role = str(entry.get('role') or '').strip() or DEFAULT_ROLE
        link = str(entry.get('link') or entry.get('contact') or '').strip()
        members.append(TeamMember(name=name, role=role, link=link))
    return tuple(members)


def _thanks(value) -> tuple[str, ...]:
    # Thank-you notes are free text and may contain commas
    if value is None:
        return ()
    if not isinstance(value, (list, tuple)):
        value = [value]
    thanks = []
    for item in value:
        if isinstance(item, (dict, list, tuple)):
            logger.warning("Ignoring thank-you entry of type %s", type(item).__name__)
            continue
        text = str(item).strip()
        if text:
            thanks.append(text)
    return tuple(thanks)


def build_policy_config(raw: dict) -> PolicyConfig:
    return PolicyConfig(
        site_name=_text(raw, 'siteName', DEFAULT_SITE_NAME),
        base_url=_text(raw, 'baseUrl', DEFAULT_BASE_URL),
        contact=_text(raw, 'contact', DEFAULT_CONTACT),
        models=split_list(_get(raw, 'models', DEFAULT_MODELS)),
        capabilities=_capabilities(_get(raw, 'capabilities', CAPABILITIES)),
        allow_paths=split_list(_get(raw, 'allowPaths', DEFAULT_ALLOW_PATHS)),
        disallow_paths=split_list(_get(raw, 'disallowPaths')),
        training=_permission(raw, 'training'),
        retention=_permission(raw, 'retention'),
        commercial_use=_permission(raw, 'commercialUse'),
        rate_limit_rps=coerce_number(_get(raw, 'rateLimitRps'), DEFAULT_RATE_LIMIT_RPS),
    )


def build_robots_config(raw: dict) -> RobotsConfig:
    # Crawl-delay is whole seconds
    delay = int(coerce_number(_get(raw, 'robotsCrawlDelay'), DEFAULT_CRAWL_DELAY))
    return RobotsConfig(
        user_agent=_text(raw, 'robotsUserAgent', DEFAULT_USER_AGENT),
        allow_paths=split_list(_get(raw, 'allowPaths', DEFAULT_ALLOW_PATHS)),
        disallow_paths=split_list(_get(raw, 'disallowPaths')),
        crawl_delay=delay,
        sitemap=_text(raw, 'robotsSitemap', ''),
    )


def build_credits_config(raw: dict, today: date | None = None) -> CreditsConfig:
    if today is None:
        today = date.today()
    last_update = _get(raw, 'lastUpdate')
    if isinstance(last_update, date):
        # YAML turns 2024-05-01 into a date
        raw = {**raw, 'lastUpdate': last_update.strftime(LAST_UPDATE_FORMAT)}
    return CreditsConfig(
        site_name=_text(raw, 'siteName', DEFAULT_SITE_NAME),
        site_url=_text(raw, 'baseUrl', DEFAULT_BASE_URL),
        language=_text(raw, 'language', DEFAULT_LANGUAGE),
        team=_team(_get(raw, 'team')),
        thanks=_thanks(_get(raw, 'thanks')),
        technology=split_list(_get(raw, 'technology', DEFAULT_TECHNOLOGY)),
        last_update=_text(raw, 'lastUpdate', today.strftime(LAST_UPDATE_FORMAT)),
    )


def normalize(
    raw_answers: dict,
    formats: Iterable[str],
    today: date | None = None,
) -> NormalizedConfig:
    """
    Build per-family config records for the requested formats.

    Args:
        raw_answers: Answers keyed by prompt name (camelCase) or snake_case alias
        formats: Format keys to prepare ('llms', 'ai', 'robots', 'humans')
        today: Date used when no last-update answer is given

    Returns:
        NormalizedConfig with one record per family that a format needs

    Raises:
        ValueError: if a format key is unknown
    """
    requested = frozenset(formats)
    unknown = requested.difference(FORMATS)
    if unknown:
        raise ValueError(f"Unknown format(s): {', '.join(sorted(unknown))}")

    raw = dict(raw_answers or {})

    policy = build_policy_config(raw) if requested & POLICY_FORMATS else None
    robots = build_robots_config(raw) if 'robots' in requested else None
    credits = build_credits_config(raw, today) if 'humans' in requested else None

    logger.debug("Normalized answers for %s", ', '.join(f for f in FORMATS if f in requested))

    return NormalizedConfig(
        formats=requested,
        policy=policy,
        robots=robots,
        credits=credits,
    )
