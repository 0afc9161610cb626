"""
Value records and defaults for intent declaration documents.
"""

from dataclasses import dataclass, field
from typing import Literal


FormatKey = Literal['llms', 'ai', 'robots', 'humans']

# Canonical render/write order
FORMATS: tuple[str, ...] = ('llms', 'ai', 'robots', 'humans')

POLICY_FORMATS = frozenset({'llms', 'ai'})
PATH_FORMATS = frozenset({'llms', 'ai', 'robots'})

# Relative to the output directory
OUTPUT_PATHS = {
    'llms': '.well-known/llms.txt',
    'ai': 'ai.txt',
    'robots': 'robots.txt',
    'humans': 'humans.txt',
}

CAPABILITIES: tuple[str, ...] = ('chat', 'embed', 'fine_tune', 'crawl', 'train')

PERMISSION_CHOICES: tuple[str, ...] = ('allow', 'disallow')

POLICY_VERSION = '1.0'

DEFAULT_SITE_NAME = 'My Site'
DEFAULT_BASE_URL = 'https://example.com'
DEFAULT_CONTACT = 'mailto:admin@example.com'
DEFAULT_MODELS: tuple[str, ...] = ('*',)
DEFAULT_ALLOW_PATHS: tuple[str, ...] = ('/*',)
DEFAULT_PERMISSION = 'allow'
DEFAULT_RATE_LIMIT_RPS = 10

DEFAULT_USER_AGENT = '*'
DEFAULT_CRAWL_DELAY = 0

DEFAULT_LANGUAGE = 'English'
DEFAULT_ROLE = 'Developer'
DEFAULT_TECHNOLOGY: tuple[str, ...] = ('Node.js', 'JavaScript', 'HTML5')
LAST_UPDATE_FORMAT = '%Y/%m/%d'


@dataclass(frozen=True)
class PolicyConfig:
    """Source record for both AI-policy documents (llms.txt and ai.txt)."""

    site_name: str = DEFAULT_SITE_NAME
    base_url: str = DEFAULT_BASE_URL
    contact: str = DEFAULT_CONTACT
    models: tuple[str, ...] = DEFAULT_MODELS
    capabilities: tuple[str, ...] = CAPABILITIES
    allow_paths: tuple[str, ...] = DEFAULT_ALLOW_PATHS
    disallow_paths: tuple[str, ...] = ()

    # 'allow' / 'disallow'; anything else is kept as given
    training: str = DEFAULT_PERMISSION
    retention: str = DEFAULT_PERMISSION
    commercial_use: str = DEFAULT_PERMISSION

    rate_limit_rps: int | float = DEFAULT_RATE_LIMIT_RPS


@dataclass(frozen=True)
class RobotsConfig:
    """Crawler exclusion rules for a single user-agent group."""

    user_agent: str = DEFAULT_USER_AGENT
    allow_paths: tuple[str, ...] = ()
    disallow_paths: tuple[str, ...] = ()
    crawl_delay: int = DEFAULT_CRAWL_DELAY  # 0 = omit
    sitemap: str = ''  # '' = omit


@dataclass(frozen=True)
class TeamMember:
    name: str
    role: str = DEFAULT_ROLE
    link: str = ''


@dataclass(frozen=True)
class CreditsConfig:
    """Team credits for humans.txt."""

    site_name: str = DEFAULT_SITE_NAME
    site_url: str = DEFAULT_BASE_URL
    language: str = DEFAULT_LANGUAGE
    team: tuple[TeamMember, ...] = ()
    thanks: tuple[str, ...] = ()
    technology: tuple[str, ...] = ()
    last_update: str = ''  # YYYY/MM/DD


@dataclass(frozen=True)
class NormalizedConfig:
    """Per-family records for the formats requested in one invocation."""

    formats: frozenset[str] = field(default_factory=frozenset)
    policy: PolicyConfig | None = None
    robots: RobotsConfig | None = None
    credits: CreditsConfig | None = None
