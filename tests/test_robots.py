"""
Tests for intent/robots.py.

- Allow rules always precede Disallow rules
- Crawl-delay only when > 0, Sitemap only when set
- Output is readable by a standard robots.txt parser
"""

import sys
from pathlib import Path
from urllib.robotparser import RobotFileParser

# Ensure project root on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

from intent.config import RobotsConfig
from intent.robots import render_robots


class TestRobotsLayout:

    def test_full_config(self):
        cfg = RobotsConfig(
            user_agent="*",
            allow_paths=("/api/*", "/docs/*"),
            disallow_paths=("/admin/*", "/private/*"),
            crawl_delay=1,
            sitemap="https://example.com/sitemap.xml",
        )
        assert render_robots(cfg) == (
            "User-agent: *\n"
            "Allow: /api/*\n"
            "Allow: /docs/*\n"
            "Disallow: /admin/*\n"
            "Disallow: /private/*\n"
            "Crawl-delay: 1\n"
            "Sitemap: https://example.com/sitemap.xml\n"
        )

    def test_minimal_config(self):
        assert render_robots(RobotsConfig()) == "User-agent: *\n"

    def test_empty_allow_paths(self):
        text = render_robots(RobotsConfig(disallow_paths=("/admin/*",)))
        assert "User-agent: *" in text
        assert "Disallow: /admin/*" in text
        assert "Allow:" not in text.replace("Disallow:", "")
        assert "Crawl-delay:" not in text
        assert "Sitemap:" not in text

    def test_custom_user_agent(self):
        text = render_robots(RobotsConfig(user_agent="Googlebot", allow_paths=("/*",)))
        assert text.startswith("User-agent: Googlebot\n")

    def test_allow_before_disallow(self):
        # Keyword order below mirrors a user listing disallows first
        cfg = RobotsConfig(disallow_paths=("/b", "/a"), allow_paths=("/z", "/y"))
        lines = render_robots(cfg).splitlines()
        assert lines[1:] == ["Allow: /z", "Allow: /y", "Disallow: /b", "Disallow: /a"]

    @pytest.mark.parametrize("delay,expected", [(0, False), (1, True), (30, True)])
    def test_crawl_delay_presence(self, delay, expected):
        text = render_robots(RobotsConfig(crawl_delay=delay))
        assert ("Crawl-delay:" in text) is expected
        if expected:
            assert f"Crawl-delay: {delay}\n" in text

    def test_sitemap_after_crawl_delay(self):
        lines = render_robots(RobotsConfig(crawl_delay=5, sitemap="https://x.test/s.xml")).splitlines()
        assert lines == ["User-agent: *", "Crawl-delay: 5", "Sitemap: https://x.test/s.xml"]

    def test_idempotent(self):
        cfg = RobotsConfig(allow_paths=("/a",), disallow_paths=("/b",), crawl_delay=2)
        assert render_robots(cfg) == render_robots(cfg)


class TestRobotsParsable:
    """Generated files are understood by urllib.robotparser."""

    def _parser(self, text: str) -> RobotFileParser:
        parser = RobotFileParser()
        parser.parse(text.splitlines())
        return parser

    def test_rules_apply(self):
        cfg = RobotsConfig(
            allow_paths=("/public/",),
            disallow_paths=("/admin/",),
            crawl_delay=3,
            sitemap="https://example.com/sitemap.xml",
        )
        parser = self._parser(render_robots(cfg))

        assert parser.can_fetch("AnyBot", "https://example.com/public/page")
        assert not parser.can_fetch("AnyBot", "https://example.com/admin/settings")
        assert parser.crawl_delay("AnyBot") == 3
        assert parser.site_maps() == ["https://example.com/sitemap.xml"]

    def test_named_agent_group(self):
        parser = self._parser(render_robots(RobotsConfig(user_agent="BadBot", disallow_paths=("/",))))
        assert not parser.can_fetch("BadBot", "https://example.com/anything")
        assert parser.can_fetch("GoodBot", "https://example.com/anything")
