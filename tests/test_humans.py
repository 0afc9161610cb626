"""
Tests for intent/humans.py.
"""

import sys
from pathlib import Path

# Ensure project root on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

from intent.config import CreditsConfig, TeamMember
from intent.humans import classify_technology, render_credits


@pytest.fixture
def full_credits():
    return CreditsConfig(
        site_name="My Awesome Site",
        site_url="https://example.com",
        language="English",
        team=(
            TeamMember(name="John Doe", role="Developer", link="https://github.com/johndoe"),
            TeamMember(name="Jane Smith", role="Designer", link="https://twitter.com/janesmith"),
        ),
        thanks=("Open Source Community", "Coffee"),
        technology=("Node.js", "JavaScript", "HTML5"),
        last_update="2024/01/01",
    )


class TestCreditsLayout:

    def test_exact_layout(self, full_credits):
        assert render_credits(full_credits) == (
            "/* TEAM */\n"
            "Developer: John Doe\n"
            "Contact: https://github.com/johndoe\n"
            "\n"
            "Designer: Jane Smith\n"
            "Contact: https://twitter.com/janesmith\n"
            "\n"
            "/* THANKS */\n"
            "Open Source Community\n"
            "Coffee\n"
            "\n"
            "/* SITE */\n"
            "Last update: 2024/01/01\n"
            "Language: English\n"
            "Standards: HTML5\n"
            "Components: Node.js, JavaScript\n"
        )

    def test_empty_team_and_thanks(self):
        cfg = CreditsConfig(technology=("Node.js",), last_update="2024/01/01")
        text = render_credits(cfg)
        assert text == (
            "/* TEAM */\n"
            "/* SITE */\n"
            "Last update: 2024/01/01\n"
            "Language: English\n"
            "Components: Node.js\n"
        )
        assert "/* THANKS */" not in text

    def test_member_without_link(self):
        cfg = CreditsConfig(team=(TeamMember(name="Alice", role="Lead Developer"),))
        lines = render_credits(cfg).splitlines()
        assert lines[:3] == ["/* TEAM */", "Lead Developer: Alice", ""]
        assert "Contact:" not in render_credits(cfg)

    def test_default_role(self):
        assert "Developer: Bob\n" in render_credits(CreditsConfig(team=(TeamMember(name="Bob"),)))

    def test_no_technology_lines_when_empty(self):
        text = render_credits(CreditsConfig(technology=()))
        assert "Standards:" not in text
        assert "Components:" not in text
        assert text.endswith("Language: English\n")

    def test_only_standards(self):
        text = render_credits(CreditsConfig(technology=("HTML5", "XHTML")))
        assert "Standards: HTML5, XHTML\n" in text
        assert "Components:" not in text

    def test_idempotent(self, full_credits):
        assert render_credits(full_credits) == render_credits(full_credits)


class TestClassifyTechnology:

    def test_case_insensitive_html_match(self):
        standards, components = classify_technology(["Node.js", "JavaScript", "HTML5"])
        assert standards == ["HTML5"]
        assert components == ["Node.js", "JavaScript"]

    def test_substring_anywhere(self):
        standards, components = classify_technology(["xhtml", "Html", "htmx", "CSS3"])
        assert standards == ["xhtml", "Html"]
        assert components == ["htmx", "CSS3"]

    def test_order_preserved(self):
        standards, components = classify_technology(["React", "HTML5", "Vue", "XHTML 1.1"])
        assert standards == ["HTML5", "XHTML 1.1"]
        assert components == ["React", "Vue"]
