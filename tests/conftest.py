"""
Shared pytest fixtures.
"""

import pytest


@pytest.fixture
def scripted():
    """Factory for an ask() that replays answers, then behaves like closed stdin.

    Prompts shown are recorded on ask.asked.
    """
    def make(*answers):
        queue = list(answers)
        asked = []

        def ask(prompt):
            asked.append(prompt)
            if not queue:
                raise EOFError
            return queue.pop(0)

        ask.asked = asked
        return ask

    return make
