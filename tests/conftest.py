"""Shared pytest fixtures."""

from typing import Callable, Optional

import pytest

from cellframe.compose.lines import Line
from cellframe.core.color import Color
from cellframe.core.segment import Segment
from cellframe.core.style import Style

EnvFactory = Callable[..., Callable[[str], Optional[str]]]


@pytest.fixture
def make_env() -> EnvFactory:
    """
    Factory for environment lookup functions.

    Usage: ``lookup = make_env(TERM="xterm-256color")``
    """
    def factory(**variables: str) -> Callable[[str], Optional[str]]:
        return variables.get
    return factory


@pytest.fixture
def red() -> Style:
    return Style(fg=Color.RED)


@pytest.fixture
def styled_line(red: Style) -> Line:
    """A 10-cell line: 'Hello' in red, ' ' plain, '漢字' bold."""
    return [
        Segment("Hello", red),
        Segment(" "),
        Segment("漢字", Style(bold=True)),
    ]
