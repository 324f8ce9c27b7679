"""Hand resolved badges to a renderer and return the drawn artifact."""
from __future__ import annotations

import logging
import re
from typing import Optional, Protocol

import pybadges

from .models import BadgeFormat, BadgeRequest, BadgeStyle
from .resolver import BadgeResolver

logger = logging.getLogger(__name__)


class BadgeRenderer(Protocol):
    def render(self, badge: BadgeFormat) -> str:
        ...


_SQUARE_STYLES = frozenset({BadgeStyle.FLAT_SQUARE, BadgeStyle.FOR_THE_BADGE})
_CORNER_RADIUS = re.compile(r'\brx="[^"]*"')


class PyBadgesRenderer:
    """Draws badges as SVG using :mod:`pybadges`.

    pybadges draws a single rounded flat look. ``for-the-badge`` upper-cases
    both texts and squares the corners, ``flat-square`` squares the corners.
    ``plastic`` and ``social`` are drawn like ``flat``.
    """

    def __init__(self, label_color: str = "#555") -> None:
        self.label_color = label_color

    def render(self, badge: BadgeFormat) -> str:
        if not isinstance(badge.style, BadgeStyle):
            raise ValueError(f"Unsupported badge style: {badge.style!r}")
        logger.debug("Rendering %s badge with pybadges", badge.style.value)
        label, message = badge.label, badge.message
        if badge.style is BadgeStyle.FOR_THE_BADGE:
            label, message = label.upper(), message.upper()
        svg = pybadges.badge(
            left_text=label,
            right_text=message,
            left_color=self.label_color,
            right_color=badge.color,
        )
        if badge.style in _SQUARE_STYLES:
            svg = _CORNER_RADIUS.sub('rx="0"', svg)
        return svg


def render_badge(
    request: BadgeRequest,
    *,
    resolver: Optional[BadgeResolver] = None,
    renderer: Optional[BadgeRenderer] = None,
) -> str:
    """Resolve ``request`` and return the renderer's SVG.

    Resolution errors propagate before the renderer is touched.
    """

    resolver = resolver or BadgeResolver()
    badge = resolver.resolve(request)
    renderer = renderer or PyBadgesRenderer(label_color=resolver.settings.label_color)
    return renderer.render(badge)


__all__ = ["BadgeRenderer", "PyBadgesRenderer", "render_badge"]
