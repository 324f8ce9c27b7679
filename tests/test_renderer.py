"""Tests for badge rendering delegation."""
from __future__ import annotations

from datetime import datetime, timezone

import pytest

from status_badge import renderer as renderer_module
from status_badge.config import get_settings
from status_badge.models import BadgeFormat, BadgeRequest, BadgeStyle
from status_badge.renderer import PyBadgesRenderer, render_badge
from status_badge.resolver import BadgeResolutionError, BadgeResolver


class RecordingRenderer:
    """Renderer stub that remembers what it was asked to draw."""

    def __init__(self) -> None:
        self.calls: list[BadgeFormat] = []

    def render(self, badge: BadgeFormat) -> str:
        self.calls.append(badge)
        return f"<svg>{badge.label}|{badge.message}</svg>"


@pytest.fixture
def resolver() -> BadgeResolver:
    return BadgeResolver(get_settings(), clock=lambda: datetime(2025, 1, 1, tzinfo=timezone.utc))


def test_render_badge_delegates_resolved_format(resolver):
    stub = RecordingRenderer()
    svg = render_badge(
        BadgeRequest(badge_type="INFORMATION", label="version", message="1.2.3", badge_style="plastic"),
        resolver=resolver,
        renderer=stub,
    )
    assert svg == "<svg>version|1.2.3</svg>"
    assert stub.calls == [
        BadgeFormat(label="version", message="1.2.3", color="informational", style=BadgeStyle.PLASTIC)
    ]


def test_renderer_not_called_when_resolution_fails(resolver):
    stub = RecordingRenderer()
    with pytest.raises(BadgeResolutionError, match="A message is required."):
        render_badge(BadgeRequest(badge_type="SUCCESS", label="build"), resolver=resolver, renderer=stub)
    assert stub.calls == []


def test_pybadges_renderer_passes_fields(monkeypatch):
    captured = {}

    def fake_badge(**kwargs):
        captured.update(kwargs)
        return "<svg/>"

    monkeypatch.setattr(renderer_module.pybadges, "badge", fake_badge)
    badge = BadgeFormat(label="build", message="passing", color="success", style=BadgeStyle.FLAT)
    assert PyBadgesRenderer(label_color="#333").render(badge) == "<svg/>"
    assert captured == {
        "left_text": "build",
        "right_text": "passing",
        "left_color": "#333",
        "right_color": "success",
    }


def test_pybadges_renderer_rejects_unknown_style():
    badge = BadgeFormat(label="build", message="ok", color="success", style="wavy")  # type: ignore[arg-type]
    with pytest.raises(ValueError, match="Unsupported badge style"):
        PyBadgesRenderer().render(badge)


def test_render_badge_produces_svg(resolver):
    svg = render_badge(
        BadgeRequest(badge_type="PASSING", label="tests", badge_style="flat"),
        resolver=resolver,
    )
    assert "<svg" in svg
    assert "tests" in svg
    assert "passing" in svg


def test_for_the_badge_upper_cases_and_squares(monkeypatch):
    captured = {}

    def fake_badge(**kwargs):
        captured.update(kwargs)
        return '<svg><rect width="80" height="20" rx="3"/></svg>'

    monkeypatch.setattr(renderer_module.pybadges, "badge", fake_badge)
    badge = BadgeFormat(label="build", message="passing", color="success", style=BadgeStyle.FOR_THE_BADGE)
    svg = PyBadgesRenderer().render(badge)
    assert captured["left_text"] == "BUILD"
    assert captured["right_text"] == "PASSING"
    assert 'rx="0"' in svg
    assert 'rx="3"' not in svg


@pytest.mark.parametrize(
    "style, rounded",
    [
        (BadgeStyle.FLAT, True),
        (BadgeStyle.PLASTIC, True),
        (BadgeStyle.SOCIAL, True),
        (BadgeStyle.FLAT_SQUARE, False),
    ],
)
def test_corner_rounding_follows_style(monkeypatch, style, rounded):
    monkeypatch.setattr(
        renderer_module.pybadges,
        "badge",
        lambda **kwargs: f'<svg><rect rx="3"/><text>{kwargs["left_text"]}</text></svg>',
    )
    badge = BadgeFormat(label="build", message="ok", color="success", style=style)
    svg = PyBadgesRenderer().render(badge)
    assert ('rx="3"' in svg) is rounded
    assert "<text>build</text>" in svg


def test_styles_change_real_output(resolver):
    flat = render_badge(
        BadgeRequest(badge_type="PASSING", label="tests", badge_style="flat"),
        resolver=resolver,
    )
    for_the_badge = render_badge(
        BadgeRequest(badge_type="PASSING", label="tests", badge_style="for-the-badge"),
        resolver=resolver,
    )
    assert flat != for_the_badge
    assert "TESTS" in for_the_badge
