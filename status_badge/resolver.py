"""Resolve raw badge inputs into a validated :class:`BadgeFormat`."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Dict, Optional

from .config import Settings, get_settings
from .datestamp import format_datestamp, utc_now
from .models import (
    BadgeFormat,
    BadgeRequest,
    BadgeStyle,
    BadgeType,
    DatestampDateStyle,
    DatestampFormat,
    DatestampOptions,
    DatestampTimeStyle,
    DatestampTimezone,
)

logger = logging.getLogger(__name__)


class BadgeResolutionError(ValueError):
    """Raised when badge inputs cannot be resolved.

    ``field`` names the offending input (``badge-type``, ``label``, ...) and
    ``str(error)`` is the message reported to the user.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class InvalidChoiceError(BadgeResolutionError):
    """Raised when a value is not one of the supported choices."""


class MissingFieldError(BadgeResolutionError):
    """Raised when a required label or message is empty."""


class FieldPolicy(Enum):
    PASSTHROUGH = "passthrough"
    REQUIRED = "required"
    DEFAULT_TO_TYPE = "default_to_type"
    SYNTHESIZED = "synthesized"


@dataclass(frozen=True)
class FieldRule:
    label: FieldPolicy
    message: FieldPolicy


FIELD_RULES: Dict[BadgeType, FieldRule] = {
    BadgeType.SUCCESS: FieldRule(FieldPolicy.PASSTHROUGH, FieldPolicy.REQUIRED),
    BadgeType.FAILURE: FieldRule(FieldPolicy.PASSTHROUGH, FieldPolicy.REQUIRED),
    BadgeType.PASSING: FieldRule(FieldPolicy.PASSTHROUGH, FieldPolicy.DEFAULT_TO_TYPE),
    BadgeType.FAILING: FieldRule(FieldPolicy.PASSTHROUGH, FieldPolicy.DEFAULT_TO_TYPE),
    BadgeType.DATESTAMP: FieldRule(FieldPolicy.REQUIRED, FieldPolicy.SYNTHESIZED),
    BadgeType.INFORMATION: FieldRule(FieldPolicy.REQUIRED, FieldPolicy.REQUIRED),
    BadgeType.WARNING: FieldRule(FieldPolicy.REQUIRED, FieldPolicy.REQUIRED),
}

_unruled = set(BadgeType) - set(FIELD_RULES)
if _unruled:  # pragma: no cover - guards edits to the enum
    raise RuntimeError(f"Badge types without field rules: {sorted(t.value for t in _unruled)}")


def require_value(value: Optional[str], name: str) -> str:
    """Return ``value`` trimmed, or raise when nothing is left."""

    trimmed = (value or "").strip()
    if not trimmed:
        raise MissingFieldError(name, f"A {name} is required.")
    return trimmed


def resolve_datestamp_options(request: BadgeRequest) -> DatestampOptions:
    """Resolve the four datestamp settings, failing on the first invalid one."""

    locale = DatestampFormat.parse(request.datestamp_format)
    if locale is None:
        raise InvalidChoiceError("datestamp-format", "Badge datestamp format invalid.")
    timezone = DatestampTimezone.parse(request.datestamp_timezone)
    if timezone is None:
        raise InvalidChoiceError("datestamp-timezone", "Badge datestamp timezone invalid.")
    date_style = DatestampDateStyle.parse(request.datestamp_datestyle)
    if date_style is None:
        raise InvalidChoiceError("datestamp-datestyle", "Badge datestamp date style invalid.")
    time_style = DatestampTimeStyle.parse(request.datestamp_timestyle)
    if time_style is None:
        raise InvalidChoiceError("datestamp-timestyle", "Badge datestamp time style invalid.")
    return DatestampOptions(
        locale=locale,
        timezone=timezone,
        date_style=date_style,
        time_style=time_style,
    )


class BadgeResolver:
    """Applies the per-type field rules and builds :class:`BadgeFormat` records."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._settings = settings or get_settings()
        self._clock = clock

    @property
    def settings(self) -> Settings:
        return self._settings

    def color_for(self, badge_type: BadgeType) -> str:
        return self._settings.colors[badge_type]

    def resolve(self, request: BadgeRequest) -> BadgeFormat:
        try:
            badge = self._resolve(request)
        except BadgeResolutionError as exc:
            logger.info("Badge request rejected on %s: %s", exc.field, exc)
            raise
        logger.debug("Resolved badge %r", badge)
        return badge

    def _resolve(self, request: BadgeRequest) -> BadgeFormat:
        badge_type = BadgeType.parse(request.badge_type)
        if badge_type is None:
            raise InvalidChoiceError("badge-type", "Badge type invalid.")
        style = BadgeStyle.parse(request.badge_style)
        if style is None:
            raise InvalidChoiceError("badge-style", "Badge style invalid.")

        rule = FIELD_RULES[badge_type]
        label = self._apply(rule.label, request.label, "label", badge_type)
        if rule.message is FieldPolicy.SYNTHESIZED:
            options = resolve_datestamp_options(request)
            message = format_datestamp(self._clock(), options)
        else:
            message = self._apply(rule.message, request.message, "message", badge_type)

        return BadgeFormat(
            label=label,
            message=message,
            color=self.color_for(badge_type),
            style=style,
        )

    @staticmethod
    def _apply(policy: FieldPolicy, value: Optional[str], name: str, badge_type: BadgeType) -> str:
        if policy is FieldPolicy.REQUIRED:
            return require_value(value, name)
        trimmed = (value or "").strip()
        if policy is FieldPolicy.DEFAULT_TO_TYPE and not trimmed:
            return badge_type.value.lower()
        return trimmed


def resolve_badge(
    request: BadgeRequest,
    *,
    settings: Settings | None = None,
    clock: Callable[[], datetime] = utc_now,
) -> BadgeFormat:
    """Convenience wrapper around :meth:`BadgeResolver.resolve`."""

    return BadgeResolver(settings, clock=clock).resolve(request)


__all__ = [
    "FIELD_RULES",
    "BadgeResolutionError",
    "BadgeResolver",
    "FieldPolicy",
    "FieldRule",
    "InvalidChoiceError",
    "MissingFieldError",
    "require_value",
    "resolve_badge",
    "resolve_datestamp_options",
]
