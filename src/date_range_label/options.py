"""Resolve ``FormatOptions`` into concrete values at the call boundary.

The formatting core never reads the clock or the environment; everything it
needs arrives in a :class:`ResolvedOptions`.  Unset fields fall back to
settings, then to the process environment (via Babel), then to
``FALLBACK_LOCALE``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from babel import Locale, UnknownLocaleError, default_locale

from date_range_label.config import FALLBACK_LOCALE, Settings, get_settings
from date_range_label.schemas import FormatOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedOptions:
    """FormatOptions with every default filled in."""

    today: datetime
    locale: Locale
    include_time: bool = True
    separator: str = "-"


def parse_locale(identifier: Locale | str | None) -> Locale:
    """Parse ``en_US`` / ``en-US`` style identifiers into a Babel ``Locale``.

    Unknown or malformed identifiers fall back to ``FALLBACK_LOCALE``.
    """
    if isinstance(identifier, Locale):
        return identifier
    if not identifier:
        return Locale.parse(FALLBACK_LOCALE)
    # POSIX values such as "de_DE.UTF-8" carry a codeset
    normalized = identifier.split(".", 1)[0].split("@", 1)[0].replace("-", "_")
    try:
        return Locale.parse(normalized)
    except (UnknownLocaleError, ValueError):
        logger.warning("Unknown locale %r, falling back to %s", identifier, FALLBACK_LOCALE)
        return Locale.parse(FALLBACK_LOCALE)


def environment_locale(settings: Settings | None = None) -> str:
    """Locale identifier from settings, else the process environment."""
    settings = settings or get_settings()
    if settings.locale:
        return settings.locale
    return default_locale("LC_TIME") or FALLBACK_LOCALE


def resolve_options(
    options: FormatOptions | None = None,
    *,
    settings: Settings | None = None,
    clock: Callable[[], datetime] = datetime.now,
) -> ResolvedOptions:
    """Fill unset ``options`` fields from ``clock`` and ``settings``."""
    options = options or FormatOptions()
    settings = settings or get_settings()

    today = options.today if options.today is not None else clock()
    locale = parse_locale(options.locale or environment_locale(settings))
    include_time = (
        options.include_time if options.include_time is not None else settings.include_time
    )
    separator = options.separator if options.separator is not None else settings.separator

    logger.debug(
        "Resolved options: today=%s locale=%s include_time=%s separator=%r",
        today.isoformat(),
        locale,
        include_time,
        separator,
    )
    return ResolvedOptions(
        today=today, locale=locale, include_time=include_time, separator=separator
    )
