"""
translations.py - Hook for translating user visible strings.

Display names of categories and binners, and bin labels, go through tr().
The application installs its gettext catalogue once at startup; until then
strings pass through untranslated.
"""
from __future__ import annotations

import gettext
import logging

logger = logging.getLogger(__name__)

_translations: gettext.NullTranslations = gettext.NullTranslations()


def install_translations(translations: gettext.NullTranslations = None) -> None:
    """
    Install the catalogue used by tr().

    Args:
        translations: A gettext translations object, or None to restore the
            pass-through default.
    """
    global _translations
    _translations = translations if translations is not None else gettext.NullTranslations()
    logger.debug(f"Installed translations: {type(_translations).__name__}")


def tr(message: str, **kwargs) -> str:
    """Translate a message and fill in {placeholders} from kwargs."""
    text = _translations.gettext(message)
    return text.format(**kwargs) if kwargs else text
