"""
Locale Selection & Message Lookup

Detects the user's locale once at startup and resolves message keys
against the static catalogues in ``locales``. The resulting Translator
is passed explicitly to whatever needs user-facing text.
"""

import locale
import os
from typing import Mapping, Optional, Sequence

from app.config import AVAILABLE_LOCALES, DEFAULT_LOCALE, is_locale_available
from locales import CATALOGS


# Environment variables consulted for the locale, in POSIX priority order
LOCALE_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")

# Chinese script/region aliases folded onto supported catalogues
_ZH_ALIASES = {
    "zh": "zh-CN",
    "zh-SG": "zh-CN",
    "zh-Hans": "zh-CN",
    "zh-MO": "zh-HK",
    "zh-Hant": "zh-TW",
}


# ═══════════════════════════════════════════════════════════════════════════════
# LOCALE DETECTION
# ═══════════════════════════════════════════════════════════════════════════════

def normalize_locale(raw: Optional[str]) -> Optional[str]:
    """
    Normalize a POSIX or BCP 47 locale string to a catalogue tag.

    Examples:
        "zh_CN.UTF-8"  → "zh-CN"
        "en_GB"        → "en-US"
        "zh_Hant_TW"   → "zh-TW"
        "C" / "POSIX"  → None
    """
    if not raw:
        return None

    tag = raw.split(".", 1)[0].split("@", 1)[0].replace("_", "-")
    if tag in ("C", "POSIX", ""):
        return None

    parts = tag.split("-")
    language = parts[0].lower()
    rest = [p.title() if len(p) == 4 else p.upper() for p in parts[1:]]

    if language == "en":
        return "en-US"
    if language != "zh":
        return None

    # Region wins over script: zh-Hant-HK → zh-HK
    for part in reversed(rest):
        candidate = f"zh-{part}"
        if candidate in AVAILABLE_LOCALES:
            return candidate
        if candidate in _ZH_ALIASES:
            return _ZH_ALIASES[candidate]
    return _ZH_ALIASES["zh"]


def detect_locale(
    requested: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Pick the catalogue tag to use.

    Priority: explicit request, LC_ALL / LC_MESSAGES / LANG, the platform
    locale, then DEFAULT_LOCALE.
    """
    environ = os.environ if environ is None else environ

    candidates = [requested]
    candidates += [environ.get(name) for name in LOCALE_ENV_VARS]
    candidates.append(_platform_locale())

    for candidate in candidates:
        tag = normalize_locale(candidate)
        if tag is not None:
            return tag
    return DEFAULT_LOCALE


def _platform_locale() -> Optional[str]:
    try:
        return locale.getlocale()[0]
    except ValueError:
        return None


# ═══════════════════════════════════════════════════════════════════════════════
# TRANSLATOR
# ═══════════════════════════════════════════════════════════════════════════════

class Translator:
    """
    Resolves message keys for one locale with fallbacks.

    Lookup order is the chosen locale, then each fallback; an unknown key
    returns the key itself so a missing translation never crashes output.
    """

    def __init__(self, tag: str, fallbacks: Sequence[str] = (DEFAULT_LOCALE, "zh-CN")):
        if not is_locale_available(tag):
            tag = DEFAULT_LOCALE
        self.locale = tag
        self._chain = [CATALOGS[tag]] + [CATALOGS[f] for f in fallbacks if f in CATALOGS and f != tag]

    @classmethod
    def for_system(cls, requested: Optional[str] = None) -> "Translator":
        return cls(detect_locale(requested))

    def t(self, key: str, **kwargs) -> str:
        for catalog in self._chain:
            template = catalog.get(key)
            if template is not None:
                return template.format(**kwargs) if kwargs else template
        return key

    __call__ = t
