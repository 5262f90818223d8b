"""
Test suite for locale detection and message catalogues
"""

import sys
from pathlib import Path
from unittest.mock import patch

# Add project root to path so we can import from infra/
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.config import AVAILABLE_LOCALES
from infra.i18n import Translator, detect_locale, normalize_locale
from locales import CATALOGS


# ═══════════════════════════════════════════════════════════════════════════════
# LOCALE DETECTION
# ═══════════════════════════════════════════════════════════════════════════════

def test_normalize_locale():
    """Test POSIX and BCP 47 normalization."""

    print("Testing normalize_locale...")

    assert normalize_locale("zh_CN.UTF-8") == "zh-CN"
    assert normalize_locale("zh_TW.UTF-8") == "zh-TW"
    assert normalize_locale("zh-hk") == "zh-HK"
    assert normalize_locale("zh_Hant_TW") == "zh-TW"
    assert normalize_locale("zh-Hant") == "zh-TW"
    assert normalize_locale("zh-Hans") == "zh-CN"
    assert normalize_locale("zh_SG") == "zh-CN"
    assert normalize_locale("zh_MO") == "zh-HK"
    assert normalize_locale("zh") == "zh-CN"
    assert normalize_locale("en_GB.UTF-8") == "en-US"
    assert normalize_locale("en") == "en-US"

    # Unsupported or neutral
    assert normalize_locale("fr_FR.UTF-8") is None
    assert normalize_locale("C") is None
    assert normalize_locale("POSIX") is None
    assert normalize_locale("C.UTF-8") is None
    assert normalize_locale("") is None
    assert normalize_locale(None) is None

    print("✓ normalize_locale tests passed")


def test_detect_locale_priority():
    """Test request > environment > platform > default."""

    print("Testing detect_locale...")

    environ = {"LC_ALL": "", "LANG": "zh_TW.UTF-8"}

    with patch("infra.i18n._platform_locale", return_value="zh_CN"):
        assert detect_locale("zh-HK", environ) == "zh-HK"
        assert detect_locale(None, environ) == "zh-TW"
        assert detect_locale(None, {"LC_ALL": "en_US.UTF-8", "LANG": "zh_TW"}) == "en-US"
        assert detect_locale(None, {}) == "zh-CN"
        assert detect_locale("fr-FR", {"LANG": "C"}) == "zh-CN"

    with patch("infra.i18n._platform_locale", return_value=None):
        assert detect_locale(None, {"LANG": "de_DE.UTF-8"}) == "en-US"

    print("✓ detect_locale tests passed")


# ═══════════════════════════════════════════════════════════════════════════════
# TRANSLATOR
# ═══════════════════════════════════════════════════════════════════════════════

def test_catalogues_are_complete():
    """Test that every locale defines every English key."""

    print("Testing catalogue completeness...")

    assert set(CATALOGS) == set(AVAILABLE_LOCALES)
    english = set(CATALOGS["en-US"])
    for tag, catalog in CATALOGS.items():
        assert set(catalog) == english, tag

    print("✓ catalogue completeness tests passed")


def test_translator_lookup():
    """Test message lookup and formatting."""

    print("Testing Translator...")

    en = Translator("en-US")
    assert en.t("input.uri_is_empty") == "uri cannot be empty"
    assert en("input.cannot_open_uri", uri="a.txt", source="denied") == "failed to open 'a.txt': denied"
    assert en.t("no.such.key") == "no.such.key"

    hk = Translator("zh-HK")
    assert hk.locale == "zh-HK"
    assert hk.t("units.name.NANOSECOND") == "納秒"
    assert hk.t("units.name.SECOND") == Translator("zh-TW").t("units.name.SECOND")

    assert Translator("zh-CN").t("units.name.NANOSECOND") == "纳秒"

    print("✓ Translator tests passed")


def test_unknown_locale_falls_back():
    """Test an unsupported locale tag."""

    print("Testing fallback...")

    translator = Translator("fr-FR")
    assert translator.locale == "en-US"
    assert translator.t("cli.version") == CATALOGS["en-US"]["cli.version"]

    with patch("infra.i18n.detect_locale", return_value="zh-TW"):
        assert Translator.for_system().locale == "zh-TW"

    print("✓ fallback tests passed")


def run_all_tests():
    """Run all test functions."""
    print("\n" + "="*60)
    print("Running Locale Tests")
    print("="*60 + "\n")

    try:
        test_normalize_locale()
        test_detect_locale_priority()
        test_catalogues_are_complete()
        test_translator_lookup()
        test_unknown_locale_falls_back()

        print("\n" + "="*60)
        print("✅ ALL TESTS PASSED!")
        print("="*60 + "\n")

    except AssertionError as e:
        print("\n" + "="*60)
        print("❌ TEST FAILED!")
        print("="*60)
        print(f"Error: {e}\n")
        raise


if __name__ == "__main__":
    run_all_tests()
