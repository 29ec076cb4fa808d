import pytest

from link_preview.i18n import Localizer


@pytest.fixture
def localizer():
    return Localizer.from_package()


def test_packaged_locales(localizer):
    assert localizer.locales == ["ar", "en", "es", "hi", "zh"]
    assert "previewLabel" in localizer["es"]


def test_translate_with_region_fallback(localizer):
    assert localizer.translate("visitSite", "es-MX") == "Visitar sitio"
    assert localizer.translate("visitSite", "zh_CN") == localizer["zh"]["visitSite"]


def test_unknown_locale_uses_default(localizer):
    assert localizer.resolve("fr") is None
    assert localizer.translate("visitSite", "fr") == "Visit Site"
    assert localizer.translate("visitSite") == "Visit Site"


def test_missing_key_falls_back():
    localizer = Localizer({"en": {"loading": "Loading"}, "es": {}})
    assert localizer.translate("loading", "es") == "Loading"
    assert localizer.translate("unknown", "es") == "unknown"
    assert localizer.strings("es") == {"loading": "Loading"}


def test_rtl(localizer):
    assert localizer.is_rtl("ar")
    assert not localizer.is_rtl("hi")


def test_default_locale_must_exist():
    with pytest.raises(ValueError):
        Localizer({"es": {}}, default_locale="en")
