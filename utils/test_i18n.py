import pytest

from utils.i18n import LANG_DE, LANG_EN, TRANSLATIONS, _, detect_language, preset_label


@pytest.mark.parametrize("locale, expected", [
    ("en-US", LANG_EN),
    ("en_GB", LANG_EN),
    ("de-DE", LANG_DE),
    ("de_AT", LANG_DE),
    ("fr-FR", LANG_DE),
    ("", LANG_DE),
    (None, LANG_DE),
])
def test_detect_language(locale, expected):
    assert detect_language(locale) == expected


def test_translate():
    assert _('opacity', LANG_DE) == "Deckkraft"
    assert _('opacity', LANG_EN) == "Opacity"


def test_translate_falls_back_to_english_then_key():
    assert _('opacity', 99) == "Opacity"
    assert _('no_such_key', LANG_DE) == 'no_such_key'


def test_languages_cover_the_same_keys():
    assert set(TRANSLATIONS[LANG_DE]) == set(TRANSLATIONS[LANG_EN])


def test_preset_label():
    assert preset_label('oldfilm', LANG_EN) == "Old Film"
    assert preset_label('oldfilm', LANG_DE) == "Alter Film"
    assert preset_label('unknown', LANG_EN) == 'preset_unknown'
