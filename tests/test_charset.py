import sys

import pytest

from termcells.charset import get_charset


@pytest.fixture(autouse=True)
def posix_platform(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")


@pytest.mark.parametrize("locale", ["C", "POSIX"])
def test_portable_locales_are_ascii(locale):
    assert get_charset({"LANG": locale}) == "US-ASCII"


def test_empty_environment_is_utf8():
    assert get_charset({}) == "UTF-8"


def test_locale_without_codeset_is_utf8():
    assert get_charset({"LANG": "en_US"}) == "UTF-8"


def test_codeset_is_extracted():
    assert get_charset({"LANG": "de_DE.ISO8859-15"}) == "ISO8859-15"


def test_variant_is_dropped():
    assert get_charset({"LANG": "de_DE.ISO8859-15@euro"}) == "ISO8859-15"


def test_variant_without_codeset_is_utf8():
    assert get_charset({"LANG": "de_DE@euro"}) == "UTF-8"


def test_lc_all_wins_over_others():
    env = {"LC_ALL": "ru_RU.KOI8-R", "LC_CTYPE": "ja_JP.EUC-JP", "LANG": "C"}
    assert get_charset(env) == "KOI8-R"


def test_lc_ctype_wins_over_lang():
    env = {"LC_ALL": "", "LC_CTYPE": "ja_JP.EUC-JP", "LANG": "C"}
    assert get_charset(env) == "EUC-JP"


def test_empty_values_fall_through_to_lang():
    env = {"LC_ALL": "", "LC_CTYPE": "", "LANG": "POSIX"}
    assert get_charset(env) == "US-ASCII"


def test_c_with_codeset_uses_codeset():
    assert get_charset({"LC_ALL": "C.UTF-8"}) == "UTF-8"


def test_default_reads_process_environment(monkeypatch):
    monkeypatch.setenv("LC_ALL", "ko_KR.EUC-KR")
    assert get_charset() == "EUC-KR"


def test_windows_is_utf16(monkeypatch):
    monkeypatch.setattr(sys, "platform", "win32")
    assert get_charset({"LANG": "C"}) == "UTF-16"