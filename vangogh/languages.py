"""Language codes: national flags and native titles."""

from __future__ import annotations

_REGIONAL_INDICATOR_A = 0x1F1E6

# (code, flag country, native title). Some codes share a country's flag where
# no better match exists (ar, ca, fa); a few have no flag at all.
_LANGUAGES = (
    ("en", "US", "English"),
    ("id", "ID", "bahasa Indonesia"),
    ("ca", "ES", "català"),
    ("cz", "CZ", "český"),
    ("da", "DK", "Dansk"),
    ("de", "DE", "Deutsch"),
    ("et", "EE", "eesti"),
    ("es", "ES", "español"),
    ("es_mx", "MX", "Español (AL)"),
    ("fr", "FR", "français"),
    ("gog_IN", None, "Inuktitut"),
    ("is", "IS", "Íslenska"),
    ("it", "IT", "italiano"),
    ("la", None, "latine"),
    ("hu", "HU", "magyar"),
    ("nl", "NL", "nederlands"),
    ("no", "NO", "norsk"),
    ("pl", "PL", "polski"),
    ("pt", "PT", "português"),
    ("br", "BR", "Português do Brasil"),
    ("ro", "RO", "română"),
    ("sk", "SI", "slovenský"),
    ("fi", "FI", "suomi"),
    ("sv", "SE", "svenska"),
    ("vi", "VN", "Tiếng Việt"),
    ("tr", "TR", "Türkçe"),
    ("uk", "UA", "yкраїнська"),
    ("gk", "GR", "Ελληνικά"),
    ("be", "BY", "беларуская"),
    ("bl", "BG", "български"),
    ("ru", "RU", "русский"),
    ("sb", "RS", "Српска"),
    ("he", "IL", "עברית"),
    ("ar", "SA", "العربية"),
    ("fa", "IR", "فارسی"),
    ("th", "TH", "ไทย"),
    ("ko", "KR", "한국어"),
    ("cn", "CN", "中文(简体)"),
    ("zh", "CN", "中文(繁體)"),
    ("jp", "JP", "日本語"),
)


def _flag(country: str) -> str:
    return "".join(chr(_REGIONAL_INDICATOR_A + ord(c) - ord("A")) for c in country)


LANGUAGE_FLAGS = {
    code: _flag(country) for code, country, _ in _LANGUAGES if country is not None
}

LANGUAGE_TITLES = {code: title for code, _, title in _LANGUAGES}


def language_code_flag(lc: str) -> str:
    """Return the flag for a language code, or an empty string."""
    return LANGUAGE_FLAGS.get(lc, "")


def language_code_title(lc: str) -> str:
    """Return the native title of a language code, or the code itself."""
    return LANGUAGE_TITLES.get(lc, lc)


def format_language(lc: str) -> str:
    """Return the flag and title of a language code, space separated."""
    return f"{language_code_flag(lc)} {language_code_title(lc)}"