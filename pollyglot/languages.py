"""Flag emoji to translation language lookup.

Slack names most national flags ``flag-xx`` where ``xx`` is the ISO 3166
country code, but a handful of older flags (``us``, ``jp``, ``es``, ``ru``...)
only exist under their bare code. Both spellings resolve through the same
table below.
"""

from types import MappingProxyType
from typing import NamedTuple, Optional

FLAG_PREFIX = "flag-"


class Language(NamedTuple):
    code: str
    name: str


# Bare keys double as Slack emoji names, so codes that are also non-flag
# emoji (e.g. :id:, :sa:) must stay out of this table.
LANGUAGES = MappingProxyType({
    # Flags Slack names without the "flag-" prefix
    "us": Language("en", "English"),
    "gb": Language("en", "English"),
    "uk": Language("en", "English"),
    "es": Language("es", "Spanish"),
    "fr": Language("fr", "French"),
    "de": Language("de", "German"),
    "it": Language("it", "Italian"),
    "jp": Language("ja", "Japanese"),
    "kr": Language("ko", "Korean"),
    "cn": Language("zh-Hans", "Chinese (Simplified)"),
    "ru": Language("ru", "Russian"),
    # flag-xx
    "au": Language("en", "English"),
    "mx": Language("es", "Spanish"),
    "ar": Language("es", "Spanish"),
    "co": Language("es", "Spanish"),
    "br": Language("pt", "Portuguese"),
    "pt": Language("pt", "Portuguese"),
    "tw": Language("zh-Hant", "Chinese (Traditional)"),
    "nl": Language("nl", "Dutch"),
    "se": Language("sv", "Swedish"),
    "pl": Language("pl", "Polish"),
    "tr": Language("tr", "Turkish"),
    "gr": Language("el", "Greek"),
    "ua": Language("uk", "Ukrainian"),
    "il": Language("he", "Hebrew"),
    "eg": Language("ar", "Arabic"),
    "ae": Language("ar", "Arabic"),
    "in": Language("hi", "Hindi"),
    "vn": Language("vi", "Vietnamese"),
    "th": Language("th", "Thai"),
})


def country_code(reaction: str) -> Optional[str]:
    """Return the country code a reaction name stands for, or None if it is not a flag"""
    if reaction in LANGUAGES:
        return reaction
    if FLAG_PREFIX not in reaction:
        return None
    return reaction.split("-")[-1]


def resolve_language(reaction: str) -> Optional[Language]:
    """Map a reaction name such as ``flag-mx`` or ``jp`` to its translation target.

    Returns None both for reactions that are not flags and for flags of
    countries without a supported language.
    """
    code = country_code(reaction)
    if code is None:
        return None
    return LANGUAGES.get(code)
