"""Enumerations for trigramid."""

import enum


class Script(enum.Enum):
    """Writing systems shared by more than one supported language."""

    LATIN = "latin"
    CYRILLIC = "cyrillic"
    ARABIC = "arabic"
    DEVANAGARI = "devanagari"
    HEBREW = "hebrew"


class Lang(enum.Enum):
    """Supported languages, keyed by ISO 639-3 code."""

    ENG = "eng"
    FRA = "fra"
    DEU = "deu"
    SPA = "spa"
    POR = "por"
    ITA = "ita"
    RUS = "rus"
    UKR = "ukr"
    BUL = "bul"
    ARA = "ara"
    PES = "pes"
    URD = "urd"
    HIN = "hin"
    MAR = "mar"
    NEP = "nep"
    HEB = "heb"
    YID = "yid"

    @property
    def code(self) -> str:
        """The ISO 639-3 code, e.g. ``"eng"``."""
        return self.value

    @property
    def eng_name(self) -> str:
        """The English name of the language."""
        return LANG_NAMES[self]

    @classmethod
    def from_code(cls, code: str) -> "Lang | None":
        """Return the language for an ISO 639-3 code, or None if unknown."""
        try:
            return cls(code.strip().lower())
        except ValueError:
            return None


LANG_NAMES: dict[Lang, str] = {
    Lang.ENG: "English",
    Lang.FRA: "French",
    Lang.DEU: "German",
    Lang.SPA: "Spanish",
    Lang.POR: "Portuguese",
    Lang.ITA: "Italian",
    Lang.RUS: "Russian",
    Lang.UKR: "Ukrainian",
    Lang.BUL: "Bulgarian",
    Lang.ARA: "Arabic",
    Lang.PES: "Persian",
    Lang.URD: "Urdu",
    Lang.HIN: "Hindi",
    Lang.MAR: "Marathi",
    Lang.NEP: "Nepali",
    Lang.HEB: "Hebrew",
    Lang.YID: "Yiddish",
}

# Writing system of each language.  Profiles listed under any other script are
# rejected at load time.
LANG_SCRIPTS: dict[Lang, Script] = {
    Lang.ENG: Script.LATIN,
    Lang.FRA: Script.LATIN,
    Lang.DEU: Script.LATIN,
    Lang.SPA: Script.LATIN,
    Lang.POR: Script.LATIN,
    Lang.ITA: Script.LATIN,
    Lang.RUS: Script.CYRILLIC,
    Lang.UKR: Script.CYRILLIC,
    Lang.BUL: Script.CYRILLIC,
    Lang.ARA: Script.ARABIC,
    Lang.PES: Script.ARABIC,
    Lang.URD: Script.ARABIC,
    Lang.HIN: Script.DEVANAGARI,
    Lang.MAR: Script.DEVANAGARI,
    Lang.NEP: Script.DEVANAGARI,
    Lang.HEB: Script.HEBREW,
    Lang.YID: Script.HEBREW,
}
