"""Language-code registry.

The rewriter only needs to answer one question about a path segment: is it a
language code? ``LanguageCodeSet`` answers it from either the full standard
table or a site's configured subset of it.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from jsonapi_obscurity.errors import ConfigurationError

if TYPE_CHECKING:
    from jsonapi_obscurity.config import ObscurityConfig

# code -> (English name, native name)
STANDARD_LANGUAGES: Mapping[str, tuple[str, str]] = MappingProxyType(
    {
        "af": ("Afrikaans", "Afrikaans"),
        "am": ("Amharic", "አማርኛ"),
        "ar": ("Arabic", "العربية"),
        "ast": ("Asturian", "Asturianu"),
        "az": ("Azerbaijani", "Azərbaycanca"),
        "be": ("Belarusian", "Беларуская"),
        "bg": ("Bulgarian", "Български"),
        "bn": ("Bengali", "বাংলা"),
        "bo": ("Tibetan", "བོད་སྐད་"),
        "bs": ("Bosnian", "Bosanski"),
        "ca": ("Catalan", "Català"),
        "cs": ("Czech", "Čeština"),
        "cy": ("Welsh", "Cymraeg"),
        "da": ("Danish", "Dansk"),
        "de": ("German", "Deutsch"),
        "dz": ("Dzongkha", "རྫོང་ཁ"),
        "el": ("Greek", "Ελληνικά"),
        "en": ("English", "English"),
        "en-x-simple": ("Simple English", "Simple English"),
        "eo": ("Esperanto", "Esperanto"),
        "es": ("Spanish", "Español"),
        "et": ("Estonian", "Eesti"),
        "eu": ("Basque", "Euskera"),
        "fa": ("Persian, Farsi", "فارسی"),
        "fi": ("Finnish", "Suomi"),
        "fil": ("Filipino", "Filipino"),
        "fo": ("Faeroese", "Føroyskt"),
        "fr": ("French", "Français"),
        "fy": ("Frisian, Western", "Frysk"),
        "ga": ("Irish", "Gaeilge"),
        "gd": ("Scots Gaelic", "Gàidhlig"),
        "gl": ("Galician", "Galego"),
        "gsw-berne": ("Swiss German", "Schwyzerdütsch"),
        "gu": ("Gujarati", "ગુજરાતી"),
        "he": ("Hebrew", "עברית"),
        "hi": ("Hindi", "हिन्दी"),
        "hr": ("Croatian", "Hrvatski"),
        "ht": ("Haitian Creole", "Kreyòl ayisyen"),
        "hu": ("Hungarian", "Magyar"),
        "hy": ("Armenian", "Հայերեն"),
        "id": ("Indonesian", "Bahasa Indonesia"),
        "is": ("Icelandic", "Íslenska"),
        "it": ("Italian", "Italiano"),
        "ja": ("Japanese", "日本語"),
        "jv": ("Javanese", "Basa Java"),
        "ka": ("Georgian", "ქართული ენა"),
        "kk": ("Kazakh", "Қазақ"),
        "km": ("Khmer", "ភាសាខ្មែរ"),
        "kn": ("Kannada", "ಕನ್ನಡ"),
        "ko": ("Korean", "한국어"),
        "ku": ("Kurdish", "Kurdî"),
        "ky": ("Kyrgyz", "Кыргызча"),
        "lo": ("Lao", "ພາສາລາວ"),
        "lt": ("Lithuanian", "Lietuvių"),
        "lv": ("Latvian", "Latviešu"),
        "mg": ("Malagasy", "Malagasy"),
        "mk": ("Macedonian", "Македонски"),
        "ml": ("Malayalam", "മലയാളം"),
        "mn": ("Mongolian", "монгол"),
        "mr": ("Marathi", "मराठी"),
        "ms": ("Bahasa Malaysia", "بهاس ملايو"),
        "my": ("Burmese", "ဗမာစကား"),
        "ne": ("Nepali", "नेपाली"),
        "nl": ("Dutch", "Nederlands"),
        "nb": ("Norwegian Bokmål", "Norsk, bokmål"),
        "nn": ("Norwegian Nynorsk", "Norsk, nynorsk"),
        "oc": ("Occitan", "Occitan"),
        "pa": ("Punjabi", "ਪੰਜਾਬੀ"),
        "pl": ("Polish", "Polski"),
        "ps": ("Pashto", "پښتو"),
        "pt-br": ("Portuguese, Brazil", "Português, Brasil"),
        "pt-pt": ("Portuguese, Portugal", "Português, Portugal"),
        "ro": ("Romanian", "Română"),
        "ru": ("Russian", "Русский"),
        "sco": ("Scots", "Scots"),
        "se": ("Northern Sami", "Sámi"),
        "si": ("Sinhala", "සිංහල"),
        "sk": ("Slovak", "Slovenčina"),
        "sl": ("Slovenian", "Slovenščina"),
        "sq": ("Albanian", "Shqip"),
        "sr": ("Serbian", "Српски"),
        "sv": ("Swedish", "Svenska"),
        "sw": ("Swahili", "Kiswahili"),
        "ta": ("Tamil", "தமிழ்"),
        "ta-lk": ("Tamil, Sri Lanka", "தமிழ், இலங்கை"),
        "te": ("Telugu", "తెలుగు"),
        "th": ("Thai", "ภาษาไทย"),
        "tr": ("Turkish", "Türkçe"),
        "tyv": ("Tuvan", "Тыва дыл"),
        "ug": ("Uyghur", "Уйғур"),
        "uk": ("Ukrainian", "Українська"),
        "ur": ("Urdu", "اردو"),
        "vi": ("Vietnamese", "Tiếng Việt"),
        "xx-lolspeak": ("Lolspeak", "Lolspeak"),
        "zh-hans": ("Chinese, Simplified", "简体中文"),
        "zh-hant": ("Chinese, Traditional", "繁體中文"),
    }
)

LANGUAGE_POLICIES = ("standard", "configured")


@dataclass(frozen=True, slots=True)
class LanguageCodeSet:
    """Immutable set of language codes recognized as path segments.

    Build one from the standard table or from a site's configured subset::

        LanguageCodeSet.standard()
        LanguageCodeSet.configured(["de", "en"])
    """

    codes: frozenset[str]

    @classmethod
    def standard(cls) -> LanguageCodeSet:
        """Every code in the standard language table."""
        return cls(frozenset(STANDARD_LANGUAGES))

    @classmethod
    def configured(cls, codes: Iterable[str]) -> LanguageCodeSet:
        """Only the given codes, each of which must be a standard code.

        Raises:
            ConfigurationError: If a code is not in the standard table.
        """
        selected = frozenset(code.strip().lower() for code in codes if code.strip())
        unknown = selected.difference(STANDARD_LANGUAGES)
        if unknown:
            msg = f"Unknown language code(s): {', '.join(sorted(unknown))}"
            raise ConfigurationError(msg)
        return cls(selected)

    @classmethod
    def from_config(cls, config: ObscurityConfig) -> LanguageCodeSet:
        """Resolve the language set named by ``config.language_policy``."""
        if config.language_policy == "standard":
            return cls.standard()
        if config.language_policy == "configured":
            return cls.configured(config.languages)
        msg = (
            f"Unknown language policy {config.language_policy!r}. "
            f"Expected one of: {', '.join(LANGUAGE_POLICIES)}"
        )
        raise ConfigurationError(msg)

    def __contains__(self, code: object) -> bool:
        return code in self.codes

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.codes))

    def __len__(self) -> int:
        return len(self.codes)
