from dataclasses import dataclass, field

@dataclass(frozen=True)
class Language:
    """
    A target language for translation, identified by its code.

    Two languages are equal if their codes are equal, regardless of display name.
    """
    code : str
    name : str = field(default='', compare=False)
    is_default : bool = field(default=False, compare=False)

    @property
    def is_translatable(self) -> bool:
        return self.code.lower() in _translatable_codes

    def __str__(self) -> str:
        return self.name or self.code

Unknown = Language('', "Unknown", is_default=True)

known_languages : tuple[Language, ...] = (
    Unknown,
    Language('af', "Afrikaans"),
    Language('sq', "Albanian"),
    Language('am', "Amharic"),
    Language('ar', "Arabic"),
    Language('hy', "Armenian"),
    Language('az', "Azerbaijani"),
    Language('eu', "Basque"),
    Language('be', "Belarusian"),
    Language('bn', "Bengali"),
    Language('bh', "Bihari"),
    Language('bg', "Bulgarian"),
    Language('my', "Burmese"),
    Language('ca', "Catalan"),
    Language('chr', "Cherokee"),
    Language('zh', "Chinese"),
    Language('zh-CN', "Simplified Chinese"),
    Language('zh-TW', "Traditional Chinese"),
    Language('hr', "Croatian"),
    Language('cs', "Czech"),
    Language('da', "Danish"),
    Language('dv', "Dhivehi"),
    Language('nl', "Dutch"),
    Language('en', "English"),
    Language('eo', "Esperanto"),
    Language('et', "Estonian"),
    Language('tl', "Filipino"),     # also Tagalog
    Language('fi', "Finnish"),
    Language('fr', "French"),
    Language('gl', "Galician"),
    Language('ka', "Georgian"),
    Language('de', "German"),
    Language('el', "Greek"),
    Language('gn', "Guarani"),
    Language('gu', "Gujarati"),
    Language('iw', "Hebrew"),
    Language('hi', "Hindi"),
    Language('hu', "Hungarian"),
    Language('is', "Icelandic"),
    Language('id', "Indonesian"),
    Language('iu', "Inuktitut"),
    Language('ga', "Irish"),
    Language('it', "Italian"),
    Language('ja', "Japanese"),
    Language('kn', "Kannada"),
    Language('kk', "Kazakh"),
    Language('km', "Khmer"),
    Language('ko', "Korean"),
    Language('ku', "Kurdish"),
    Language('ky', "Kyrgyz"),
    Language('lo', "Laothian"),
    Language('lv', "Latvian"),
    Language('lt', "Lithuanian"),
    Language('mk', "Macedonian"),
    Language('ms', "Malay"),
    Language('ml', "Malayalam"),
    Language('mt', "Maltese"),
    Language('mr', "Marathi"),
    Language('mn', "Mongolian"),
    Language('ne', "Nepali"),
    Language('no', "Norwegian"),
    Language('or', "Oriya"),
    Language('ps', "Pashto"),
    Language('fa', "Persian"),
    Language('pl', "Polish"),
    Language('pt-PT', "Portuguese"),
    Language('pa', "Punjabi"),
    Language('ro', "Romanian"),
    Language('ru', "Russian"),
    Language('sa', "Sanskrit"),
    Language('sr', "Serbian"),
    Language('sd', "Sindhi"),
    Language('si', "Sinhalese"),
    Language('sk', "Slovak"),
    Language('sl', "Slovenian"),
    Language('es', "Spanish"),
    Language('es-US', "Spanish (United States)"),
    Language('sw', "Swahili"),
    Language('sv', "Swedish"),
    Language('tg', "Tajik"),
    Language('ta', "Tamil"),
    Language('te', "Telugu"),
    Language('th', "Thai"),
    Language('bo', "Tibetan"),
    Language('tr', "Turkish"),
    Language('uk', "Ukrainian"),
    Language('ur', "Urdu"),
    Language('uz', "Uzbek"),
    Language('ug', "Uighur"),
    Language('vi', "Vietnamese"),
    Language('cy', "Welsh"),
    Language('yi', "Yiddish"),
)

translatable_codes : tuple[str, ...] = (
    'af', 'sq', 'ar', 'be', 'bg', 'zh-CN', 'zh-TW', 'ca', 'hr', 'cs', 'da', 'nl', 'en', 'et', 'tl',
    'fi', 'fr', 'gl', 'de', 'el', 'iw', 'hi', 'hu', 'is', 'id', 'ga', 'it', 'ja', 'ko', 'lv', 'lt',
    'mk', 'ms', 'mt', 'no', 'fa', 'pl', 'pt-PT', 'ro', 'ru', 'es', 'es-US', 'sr', 'sk', 'sl', 'sw',
    'sv', 'th', 'tr', 'uk', 'vi', 'cy', 'yi',
)

_translatable_codes : frozenset[str] = frozenset(code.lower() for code in translatable_codes)

_language_lookup : dict[str, Language] = { language.code.lower() : language for language in known_languages }

class LanguageCatalog:
    """
    Registry of known languages and the subset that can be used as translation targets
    """
    def __init__(self, native_language : str = 'en'):
        self.native_language : Language = self.Resolve(native_language)

    def AllTranslatable(self) -> tuple[Language, ...]:
        """
        The languages that can be requested as translation targets, in catalog order
        """
        return tuple(_language_lookup[code.lower()] for code in translatable_codes)

    def Resolve(self, code : str|None) -> Language:
        """
        Get the canonical language for a code, or an ad hoc language if the code is not known
        """
        code = (code or '').strip()
        if not code:
            return Unknown

        return _language_lookup.get(code.lower()) or Language(code, code)

    def IsNativeLanguage(self, language : Language) -> bool:
        """
        True if the language is the one the source strings are written in
        """
        return language.code.lower() == self.native_language.code.lower()
