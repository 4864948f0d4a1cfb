# ═════════════════════════════════════════════════════════════════════════════════
# LEXICAL DICTIONARIES FOR WESTERN PERSONAL NAMES
# ═════════════════════════════════════════════════════════════════════════════════
#
# Every table is keyed by the folded form of a token: lowercased, with periods
# removed ("Dr." -> "dr", "Ph.D" -> "phd"). Tables are frozen at import time and
# never mutated, so they can be shared freely between threads.
#
# Layers, in the order the parser consults them:
# 1. HONORIFIC PREFIXES: words that may make up a title before the name
# 2. GENERATIONAL SUFFIXES: lineage markers with canonical display forms
# 3. POSTFIX TITLES: credentials and separator phrases, always discarded
# 4. SURNAME PARTICLES: connectives that bind to the following surname word
# 5. CAPITALIZATION EXCEPTIONS: Mac/Mc names that keep a lowercase third letter
# 6. NICKNAME DELIMITERS: paired punctuation marking asides
# ═════════════════════════════════════════════════════════════════════════════════

from types import MappingProxyType

# Layer 1: HONORIFIC PREFIXES
#
# Any one- or two-character word may also appear inside a title ("Lt. Gen.",
# "Secretary of State"), but only these two-character abbreviations may end one;
# other short words are more likely to be initials.
TWO_CHAR_TITLES = frozenset({"mr", "ms", "sr", "dr"})

PREFIX_TITLE_PARTS = frozenset(
    {
        # Civil and social
        "aunt",
        "auntie",
        "dame",
        "frau",
        "goodman",
        "goodwife",
        "herr",
        "lady",
        "lord",
        "madam",
        "madame",
        "master",
        "miss",
        "misses",
        "mister",
        "mme",
        "mrs",
        "nanny",
        "sir",
        "uncle",
        # Nobility and royalty
        "archduchess",
        "archduke",
        "baron",
        "count",
        "countess",
        "duke",
        "dutchess",
        "emperor",
        "empress",
        "king",
        "king's",
        "marchioness",
        "marquess",
        "marquis",
        "marquise",
        "maharajah",
        "maharani",
        "majesty",
        "pharaoh",
        "prince",
        "princess",
        "queen",
        "queen's",
        "royal",
        "seigneur",
        "sultan",
        "sultana",
        "tsar",
        "tsarina",
        "viscount",
        "vizier",
        # Academic and professional
        "academic",
        "advocate",
        "assistant",
        "assoc",
        "associate",
        "asst",
        "attorney",
        "barrister",
        "ceo",
        "cfo",
        "chancellor",
        "coach",
        "curator",
        "dir",
        "director",
        "docent",
        "doctor",
        "exec",
        "executive",
        "manager",
        "nurse",
        "officer",
        "prin",
        "principal",
        "pro",
        "prof",
        "professor",
        "provost",
        "registrar",
        "solicitor",
        "surgeon",
        # Government and judiciary
        "alderman",
        "ald",
        "ambassador",
        "appellate",
        "arbitrator",
        "attache",
        "attaché",
        "bailiff",
        "chair",
        "chairs",
        "chargé",
        "co-chair",
        "co-chairs",
        "clerk",
        "comptroller",
        "controller",
        "councillor",
        "d'affaires",
        "delegate",
        "deputy",
        "dpty",
        "envoy",
        "governor",
        "hon",
        "honorable",
        "honourable",
        "judge",
        "justice",
        "mag",
        "mag-judge",
        "mag/judge",
        "magistrate",
        "magistrate-judge",
        "mayor",
        "member",
        "minister",
        "premier",
        "pres",
        "president",
        "presiding",
        "rep",
        "representative",
        "secretary",
        "senator",
        "senior-judge",
        "sheriff",
        "speaker",
        "treasurer",
        "warden",
        # Military and police
        "1lt",
        "1sgt",
        "1stlt",
        "1stsgt",
        "2lt",
        "2ndlt",
        "a1c",
        "adjutant",
        "adm",
        "admiral",
        "amn",
        "bgen",
        "brig",
        "brigadier",
        "briggen",
        "capt",
        "captain",
        "ccmsgt",
        "cdr",
        "cmd",
        "cmdr",
        "cmsaf",
        "cmsgt",
        "col",
        "colonel",
        "commander",
        "commander-in-chief",
        "commodore",
        "corporal",
        "cpl",
        "cpo",
        "cpt",
        "csm",
        "cwo",
        "cwo2",
        "cwo3",
        "cwo4",
        "cwo5",
        "det",
        "ens",
        "fadm",
        "flt",
        "gen",
        "general",
        "generalissimo",
        "gysgt",
        "insp",
        "lcdr",
        "lcpl",
        "leut",
        "lieut",
        "lieutenant",
        "ltc",
        "ltcol",
        "ltg",
        "ltgen",
        "ltjg",
        "maj",
        "majgen",
        "major",
        "marshal",
        "mcpo",
        "mcpoc",
        "mcpon",
        "mgysgt",
        "msg",
        "msgt",
        "pfc",
        "pilot",
        "po1",
        "po2",
        "po3",
        "pte",
        "pv2",
        "pvt",
        "radm",
        "rdml",
        "sargeant",
        "sargent",
        "scpo",
        "sergeant",
        "sfc",
        "sgm",
        "sgt",
        "sgtmaj",
        "sgtmajmc",
        "sma",
        "smsgt",
        "spc",
        "sra",
        "ssg",
        "ssgt",
        "subaltern",
        "subedar",
        "tsgt",
        "vadm",
        "wo1",
        "wo2",
        "wo3",
        "wo4",
        "wo5",
        # Religious
        "abbess",
        "abbot",
        "acolyte",
        "archbishop",
        "archdeacon",
        "archdruid",
        "ayatollah",
        "bishop",
        "blessed",
        "brother",
        "canon",
        "cardinal",
        "catholicos",
        "chaplain",
        "deacon",
        "druid",
        "elder",
        "father",
        "friar",
        "imam",
        "lama",
        "metropolitan",
        "mgr",
        "monsignor",
        "mother",
        "msgr",
        "mufti",
        "mullah",
        "pastor",
        "patriarch",
        "pope",
        "prelate",
        "presbyter",
        "priest",
        "priestess",
        "primate",
        "prior",
        "rabbi",
        "rebbe",
        "rev",
        "revd",
        "reverand",
        "reverend",
        "saint",
        "sheikh",
        "sister",
        "vicar",
        # Qualifiers that only occur inside multi-word titles
        "1st",
        "2nd",
        "air",
        "and",
        "chief",
        "civil",
        "designated",
        "district",
        "federal",
        "field",
        "first",
        "flag",
        "flight",
        "flying",
        "foreign",
        "grand",
        "group",
        "her",
        "hereditary",
        "high",
        "his",
        "junior",
        "most",
        "municipal",
        "national",
        "petty",
        "political",
        "prime",
        "private",
        "rear",
        "right",
        "senior",
        "special",
        "staff",
        "state",
        "states",
        "supreme",
        "the",
        "und",
        "united",
        "very",
        "vice",
        "warrant",
        "wing",
    }
)

# Layer 2: GENERATIONAL SUFFIXES
#
# Folded suffix token -> generation number. "I" and "1st" denote the senior
# member; "Jr." and "II" both denote the second generation.
GENERATION_BY_SUFFIX = MappingProxyType(
    {
        "sr": 1,
        "snr": 1,
        "senior": 1,
        "i": 1,
        "1st": 1,
        "jr": 2,
        "jnr": 2,
        "junior": 2,
        "ii": 2,
        "2nd": 2,
        "iii": 3,
        "3rd": 3,
        "iv": 4,
        "4th": 4,
        "v": 5,
        "5th": 5,
        "vi": 6,
        "6th": 6,
        "vii": 7,
        "7th": 7,
        "viii": 8,
        "8th": 8,
        "ix": 9,
        "9th": 9,
    }
)

# Folded suffix token -> canonical display form. Tokens missing from this table
# display as the roman numeral for their generation.
SUFFIX_DISPLAY_FORMS = MappingProxyType(
    {
        "sr": "Sr.",
        "snr": "Sr.",
        "senior": "Sr.",
        "i": "Sr.",
        "1st": "Sr.",
        "jr": "Jr.",
        "jnr": "Jr.",
        "junior": "Jr.",
    }
)

ROMAN_NUMERALS_BY_GENERATION = ("I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX")

# Layer 3: POSTFIX TITLES
#
# Credentials and degrees that are recognized and thrown away. Initialisms that
# are all consonants ("MD", "CPA") are caught by shape alone once a given name is
# known; the entries here cover the ones that can also look like words ("CLU",
# "Esq", "LUTC") plus separators like "et al." and "& Co.".
POSTFIX_TITLES = frozenset(
    {
        # Separators
        "and",
        "et",
        "al",
        "co",
        "company",
        # Legal
        "esq",
        "esquire",
        "attorney-at-law",
        "jd",
        "llb",
        "llm",
        "qc",
        "kc",
        # Medical
        "md",
        "do",
        "dds",
        "dmd",
        "rn",
        "lpn",
        "np",
        "pa-c",
        "facs",
        "facp",
        # Academic
        "phd",
        "edd",
        "ma",
        "mba",
        "msc",
        "bsc",
        "ba",
        "bs",
        "ms",
        # Financial and insurance
        "cpa",
        "cfa",
        "cfp",
        "chfc",
        "clu",
        "lutc",
        "cic",
        "ricp",
        # Honours and offices
        "mp",
        "mep",
        "obe",
        "mbe",
        "cbe",
        "kbe",
        "dbe",
        "frs",
        "usn",
        "usmc",
        "usaf",
        "ret",
    }
)

# Layer 4: SURNAME PARTICLES
#
# Connectives that start a multi-word surname when they appear between the
# given name and the last word ("Ludwig van Beethoven", "Oscar de la Hoya").
SURNAME_PARTICLES = frozenset(
    {
        "abu",
        "abd",
        "al",
        "bar",
        "ben",
        "bin",
        "bon",
        "da",
        "dal",
        "das",
        "de",
        "dei",
        "del",
        "dela",
        "della",
        "den",
        "der",
        "des",
        "di",
        "dí",
        "do",
        "dos",
        "du",
        "ibn",
        "la",
        "le",
        "san",
        "santa",
        "st",
        "ste",
        "ten",
        "ter",
        "van",
        "vel",
        "von",
        "zu",
    }
)

# Particles that are just as often given or middle names ("Ben", "San"). These
# only count as particles when written lowercase, or when the input is a single
# case throughout and the writer's capitalization tells us nothing.
CAPITALIZATION_SENSITIVE_PARTICLES = frozenset({"bar", "ben", "bin", "bon", "san", "santa"})

# Spanish and Portuguese "y"/"e" joining two surnames ("Romero y Galdámez")
SURNAME_CONJUNCTIONS = frozenset({"y", "e"})

# Particles that stay lowercase inside a surname, even at the very start of a
# surname-first rendering ("de la Hoya, Oscar").
UNCAPITALIZED_PARTICLES = frozenset(
    {
        "al",
        "bin",
        "ben",
        "da",
        "dal",
        "das",
        "de",
        "dei",
        "del",
        "della",
        "den",
        "der",
        "des",
        "di",
        "dí",
        "do",
        "dos",
        "du",
        "e",
        "ibn",
        "la",
        "le",
        "ten",
        "ter",
        "van",
        "von",
        "y",
        "zu",
    }
)

# Connectives kept lowercase inside a multi-word title ("Secretary of State")
TITLE_CONNECTIVES = frozenset({"and", "at", "for", "in", "of", "on", "the", "to"}) | UNCAPITALIZED_PARTICLES

# Surnames with no vowels at all, which would otherwise look like initials
VOWELLESS_SURNAMES = frozenset({"ng", "lv", "mtz", "hdz"})

# Everything with a vowel reasonably popular as a two-letter given name; in
# single-case input any other two-letter word is treated as initials.
TWO_LETTER_GIVEN_NAMES = frozenset(
    {
        "ab",
        "ai",
        "aj",
        "al",
        "an",
        "bo",
        "cy",
        "da",
        "de",
        "di",
        "do",
        "ed",
        "el",
        "em",
        "ev",
        "gi",
        "go",
        "ha",
        "ho",
        "ja",
        "ji",
        "jo",
        "ka",
        "ki",
        "ky",
        "la",
        "le",
        "li",
        "lo",
        "lu",
        "ly",
        "ma",
        "mi",
        "mo",
        "my",
        "na",
        "om",
        "oz",
        "pa",
        "ra",
        "ry",
        "su",
        "sy",
        "tu",
        "ty",
        "vi",
        "vu",
        "vy",
        "yi",
        "yu",
    }
)

# Layer 5: CAPITALIZATION EXCEPTIONS
#
# Names starting with "Mac" normally capitalize the following letter
# ("MacDonald"). These prefixes mark names where "Mac" is not a patronymic
# prefix and the rest of the word stays lowercase.
MAC_EXCEPTION_PREFIXES = (
    "macedo",
    "macevicius",
    "machado",
    "machar",
    "machin",
    "machlin",
    "macias",
    "maciulis",
    "mackie",
    "mackle",
    "macklin",
    "mackmin",
    "macquarie",
    "macomber",
    "macin",
    "mackintosh",
    "macken",
    "machen",
    "machiel",
    "maciol",
    "mackell",
    "macklem",
    "mackrell",
    "maclin",
    "mackey",
    "mackley",
    "machell",
    "machon",
)

# Layer 6: NICKNAME DELIMITERS
#
# Opening mark -> closing mark. Quote pairs only delimit an aside when they sit
# at word boundaries, so apostrophes inside names ("O'Connor") are left alone.
BRACKET_DELIMITERS = MappingProxyType({"(": ")", "[": "]", "{": "}", "（": "）"})

QUOTE_DELIMITERS = MappingProxyType(
    {
        '"': '"',
        "'": "'",
        "“": "”",  # “ ”
        "‘": "’",  # ‘ ’
        "«": "»",  # « »
        "‹": "›",  # ‹ ›
        "„": "“",  # „ “
    }
)
