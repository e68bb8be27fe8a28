# ═════════════════════════════════════════════════════════════════════════════════
# DECLARED DATA TABLES FOR ENGLISH NAME PARSING
# ═════════════════════════════════════════════════════════════════════════════════
#
# Every table here is plain data consumed by nameparse.english_names:
# 1. COMPONENT VOCABULARY: precursors, titles, conjunctions, surname prefixes, suffixes
# 2. CASING EXCEPTIONS: Mac/Mc false positives and fixed corrections
# 3. LAYOUT TEMPLATES: ordered component sequences, tried top to bottom
# 4. ASSEMBLY ORDERS: per-layout component order for full name and salutation
#
# Regex fragments are matched case-insensitively unless they opt out with (?-i:...).
# Each fragment consumes the separator that follows it, so the fragments can be
# chained without explicit whitespace handling.
# ═════════════════════════════════════════════════════════════════════════════════

from types import MappingProxyType

# ─────────────────────────────────────────────────────────────────────────────────
# Layer 1: COMPONENT VOCABULARY
# ─────────────────────────────────────────────────────────────────────────────────

# Introductory phrases that precede a title or a bare name
PRECURSORS = (
    r"Estate Of (?:The Late )?",
    r"The Late ",
    r"(?:His|Her) Excellency ",
    r"(?:His|Her) Honou?r ",
    r"(?:The )?Right Honou?rable ",
    r"The Honou?rable ",
)

# A precursor starting with one of these words refers to a deceased estate,
# which never gets a personal salutation
ESTATE_PRECURSOR_WORDS = frozenset({"estate"})

# Titles grouped by domain. Within a group, longer alternatives that share a
# stem with a shorter one come first.
TITLES = MappingProxyType(
    {
        "social": (
            r"Mrs\.? ",
            r"Mr\.? ",
            r"Ms\.? ",
            r"M(?:iss|/s)\.? ",
            r"Mme\.? ",  # Madame
            r"Messrs\.? ",  # plural of Mr
            r"Mister ",
            r"Mast(?:\.|er)? ",
            r"Ms?gr\.? ",  # Monsignor
            r"Sir ",
            r"Lord ",
            r"Lady ",
            r"Madam(?:e)? ",
            r"Dame ",
        ),
        "medical": (
            r"Dr\.? ",
            r"Doctor ",
            r"Sister ",
            r"Matron ",
        ),
        "legal": (
            r"(?-i:J)\.? ",  # Judge, upper case only
            r"Judge ",
            r"Justice ",
        ),
        "police": (
            r"Det\.? ",
            r"Insp\.? ",
        ),
        "military": (
            r"Capt(?:\.|ain)? ",
            r"Cdr\.? ",  # Commander, Commodore
            r"Gen(?:\.|eral)? ",
            r"Sgt\.? ",
            r"Sargent ",
            r"(?:Air )?Commodore ",
            r"Air Marshall? ",
            r"Lieutenant (?:Colonel )?",
            r"(?:Lt|Leut|Lieut)\.? (?:(?:Col|Gen|Cdr)\.? )?",
            r"Colonel ",
            r"Maj(?:\.|or)? (?:Gen(?:\.|eral)? )?",
        ),
        "religious": (
            r"Rabbi ",
            r"Brother ",
            r"Father ",
            r"Chaplain ",
            r"Pastor ",
            r"Bishop ",
            r"Mother (?:Superior )?",
            r"(?:Most |Very |Rt\.? )?Rev(?:d|erend|erand)?\.? ",
        ),
        "academic": (
            r"Prof(?:\.|essor)? ",
            r"Ald(?:\.|erman)? ",
        ),
    }
)

# Only recognised when the parser is configured with extended_titles
EXTENDED_TITLES = MappingProxyType(
    {
        "peerage": (
            r"Baron(?:ess)? ",
            r"Count(?:ess)? ",
            r"Viscount(?:ess)? ",
            r"Duke ",
            r"Duchess ",
            r"Earl ",
            r"Marquis ",
            r"Prince(?:ss)? ",
            r"Hon(?:\.|ourable)? ",
        ),
        "military": (
            r"(?:Rear |Vice )?Admiral ",
            r"Brigadier (?:General )?",
            r"Wing Commander ",
            r"Squadron Leader ",
            r"Flight Lieutenant ",
            r"Commander ",
            r"Corporal ",
            r"Cpl\.? ",
            r"Private ",
            r"Pte\.? ",
        ),
        "police": (
            r"Detective (?:Sergeant |Inspector |Constable )?",
            r"Superintendent ",
            r"Inspector ",
            r"Constable ",
            r"Sergeant ",
        ),
        "civic": (
            r"Senator ",
            r"Councillor ",
            r"Cr\.? ",
            r"Mayor ",
        ),
        "religious": (
            r"Archbishop ",
            r"Archdeacon ",
            r"Cardinal ",
            r"Canon ",
            r"Deacon ",
            r"Dean ",
            r"Abbot ",
            r"Friar ",
            r"Fr\.? ",
            r"Imam ",
            r"Sheikh? ",
            r"Cantor ",
            r"Elder ",
        ),
        "academic": (
            r"(?:Assoc(?:\.|iate)? |Asst\.? |Assistant )Prof(?:\.|essor)? ",
            r"Emeritus Prof(?:\.|essor)? ",
        ),
    }
)

CONJUNCTIONS = (
    r"And ",
    r"& ",
)

# Tokens that make the default salutation plural when found in the raw text
PLURAL_MARKERS = frozenset({"and", "&"})

# Patronymic, place name and other surname prefixes. A prefix ending in an
# apostrophe is fused to the surname core, the others consume their space.
SURNAME_PREFIXES = (
    r"[AE]l ",  # Arabic, Greek
    r"Ap ",  # Welsh
    r"Ben ",  # Hebrew
    r"Dell[ae]? ",  # Italian
    r"Dell'",
    r"Del ",
    r"De (?:La )?",
    r"D[aiu] ",
    r"D'",
    r"L[aeo] ",
    r"[OL]'",  # O' Irish, L' French
    r"St\.? ",  # Saint
    r"Den ",  # Dutch
    r"Von (?:Der )?",
    r"Van (?:De[nr]? )?",
)

# Generational and honorary suffixes, only recognised with extended_titles
SUFFIXES = (
    r"Esq(?:uire)?",
    r"Junior",
    r"J(?:u?n)?r",
    r"Senior",
    r"S(?:e?n)?r",
    # Roman numerals, longest first
    r"XIII",
    r"XII",
    r"XI",
    r"IX",
    r"X",
    r"VIII",
    r"VII",
    r"VI",
    r"IV",
    r"V",
    r"III",
    r"II",
    r"I",
)

ROMAN_NUMERAL_CHARS = frozenset("ivxIVX")

# Every character a valid raw name may contain
ALLOWED_CHARACTERS = r"A-Za-z\-'.,&/ "

# A given name or surname must contain one of these to be pronounceable
VOWEL_SOUNDS = "aeiouyj"

# Surnames accepted despite having no vowel sound
VOWELLESS_SURNAMES = frozenset({"ng"})

# ─────────────────────────────────────────────────────────────────────────────────
# Layer 2: CASING EXCEPTIONS
# ─────────────────────────────────────────────────────────────────────────────────

# Names that look like Mac + capitalised stem but are spelled with a lower case
# letter after "Mac". Each entry is the correct spelling.
MAC_FALSE_POSITIVES = (
    "Machin",
    "Machlin",
    "Machar",
    "Mackle",
    "Macklin",
    "Mackie",
    "Machado",  # Portuguese
    "Macevicius",  # Lithuanian
    "Maciulis",  # Lithuanian
    "Macias",  # Lithuanian
)

# Letters that end the Mac-stems of Polish and Italian names, which are not
# Celtic Mac names (Mackiewicz, Macchiavelli, Maccio ...)
MAC_NON_CELTIC_ENDINGS = "aciozj"

# Corrections applied after every other surname casing rule
FIXED_SURNAME_CORRECTIONS = MappingProxyType(
    {
        "Macmurdo": "MacMurdo",
    }
)

# ─────────────────────────────────────────────────────────────────────────────────
# Layer 3: LAYOUT TEMPLATES
# ─────────────────────────────────────────────────────────────────────────────────
#
# A template is (type, number, slots); a slot is (component key, matcher name,
# optional). A key of None marks a punctuation slot that is matched but not
# stored. PRECEDENCE IS LOAD-BEARING: a template that is a syntactic prefix of
# another must come after it, or the shorter one claims the input first.

UNKNOWN_TYPE = "unknown"

_PRECURSOR = ("precursor", "precursor", True)

JOINT_LAYOUTS = (
    (
        "Mr_A_Smith_&_Ms_B_Jones",
        2,
        (
            ("title_1", "title", False),
            ("initials_1", "initials", False),
            ("surname_1", "surname", False),
            ("conjunction_1", "conjunction", False),
            ("title_2", "title", False),
            ("initials_2", "initials", False),
            ("surname_2", "surname", False),
        ),
    ),
    (
        "Mr_&_Ms_A_&_B_Smith",
        2,
        (
            ("title_1", "title", False),
            ("conjunction_1", "conjunction", False),
            ("title_2", "title", False),
            ("initials_1", "initials", False),
            ("conjunction_2", "conjunction", False),
            ("initials_2", "initials", False),
            ("surname_1", "surname", False),
        ),
    ),
    (
        "Mr_A_&_Ms_B_Smith",
        2,
        (
            ("title_1", "title", False),
            ("initials_1", "initials", False),
            ("conjunction_1", "conjunction", False),
            ("title_2", "title", False),
            ("initials_2", "initials", False),
            ("surname_1", "surname", False),
        ),
    ),
    (
        "Mr_&_Ms_A_Smith",
        2,
        (
            ("title_1", "title", False),
            ("conjunction_1", "conjunction", False),
            ("title_2", "title", False),
            ("initials_1", "initials", False),
            ("surname_1", "surname", False),
        ),
    ),
    (
        "Mr_A_&_B_Smith",
        2,
        (
            ("title_1", "title", False),
            ("initials_1", "initials", False),
            ("conjunction_1", "conjunction", False),
            ("initials_2", "initials", False),
            ("surname_1", "surname", False),
        ),
    ),
)

# "Surname, Title Initials" forms: the leading surname and comma, then the
# remaining components in forward order
REVERSED_LAYOUTS = (
    (
        "Mr_John_A_Smith",
        1,
        (
            ("surname_1", "surname", False),
            (None, "comma", False),
            ("title_1", "title", False),
            ("given_name_1", "given_name", False),
            ("initials_1", "initial", False),
        ),
    ),
    (
        "Mr_John_Smith",
        1,
        (
            ("surname_1", "surname", False),
            (None, "comma", False),
            ("title_1", "title", False),
            ("given_name_1", "given_name", False),
        ),
    ),
    (
        "Mr_A_Smith",
        1,
        (
            ("surname_1", "surname", False),
            (None, "comma", False),
            ("title_1", "title", False),
            ("initials_1", "initials", False),
        ),
    ),
    (
        "John_A_Smith",
        1,
        (
            ("surname_1", "surname", False),
            (None, "comma", False),
            ("given_name_1", "given_name", False),
            ("initials_1", "initial", False),
        ),
    ),
    (
        "John_Smith",
        1,
        (
            ("surname_1", "surname", False),
            (None, "comma", False),
            ("given_name_1", "given_name", False),
        ),
    ),
    (
        "A_Smith",
        1,
        (
            ("surname_1", "surname", False),
            (None, "comma", False),
            ("initials_1", "initials", False),
        ),
    ),
)

SINGLE_LAYOUTS = (
    (
        "Mr_John_A_Smith",
        1,
        (
            _PRECURSOR,
            ("title_1", "title", False),
            ("given_name_1", "given_name", False),
            ("initials_1", "initial", False),
            ("surname_1", "surname", False),
        ),
    ),
    (
        "Mr_John_Smith",
        1,
        (
            _PRECURSOR,
            ("title_1", "title", False),
            ("given_name_1", "given_name", False),
            ("surname_1", "surname", False),
        ),
    ),
    (
        "Mr_A_Smith",
        1,
        (
            _PRECURSOR,
            ("title_1", "title", False),
            ("initials_1", "initials", False),
            ("surname_1", "surname", False),
        ),
    ),
    (
        "John_A_Smith",
        1,
        (
            _PRECURSOR,
            ("given_name_1", "given_name", False),
            ("initials_1", "initial", False),
            ("surname_1", "surname", False),
        ),
    ),
    (
        "John_Smith",
        1,
        (
            _PRECURSOR,
            ("given_name_1", "given_name", False),
            ("surname_1", "surname", False),
        ),
    ),
    (
        "A_Smith",
        1,
        (
            _PRECURSOR,
            ("initials_1", "initials", False),
            ("surname_1", "surname", False),
        ),
    ),
)

SUFFIX_SLOT = ("suffix", "suffix", True)

# ─────────────────────────────────────────────────────────────────────────────────
# Layer 4: ASSEMBLY ORDERS
# ─────────────────────────────────────────────────────────────────────────────────

COMPONENT_ORDER = MappingProxyType(
    {
        "Mr_A_Smith_&_Ms_B_Jones": (
            "title_1",
            "initials_1",
            "surname_1",
            "conjunction_1",
            "title_2",
            "initials_2",
            "surname_2",
        ),
        "Mr_&_Ms_A_&_B_Smith": (
            "title_1",
            "conjunction_1",
            "title_2",
            "initials_1",
            "conjunction_2",
            "initials_2",
            "surname_1",
        ),
        "Mr_A_&_Ms_B_Smith": ("title_1", "initials_1", "conjunction_1", "title_2", "initials_2", "surname_1"),
        "Mr_&_Ms_A_Smith": ("title_1", "conjunction_1", "title_2", "initials_1", "surname_1"),
        "Mr_A_&_B_Smith": ("title_1", "initials_1", "conjunction_1", "initials_2", "surname_1"),
        "Mr_John_A_Smith": ("precursor", "title_1", "given_name_1", "initials_1", "surname_1", "suffix"),
        "Mr_John_Smith": ("precursor", "title_1", "given_name_1", "surname_1", "suffix"),
        "Mr_A_Smith": ("precursor", "title_1", "initials_1", "surname_1", "suffix"),
        "John_A_Smith": ("precursor", "given_name_1", "initials_1", "surname_1", "suffix"),
        "John_Smith": ("precursor", "given_name_1", "surname_1", "suffix"),
        "A_Smith": ("precursor", "initials_1", "surname_1", "suffix"),
    }
)

# Salutations leave out these keys, per layout where the key is layout specific
SALUTATION_SKIPPED_KEYS = frozenset({"precursor", "initials_1", "initials_2"})
SALUTATION_SKIPPED_BY_LAYOUT = MappingProxyType(
    {
        # the conjunction between two initial groups goes with the initials
        "Mr_&_Ms_A_&_B_Smith": frozenset({"conjunction_2"}),
    }
)

# Layouts where one title is shared by two people (brothers, father and son):
# the salutation repeats title_1 after this conjunction
SHARED_TITLE_LAYOUTS = MappingProxyType(
    {
        "Mr_A_&_B_Smith": "conjunction_1",
    }
)
