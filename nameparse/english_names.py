"""
English Name Parsing and Casing Module

This module classifies a free-format personal name such as

    Mr AB & M/s CD MacNay-Smith
    MR J.L. D'ANGELO
    Estate Of The Late Lieutenant Colonel AB Van Der Heiden

into one of a fixed set of layouts, breaks it into named components (title,
given name, initials, surname ...), flags suspicious input and re-renders the
components with correct name casing, including personalised salutations.

## Overview

The core functionality is provided by the `NameParser` class, which runs every
name through a fixed pipeline:

1. **Format Grammar**: Ordered-choice match of layout templates from the start of the text
2. **Validation**: Leftover text, illegal characters and a vowel-sound heuristic
3. **Auto-clean Retry**: Optionally sanitise the raw text and match once more
4. **Casing**: Per-component casing rules, with a dedicated surname algorithm
5. **Assembly**: Per-layout reassembly into a full name or a salutation

## Architecture

### Clean Service Separation
- **FormatGrammar**: Compiled, immutable list of layout templates and component matchers
- **NameValidator**: Post-match sanity checks, folded into a single error flag
- **CaseService**: Component casing, surname casing with the override table
- **NameAssembler**: Full-name and salutation rendering
- **NameParser**: Facade wiring the services together for one configuration

### Immutable Design
- **NameParseConfig** is a frozen dataclass built once; grammars are memoised per config
- **SurnameOverrideTable** is read-only and injected, never a process-wide global
- **NameRecord** is created fresh by every `parse` call, so a parser can be shared by threads

## Layouts

Templates are tried top to bottom and the first one that matches a prefix of the
input wins. Whatever is left over becomes `non_matching` and marks the parse as an
error. Longer templates must precede the templates that are syntactic prefixes of
them; the order lives in `english_names_data` and is load-bearing.

    Mr_A_Smith_&_Ms_B_Jones    (joint_names)
    Mr_&_Ms_A_&_B_Smith        (joint_names)
    Mr_A_&_Ms_B_Smith          (joint_names)
    Mr_&_Ms_A_Smith            (joint_names)
    Mr_A_&_B_Smith             (joint_names)
    Mr_John_A_Smith
    Mr_John_Smith
    Mr_A_Smith
    John_A_Smith
    John_Smith
    A_Smith
    unknown

With `allow_reversed`, "Surname, Title Initials" forms such as "Smith, Mr AB" are
mapped onto the same layout names.

## Usage Examples

```python
from nameparse.english_names import NameParser, case_surname, clean

parser = NameParser(salutation="Dear", sal_default="Friend", auto_clean=True)

name = parser.parse("MR AC DE SILVA")
name.error              # False
name.components()       # {"title_1": "MR", "initials_1": "AC", "surname_1": "DE SILVA"}
name.case_all()         # "Mr AC De Silva"
name.salutation()       # "Dear Mr De Silva"
name.properties()       # {"type": "Mr_A_Smith", "number": 1, "non_matching": "", "error": False}

case_surname("DE SILVA-MACNAY")     # "De Silva-MacNay"
clean("Bad Na9me")                  # "Bad Name"
```

## Error Handling

Parse problems never raise. They set `error` and leave a diagnostic on the record:
- `"ParseMismatch"`: text left over after the best matching layout
- `"IllegalCharacter"`: a character outside letters, space and - ' . , & /
- `"InvalidNameToken"`: a given name or surname with no vowel sound

Asking for a salutation without both salutation words configured raises
`ConfigurationError`, as do unknown configuration options.

## Thread Safety

`NameParser`, its grammar and its override table are read-only after construction.
Every call to `parse` returns a new `ParsedName`.
"""

from __future__ import annotations
import logging
import re
import unicodedata
from dataclasses import dataclass, field, fields, replace
from functools import lru_cache
from typing import Callable, Dict, List, Optional, Tuple

import ftfy

from nameparse.english_names_data import (
    ALLOWED_CHARACTERS,
    COMPONENT_ORDER,
    CONJUNCTIONS,
    ESTATE_PRECURSOR_WORDS,
    EXTENDED_TITLES,
    FIXED_SURNAME_CORRECTIONS,
    JOINT_LAYOUTS,
    MAC_FALSE_POSITIVES,
    MAC_NON_CELTIC_ENDINGS,
    PLURAL_MARKERS,
    PRECURSORS,
    REVERSED_LAYOUTS,
    ROMAN_NUMERAL_CHARS,
    SALUTATION_SKIPPED_BY_LAYOUT,
    SALUTATION_SKIPPED_KEYS,
    SHARED_TITLE_LAYOUTS,
    SINGLE_LAYOUTS,
    SUFFIX_SLOT,
    SUFFIXES,
    SURNAME_PREFIXES,
    TITLES,
    UNKNOWN_TYPE,
    VOWEL_SOUNDS,
    VOWELLESS_SURNAMES,
)
from nameparse.surname_overrides import SurnameOverrideTable


# ════════════════════════════════════════════════════════════════════════════════
# EXCEPTIONS AND ERROR KINDS
# ════════════════════════════════════════════════════════════════════════════════


class NameParseError(Exception):
    """Base class for errors raised by nameparse."""


class ConfigurationError(NameParseError, ValueError):
    """Invalid parser options, or an operation the configuration does not support."""


# Recoverable parse conditions, reported through NameRecord.error_kind
PARSE_MISMATCH = "ParseMismatch"
ILLEGAL_CHARACTER = "IllegalCharacter"
INVALID_NAME_TOKEN = "InvalidNameToken"


# ════════════════════════════════════════════════════════════════════════════════
# COMPILED REGEX PATTERNS
# ════════════════════════════════════════════════════════════════════════════════

_WHITESPACE_PATTERN = re.compile(r"\s+")
_LEADING_SPACE_PATTERN = re.compile(r"\s*")
_DISALLOWED_CHARS_PATTERN = re.compile(f"[^{ALLOWED_CHARACTERS}]")
_WORD_PATTERN = re.compile(r"\w+")
_WORD_START_PATTERN = re.compile(r"\b(\w)")
_VOWEL_PATTERN = re.compile(f"[{VOWEL_SOUNDS}]", re.IGNORECASE)

# Mac followed by at least two letters and not ending like a Polish or Italian name
_MAC_CELTIC_PATTERN = re.compile(rf"\bMac[a-z]{{2,}}[^{MAC_NON_CELTIC_ENDINGS}]\b", re.IGNORECASE)
_MAC_STEM_PATTERN = re.compile(r"\b(Mac)([a-z]+)", re.IGNORECASE)
_MC_PATTERN = re.compile(r"\bMc", re.IGNORECASE)
_MC_STEM_PATTERN = re.compile(r"\b(Mc)([a-z]+)", re.IGNORECASE)

# First character of every space-delimited token that is followed by another token
_LC_PREFIX_PATTERN = re.compile(r"(?<!\S)(\S)(?=\S* )")

# (wrongly cased, correct) pairs, e.g. ("MacHin", "Machin")
_MAC_FALSE_POSITIVE_FIXES = tuple((f"Mac{word[3].upper()}{word[4:]}", word) for word in MAC_FALSE_POSITIVES)

# Regex fragments shared by the component matchers
_SURNAME_PREFIX_FRAGMENT = "(?:" + "|".join(SURNAME_PREFIXES) + ")"
_SUB_SURNAME_FRAGMENT = rf"{_SURNAME_PREFIX_FRAGMENT}?[A-Z]{{2,}}"
_TOKEN_END_FRAGMENT = r"(?: |$)"


# ════════════════════════════════════════════════════════════════════════════════
# IMMUTABLE CONFIGURATION DATA
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class NameParseConfig:
    """Immutable parser options. Salutation words are stored name-cased."""

    salutation: Optional[str] = None
    sal_default: Optional[str] = None
    auto_clean: bool = False
    force_case: bool = False
    lc_prefix: bool = False
    initials: int = 2
    allow_reversed: bool = False
    joint_names: bool = False
    extended_titles: bool = False

    def __post_init__(self):
        if isinstance(self.initials, bool) or not isinstance(self.initials, int):
            raise ConfigurationError(f"initials must be an integer from 1 to 3, got {self.initials!r}")
        object.__setattr__(self, "initials", min(max(self.initials, 1), 3))

        for name in ("salutation", "sal_default"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, case_word(value))

    @classmethod
    def option_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def create_default(cls, **options) -> "NameParseConfig":
        """Factory method checking option names before building the configuration."""
        unknown = sorted(set(options) - set(cls.option_names()))
        if unknown:
            raise ConfigurationError(f"Unknown configuration option(s): {', '.join(unknown)}")
        return cls(**options)

    def with_options(self, **options) -> "NameParseConfig":
        """Immutable update method."""
        unknown = sorted(set(options) - set(self.option_names()))
        if unknown:
            raise ConfigurationError(f"Unknown configuration option(s): {', '.join(unknown)}")
        return replace(self, **options)

    def with_salutation(self, salutation: str, sal_default: str) -> "NameParseConfig":
        """Immutable update method for the salutation words."""
        return replace(self, salutation=salutation, sal_default=sal_default)

    @property
    def has_salutation(self) -> bool:
        return bool(self.salutation and self.sal_default)


# ════════════════════════════════════════════════════════════════════════════════
# RESULT TYPES
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class NameComponents:
    """One optional field per component kind. None means absent, never an empty placeholder."""

    precursor: Optional[str] = None
    title_1: Optional[str] = None
    title_2: Optional[str] = None
    given_name_1: Optional[str] = None
    initials_1: Optional[str] = None
    initials_2: Optional[str] = None
    conjunction_1: Optional[str] = None
    conjunction_2: Optional[str] = None
    surname_1: Optional[str] = None
    surname_2: Optional[str] = None
    suffix: Optional[str] = None

    @classmethod
    def keys(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def as_dict(self) -> Dict[str, str]:
        """Populated components only, in declaration order."""
        return {key: getattr(self, key) for key in self.keys() if getattr(self, key) is not None}

    def get(self, key: str) -> Optional[str]:
        return getattr(self, key)


@dataclass(frozen=True)
class NameRecord:
    """Raw result of matching and validating one input string."""

    input_text: str
    components: NameComponents = field(default_factory=NameComponents)
    type: str = UNKNOWN_TYPE
    number: int = 0
    non_matching: str = ""
    error: bool = False
    error_kind: Optional[str] = None
    error_message: Optional[str] = None
    cleaned: bool = False

    @classmethod
    def unknown(cls, input_text: str, non_matching: str) -> "NameRecord":
        return cls(input_text=input_text, non_matching=non_matching)

    @property
    def is_known(self) -> bool:
        return self.type != UNKNOWN_TYPE

    def properties(self) -> Dict[str, object]:
        return {
            "type": self.type,
            "number": self.number,
            "non_matching": self.non_matching,
            "error": self.error,
        }

    def with_error(self, kind: str, message: str) -> "NameRecord":
        return replace(self, error=True, error_kind=kind, error_message=message)


# ════════════════════════════════════════════════════════════════════════════════
# CLEANING
# ════════════════════════════════════════════════════════════════════════════════


def _fold_accents(text: str) -> str:
    """Strip combining marks so accented letters survive cleaning as plain letters."""
    normalized = unicodedata.normalize("NFKD", text)
    return "".join(c for c in normalized if not unicodedata.combining(c))


def clean(text: str) -> str:
    """
    Remove everything but letters, spaces and - ' . , & / from text.

    Mojibake and typographic quotes are repaired and accents folded first, so
    "O’BRIEN" and "JOSÉ" keep their letters. Repeated spaces are collapsed and the
    result is trimmed. clean(clean(x)) == clean(x).
    """
    text = _fold_accents(ftfy.fix_text(text))
    text = _WHITESPACE_PATTERN.sub(" ", text)
    text = _DISALLOWED_CHARS_PATTERN.sub("", text)
    return _WHITESPACE_PATTERN.sub(" ", text).strip()


# ════════════════════════════════════════════════════════════════════════════════
# CASING
# ════════════════════════════════════════════════════════════════════════════════


def case_word(text: str) -> str:
    """Upper case the first letter and lower case the rest of every word."""
    return _WORD_PATTERN.sub(lambda m: m.group(0).capitalize(), text)


def _capitalize_stem(match: re.Match) -> str:
    prefix, stem = match.group(1), match.group(2)
    return prefix + stem[0].upper() + stem[1:]


def _lower_first(match: re.Match) -> str:
    return match.group(1).lower()


def case_surname(
    surname: str, lc_prefix: bool = False, overrides: Optional[SurnameOverrideTable] = None
) -> str:
    """
    Convert a surname to name case.

    An entry in the override table wins outright, lc_prefix included. Otherwise the
    first letter of every word is upper cased (hyphens and apostrophes start words,
    giving O'Brien and Van-Der-Heiden), Mac and Mc names get their stem capitalised
    (MacNay, McDonald) unless they are known false positives (Machin, Macias ...),
    and with lc_prefix every word but the last is lower cased (van der Heiden).

    Args:
        surname: Surname text in any case
        lc_prefix: Lower case prefix words such as "van", "de", "le"
        overrides: Table of preferred spellings

    Returns:
        The name-cased surname
    """
    if overrides is not None:
        preferred = overrides.lookup(surname)
        if preferred is not None:
            return preferred

    cased = _WORD_START_PATTERN.sub(lambda m: m.group(1).upper(), surname.lower())

    if _MAC_CELTIC_PATTERN.search(cased):
        cased = _MAC_STEM_PATTERN.sub(_capitalize_stem, cased)
        for wrong, right in _MAC_FALSE_POSITIVE_FIXES:
            cased = cased.replace(wrong, right)
    elif _MC_PATTERN.search(cased):
        cased = _MC_STEM_PATTERN.sub(_capitalize_stem, cased)

    for wrong, right in FIXED_SURNAME_CORRECTIONS.items():
        cased = cased.replace(wrong, right)

    if lc_prefix:
        cased = _LC_PREFIX_PATTERN.sub(_lower_first, cased)

    return cased


class CaseService:
    """Name casing of parsed components for one configuration and override table."""

    def __init__(self, config: NameParseConfig, overrides: SurnameOverrideTable):
        self._config = config
        self._overrides = overrides

    def case_surname(self, surname: str, lc_prefix: Optional[bool] = None) -> str:
        if lc_prefix is None:
            lc_prefix = self._config.lc_prefix
        return case_surname(surname, lc_prefix, self._overrides)

    def case_component(self, key: str, value: str) -> str:
        if "initials" in key:
            return value.upper()
        if "surname" in key:
            return self.case_surname(value)
        if key == "suffix" and set(value.rstrip(".")) <= ROMAN_NUMERAL_CHARS:
            return value.upper()
        return case_word(value)

    def case_components(self, record: NameRecord) -> Dict[str, str]:
        """Cased copy of the populated components; empty for unknown layouts."""
        if not record.is_known:
            return {}
        return {key: self.case_component(key, value) for key, value in record.components.as_dict().items()}


# ════════════════════════════════════════════════════════════════════════════════
# COMPONENT MATCHERS
# ════════════════════════════════════════════════════════════════════════════════

# A matcher looks at text from a position and returns (matched length, captured
# value) or None. Captured values have their trailing separator removed.
Matcher = Callable[[str, int], Optional[Tuple[int, str]]]


def _regex_matcher(pattern: str) -> Matcher:
    compiled = re.compile(pattern, re.IGNORECASE)

    def match(text: str, pos: int) -> Optional[Tuple[int, str]]:
        found = compiled.match(text, pos)
        if found is None:
            return None
        return found.end() - pos, found.group(0).rstrip()

    return match


def _alternation(fragments) -> str:
    return "(?:" + "|".join(fragments) + ")"


def build_component_matchers(config: NameParseConfig) -> Dict[str, Matcher]:
    """Compile the matcher for every component kind the layout templates refer to."""
    titles = [fragment for group in TITLES.values() for fragment in group]
    if config.extended_titles:
        titles.extend(fragment for group in EXTENDED_TITLES.values() for fragment in group)

    # Initials: 1..n letters, all spaced (A B, A. B.), all fused (AB) or all dotted (A.B.)
    max_initials = config.initials
    initials = _alternation(
        (
            rf"(?:[A-Z]\.?{_TOKEN_END_FRAGMENT}){{1,{max_initials}}}",
            rf"[A-Z]{{1,{max_initials}}}{_TOKEN_END_FRAGMENT}",
            rf"(?:[A-Z]\.){{1,{max_initials}}}{_TOKEN_END_FRAGMENT}",
        )
    )
    # Given names are longer than the longest initials, so "AB" stays initials
    given_name = rf"[A-Z]{{{config.initials + 1},}}(?:-[A-Z]+)?{_TOKEN_END_FRAGMENT}"

    return {
        "precursor": _regex_matcher(_alternation(PRECURSORS)),
        "title": _regex_matcher(_alternation(titles)),
        "conjunction": _regex_matcher(_alternation(CONJUNCTIONS)),
        "initials": _regex_matcher(initials),
        "initial": _regex_matcher(rf"[A-Z]\.?{_TOKEN_END_FRAGMENT}"),
        "given_name": _regex_matcher(given_name),
        "surname": _regex_matcher(rf"{_SUB_SURNAME_FRAGMENT}(?:-{_SUB_SURNAME_FRAGMENT})? ?"),
        "suffix": _regex_matcher(rf"{_alternation(SUFFIXES)}\.?{_TOKEN_END_FRAGMENT}"),
        "comma": _regex_matcher(r", ?"),
    }


# ════════════════════════════════════════════════════════════════════════════════
# FORMAT GRAMMAR
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class LayoutTemplate:
    """A named sequence of component slots: (key or None, matcher name, optional)."""

    type: str
    number: int
    slots: Tuple[Tuple[Optional[str], str, bool], ...]

    @property
    def keys(self) -> Tuple[str, ...]:
        return tuple(key for key, _, _ in self.slots if key is not None)


def build_layout_templates(config: NameParseConfig) -> Tuple[LayoutTemplate, ...]:
    """Layout templates in match precedence order for this configuration."""
    templates: List[LayoutTemplate] = []

    if config.joint_names:
        templates.extend(LayoutTemplate(t, n, slots) for t, n, slots in JOINT_LAYOUTS)

    # Reversed forms precede the forward forms that would claim their surname
    if config.allow_reversed:
        templates.extend(LayoutTemplate(t, n, slots) for t, n, slots in REVERSED_LAYOUTS)

    for layout_type, number, slots in SINGLE_LAYOUTS:
        if config.extended_titles:
            slots = slots + (SUFFIX_SLOT,)
        templates.append(LayoutTemplate(layout_type, number, slots))

    return tuple(templates)


class FormatGrammar:
    """Ordered-choice matcher: the first template matching a prefix of the input wins."""

    def __init__(self, templates: Tuple[LayoutTemplate, ...], matchers: Dict[str, Matcher]):
        missing = {name for template in templates for _, name, _ in template.slots} - set(matchers)
        if missing:
            raise ConfigurationError(f"No matcher for component(s): {', '.join(sorted(missing))}")
        self._templates = templates
        self._matchers = matchers

    @property
    def templates(self) -> Tuple[LayoutTemplate, ...]:
        return self._templates

    def match(self, text: str) -> NameRecord:
        """Match text against every template in order. Never fails: unknown is the fallback."""
        stripped = text.strip()

        for template in self._templates:
            matched = self._match_template(template, stripped)
            if matched is None:
                continue
            values, end = matched
            logging.debug(f"Matched '{stripped}' as {template.type}")
            return NameRecord(
                input_text=text,
                components=NameComponents(**values),
                type=template.type,
                number=template.number,
                non_matching=stripped[end:].strip(),
            )

        return NameRecord.unknown(text, stripped)

    def _match_template(self, template: LayoutTemplate, text: str) -> Optional[Tuple[Dict[str, str], int]]:
        values: Dict[str, str] = {}
        pos = 0

        for key, matcher_name, optional in template.slots:
            pos = _LEADING_SPACE_PATTERN.match(text, pos).end()
            result = self._matchers[matcher_name](text, pos)
            if result is None:
                if optional:
                    continue
                return None
            length, value = result
            pos += length
            if key is not None:
                values[key] = value

        return values, pos


@lru_cache(maxsize=32)
def compile_grammar(config: NameParseConfig) -> FormatGrammar:
    """Build the grammar for a configuration. Memoised, grammars are immutable."""
    return FormatGrammar(build_layout_templates(config), build_component_matchers(config))


# ════════════════════════════════════════════════════════════════════════════════
# VALIDATION
# ════════════════════════════════════════════════════════════════════════════════


def has_vowel_sound(token: str) -> bool:
    """Vowel heuristic for given names and surnames: a, e, i, o, u, y or j, or exactly Ng."""
    return token.lower() in VOWELLESS_SURNAMES or _VOWEL_PATTERN.search(token) is not None


class NameValidator:
    """Post-match checks folded into the record's error flag. The first failed check is reported."""

    checked_keys = ("given_name_1", "surname_1", "surname_2")

    def validate(self, record: NameRecord) -> NameRecord:
        if record.non_matching:
            return record.with_error(PARSE_MISMATCH, f"could not match '{record.non_matching}'")

        illegal = _DISALLOWED_CHARS_PATTERN.search(record.input_text)
        if illegal:
            return record.with_error(ILLEGAL_CHARACTER, f"illegal character {illegal.group(0)!r} in input")

        for key in self.checked_keys:
            value = record.components.get(key)
            if value is not None and not has_vowel_sound(value):
                return record.with_error(INVALID_NAME_TOKEN, f"{key} '{value}' has no vowel sound")

        return replace(record, error=False, error_kind=None, error_message=None)


# ════════════════════════════════════════════════════════════════════════════════
# ASSEMBLY
# ════════════════════════════════════════════════════════════════════════════════


def _is_estate(precursor: Optional[str]) -> bool:
    if not precursor:
        return False
    words = precursor.lower().split()
    return bool(words) and words[0] in ESTATE_PRECURSOR_WORDS


def _mentions_several_people(text: str) -> bool:
    return any(token.lower() in PLURAL_MARKERS for token in text.split())


class NameAssembler:
    """Renders cased components back into a full name or a salutation."""

    def __init__(self, config: NameParseConfig, case_service: CaseService):
        self._config = config
        self._case_service = case_service

    def case_all(self, record: NameRecord) -> str:
        """Full name in layout order. With force_case, a non-matching tail is appended surname-cased."""
        parts: List[str] = []

        if record.is_known:
            cased = self._case_service.case_components(record)
            parts.extend(cased[key] for key in COMPONENT_ORDER[record.type] if key in cased)

        if record.error and self._config.force_case and record.non_matching:
            # The tail's format is unknown, surname casing is the best approximation
            parts.append(self._case_service.case_surname(record.non_matching, lc_prefix=False))

        return " ".join(parts)

    def salutation(self, record: NameRecord) -> str:
        """Greeting such as "Dear Mr & Mrs O'Brien", or "Dear Friend(s)" when the name is unusable."""
        if not self._config.has_salutation:
            raise ConfigurationError("No salutation word or default defined")

        components = record.components
        if record.error or _is_estate(components.precursor) or components.title_1 is None:
            default = self._config.sal_default
            # A conjunction anywhere in the text most likely means several people
            if _mentions_several_people(record.input_text):
                default += "s"
            return f"{self._config.salutation} {default}"

        cased = self._case_service.case_components(record)
        skipped = SALUTATION_SKIPPED_KEYS | SALUTATION_SKIPPED_BY_LAYOUT.get(record.type, frozenset())
        shared_title_after = SHARED_TITLE_LAYOUTS.get(record.type)

        parts = [self._config.salutation]
        for key in COMPONENT_ORDER[record.type]:
            if key in skipped or key not in cased:
                continue
            parts.append(cased[key])
            if key == shared_title_after:
                parts.append(cased["title_1"])

        return " ".join(parts)


# ════════════════════════════════════════════════════════════════════════════════
# MAIN NAME PARSER CLASS
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class ParsedName:
    """The outcome of one parse, bound to the parser that produced it."""

    record: NameRecord
    parser: "NameParser" = field(repr=False, compare=False)

    @property
    def error(self) -> bool:
        return self.record.error

    @property
    def type(self) -> str:
        return self.record.type

    @property
    def number(self) -> int:
        return self.record.number

    @property
    def non_matching(self) -> str:
        return self.record.non_matching

    @property
    def error_message(self) -> Optional[str]:
        return self.record.error_message

    def components(self) -> Dict[str, str]:
        """Components as they appeared in the input, populated keys only."""
        return self.record.components.as_dict()

    def case_components(self) -> Dict[str, str]:
        return self.parser.case_components(self.record)

    def case_all(self) -> str:
        return self.parser.case_all(self.record)

    def salutation(self) -> str:
        return self.parser.salutation(self.record)

    def properties(self) -> Dict[str, object]:
        return self.record.properties()


class NameParser:
    """Main English name parsing service. Build once, then parse any number of names."""

    def __init__(
        self,
        config: Optional[NameParseConfig] = None,
        overrides: Optional[SurnameOverrideTable] = None,
        **options,
    ):
        if config is not None and options:
            raise ConfigurationError("Pass either a NameParseConfig or keyword options, not both")
        self._config = config or NameParseConfig.create_default(**options)
        self._overrides = overrides if overrides is not None else SurnameOverrideTable.empty()
        self._grammar = compile_grammar(self._config)
        self._validator = NameValidator()
        self._case_service = CaseService(self._config, self._overrides)
        self._assembler = NameAssembler(self._config, self._case_service)

    @property
    def config(self) -> NameParseConfig:
        return self._config

    @property
    def overrides(self) -> SurnameOverrideTable:
        return self._overrides

    @property
    def grammar(self) -> FormatGrammar:
        return self._grammar

    def parse(self, text: str) -> ParsedName:
        """
        Parse a name. The error flag is available as `ParsedName.error`.

        With auto_clean, a failed parse is retried exactly once on clean(text).
        """
        if not isinstance(text, str):
            raise TypeError(f"name must be a string, got {type(text).__name__}")

        text = text.rstrip("\r\n")
        record = self.parse_record(text)

        if record.error and self._config.auto_clean:
            cleaned = clean(text)
            logging.debug(f"Retrying '{text}' as '{cleaned}' after {record.error_kind}")
            record = replace(self.parse_record(cleaned), cleaned=True)

        return ParsedName(record, self)

    def parse_record(self, text: str) -> NameRecord:
        """Match and validate text once, without the auto-clean retry."""
        return self._validator.validate(self._grammar.match(text))

    def case_components(self, record: NameRecord) -> Dict[str, str]:
        return self._case_service.case_components(record)

    def case_all(self, record: NameRecord) -> str:
        return self._assembler.case_all(record)

    def salutation(self, record: NameRecord) -> str:
        return self._assembler.salutation(record)

    def case_surname(self, surname: str) -> str:
        """Surname casing with this parser's lc_prefix option and override table."""
        return self._case_service.case_surname(surname)


# ════════════════════════════════════════════════════════════════════════════════
# MODULE-LEVEL CONVENIENCE FUNCTIONS
# ════════════════════════════════════════════════════════════════════════════════

# Default-configured parser for module-level functions, no surname overrides
_default_parser: Optional[NameParser] = None


def _get_default_parser() -> NameParser:
    """Get or create the default parser instance."""
    global _default_parser
    if _default_parser is None:
        _default_parser = NameParser()
    return _default_parser


def parse_name(text: str) -> ParsedName:
    """
    Module-level convenience function parsing with the default configuration.

    Args:
        text: Input name string

    Returns:
        ParsedName for the input
    """
    return _get_default_parser().parse(text)
