"""
Surname override table.

User-preferred surname spellings ("duPont", "Macquarie", "MacHado" ...) that win
over every heuristic casing rule. The table is loaded once, from a line-oriented
text file with one preferred spelling per line, and is read-only afterwards so a
single instance can be shared by every parser in the process.

File format::

    # comments and blank lines are ignored
    duPont
    Macquarie
    FitzGerald

Lookups are case-insensitive: the key is the lower-cased surname.
"""

from __future__ import annotations
import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Union

# Environment variable naming an override file, checked before the default path
OVERRIDE_FILE_ENV_VAR = "NAMEPARSE_SURNAMES"


def default_override_path() -> Path:
    """Conventional location of the user's override file."""
    env_path = os.environ.get(OVERRIDE_FILE_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / ".config" / "nameparse" / "surnames.txt"


class SurnameOverrideTable:
    """Immutable, case-insensitive mapping of lower-cased surname to preferred casing."""

    __slots__ = ("_entries", "_source")

    def __init__(self, entries: Optional[Mapping[str, str]] = None, source: Optional[str] = None):
        normalized = {}
        for surname in (entries or {}).values():
            normalized[surname.lower()] = surname
        object.__setattr__(self, "_entries", MappingProxyType(normalized))
        object.__setattr__(self, "_source", source)

    def __setattr__(self, name, value):
        raise AttributeError("SurnameOverrideTable is read-only")

    @classmethod
    def empty(cls) -> "SurnameOverrideTable":
        return cls()

    @classmethod
    def from_lines(cls, lines: Iterable[str], source: Optional[str] = None) -> "SurnameOverrideTable":
        """Build a table from preferred spellings, one per line. Later duplicates win."""
        entries = {}
        for line in lines:
            surname = line.strip()
            if not surname or surname.startswith("#"):
                continue
            entries[surname.lower()] = surname
        return cls(entries, source=source)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "SurnameOverrideTable":
        """Load a table from a UTF-8 file. A missing or unreadable file yields an empty table."""
        path = Path(path)
        if not path.exists():
            logging.info(f"No surname override file at {path}, using an empty table")
            return cls(source=str(path))

        try:
            with path.open(encoding="utf-8") as f:
                table = cls.from_lines(f, source=str(path))
        except (OSError, UnicodeDecodeError) as e:
            logging.warning(f"Could not read surname override file {path}: {e}")
            return cls(source=str(path))

        logging.info(f"Loaded {len(table)} surname overrides from {path}")
        return table

    @classmethod
    def load_default(cls) -> "SurnameOverrideTable":
        """Load the table from the conventional location (see default_override_path)."""
        return cls.from_file(default_override_path())

    @property
    def source(self) -> Optional[str]:
        return self._source

    def lookup(self, surname: str) -> Optional[str]:
        """Preferred casing for surname, or None when there is no override."""
        return self._entries.get(surname.lower())

    def as_mapping(self) -> Mapping[str, str]:
        """Read-only view of the table, keyed by lower-cased surname."""
        return self._entries

    def __contains__(self, surname: object) -> bool:
        return isinstance(surname, str) and surname.lower() in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries.values())

    def __repr__(self) -> str:
        return f"SurnameOverrideTable(entries={len(self._entries)}, source={self._source!r})"
