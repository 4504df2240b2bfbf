"""Property overlay cache: ``.properties``/``.env`` files plus the environment.

Loads every ``*.properties`` and ``*.env`` file found directly inside a root
project directory, merges their entries into one flat string map, then
overlays the process environment so environment variables always win.
"""

import os
import re
import string
import sys
from pathlib import Path
from typing import Mapping, Optional

# Files picked up from the root directory (non-recursive).
PROPERTY_FILE_PATTERN = re.compile(r".*\.(properties|env)")

_WHITESPACE = " \t\f"
_SEPARATORS = "=:" + _WHITESPACE
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def _has_continuation(line: str) -> bool:
    """Check whether a natural line ends with an odd number of backslashes."""
    count = len(line) - len(line.rstrip("\\"))
    return count % 2 == 1


def _logical_lines(text: str):
    """Yield logical lines, joining backslash continuations.

    Blank lines and ``#``/``!`` comments are dropped. Leading whitespace of
    every natural line, including continuation lines, is ignored.
    """
    pending = None
    for raw in re.split(r"\r\n|\r|\n", text):
        line = raw.lstrip(_WHITESPACE)
        if pending is None and (not line or line[0] in "#!"):
            continue
        if _has_continuation(line):
            pending = (pending or "") + line[:-1]
            continue
        yield (pending or "") + line
        pending = None
    if pending is not None:
        yield pending


def _unescape(value: str) -> str:
    """Resolve ``\\t \\n \\r \\f \\uXXXX`` escapes; other escaped chars are literal.

    Raises:
        ValueError: On a malformed ``\\uXXXX`` sequence.
    """
    out = []
    i = 0
    while i < len(value):
        ch = value[i]
        if ch != "\\":
            out.append(ch)
            i += 1
            continue
        i += 1
        if i >= len(value):
            break
        ch = value[i]
        if ch == "u":
            digits = value[i + 1:i + 5]
            if len(digits) != 4 or any(d not in string.hexdigits for d in digits):
                raise ValueError(f"Malformed \\uxxxx encoding in {value!r}")
            out.append(chr(int(digits, 16)))
            i += 5
            continue
        out.append(_ESCAPES.get(ch, ch))
        i += 1
    return "".join(out)


def _split_entry(line: str) -> tuple[str, str]:
    """Split a logical line into its key and value.

    The key ends at the first unescaped ``=``, ``:`` or whitespace. Surrounding
    whitespace and a single ``=``/``:`` separator are then skipped.
    """
    end = 0
    while end < len(line):
        ch = line[end]
        if ch == "\\":
            end += 2
            continue
        if ch in _SEPARATORS:
            break
        end += 1
    key = line[:end]
    rest = line[end:].lstrip(_WHITESPACE)
    if rest and rest[0] in "=:":
        rest = rest[1:].lstrip(_WHITESPACE)
    return _unescape(key), _unescape(rest)


def parse_properties(text: str) -> dict:
    """Parse Java ``.properties`` content into a flat dict.

    Supports ``#``/``!`` comments, ``=``, ``:`` or whitespace separators,
    backslash line continuation and ``\\uXXXX`` escapes. Later duplicates of
    a key replace earlier ones.

    Args:
        text: The file content.

    Returns:
        Mapping of key to value, in file order.

    Raises:
        ValueError: On a malformed ``\\uXXXX`` escape.
    """
    result = {}
    for line in _logical_lines(text):
        key, value = _split_entry(line)
        result[key] = value
    return result


def load_properties_file(path: Path) -> dict:
    """Read and parse a single ``.properties``/``.env`` file.

    Content is decoded as UTF-8, falling back to ISO-8859-1 (the classic
    ``.properties`` encoding) when it is not valid UTF-8.
    """
    with open(path, "rb") as f:
        raw = f.read()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        text = raw.decode("latin-1")
    return parse_properties(text)


class PropertyOverlayCache:
    """Configuration context backed by root-level property files and the environment.

    The cache is filled lazily on the first lookup. Values only ever grow or
    get overwritten: later files override earlier ones, and the environment
    overrides every file.

    Args:
        root_dir: Root project directory scanned (depth 1) for property files.
        environ: Environment mapping to overlay. Defaults to ``os.environ``.
    """

    def __init__(self, root_dir: Path, environ: Optional[Mapping[str, str]] = None):
        self.root_dir = Path(root_dir)
        self._environ = os.environ if environ is None else environ
        self._values: dict = {}
        self._loaded_files: list = []
        self._failed_files: set = set()
        self._refreshed = False

    @property
    def loaded_files(self) -> tuple:
        """Paths already merged into the cache, in load order."""
        return tuple(self._loaded_files)

    def _candidate_files(self) -> list[Path]:
        if not self.root_dir.is_dir():
            print(f"WARNING: Property directory '{self.root_dir}' does not exist",
                  file=sys.stderr)
            return []
        return sorted(
            p for p in self.root_dir.iterdir()
            if p.is_file() and PROPERTY_FILE_PATTERN.fullmatch(p.name)
        )

    def _attach_file(self, path: Path):
        print(f'Loading: "{path}"', file=sys.stderr)
        try:
            entries = load_properties_file(path)
        except (OSError, ValueError) as e:
            print(f'WARNING: "{path}" failed to load, skipping: {e}', file=sys.stderr)
            self._failed_files.add(path)
            return
        self._values.update(entries)
        self._loaded_files.append(path)

    def _attach_environment(self):
        for key, value in self._environ.items():
            self._values[key] = value

    def refresh(self):
        """Load property files not seen yet, then overlay the environment.

        Files already in ``loaded_files`` are never parsed again. A file that
        cannot be read or parsed is reported once and skipped for the lifetime
        of the cache; the scan continues.
        """
        for path in self._candidate_files():
            if path in self._loaded_files or path in self._failed_files:
                continue
            self._attach_file(path)
        self._attach_environment()
        self._refreshed = True

    def lookup(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return the value for ``key``, or ``default`` when absent.

        The first call on a fresh cache triggers ``refresh()``.
        """
        if not self._refreshed:
            self.refresh()
        return self._values.get(key, default)

    def as_dict(self) -> dict:
        """Snapshot copy of every cached key/value pair."""
        if not self._refreshed:
            self.refresh()
        return dict(self._values)

    def __contains__(self, key: str) -> bool:
        return self.lookup(key) is not None

    def __getitem__(self, key: str) -> str:
        value = self.lookup(key)
        if value is None:
            raise KeyError(key)
        return value
