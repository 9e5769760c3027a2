"""
Resource Loading
================

Locates schema mapping tables and schema files by relative path.

``ResourceLoader`` is the seam: the schema resolver only needs a merged
properties table and a way to open a resource. ``DirectoryResourceLoader``
is the default, searching an ordered list of directories.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO, Dict, Iterable, List, Optional, Union
import logging

logger = logging.getLogger(__name__)

_ESCAPES = {'t': '\t', 'n': '\n', 'r': '\r', 'f': '\f'}


class ResourceLoader(ABC):
    """Abstract source of properties tables and resource streams."""

    @abstractmethod
    def load_all_properties(self, location: str) -> Dict[str, str]:
        """
        Merge every properties file found at ``location``.

        Returns an empty dict when none exists.

        Raises:
            OSError: If a file exists but cannot be read
            UnicodeDecodeError: If a file cannot be decoded
        """
        pass

    @abstractmethod
    def open_resource(self, path: str) -> BinaryIO:
        """
        Open a resource as a binary stream.

        Raises:
            FileNotFoundError: If no such resource exists
        """
        pass


def _logical_lines(text: str) -> Iterable[str]:
    pending = ""
    for raw in text.splitlines():
        line = raw.lstrip() if pending else raw
        if not pending and line.lstrip()[:1] in ("#", "!"):
            # Comment lines never continue
            yield line
            continue
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            pending += line[:-1]
            continue
        yield pending + line
        pending = ""
    if pending:
        yield pending


def _unescape(value: str) -> str:
    out = []
    i = 0
    while i < len(value):
        ch = value[i]
        if ch == "\\" and i + 1 < len(value):
            nxt = value[i + 1]
            if nxt == "u" and i + 6 <= len(value):
                try:
                    out.append(chr(int(value[i + 2:i + 6], 16)))
                    i += 6
                    continue
                except ValueError:
                    pass
            out.append(_ESCAPES.get(nxt, nxt))
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def parse_properties(text: str) -> Dict[str, str]:
    """
    Parse the small subset of the properties format used by mapping tables.

    Supports ``key=value``, ``key:value`` and ``key value`` pairs, ``#`` and
    ``!`` comment lines (a trailing backslash does not continue them),
    backslash escapes (``http\\://...``) and
    trailing-backslash continuation lines.

    Args:
        text: Properties file content

    Returns:
        Mapping of keys to values, later keys overriding earlier ones
    """
    properties: Dict[str, str] = {}
    for line in _logical_lines(text):
        stripped = line.lstrip()
        if not stripped or stripped[0] in "#!":
            continue

        key_end = 0
        while key_end < len(stripped):
            ch = stripped[key_end]
            if ch == "\\":
                key_end += 2
                continue
            if ch in "=:" or ch.isspace():
                break
            key_end += 1

        key = stripped[:key_end]
        rest = stripped[key_end:].lstrip()
        if rest[:1] in ("=", ":"):
            rest = rest[1:].lstrip()
        properties[_unescape(key)] = _unescape(rest)
    return properties


class DirectoryResourceLoader(ResourceLoader):
    """
    Resolves resources relative to an ordered list of directories.

    Properties found in earlier directories win over later ones; resources
    are opened from the first directory that contains them. Properties
    files are read as ISO-8859-1 by default, with non-latin characters
    written as ``\\uXXXX`` escapes.

    Example:
        loader = DirectoryResourceLoader([Path("config"), Path("vendor")])
        mappings = loader.load_all_properties("META-INF/beanxml.schemas")
    """

    def __init__(self, search_paths: Optional[List[Union[str, Path]]] = None,
                 encoding: str = "iso-8859-1"):
        self.search_paths = [Path(p) for p in (search_paths or [Path.cwd()])]
        self.encoding = encoding

    def _candidates(self, path: str) -> Iterable[Path]:
        relative = path.lstrip("/")
        for root in self.search_paths:
            yield root / relative

    def load_all_properties(self, location: str) -> Dict[str, str]:
        merged: Dict[str, str] = {}
        for candidate in self._candidates(location):
            if not candidate.is_file():
                continue
            logger.debug(f"Reading properties from {candidate}")
            properties = parse_properties(candidate.read_text(encoding=self.encoding))
            for key, value in properties.items():
                merged.setdefault(key, value)
        return merged

    def open_resource(self, path: str) -> BinaryIO:
        for candidate in self._candidates(path):
            if candidate.is_file():
                return open(candidate, "rb")
        raise FileNotFoundError(
            f"Resource [{path}] not found in {[str(p) for p in self.search_paths]}"
        )

    def __repr__(self) -> str:
        return f"DirectoryResourceLoader({[str(p) for p in self.search_paths]})"
