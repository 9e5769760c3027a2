"""
Validation Mode Detection
=========================

Peeks at the first lines of an XML definition document to decide whether
it is DTD- or XSD-validated.

The check is deliberately shallow: a ``DOCTYPE`` token outside of comments
means DTD; reaching the first opening tag without one means XSD (a DOCTYPE
declaration always precedes the root element). Comments are tracked across
line boundaries so a commented-out DOCTYPE is ignored.
"""

import codecs
import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Optional, Union

from beanxml_core.validation.mode import ValidationMode

logger = logging.getLogger(__name__)

DOCTYPE = "DOCTYPE"
START_COMMENT = "<!--"
END_COMMENT = "-->"

DEFAULT_ENCODING = "utf-8"

# Characters up to U+0020, the set trimmed before looking for a new comment
_LEADING_BLANKS = "".join(chr(c) for c in range(0x21))


@dataclass
class ScanState:
    """Parse state for a single detection call."""
    in_comment: bool = False


def has_text(content: Optional[str]) -> bool:
    """True when content holds at least one non-whitespace character."""
    return bool(content) and not content.isspace()


def has_doctype(content: str) -> bool:
    return DOCTYPE in content


def has_opening_tag(content: str, state: ScanState) -> bool:
    """
    Does the content contain an XML opening tag?

    Only the first ``<`` is considered; it must be followed by a letter, which
    rules out comments, processing instructions and declarations. Comment
    tokens are expected to be consumed already.
    """
    if state.in_comment:
        return False
    open_tag_index = content.find("<")
    return (open_tag_index > -1
            and len(content) > open_tag_index + 1
            and content[open_tag_index + 1].isalpha())


def _comment_token(line: str, token: str, in_comment_if_present: bool,
                   state: ScanState) -> int:
    # Index just past the token, or -1 when absent.
    index = line.find(token)
    if index == -1:
        return -1
    state.in_comment = in_comment_if_present
    return index + len(token)


def _consume(line: str, state: ScanState) -> Optional[str]:
    """Consume the next comment token and return what follows it."""
    if state.in_comment:
        index = _comment_token(line, END_COMMENT, False, state)
    else:
        index = _comment_token(line, START_COMMENT, True, state)
    return None if index == -1 else line[index:]


def consume_comment_tokens(line: str, state: ScanState) -> Optional[str]:
    """
    Strip leading and trailing comment content from a line.

    Updates ``state.in_comment`` as comment markers are consumed.

    Args:
        line: One line of the document, terminator removed
        state: Scan state carried across lines

    Returns:
        The live content of the line, which may be empty, or None when
        nothing meaningful remains. Note that ``text <!-- open`` with no
        closing marker on the same line returns None, dropping ``text``.
    """
    start_index = line.find(START_COMMENT)
    if start_index == -1 and END_COMMENT not in line:
        return line

    result = ""
    current = line
    if start_index >= 0:
        result = line[:start_index]
        current = line[start_index:]

    while True:
        current = _consume(current, state)
        if current is None:
            return None
        if not state.in_comment and not current.lstrip(_LEADING_BLANKS).startswith(START_COMMENT):
            return result + current


class ValidationModeDetector:
    """
    Detects the validation mode of an XML document stream.

    Scan state is created per call, so one instance can serve any number of
    streams, including from several threads.

    Byte streams are decoded strictly with the configured encoding (UTF-8 by
    default); neither a byte order mark nor the XML declaration changes it.
    A document that does not decode, such as a latin-1 file with accented
    characters, gives AUTO even when it declares a DOCTYPE, leaving the
    choice of mode to the caller; ``XmlDefinitionReader`` then loads it
    with XSD validation.

    Example:
        detector = ValidationModeDetector()
        with open("beans.xml", "rb") as f:
            mode = detector.detect(f)
    """

    def __init__(self, encoding: str = DEFAULT_ENCODING):
        """
        Initialize detector.

        Args:
            encoding: Text encoding used to decode byte streams

        Raises:
            LookupError: If the encoding is unknown
        """
        codecs.lookup(encoding)
        self.encoding = encoding

    def detect(self, stream: IO) -> ValidationMode:
        """
        Detect the validation mode of the document in ``stream``.

        The stream is closed before this method returns, whatever the outcome.

        Args:
            stream: Binary stream (text streams are read as-is)

        Returns:
            DTD or XSD, or AUTO when the content cannot be decoded

        Raises:
            OSError: If the stream cannot be read
        """
        state = ScanState()
        with self._open_reader(stream) as reader:
            try:
                for raw_line in reader:
                    content = consume_comment_tokens(raw_line.rstrip("\r\n"), state)
                    if state.in_comment or not has_text(content):
                        continue
                    if has_doctype(content):
                        logger.debug("DOCTYPE declaration found, using DTD validation")
                        return ValidationMode.DTD
                    if has_opening_tag(content, state):
                        # End of meaningful data
                        break
                return ValidationMode.XSD
            except UnicodeDecodeError as e:
                # Leave the decision up to the caller
                logger.debug(f"Could not decode document as {self.encoding}: {e}")
                return ValidationMode.AUTO

    def detect_file(self, path: Union[str, Path]) -> ValidationMode:
        """Detect the validation mode of a file on disk."""
        mode = self.detect(open(path, "rb"))
        logger.debug(f"Detected {mode.name} validation for {path}")
        return mode

    def detect_bytes(self, data: bytes) -> ValidationMode:
        """Detect the validation mode of an in-memory document."""
        return self.detect(io.BytesIO(data))

    def _open_reader(self, stream: IO) -> IO:
        if isinstance(stream, io.TextIOBase):
            return stream
        try:
            return io.TextIOWrapper(stream, encoding=self.encoding, errors="strict")
        except Exception:
            stream.close()
            raise
