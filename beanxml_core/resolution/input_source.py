"""
Input Sources
=============

A byte stream tagged with the public and system identifiers it was
resolved from.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional, Union


@dataclass
class InputSource:
    """
    A single input for a document loader.

    Attributes:
        byte_stream: Open binary stream; the consumer owns and closes it
        public_id: Public identifier (optional)
        system_id: System identifier, usually a URL (optional)
    """
    byte_stream: Optional[BinaryIO] = None
    public_id: Optional[str] = None
    system_id: Optional[str] = None

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> 'InputSource':
        """Open a file and use its ``file://`` URI as system id."""
        path = Path(path)
        return cls(byte_stream=open(path, "rb"), system_id=path.resolve().as_uri())

    def read(self) -> bytes:
        """
        Read the whole stream and close it.

        Raises:
            ValueError: If the source has no byte stream
        """
        if self.byte_stream is None:
            raise ValueError(f"Input source has no byte stream: {self.system_id}")
        with self.byte_stream as stream:
            return stream.read()

    def close(self) -> None:
        if self.byte_stream is not None:
            self.byte_stream.close()
