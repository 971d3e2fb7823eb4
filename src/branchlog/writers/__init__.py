"""
Writers and the writer registry.

- registry: WriterRegistry with ordered, per-writer gated fan-out
- simple: SimpleWriter for text streams
- rich: RichWriter for colourised terminal output
- recording: RecordingWriter that keeps entries in memory
"""

from .recording import RecordingWriter
from .registry import RegisteredWriter, Writer, WriterRegistry
from .rich import RichWriter
from .simple import SimpleWriter

__all__ = [
    "Writer",
    "RegisteredWriter",
    "WriterRegistry",
    "SimpleWriter",
    "RichWriter",
    "RecordingWriter",
]
