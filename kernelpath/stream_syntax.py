"""Recognition of alternate data stream syntax (`file:stream:$TYPE`)."""

from dataclasses import dataclass

STREAM_SEPARATOR = ":"
STREAM_TYPE_MARKER = "$"


@dataclass(frozen=True)
class StreamSyntax:
    """A component split into file name, stream name and optional stream type."""

    file_name: str
    stream_name: str
    stream_type: str | None = None


def parse_stream_suffix(component: str) -> StreamSyntax | None:
    """Split `name:stream[:$TYPE]`, or return None if it is not stream syntax.

    Only syntax is checked. `name::$DATA` (the unnamed stream) is accepted;
    `name:` is not.
    """
    file_name, sep, rest = component.partition(STREAM_SEPARATOR)
    if not sep:
        return None
    stream_name, sep, stream_type = rest.partition(STREAM_SEPARATOR)
    if not sep:
        return StreamSyntax(file_name, stream_name) if stream_name else None
    if not stream_type.startswith(STREAM_TYPE_MARKER):
        return None
    if STREAM_SEPARATOR in stream_type:
        return None
    return StreamSyntax(file_name, stream_name, stream_type)
