"""
Parsing of HTTP ``Range`` request headers into byte spans.

Only single ranges of the ``bytes=<start>-<end>`` form are supported.  For a
multi-range header only the first range is honoured, and suffix ranges
(``bytes=-500``) are rejected because they carry no start offset.
"""
import re

import attr

from .exceptions import RangeNotSatisfiable

RANGE_UNIT = 'bytes'
OFFSET_PATTERN = re.compile(r'[0-9]+')


@attr.s(frozen=True)
class ByteSpan:
    """
    An inclusive span ``[start, end]`` of a file of ``total_size`` bytes.

    ``is_partial`` is False only for the whole-file span used when the
    request carried no ``Range`` header.
    """
    start = attr.ib(type=int)
    end = attr.ib(type=int)
    total_size = attr.ib(type=int)
    is_partial = attr.ib(type=bool, default=False)

    @property
    def content_length(self):
        return self.end - self.start + 1

    @property
    def content_range(self):
        return f'{RANGE_UNIT} {self.start}-{self.end}/{self.total_size}'

    @classmethod
    def full(cls, total_size):
        return cls(start=0, end=total_size - 1, total_size=total_size, is_partial=False)


def parse_range(header, total_size):
    """
    Parses a ``Range`` header against a file of ``total_size`` bytes.

    Args:
        header (str): the raw header value, or None when the request had none.
        total_size (int): size of the file in bytes.

    Returns:
        ByteSpan: the whole file when ``header`` is absent or blank, else the
        requested span with its end clamped to the last byte of the file.

    Raises:
        RangeNotSatisfiable: the header is malformed, has no start offset,
        starts at or past the end of the file, or ends before it starts.
    """
    if header is None or not header.strip():
        return ByteSpan.full(total_size)

    unit, separator, ranges = header.strip().partition('=')
    if not separator or unit.strip().lower() != RANGE_UNIT:
        raise RangeNotSatisfiable(total_size, f'Unsupported range header {header!r}')

    first_range = ranges.split(',')[0].strip()
    start_text, dash, end_text = first_range.partition('-')
    start_text, end_text = start_text.strip(), end_text.strip()
    if not dash or not OFFSET_PATTERN.fullmatch(start_text):
        raise RangeNotSatisfiable(total_size, f'Malformed range header {header!r}')

    start = int(start_text)
    last_byte = total_size - 1
    # An omitted or unparsable end means "to the end of the file".
    end = int(end_text) if OFFSET_PATTERN.fullmatch(end_text) else last_byte
    end = min(end, last_byte)

    if start >= total_size or start > end:
        raise RangeNotSatisfiable(total_size)

    return ByteSpan(start=start, end=end, total_size=total_size, is_partial=True)
