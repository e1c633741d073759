"""
Streams media files to clients, honouring byte ranges.
"""
import logging
import os

from django.conf import settings
from django.http import StreamingHttpResponse
from rest_framework import status

from media_access.apps.catalog.exceptions import MediaFileNotFound

from .ranges import ByteSpan

logger = logging.getLogger(__name__)


class RangeFileIterator:
    """
    Iterates over the bytes ``[start, end]`` of an open binary file in chunks
    of at most ``chunk_size`` bytes.

    The file is closed once the span is exhausted, when iteration fails, and
    when ``close()`` is called.  Django calls ``close()`` on the response's
    streaming content when the response finishes, including when the client
    disconnects mid-stream.
    """

    def __init__(self, file_obj, start, end, chunk_size):
        self.file_obj = file_obj
        self.start = start
        self.end = end
        self.chunk_size = chunk_size

    def __iter__(self):
        try:
            self.file_obj.seek(self.start)
            remaining = self.end - self.start + 1
            while remaining > 0:
                data = self.file_obj.read(min(self.chunk_size, remaining))
                if not data:
                    break
                remaining -= len(data)
                yield data
        finally:
            self.close()

    def close(self):
        if not self.file_obj.closed:
            self.file_obj.close()


def media_file_size(asset_path):
    """
    Size in bytes of the media file at ``asset_path``.

    Raises:
        MediaFileNotFound: there is no regular file at ``asset_path``.
    """
    try:
        stat_result = os.stat(asset_path)
    except FileNotFoundError as exc:
        raise MediaFileNotFound('Media file not found') from exc
    if not os.path.isfile(asset_path):
        raise MediaFileNotFound('Media file not found')
    return stat_result.st_size


def respond(asset_path, span, has_range_header, mime_type, chunk_size=None):
    """
    Builds the streaming response for a media file.

    With a ``Range`` header the response is a 206 carrying exactly the bytes
    of ``span``; without one it is a 200 carrying the whole file.  The body
    is read from disk lazily, ``chunk_size`` bytes at a time.

    Args:
        asset_path: absolute path of the media file.
        span (ByteSpan): the span parsed from the request's ``Range`` header.
        has_range_header (bool): whether the request carried a ``Range`` header.
        mime_type (str): value of the ``Content-Type`` header.
        chunk_size (int): overrides ``settings.MEDIA_STREAM_CHUNK_SIZE``.

    Raises:
        MediaFileNotFound: the file does not exist.
    """
    chunk_size = chunk_size or settings.MEDIA_STREAM_CHUNK_SIZE
    if not has_range_header:
        span = ByteSpan.full(span.total_size)

    try:
        file_obj = open(asset_path, 'rb')  # pylint: disable=consider-using-with
    except FileNotFoundError as exc:
        raise MediaFileNotFound('Media file not found') from exc

    iterator = RangeFileIterator(file_obj, start=span.start, end=span.end, chunk_size=chunk_size)

    if has_range_header:
        response = StreamingHttpResponse(iterator, status=status.HTTP_206_PARTIAL_CONTENT, content_type=mime_type)
        response['Content-Range'] = span.content_range
        response['Accept-Ranges'] = 'bytes'
        response['Content-Length'] = span.content_length
    else:
        response = StreamingHttpResponse(iterator, status=status.HTTP_200_OK, content_type=mime_type)
        response['Content-Length'] = span.total_size

    logger.debug('Streaming %s bytes %s-%s of %s', asset_path, span.start, span.end, span.total_size)
    return response
