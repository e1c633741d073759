"""
Exceptions that can be raised by the ``streaming`` app.
"""


class StreamingException(Exception):
    """
    Base exception class for the ``streaming`` app.
    """


class RangeNotSatisfiable(StreamingException):
    """
    Raised when a ``Range`` header is malformed or selects no bytes of the file.
    """

    def __init__(self, total_size, message='Requested range not satisfiable'):
        super().__init__(message)
        self.total_size = total_size

    @property
    def content_range(self):
        """
        Value of the ``Content-Range`` header sent with a 416 response.
        """
        return f'bytes */{self.total_size}'
