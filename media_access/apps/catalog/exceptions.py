"""
Exceptions that can be raised by the ``catalog`` app.
"""


class CatalogException(Exception):
    """
    Base exception class for the ``catalog`` app.
    """


class AssetNotFound(CatalogException):
    """
    Raised when a requested video or audio does not exist.
    """


class CourseNotFound(CatalogException):
    """
    Raised when a requested course does not exist.
    """


class MediaFileNotFound(CatalogException):
    """
    Raised when an asset's media file is missing from the backing store,
    or when its recorded path points outside of the uploads root.
    """
