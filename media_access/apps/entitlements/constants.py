""" Constants for the entitlements app. """


class AccessType:
    """
    How a user reaches an asset listed in their accessible media.
    """
    ENROLLMENT = 'enrollment'
    DIRECT = 'direct'


class BatchItemStatus:
    """
    Outcome of one write in a batch operation.
    """
    CREATED = 'created'
    EXISTING = 'existing'
    ERRORED = 'errored'
