"""
Value objects returned by the entitlements api.
"""
import attr

from .constants import BatchItemStatus


@attr.s(frozen=True)
class AccessibleAsset:
    """
    An asset a user can reach, tagged with how they reach it.
    """
    asset = attr.ib()
    access_type = attr.ib(type=str)


@attr.s(frozen=True)
class ItemOutcome:
    """
    The outcome of one write within a batch operation.
    """
    item_id = attr.ib()
    status = attr.ib(type=str)
    error = attr.ib(type=str, default=None)


@attr.s
class BatchOperationResult:
    """
    Per-item outcomes of a best-effort batch of independent writes.

    A failed item never aborts the rest of the batch; it is recorded here
    so the caller can decide whether partial failure matters to it.
    """
    outcomes = attr.ib(factory=list)

    def record(self, item_id, status, error=None):
        self.outcomes.append(ItemOutcome(item_id=item_id, status=status, error=error))

    def _ids_with_status(self, status):
        return [outcome.item_id for outcome in self.outcomes if outcome.status == status]

    @property
    def created(self):
        return self._ids_with_status(BatchItemStatus.CREATED)

    @property
    def existing(self):
        return self._ids_with_status(BatchItemStatus.EXISTING)

    @property
    def errored(self):
        return self._ids_with_status(BatchItemStatus.ERRORED)

    @property
    def has_errors(self):
        return bool(self.errored)

    def to_dict(self):
        return {
            'created': self.created,
            'existing': self.existing,
            'errored': [
                {'id': outcome.item_id, 'error': outcome.error}
                for outcome in self.outcomes
                if outcome.status == BatchItemStatus.ERRORED
            ],
        }
