"""
In-memory stand-ins for the Grant Store and Asset Catalog.

They implement the same methods as ``DjangoGrantStore`` and
``DjangoAssetCatalog`` and keep everything in dictionaries, so entitlement
logic can be tested without a database.
"""
import attr

from media_access.apps.catalog.exceptions import AssetNotFound, CourseNotFound
from media_access.apps.core.constants import AccessStates
from media_access.apps.grants.exceptions import DuplicateEnrollment


@attr.s
class FakeCourse:
    id = attr.ib()
    published = attr.ib(default=True)


@attr.s
class FakeAsset:
    id = attr.ib()
    kind = attr.ib()
    course = attr.ib()
    published = attr.ib(default=True)
    order = attr.ib(default=0)
    media_file = attr.ib(default='')

    @property
    def course_id(self):
        return self.course.id

    @property
    def is_playable(self):
        return self.published and self.course.published


@attr.s
class FakeGrant:
    user_id = attr.ib()
    asset_id = attr.ib()
    state = attr.ib(default=AccessStates.ACTIVE)
    granted_by_id = attr.ib(default=None)

    @property
    def is_active(self):
        return self.state == AccessStates.ACTIVE


class InMemoryAssetCatalog:
    """
    Asset catalog backed by dictionaries.
    """

    def __init__(self):
        self.courses = {}
        self.assets = {}

    def add_course(self, course_id, published=True):
        course = FakeCourse(id=course_id, published=published)
        self.courses[course_id] = course
        return course

    def add_asset(self, asset_kind, asset_id, course, published=True, order=0):
        asset = FakeAsset(id=asset_id, kind=asset_kind, course=course, published=published, order=order)
        self.assets[(asset_kind, asset_id)] = asset
        return asset

    def get_asset(self, asset_kind, asset_id):
        try:
            return self.assets[(asset_kind, asset_id)]
        except KeyError as exc:
            raise AssetNotFound(f'{asset_kind} {asset_id} not found') from exc

    def get_course(self, course_id):
        try:
            return self.courses[course_id]
        except KeyError as exc:
            raise CourseNotFound(f'Course {course_id} not found') from exc

    def is_playable(self, asset):
        return asset.is_playable

    def _playable(self, asset_kind):
        assets = [
            asset for (kind, _), asset in self.assets.items()
            if kind == asset_kind and asset.is_playable
        ]
        return sorted(assets, key=lambda asset: (asset.order, asset.id))

    def playable_assets_for_courses(self, asset_kind, course_ids):
        return [asset for asset in self._playable(asset_kind) if asset.course_id in course_ids]

    def playable_assets_by_ids(self, asset_kind, asset_ids):
        return [asset for asset in self._playable(asset_kind) if asset.id in asset_ids]


class InMemoryGrantStore:
    """
    Grant store backed by dictionaries.

    Asset ids listed in ``failing_asset_ids`` make ``ensure_direct_grant``
    raise ``failure_exception``, to exercise partial failure handling.
    """

    def __init__(self, failing_asset_ids=(), failure_exception=None):
        self.enrollments = set()
        self.grants = {}
        self.failing_asset_ids = set(failing_asset_ids)
        self.failure_exception = failure_exception

    def add_enrollment(self, user_id, course_id):
        self.enrollments.add((user_id, course_id))

    def add_grant(self, user_id, asset_kind, asset_id, state=AccessStates.ACTIVE):
        grant = FakeGrant(user_id=user_id, asset_id=asset_id, state=state)
        self.grants[(user_id, asset_kind, asset_id)] = grant
        return grant

    def has_active_direct_grant(self, user_id, asset_kind, asset_id):
        grant = self.grants.get((user_id, asset_kind, asset_id))
        return grant is not None and grant.is_active

    def has_enrollment(self, user_id, course_id):
        return (user_id, course_id) in self.enrollments

    def enrolled_course_ids(self, user_id):
        return [course_id for (enrolled_user_id, course_id) in self.enrollments if enrolled_user_id == user_id]

    def active_direct_grant_asset_ids(self, user_id, asset_kind):
        return [
            asset_id for (grant_user_id, kind, asset_id), grant in self.grants.items()
            if grant_user_id == user_id and kind == asset_kind and grant.is_active
        ]

    def get_direct_grant(self, user_id, asset_kind, asset_id):
        return self.grants.get((user_id, asset_kind, asset_id))

    def upsert_direct_grant(self, user_id, asset_kind, asset_id, granted_by_id=None):
        grant = self.grants.get((user_id, asset_kind, asset_id))
        if grant is None:
            grant = self.add_grant(user_id, asset_kind, asset_id)
            grant.granted_by_id = granted_by_id
            return grant, True
        grant.state = AccessStates.ACTIVE
        grant.granted_by_id = granted_by_id
        return grant, False

    def ensure_direct_grant(self, user_id, asset_kind, asset_id, granted_by_id=None):
        if asset_id in self.failing_asset_ids:
            raise self.failure_exception
        grant = self.grants.get((user_id, asset_kind, asset_id))
        if grant is not None:
            return grant, False
        grant = self.add_grant(user_id, asset_kind, asset_id)
        grant.granted_by_id = granted_by_id
        return grant, True

    def revoke_direct_grant(self, user_id, asset_kind, asset_id):
        grant = self.grants.get((user_id, asset_kind, asset_id))
        if grant is None or not grant.is_active:
            return None
        grant.state = AccessStates.REVOKED
        return grant

    def create_enrollment(self, user_id, course_id):
        if (user_id, course_id) in self.enrollments:
            raise DuplicateEnrollment('User is already enrolled in this course')
        self.enrollments.add((user_id, course_id))
        return (user_id, course_id)
