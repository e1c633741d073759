"""
The Entitlement Resolver decides whether a user may play a video or audio.

A user reaches an asset through an active direct grant on the asset, or
through an enrollment in the asset's course; the first match wins.
"""
import logging

from .constants import AccessType
from .data import AccessibleAsset
from .exceptions import AccessDenied, AssetNotPublished

logger = logging.getLogger(__name__)


class EntitlementResolver:
    """
    Resolves entitlements against an injected grant store and asset catalog.

    ``grant_store`` provides ``has_active_direct_grant``, ``has_enrollment``,
    ``enrolled_course_ids`` and ``active_direct_grant_asset_ids``;
    ``asset_catalog`` provides ``get_asset``, ``is_playable``,
    ``playable_assets_for_courses`` and ``playable_assets_by_ids``.
    Errors raised by either are propagated unchanged, so a storage failure is
    never reported as a denial.
    """

    def __init__(self, grant_store, asset_catalog):
        self.grant_store = grant_store
        self.asset_catalog = asset_catalog

    def has_access(self, user_id, asset_kind, asset_id):
        """
        True if the user holds an active direct grant on the asset or is
        enrolled in the asset's course.

        Raises:
            AssetNotFound: the asset does not exist.
        """
        asset = self.asset_catalog.get_asset(asset_kind, asset_id)
        return self._has_access_to_asset(user_id, asset)

    def _has_access_to_asset(self, user_id, asset):
        if self.grant_store.has_active_direct_grant(user_id, asset.kind, asset.id):
            return True
        return self.grant_store.has_enrollment(user_id, asset.course_id)

    def accessible_assets(self, user_id, asset_kind):
        """
        Every playable asset of ``asset_kind`` the user can reach, one entry per asset.

        Enrollment-derived entries are listed first, course by course in
        display order. A direct grant on an asset that is already listed
        replaces that entry's tag with ``direct`` and keeps its position.

        Returns:
            list of ``AccessibleAsset``
        """
        merged = {}

        enrolled_course_ids = self.grant_store.enrolled_course_ids(user_id)
        if enrolled_course_ids:
            for asset in self.asset_catalog.playable_assets_for_courses(asset_kind, enrolled_course_ids):
                merged[asset.id] = AccessibleAsset(asset=asset, access_type=AccessType.ENROLLMENT)

        granted_ids = self.grant_store.active_direct_grant_asset_ids(user_id, asset_kind)
        if granted_ids:
            for asset in self.asset_catalog.playable_assets_by_ids(asset_kind, granted_ids):
                merged[asset.id] = AccessibleAsset(asset=asset, access_type=AccessType.DIRECT)

        return list(merged.values())

    def authorize_playback(self, user_id, asset_kind, asset_id):
        """
        Checks that the user may start playback of an asset right now.

        Returns:
            The asset.

        Raises:
            AssetNotFound: the asset does not exist.
            AccessDenied: the user holds no grant or enrollment covering the asset.
            AssetNotPublished: the user has access but the asset is not playable.
        """
        asset = self.asset_catalog.get_asset(asset_kind, asset_id)
        if not self._has_access_to_asset(user_id, asset):
            logger.warning('Denied playback of %s %s to user %s', asset_kind, asset_id, user_id)
            raise AccessDenied()
        if not self.asset_catalog.is_playable(asset):
            raise AssetNotPublished(f'This {asset_kind} is not published yet')
        return asset
