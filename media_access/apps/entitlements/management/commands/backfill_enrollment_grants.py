"""
Management command to create missing direct video grants for existing course enrollments.
"""
import logging

from django.core.management.base import BaseCommand
from django.core.paginator import Paginator

from media_access.apps.catalog.constants import AssetKind
from media_access.apps.entitlements.api import create_enrollment_grants, get_asset_catalog, get_grant_store
from media_access.apps.grants.models import CourseEnrollment

logger = logging.getLogger(__name__)

ENROLLMENT_PAGE_SIZE = 100


class Command(BaseCommand):
    """
    Re-runs the enrollment grant fan-out for existing enrollments, so videos
    published after a user enrolled become directly granted too.
    Grant rows that already exist, including revoked ones, are never changed.
    """
    help = 'Create a direct video grant for every playable video of every enrolled course that lacks one.'

    def add_arguments(self, parser):
        """
        Entry point to add arguments.
        """
        parser.add_argument(
            '--course-id',
            type=int,
            dest='course_id',
            default=None,
            help='Only backfill enrollments in this course.',
        )
        parser.add_argument(
            '--dry-run',
            action='store_true',
            dest='dry_run',
            default=False,
            help='Dry Run, log the grants that would be created without writing them.',
        )

    def handle(self, *args, **options):
        course_id = options['course_id']
        dry_run = options['dry_run']

        grant_store = get_grant_store()
        asset_catalog = get_asset_catalog()

        enrollments = CourseEnrollment.objects.order_by('id')
        if course_id is not None:
            enrollments = enrollments.filter(course_id=course_id)

        created_count = 0
        errored_count = 0
        paginator = Paginator(enrollments, ENROLLMENT_PAGE_SIZE)
        for page_number in paginator.page_range:
            for enrollment in paginator.page(page_number):
                if dry_run:
                    missing = [
                        video.id
                        for video in asset_catalog.playable_assets_for_courses(AssetKind.VIDEO, [enrollment.course_id])
                        if grant_store.get_direct_grant(enrollment.user_id, AssetKind.VIDEO, video.id) is None
                    ]
                    logger.info(
                        '[BACKFILL_ENROLLMENT_GRANTS] dry run, would grant videos %s to user %s in course %s',
                        missing, enrollment.user_id, enrollment.course_id,
                    )
                    created_count += len(missing)
                    continue

                result = create_enrollment_grants(
                    enrollment.user_id,
                    enrollment.course_id,
                    grant_store=grant_store,
                    asset_catalog=asset_catalog,
                )
                created_count += len(result.created)
                errored_count += len(result.errored)

        logger.info(
            '[BACKFILL_ENROLLMENT_GRANTS] Done. created=%s, errored=%s, dry_run=%s',
            created_count, errored_count, dry_run,
        )
