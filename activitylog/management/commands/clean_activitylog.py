"""
Management command to delete old activity log records.
"""

from datetime import timedelta

from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from activitylog.services import config


class Command(BaseCommand):
    help = 'Delete activity log records older than the configured number of days'

    def add_arguments(self, parser):
        parser.add_argument(
            'log_name',
            nargs='?',
            default=None,
            help='Only clean records of this log',
        )
        parser.add_argument(
            '--days',
            type=int,
            default=None,
            help='Delete records older than this many days (default: DELETE_RECORDS_OLDER_THAN_DAYS)',
        )
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show how many records would be deleted without deleting them',
        )

    def handle(self, *args, **options):
        days = options['days']
        if days is None:
            days = config.get_delete_records_older_than_days()
        if days < 0:
            raise CommandError('--days must be zero or positive')

        log_name = options['log_name']
        dry_run = options['dry_run']
        cutoff = timezone.now() - timedelta(days=days)

        self.stdout.write('Cleaning activity log...')

        activities = config.get_activity_model().objects.filter(created_at__lt=cutoff)
        if log_name:
            activities = activities.filter(log_name=log_name)

        total_count = activities.count()

        if dry_run:
            self.stdout.write(self.style.WARNING(
                f'DRY RUN: Would have deleted {total_count} record(s) older than {days} days. '
                f'Run without --dry-run to apply changes.'
            ))
            return

        activities.delete()
        self.stdout.write(self.style.SUCCESS(
            f'Deleted {total_count} record(s) from the activity log.'
        ))
