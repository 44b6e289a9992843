"""
Tests for the clean_activitylog management command.
"""

from datetime import timedelta
from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase, override_settings
from django.utils import timezone

from activitylog.models import Activity
from activitylog.services import ActivityBatch, ActivityLogger, LogStatus


class CleanActivitylogCommandTestCase(TestCase):
    """Test deleting old activity records."""

    def setUp(self):
        """Set up test data."""
        self.logger = ActivityLogger(log_status=LogStatus(enabled=True), batch=ActivityBatch())
        now = timezone.now()
        self.logger.created_at(now - timedelta(days=400)).use_log('default').log('very old')
        self.logger.created_at(now - timedelta(days=40)).use_log('default').log('old')
        self.logger.created_at(now - timedelta(days=40)).use_log('orders').log('old order')
        self.logger.created_at(now).log('new')

    def test_uses_configured_days(self):
        """Test the default retention from settings (365 days)."""
        out = StringIO()

        call_command('clean_activitylog', stdout=out)

        self.assertEqual(Activity.objects.count(), 3)
        self.assertFalse(Activity.objects.filter(description='very old').exists())
        self.assertIn('Deleted 1 record(s)', out.getvalue())

    @override_settings(ACTIVITYLOG={'DELETE_RECORDS_OLDER_THAN_DAYS': 30})
    def test_setting_controls_retention(self):
        """Test DELETE_RECORDS_OLDER_THAN_DAYS."""
        call_command('clean_activitylog', stdout=StringIO())

        self.assertEqual(list(Activity.objects.values_list('description', flat=True)), ['new'])

    def test_days_option(self):
        """Test --days overrides the setting."""
        call_command('clean_activitylog', '--days', '30', stdout=StringIO())

        self.assertEqual(Activity.objects.count(), 1)

    def test_log_name_argument(self):
        """Test restricting the clean-up to one log."""
        call_command('clean_activitylog', 'orders', '--days', '30', stdout=StringIO())

        self.assertFalse(Activity.objects.filter(log_name='orders').exists())
        self.assertEqual(Activity.objects.filter(log_name='default').count(), 3)

    def test_dry_run(self):
        """Test that --dry-run deletes nothing."""
        out = StringIO()

        call_command('clean_activitylog', '--days', '30', '--dry-run', stdout=out)

        self.assertEqual(Activity.objects.count(), 4)
        self.assertIn('Would have deleted 3 record(s)', out.getvalue())

    def test_negative_days_rejected(self):
        """Test invalid --days."""
        with self.assertRaises(CommandError):
            call_command('clean_activitylog', '--days', '-1', stdout=StringIO())
