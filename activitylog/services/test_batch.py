"""
Tests for ActivityBatch and LogStatus
"""

import uuid

from django.test import SimpleTestCase, override_settings

from activitylog.services import ActivityBatch, LogStatus


class ActivityBatchTestCase(SimpleTestCase):
    """Test batch UUID lifecycle."""

    def setUp(self):
        """Set up test fixtures."""
        self.batch = ActivityBatch()

    def test_no_uuid_outside_batch(self):
        """Test that get_uuid() returns None when no batch is open."""
        self.assertFalse(self.batch.is_open())
        self.assertIsNone(self.batch.get_uuid())

    def test_uuid_is_stable_within_batch(self):
        """Test that the UUID is reused for the whole batch."""
        self.batch.start_batch()

        first = self.batch.get_uuid()
        second = self.batch.get_uuid()

        self.assertIsInstance(first, uuid.UUID)
        self.assertEqual(first, second)

    def test_end_batch_clears_uuid(self):
        """Test that ending the batch drops its UUID."""
        self.batch.start_batch()
        inside = self.batch.get_uuid()
        self.batch.end_batch()

        self.assertFalse(self.batch.is_open())
        self.assertIsNone(self.batch.get_uuid())

        self.batch.start_batch()
        self.assertNotEqual(self.batch.get_uuid(), inside)

    def test_nested_batches_share_uuid(self):
        """Test that inner batches reuse the outer UUID."""
        self.batch.start_batch()
        outer = self.batch.get_uuid()

        self.batch.start_batch()
        self.assertEqual(self.batch.get_uuid(), outer)
        self.batch.end_batch()

        self.assertTrue(self.batch.is_open())
        self.assertEqual(self.batch.get_uuid(), outer)

        self.batch.end_batch()
        self.assertFalse(self.batch.is_open())

    def test_end_batch_without_start_is_harmless(self):
        """Test that extra end_batch() calls do not go negative."""
        self.batch.end_batch()
        self.batch.start_batch()

        self.assertTrue(self.batch.is_open())

    def test_context_manager_yields_uuid_and_closes(self):
        """Test the batch() context manager."""
        with self.batch.batch() as batch_uuid:
            self.assertEqual(self.batch.get_uuid(), batch_uuid)

        self.assertFalse(self.batch.is_open())

    def test_context_manager_closes_on_error(self):
        """Test that the batch ends when the block raises."""
        with self.assertRaises(RuntimeError):
            with self.batch.batch():
                raise RuntimeError('boom')

        self.assertFalse(self.batch.is_open())

    def test_within_batch_passes_uuid_and_returns_result(self):
        """Test within_batch()."""
        seen = []

        result = self.batch.within_batch(lambda batch_uuid: seen.append(batch_uuid) or 'done')

        self.assertEqual(result, 'done')
        self.assertIsInstance(seen[0], uuid.UUID)
        self.assertFalse(self.batch.is_open())

    def test_set_uuid_continues_batch(self):
        """Test continuing a known batch UUID."""
        known = uuid.uuid4()

        self.batch.set_uuid(known)

        self.assertTrue(self.batch.is_open())
        self.assertEqual(self.batch.get_uuid(), known)


class LogStatusTestCase(SimpleTestCase):
    """Test the enabled switch."""

    def test_enable_disable(self):
        """Test toggling the status."""
        status = LogStatus(enabled=True)

        status.disable()
        self.assertTrue(status.disabled())
        self.assertFalse(status.enabled())

        status.enable()
        self.assertFalse(status.disabled())
        self.assertTrue(status.enabled())

    def test_default_reads_settings(self):
        """Test that the initial state comes from ACTIVITYLOG['ENABLED']."""
        with override_settings(ACTIVITYLOG={'ENABLED': False}):
            self.assertTrue(LogStatus().disabled())

        with override_settings(ACTIVITYLOG={}):
            self.assertFalse(LogStatus().disabled())

    def test_explicit_value_ignores_settings(self):
        """Test that an explicit initial value wins."""
        with override_settings(ACTIVITYLOG={'ENABLED': False}):
            self.assertFalse(LogStatus(enabled=True).disabled())
