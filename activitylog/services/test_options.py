"""
Tests for ActivityLogOptions
"""

from django.test import SimpleTestCase

from activitylog.services import ActivityLogOptions


class ActivityLogOptionsTestCase(SimpleTestCase):
    """Test the options builder."""

    def test_defaults(self):
        """Test default values."""
        options = ActivityLogOptions.defaults()

        self.assertIsNone(options.log_name)
        self.assertTrue(options.submit_empty_logs)
        self.assertFalse(options.log_fillable)
        self.assertFalse(options.log_only_dirty)
        self.assertFalse(options.log_unguarded)
        self.assertEqual(options.log_attributes, [])
        self.assertEqual(options.log_except_attributes, [])
        self.assertEqual(options.dont_log_if_attributes_changed_bag, [])
        self.assertIsNone(options.description_for_event)

    def test_builders_chain(self):
        """Test that every builder returns the options object."""
        options = (
            ActivityLogOptions.defaults()
            .log_only(['name', 'text'])
            .log_except(['password'])
            .log_fillable_attributes()
            .log_only_dirty_attributes()
            .log_unguarded_attributes()
            .dont_log_if_attributes_changed_only(['updated_at'])
            .dont_submit_empty_logs()
            .use_log_name('articles')
        )

        self.assertEqual(options.log_attributes, ['name', 'text'])
        self.assertEqual(options.log_except_attributes, ['password'])
        self.assertTrue(options.log_fillable)
        self.assertTrue(options.log_only_dirty)
        self.assertTrue(options.log_unguarded)
        self.assertEqual(options.dont_log_if_attributes_changed_bag, ['updated_at'])
        self.assertFalse(options.submit_empty_logs)
        self.assertEqual(options.log_name, 'articles')

    def test_log_all(self):
        """Test that log_all() logs every attribute."""
        self.assertEqual(ActivityLogOptions().log_all().log_attributes, ['*'])

    def test_dont_log_fillable(self):
        """Test switching fillable logging off again."""
        options = ActivityLogOptions().log_fillable_attributes().dont_log_fillable()

        self.assertFalse(options.log_fillable)

    def test_description_for_event(self):
        """Test evaluating the description template."""
        options = ActivityLogOptions().set_description_for_event(
            lambda event_name: f'This model has been {event_name}'
        )

        self.assertEqual(options.description_for('created'), 'This model has been created')

    def test_description_for_without_template(self):
        """Test that no template yields None."""
        self.assertIsNone(ActivityLogOptions().description_for('created'))

    def test_instances_do_not_share_lists(self):
        """Test that list defaults are per instance."""
        first = ActivityLogOptions()
        first.log_attributes.append('name')

        self.assertEqual(ActivityLogOptions().log_attributes, [])
