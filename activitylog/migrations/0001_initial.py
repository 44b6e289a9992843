import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('contenttypes', '0002_remove_content_type_name'),
    ]

    operations = [
        migrations.CreateModel(
            name='Activity',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('log_name', models.CharField(blank=True, db_index=True, max_length=255, null=True)),
                ('description', models.TextField()),
                ('subject_id', models.CharField(blank=True, max_length=255, null=True)),
                ('event', models.CharField(blank=True, max_length=255, null=True)),
                ('causer_id', models.CharField(blank=True, max_length=255, null=True)),
                ('properties', models.JSONField(blank=True, default=dict)),
                ('batch_uuid', models.UUIDField(blank=True, db_index=True, null=True)),
                ('created_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('causer_type', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='+', to='contenttypes.contenttype')),
                ('subject_type', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='+', to='contenttypes.contenttype')),
            ],
            options={
                'verbose_name_plural': 'Activities',
                'db_table': 'activity_log',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['subject_type', 'subject_id'], name='activity_log_subject_idx'),
                    models.Index(fields=['causer_type', 'causer_id'], name='activity_log_causer_idx'),
                ],
            },
        ),
    ]
