from django.contrib import admin

from activitylog.models import Activity


@admin.register(Activity)
class ActivityAdmin(admin.ModelAdmin):
    list_display = ['created_at', 'log_name', 'event', 'description', 'subject_type', 'subject_id', 'causer_type', 'causer_id']
    list_filter = ['log_name', 'event', 'created_at']
    search_fields = ['description', 'log_name', 'event', 'batch_uuid']
    readonly_fields = [
        'log_name', 'description', 'event',
        'subject_type', 'subject_id', 'causer_type', 'causer_id',
        'properties', 'batch_uuid', 'created_at', 'updated_at',
    ]
    date_hierarchy = 'created_at'
    
    def has_add_permission(self, request):
        # Activities are created by the system via ActivityLogger, not manually
        return False
    
    def has_change_permission(self, request, obj=None):
        return False
