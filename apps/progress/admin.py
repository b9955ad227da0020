from django.contrib import admin
from .models import ProgressEntry

@admin.register(ProgressEntry)
class ProgressEntryAdmin(admin.ModelAdmin):
    list_display = ('goal', 'value', 'unit', 'recorded_at')
    list_filter = ('unit', 'recorded_at')
    search_fields = ('note', 'goal__description')
