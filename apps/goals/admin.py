from django.contrib import admin
from .models import Goal

@admin.register(Goal)
class GoalAdmin(admin.ModelAdmin):
    list_display = ('description', 'user', 'category', 'target_value', 'target_unit', 'target_date', 'cadence', 'status')
    list_filter = ('category', 'status', 'cadence')
    search_fields = ('description',)
