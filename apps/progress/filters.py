import django_filters
from django.utils import timezone
from apps.goals.domain.entities import TimeRange
from apps.goals.domain.services.chart import window_start
from .models import ProgressEntry


class ProgressEntryFilter(django_filters.FilterSet):
    goal = django_filters.NumberFilter(field_name='goal_id')
    time_range = django_filters.ChoiceFilter(
        choices=[(r.value, r.value) for r in TimeRange],
        method='filter_time_range',
    )

    class Meta:
        model = ProgressEntry
        fields = ['goal', 'unit']

    def filter_time_range(self, queryset, name, value):
        start = window_start(value, timezone.now())
        if start is None:
            return queryset
        return queryset.filter(recorded_at__gte=start)
