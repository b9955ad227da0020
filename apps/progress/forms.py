from django import forms
from django.utils import timezone
from apps.goals.models import Goal
from .models import ProgressEntry, MAX_PROGRESS_VALUE


class ProgressEntryForm(forms.ModelForm):
    class Meta:
        model = ProgressEntry
        fields = ['goal', 'value', 'unit', 'note', 'recorded_at']

    def __init__(self, user, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Wpisy tylko do własnych celów
        self.fields['goal'].queryset = Goal.objects.filter(user=user)
        self.fields['goal'].error_messages['invalid_choice'] = 'Goal not found'
        self.fields['recorded_at'].required = False

    def clean_value(self):
        value = self.cleaned_data.get('value')
        if value is None:
            return value
        if value <= 0:
            raise forms.ValidationError('Progress value must be positive')
        if value > MAX_PROGRESS_VALUE:
            raise forms.ValidationError('Progress value is too large')
        return value

    def clean_recorded_at(self):
        # Brak daty = teraz; data wstecz jest dozwolona
        return self.cleaned_data.get('recorded_at') or self.instance.recorded_at or timezone.now()

    def clean(self):
        cleaned_data = super().clean()
        goal = cleaned_data.get('goal')
        unit = cleaned_data.get('unit')

        # Postęp liczymy bez przeliczania jednostek, więc muszą się zgadzać.
        # Cel z jednostką spoza listy (np. "sessions") przyjmuje dowolną.
        if goal and unit and goal.target_unit in ProgressEntry.Unit.values and unit != goal.target_unit:
            self.add_error('unit', f"Unit must match the goal's target unit ({goal.target_unit})")
        return cleaned_data
