from dateutil.relativedelta import relativedelta
from django import forms
from django.utils import timezone
from .models import Goal


class GoalForm(forms.ModelForm):
    class Meta:
        model = Goal
        fields = ['category', 'description', 'target_value', 'target_unit', 'target_date', 'cadence', 'status']

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Status przy tworzeniu jest opcjonalny (domyślnie ACTIVE)
        self.fields['status'].required = False

    def clean_description(self):
        description = (self.cleaned_data.get('description') or '').strip()
        if len(description) < 10:
            raise forms.ValidationError('Goal description must be at least 10 characters')
        return description

    def clean_target_value(self):
        value = self.cleaned_data.get('target_value')
        if value is not None and value <= 0:
            raise forms.ValidationError('Target value must be positive')
        return value

    def clean_target_date(self):
        target_date = self.cleaned_data.get('target_date')

        # Przy edycji nie sprawdzamy daty, której nikt nie zmienił
        if self.instance.pk and 'target_date' not in self.changed_data:
            return target_date

        today = timezone.localdate()
        if target_date <= today:
            raise forms.ValidationError('Target date must be in the future')
        if target_date > today + relativedelta(years=1):
            raise forms.ValidationError('Target date must be within one year')
        return target_date

    def clean_status(self):
        return self.cleaned_data.get('status') or self.instance.status or Goal.Status.ACTIVE
