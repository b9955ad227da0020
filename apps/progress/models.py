# apps/progress/models.py
from django.core.validators import MaxValueValidator
from django.db import models
from django.utils import timezone

MAX_PROGRESS_VALUE = 10000


class ProgressEntry(models.Model):
    class Unit(models.TextChoices):
        KG = 'kg', 'kg'
        LBS = 'lbs', 'lbs'
        KM = 'km', 'km'
        MILES = 'miles', 'miles'
        REPS = 'reps', 'reps'
        MINUTES = 'minutes', 'minutes'
        HOURS = 'hours', 'hours'
        PERCENT = '%', '%'
        DAYS = 'days', 'days'
        TIMES = 'times', 'times'

    goal = models.ForeignKey('goals.Goal', on_delete=models.CASCADE, related_name='entries')
    value = models.FloatField(validators=[MaxValueValidator(MAX_PROGRESS_VALUE)])
    unit = models.CharField(max_length=20, choices=Unit.choices)
    note = models.CharField(max_length=140, blank=True)

    # Można wpisać wstecz (np. trening z wczoraj)
    recorded_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['-recorded_at']
        verbose_name_plural = 'progress entries'

    def __str__(self):
        return f"{self.goal_id}: {self.value:g}{self.unit}"
