# apps/goals/models.py
from django.conf import settings
from django.core.validators import MinLengthValidator
from django.db import models

from apps.goals.domain.entities import Cadence, GoalCategory, GoalStatus


class Goal(models.Model):
    class Category(models.TextChoices):
        STRENGTH = GoalCategory.STRENGTH.value, 'Strength'
        CARDIO = GoalCategory.CARDIO.value, 'Cardio'
        BODY = GoalCategory.BODY.value, 'Body'
        HABIT = GoalCategory.HABIT.value, 'Habit'

    class Status(models.TextChoices):
        ACTIVE = GoalStatus.ACTIVE.value, 'Active'
        COMPLETED = GoalStatus.COMPLETED.value, 'Completed'
        PAUSED = GoalStatus.PAUSED.value, 'Paused'

    class CadenceChoices(models.TextChoices):
        DAILY = Cadence.DAILY.value, 'Daily'
        THREE_PER_WEEK = Cadence.THREE_PER_WEEK.value, '3x per week'
        FIVE_PER_WEEK = Cadence.FIVE_PER_WEEK.value, '5x per week'
        WEEKLY = Cadence.WEEKLY.value, 'Weekly'

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='goals')
    category = models.CharField(max_length=20, choices=Category.choices)
    description = models.CharField(max_length=200, validators=[MinLengthValidator(10)])

    # Cel liczbowy trzymamy w osobnych polach (a nie w opisie)
    target_value = models.FloatField()
    target_unit = models.CharField(max_length=20)
    target_date = models.DateField()

    cadence = models.CharField(max_length=20, choices=CadenceChoices.choices, default=CadenceChoices.DAILY)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.ACTIVE)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return self.description
