import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Goal',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('category', models.CharField(choices=[('STRENGTH', 'Strength'), ('CARDIO', 'Cardio'), ('BODY', 'Body'), ('HABIT', 'Habit')], max_length=20)),
                ('description', models.CharField(max_length=200, validators=[django.core.validators.MinLengthValidator(10)])),
                ('target_value', models.FloatField()),
                ('target_unit', models.CharField(max_length=20)),
                ('target_date', models.DateField()),
                ('cadence', models.CharField(choices=[('daily', 'Daily'), ('3x-week', '3x per week'), ('5x-week', '5x per week'), ('weekly', 'Weekly')], default='daily', max_length=20)),
                ('status', models.CharField(choices=[('ACTIVE', 'Active'), ('COMPLETED', 'Completed'), ('PAUSED', 'Paused')], default='ACTIVE', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='goals', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-created_at'],
            },
        ),
    ]
