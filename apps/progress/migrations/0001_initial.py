import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('goals', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='ProgressEntry',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('value', models.FloatField(validators=[django.core.validators.MaxValueValidator(10000)])),
                ('unit', models.CharField(choices=[('kg', 'kg'), ('lbs', 'lbs'), ('km', 'km'), ('miles', 'miles'), ('reps', 'reps'), ('minutes', 'minutes'), ('hours', 'hours'), ('%', '%'), ('days', 'days'), ('times', 'times')], max_length=20)),
                ('note', models.CharField(blank=True, max_length=140)),
                ('recorded_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('goal', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='entries', to='goals.goal')),
            ],
            options={
                'verbose_name_plural': 'progress entries',
                'ordering': ['-recorded_at'],
            },
        ),
    ]
