import json
from datetime import timedelta

from django.contrib.auth.models import User
from django.test import TestCase, override_settings
from django.urls import reverse
from django.utils import timezone

from apps.goals.models import Goal
from apps.progress.models import ProgressEntry


def goal_payload(**overrides):
    payload = {
        'category': 'STRENGTH',
        'description': 'Bench press 100kg for 5 reps',
        'target_value': 100,
        'target_unit': 'kg',
        'target_date': (timezone.localdate() + timedelta(days=60)).isoformat(),
        'cadence': 'daily',
    }
    payload.update(overrides)
    return payload


class GoalApiTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(username="athlete", password="password")
        self.other = User.objects.create_user(username="other", password="password")
        self.client.force_login(self.user)

    def _create_goal(self, user=None, **overrides):
        data = goal_payload(**overrides)
        if 'target_date' not in overrides:
            data['target_date'] = timezone.localdate() + timedelta(days=60)
        return Goal.objects.create(user=user or self.user, **data)

    def _post(self, payload):
        return self.client.post(reverse('goal_list'), data=json.dumps(payload), content_type='application/json')

    def _put(self, goal, payload):
        return self.client.put(
            reverse('goal_detail', args=[goal.pk]), data=json.dumps(payload), content_type='application/json'
        )

    def test_requires_login(self):
        self.client.logout()

        response = self.client.get(reverse('goal_list'))
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {'error': 'Unauthorized'})

        response = self._post(goal_payload())
        self.assertEqual(response.status_code, 401)
        self.assertFalse(Goal.objects.exists())

    def test_create_goal(self):
        response = self._post(goal_payload())

        self.assertEqual(response.status_code, 201)
        goal = response.json()['goal']
        self.assertEqual(goal['status'], 'ACTIVE')
        self.assertEqual(goal['progressPercentage'], 0)
        self.assertEqual(goal['lastEntry'], 'No entries yet')
        self.assertFalse(goal['urgent'])
        self.assertEqual(Goal.objects.get(pk=goal['id']).user, self.user)

    def test_create_strips_description(self):
        response = self._post(goal_payload(description='   Run 5K in under 30 minutes   '))
        self.assertEqual(response.json()['goal']['description'], 'Run 5K in under 30 minutes')

    def test_short_description_is_rejected(self):
        response = self._post(goal_payload(description='Too short'))

        self.assertEqual(response.status_code, 400)
        self.assertIn('description', response.json()['details'])

    def test_target_date_must_be_in_future(self):
        response = self._post(goal_payload(target_date=timezone.localdate().isoformat()))

        self.assertEqual(response.status_code, 400)
        self.assertIn('target_date', response.json()['details'])

    def test_target_date_within_one_year(self):
        far = timezone.localdate() + timedelta(days=400)
        response = self._post(goal_payload(target_date=far.isoformat()))

        self.assertEqual(response.status_code, 400)
        self.assertIn('target_date', response.json()['details'])

    def test_invalid_cadence_and_category(self):
        response = self._post(goal_payload(cadence='hourly', category='YOGA'))

        details = response.json()['details']
        self.assertEqual(response.status_code, 400)
        self.assertIn('cadence', details)
        self.assertIn('category', details)

    def test_target_value_must_be_positive(self):
        response = self._post(goal_payload(target_value=0))
        self.assertEqual(response.status_code, 400)
        self.assertIn('target_value', response.json()['details'])

    def test_malformed_json(self):
        response = self.client.post(reverse('goal_list'), data='{not json', content_type='application/json')
        self.assertEqual(response.status_code, 400)

    @override_settings(MAX_ACTIVE_GOALS=2)
    def test_active_goal_limit(self):
        self._create_goal()
        self._create_goal()

        response = self._post(goal_payload())

        self.assertEqual(response.status_code, 400)
        self.assertIn('maximum of 2 active goals', response.json()['error'])

        # Cel wstrzymany nie liczy się do limitu
        response = self._post(goal_payload(status='PAUSED'))
        self.assertEqual(response.status_code, 201)

    def test_list_only_own_goals(self):
        self._create_goal()
        self._create_goal(user=self.other)

        goals = self.client.get(reverse('goal_list')).json()['goals']
        self.assertEqual(len(goals), 1)

    def test_list_filter_by_status(self):
        self._create_goal()
        self._create_goal(status='COMPLETED')

        response = self.client.get(reverse('goal_list'), {'status': 'COMPLETED'})
        self.assertEqual([g['status'] for g in response.json()['goals']], ['COMPLETED'])

        response = self.client.get(reverse('goal_list'), {'status': 'DONE'})
        self.assertEqual(response.status_code, 400)

    def test_detail_includes_progress_and_streak(self):
        goal = self._create_goal()
        now = timezone.now()
        for days_ago, value in ((2, 60), (1, 70), (0, 80)):
            ProgressEntry.objects.create(goal=goal, value=value, unit='kg', recorded_at=now - timedelta(days=days_ago))

        data = self.client.get(reverse('goal_detail', args=[goal.pk])).json()['goal']

        self.assertEqual(data['currentValue'], 80)
        self.assertEqual(data['progressPercentage'], 80)
        self.assertEqual(data['lastEntry'], 'Today')
        self.assertEqual(data['streak']['current'], 3)
        self.assertEqual(data['streak']['longest'], 3)

    def test_foreign_goal_is_404(self):
        goal = self._create_goal(user=self.other)

        self.assertEqual(self.client.get(reverse('goal_detail', args=[goal.pk])).status_code, 404)
        self.assertEqual(self.client.get(reverse('goal_streak', args=[goal.pk])).status_code, 404)
        self.assertEqual(self.client.get(reverse('goal_chart', args=[goal.pk])).status_code, 404)

    def test_partial_update(self):
        goal = self._create_goal()

        response = self._put(goal, {'status': 'COMPLETED'})

        self.assertEqual(response.status_code, 200)
        goal.refresh_from_db()
        self.assertEqual(goal.status, 'COMPLETED')
        self.assertEqual(goal.description, 'Bench press 100kg for 5 reps')

    def test_update_keeps_past_target_date(self):
        # Stary cel z datą w przeszłości wciąż da się edytować
        goal = self._create_goal(target_date=timezone.localdate() - timedelta(days=3))

        response = self._put(goal, {'description': 'Bench press 110kg for 3 reps'})
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()['goal']['overdue'])

    def test_update_validates_changed_target_date(self):
        goal = self._create_goal()
        response = self._put(goal, {'target_date': (timezone.localdate() - timedelta(days=1)).isoformat()})
        self.assertEqual(response.status_code, 400)

    @override_settings(MAX_ACTIVE_GOALS=1)
    def test_reactivation_respects_limit(self):
        self._create_goal()
        paused = self._create_goal(status='PAUSED')

        response = self._put(paused, {'status': 'ACTIVE'})
        self.assertEqual(response.status_code, 400)

    def test_delete_cascades_entries(self):
        goal = self._create_goal()
        ProgressEntry.objects.create(goal=goal, value=50, unit='kg')

        response = self.client.delete(reverse('goal_detail', args=[goal.pk]))

        self.assertEqual(response.status_code, 200)
        self.assertFalse(Goal.objects.filter(pk=goal.pk).exists())
        self.assertEqual(ProgressEntry.objects.count(), 0)

    def test_streak_endpoint_with_milestone(self):
        goal = self._create_goal()
        now = timezone.now()
        for days_ago in range(7):
            ProgressEntry.objects.create(goal=goal, value=10, unit='kg', recorded_at=now - timedelta(days=days_ago))

        data = self.client.get(reverse('goal_streak', args=[goal.pk])).json()

        self.assertEqual(data['current'], 7)
        self.assertEqual(data['milestone']['days'], 7)

    def test_streak_endpoint_empty(self):
        goal = self._create_goal()
        data = self.client.get(reverse('goal_streak', args=[goal.pk])).json()
        self.assertEqual((data['current'], data['longest']), (0, 0))
        self.assertIsNone(data['milestone'])

    def test_chart_endpoint(self):
        goal = self._create_goal()
        now = timezone.now()
        for days_ago, value in ((40, 50), (10, 60), (2, 70)):
            ProgressEntry.objects.create(goal=goal, value=value, unit='kg', recorded_at=now - timedelta(days=days_ago))

        week = self.client.get(reverse('goal_chart', args=[goal.pk]), {'range': '7d'}).json()
        self.assertEqual(week['values'], [70])
        self.assertEqual(week['target'], 100)
        self.assertEqual(len(week['labels']), 1)

        quarter = self.client.get(reverse('goal_chart', args=[goal.pk]), {'range': '3m'}).json()
        self.assertEqual(quarter['values'], [50, 60, 70])

    def test_method_not_allowed(self):
        goal = self._create_goal()
        response = self.client.post(reverse('goal_chart', args=[goal.pk]))
        self.assertEqual(response.status_code, 405)
