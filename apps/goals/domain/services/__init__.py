from apps.goals.domain.services.progress import calculate_progress, days_until, is_overdue, is_urgent
from apps.goals.domain.services.streak import StreakCalculator, calculate_streak, milestone_for
from apps.goals.domain.services.chart import build_chart_series, extract_window
from apps.goals.domain.services.summary import summarize_goal
