from django.urls import path
from . import views

urlpatterns = [
    path('', views.goal_collection_view, name='goal_list'),
    path('<int:pk>/', views.goal_detail_view, name='goal_detail'),
    path('<int:pk>/streak/', views.goal_streak_view, name='goal_streak'),
    path('<int:pk>/chart/', views.goal_chart_view, name='goal_chart'),
]
