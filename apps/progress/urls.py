from django.urls import path
from . import views

urlpatterns = [
    path('', views.progress_collection_view, name='progress_list'),
    path('<int:pk>/', views.progress_detail_view, name='progress_detail'),
]
