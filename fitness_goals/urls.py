# fitness_goals/urls.py
from django.contrib import admin
from django.urls import path, include


urlpatterns = [
    path('admin/', admin.site.urls),
    path('', include('apps.core.urls')),  # Pulpit + health
    path('goals/', include('apps.goals.urls')),
    path('progress/', include('apps.progress.urls')),
]
