from django.urls import path
from .views.user_views import MeView

urlpatterns = [
    path("me", MeView.as_view()),
]
