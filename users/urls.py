from django.urls import path
from .views import CurrentUserView, UserCreateView

urlpatterns = [
    path("", UserCreateView.as_view()),
    path("me/", CurrentUserView.as_view()),
]
