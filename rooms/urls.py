from django.urls import path
from .views import RoomCodeView, RoomCreateView, RoomJoinView, RoomLeaveView, RoomMemberView

urlpatterns = [
    path("", RoomCreateView.as_view()),
    path("join/", RoomJoinView.as_view()),
    path("leave/", RoomLeaveView.as_view()),
    path("code/", RoomCodeView.as_view()),
    path("members/<uuid:user_id>/", RoomMemberView.as_view()),
]
