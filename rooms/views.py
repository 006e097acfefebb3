from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from users.sessions import session_id_from_request
from .serializers import RoomJoinSerializer
from .services import (
    create_room,
    delete_user_from_room,
    join_room,
    leave_room,
    regenerate_room_code,
)


class RoomCreateView(APIView):
    def post(self, request):
        code = create_room(session_id_from_request(request))
        return Response({"code": code}, status=status.HTTP_201_CREATED)


class RoomJoinView(APIView):
    def post(self, request):
        s = RoomJoinSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        code = join_room(session_id_from_request(request), s.validated_data["code"])
        return Response({"code": code})


class RoomLeaveView(APIView):
    def post(self, request):
        leave_room(session_id_from_request(request))
        return Response(status=status.HTTP_204_NO_CONTENT)


class RoomCodeView(APIView):
    """Host only: replace the room's join code."""

    def post(self, request):
        code = regenerate_room_code(session_id_from_request(request))
        return Response({"code": code})


class RoomMemberView(APIView):
    """Host only: remove another member from the room."""

    def delete(self, request, user_id):
        delete_user_from_room(session_id_from_request(request), user_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
