from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import ChangeNameSerializer
from .services import change_name, create_user, delete_user, get_user_and_room
from .sessions import session_id_from_request


class UserCreateView(APIView):
    def post(self, request):
        create_user(session_id_from_request(request))
        return Response({}, status=status.HTTP_201_CREATED)


class CurrentUserView(APIView):
    """
    The caller's user and room, scoped by the X-Session-Id header.
    Other members' votes are never included, only the room's yes count.
    """

    def get(self, request):
        return Response(get_user_and_room(session_id_from_request(request)))

    def patch(self, request):
        s = ChangeNameSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        change_name(session_id_from_request(request), s.validated_data["name"])
        return Response(status=status.HTTP_204_NO_CONTENT)

    def delete(self, request):
        delete_user(session_id_from_request(request))
        return Response(status=status.HTTP_204_NO_CONTENT)
