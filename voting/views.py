from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from users.sessions import session_id_from_request
from .serializers import VoteSerializer
from .services import vote


class VoteView(APIView):
    def post(self, request):
        s = VoteSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        vote(session_id_from_request(request), s.validated_data["voted_yes"])
        return Response(status=status.HTTP_204_NO_CONTENT)
