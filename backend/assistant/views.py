from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from assistant.serializers import ChatRequestSerializer
from assistant.services import AssistantService


class ChatView(APIView):
    """
    POST {"prompt": "..."} -> {"reply": "..."}.

    Assistant failures are returned as 503 with a message for the user.
    """
    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = ChatRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        reply = AssistantService.complete(serializer.validated_data["prompt"])
        return Response({"reply": reply})
