from rest_framework import viewsets, filters
from django_filters.rest_framework import DjangoFilterBackend


class ScopedViewSet(viewsets.ModelViewSet):
    """
    Base ViewSet for owner-scoped collections.

    Features:
    - Only the authenticated user's rows are visible
    - New rows are stamped with the current user as owner
    - Standard filtering, search and ordering backends

    Usage:
        class OrderViewSet(ScopedViewSet):
            queryset = Order.objects.all()
            serializer_class = OrderSerializer
    """

    filter_backends = [
        DjangoFilterBackend,
        filters.SearchFilter,
        filters.OrderingFilter,
    ]

    ordering = ['-created_at']

    def get_queryset(self):
        # Re-evaluate per request so the owner filter is always applied
        model = self.queryset.model
        return model.objects.filter(owner=self.request.user)

    def perform_create(self, serializer):
        serializer.save(owner=self.request.user)
