"""
Core backend base components.

Foundational classes shared by the business apps:
- models.ScopedModel: owner-scoped abstract model
- viewsets.ScopedViewSet: owner-scoped ModelViewSet
"""
