"""
URL configuration for the tool inventory API.

``list`` is served at ``/api/tools/`` and ``retrieve`` at
``/api/tools/<id>/``.
"""

from django.urls import path, include
from rest_framework.routers import SimpleRouter

from .views import ToolViewSet


router = SimpleRouter()
router.register(r"", ToolViewSet, basename="tools")

urlpatterns = [
    path("", include(router.urls)),
]
