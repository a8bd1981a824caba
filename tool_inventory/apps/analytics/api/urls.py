"""
URL configuration for the analytics API.

The viewset is registered without a prefix so that its actions live
directly under the ``/api/analytics/`` base path, e.g.
``/api/analytics/department-costs/``.
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import AnalyticsViewSet


router = DefaultRouter()
router.register(r"", AnalyticsViewSet, basename="analytics")

urlpatterns = [
    path("", include(router.urls)),
]
