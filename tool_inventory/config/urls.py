from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView, SpectacularSwaggerView

urlpatterns = [
    path("admin/", admin.site.urls),

    # API Documentation
    path('docs', SpectacularSwaggerView.as_view(url_name='schema'), name='docs'),
    path('redoc', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),

    # API Endpoints:
    path("api/tools/", include("tool_inventory.apps.tools.api.urls")),
    path("api/analytics/", include("tool_inventory.apps.analytics.api.urls")),
]

if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)
