"""Root routes: OpenAPI docs plus the three API apps under /api/."""

from django.urls import include
from django.urls import path
from drf_spectacular.views import SpectacularAPIView
from drf_spectacular.views import SpectacularRedocView
from drf_spectacular.views import SpectacularSwaggerView

urlpatterns = [
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('swagger/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    path('redoc/', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),
    path('api/', include('apps.accounts.urls')),  # login, logout, me, couple accounts
    path('api/', include('apps.weddings.urls')),  # tenants and their content
    path('api/', include('apps.guestbook.urls')),  # RSVPs, wishes, guest lists, dashboard
]
