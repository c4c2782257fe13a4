"""
URL Configuration for Checkout Service
"""
from django.urls import path, include
from django.http import JsonResponse
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from apps.payments.views import checkout_page


def home_view(request):
    """API root information"""
    return JsonResponse({
        'message': 'Checkout Service API',
        'version': '1.0.0',
        'documentation': {
            'swagger_ui': f"{request.scheme}://{request.get_host()}/api/docs/",
            'openapi_schema': f"{request.scheme}://{request.get_host()}/api/schema/"
        },
        'endpoints': {
            'api': '/api/v1/',
            'checkout': '/checkout/',
        }
    })


urlpatterns = [
    path('', home_view, name='home'),
    path('checkout/', checkout_page, name='checkout'),

    # API v1 endpoints
    path('api/v1/', include('checkout_service.api_urls')),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'),
         name='swagger-ui'),
]
