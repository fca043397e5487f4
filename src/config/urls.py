"""
URL Configuration para PiuPiuwer.

Estrutura:
- /users/, /pius/, /api-info/ - API JSON
- /health/ - Health check
"""

from django.http import JsonResponse
from django.urls import include, re_path


def health(request):
    return JsonResponse({'status': 'ok'})


urlpatterns = [
    # API JSON
    re_path(r'^', include('src.adapters.django_app.api.urls')),

    # Health check
    re_path(r'^health/?$', health, name='health'),
]
