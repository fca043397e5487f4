"""
URL patterns da API JSON.

A barra final é opcional em todas as rotas (/users e /users/).

Endpoints:
- /users/, /users/<id>/
- /pius/, /pius/user/<userId>/, /pius/search/, /pius/trending/<count>/, /pius/<id>/
- /api-info/
"""

from django.urls import re_path
from . import api_views

app_name = 'api'

urlpatterns = [
    # =========================================================================
    # Usuários
    # =========================================================================

    re_path(r'^users/?$', api_views.UsuarioAPIListView.as_view(), name='users'),
    re_path(r'^users/(?P<pk>[^/]+)/?$', api_views.UsuarioAPIDetailView.as_view(), name='user_detail'),

    # =========================================================================
    # Pius (rotas fixas antes do <pk> para não conflitar)
    # =========================================================================

    re_path(r'^pius/?$', api_views.PiuAPIListView.as_view(), name='pius'),
    re_path(r'^pius/user/(?P<usuario_id>[^/]+)/?$', api_views.PiuAPIPorUsuarioView.as_view(), name='pius_by_user'),
    re_path(r'^pius/search/?$', api_views.PiuAPIBuscaView.as_view(), name='pius_search'),
    re_path(r'^pius/trending/(?P<count>[^/]+)/?$', api_views.PiuAPITrendingView.as_view(), name='pius_trending'),
    re_path(r'^pius/(?P<pk>[^/]+)/?$', api_views.PiuAPIDetailView.as_view(), name='piu_detail'),

    # =========================================================================
    # Informações
    # =========================================================================

    re_path(r'^api-info/?$', api_views.APIInfoView.as_view(), name='api_info'),
]
