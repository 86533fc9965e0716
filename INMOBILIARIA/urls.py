"""
URL configuration for INMOBILIARIA project.

Los módulos de inmuebles, clientes y contratos exponen endpoints JSON que
llaman al motor de contratos; el resto se administra desde /admin/.
"""
from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static

from CLIENTES.views import agent_delete


urlpatterns = [
    path('admin/', admin.site.urls),
    path('inmuebles/', include('INMUEBLES.urls')),
    path('clientes/', include('CLIENTES.urls')),
    path('agentes/api/<int:agent_id>/eliminar/', agent_delete, name='agent_delete'),
    path('contratos/', include('CONTRATOS.urls')),
] + static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
