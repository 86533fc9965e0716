from django.urls import path
from .views import client_delete, client_detail

urlpatterns = [
    path('api/<int:client_id>/', client_detail, name='client_detail'),
    path('api/<int:client_id>/eliminar/', client_delete, name='client_delete'),
]
