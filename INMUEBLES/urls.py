from django.urls import path
from .views import property_delete, property_detail

urlpatterns = [
    path('api/<int:property_id>/', property_detail, name='property_detail'),
    path('api/<int:property_id>/eliminar/', property_delete, name='property_delete'),
]
