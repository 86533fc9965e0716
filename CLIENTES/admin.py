from django.contrib import admin
from .models import Agent, Client


@admin.register(Client)
class ClientAdmin(admin.ModelAdmin):
    list_display = ("id", "first_name", "last_name", "document_type", "document_number", "email", "client_type")
    list_filter = ("client_type", "document_type")
    search_fields = ("first_name", "last_name", "document_number", "email")


@admin.register(Agent)
class AgentAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "email", "phone", "active")
    list_filter = ("active",)
    search_fields = ("name", "email")
