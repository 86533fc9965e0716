from django.contrib import admin
from .models import Property, PropertyPhoto


class PropertyPhotoInline(admin.TabularInline):
    model = PropertyPhoto
    extra = 0


@admin.register(Property)
class PropertyAdmin(admin.ModelAdmin):
    list_display = ("id", "property_type", "address", "city", "price", "status")
    list_filter = ("property_type", "status", "city")
    search_fields = ("address", "city")
    inlines = [PropertyPhotoInline]
