from django.contrib import admin
from .models import Rental, Sale, Visit


@admin.register(Sale)
class SaleAdmin(admin.ModelAdmin):
    list_display = ("id", "property", "client", "agent", "sale_date", "value", "commission")
    list_filter = ("sale_date",)
    search_fields = ("property__address", "client__email")


@admin.register(Rental)
class RentalAdmin(admin.ModelAdmin):
    list_display = ("id", "property", "client", "start_date", "end_date", "monthly_rent", "status")
    list_filter = ("status",)
    search_fields = ("property__address", "client__email")


@admin.register(Visit)
class VisitAdmin(admin.ModelAdmin):
    list_display = ("id", "property", "client", "agent", "visit_date", "visit_time", "status")
    list_filter = ("status", "visit_date")
    search_fields = ("property__address", "client__email")
