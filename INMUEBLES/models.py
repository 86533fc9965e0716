from django.db import models


class Property(models.Model):
    TYPE_CHOICES = (
        ('HOUSE', 'Casa'),
        ('APARTMENT', 'Apartamento'),
        ('COMMERCIAL', 'Local Comercial'),
        ('OFFICE', 'Oficina'),
        ('LOT', 'Lote'),
    )

    STATUS_CHOICES = (
        ('AVAILABLE', 'Disponible'),
        ('RENTED', 'Arrendado'),
        ('SOLD', 'Vendido'),
    )

    property_type = models.CharField(max_length=20, choices=TYPE_CHOICES)
    address = models.CharField(max_length=255)
    city = models.CharField(max_length=100)
    price = models.DecimalField(max_digits=14, decimal_places=2)
    description = models.TextField(blank=True, default="")

    # Opcionales según el tipo de inmueble
    built_area_m2 = models.DecimalField(max_digits=10, decimal_places=2, blank=True, null=True)
    lot_area_m2 = models.DecimalField(max_digits=10, decimal_places=2, blank=True, null=True)
    rooms = models.PositiveSmallIntegerField(blank=True, null=True)
    baths = models.PositiveSmallIntegerField(blank=True, null=True)
    garage = models.BooleanField(default=False)

    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default='AVAILABLE')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "inmueble"

    def __str__(self):
        return f"{self.get_property_type_display()} - {self.address}, {self.city}"

    def get_display_id(self):
        return f"INM{self.pk:03d}"

    def photo_files(self):
        """Archivos de la galería; se borran del disco al eliminar el inmueble."""
        return [photo.image for photo in self.photos.all() if photo.image]


class PropertyPhoto(models.Model):
    property = models.ForeignKey(Property, on_delete=models.CASCADE, related_name="photos")
    image = models.FileField(upload_to="property_photos/")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "inmueble_foto"
