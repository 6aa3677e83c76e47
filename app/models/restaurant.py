from tortoise import fields, models
import uuid


class TechPark(models.Model):
    id = fields.UUIDField(primary_key=True, default=uuid.uuid4)
    name = fields.CharField(max_length=255)
    location = fields.CharField(max_length=255)
    description = fields.TextField(null=True)
    total_outlets = fields.IntField(default=0)
    is_active = fields.BooleanField(default=True)

    class Meta:
        table = "tech_parks"


class Restaurant(models.Model):
    id = fields.UUIDField(primary_key=True, default=uuid.uuid4)
    manager = fields.OneToOneField("models.Manager", related_name="restaurant", null=True)
    tech_park = fields.ForeignKeyField("models.TechPark", related_name="restaurants", null=True)
    name = fields.CharField(max_length=255)
    description = fields.TextField(null=True)
    cuisine = fields.CharField(max_length=255)
    rating = fields.FloatField(default=0)
    distance = fields.FloatField(null=True) # in meters
    preparation_time = fields.CharField(max_length=32, null=True) # e.g. "15-20 min"
    price_range = fields.CharField(max_length=8, null=True)
    is_open = fields.BooleanField(default=True)
    delivery_available = fields.BooleanField(default=True)
    takeaway_available = fields.BooleanField(default=True)
    dinein_available = fields.BooleanField(default=True)
    image_url = fields.CharField(max_length=512, null=True)
    location = fields.JSONField(null=True) # {"lat": ..., "lng": ...}
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "restaurants"
        indexes = [
            ("tech_park_id",),  # Browsing by tech park
        ]


class MenuCategory(models.Model):
    id = fields.UUIDField(primary_key=True, default=uuid.uuid4)
    restaurant = fields.ForeignKeyField("models.Restaurant", related_name="categories")
    name = fields.CharField(max_length=255)
    display_order = fields.IntField(default=0)
    is_active = fields.BooleanField(default=True)

    class Meta:
        table = "menu_categories"


class MenuItem(models.Model):
    id = fields.UUIDField(primary_key=True, default=uuid.uuid4)
    restaurant = fields.ForeignKeyField("models.Restaurant", related_name="menu_items")
    category = fields.ForeignKeyField("models.MenuCategory", related_name="items", null=True)
    name = fields.CharField(max_length=255)
    description = fields.TextField(null=True)
    price = fields.IntField() # whole currency units
    is_veg = fields.BooleanField(default=True)
    is_available = fields.BooleanField(default=True)
    preparation_time = fields.IntField(null=True) # in minutes
    image_url = fields.CharField(max_length=512, null=True)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "menu_items"
        indexes = [
            ("restaurant_id",),      # Fast restaurant menu queries
            ("restaurant_id", "is_available"),
        ]
