from tortoise import fields, models
import uuid


class Employee(models.Model):
    """Tech-park employee placing orders, stored in the ``users`` table."""
    id = fields.UUIDField(primary_key=True, default=uuid.uuid4)
    username = fields.CharField(max_length=128, unique=True)
    password = fields.CharField(max_length=128)
    tech_park = fields.CharField(max_length=255)
    company = fields.CharField(max_length=255)
    designation = fields.CharField(max_length=255)
    employee_name = fields.CharField(max_length=255)
    mobile = fields.CharField(max_length=32)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "users"


class Manager(models.Model):
    """Restaurant manager. Owns exactly one restaurant (see Restaurant.manager)."""
    id = fields.UUIDField(primary_key=True, default=uuid.uuid4)
    username = fields.CharField(max_length=128, unique=True)
    password = fields.CharField(max_length=128)
    name = fields.CharField(max_length=255, null=True)
    email = fields.CharField(max_length=255, unique=True)
    tech_park = fields.CharField(max_length=255)
    is_active = fields.BooleanField(default=True)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "managers"
