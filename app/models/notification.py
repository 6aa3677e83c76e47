from tortoise import fields, models
import uuid


class Notification(models.Model):
    """
    One row per order status change, addressed to the user who placed the order.
    Written in the same transaction as the status update so a change can never
    exist without its notification (or the other way round).
    """
    id = fields.UUIDField(primary_key=True, default=uuid.uuid4)
    user = fields.ForeignKeyField("models.Employee", related_name="notifications")
    order = fields.ForeignKeyField("models.Order", related_name="notifications")
    event_type = fields.CharField(max_length=128) # e.g. 'order.status.confirmed.v1'
    status = fields.CharField(max_length=16)
    title = fields.CharField(max_length=255)
    message = fields.TextField()
    is_read = fields.BooleanField(default=False)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "notifications"
        indexes = [
            ("user_id", "is_read"),
        ]
