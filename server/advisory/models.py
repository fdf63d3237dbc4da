import uuid

from django.db import models


class Client(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=120)
    email = models.EmailField(unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]


class Wallet(models.Model):
    client = models.OneToOneField(Client, on_delete=models.CASCADE, related_name="wallet")
    total_value = models.DecimalField(max_digits=20, decimal_places=2)
    updated_at = models.DateTimeField(auto_now=True)


class Goal(models.Model):
    client = models.ForeignKey(Client, on_delete=models.CASCADE, related_name="goals")
    description = models.CharField(max_length=255)
    target_value = models.DecimalField(max_digits=20, decimal_places=2)
    target_date = models.DateField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at"]


class Event(models.Model):
    CATEGORY_CHOICES = [
        ("INCOME", "Income"),
        ("EXPENSE", "Expense"),
    ]
    FREQUENCY_CHOICES = [
        ("UNIQUE", "Unique"),
        ("MONTHLY", "Monthly"),
        ("ANNUAL", "Annual"),
    ]

    client = models.ForeignKey(Client, on_delete=models.CASCADE, related_name="events")
    description = models.CharField(max_length=255)
    category = models.CharField(max_length=16, choices=CATEGORY_CHOICES)
    value = models.DecimalField(max_digits=20, decimal_places=2)
    frequency = models.CharField(max_length=16, choices=FREQUENCY_CHOICES)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at"]
