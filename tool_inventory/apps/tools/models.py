from django.core.validators import MinValueValidator
from django.db import models
from decimal import Decimal


class Category(models.Model):
    """Tool category (e.g. Development, Communication)"""
    name = models.CharField(max_length=50, unique=True)
    description = models.TextField(null=True, blank=True)
    color_hex = models.CharField(max_length=7, default='#6366f1')
    created_at = models.DateTimeField(auto_now_add=True, null=True)

    class Meta:
        db_table = 'categories'
        ordering = ['name']
        verbose_name = 'Category'
        verbose_name_plural = 'Categories'

    def __str__(self):
        return self.name


class Tool(models.Model):
    """A software tool the organisation pays for"""

    class Department(models.TextChoices):
        ENGINEERING = 'Engineering', 'Engineering'
        SALES = 'Sales', 'Sales'
        MARKETING = 'Marketing', 'Marketing'
        HR = 'HR', 'HR'
        FINANCE = 'Finance', 'Finance'
        OPERATIONS = 'Operations', 'Operations'
        DESIGN = 'Design', 'Design'

    class Status(models.TextChoices):
        ACTIVE = 'active', 'Active'
        DEPRECATED = 'deprecated', 'Deprecated'
        TRIAL = 'trial', 'Trial'

    name = models.CharField(max_length=100, unique=True)
    description = models.TextField(null=True, blank=True)
    vendor = models.CharField(max_length=100, null=True, blank=True)
    website_url = models.URLField(max_length=255, null=True, blank=True)
    category = models.ForeignKey(
        Category,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='tools'
    )
    monthly_cost = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))]
    )
    active_users_count = models.PositiveIntegerField(default=0)
    owner_department = models.CharField(max_length=20, choices=Department.choices)
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.ACTIVE,
        db_index=True
    )

    created_at = models.DateTimeField(auto_now_add=True, null=True)
    updated_at = models.DateTimeField(auto_now=True, null=True)

    class Meta:
        db_table = 'tools'
        ordering = ['id']
        verbose_name = 'Tool'
        verbose_name_plural = 'Tools'

    def __str__(self):
        return self.name
