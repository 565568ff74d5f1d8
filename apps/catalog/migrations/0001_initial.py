import uuid

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models

import apps.catalog.infrastructure.models.catalog_models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ClothingItemModel',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name_en', models.CharField(max_length=100)),
                ('name_bn', models.CharField(max_length=100)),
                ('category', models.CharField(choices=[('men', 'Men'), ('women', 'Women'), ('children', 'Children')], db_index=True, max_length=20)),
                ('icon', models.CharField(blank=True, max_length=50)),
                ('available_services', models.JSONField(default=apps.catalog.infrastructure.models.catalog_models.default_services)),
                ('is_active', models.BooleanField(db_index=True, default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'clothing_items',
                'ordering': ['category', 'name_en'],
            },
        ),
        migrations.CreateModel(
            name='LaundryServiceModel',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name_en', models.CharField(max_length=100)),
                ('name_bn', models.CharField(max_length=100)),
                ('service_type', models.CharField(choices=[('washing', 'Washing'), ('ironing', 'Ironing')], max_length=20, unique=True)),
                ('description', models.TextField(blank=True)),
                ('icon', models.CharField(blank=True, max_length=50)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'laundry_services',
            },
        ),
        migrations.CreateModel(
            name='PricingModel',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('service_type', models.CharField(choices=[('washing', 'Washing'), ('ironing', 'Ironing')], max_length=20)),
                ('category', models.CharField(choices=[('men', 'Men'), ('women', 'Women'), ('children', 'Children')], max_length=20)),
                ('price', models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(0)])),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('clothing_item', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='prices', to='catalog.clothingitemmodel')),
            ],
            options={
                'db_table': 'pricing',
            },
        ),
        migrations.AddConstraint(
            model_name='pricingmodel',
            constraint=models.UniqueConstraint(fields=('clothing_item', 'service_type', 'category'), name='unique_price_per_item_service_category'),
        ),
    ]
