"""
Load the default catalog.
"""
from django.core.management.base import BaseCommand

from apps.catalog.infrastructure.factories import build_seed_use_case


class Command(BaseCommand):
    help = "Seed laundry services, clothing items and prices (no-op when items exist)"

    def handle(self, *args, **options):
        result = build_seed_use_case().execute().data
        if not result.seeded:
            self.stdout.write(self.style.WARNING(result.skipped_reason))
            return
        self.stdout.write(self.style.SUCCESS(
            f"Seeded {result.services} services, {result.clothing_items} clothing items "
            f"and {result.pricing_entries} prices"
        ))
