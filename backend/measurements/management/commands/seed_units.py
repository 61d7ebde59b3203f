from django.core.management.base import BaseCommand

from measurements.services.seeding import seed_units


class Command(BaseCommand):
    help = "Seed or refresh the global measurement units from the unit registry."

    def handle(self, *args, **options):
        unit_map = seed_units()
        self.stdout.write(self.style.SUCCESS(f"Seeded {len(unit_map)} units"))
