from django.conf import settings
from django.core.management.base import BaseCommand
from django.utils import timezone

from CONTRATOS.store import expiring_contracts


class Command(BaseCommand):
    help = 'Lista los contratos activos que vencen en los próximos días'

    def add_arguments(self, parser):
        parser.add_argument(
            '--days',
            type=int,
            default=getattr(settings, 'CONTRACT_EXPIRING_DEFAULT_DAYS', 30),
            help='Ventana en días (máximo CONTRACT_EXPIRING_MAX_DAYS)',
        )

    def handle(self, *args, **options):
        max_days = getattr(settings, 'CONTRACT_EXPIRING_MAX_DAYS', 90)
        days = max(0, min(options['days'], max_days))
        today = timezone.localdate()

        contracts = list(expiring_contracts(days, today=today))
        if not contracts:
            self.stdout.write(self.style.SUCCESS(f'No hay contratos activos por vencer en {days} días.'))
            return

        self.stdout.write(self.style.WARNING(f'{len(contracts)} contrato(s) vencen en los próximos {days} días:'))
        for contract in contracts:
            remaining = (contract.end_date - today).days
            self.stdout.write(
                f'  {contract.get_display_id()} | {contract.property} | '
                f'{contract.client.get_full_name()} | vence {contract.end_date:%d/%m/%Y} ({remaining} días)'
            )
