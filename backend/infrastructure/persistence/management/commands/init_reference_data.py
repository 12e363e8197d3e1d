"""
Initialize Reference Data Command.

Seeds default item statuses, structure types, military categories and
document types.
"""

from django.core.management.base import BaseCommand
from django.db import transaction


ITEM_STATUSES = [
    {'designation_fr': 'Actif', 'designation_en': 'Active', 'designation_ar': 'نشط'},
    {'designation_fr': 'En attente', 'designation_en': 'Pending', 'designation_ar': 'في الانتظار'},
    {'designation_fr': 'Réservé', 'designation_en': 'Reserved', 'designation_ar': 'محجوز'},
    {'designation_fr': 'En maintenance', 'designation_en': 'Maintenance', 'designation_ar': 'صيانة'},
    {'designation_fr': 'Endommagé', 'designation_en': 'Damaged', 'designation_ar': 'تالف'},
    {'designation_fr': 'Obsolète', 'designation_en': 'Obsolete', 'designation_ar': 'متقادم'},
    {'designation_fr': 'Réformé', 'designation_en': 'Disposed', 'designation_ar': 'مستبعد'},
    {'designation_fr': 'Perdu', 'designation_en': 'Lost', 'designation_ar': 'مفقود'},
    {'designation_fr': 'En cours d\'acquisition', 'designation_en': 'Procurement', 'designation_ar': 'قيد الاقتناء'},
]

STRUCTURE_TYPES = [
    {'designation_fr': 'Direction', 'designation_en': 'Directorate', 'designation_ar': 'مديرية'},
    {'designation_fr': 'Sous-direction', 'designation_en': 'Sub-directorate', 'designation_ar': 'مديرية فرعية'},
    {'designation_fr': 'Service', 'designation_en': 'Department', 'designation_ar': 'مصلحة'},
    {'designation_fr': 'Bureau', 'designation_en': 'Office', 'designation_ar': 'مكتب'},
]

MILITARY_CATEGORIES = [
    {'designation_fr': 'Armée de terre', 'designation_en': 'Land Forces', 'abbreviation_fr': 'FT'},
    {'designation_fr': 'Marine nationale', 'designation_en': 'Naval Forces', 'abbreviation_fr': 'FN'},
    {'designation_fr': 'Forces aériennes', 'designation_en': 'Air Force', 'abbreviation_fr': 'FA'},
    {'designation_fr': 'Gendarmerie nationale', 'designation_en': 'National Gendarmerie', 'abbreviation_fr': 'GN'},
    {'designation_fr': 'Garde républicaine', 'designation_en': 'Republican Guard', 'abbreviation_fr': 'GR'},
]

DOCUMENT_TYPES = [
    {'designation_fr': 'Demande de modification', 'designation_en': 'Modification request', 'scope': 1},
    {'designation_fr': 'Réponse', 'designation_en': 'Response', 'scope': 1},
    {'designation_fr': 'Décision', 'designation_en': 'Decision', 'scope': 2},
]


class Command(BaseCommand):
    help = 'Initialize reference data (item statuses, structure types, military categories, document types)'

    def handle(self, *args, **options):
        from infrastructure.persistence.models import (
            DocumentType,
            ItemStatus,
            MilitaryCategory,
            StructureType,
        )

        with transaction.atomic():
            self._seed(ItemStatus, ITEM_STATUSES, ('designation_fr',))
            self._seed(StructureType, STRUCTURE_TYPES, ('designation_fr',))
            self._seed(MilitaryCategory, MILITARY_CATEGORIES, ('designation_fr',))
            self._seed(DocumentType, DOCUMENT_TYPES, ('designation_fr', 'scope'))

        self.stdout.write(
            self.style.SUCCESS('Reference data initialization completed!')
        )

    def _seed(self, model, rows, lookup_fields):
        """get_or_create every row, matching on `lookup_fields`."""
        created_count = 0
        for row in rows:
            lookup = {field: row[field] for field in lookup_fields}
            defaults = {key: value for key, value in row.items() if key not in lookup}
            _, created = model.objects.get_or_create(defaults=defaults, **lookup)
            created_count += created
        self.stdout.write(
            f'{model._meta.verbose_name_plural}: {created_count} created, '
            f'{len(rows) - created_count} already present'
        )
