"""
Management command to seed the demo students.

Usage:
    python manage.py seed_accounts [--classroom <uuid>]

Inserts ``settings.SEED_ACCOUNTS`` into the scope when it has no students
yet; a scope that already has students is left untouched.
"""

from uuid import UUID

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from apps.accounts.models import Account
from apps.accounts.services import create_account
from apps.classrooms.services import ClassroomNotFoundError, resolve_classroom, scope_filter


class Command(BaseCommand):
    help = 'Insert the demo students into an empty scope'

    def add_arguments(self, parser):
        parser.add_argument(
            '--classroom',
            type=UUID,
            default=None,
            help='Classroom id to seed (default: unscoped students)',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        classroom_id = options['classroom']

        try:
            resolve_classroom(classroom_id)
        except ClassroomNotFoundError as exc:
            raise CommandError(exc.message)

        if Account.objects.filter(**scope_filter(classroom_id)).exists():
            self.stdout.write('Students already exist, nothing to seed.')
            return

        self.stdout.write('Initializing database with initial students...')
        for entry in settings.SEED_ACCOUNTS:
            create_account(
                code=entry['code'],
                name=entry['name'],
                balance=entry.get('balance', 0),
                classroom_id=classroom_id,
            )

        self.stdout.write(self.style.SUCCESS(
            f'Created {len(settings.SEED_ACCOUNTS)} students.'
        ))
