"""
Management command to create an ADMIN account, or promote an existing one.
"""
from django.contrib.auth.hashers import make_password
from django.core.management.base import BaseCommand, CommandError

from admin.models import UserProfile, ROLE_ADMIN


class Command(BaseCommand):
    help = 'Create a platform admin (or promote an existing user to admin)'

    def add_arguments(self, parser):
        parser.add_argument('email')
        parser.add_argument('--name', default='Admin')
        parser.add_argument('--password', help='Required when the account does not exist yet')

    def handle(self, *args, **options):
        email = options['email'].strip().lower()
        profile = UserProfile.objects.filter(email__iexact=email).first()

        if profile is not None:
            profile.role = ROLE_ADMIN
            if options.get('password'):
                profile.password_hash = make_password(options['password'])
            profile.save()
            self.stdout.write(self.style.WARNING(f'✓ User {email} already exists, promoted to admin'))
            return

        if not options.get('password'):
            raise CommandError('--password is required for a new account')

        UserProfile.objects.create(
            name=options['name'],
            email=email,
            password_hash=make_password(options['password']),
            role=ROLE_ADMIN,
        )
        self.stdout.write(self.style.SUCCESS(f'✓ Created admin user: {email}'))
