"""
Management command to build monthly activity reports for every student.
Defaults to the previous calendar month.
"""
from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from student.services.reports import generate_monthly_reports, previous_month


class Command(BaseCommand):
    help = 'Generate monthly activity reports for all students'

    def add_arguments(self, parser):
        parser.add_argument('--year', type=int, help='Report year (default: previous month)')
        parser.add_argument('--month', type=int, help='Report month 1-12 (default: previous month)')
        parser.add_argument('--send', action='store_true', help='Email each report after building it')

    def handle(self, *args, **options):
        year, month = previous_month(timezone.now())
        year = options.get('year') or year
        month = options.get('month') or month
        if not 1 <= month <= 12:
            raise CommandError(f'Invalid month: {month}')

        self.stdout.write(f'Generating reports for {year}-{month:02d}...')
        reports = generate_monthly_reports(year, month, send=options.get('send', False))

        for report in reports:
            self.stdout.write(
                f'  {report.user.email}: {report.questions_solved} solved, '
                f'{report.accuracy_percentage}% accuracy, {report.videos_watched} videos'
            )
        self.stdout.write(self.style.SUCCESS(f'✓ Generated {len(reports)} reports'))
