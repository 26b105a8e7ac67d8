"""
Monthly activity reports
"""
import logging
from datetime import datetime, timezone as dt_timezone

from admin.models import UserProfile, ROLE_STUDENT
from student.models import QuestionAttempt, VideoProgress, MonthlyReport
from student.services.stats import attempt_counts

logger = logging.getLogger(__name__)


def month_bounds(year, month):
    """[start, end) of a calendar month in UTC"""
    start = datetime(year, month, 1, tzinfo=dt_timezone.utc)
    if month == 12:
        end = datetime(year + 1, 1, 1, tzinfo=dt_timezone.utc)
    else:
        end = datetime(year, month + 1, 1, tzinfo=dt_timezone.utc)
    return start, end


def previous_month(today):
    if today.month == 1:
        return today.year - 1, 12
    return today.year, today.month - 1


def build_monthly_report(user, year, month):
    """Create or refresh the report row of one student for one month"""
    start, end = month_bounds(year, month)

    questions_solved, correct_answers = attempt_counts(
        QuestionAttempt.objects.filter(user=user, attempted_at__gte=start, attempted_at__lt=end)
    )
    videos_watched = VideoProgress.objects.filter(
        user=user, completed=True, last_watched_at__gte=start, last_watched_at__lt=end,
    ).count()
    accuracy_percentage = round(correct_answers * 100 / questions_solved, 2) if questions_solved else 0.0

    report, _ = MonthlyReport.objects.update_or_create(
        user=user, year=year, month=month,
        defaults={
            'videos_watched': videos_watched,
            'questions_solved': questions_solved,
            'correct_answers': correct_answers,
            'accuracy_percentage': accuracy_percentage,
        },
    )
    return report


def send_monthly_report(report):
    """
    Email delivery is not configured for the platform; the report is only
    logged and left unsent (sent_at stays empty).
    """
    logger.info(
        f"Monthly report {report.year}-{report.month:02d} for {report.user.email} not emailed: "
        f"delivery is not configured"
    )
    return False


def generate_monthly_reports(year, month, send=False):
    """Build reports for every student; returns the report rows"""
    reports = []
    for student in UserProfile.objects.filter(role=ROLE_STUDENT).order_by('created_at'):
        report = build_monthly_report(student, year, month)
        if send:
            send_monthly_report(report)
        reports.append(report)
    logger.info(f"Generated {len(reports)} monthly reports for {year}-{month:02d}")
    return reports
