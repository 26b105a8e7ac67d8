"""
Student activity models - attempts, video progress, doubts and monthly reports
"""
from django.db import models
from django.utils import timezone
import uuid

from admin.models import UserProfile
from catalog.models import Video, Question

DOUBT_PENDING = 'PENDING'
DOUBT_RESOLVED = 'RESOLVED'


class QuestionAttempt(models.Model):
    """One row per answer submission - never updated after insert"""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, db_column='id')
    user = models.ForeignKey(UserProfile, on_delete=models.CASCADE, related_name='attempts', db_column='user_id')
    question = models.ForeignKey(Question, on_delete=models.CASCADE, related_name='attempts', db_column='question_id')
    selected_answer = models.IntegerField(db_column='selected_answer')
    is_correct = models.BooleanField(db_column='is_correct')
    # seconds
    time_taken = models.IntegerField(blank=True, null=True, db_column='time_taken')
    attempted_at = models.DateTimeField(default=timezone.now, db_index=True, db_column='attempted_at')

    class Meta:
        db_table = 'question_attempts'
        managed = True
        ordering = ['-attempted_at']


class VideoProgress(models.Model):
    """Watched/completed state per (user, video); uniqueness is kept by the service layer"""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, db_column='id')
    user = models.ForeignKey(UserProfile, on_delete=models.CASCADE, related_name='video_progress', db_column='user_id')
    video = models.ForeignKey(Video, on_delete=models.CASCADE, related_name='progress', db_column='video_id')
    # seconds, not tracked yet
    watched_duration = models.IntegerField(default=0, db_column='watched_duration')
    completed = models.BooleanField(default=False, db_column='completed')
    last_watched_at = models.DateTimeField(default=timezone.now, db_column='last_watched_at')

    class Meta:
        db_table = 'video_progress'
        managed = True
        ordering = ['-last_watched_at']


class Doubt(models.Model):
    """Student help ticket, PENDING until an admin responds"""
    STATUS_CHOICES = [
        (DOUBT_PENDING, 'Pending'),
        (DOUBT_RESOLVED, 'Resolved'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, db_column='id')
    user = models.ForeignKey(UserProfile, on_delete=models.CASCADE, related_name='doubts', db_column='user_id')
    question = models.ForeignKey(Question, on_delete=models.SET_NULL, blank=True, null=True, related_name='doubts', db_column='question_id')
    video = models.ForeignKey(Video, on_delete=models.SET_NULL, blank=True, null=True, related_name='doubts', db_column='video_id')
    title = models.CharField(max_length=500, db_column='title')
    description = models.TextField(db_column='description')
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=DOUBT_PENDING, db_column='status')
    response = models.TextField(blank=True, null=True, db_column='response')
    responded_at = models.DateTimeField(blank=True, null=True, db_column='responded_at')
    created_at = models.DateTimeField(default=timezone.now, db_column='created_at')
    updated_at = models.DateTimeField(auto_now=True, db_column='updated_at')

    class Meta:
        db_table = 'doubts'
        managed = True
        ordering = ['-created_at']

    def __str__(self):
        return self.title


class MonthlyReport(models.Model):
    """Per-student activity summary for one calendar month"""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, db_column='id')
    user = models.ForeignKey(UserProfile, on_delete=models.CASCADE, related_name='monthly_reports', db_column='user_id')
    month = models.IntegerField(db_column='month')
    year = models.IntegerField(db_column='year')
    videos_watched = models.IntegerField(default=0, db_column='videos_watched')
    questions_solved = models.IntegerField(default=0, db_column='questions_solved')
    correct_answers = models.IntegerField(default=0, db_column='correct_answers')
    accuracy_percentage = models.FloatField(default=0, db_column='accuracy_percentage')
    sent_at = models.DateTimeField(blank=True, null=True, db_column='sent_at')
    created_at = models.DateTimeField(default=timezone.now, db_column='created_at')

    class Meta:
        db_table = 'monthly_reports'
        managed = True
        unique_together = ('user', 'year', 'month')
        ordering = ['-year', '-month']

    def __str__(self):
        return f"{self.user.email} {self.year}-{self.month:02d}"
