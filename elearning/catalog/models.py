"""
Catalog models - taxonomy configuration, video lectures and the question bank
"""
from django.db import models
from django.utils import timezone
import uuid

from admin.models import UserProfile

DIFFICULTY_EASY = 'EASY'
DIFFICULTY_MEDIUM = 'MEDIUM'
DIFFICULTY_HARD = 'HARD'


class PlatformConfig(models.Model):
    """Key/value configuration - each value is an ordered list of strings ("classes", "subjects")"""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, db_column='id')
    key = models.CharField(max_length=100, unique=True, db_column='key')
    value = models.JSONField(default=list, db_column='value')
    updated_at = models.DateTimeField(auto_now=True, db_column='updated_at')

    class Meta:
        db_table = 'platform_config'
        managed = True

    def __str__(self):
        return self.key


class Chapter(models.Model):
    """
    Third taxonomy level. Linked to a subject by name, not by foreign key,
    so subjects can be edited without touching existing content.
    """
    name = models.CharField(max_length=255, db_column='name')
    subject = models.CharField(max_length=100, db_index=True, db_column='subject')
    class_level = models.CharField(max_length=50, blank=True, null=True, db_column='class_level')
    created_at = models.DateTimeField(default=timezone.now, db_column='created_at')

    class Meta:
        db_table = 'chapters'
        managed = True
        # insertion order is the display order
        ordering = ['subject', 'id']

    def __str__(self):
        return f"{self.subject}: {self.name}"


class Video(models.Model):
    """YouTube video lecture tagged with the taxonomy"""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, db_column='id')
    youtube_url = models.TextField(db_column='youtube_url')
    youtube_id = models.CharField(max_length=64, db_column='youtube_id')
    title = models.CharField(max_length=500, db_column='title')
    thumbnail = models.TextField(db_column='thumbnail')
    description = models.TextField(blank=True, null=True, db_column='description')
    class_level = models.CharField(max_length=50, db_index=True, db_column='class_level')
    subject = models.CharField(max_length=100, db_index=True, db_column='subject')
    chapter = models.CharField(max_length=255, blank=True, null=True, db_column='chapter')
    topic = models.CharField(max_length=255, blank=True, null=True, db_column='topic')
    created_by = models.ForeignKey(UserProfile, on_delete=models.PROTECT, related_name='videos', db_column='created_by')
    created_at = models.DateTimeField(default=timezone.now, db_column='created_at')
    updated_at = models.DateTimeField(auto_now=True, db_column='updated_at')

    class Meta:
        db_table = 'videos'
        managed = True
        ordering = ['-created_at']

    def __str__(self):
        return self.title


class Question(models.Model):
    """Multiple-choice question - text, options and explanation may embed LaTeX"""
    DIFFICULTY_CHOICES = [
        (DIFFICULTY_EASY, 'Easy'),
        (DIFFICULTY_MEDIUM, 'Medium'),
        (DIFFICULTY_HARD, 'Hard'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, db_column='id')
    class_level = models.CharField(max_length=50, db_index=True, db_column='class_level')
    subject = models.CharField(max_length=100, db_index=True, db_column='subject')
    chapter = models.CharField(max_length=255, db_column='chapter')
    topic = models.CharField(max_length=255, db_column='topic')
    question_text = models.TextField(db_column='question_text')
    question_image = models.TextField(blank=True, null=True, db_column='question_image')
    options = models.JSONField(default=list, db_column='options')
    # 0-based index into options
    correct_answer = models.IntegerField(db_column='correct_answer')
    difficulty = models.CharField(max_length=10, choices=DIFFICULTY_CHOICES, default=DIFFICULTY_MEDIUM, db_column='difficulty')
    explanation = models.TextField(blank=True, null=True, db_column='explanation')
    created_by = models.ForeignKey(UserProfile, on_delete=models.PROTECT, related_name='questions', db_column='created_by')
    created_at = models.DateTimeField(default=timezone.now, db_column='created_at')
    updated_at = models.DateTimeField(auto_now=True, db_column='updated_at')

    class Meta:
        db_table = 'questions'
        managed = True
        ordering = ['-created_at']

    def __str__(self):
        return self.question_text[:80]
