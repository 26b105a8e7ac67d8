from django.contrib import admin

from .models import QuestionAttempt, VideoProgress, Doubt, MonthlyReport


@admin.register(QuestionAttempt)
class QuestionAttemptAdmin(admin.ModelAdmin):
    list_display = ['user', 'question', 'selected_answer', 'is_correct', 'attempted_at']
    list_filter = ['is_correct']


@admin.register(VideoProgress)
class VideoProgressAdmin(admin.ModelAdmin):
    list_display = ['user', 'video', 'completed', 'last_watched_at']


@admin.register(Doubt)
class DoubtAdmin(admin.ModelAdmin):
    list_display = ['title', 'user', 'status', 'created_at', 'responded_at']
    list_filter = ['status']
    search_fields = ['title', 'description']


@admin.register(MonthlyReport)
class MonthlyReportAdmin(admin.ModelAdmin):
    list_display = ['user', 'year', 'month', 'questions_solved', 'accuracy_percentage', 'sent_at']
