from django.contrib import admin
from .models import PlatformConfig, Chapter, Video, Question


@admin.register(PlatformConfig)
class PlatformConfigAdmin(admin.ModelAdmin):
    list_display = ('key', 'value', 'updated_at')


@admin.register(Chapter)
class ChapterAdmin(admin.ModelAdmin):
    list_display = ('name', 'subject', 'class_level', 'created_at')
    list_filter = ('subject',)
    search_fields = ('name',)


@admin.register(Video)
class VideoAdmin(admin.ModelAdmin):
    list_display = ('title', 'youtube_id', 'class_level', 'subject', 'chapter', 'created_at')
    list_filter = ('class_level', 'subject')
    search_fields = ('title', 'youtube_id', 'topic')


@admin.register(Question)
class QuestionAdmin(admin.ModelAdmin):
    list_display = ('id', 'class_level', 'subject', 'chapter', 'difficulty', 'created_at')
    list_filter = ('class_level', 'subject', 'difficulty')
    search_fields = ('question_text', 'topic')
