from django.contrib import admin
from .models import UserProfile


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
	list_display = ('id', 'email', 'name', 'role', 'preferred_class_level', 'created_at')
	list_filter = ('role', 'preferred_class_level', 'preferred_batch')
	search_fields = ('email', 'name')
	exclude = ('password_hash',)
