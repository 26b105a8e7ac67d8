from django.db import models
from django.utils import timezone
import uuid

ROLE_STUDENT = 'STUDENT'
ROLE_ADMIN = 'ADMIN'

BATCH_CHOICES = ['JEE', 'WBJEE', 'BOARDS']


# User Profile model - maps to the users table, one row per platform account
class UserProfile(models.Model):
	ROLE_CHOICES = [
		(ROLE_STUDENT, 'Student'),
		(ROLE_ADMIN, 'Admin'),
	]

	id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, db_column='user_id')
	name = models.CharField(max_length=255, db_column='name')
	email = models.EmailField(unique=True, db_column='email')
	password_hash = models.CharField(max_length=255, db_column='password_hash')
	email_verified = models.BooleanField(default=False, db_column='email_verified')
	image = models.TextField(blank=True, null=True, db_column='image')
	role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=ROLE_STUDENT, db_column='role')
	# Student preferences for personalized content
	preferred_class_level = models.CharField(max_length=50, blank=True, null=True, db_column='preferred_class_level')
	preferred_batch = models.CharField(max_length=50, blank=True, null=True, db_column='preferred_batch')
	last_login = models.DateTimeField(blank=True, null=True, db_column='last_login')
	created_at = models.DateTimeField(default=timezone.now, db_column='created_at')
	updated_at = models.DateTimeField(auto_now=True, db_column='updated_at')

	class Meta:
		db_table = 'users'
		managed = True
		ordering = ['-created_at']

	@property
	def is_admin(self):
		return self.role == ROLE_ADMIN

	def __str__(self):
		return self.name or self.email
