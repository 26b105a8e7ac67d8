"""
Student app serializers
"""
from rest_framework import serializers

from admin.models import UserProfile, BATCH_CHOICES
from catalog.services.categories import get_categories
from student.models import QuestionAttempt, VideoProgress, Doubt


class QuestionAttemptSerializer(serializers.ModelSerializer):
    user_id = serializers.UUIDField(read_only=True)
    question_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = QuestionAttempt
        fields = ['id', 'user_id', 'question_id', 'selected_answer', 'is_correct', 'time_taken', 'attempted_at']
        read_only_fields = fields


class AttemptSubmitSerializer(serializers.Serializer):
    question_id = serializers.UUIDField()
    selected_answer = serializers.IntegerField(min_value=0)
    time_taken = serializers.IntegerField(min_value=0, required=False, allow_null=True)


class VideoProgressSerializer(serializers.ModelSerializer):
    user_id = serializers.UUIDField(read_only=True)
    video_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = VideoProgress
        fields = ['id', 'user_id', 'video_id', 'watched_duration', 'completed', 'last_watched_at']
        read_only_fields = fields


class MarkWatchedSerializer(serializers.Serializer):
    video_id = serializers.UUIDField()


class DoubtSerializer(serializers.ModelSerializer):
    user_id = serializers.UUIDField(read_only=True)
    question_id = serializers.UUIDField(required=False, allow_null=True)
    video_id = serializers.UUIDField(required=False, allow_null=True)

    class Meta:
        model = Doubt
        fields = [
            'id', 'user_id', 'question_id', 'video_id', 'title', 'description',
            'status', 'response', 'responded_at', 'created_at', 'updated_at',
        ]
        read_only_fields = ['id', 'user_id', 'status', 'response', 'responded_at', 'created_at', 'updated_at']


class AdminDoubtSerializer(DoubtSerializer):
    """Doubt with its author, for the admin inbox"""
    user_name = serializers.CharField(source='user.name', read_only=True)
    user_email = serializers.CharField(source='user.email', read_only=True)

    class Meta(DoubtSerializer.Meta):
        fields = DoubtSerializer.Meta.fields + ['user_name', 'user_email']


class DoubtResponseSerializer(serializers.Serializer):
    response = serializers.CharField(allow_blank=True, required=False, trim_whitespace=True)
    status = serializers.CharField(required=False, allow_null=True)


class ProfileSerializer(serializers.ModelSerializer):
    """Current user's profile including content preferences"""

    class Meta:
        model = UserProfile
        fields = ['id', 'name', 'email', 'image', 'role', 'preferred_class_level', 'preferred_batch']
        read_only_fields = ['id', 'email', 'image', 'role']

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Name cannot be empty')
        return value

    def validate_preferred_class_level(self, value):
        if value in (None, ''):
            return None
        if value not in get_categories()['classes']:
            raise serializers.ValidationError('Invalid class level')
        return value

    def validate_preferred_batch(self, value):
        if value in (None, ''):
            return None
        if value not in BATCH_CHOICES:
            raise serializers.ValidationError('Invalid batch')
        return value
