from django.contrib.auth.hashers import make_password
from rest_framework import serializers

from .models import UserProfile, ROLE_STUDENT

MIN_PASSWORD_LENGTH = 6


class UserProfileSerializer(serializers.ModelSerializer):
    class Meta:
        model = UserProfile
        fields = [
            'id', 'name', 'email', 'image', 'role', 'email_verified',
            'preferred_class_level', 'preferred_batch', 'last_login', 'created_at',
        ]
        read_only_fields = fields


class SignupSerializer(serializers.Serializer):
    """Self-service signup always creates a STUDENT"""
    name = serializers.CharField(max_length=255)
    email = serializers.EmailField()
    password = serializers.CharField(min_length=MIN_PASSWORD_LENGTH, write_only=True, trim_whitespace=False)

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Name is required')
        return value

    def validate_email(self, value):
        value = value.strip().lower()
        if UserProfile.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError('An account with this email already exists')
        return value

    def create(self, validated_data):
        return UserProfile.objects.create(
            name=validated_data['name'],
            email=validated_data['email'],
            password_hash=make_password(validated_data['password']),
            role=ROLE_STUDENT,
        )
