"""
Catalog serializers - validation for videos and questions
"""
from rest_framework import serializers

from catalog.models import Video, Question
from catalog.services import categories, youtube


class TaxonomyFieldsMixin:
    """
    class_level and subject must belong to the current taxonomy when they
    are written. A value that an update leaves unchanged is accepted even if
    it has since been removed from the taxonomy.
    """

    def _categories(self):
        if not hasattr(self, '_taxonomy'):
            self._taxonomy = categories.get_categories()
        return self._taxonomy

    def _unchanged(self, field, value):
        return self.instance is not None and getattr(self.instance, field) == value

    def validate_class_level(self, value):
        if not self._unchanged('class_level', value) and value not in self._categories()['classes']:
            raise serializers.ValidationError(f'Unknown class level "{value}"')
        return value

    def validate_subject(self, value):
        if not self._unchanged('subject', value) and value not in self._categories()['subjects']:
            raise serializers.ValidationError(f'Unknown subject "{value}"')
        return value


class VideoSerializer(TaxonomyFieldsMixin, serializers.ModelSerializer):
    youtube_url = serializers.CharField()
    chapter = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    topic = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    created_by = serializers.UUIDField(source='created_by_id', read_only=True)

    class Meta:
        model = Video
        fields = [
            'id', 'youtube_url', 'youtube_id', 'title', 'thumbnail', 'description',
            'class_level', 'subject', 'chapter', 'topic',
            'created_by', 'created_at', 'updated_at',
        ]
        read_only_fields = ['id', 'youtube_id', 'title', 'thumbnail', 'created_by', 'created_at', 'updated_at']

    def validate_youtube_url(self, value):
        value = value.strip()
        if youtube.extract_youtube_id(value) is None:
            raise serializers.ValidationError('Invalid YouTube URL')
        return value

    def validate(self, attrs):
        # optional text fields are stored as NULL rather than ""
        for field in ('chapter', 'topic', 'description'):
            if field in attrs and not attrs[field]:
                attrs[field] = None
        return attrs

    def create(self, validated_data):
        youtube_id = youtube.require_youtube_id(validated_data['youtube_url'])
        metadata = youtube.fetch_video_metadata(youtube_id)
        validated_data.update(
            youtube_id=youtube_id,
            title=metadata['title'],
            thumbnail=metadata['thumbnail'],
        )
        return super().create(validated_data)

    def update(self, instance, validated_data):
        # the source video of a lecture is fixed once created
        validated_data.pop('youtube_url', None)
        return super().update(instance, validated_data)


class VideoSummarySerializer(serializers.ModelSerializer):
    """Card view of a video for recommendation lists"""
    class Meta:
        model = Video
        fields = [
            'id', 'title', 'youtube_id', 'thumbnail', 'description',
            'class_level', 'subject', 'chapter', 'topic', 'created_at',
        ]


class QuestionSerializer(TaxonomyFieldsMixin, serializers.ModelSerializer):
    options = serializers.ListField(child=serializers.CharField(), min_length=2)
    correct_answer = serializers.IntegerField()
    difficulty = serializers.ChoiceField(choices=Question.DIFFICULTY_CHOICES, required=False)
    explanation = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    question_image = serializers.URLField(required=False, allow_blank=True, allow_null=True)
    created_by = serializers.UUIDField(source='created_by_id', read_only=True)

    class Meta:
        model = Question
        fields = [
            'id', 'class_level', 'subject', 'chapter', 'topic',
            'question_text', 'question_image', 'options', 'correct_answer',
            'difficulty', 'explanation', 'created_by', 'created_at', 'updated_at',
        ]
        read_only_fields = ['id', 'created_by', 'created_at', 'updated_at']

    def validate(self, attrs):
        options = attrs.get('options', getattr(self.instance, 'options', None)) or []
        correct_answer = attrs.get('correct_answer', getattr(self.instance, 'correct_answer', None))

        if len(options) < 2:
            raise serializers.ValidationError({'options': 'At least two options are required'})
        if correct_answer is None or not 0 <= correct_answer < len(options):
            raise serializers.ValidationError({'correct_answer': 'Invalid correct answer index'})

        for field in ('explanation', 'question_image'):
            if field in attrs and not attrs[field]:
                attrs[field] = None
        return attrs
