"""
Content queries shared by the admin and student views
"""
from catalog.models import Video

FILTER_PARAMS = {
    # query parameter -> model field
    'class_level': 'class_level',
    'class': 'class_level',
    'subject': 'subject',
    'chapter': 'chapter',
    'difficulty': 'difficulty',
}

DEFAULT_RECOMMENDED_LIMIT = 6
EXAM_TRACK_BATCHES = ('JEE', 'WBJEE')


def parse_limit(value, default=None):
    """Positive int from a query string value, else the default"""
    try:
        limit = int(value)
    except (TypeError, ValueError):
        return default
    return limit if limit > 0 else default


def filter_content(queryset, params, allowed=('class_level', 'subject', 'chapter', 'difficulty')):
    """
    Exact-match conjunction over the taxonomy fields present in `params`.
    Unknown parameters are ignored, there is no fuzzy matching.
    """
    conditions = {}
    for param, field in FILTER_PARAMS.items():
        if field not in allowed:
            continue
        value = params.get(param)
        if value and field not in conditions:
            conditions[field] = value
    if conditions:
        queryset = queryset.filter(**conditions)

    limit = parse_limit(params.get('limit'))
    if limit:
        queryset = queryset[:limit]
    return queryset


def recommended_videos(profile=None, limit=DEFAULT_RECOMMENDED_LIMIT):
    """
    Newest videos matching the user's preferred class level or exam-track
    batch, topped up with the newest other videos. Without preferences
    this is just the newest videos.
    """
    newest = Video.objects.order_by('-created_at')

    class_levels = set()
    if profile is not None:
        if profile.preferred_class_level:
            class_levels.add(profile.preferred_class_level)
        if profile.preferred_batch in EXAM_TRACK_BATCHES:
            class_levels.add(profile.preferred_batch)

    if not class_levels:
        return list(newest[:limit])

    videos = list(newest.filter(class_level__in=class_levels)[:limit])
    if len(videos) < limit:
        seen = [v.pk for v in videos]
        videos += list(newest.exclude(pk__in=seen)[:limit - len(videos)])
    return videos
