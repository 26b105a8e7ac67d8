"""
Category service - resolves the class / subject / chapter taxonomy

Classes and subjects are ordered string lists stored in PlatformConfig,
chapters are Chapter rows grouped by subject name. Hardcoded defaults fill
in whatever has not been configured yet.
"""
import logging

from django.db import transaction
from rest_framework.exceptions import PermissionDenied, ValidationError

from catalog.models import PlatformConfig, Chapter

logger = logging.getLogger(__name__)

CLASSES_KEY = 'classes'
SUBJECTS_KEY = 'subjects'
CHAPTERS_KIND = 'chapters'
CATEGORY_KINDS = (CLASSES_KEY, SUBJECTS_KEY, CHAPTERS_KIND)

DEFAULT_CLASSES = ['7', '8', '9', '10', '11', '12', 'JEE', 'WBJEE']
DEFAULT_SUBJECTS = ['MATHEMATICS', 'PHYSICS', 'CHEMISTRY', 'SCIENCE']
DEFAULT_CHAPTERS = {
    'MATHEMATICS': [
        'Algebra',
        'Trigonometry',
        'Coordinate Geometry',
        'Calculus',
        'Vectors & 3D Geometry',
        'Probability & Statistics',
        'Sets & Relations',
        'Complex Numbers',
        'Matrices & Determinants',
        'Sequences & Series',
        'Permutations & Combinations',
        'Limits & Continuity',
        'Differential Equations',
        'Integral Calculus',
    ],
    'PHYSICS': [
        'Mechanics',
        'Kinematics',
        'Laws of Motion',
        'Work, Energy & Power',
        'Rotational Motion',
        'Gravitation',
        'Thermodynamics',
        'Waves & Oscillations',
        'Optics',
        'Electrostatics',
        'Current Electricity',
        'Magnetism',
        'Electromagnetic Induction',
        'Modern Physics',
        'Semiconductors',
    ],
    'CHEMISTRY': [
        'Atomic Structure',
        'Chemical Bonding',
        'States of Matter',
        'Thermodynamics',
        'Equilibrium',
        'Redox Reactions',
        'Electrochemistry',
        'Chemical Kinetics',
        'Organic Chemistry Basics',
        'Hydrocarbons',
        'Polymers',
        'Biomolecules',
        'Coordination Compounds',
        'Periodic Table',
    ],
    'SCIENCE': [
        'Motion',
        'Force & Laws of Motion',
        'Gravitation',
        'Work & Energy',
        'Sound',
        'Light',
        'Electricity',
        'Magnetism',
        'Chemical Reactions',
        'Acids, Bases & Salts',
        'Metals & Non-metals',
        'Carbon Compounds',
        'Life Processes',
        'Heredity & Evolution',
    ],
}


def get_config(key, default_value):
    """
    Read a PlatformConfig list, writing the default back on first access
    so later reads are stable.
    """
    config, created = PlatformConfig.objects.get_or_create(
        key=key,
        defaults={'value': list(default_value)},
    )
    if created:
        logger.info(f"Initialized platform config '{key}' with defaults")
    if not config.value:
        return list(default_value)
    return list(config.value)


def get_chapters(subjects):
    """Map every subject to its chapter names, falling back to the defaults"""
    by_subject = {}
    for chapter in Chapter.objects.filter(subject__in=subjects):
        by_subject.setdefault(chapter.subject, []).append(chapter.name)

    return {
        subject: by_subject.get(subject) or list(DEFAULT_CHAPTERS.get(subject, []))
        for subject in subjects
    }


def get_categories():
    """
    Resolve the full taxonomy:
    {"classes": [...], "subjects": [...], "chapters": {subject: [...]}}
    """
    classes = get_config(CLASSES_KEY, DEFAULT_CLASSES)
    subjects = get_config(SUBJECTS_KEY, DEFAULT_SUBJECTS)
    return {
        'classes': classes,
        'subjects': subjects,
        'chapters': get_chapters(subjects),
    }


def _check_values(values):
    """Values are stored exactly as written; only non-string or blank entries are refused"""
    if not isinstance(values, (list, tuple)):
        raise ValidationError({'values': 'Expected a list of strings'})
    for value in values:
        if not isinstance(value, str) or not value.strip():
            raise ValidationError({'values': 'Every value must be a non-empty string'})
    return list(values)


def update_category(kind, values, subject=None, actor=None):
    """
    Replace one level of the taxonomy.

    classes/subjects: upsert the PlatformConfig row for that key.
    chapters: delete every Chapter of `subject` and insert `values` in order
    (full replace, not a merge).
    """
    if actor is None or not actor.is_admin:
        raise PermissionDenied('Forbidden - Admin access required')

    if kind not in CATEGORY_KINDS:
        raise ValidationError({'type': 'Invalid type'})

    values = _check_values(values)

    if kind in (CLASSES_KEY, SUBJECTS_KEY):
        if not values:
            raise ValidationError({'values': f'At least one entry is required for {kind}'})
        PlatformConfig.objects.update_or_create(key=kind, defaults={'value': values})
        logger.info(f"{actor.email} updated {kind}: {len(values)} entries")
        return values

    if not isinstance(subject, str) or not subject.strip():
        raise ValidationError({'subject': 'subject is required when updating chapters'})

    with transaction.atomic():
        Chapter.objects.filter(subject=subject).delete()
        Chapter.objects.bulk_create([
            Chapter(name=name, subject=subject) for name in values
        ])
    logger.info(f"{actor.email} replaced chapters of {subject}: {len(values)} entries")
    return values
