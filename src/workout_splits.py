"""
Muscle-group splits offered by the workout generator.
"""

WORKOUT_SPLITS = {
    'push': {
        'label': 'Push',
        'muscles': ['chest', 'shoulders', 'triceps'],
    },
    'pull': {
        'label': 'Pull',
        'muscles': ['back', 'biceps'],
    },
    'legs': {
        'label': 'Legs',
        'muscles': ['quads', 'hamstrings', 'glutes', 'calves'],
    },
    'chest': {
        'label': 'Chest',
        'muscles': ['chest'],
    },
    'back': {
        'label': 'Back',
        'muscles': ['back'],
    },
    'shoulders': {
        'label': 'Shoulders',
        'muscles': ['shoulders'],
    },
    'arms': {
        'label': 'Arms',
        'muscles': ['biceps', 'triceps', 'forearms'],
    },
    'lower': {
        'label': 'Lower Body',
        'muscles': ['quads', 'hamstrings', 'glutes', 'calves'],
    },
    'cardio': {
        'label': 'Cardio',
        'muscles': ['cardio'],
    },
    'abs': {
        'label': 'Abs',
        'muscles': ['core'],
    },
}

DEFAULT_SPLIT = 'legs'


def split_label(split):
    """Display label for a split key, falling back to the title-cased key."""
    entry = WORKOUT_SPLITS.get((split or '').lower())
    if entry:
        return entry['label']
    return (split or 'Other').title()


def choose_variant(last_session, split):
    """
    Pick variant A or B for a new workout of ``split``.

    Repeating the split of the most recent session flips its variant so
    back-to-back sessions of the same split get a different selection.
    """
    if not last_session:
        return 'A'

    payload = last_session.get('workout') if isinstance(last_session, dict) else None
    if not isinstance(payload, dict):
        return 'A'

    if payload.get('day') != split:
        return 'A'
    return 'B' if payload.get('variant') == 'A' else 'A'
