"""
Editable draft of a generated workout before it is saved.

The draft is plain state owned by whoever holds it (the Start Workout page
keeps one in ``st.session_state``); nothing here touches globals.
"""

from src.workout_records import to_number


DEFAULT_SET_COUNT = 3
DEFAULT_REPS = 10
EDITABLE_FIELDS = ('reps', 'weight')


def _new_set(reps=DEFAULT_REPS):
    return {'reps': reps, 'weight': 0}


class DraftWorkout:
    """An in-progress workout: split, variant and ordered exercises with sets."""

    def __init__(self, day, variant='A', exercises=None):
        self.day = day
        self.variant = variant
        self.exercises = exercises if exercises is not None else []

    @classmethod
    def from_generated(cls, generated):
        """
        Expand a generator response into concrete editable sets.

        Each suggestion's ``sets`` count becomes that many
        ``{reps, weight: 0}`` rows using the suggested reps.
        """
        exercises = []
        for suggestion in generated.get('workout') or []:
            if not isinstance(suggestion, dict) or not suggestion.get('exercise'):
                continue
            count = int(to_number(suggestion.get('sets'))) or DEFAULT_SET_COUNT
            reps = to_number(suggestion.get('reps')) or DEFAULT_REPS
            exercises.append({
                'exercise': str(suggestion['exercise']).strip(),
                'sets': [_new_set(reps) for _ in range(max(count, 1))],
            })

        return cls(
            day=generated.get('day', ''),
            variant=generated.get('variant', 'A'),
            exercises=exercises,
        )

    def _exercise(self, ex_index):
        if not 0 <= ex_index < len(self.exercises):
            raise IndexError(f"No exercise at position {ex_index}")
        return self.exercises[ex_index]

    def add_set(self, ex_index):
        self._exercise(ex_index)['sets'].append(_new_set())

    def delete_set(self, ex_index, set_index):
        sets = self._exercise(ex_index)['sets']
        if not 0 <= set_index < len(sets):
            raise IndexError(f"No set at position {set_index}")
        del sets[set_index]

    def update_set(self, ex_index, set_index, field, value):
        if field not in EDITABLE_FIELDS:
            raise ValueError(f"Cannot edit set field '{field}'")
        sets = self._exercise(ex_index)['sets']
        if not 0 <= set_index < len(sets):
            raise IndexError(f"No set at position {set_index}")
        sets[set_index][field] = to_number(value)

    def add_exercise(self, name):
        """Append a custom exercise with one default set. Returns False for blank names."""
        name = (name or '').strip()
        if not name:
            return False
        self.exercises.append({'exercise': name, 'sets': [_new_set()]})
        return True

    def remove_exercise(self, ex_index):
        self._exercise(ex_index)
        del self.exercises[ex_index]

    def move_exercise(self, from_index, to_index):
        """Reorder: take the exercise at ``from_index`` and insert it at ``to_index``."""
        exercise = self._exercise(from_index)
        if not 0 <= to_index < len(self.exercises):
            raise IndexError(f"No exercise at position {to_index}")
        del self.exercises[from_index]
        self.exercises.insert(to_index, exercise)

    def is_empty(self):
        return not self.exercises

    def to_payload(self):
        """Stored shape of a saved generated workout."""
        return {
            'day': self.day,
            'variant': self.variant,
            'workout': [
                {'exercise': ex['exercise'], 'sets': [dict(s) for s in ex['sets']]}
                for ex in self.exercises
            ],
        }
