"""
AI-powered workout generation using Claude API.
"""

import json
import re

import anthropic

from src.app_config import GENERATION_DEFAULTS


JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")

REQUIRED_FIELDS = ("user_id", "workout_type", "level", "equipment", "duration")


class WorkoutGenerationError(Exception):
    """Raised when the model call fails or returns an unusable workout."""


def build_workout_prompt(day, variant, level, equipment, duration, max_exercises=5):
    """Constrained prompt asking for a single-split workout as bare JSON."""
    return f"""
You are a professional fitness coach AI.

Generate a workout for the following split:
SPLIT: {day}
VARIANT: {variant}

STRICT RULES (DO NOT BREAK THESE):
- ONLY include exercises that train the {day} muscles
- DO NOT include exercises from other muscle groups
- If an exercise trains multiple muscles, it MUST primarily target {day}
- If unsure, DO NOT include the exercise

Workout constraints:
- Max {max_exercises} exercises
- Experience level: {level}
- Equipment: {equipment}
- Duration: {duration} minutes
- NO warmup
- NO cooldown
- NO explanations
- NO extra text

Return ONLY valid JSON in this format:

{{
  "workout": [
    {{ "exercise": "", "sets": "3", "reps": "10", "rest": "60" }}
  ]
}}
"""


def extract_workout_json(text):
    """
    Pull the outermost JSON object out of a model reply.

    Raises:
        WorkoutGenerationError: when no object is present or it does not parse
    """
    match = JSON_OBJECT_RE.search(text or "")
    if not match:
        raise WorkoutGenerationError("AI returned invalid JSON")
    try:
        return json.loads(match.group(0))
    except json.JSONDecodeError as exc:
        raise WorkoutGenerationError("AI returned invalid JSON") from exc


class WorkoutGenerator:
    """Generates single-split workouts using Claude AI."""

    def __init__(self, api_key, config, model=None, max_tokens=None, timeout=None, client=None):
        """
        Initialize the workout generator.

        Args:
            api_key: Anthropic API key
            config: Full configuration dictionary
            model: Claude model to use (defaults to config value)
            max_tokens: Maximum tokens for response (defaults to config value)
            timeout: Client timeout in seconds (defaults to config value)
            client: Pre-built client, used in place of constructing one
        """
        claude_config = config.get('claude', {}) or {}
        self.client = client or anthropic.Anthropic(
            api_key=api_key,
            timeout=timeout or claude_config.get('timeout', 60)
        )
        self.model = model or claude_config.get('model')
        self.max_tokens = max_tokens or claude_config.get('max_tokens', 1024)
        self.temperature = claude_config.get('temperature', 0.7)
        self.max_exercises = int(
            (config.get('generation', {}) or {}).get('max_exercises', GENERATION_DEFAULTS['max_exercises'])
        )
        self.config = config

    def generate_workout(self, user_id, workout_type, variant="A", level=None, equipment=None, duration=None):
        """
        Generate one workout for a split.

        Makes a single model call; there is no retry.

        Args:
            user_id: Requesting user (required, not sent to the model)
            workout_type: Split key such as "push" or "legs"
            variant: "A" or "B"
            level: Experience level
            equipment: Available equipment
            duration: Session length in minutes

        Returns:
            Dict with day, variant, level, equipment, duration and the
            ``workout`` list of {exercise, sets, reps, rest} suggestions
        """
        values = {
            "user_id": user_id,
            "workout_type": workout_type,
            "level": level,
            "equipment": equipment,
            "duration": duration,
        }
        if any(values[name] in (None, "") for name in REQUIRED_FIELDS):
            raise ValueError("Missing required fields")

        day = str(workout_type).lower()
        prompt = build_workout_prompt(
            day,
            variant,
            level,
            equipment,
            duration,
            max_exercises=self.max_exercises,
        )

        try:
            message = self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                messages=[{"role": "user", "content": prompt}],
            )
            raw = message.content[0].text
        except (anthropic.APIError, IndexError, AttributeError) as exc:
            print(f"Workout generation failed: {exc}")
            raise WorkoutGenerationError("Workout generation failed") from exc

        plan = extract_workout_json(raw)
        suggestions = plan.get("workout") if isinstance(plan, dict) else None
        if not isinstance(suggestions, list) or not suggestions:
            raise WorkoutGenerationError("Invalid workout generated")

        workout = [
            s for s in suggestions
            if isinstance(s, dict) and str(s.get("exercise") or "").strip()
        ][:self.max_exercises]
        if not workout:
            raise WorkoutGenerationError("Invalid workout generated")

        return {
            "day": day,
            "variant": variant,
            "level": level,
            "equipment": equipment,
            "duration": duration,
            "workout": workout,
        }
