"""Quiz-related constants shared across the core layer."""

DEFAULT_QUESTION_POINTS: int = 1
MAX_QUESTIONS_PER_QUIZ: int = 10
PERCENTAGE_PRECISION: int = 2
