"""
Quiz bank loader. Questions live in a JSON file shipped with the package.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional

from .models import QuizQuestion

logger = logging.getLogger(__name__)

DEFAULT_QUIZ_PATH = Path(__file__).resolve().parents[2] / "data" / "quiz_questions.json"


def load_quiz_questions(path: Path = DEFAULT_QUIZ_PATH) -> List[QuizQuestion]:
    """Load and validate a quiz bank file."""
    with open(path, 'r', encoding="utf-8") as f:
        raw = json.load(f)

    questions = [QuizQuestion.model_validate(item) for item in raw]
    for q in questions:
        if q.correct not in q.options:
            raise ValueError(f"Quiz question {q.id}: correct answer {q.correct!r} is not an option")

    logger.info("Loaded %d quiz questions from %s", len(questions), path)
    return questions


class QuizBank:
    def __init__(self, questions: List[QuizQuestion]):
        self._by_id: Dict[int, QuizQuestion] = {q.id: q for q in questions}

    def all(self) -> List[QuizQuestion]:
        return list(self._by_id.values())

    def get(self, question_id: int) -> Optional[QuizQuestion]:
        return self._by_id.get(question_id)


@lru_cache(maxsize=1)
def get_quiz_bank() -> QuizBank:
    """Get the global quiz bank built from the packaged question file."""
    return QuizBank(load_quiz_questions())
