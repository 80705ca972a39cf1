from __future__ import annotations

from collections.abc import Iterable, Mapping

from app.schemas.assessment import AssessmentQuestion
from app.schemas.traits import TRAIT_NAMES, TraitVector

_LIKERT_MAX = 5

QUESTION_BANK: tuple[AssessmentQuestion, ...] = (
    AssessmentQuestion(id=1, text="I prefer to work in groups rather than alone", trait="extraversion"),
    AssessmentQuestion(id=2, text="I like to try new and unusual things", trait="openness"),
    AssessmentQuestion(id=3, text="I am always prepared and organized", trait="conscientiousness"),
    AssessmentQuestion(id=4, text="I am sympathetic to others' feelings", trait="agreeableness"),
    AssessmentQuestion(id=5, text="I get easily stressed or anxious", trait="neuroticism"),
    AssessmentQuestion(id=6, text="I enjoy being the center of attention", trait="extraversion"),
    AssessmentQuestion(id=7, text="I appreciate art and beauty", trait="openness"),
    AssessmentQuestion(id=8, text="I stick to my plans and finish what I start", trait="conscientiousness"),
    AssessmentQuestion(id=9, text="I trust others easily", trait="agreeableness"),
    AssessmentQuestion(id=10, text="I worry about things that might go wrong", trait="neuroticism"),
    AssessmentQuestion(id=11, text="I feel comfortable around people", trait="extraversion"),
    AssessmentQuestion(id=12, text="I enjoy abstract or theoretical discussions", trait="openness"),
    AssessmentQuestion(id=13, text="I am reliable and can be counted on", trait="conscientiousness"),
    AssessmentQuestion(id=14, text="I try to be courteous to everyone I meet", trait="agreeableness"),
    AssessmentQuestion(id=15, text="I remain calm under pressure", trait="neuroticism", reverse=True),
    AssessmentQuestion(id=16, text="I start conversations with strangers", trait="extraversion"),
    AssessmentQuestion(id=17, text="I have a vivid imagination", trait="openness"),
    AssessmentQuestion(id=18, text="I pay attention to details", trait="conscientiousness"),
    AssessmentQuestion(id=19, text="I am interested in other people's problems", trait="agreeableness"),
    AssessmentQuestion(id=20, text="I am easily disturbed by events", trait="neuroticism"),
)


def _scored_response(question: AssessmentQuestion, response: int) -> int:
    return (_LIKERT_MAX + 1 - response) if question.reverse else response


def normalize_traits(
    answers: Mapping[int, int],
    questions: Iterable[AssessmentQuestion] = QUESTION_BANK,
) -> TraitVector:
    """Turn 1-5 Likert answers into a TraitVector.

    Each trait is the sum of its answered (reverse-scored where flagged)
    responses divided by ``answered * 5``. A trait with no answered questions
    is 0. Answers for question ids outside ``questions`` are ignored.
    """
    sums = {trait: 0 for trait in TRAIT_NAMES}
    counts = {trait: 0 for trait in TRAIT_NAMES}

    for question in questions:
        response = answers.get(question.id)
        if response is None:
            continue
        sums[question.trait] += _scored_response(question, int(response))
        counts[question.trait] += 1

    values: dict[str, float] = {}
    for trait in TRAIT_NAMES:
        count = counts[trait]
        values[trait] = sums[trait] / (count * _LIKERT_MAX) if count else 0.0
    return TraitVector(**values)
