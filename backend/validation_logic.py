"""
Answer Validation Helper

This module provides functions to validate submitted answers against the
survey's questions. Each question type maps to a validation rule; the
validator collects one error per missing or invalid required answer.
"""

from numbers import Real

from models import QuestionType
from schemas import AnswerError, ErrorSource

REQUIRED_DETAIL = "The value is required."
INVALID_DETAIL = "The value for {question_id} is invalid."


def validate_text_input(value):
    """
    Check that a text answer has some non-whitespace content.

    Args:
        value: Submitted answer value

    Returns:
        bool: True if value is a non-blank string
    """
    if value is None or not isinstance(value, str):
        return False
    return value.strip() != ""


def validate_rating_input(value, attributes=None):
    """
    Check that a rating answer exists and lies within the optional bounds.

    Args:
        value: Submitted answer value
        attributes: Question constraints with optional min/max, or None

    Returns:
        bool: True if value is present and within both bounds
    """
    does_value_exist = value is not None

    if attributes is None:
        return does_value_exist

    if not does_value_exist:
        return False

    minimum = _get_bound(attributes, "min")
    maximum = _get_bound(attributes, "max")

    if minimum is None and maximum is None:
        return True

    # Bounds can only be compared against real numbers
    if isinstance(value, bool) or not isinstance(value, Real):
        return False

    is_value_more_than_min = minimum is None or value >= minimum
    is_value_less_than_max = maximum is None or value <= maximum

    return is_value_more_than_min and is_value_less_than_max


def _get_bound(attributes, name):
    if isinstance(attributes, dict):
        return attributes.get(name)
    return getattr(attributes, name, None)


# Question types without an entry here are always valid
VALIDATORS = {
    QuestionType.TEXT.value: lambda answer, question: validate_text_input(answer.answer),
    QuestionType.RATING.value: lambda answer, question: validate_rating_input(answer.answer, question.attributes),
}


def answer_pointer(question_id):
    return f"data/attributes/answers/{question_id}"


def build_error(pointer, detail):
    """Build a single addressable validation error."""
    return AnswerError(source=ErrorSource(pointer=pointer), detail=detail)


def find_answer(answers, question_id):
    """Return the first answer for question_id, or None."""
    for answer in answers:
        if answer.questionId == question_id:
            return answer
    return None


def validate_answers(questions, answers):
    """
    Validate submitted answers against the survey's questions.

    Only required questions are checked. A missing answer produces a
    required error and skips the type rule for that question.

    Args:
        questions: Survey questions in survey order
        answers: Submitted answers, in any order

    Returns:
        list: AnswerError objects in question order, empty when valid
    """
    errors = []

    for question in questions:
        if not question.required:
            continue

        question_id = question.questionId
        answer = find_answer(answers, question_id)

        # If there is no answer, add an error
        if answer is None:
            errors.append(build_error(answer_pointer(question_id), REQUIRED_DETAIL))
            continue

        validator = VALIDATORS.get(question.questionType)
        if validator is not None and not validator(answer, question):
            errors.append(
                build_error(
                    answer_pointer(question_id),
                    INVALID_DETAIL.format(question_id=question_id)
                )
            )

    return errors
