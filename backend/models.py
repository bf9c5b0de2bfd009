import enum


class QuestionType(str, enum.Enum):
    """Enumeration for question input types that carry a validation rule."""
    TEXT = "text"
    RATING = "rating"


class ResourceType(str, enum.Enum):
    """JSON:API resource type names."""
    SURVEYS = "surveys"
    SURVEY_ANSWERS = "surveyAnswers"


class MissingAnswersError(Exception):
    """
    Raised when a submission carries no data.attributes.answers list.
    Surfaced as a 500 response with a canned message.
    """

    message = "No answers given."

    def __init__(self, message: str = None):
        super().__init__(message or self.message)
        self.message = message or self.message

    def __repr__(self):
        return f"<MissingAnswersError(message={self.message!r})>"
