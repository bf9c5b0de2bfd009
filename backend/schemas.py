from pydantic import BaseModel, ConfigDict
from typing import List, Optional, Any

from models import MissingAnswersError, ResourceType


class QuestionAttributes(BaseModel):
    """Type-specific constraints of a question, e.g. bounds for a rating."""
    model_config = ConfigDict(frozen=True, extra="allow")

    min: Optional[float] = None
    max: Optional[float] = None


class Question(BaseModel):
    """Represents a single question of the survey definition."""
    model_config = ConfigDict(frozen=True, extra="allow")

    questionId: str
    questionType: str
    required: bool = False
    attributes: Optional[QuestionAttributes] = None


class SurveyAttributes(BaseModel):
    """Represents the attributes section of the survey resource."""
    model_config = ConfigDict(frozen=True, extra="allow")

    questions: List[Question] = []


class SurveyResource(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    type: str = ResourceType.SURVEYS.value
    id: str
    attributes: SurveyAttributes


class SurveyDocument(BaseModel):
    """Top-level model representing the static survey document."""
    model_config = ConfigDict(frozen=True, extra="allow")

    data: SurveyResource

    def get_survey_id(self) -> str:
        return self.data.id

    def get_questions(self) -> List[Question]:
        """Get the questions in survey order."""
        return list(self.data.attributes.questions)


class Answer(BaseModel):
    """Represents a single submitted answer. Unknown keys are kept."""
    model_config = ConfigDict(extra="allow")

    questionId: Any = None
    answer: Any = None


class SubmissionAttributes(BaseModel):
    answers: Optional[List[Any]] = None


class SubmissionData(BaseModel):
    attributes: Optional[SubmissionAttributes] = None


class SubmissionPayload(BaseModel):
    """Top-level model representing a survey answers submission."""
    data: Optional[SubmissionData] = None

    def get_answers(self) -> List[Answer]:
        """
        Follow data.attributes.answers.

        Raises:
            MissingAnswersError: If any link of the chain is absent or null
        """
        if self.data is None or self.data.attributes is None:
            raise MissingAnswersError()
        answers = self.data.attributes.answers
        if answers is None:
            raise MissingAnswersError()
        # Elements that are not objects can never match a question
        return [Answer.model_validate(answer) for answer in answers if isinstance(answer, dict)]


class ErrorSource(BaseModel):
    pointer: str


class AnswerError(BaseModel):
    """One invalid or missing answer, addressed by its payload pointer."""
    source: ErrorSource
    detail: str

    @property
    def pointer(self) -> str:
        return self.source.pointer


class ErrorResponse(BaseModel):
    errors: List[AnswerError]


class ResourceIdentifier(BaseModel):
    type: str
    id: str


class SurveyRelationship(BaseModel):
    data: ResourceIdentifier


class SurveyAnswersRelationships(BaseModel):
    survey: SurveyRelationship


class SurveyAnswersAttributes(BaseModel):
    answers: List[Any]


class SurveyAnswersResource(BaseModel):
    type: str = ResourceType.SURVEY_ANSWERS.value
    id: str
    attributes: SurveyAnswersAttributes
    relationships: SurveyAnswersRelationships


class SurveyAnswersResponse(BaseModel):
    """Created surveyAnswers resource returned on a valid submission."""
    data: SurveyAnswersResource

    @classmethod
    def build(cls, answers_id: str, answers: List[Any], survey_id: str) -> "SurveyAnswersResponse":
        return cls(
            data=SurveyAnswersResource(
                id=answers_id,
                attributes=SurveyAnswersAttributes(answers=answers),
                relationships=SurveyAnswersRelationships(
                    survey=SurveyRelationship(
                        data=ResourceIdentifier(type=ResourceType.SURVEYS.value, id=survey_id)
                    )
                ),
            )
        )
