from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from typing import Any, Dict, List
import json
import logging
import uuid

import config
from models import MissingAnswersError
from schemas import ErrorResponse, Question, SubmissionPayload, SurveyAnswersResponse
from validation_logic import build_error, validate_answers

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/survey", tags=["survey"])

ANSWERS_LOCATION = ("data", "attributes", "answers")


def get_survey_document() -> Dict[str, Any]:
    """
    Dependency returning the raw survey document served on GET.
    Override in tests to serve a different survey.
    """
    return config.SURVEY_CONFIG["survey"]


def get_questions() -> List[Question]:
    """Dependency returning the parsed survey questions in survey order."""
    return config.SURVEY.get_questions()


def get_internal_server_error() -> Dict[str, Any]:
    return config.INTERNAL_SERVER_ERROR


# Survey handlers - GET returns data, anything else returns 500
@router.api_route("", methods=["GET", "HEAD"])
async def get_survey(survey: Dict[str, Any] = Depends(get_survey_document)):
    """Return the full static survey document."""
    return JSONResponse(status_code=200, content=survey)


@router.api_route("", methods=["POST", "PUT", "PATCH", "DELETE", "OPTIONS"])
async def survey_method_not_allowed(
    request: Request,
    error_payload: Dict[str, Any] = Depends(get_internal_server_error)
):
    """Stand-in for method not allowed on the read-only survey resource."""
    logger.warning(f"{request.method} on read-only survey resource")
    return JSONResponse(status_code=500, content=error_payload)


async def read_submission(request: Request) -> Dict[str, Any]:
    """
    Read the JSON body of a submission.
    A missing or non-JSON body is treated as carrying no answers, and so is
    one holding NaN or Infinity, which cannot be echoed back as JSON.
    """
    try:
        payload = await request.json()
        json.dumps(payload, allow_nan=False)
    except ValueError as e:
        logger.warning(f"Could not parse submission body: {e}")
        raise MissingAnswersError()

    if not isinstance(payload, dict):
        raise MissingAnswersError()

    return payload


def shape_errors(exc: ValidationError) -> ErrorResponse:
    """
    Convert pydantic errors inside the answers list to addressable errors.

    Raises:
        MissingAnswersError: If a failure sits above the answers list
    """
    errors = []
    for error in exc.errors():
        location = tuple(error["loc"])
        if location[:len(ANSWERS_LOCATION)] != ANSWERS_LOCATION:
            raise MissingAnswersError()
        pointer = "/".join(str(part) for part in location)
        errors.append(build_error(pointer, error["msg"]))
    return ErrorResponse(errors=errors)


# Survey answers handlers
@router.post("/{survey_id}/answers")
async def submit_answers(
    survey_id: str,
    request: Request,
    questions: List[Question] = Depends(get_questions)
):
    """
    Validate submitted answers against the survey questions.
    Returns the created surveyAnswers resource, or the validation errors.
    """
    payload_data = await read_submission(request)
    logger.debug(f"Submission for survey {survey_id}: {payload_data}")

    try:
        payload = SubmissionPayload.model_validate(payload_data)
    except ValidationError as e:
        response = shape_errors(e)
        logger.info(f"Submission for survey {survey_id} is malformed ({len(response.errors)} errors)")
        return JSONResponse(status_code=422, content=response.model_dump())

    answers = payload.get_answers()
    errors = validate_answers(questions, answers)

    if errors:
        logger.info(f"Submission for survey {survey_id} rejected with {len(errors)} errors")
        return JSONResponse(
            status_code=422,
            content=ErrorResponse(errors=errors).model_dump()
        )

    # Echo the answers exactly as they were submitted
    raw_answers = payload_data["data"]["attributes"]["answers"]
    answers_id = str(uuid.uuid4())

    logger.info(f"Submission {answers_id} for survey {survey_id} created")
    return JSONResponse(
        status_code=201,
        content=SurveyAnswersResponse.build(answers_id, raw_answers, survey_id).model_dump()
    )
