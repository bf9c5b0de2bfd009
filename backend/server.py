from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from config import HOST, PORT, LOG_LEVEL, SURVEY
from models import MissingAnswersError
from survey import router as survey_router
import logging
import uvicorn

# Configure logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Survey Answers Mock API")

# Add CORS middleware; answers preflight requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def add_cors_headers(request: Request, call_next):
    """Stamp permissive CORS headers on every response, with or without an Origin."""
    response = await call_next(request)
    response.headers.setdefault("Access-Control-Allow-Origin", "*")
    response.headers.setdefault("Access-Control-Allow-Headers", "*")
    return response


# Include survey router
app.include_router(survey_router)


@app.exception_handler(MissingAnswersError)
async def missing_answers_handler(request: Request, exc: MissingAnswersError):
    """Missing answers are reported with a generic server error status."""
    logger.warning(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=500, content={"error": exc.message})


@app.on_event("startup")
async def startup_event():
    """Log the loaded survey on application startup."""
    logger.info(
        f"Survey {SURVEY.get_survey_id()} loaded with "
        f"{len(SURVEY.get_questions())} questions"
    )
    logger.info(f"Survey API is running on port {PORT}")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
