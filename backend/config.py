"""
Survey Data Loader

This module loads the static survey definition and the canned error payloads
from a JSON file. The file defaults to config/survey.json in the project root
and can be pointed elsewhere with the SURVEY_DATA_PATH environment variable.
Server settings are read from the environment as well.
"""

import json
import os
from pathlib import Path

from schemas import SurveyDocument

# Get the project root directory (parent of backend directory)
PROJECT_ROOT = Path(__file__).parent.parent
CONFIG_PATH = Path(os.getenv("SURVEY_DATA_PATH", PROJECT_ROOT / "config" / "survey.json"))

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "4000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def load_config(path=CONFIG_PATH):
    """
    Load survey data from JSON file.

    Returns:
        dict: Document with "survey" and "errors" sections

    Raises:
        FileNotFoundError: If data file doesn't exist
        json.JSONDecodeError: If data file is invalid JSON
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(
            f"Survey data file not found at {path}. "
            "Please ensure config/survey.json exists or set SURVEY_DATA_PATH."
        )

    with open(path, 'r', encoding='utf-8') as f:
        config = json.load(f)

    return config


# Load survey data on module import; it is never written afterwards
SURVEY_CONFIG = load_config()
SURVEY = SurveyDocument.model_validate(SURVEY_CONFIG["survey"])
INTERNAL_SERVER_ERROR = SURVEY_CONFIG["errors"]["internalServerError"]
