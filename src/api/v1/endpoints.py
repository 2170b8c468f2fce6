from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse
from pydantic import BaseModel
from typing import List
import glob
import os
import threading
import logging

from src.core.converter import convert_directory
from src.core.models import ConversionOutcome
from src.utils.config import load_config

router = APIRouter()

logger = logging.getLogger(__name__)

# One conversion at a time per process
_run_lock = threading.Lock()


class ConvertResponse(BaseModel):
    status: str
    converted: int
    elapsed_ms: float
    message: str
    outcomes: List[ConversionOutcome]


class OutputsResponse(BaseModel):
    status: str
    files: List[str]


def run_conversion() -> ConvertResponse:
    config = load_config()
    with _run_lock:
        _, summary = convert_directory(config["INPUT_DIR"], config["OUTPUT_DIR"])
    return ConvertResponse(
        status="success",
        converted=summary.converted,
        elapsed_ms=summary.elapsed_ms,
        message=summary.message,
        outcomes=summary.outcomes,
    )


@router.post("/convert", response_model=ConvertResponse)
def convert():
    try:
        return run_conversion()
    except OSError as e:
        logger.error(f"Error running conversion: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Error running conversion: {str(e)}")


@router.get("/outputs", response_model=OutputsResponse)
def list_outputs():
    output_dir = load_config()["OUTPUT_DIR"]
    files = sorted(os.path.basename(f) for f in glob.glob(os.path.join(output_dir, "*.json")))
    return OutputsResponse(status="success", files=files)


@router.get("/outputs/{filename}")
def get_output(filename: str):
    output_dir = load_config()["OUTPUT_DIR"]
    file_path = os.path.join(output_dir, os.path.basename(filename))
    if not os.path.isfile(file_path) or not filename.endswith(".json"):
        raise HTTPException(status_code=404, detail="File not found")
    return FileResponse(file_path, media_type="application/json")
