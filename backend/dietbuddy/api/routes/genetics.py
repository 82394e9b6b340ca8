import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from dietbuddy.api.deps import get_genetics_service
from dietbuddy.core.config import get_config
from dietbuddy.services.genetics.analysis import GeneticAnalysisError, GeneticAnalysisService
from dietbuddy.services.genetics.models import GeneticAnalysisResult

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/upload", response_model=GeneticAnalysisResult)
async def upload_genetic_csv(
    file: UploadFile = File(...),
    service: GeneticAnalysisService = Depends(get_genetics_service),
):
    """
    Upload a genotype CSV (rsid, chromosome, position, genotype) to generate a
    genetic nutrition report. The report replaces any previously stored one.

    - **file**: The CSV file. Optional columns: trait, interpretation, sample_id.
    """
    settings = get_config().genetics
    file_name = file.filename or ""
    if not file_name.lower().endswith(tuple(settings.allowed_extensions)):
        raise HTTPException(status_code=400, detail="Invalid file format. Please upload a .csv file")

    content = await file.read()
    if len(content) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum size is {settings.max_upload_bytes // (1024 * 1024)} MB",
        )

    try:
        return await service.analyze_upload(content, file_name)
    except GeneticAnalysisError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Error processing genetic upload %s", file_name)
        raise HTTPException(status_code=500, detail=f"Internal Server Error: {str(e)}")


@router.get("/result", response_model=GeneticAnalysisResult)
async def get_genetic_result(service: GeneticAnalysisService = Depends(get_genetics_service)):
    result = service.get_result()
    if result is None:
        raise HTTPException(status_code=404, detail="No genetic analysis result stored")
    return result


@router.delete("/result")
async def clear_genetic_result(service: GeneticAnalysisService = Depends(get_genetics_service)):
    return {"cleared": service.clear()}
