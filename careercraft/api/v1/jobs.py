from fastapi import APIRouter, Query, Request, status
from fastapi.responses import JSONResponse

from careercraft.core.rate_limit import rate_limit
from careercraft.services.job_scrape import scrape_job

router = APIRouter()


@router.get("/job-scrape")
@rate_limit()
async def job_scrape(request: Request, url: str | None = Query(default=None)):
    _ = request
    if not url:
        return JSONResponse({"error": "Missing url"}, status_code=status.HTTP_400_BAD_REQUEST)
    result = await scrape_job(url)
    # Unpopulated fields are left out of the body rather than sent as null.
    return JSONResponse(result.model_dump(exclude_none=True))
