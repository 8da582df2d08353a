from pydantic import BaseModel


class JobScrapeResult(BaseModel):
    title: str | None = None
    # Never populated by the regex scraper.
    company: str | None = None
    location: str | None = None
    jd: str = ""
