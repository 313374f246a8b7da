# src/grader/model.py
from typing import Optional
from pydantic import BaseModel, Field

HTMLFILE_DEFAULT = "index.html"
CHECKSFILE_DEFAULT = "checks.json"


class GraderOptions(BaseModel):
    """
    Parsed command line options for a single grading run.
    Passed explicitly to the GradeController.
    """
    html_file: str = Field(default=HTMLFILE_DEFAULT, description="Path to the local HTML file.")
    url: Optional[str] = Field(default=None, description="Remote page to fetch instead of html_file.")
    checks_file: str = Field(default=CHECKSFILE_DEFAULT, description="Path to the JSON array of selectors.")
