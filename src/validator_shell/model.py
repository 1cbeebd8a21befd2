# src/validator_shell/model.py (Shell Layer)
from typing import Optional

from pydantic import BaseModel, Field


class BatchEntry(BaseModel):
    """Outcome of validating one document during a batch run."""
    path: str
    valid: bool
    code: Optional[str] = Field(default=None, description="ErrorCode value, or INPUT_ERROR when the file could not be used.")
    token: Optional[str] = None
    line: Optional[int] = None
    reason: Optional[str] = None


class SampleDocument(BaseModel):
    """A sample file shipped with the project, shown in interactive mode."""
    name: str
    expectation: str
