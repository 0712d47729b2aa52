"""
Data structures representing the output of a formatting job.

This module defines the `FormatResult` Pydantic model used by the CLI to
collect per-file outcomes for batch reports.
"""

from typing import List

from pydantic import BaseModel, Field


class FormatResult(BaseModel):
  """
  Container for the result of formatting one artifact.
  """

  code: str = Field(default="", description="The formatted module source.")
  errors: List[str] = Field(default_factory=list, description="List of error messages encountered.")
  success: bool = Field(default=True, description="True if the artifact was formatted.")
  unmatched_requires: List[str] = Field(
    default_factory=list,
    description="require() call sites left in the output because they could not be rewritten.",
  )

  @property
  def has_warnings(self) -> bool:
    """
    Check if the output still contains calls the rewriter skipped.

    Returns:
        True if one or more require() calls were left untouched.
    """
    return len(self.unmatched_requires) > 0
