"""
Input record describing one generated artifact.

The compiler pipeline hands the formatter a set of text fragments per
document. Field aliases accept the camelCase keys used by the pipeline's
JSON output (`moduleName`, `concreteText`, ...) while Python callers may use
the snake_case names.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GeneratedModule(BaseModel):
  """
  Fragments from which a single TypeScript artifact is assembled.
  """

  model_config = ConfigDict(populate_by_name=True, frozen=True)

  module_name: str = Field("", alias="moduleName", description="Name of the generated module.")
  document_type: Optional[str] = Field(
    None,
    alias="documentType",
    description="Runtime type of the document node (e.g. 'ConcreteRequest').",
  )
  doc_text: Optional[str] = Field(None, alias="docText", description="Original document source for the doc comment.")
  concrete_text: str = Field(..., alias="concreteText", description="Serialized node as a source expression.")
  type_text: Optional[str] = Field(None, alias="typeText", description="Generated type declarations.")
  hash: Optional[str] = Field(None, description="Build hash recorded in the header comment.")
  source_hash: str = Field("", alias="sourceHash", description="Hash of the document source stamped on the node.")
