"""Pydantic schemas for YAML pipeline configuration."""

from pydantic import BaseModel, Field
from typing import List

DEFAULT_END_OF_SENTENCE = ".?!"
DEFAULT_OTHER_PUNCTUATION = ",\";:`(){}[]"


class LexerConfig(BaseModel):
    """Character classification tables used by the lexer."""
    end_of_sentence: str = Field(default=DEFAULT_END_OF_SENTENCE,
                                 description="Characters that terminate a sentence")
    other_punctuation: str = Field(default=DEFAULT_OTHER_PUNCTUATION,
                                   description="Characters that separate words without ending a sentence")

    class Config:
        extra = "forbid"

class SourceConfig(BaseModel):
    """How character sources read files."""
    encoding: str = Field(default="utf-8", description="Text encoding of input files")
    read_chunk_size: int = Field(default=8192, ge=1,
                                 description="Characters read from a file per underlying call")

    class Config:
        extra = "forbid"

class PipelineConfig(BaseModel):
    """Complete configuration for a parse."""
    version: int = Field(default=1, description="Config schema version")
    lexer: LexerConfig = Field(default_factory=LexerConfig)
    source: SourceConfig = Field(default_factory=SourceConfig)

    class Config:
        extra = "forbid"  # Strict validation

    def validate_tables(self) -> List[str]:
        """Validate classification tables and return any issues."""
        issues = []
        eos = self.lexer.end_of_sentence
        other = self.lexer.other_punctuation

        if not eos:
            issues.append("end_of_sentence table is empty")

        overlap = sorted(set(eos) & set(other))
        if overlap:
            issues.append(f"Characters in both tables: {overlap}")

        for name, table in (("end_of_sentence", eos), ("other_punctuation", other)):
            spaces = [repr(c) for c in table if c.isspace()]
            if spaces:
                issues.append(f"{name} contains whitespace: {', '.join(spaces)}")

        return issues
