"""Pydantic schemas for YAML delimiter configuration."""

import re
from pydantic import BaseModel, Field
from typing import List, Optional
from ..core.types import DelimiterKind, DelimiterRule

class BlastConfig(BaseModel):
    """Delimiter configuration for an application embedding BlastText."""
    version: int = Field(default=1, description="Config schema version")
    delimiter: DelimiterKind = Field(default=DelimiterKind.WORD,
                                     description="Delimiter rule: all|character|word|sentence|custom")
    pattern: Optional[str] = Field(default=None,
                                   description="Regular expression, required for the custom delimiter")
    locale: Optional[str] = Field(default=None,
                                  description="Locale used to resolve localization keys, e.g. de_DE")

    class Config:
        extra = "forbid"  # Strict validation

    def validate_rule(self) -> List[str]:
        """Validate the delimiter settings and return any issues."""
        issues = []

        if self.delimiter is DelimiterKind.CUSTOM:
            if not self.pattern:
                issues.append("Custom delimiter requires a non-empty pattern")
            else:
                try:
                    re.compile(self.pattern)
                except (re.error, OverflowError) as e:
                    issues.append(f"Illegal regular expression {self.pattern!r}: {e}")
        elif self.pattern is not None:
            issues.append(f"Delimiter '{self.delimiter.value}' does not take a pattern")

        return issues

    def to_rule(self) -> DelimiterRule:
        """Build the delimiter rule described by this config."""
        return DelimiterRule(self.delimiter, self.pattern)
