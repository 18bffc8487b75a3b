"""
Pydantic models for the basics tour.

TourConfig holds the handful of knobs the tour has; SectionResult and
TourReport carry what each section computed so it can be printed or checked.
"""

from typing import Any, List, Optional
from pydantic import BaseModel, Field, field_validator


SECTION_NAMES = [
    "basic_functions",
    "immutability",
    "integers_and_numbers",
    "booleans",
    "strings",
    "tuples",
    "pipelines",
    "lists",
    "arrays",
    "sequences",
    "recursive_functions",
]


class TourConfig(BaseModel):
    """Settings for a tour run"""
    walk_start: float = Field(
        5.0,
        description="Starting value of the random walk"
    )
    walk_length: int = Field(
        100,
        description="Number of random walk elements to materialize",
        ge=0,
        le=10_000
    )
    random_seed: Optional[int] = Field(
        None,
        description="Seed for the random walk; None gives a different walk each run"
    )
    sections: Optional[List[str]] = Field(
        None,
        description="Sections to run, in tour order; None runs all of them"
    )

    @field_validator('sections')
    @classmethod
    def validate_sections(cls, v):
        """Validate section names are known"""
        if v is not None:
            unknown = [name for name in v if name not in SECTION_NAMES]
            if unknown:
                raise ValueError(f"Unknown sections: {unknown}. Valid sections: {SECTION_NAMES}")
        return v

    def get_section_names(self) -> List[str]:
        """Selected sections, always in tour order"""
        if self.sections is None:
            return list(SECTION_NAMES)
        return [name for name in SECTION_NAMES if name in self.sections]


class Example(BaseModel):
    """One illustrated value"""
    label: str
    value: Any


class SectionResult(BaseModel):
    """Everything a tour section computed"""
    name: str
    examples: List[Example] = Field(default_factory=list)

    def add(self, label: str, value: Any) -> Any:
        self.examples.append(Example(label=label, value=value))
        return value

    def get(self, label: str) -> Any:
        for example in self.examples:
            if example.label == label:
                return example.value
        raise KeyError(f"No example '{label}' in section '{self.name}'")

    @property
    def title(self) -> str:
        return self.name.replace("_", " ").title()


class TourReport(BaseModel):
    """Result of running the tour"""
    sections: List[SectionResult] = Field(default_factory=list)
    total_time_ms: float = Field(0.0, ge=0.0)

    def section(self, name: str) -> SectionResult:
        for result in self.sections:
            if result.name == name:
                return result
        raise KeyError(f"Section '{name}' was not run")
