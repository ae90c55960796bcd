from datetime import datetime, timezone
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

SequenceKind = Literal["dna", "rna", "protein", "unknown"]
MotifCategory = Literal["start_codon", "stop_codon", "restriction_site", "promoter"]
AnnotationCategory = Literal[
    "start_codon",
    "stop_codon",
    "restriction_site",
    "promoter",
    "orf",
    "misc",
]
Composition = Dict[str, int]


class Region(BaseModel):
    """Half-open interval [start, end) over canonical sequence indices."""
    start: int
    end: int

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _validate_bounds(self):
        if self.start < 0:
            raise ValueError(f"Region start must be >= 0, got {self.start}")
        if self.end <= self.start:
            raise ValueError(f"Region end must be > start, got [{self.start}, {self.end})")
        return self

    @property
    def span(self) -> int:
        return self.end - self.start

    def contains(self, index: int) -> bool:
        return self.start <= index < self.end

    def overlaps(self, other: "Region") -> bool:
        return self.start < other.end and other.start < self.end

    def fits(self, length: int) -> bool:
        return self.end <= length


class MotifHit(Region):
    """A literal motif match."""
    category: MotifCategory
    pattern: str
    name: str


class MotifRegions(BaseModel):
    start_codons: List[MotifHit] = Field(default_factory=list)
    stop_codons: List[MotifHit] = Field(default_factory=list)
    restriction_sites: List[MotifHit] = Field(default_factory=list)
    promoters: List[MotifHit] = Field(default_factory=list)

    def all_hits(self) -> List[MotifHit]:
        return [*self.start_codons, *self.stop_codons, *self.restriction_sites, *self.promoters]

    def counts(self) -> Dict[str, int]:
        return {
            "start_codons": len(self.start_codons),
            "stop_codons": len(self.stop_codons),
            "restriction_sites": len(self.restriction_sites),
            "promoters": len(self.promoters),
        }


class ORF(Region):
    """Start-to-stop span on the forward strand (stop codon included)."""
    length: int

    @model_validator(mode="after")
    def _validate_length(self):
        if self.length != self.end - self.start:
            raise ValueError("length does not match end - start")
        if self.length % 3 != 0:
            raise ValueError("ORF length must be a multiple of 3")
        return self

    @property
    def frame(self) -> int:
        return self.start % 3


class Annotation(BaseModel):
    """Tagged record handed to the viewer."""
    region: Region
    label: str
    color: str = Field(default="#3B82F6", pattern=r"^#[0-9A-Fa-f]{6}$")
    category: AnnotationCategory = "misc"
    direction: Literal[1, -1] = 1

    model_config = ConfigDict(extra="forbid")


class Note(BaseModel):
    region: Region
    title: str
    content: str = ""
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = ConfigDict(extra="forbid")


class ParsedSequence(BaseModel):
    raw: str
    canonical: str
    kind: SequenceKind

    @property
    def length(self) -> int:
        return len(self.canonical)


class SequenceAnalysis(BaseModel):
    """Everything derived from one input text."""
    kind: SequenceKind
    canonical: str
    length: int
    gc_content: Optional[float] = None
    composition: Composition = Field(default_factory=dict)
    percentages: Dict[str, float] = Field(default_factory=dict)
    orfs: List[ORF] = Field(default_factory=list)
    motifs: MotifRegions = Field(default_factory=MotifRegions)
    highlights: List[Annotation] = Field(default_factory=list)
