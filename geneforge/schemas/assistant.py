from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

from geneforge.schemas.sequence import Region, SequenceKind


class AssistantRequest(BaseModel):
    """What is sent to the text generator."""
    task: Literal["analyze", "custom"] = "custom"
    instruction: str
    fragment: str
    kind: SequenceKind
    region: Optional[Region] = None
    truncated: bool = False


class AssistantReply(BaseModel):
    """Outcome shown to the user; ``ok=False`` carries a recoverable error message."""
    ok: bool
    text: str

    model_config = ConfigDict(frozen=True)
