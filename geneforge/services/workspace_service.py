"""
WorkspaceService - file-based persistence of the editor session.
Current sequence, user annotations and notes; every change is written straight back.
"""
import json
import logging
from pathlib import Path
from typing import List, Optional

import pandas as pd
from pydantic import BaseModel, Field, ValidationError

from geneforge import USER_DIR
from geneforge.core.alphabet import sanitize
from geneforge.schemas.sequence import Annotation, AnnotationCategory, Note, Region

logger = logging.getLogger(__name__)


class Workspace(BaseModel):
    sequence: str = ""
    annotations: List[Annotation] = Field(default_factory=list)
    notes: List[Note] = Field(default_factory=list)


class WorkspaceService:
    """
    Owns the user-authored records (annotations, notes) keyed by Region.
    Analysis results are never stored here; they are recomputed from the sequence.
    """
    DEFAULT_PATH = USER_DIR / "workspace.json"
    DEFAULT_ANNOTATION_COLOR = "#3B82F6"

    ANNOTATION_COLUMNS = ["Label", "Start", "End", "Length", "Category", "Direction", "Color"]
    NOTE_COLUMNS = ["Title", "Start", "End", "Content", "Created"]

    def __init__(self, path: Optional[Path] = None):
        self.path = path or self.DEFAULT_PATH
        self.workspace = self.load()

    def load(self) -> Workspace:
        """Load the workspace file; missing or corrupt files give an empty workspace."""
        if not self.path.exists():
            return Workspace()
        try:
            return Workspace(**json.loads(self.path.read_text()))
        except (OSError, json.JSONDecodeError, ValidationError, TypeError) as e:
            logger.warning("Error loading workspace %s: %s", self.path, e)
            return Workspace()

    def save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(self.workspace.model_dump_json(indent=2))

    @property
    def sequence(self) -> str:
        return self.workspace.sequence

    @property
    def annotations(self) -> List[Annotation]:
        return list(self.workspace.annotations)

    @property
    def notes(self) -> List[Note]:
        return list(self.workspace.notes)

    def set_sequence(self, text: str) -> str:
        """Store the canonical form of ``text`` and return it."""
        canonical = sanitize(text)
        length = len(canonical)
        kept_annotations = [a for a in self.workspace.annotations if a.region.fits(length)]
        kept_notes = [n for n in self.workspace.notes if n.region.fits(length)]
        dropped = (len(self.workspace.annotations) - len(kept_annotations)) + (
            len(self.workspace.notes) - len(kept_notes)
        )
        if dropped:
            logger.info("Dropped %d annotation(s)/note(s) beyond new sequence length %d", dropped, length)
        self.workspace = Workspace(sequence=canonical, annotations=kept_annotations, notes=kept_notes)
        self.save()
        return self.workspace.sequence

    def _check_region(self, region: Region) -> None:
        if not region.fits(len(self.workspace.sequence)):
            raise ValueError(
                f"Region {region.start + 1}-{region.end} exceeds sequence length "
                f"{len(self.workspace.sequence)}"
            )

    def add_annotation(
        self,
        region: Region,
        label: str,
        color: Optional[str] = None,
        category: AnnotationCategory = "misc",
        direction: int = 1,
    ) -> Annotation:
        if not label or not label.strip():
            raise ValueError("Annotation label is required")
        self._check_region(region)
        annotation = Annotation(
            region=region,
            label=label.strip(),
            color=color or self.DEFAULT_ANNOTATION_COLOR,
            category=category,
            direction=direction,
        )
        self.workspace.annotations.append(annotation)
        self.save()
        return annotation

    def remove_annotation(self, idx: int) -> bool:
        if not 0 <= idx < len(self.workspace.annotations):
            return False
        del self.workspace.annotations[idx]
        self.save()
        return True

    def add_note(self, region: Region, title: str, content: str = "") -> Note:
        if not title or not title.strip():
            raise ValueError("Note title is required")
        self._check_region(region)
        note = Note(region=region, title=title.strip(), content=content)
        self.workspace.notes.append(note)
        self.save()
        return note

    def remove_note(self, idx: int) -> bool:
        if not 0 <= idx < len(self.workspace.notes):
            return False
        del self.workspace.notes[idx]
        self.save()
        return True

    def clear(self) -> None:
        """Drop the sequence together with everything keyed to it."""
        self.workspace = Workspace()
        self.save()

    def annotations_frame(self) -> pd.DataFrame:
        rows = [
            {
                "Label": a.label,
                "Start": a.region.start + 1,
                "End": a.region.end,
                "Length": a.region.span,
                "Category": a.category,
                "Direction": "forward" if a.direction == 1 else "reverse",
                "Color": a.color,
            }
            for a in self.workspace.annotations
        ]
        return pd.DataFrame(rows, columns=self.ANNOTATION_COLUMNS)

    def notes_frame(self) -> pd.DataFrame:
        rows = [
            {
                "Title": n.title,
                "Start": n.region.start + 1,
                "End": n.region.end,
                "Content": n.content,
                "Created": n.created_at.isoformat(timespec="seconds"),
            }
            for n in self.workspace.notes
        ]
        return pd.DataFrame(rows, columns=self.NOTE_COLUMNS)
