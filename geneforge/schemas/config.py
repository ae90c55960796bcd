from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

DisplayMode = Literal["raw", "triplet"]


class AssistantSettings(BaseModel):
    """Connection settings for the text-generation endpoint.

    No endpoint means the offline simulated assistant is used.
    """
    endpoint: Optional[str] = None
    model: str = "default"
    api_key_env: str = "GENEFORGE_API_KEY"
    timeout: float = Field(default=30.0, gt=0)
    max_tokens: int = Field(default=512, gt=0)
    max_fragment_length: int = Field(default=2000, gt=0)

    model_config = ConfigDict(extra="forbid")


class EditorSettings(BaseModel):
    display_mode: DisplayMode = "raw"
    line_width: int = Field(default=60, ge=3)
    show_complement: bool = True

    model_config = ConfigDict(extra="forbid")


class AppSettings(BaseModel):
    """Top-level settings file."""
    version: str = "1.0"
    assistant: AssistantSettings = Field(default_factory=AssistantSettings)
    editor: EditorSettings = Field(default_factory=EditorSettings)

    model_config = ConfigDict(extra="forbid")
