"""
Assistant boundary: sends a sequence fragment plus an instruction to a
text-generation backend and turns every outcome into an AssistantReply.

The backend is injected (TextGenerator), so nothing here requires network
access unless an HttpTextGenerator is configured.
"""
import json
import logging
import os
from typing import Optional, Protocol
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from geneforge.schemas.assistant import AssistantReply, AssistantRequest
from geneforge.schemas.config import AssistantSettings
from geneforge.schemas.sequence import Region, SequenceKind

logger = logging.getLogger(__name__)

ANALYZE_INSTRUCTION = (
    "Describe the likely biological function of this {kind} fragment. "
    "Mention recognizable motifs and give a confidence estimate."
)


class AssistantError(RuntimeError):
    """The text-generation backend failed or returned something unusable."""


class TextGenerator(Protocol):
    def generate(self, request: AssistantRequest) -> str:
        ...


def build_prompt(request: AssistantRequest) -> str:
    location = ""
    if request.region is not None:
        location = f" (positions {request.region.start + 1}-{request.region.end})"
    note = " The fragment was truncated." if request.truncated else ""
    return (
        f"{request.instruction}\n\n"
        f"Sequence type: {request.kind.upper()}{location}.{note}\n"
        f"Sequence:\n{request.fragment}"
    )


class HttpTextGenerator:
    """POST the prompt as JSON to a text-generation endpoint and read back ``text``."""

    def __init__(self, settings: AssistantSettings):
        if not settings.endpoint:
            raise ValueError("HttpTextGenerator requires an endpoint")
        self.settings = settings

    def _build_request(self, prompt: str) -> Request:
        payload = {
            "model": self.settings.model,
            "prompt": prompt,
            "max_tokens": self.settings.max_tokens,
        }
        req = Request(self.settings.endpoint, data=json.dumps(payload).encode("utf-8"), method="POST")
        req.add_header("Content-Type", "application/json")
        req.add_header("Accept", "application/json")
        req.add_header("User-Agent", "geneforge-assistant/1.0")
        api_key = os.environ.get(self.settings.api_key_env)
        if api_key:
            req.add_header("Authorization", f"Bearer {api_key}")
        return req

    def generate(self, request: AssistantRequest) -> str:
        req = self._build_request(build_prompt(request))
        try:
            with urlopen(req, timeout=self.settings.timeout) as resp:
                body = resp.read().decode("utf-8")
        except HTTPError as exc:
            detail = ""
            try:
                detail = exc.read().decode("utf-8")
            except (OSError, UnicodeDecodeError):
                detail = ""
            raise AssistantError(f"HTTP {exc.code}: {exc.reason}. Response: {detail}") from exc
        except (URLError, TimeoutError, OSError) as exc:
            raise AssistantError(f"Request to {self.settings.endpoint} failed: {exc}") from exc

        try:
            data = json.loads(body)
        except json.JSONDecodeError as exc:
            raise AssistantError("Endpoint returned invalid JSON") from exc
        text = data.get("text") if isinstance(data, dict) else None
        if not isinstance(text, str) or not text.strip():
            raise AssistantError("Endpoint response has no 'text' field")
        return text.strip()


class SimulatedTextGenerator:
    """Offline stand-in with canned, motif-driven answers."""

    CUSTOM_RESPONSES = (
        "This sequence appears to be a promoter region with moderate activity in E. coli. It contains "
        "-10 and -35 elements that are recognized by bacterial RNA polymerase.",
        "Based on codon usage analysis, this sequence is optimized for expression in mammalian cells, "
        "particularly human cell lines.",
        "This region contains a ribosome binding site (RBS) that would facilitate protein translation "
        "in bacterial systems.",
        "The selected sequence doesn't appear to contain any known regulatory elements or "
        "protein-coding regions. It may serve as a spacer or have an unknown function.",
    )

    def generate(self, request: AssistantRequest) -> str:
        if request.task == "custom":
            # Deterministic pick so repeated prompts give the same answer.
            idx = (len(request.fragment) + len(request.instruction)) % len(self.CUSTOM_RESPONSES)
            return self.CUSTOM_RESPONSES[idx]
        return self._analyze(request.kind, request.fragment.upper())

    def _analyze(self, kind: SequenceKind, fragment: str) -> str:
        if kind == "dna":
            if "ATGC" in fragment:
                return (
                    "This DNA subsequence appears to contain a start codon followed by potential "
                    "coding region. It might be part of a gene encoding a protein.\n\n"
                    "Confidence: Medium (65%)"
                )
            if "TATA" in fragment:
                return (
                    "This sequence contains a TATA box motif, which is a common promoter element in "
                    "eukaryotes. It likely functions as a binding site for RNA polymerase II and "
                    "associated transcription factors.\n\nConfidence: High (85%)"
                )
            if "AATAAA" in fragment:
                return (
                    "This sequence contains an AATAAA motif, which is a polyadenylation signal in "
                    "eukaryotes. It marks the site where the pre-mRNA will be cleaved and a poly(A) "
                    "tail added.\n\nConfidence: High (80%)"
                )
            if len(fragment) >= 30:
                return (
                    "This appears to be a coding sequence with no immediately recognizable motifs. "
                    "It may encode part of a protein with unknown function. Further analysis with "
                    "protein prediction tools is recommended.\n\nConfidence: Low (40%)"
                )
            return (
                "This short DNA sequence doesn't contain any easily recognizable motifs. It could be "
                "a regulatory element, a spacer region, or part of a larger functional unit.\n\n"
                "Confidence: Very Low (25%)"
            )
        if kind == "protein":
            return (
                "This is a protein sequence fragment. To better understand its function, consider "
                "running a protein structure prediction algorithm or comparing it against known "
                "protein domains.\n\nConfidence: Medium (50%)"
            )
        return (
            "Unable to analyze this sequence type. Please ensure you have selected a valid DNA, "
            "RNA, or protein sequence."
        )


def generator_from_settings(settings: AssistantSettings) -> TextGenerator:
    if settings.endpoint:
        return HttpTextGenerator(settings)
    return SimulatedTextGenerator()


class AssistantService:
    """
    Validates user input, builds the request and calls the generator.
    Generator failures are logged and returned as ``ok=False`` replies.
    """

    def __init__(self, generator: Optional[TextGenerator] = None, settings: Optional[AssistantSettings] = None):
        self.settings = settings or AssistantSettings()
        self.generator = generator or generator_from_settings(self.settings)

    @property
    def is_simulated(self) -> bool:
        return isinstance(self.generator, SimulatedTextGenerator)

    def _fragment(self, canonical: str, region: Optional[Region]) -> tuple:
        fragment = canonical if region is None else canonical[region.start:region.end]
        limit = self.settings.max_fragment_length
        if len(fragment) > limit:
            return fragment[:limit], True
        return fragment, False

    def _call(self, request: AssistantRequest) -> AssistantReply:
        try:
            text = self.generator.generate(request)
        except Exception as e:
            logger.warning("Assistant request failed: %s", e)
            return AssistantReply(ok=False, text=f"Error: Failed to analyze the sequence ({e}). Please try again.")
        return AssistantReply(ok=True, text=text)

    def analyze_selection(
        self,
        canonical: str,
        region: Optional[Region],
        kind: SequenceKind,
    ) -> AssistantReply:
        if not canonical:
            return AssistantReply(ok=False, text="Please enter a sequence first")
        if region is None:
            return AssistantReply(ok=False, text="Please select a region of the sequence first")
        if not region.fits(len(canonical)):
            return AssistantReply(ok=False, text="Selection is outside the current sequence")
        fragment, truncated = self._fragment(canonical, region)
        request = AssistantRequest(
            task="analyze",
            instruction=ANALYZE_INSTRUCTION.format(kind=kind.upper()),
            fragment=fragment,
            kind=kind,
            region=region,
            truncated=truncated,
        )
        return self._call(request)

    def run_prompt(
        self,
        canonical: str,
        instruction: str,
        kind: SequenceKind,
        region: Optional[Region] = None,
    ) -> AssistantReply:
        if not instruction or not instruction.strip():
            return AssistantReply(ok=False, text="Please enter a prompt")
        if not canonical:
            return AssistantReply(ok=False, text="Please enter a sequence first")
        if region is not None and not region.fits(len(canonical)):
            region = None
        fragment, truncated = self._fragment(canonical, region)
        request = AssistantRequest(
            instruction=instruction.strip(),
            fragment=fragment,
            kind=kind,
            region=region,
            truncated=truncated,
        )
        return self._call(request)
