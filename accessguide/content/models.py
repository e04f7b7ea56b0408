"""
Guidance Entry Models.

One GuidanceEntry explains one audit question: why it matters, quick tips,
how to check it, which standards apply, worked examples per audience,
graded solutions, and links to related questions.

Entries are frozen and use tuples for every collection, so a built store can
be shared freely without anyone mutating it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

# =============================================================================
# Classification
# =============================================================================

ModuleGroup = Literal[
    "before-arrival",
    "getting-in",
    "during-visit",
    "service-support",
    "organisational-commitment",
    "events",
]

Category = Literal[
    "physical-access",
    "information-communication-marketing",
    "customer-service",
    "operations-policy-procedure",
    "people-culture",
]

ResourceLevel = Literal["low", "medium", "high"]
ImplementedBy = Literal["diy", "staff", "contractor", "specialist"]
Impact = Literal["quick-win", "moderate", "significant"]

# Audience tag that every caller is considered to match
GENERAL_AUDIENCE = "general"

AUDIENCE_TAGS = (
    "accommodation",
    "restaurant-cafe",
    "attraction",
    "retail",
    "tour-operator",
    "event-venue",
    "local-government",
    "health-wellness",
    GENERAL_AUDIENCE,
)

# Tips without an explicit priority sort after every ranked tip
UNRANKED_TIP_PRIORITY = 99


def _tuple_of(raw: dict, key: str, factory) -> tuple:
    """Build a tuple of parts from an optional list field."""
    return tuple(factory(item) for item in raw.get(key) or [])


def _strings(raw: dict, key: str) -> tuple[str, ...]:
    return tuple(str(item) for item in raw.get(key) or [])


# =============================================================================
# Why It Matters
# =============================================================================


@dataclass(frozen=True)
class Statistic:
    """A figure that emphasises why a question matters."""

    value: str
    context: str
    source: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> Statistic:
        return cls(value=data["value"], context=data["context"], source=data.get("source"))


@dataclass(frozen=True)
class Quote:
    """A lived-experience quotation."""

    text: str
    attribution: str

    @classmethod
    def from_dict(cls, data: dict) -> Quote:
        return cls(text=data["text"], attribution=data["attribution"])


@dataclass(frozen=True)
class WhyItMatters:
    """Explanatory text with an optional statistic and quote."""

    text: str
    statistic: Statistic | None = None
    quote: Quote | None = None

    @classmethod
    def from_dict(cls, data: dict) -> WhyItMatters:
        statistic = data.get("statistic")
        quote = data.get("quote")
        return cls(
            text=data["text"],
            statistic=Statistic.from_dict(statistic) if statistic else None,
            quote=Quote.from_dict(quote) if quote else None,
        )


@dataclass(frozen=True)
class Tip:
    """A quick tip, optionally ranked and expandable."""

    text: str
    icon: str = ""
    detail: str | None = None
    priority: int | None = None

    @property
    def sort_priority(self) -> int:
        """Priority used for ordering (unranked tips go last)."""
        return UNRANKED_TIP_PRIORITY if self.priority is None else self.priority

    @classmethod
    def from_dict(cls, data: dict) -> Tip:
        priority = data.get("priority")
        return cls(
            text=data["text"],
            icon=data.get("icon", ""),
            detail=data.get("detail"),
            priority=int(priority) if priority is not None else None,
        )


# =============================================================================
# Media
# =============================================================================


@dataclass(frozen=True)
class Image:
    """An illustrative image; alt text is required."""

    src: str
    alt: str
    caption: str | None = None
    image_type: str | None = None  # photo, diagram, comparison, measurement
    credit: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> Image:
        return cls(
            src=data["src"],
            alt=data["alt"],
            caption=data.get("caption"),
            image_type=data.get("type"),
            credit=data.get("credit"),
        )


@dataclass(frozen=True)
class Video:
    """A hosted explainer video."""

    youtube_id: str
    title: str
    duration: str
    description: str | None = None
    has_transcript: bool = False
    has_captions: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> Video:
        return cls(
            youtube_id=data["youtube_id"],
            title=data["title"],
            duration=data["duration"],
            description=data.get("description"),
            has_transcript=bool(data.get("has_transcript", False)),
            has_captions=bool(data.get("has_captions", False)),
        )


@dataclass(frozen=True)
class Resource:
    """An external guide, checklist, or tool."""

    title: str
    url: str
    resource_type: str
    source: str
    description: str | None = None
    is_australian: bool = False
    is_free: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> Resource:
        return cls(
            title=data["title"],
            url=data["url"],
            resource_type=data.get("type", "website"),
            source=data.get("source", ""),
            description=data.get("description"),
            is_australian=bool(data.get("is_australian", False)),
            is_free=bool(data.get("is_free", False)),
        )


# =============================================================================
# How To Check
# =============================================================================


@dataclass(frozen=True)
class Measurement:
    """Target / acceptable value / unit for a verification step."""

    target: str
    acceptable: str
    unit: str

    @classmethod
    def from_dict(cls, data: dict) -> Measurement:
        return cls(target=data["target"], acceptable=data["acceptable"], unit=data["unit"])


@dataclass(frozen=True)
class CheckStep:
    """One verification step."""

    text: str
    measurement: Measurement | None = None
    image: Image | None = None

    @classmethod
    def from_dict(cls, data: dict) -> CheckStep:
        measurement = data.get("measurement")
        image = data.get("image")
        return cls(
            text=data["text"],
            measurement=Measurement.from_dict(measurement) if measurement else None,
            image=Image.from_dict(image) if image else None,
        )


@dataclass(frozen=True)
class HowToCheck:
    """Ordered steps for verifying a question on site."""

    title: str
    steps: tuple[CheckStep, ...]
    tools: tuple[str, ...] = ()
    estimated_time: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> HowToCheck:
        return cls(
            title=data["title"],
            steps=_tuple_of(data, "steps", CheckStep.from_dict),
            tools=_strings(data, "tools"),
            estimated_time=data.get("estimated_time"),
        )


# =============================================================================
# Standards
# =============================================================================


@dataclass(frozen=True)
class StandardCitation:
    """The primary standard a question is measured against."""

    code: str
    requirement: str
    section: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> StandardCitation:
        return cls(code=data["code"], requirement=data.get("requirement", ""), section=data.get("section"))


@dataclass(frozen=True)
class RelatedStandard:
    """A secondary standard and why it is relevant."""

    code: str
    relevance: str

    @classmethod
    def from_dict(cls, data: dict) -> RelatedStandard:
        return cls(code=data["code"], relevance=data.get("relevance", ""))


@dataclass(frozen=True)
class StandardsReference:
    """Primary citation, related citations, and a plain-language gloss."""

    primary: StandardCitation
    plain_english: str
    related: tuple[RelatedStandard, ...] = ()
    compliance_note: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> StandardsReference:
        return cls(
            primary=StandardCitation.from_dict(data["primary"]),
            plain_english=data.get("plain_english", ""),
            related=_tuple_of(data, "related", RelatedStandard.from_dict),
            compliance_note=data.get("compliance_note"),
        )


# =============================================================================
# Examples and Solutions
# =============================================================================


@dataclass(frozen=True)
class Example:
    """A worked example tagged with the audience it applies to."""

    audience: str
    scenario: str
    solution: str
    audience_label: str = ""
    outcome: str | None = None
    cost: str | None = None
    timeframe: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> Example:
        return cls(
            audience=str(data.get("audience", GENERAL_AUDIENCE)).strip().lower(),
            scenario=data["scenario"],
            solution=data["solution"],
            audience_label=data.get("audience_label", ""),
            outcome=data.get("outcome"),
            cost=data.get("cost"),
            timeframe=data.get("timeframe"),
        )


@dataclass(frozen=True)
class Solution:
    """A remediation option graded by the resources it needs."""

    title: str
    description: str
    resource_level: ResourceLevel
    cost_range: str
    time_required: str
    implemented_by: ImplementedBy
    impact: Impact
    steps: tuple[str, ...] = ()
    notes: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> Solution:
        return cls(
            title=data["title"],
            description=data["description"],
            resource_level=data["resource_level"],
            cost_range=data.get("cost_range", ""),
            time_required=data.get("time_required", ""),
            implemented_by=data.get("implemented_by", "diy"),
            impact=data.get("impact", "moderate"),
            steps=_strings(data, "steps"),
            notes=data.get("notes"),
        )


# =============================================================================
# Cross References
# =============================================================================


@dataclass(frozen=True)
class RelatedQuestionRef:
    """
    A by-id link to another entry.

    The target is not guaranteed to exist in the store; callers resolve it
    lazily and treat a miss as "unavailable".
    """

    question_id: str
    display_text: str
    relationship: str = ""
    module_code: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> RelatedQuestionRef:
        return cls(
            question_id=str(data["question_id"]),
            display_text=data.get("display_text") or data.get("question_text", ""),
            relationship=data.get("relationship", ""),
            module_code=str(data.get("module_code", "")),
        )


# =============================================================================
# Guidance Entry
# =============================================================================


@dataclass(frozen=True)
class GuidanceEntry:
    """One unit of help content keyed by its audit question id."""

    question_id: str
    module_code: str
    module_group: ModuleGroup
    category: Category
    title: str
    summary: str
    why_it_matters: WhyItMatters
    question_text: str = ""
    tips: tuple[Tip, ...] = ()
    how_to_check: HowToCheck | None = None
    standards_reference: StandardsReference | None = None
    examples: tuple[Example, ...] = ()
    solutions: tuple[Solution, ...] = ()
    related_questions: tuple[RelatedQuestionRef, ...] = ()
    covered_question_ids: tuple[str, ...] = ()
    keywords: tuple[str, ...] = ()
    image: Image | None = None
    additional_images: tuple[Image, ...] = ()
    video: Video | None = None
    resources: tuple[Resource, ...] = ()
    last_updated: str | None = None

    @property
    def resolvable_ids(self) -> tuple[str, ...]:
        """Primary question id followed by every covered question id."""
        return (self.question_id, *self.covered_question_ids)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GuidanceEntry:
        """
        Create an entry from a dictionary (JSON).

        Args:
            data: Dictionary from a content file

        Returns:
            GuidanceEntry instance

        Raises:
            KeyError: A required field is missing
            TypeError: A field has the wrong shape
        """
        how_to_check = data.get("how_to_check")
        standards = data.get("standards_reference")
        image = data.get("image")
        video = data.get("video")

        return cls(
            question_id=str(data["question_id"]),
            module_code=str(data["module_code"]),
            module_group=data["module_group"],
            category=data["category"],
            title=data["title"],
            summary=data["summary"],
            why_it_matters=WhyItMatters.from_dict(data["why_it_matters"]),
            question_text=data.get("question_text", ""),
            tips=_tuple_of(data, "tips", Tip.from_dict),
            how_to_check=HowToCheck.from_dict(how_to_check) if how_to_check else None,
            standards_reference=StandardsReference.from_dict(standards) if standards else None,
            examples=_tuple_of(data, "examples", Example.from_dict),
            solutions=_tuple_of(data, "solutions", Solution.from_dict),
            related_questions=_tuple_of(data, "related_questions", RelatedQuestionRef.from_dict),
            covered_question_ids=_strings(data, "covered_question_ids"),
            keywords=_strings(data, "keywords"),
            image=Image.from_dict(image) if image else None,
            additional_images=_tuple_of(data, "additional_images", Image.from_dict),
            video=Video.from_dict(video) if video else None,
            resources=_tuple_of(data, "resources", Resource.from_dict),
            last_updated=data.get("last_updated"),
        )
