"""
Data model shared by the analyzers, the engine and the API.

Attributes are snake_case; JSON uses camelCase aliases so responses keep
the shape the dashboard expects (seoScore, aiScore, keyDifferences...).
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Model(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Enumerations ---

class ResultType(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class FactorStatus(str, Enum):
    PASS = "pass"
    WARNING = "warning"
    FAIL = "fail"


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class VisibilityLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Platform(str, Enum):
    CHATGPT = "chatgpt"
    PERPLEXITY = "perplexity"
    CLAUDE = "claude"
    BARD = "bard"


class Factor(str, Enum):
    """AI-visibility factors, in catalogue order."""

    CRAWLABILITY = "Public Crawlability"
    HTML_STRUCTURE = "HTML Structure"
    CONTENT_CLARITY = "Content Clarity"
    SCANNABILITY = "Content Scannability"
    SUMMARY = "TL;DR & Summary"
    QA_FORMAT = "Q&A Format"
    SCHEMA_MARKUP = "Schema Markup"
    TRUSTED_ENTITIES = "Trusted Entities"
    DATA_EXTRACTION = "Data Extraction"
    READABILITY = "Readability Level"
    FRESHNESS = "Content Freshness"
    CREDIBILITY = "Credibility Markers"


class DifferenceCategory(str, Enum):
    SEO = "seo"
    AI = "ai"
    CONTENT = "content"
    VISIBILITY = "visibility"


class Side(str, Enum):
    URL1 = "url1"
    URL2 = "url2"


# --- Page content ---

class Heading(_Model):
    model_config = ConfigDict(frozen=True)

    level: int = Field(ge=1, le=6)
    text: str = ""


class Image(_Model):
    model_config = ConfigDict(frozen=True)

    src: str = ""
    alt: str = ""
    has_alt: bool = False


class Link(_Model):
    model_config = ConfigDict(frozen=True)

    href: str = ""
    text: str = ""
    is_internal: bool = False


class ContentRecord(_Model):
    """Normalized page content. The only input to every analyzer."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    meta_description: str = ""
    headings: tuple[Heading, ...] = ()
    images: tuple[Image, ...] = ()
    links: tuple[Link, ...] = ()
    content: str = ""
    has_schema: bool = False
    schema_types: tuple[str, ...] = ()
    load_time_ms: int = Field(default=0, ge=0, alias="loadTime")
    word_count: int = Field(default=0, ge=0)


# --- Rule results ---

class CheckResult(_Model):
    type: ResultType
    title: str
    description: str
    details: str | None = None
    metrics: dict[str, str | int] | None = None


SeoResult = CheckResult
GeoResult = CheckResult


# --- AI platform visibility ---

class FactorResult(_Model):
    factor: Factor
    score: int = Field(ge=0, le=100)
    description: str
    status: FactorStatus


class Recommendation(_Model):
    priority: Priority
    action: str
    description: str
    impact: str


class AiVisibilityAssessment(_Model):
    overall_score: int = Field(ge=0, le=100)
    summary: str
    factors: list[FactorResult]
    recommendations: list[Recommendation]

    def factor(self, factor: Factor) -> FactorResult | None:
        return next((f for f in self.factors if f.factor == factor), None)


# --- Content suggestions ---

class BlogTitle(_Model):
    title: str
    target: str


class Faq(_Model):
    question: str
    answer: str


class AiImprovement(_Model):
    action: str
    description: str
    impact: Priority
    priority: int


class ContentSuggestions(_Model):
    missing_keywords: list[str] = Field(default_factory=list)
    blog_titles: list[BlogTitle] = Field(default_factory=list)
    content_structure: list[str] = Field(default_factory=list)
    faqs: list[Faq] = Field(default_factory=list)
    ai_visibility: dict[Platform, VisibilityLevel] = Field(
        default_factory=lambda: {p: VisibilityLevel.LOW for p in Platform}
    )
    ai_improvements: list[AiImprovement] = Field(default_factory=list)


# --- Reports ---

class AuditOptions(_Model):
    include_traditional_seo: bool = True
    include_geo: bool = True
    include_content_suggestions: bool = True


class AuditReport(_Model):
    id: int | None = None
    url: str
    seo_score: int = Field(ge=0, le=100)
    ai_score: int = Field(ge=0, le=100)
    traditional_seo_results: list[CheckResult]
    geo_results: list[CheckResult]
    content_suggestions: ContentSuggestions
    created_at: datetime | None = None


# --- Comparison ---

class KeyDifference(_Model):
    category: DifferenceCategory
    aspect: str
    url1_value: str
    url2_value: str
    recommendation: str


class Differences(_Model):
    seo_score_diff: int
    ai_score_diff: int
    ai_visibility_diff: int
    better_performer: Side
    key_differences: list[KeyDifference]


class ComparisonResult(_Model):
    url1_report: AuditReport
    url2_report: AuditReport
    url1_ai_visibility: AiVisibilityAssessment
    url2_ai_visibility: AiVisibilityAssessment
    differences: Differences
