from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, TypeAdapter, ValidationError, field_validator
from pydantic.alias_generators import to_camel


TagStatus = Literal["good", "warning", "missing"]

_http_url = TypeAdapter(HttpUrl)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class AnalyzeRequest(BaseModel):
    url: str

    @field_validator("url")
    @classmethod
    def check_url(cls, v: str) -> str:
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            v = f"https://{v}"
        # Validated as HttpUrl but kept verbatim; HttpUrl would append a trailing slash
        try:
            _http_url.validate_python(v)
        except ValidationError as e:
            raise ValueError(f"Invalid url: {e.errors()[0]['msg']}") from e
        return v


class Tag(CamelModel):
    name: str
    value: Optional[str] = None
    status: TagStatus
    message: Optional[str] = None
    char_count: Optional[int] = None


class Recommendation(CamelModel):
    type: Literal["warning", "success"]
    message: str


class SeoAnalysisResult(CamelModel):
    url: str
    title: Tag
    description: Tag
    canonical: Tag
    robots: Tag
    viewport: Tag
    og_tags: tuple[Tag, ...]
    twitter_tags: tuple[Tag, ...]
    score: int = Field(ge=0, le=100)
    total_tags: int
    issues_count: int
    og_image: Optional[str] = None
    twitter_image: Optional[str] = None
    recommendations: tuple[Recommendation, ...]
    analyzed_at: str
