## Pydantic Schemas for Structured Output
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)


class CourseModule(CamelModel):
    module_number: int = Field(ge=1)
    title: str
    topics: List[str]
    duration: str
    is_preview: bool
    requires_premium: bool = False
    practical_projects: List[str]


class Course(CamelModel):
    id: str
    title: str
    description: str
    difficulty: str
    duration: str
    price: int
    original_price: int
    rating: float
    students: int
    is_premium: bool
    technologies: List[str]
    outcomes: List[str]
    modules: List[CourseModule] = Field(min_length=1)


class Roadmap(CamelModel):
    title: str
    current_level: str
    target_level: str
    estimated_timeframe: str
    confidence_score: int = Field(ge=0, le=100)
    salary_increase: str
    courses: List[Course] = Field(min_length=1)


class AIInsights(CamelModel):
    career_analysis: str
    market_demand: str
    competitive_advantage: str


class Recommendation(CamelModel):
    id: str
    type: str
    title: str
    description: str
    priority: str
    estimated_time: str
    is_free: bool


class CareerRoadmap(CamelModel):
    roadmap: Roadmap
    ai_insights: AIInsights
    next_steps: List[str]
    skill_gaps: List[str]
    recommendations: List[Recommendation]


class AIFeatures(CamelModel):
    personalized_path: str
    mentor_matching: str
    career_support: str
    certification: str


class CareerImpact(CamelModel):
    salary_increase: str
    time_to_completion: str
    job_opportunities: List[str]
    portfolio_projects: List[str]


class CustomCourse(CamelModel):
    course: Course
    ai_features: AIFeatures
    career_impact: CareerImpact


class BookingSlot(BaseModel):
    date: str = Field(pattern=r"^\d{4}-\d{2}-\d{2}$")
    time: str = Field(pattern=r"^\d{2}:\d{2}$")
    label: str
