"""Résumé models: skills and career timelines."""

from pydantic import BaseModel, Field, field_validator


class Skill(BaseModel):
    """A technology with a self-assessed rating."""

    tech: str = Field(..., description="Technology name")
    rating: int = Field(..., ge=0, le=100, description="Rating as a percentage")


class Education(BaseModel):
    """A diploma on the education timeline."""

    year: str
    title: str
    description: str = ""
    city: str = ""

    @field_validator("year", mode="before")
    @classmethod
    def _year_as_text(cls, value):
        return str(value)


class Certificate(BaseModel):
    """A course certificate."""

    year: str
    title: str
    description: str = ""
    provider: str = ""
    link: str = ""

    @field_validator("year", mode="before")
    @classmethod
    def _year_as_text(cls, value):
        return str(value)

    @field_validator("title", "provider")
    @classmethod
    def _strip(cls, value: str) -> str:
        return value.strip()


class Experience(BaseModel):
    """A position on the professional timeline."""

    year: str
    title: str
    company: str = ""
    description: str = ""
    city: str = ""
    technologies: list[str] = Field(default_factory=list)

    @field_validator("year", mode="before")
    @classmethod
    def _year_as_text(cls, value):
        return str(value)


class Resume(BaseModel):
    """Everything shown on the single-page résumé besides projects."""

    name: str = ""
    headline: str = ""
    email: str = ""
    skills: list[Skill] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    certificates: list[Certificate] = Field(default_factory=list)
    experience: list[Experience] = Field(default_factory=list)

    def top_skills(self, limit: int = 5) -> list[Skill]:
        """Highest-rated skills, stable for equal ratings."""
        return sorted(self.skills, key=lambda s: -s.rating)[:limit]
