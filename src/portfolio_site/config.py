"""Configuration management using pydantic-settings."""

from pathlib import Path
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PORTFOLIO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Content sources
    content_dir: Path = Field(default=Path("./content"), description="Static content directory")
    data_dir: Path = Field(default=Path("./data"), description="Runtime data directory")

    # Contact form
    contact_recipient: str = Field(
        default="younesbouchbouk@gmail.com", description="Recipient of contact form drafts"
    )
    contact_subject: str = Field(
        default="Message from your portfolio", description="Default subject for contact drafts"
    )

    # Listing page defaults
    projects_default_category: str = Field(
        default="top", description="Category selected when the projects gallery opens"
    )
    blog_default_category: str = Field(
        default="all", description="Tag selected when the blog listing opens"
    )

    # Blog rendering
    excerpt_length: int = Field(default=160, description="Auto-excerpt length in characters")
    words_per_minute: int = Field(default=200, description="Reading speed for reading time")

    @property
    def blog_dir(self) -> Path:
        """Directory holding markdown blog posts."""
        return self.content_dir / "blog"

    @property
    def projects_file(self) -> Path:
        """YAML file with project records."""
        return self.content_dir / "projects.yaml"

    @property
    def resume_file(self) -> Path:
        """YAML file with skills and career timelines."""
        return self.content_dir / "resume.yaml"

    @property
    def preferences_file(self) -> Path:
        """JSON file persisting user preferences such as the theme."""
        return self.data_dir / "preferences.json"

    @property
    def export_dir(self) -> Path:
        """Directory for JSON exports."""
        return self.data_dir / "export"

    @property
    def logs_dir(self) -> Path:
        """Path to log files directory."""
        return self.data_dir / "logs"

    def ensure_directories(self) -> None:
        """Create all runtime directories if they don't exist."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.export_dir.mkdir(parents=True, exist_ok=True)
        self.logs_dir.mkdir(parents=True, exist_ok=True)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
