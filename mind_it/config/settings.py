from pathlib import Path
from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

class Settings(BaseSettings):
    """Application settings with validation"""
    
    # API Configuration
    GEMINI_API_KEY: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY")
    )
    GEMINI_MODEL_NAME: str = "gemini-3-pro-preview"
    GEMINI_FAST_MODEL_NAME: str = "gemini-2.5-flash-lite"
    GEMINI_THINKING_MODEL_NAME: str = "gemini-3-pro-preview"
    GEMINI_THINKING_BUDGET: int = Field(default=32768, ge=0)
    
    # Session Configuration
    TICK_INTERVAL_SECONDS: float = Field(default=1.0, gt=0)
    
    # Path Configuration (derived from BASE_DIR unless set)
    BASE_DIR: Path = Field(default_factory=Path.cwd)
    DATA_DIR: Optional[Path] = None
    LOG_DIR: Optional[Path] = None
    DEFAULT_DB_PATH: Optional[Path] = None
    
    # Web Configuration
    WEB_PORT: int = 8000
    WEB_HOST: str = "localhost"
    
    # Development Configuration
    DEBUG: bool = False
    ENV: str = "production"
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    @model_validator(mode="after")
    def derive_paths(self) -> "Settings":
        if self.DATA_DIR is None:
            self.DATA_DIR = self.BASE_DIR / "data"
        if self.LOG_DIR is None:
            self.LOG_DIR = self.BASE_DIR / "logs"
        if self.DEFAULT_DB_PATH is None:
            self.DEFAULT_DB_PATH = self.DATA_DIR / "mind_it.db"
        return self
    
    def validate_paths(self) -> None:
        """Ensure all required paths exist"""
        for path in [self.DATA_DIR, self.LOG_DIR]:
            path.mkdir(parents=True, exist_ok=True)

settings = Settings()
settings.validate_paths()
