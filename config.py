"""
Configuration management using Pydantic Settings for validation and environment handling.
"""

from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from pathlib import Path


class ShellConfig(BaseSettings):
    """Interactive shell presentation settings."""

    use_color: bool = Field(
        default=True,
        description="Colorize menu lines and warnings with ANSI codes"
    )
    clear_screen: bool = Field(
        default=True,
        description="Clear the terminal before showing the main menu"
    )
    pause_after_action: bool = Field(
        default=True,
        description="Wait for Enter after each menu action"
    )

    class Config:
        env_prefix = "RECIPE_SHELL_"


class Settings(BaseSettings):
    """Main application settings."""

    # Environment
    environment: str = Field(
        default="development",
        description="Application environment"
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level"
    )

    # Nutrition
    calorie_threshold: float = Field(
        default=300.0,
        description="Total calories above which a recipe triggers a warning"
    )

    # Component configurations
    shell: ShellConfig = Field(default_factory=ShellConfig)

    class Config:
        env_prefix = "RECIPE_BOOK_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"

    @field_validator("calorie_threshold")
    @classmethod
    def _positive_threshold(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("calorie_threshold must be positive")
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get application settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(config_file: Optional[Path] = None) -> Settings:
    """Load settings from a YAML file or the environment."""
    global _settings

    if config_file and Path(config_file).exists():
        import yaml
        with open(config_file) as f:
            config_data = yaml.safe_load(f) or {}

        transformed_data = {}

        # Top-level fields that Settings expects
        for key in ['environment', 'log_level', 'calorie_threshold']:
            if key in config_data:
                transformed_data[key] = config_data[key]

        # Nested shell section; flat keys are accepted as a shortcut
        shell_data = dict(config_data.get('shell') or {})
        for key in ['use_color', 'clear_screen', 'pause_after_action']:
            if key in config_data:
                shell_data.setdefault(key, config_data[key])
        if shell_data:
            transformed_data['shell'] = ShellConfig(**shell_data)

        _settings = Settings(**transformed_data)
    else:
        _settings = Settings()

    return _settings
