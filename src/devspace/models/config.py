"""User configuration models."""

from typing import Optional
from pydantic import BaseModel, Field, validator


class UserConfig(BaseModel):
    """Per-user settings shared by all projects."""
    shell: str = Field(default="/bin/zsh", description="Command attached on shell")
    dotfiles: Optional[str] = Field(None, description="Host dotfiles directory to mount")
    log_level: str = Field(default="WARNING")
    stop_timeout: int = Field(default=10, ge=0)
    ask_stop: bool = Field(default=False, description="Ask whether to stop after the shell exits")

    @validator("log_level")
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    class Config:
        """Pydantic config."""
        extra = "ignore"
