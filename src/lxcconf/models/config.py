"""Configuration models."""

from pydantic import BaseModel, Field, validator


class LoaderConfig(BaseModel):
    """Loader configuration."""
    log_level: str = Field(default="INFO")
    strict_flags: bool = Field(default=False, description="Only accept 'up' for lxc.network.flags")
    strict_counts: bool = Field(default=False, description="Reject non-numeric lxc.pts/lxc.tty values")

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
