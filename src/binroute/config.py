"""Application configuration and settings management."""

from typing import Annotated, Any

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="BINROUTE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Waste Collection Route Optimizer API"
    api_prefix: str = "/api"
    simulated_delay_seconds: float = Field(
        default=0.0,
        ge=0.0,
        description="Pause before dispatching a solve, used by demo clients to show a progress state.",
    )
    tour_two_opt: bool = Field(
        default=False,
        description="Apply 2-opt refinement to nearest-neighbour tours unless the request overrides it.",
    )
    priority_keywords: Annotated[tuple[str, ...], NoDecode] = Field(
        default=("main", "central", "avenue"),
        description="Location keywords that mark a bin as sitting on a high-traffic street.",
    )
    max_truck_capacity_kg: int = Field(
        default=100_000,
        ge=1,
        description="Largest capacity accepted by the capacity-selection table.",
    )
    default_start_lat: float = Field(default=40.7128, ge=-90.0, le=90.0)
    default_start_lng: float = Field(default=-74.0060, ge=-180.0, le=180.0)
    frontend_allowed_origins: Annotated[tuple[str, ...], NoDecode] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:8080",
            "http://127.0.0.1:8080",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("frontend_allowed_origins", "priority_keywords", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()
