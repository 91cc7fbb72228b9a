"""
Configuration settings for the Responder and the Presenter host.
Environment variables override defaults.
"""
import os
from dataclasses import dataclass, field
from typing import List


@dataclass
class Settings:
    """Runtime configuration"""

    # Responder
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    PUBLIC_HOST: str = "localhost"
    DEBUG: bool = False

    # CORS
    CORS_ORIGINS: List[str] = field(default_factory=lambda: ["*"])

    # Presenter
    BACKEND_URL: str = "http://localhost:5000/"
    FRONTEND_HOST: str = "0.0.0.0"
    FRONTEND_PORT: int = 3000

    # Logging
    LOG_LEVEL: str = "INFO"

    def __post_init__(self):
        """Load from environment variables"""
        for key in self.__dataclass_fields__:
            env_value = os.getenv(key)
            if env_value is not None:
                field_type = self.__dataclass_fields__[key].type
                if field_type == bool:
                    setattr(self, key, env_value.lower() in ("true", "1", "yes"))
                elif field_type == int:
                    setattr(self, key, int(env_value))
                elif field_type == List[str]:
                    setattr(self, key, [v.strip() for v in env_value.split(",") if v.strip()])
                else:
                    setattr(self, key, env_value)

    @property
    def public_url(self) -> str:
        """URL the Responder announces on startup."""
        return f"http://{self.PUBLIC_HOST}:{self.PORT}"


# Global settings instance
settings = Settings()
