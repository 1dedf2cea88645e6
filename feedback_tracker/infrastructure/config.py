import os
from dataclasses import dataclass, field


@dataclass
class Settings:
    """Application configuration settings."""

    api_base_url: str = field(
        default_factory=lambda: os.getenv("FEEDBACK_API_URL", "http://localhost:5000/api")
    )
    api_token: str = field(
        default_factory=lambda: os.getenv("FEEDBACK_API_TOKEN", "")
    )
    request_timeout_seconds: float = field(
        default_factory=lambda: float(os.getenv("FEEDBACK_API_TIMEOUT", "10.0"))
    )
    user_email: str = field(
        default_factory=lambda: os.getenv("FEEDBACK_USER_EMAIL", "")
    )
    user_name: str = field(
        default_factory=lambda: os.getenv("FEEDBACK_USER_NAME", "")
    )
    user_role: str = field(
        default_factory=lambda: os.getenv("FEEDBACK_USER_ROLE", "Manager")
    )
    # Only used by the in-memory store to resolve "my" timeline.
    current_employee_id: int = field(
        default_factory=lambda: int(os.getenv("FEEDBACK_EMPLOYEE_ID", "0"))
    )
    use_mock_store: bool = field(
        default_factory=lambda: os.getenv("USE_MOCK_STORE", "false").lower() == "true"
    )
    log_level: str = field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "INFO")
    )


def get_settings() -> Settings:
    """Factory function to create settings instance."""
    return Settings()
