from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # App
    app_env: str = "development"
    app_debug: bool = True
    app_host: str = "0.0.0.0"
    app_port: int = 8000

    # CORS
    allowed_origins: str = "*"  # comma-separated, e.g. "https://app.example.com,https://admin.example.com"

    # Engines
    enabled_engines: str = "openai,gemini,simulated"  # comma-separated engine names the API accepts
    simulated_engine_delay_seconds: float = 1.5
    profile_engine: str = "openai"  # engine used for domain profiles and prompt generation

    # OpenAI
    openai_api_key: str = ""
    openai_model: str = "gpt-4o"
    openai_api_url: str = "https://api.openai.com/v1/chat/completions"
    openai_timeout_seconds: float = 60.0

    # Rate limiting (slowapi limit string)
    scoring_rate_limit: str = "120/minute"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False  # set True in production for structured JSON logs

    # Sentry
    sentry_dsn: str = ""  # leave empty to disable

    @property
    def enabled_engine_names(self) -> list[str]:
        return [name.strip() for name in self.enabled_engines.split(",") if name.strip()]


settings = Settings()


def validate_settings_for_production() -> None:
    """Validate critical settings. Called on startup in non-test environments."""
    errors: list[str] = []

    if not settings.enabled_engine_names:
        errors.append("ENABLED_ENGINES must name at least one engine")

    if settings.simulated_engine_delay_seconds < 0:
        errors.append("SIMULATED_ENGINE_DELAY_SECONDS must not be negative")

    if settings.app_env == "production":
        if settings.allowed_origins == "*":
            errors.append("ALLOWED_ORIGINS must not be '*' in production")
        if settings.app_debug:
            errors.append("APP_DEBUG must be false in production")
        if "openai" in settings.enabled_engine_names and not settings.openai_api_key:
            errors.append("OPENAI_API_KEY must be set when the openai engine is enabled")

    if errors:
        raise SystemExit("Configuration errors:\n  - " + "\n  - ".join(errors))
