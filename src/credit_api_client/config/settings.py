from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client and test-suite settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="CREDIT_API_",
        case_sensitive=False,
        extra="ignore",
    )

    # Credit API
    base_uri: str = "http://localhost"
    port: int = 8088
    base_path: str = "/api/v1"
    http_timeout_seconds: float = 5.0

    # Run the acceptance suite against the live API instead of the fake transport
    live: bool = False

    # Logfire
    logfire_token: str = ""
    logfire_environment: str = "local"

    @property
    def api_url(self) -> str:
        """Get the base URL every request path is joined to."""
        base_path = "/" + self.base_path.strip("/") if self.base_path.strip("/") else ""
        return f"{self.base_uri.rstrip('/')}:{self.port}{base_path}"


settings = Settings()
