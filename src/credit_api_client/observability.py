import logfire

from credit_api_client.config.settings import Settings, settings as default_settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure logfire for the client.

    Spans are always recorded locally; they are only exported when a token is
    set, and httpx is instrumented only in that case.
    """
    settings = settings or default_settings
    logfire.configure(
        service_name="credit-api-tests",
        token=settings.logfire_token or None,
        environment=settings.logfire_environment,
        send_to_logfire="if-token-present",
        console=False,
    )
    if settings.logfire_token:
        logfire.instrument_httpx()
