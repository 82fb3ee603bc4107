"""Observability configuration using Logfire.

`configure_logfire` runs once at startup from
`forum.util.di.container.create_container`.

Usage:
    import logfire

    # Structured logging
    logfire.info("Object uploaded", bucket=bucket, path=path)

    # Manual spans for critical operations
    with logfire.span("qiniu.write", path=path):
        ...
"""

import logfire

from forum.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Logs go to the console only, unless a token is configured or sending
    is explicitly enabled with OBSERVABILITY__SEND_TO_LOGFIRE.

    Args:
        settings: Application settings
    """
    # Priority: explicit setting > token presence > default (False)
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    elif settings.observability.logfire_token:
        send_to_logfire = True
    else:
        send_to_logfire = False

    config_kwargs = {
        "service_name": "forum-backend",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )


def instrument_httpx() -> None:
    """Instrument httpx with Logfire.

    Traces every outbound request, including calls to Qiniu.
    """
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
