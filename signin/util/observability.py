"""Observability configuration using Logfire.

Domain services, use cases and the Google adapter emit spans and
structured events directly:

    import logfire

    with logfire.span("user_service.save", user_id=str(user.id)):
        ...
        logfire.info("User saved", user_id=str(user.id))

``configure_logfire`` must run before the app is created; in production
``scripts/start_app.py`` handles this.
"""

import logfire
from fastapi import FastAPI

from signin.config import Settings

SERVICE_NAME = "signin-api"
SERVICE_VERSION = "0.1.0"


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Telemetry is sent to the Logfire cloud only when explicitly enabled or
    when a token is configured (``OBSERVABILITY__LOGFIRE_TOKEN``); otherwise
    output stays on the console.

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
        "service_name": SERVICE_NAME,
        "service_version": SERVICE_VERSION,
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


def instrument_fastapi(app: FastAPI) -> None:
    """Instrument FastAPI application with Logfire.

    Traces every request with method, path and client host. Cookie headers
    are never captured since they carry session tokens.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        result = {**attributes}

        if hasattr(request, "method"):
            result["method"] = request.method

        if hasattr(request, "url"):
            result["path"] = request.url.path

        if hasattr(request, "client") and request.client:
            result["client_host"] = request.client.host

        return result

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_map_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_httpx() -> None:
    """Instrument httpx with Logfire.

    Covers the outbound calls to Google's signing key endpoint.
    """
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
