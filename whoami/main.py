"""Main module entrypoint for local runtime execution.

This module parses command-line flags, validates startup configuration and
launches the probe server over HTTP or TLS.
"""

from __future__ import annotations

import argparse
import logging
import os
import ssl
from collections.abc import Sequence

import uvicorn

from whoami.bootstrap import bootstrap_create_application
from whoami.config import AppSettings, SettingsLoadError, config_configure_logging, config_load_settings

logger = logging.getLogger(__name__)


def main_parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line flags overriding environment settings.

    Args:
        argv: Argument vector without the program name; defaults to `sys.argv[1:]`.

    Returns:
        argparse.Namespace: Parsed flags; unset flags are None.

    Raises:
        SystemExit: Raised by argparse on invalid flags.
    """

    argument_parser = argparse.ArgumentParser(description="Network introspection and diagnostic probe server")
    argument_parser.add_argument("--port", dest="application_port", type=int, help="Listening port (default 80)")
    argument_parser.add_argument("--host", dest="application_host", type=str, help="Listening interface")
    argument_parser.add_argument("--name", dest="whoami_name", type=str, help="Display name reported by identity endpoints")
    argument_parser.add_argument("--cert", dest="tls_cert_path", type=str, help="TLS certificate path")
    argument_parser.add_argument("--key", dest="tls_key_path", type=str, help="TLS private key path")
    argument_parser.add_argument("--cacert", dest="tls_ca_path", type=str, help="Client CA path enabling mutual TLS")
    argument_parser.add_argument("--log-level", dest="log_level", type=str, help="Log level for the whoami logger")
    return argument_parser.parse_args(argv)


def main_resolve_tls_options(settings: AppSettings) -> dict[str, object]:
    """Build uvicorn TLS keyword arguments from settings.

    TLS is enabled only when both certificate and key files exist. A configured
    CA path turns on mutual TLS with mandatory client certificates.

    Args:
        settings: Validated runtime settings.

    Returns:
        dict[str, object]: Keyword arguments for `uvicorn.run`, empty for plain HTTP.

    Raises:
        SettingsLoadError: Raised when the configured CA file does not exist.
    """

    if not (os.path.isfile(settings.tls_cert_path) and os.path.isfile(settings.tls_key_path)):
        logger.info("TLS material not found, serving plain HTTP")
        return {}

    tls_options: dict[str, object] = {
        "ssl_certfile": settings.tls_cert_path,
        "ssl_keyfile": settings.tls_key_path,
    }
    if settings.tls_ca_path is not None:
        if not os.path.isfile(settings.tls_ca_path):
            raise SettingsLoadError(f"Client CA file not found: {settings.tls_ca_path}")
        tls_options["ssl_ca_certs"] = settings.tls_ca_path
        tls_options["ssl_cert_reqs"] = ssl.CERT_REQUIRED
        logger.info("Serving TLS with mutual client certificate verification")
    else:
        logger.info("Serving TLS")
    return tls_options


def main(argv: Sequence[str] | None = None) -> None:
    """Run the probe server with validated startup configuration.

    Args:
        argv: Optional argument vector for testing; defaults to process arguments.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration or TLS material is invalid.
    """

    parsed_arguments = main_parse_arguments(argv)
    settings = config_load_settings(**vars(parsed_arguments))
    config_configure_logging(settings.log_level)

    tls_options = main_resolve_tls_options(settings)
    application = bootstrap_create_application(settings)
    logger.info("Starting up on port %d", settings.application_port)
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
        log_level=settings.log_level,
        **tls_options,
    )


if __name__ == "__main__":
    main()
