import logfire

from .version import VERSION
from .env import env


__all__ = (
    'configure_logging',
)


def configure_logging() -> None:
    """Route missive's logfire records to the console and, with a token, to logfire."""
    logfire.configure(
        service_name='missive' + ('-dev' if env.dev else ''),
        service_version=VERSION,
        token=env.logfire_token or None,
        send_to_logfire='if-token-present',
        environment='development' if env.dev else 'production',
        console=None if env.dev else False
    )
