"""Schema management for SQL-backed providers.

Protean builds SQLAlchemy tables lazily when a repository's DAO is first
touched, so every aggregate and entity DAO is forced before ``create_all``.
"""

import structlog
from protean.domain import Domain
from sqlalchemy import create_engine

logger = structlog.get_logger(__name__)

SQL_PROVIDERS = ("sqlite", "postgresql")


def _sql_providers(domain: Domain):
    for name, provider in domain.providers.items():
        if provider.conn_info["provider"] in SQL_PROVIDERS:
            yield name, provider


def setup_db(domain: Domain):
    """Create tables for every aggregate and entity on SQL providers."""
    with domain.domain_context():
        for name, provider in _sql_providers(domain):
            records = list(domain.registry.aggregates.values()) + list(domain.registry.entities.values())
            for record in records:
                if record.cls.meta_.provider == name:
                    domain.repository_for(record.cls)._dao  # noqa: B018

            engine = create_engine(provider.conn_info["database_uri"])
            provider._metadata.create_all(engine)
            engine.dispose()
            logger.info("Schema created", domain=domain.name, provider=name)


def drop_db(domain: Domain):
    with domain.domain_context():
        for name, provider in _sql_providers(domain):
            engine = create_engine(provider.conn_info["database_uri"])
            provider._metadata.drop_all(engine)
            engine.dispose()
            logger.info("Schema dropped", domain=domain.name, provider=name)
