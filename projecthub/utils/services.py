"""Wiring of the data-access layer onto a Flask app."""

import logging

from flask import current_app

from projecthub.mock_api import MockApi, NetworkSimulator
from projecthub.repository import Repository
from projecthub.session import Session
from projecthub.utils.guard import SubmissionGuard
from projecthub.utils.storage import storage_from_config
from projecthub.utils.store import StoreAdapter

logger = logging.getLogger(__name__)

EXTENSION_KEY = "projecthub"


class Services:
    """Everything one process run shares: store, session, repository, API, guard."""

    def __init__(self, storage, config):
        self.store = StoreAdapter(storage, prefix=config.get("STORAGE_PREFIX", "projecthub_"))
        self.session = Session(self.store, default_theme=config.get("DEFAULT_THEME", "light"))
        self.repository = Repository(
            self.store, self.session, seed=config.get("SEED_DEMO_DATA", True)
        )
        self.api = MockApi(
            self.repository,
            self.session,
            NetworkSimulator(scale=config.get("LATENCY_SCALE", 1.0)),
        )
        self.guard = SubmissionGuard(grace_period=config.get("SUBMISSION_GRACE_SECONDS", 1.0))

    def close(self):
        self.guard.close()
        self.session.close()
        self.store.close()


def init_app(app, storage=None):
    """Build the services for ``app``; ``storage`` overrides STORAGE_BACKEND."""
    if storage is None:
        storage = storage_from_config(app.config)
    services = Services(storage, app.config)
    logger.info("Data layer ready on %s", type(storage).__name__)
    app.extensions[EXTENSION_KEY] = services
    return services


def get_services() -> Services:
    return current_app.extensions[EXTENSION_KEY]
