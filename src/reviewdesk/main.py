"""Application entry point and composition root."""

import logging

import falcon
import falcon.asgi

from reviewdesk import __version__
from reviewdesk.application.services import NotificationBus, RecordStore, SyncCoordinator
from reviewdesk.application.services.notification_bus import SyncEvent
from reviewdesk.application.use_cases.document.delete_document import DeleteDocumentUseCase
from reviewdesk.application.use_cases.document.update_document import UpdateDocumentUseCase
from reviewdesk.application.use_cases.document.upload_document import UploadDocumentUseCase
from reviewdesk.application.use_cases.status.change_status import ChangeStatusUseCase
from reviewdesk.application.use_cases.status.get_status import GetStatusUseCase
from reviewdesk.application.use_cases.status.list_statuses import ListStatusesUseCase
from reviewdesk.config import Settings, get_settings
from reviewdesk.domain.exceptions import StorageFault
from reviewdesk.infrastructure.connectivity.http_probe import HttpConnectivityProbe
from reviewdesk.infrastructure.persistence.postgres.connection import create_pool
from reviewdesk.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from reviewdesk.infrastructure.remote.http_remote_authority import HttpRemoteAuthority
from reviewdesk.infrastructure.validation.file_validator import MimeTypeFileValidator
from reviewdesk.interfaces.api.middleware.cors import CORSMiddleware
from reviewdesk.interfaces.api.middleware.lifespan import LifespanMiddleware
from reviewdesk.interfaces.api.resources.documents import DocumentResource, DocumentsResource
from reviewdesk.interfaces.api.resources.health import HealthResource
from reviewdesk.interfaces.api.resources.status import DocumentStatusResource, StatusesResource
from reviewdesk.interfaces.api.resources.sync import SyncResource

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main() -> None:
    """CLI entry point."""
    print(f"ReviewDesk v{__version__}")


def _log_sync_event(event: SyncEvent) -> None:
    logger.info(
        "Sync event %s (synced=%s failed=%s error=%s)",
        event.type,
        event.synced_count,
        event.failed_count,
        event.error,
    )


async def _storage_fault(req, resp, ex, params):
    logger.error("Storage fault on %s %s: %s", req.method, req.path, ex)
    resp.status = falcon.HTTP_503
    resp.media = {"error": "Storage unavailable"}


def register_routes(
    app: falcon.asgi.App,
    record_store: RecordStore,
    coordinator: SyncCoordinator,
    file_validator: MimeTypeFileValidator,
) -> None:
    """Wire use cases and resources onto ``app``."""
    upload_document = UploadDocumentUseCase(record_store, file_validator)
    update_document = UpdateDocumentUseCase(record_store)
    delete_document = DeleteDocumentUseCase(record_store)
    change_status = ChangeStatusUseCase(record_store)
    get_status = GetStatusUseCase(record_store)
    list_statuses = ListStatusesUseCase(record_store)

    health = HealthResource(coordinator)
    app.add_error_handler(StorageFault, _storage_fault)
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    app.add_route("/v1/documents", DocumentsResource(upload_document, record_store))
    app.add_route(
        "/v1/documents/{document_id}",
        DocumentResource(record_store, update_document, delete_document),
    )
    app.add_route(
        "/v1/documents/{document_id}/status",
        DocumentStatusResource(get_status, change_status),
    )
    app.add_route("/v1/statuses", StatusesResource(list_statuses))
    app.add_route("/v1/sync", SyncResource(coordinator))


def create_reviewdesk_app(settings: Settings | None = None) -> falcon.asgi.App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    configure_logging("DEBUG" if settings.debug else settings.log_level)

    pool = create_pool(settings.database_url)
    record_store = RecordStore(create_uow_factory(pool))
    remote = HttpRemoteAuthority(settings.remote_url, timeout=settings.remote_timeout)
    probe = HttpConnectivityProbe(
        settings.connectivity_probe_url,
        interval=settings.connectivity_probe_interval,
    )
    bus = NotificationBus()
    bus.subscribe(_log_sync_event)
    coordinator = SyncCoordinator(record_store, remote, probe, bus)

    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app = falcon.asgi.App(
        middleware=[
            CORSMiddleware(cors_origins),
            LifespanMiddleware(pool, coordinator, probe, remote),
        ],
    )
    register_routes(
        app, record_store, coordinator, MimeTypeFileValidator(settings.max_file_size)
    )
    logger.info("ReviewDesk v%s configured (%s)", __version__, settings.environment)
    return app


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    uvicorn.run(create_reviewdesk_app(), host="0.0.0.0", port=8000)
