"""Run the feedback API with uvicorn: ``python -m api``."""
import uvicorn

from api.app import create_app, log_startup_banner
from api.core.config import Settings, get_settings
from api.repositories.feedback_store import FeedbackStore


class FeedbackServer(uvicorn.Server):
    """uvicorn server that logs the readiness banner once the socket is bound."""

    def __init__(self, config: uvicorn.Config, settings: Settings, store: FeedbackStore) -> None:
        super().__init__(config)
        self.settings = settings
        self.store = store

    async def startup(self, sockets=None) -> None:
        # a failed bind exits inside super().startup(), before the banner
        await super().startup(sockets=sockets)
        if self.started and not self.should_exit:
            log_startup_banner(self.settings, self.store)


def build_server(settings: Settings | None = None) -> FeedbackServer:
    settings = settings or get_settings()
    app = create_app(settings)
    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
        access_log=settings.app_env != "prod",
    )
    return FeedbackServer(config, settings, app.state.feedback_store)


def main() -> None:
    build_server().run()


if __name__ == "__main__":
    main()
