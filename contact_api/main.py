#run it with uvicorn contact_api.main:app --reload
from fastapi import FastAPI
from dotenv import load_dotenv
from slowapi.errors import RateLimitExceeded
from typing import Optional
import logging
import os

# Load environment variables from .env file
load_dotenv()

# Set up logging
logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

from contact_api.api.api_router import api_router
from contact_api.core.config import Settings, get_settings
from contact_api.core.contact_service import ContactService, Mailer
from contact_api.core.cors import install_cors
from contact_api.core.mailer import ResendMailer
from contact_api.core.rate_limit import configure_contact_limit, limiter, rate_limit_exceeded_handler


def create_app(settings: Optional[Settings] = None, mailer: Optional[Mailer] = None) -> FastAPI:
    """
    Build the application.

    The confirmation template is read here, once; a missing template file
    fails startup rather than the first request. The contact rate limit
    comes from these settings; its counters are shared process-wide.
    """
    settings = settings or get_settings()
    if mailer is None:
        mailer = ResendMailer(
            api_key=settings.resend_api_key,
            api_url=settings.resend_api_url,
            timeout=settings.email_timeout,
        )

    app = FastAPI(title="Contact API", version="1.0.0")

    install_cors(app, settings.origin_list)

    app.state.limiter = limiter
    configure_contact_limit(settings.contact_rate_limit)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    app.state.settings = settings
    app.state.contact_service = ContactService.from_settings(settings, mailer)

    app.include_router(api_router)

    @app.get("/api/health")
    def health_check():
        """
        Health check endpoint.

        Reports only whether delivery is configured, never the values.
        """
        return {
            "status": "ok",
            "config": {
                "email_user": bool(settings.email_user),
                "team_inbox": bool(settings.effective_team_inbox),
                "resend_api_key": bool(settings.resend_api_key),
            },
        }

    if not settings.resend_api_key:
        logger.warning("⚠️ RESEND_API_KEY is not set; contact submissions will fail to send")
    logger.info(f"✅ Contact API ready ({len(settings.origin_list)} allowed origins)")
    return app


app = create_app()


def run():
    """Local development server; production runs under an external ASGI server"""
    settings = get_settings()
    if settings.is_production:
        logger.info("APP_ENV=production, not starting the development server")
        return

    import uvicorn
    logger.info(f"🚀 Server is running on port {settings.port}")
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
