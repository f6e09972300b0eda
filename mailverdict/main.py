import logging
import random

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .routers import pages, verify
from .services.form_controller import FormController
from .verifier.pipeline import VerificationPipeline

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(message)s",
)
LOG = logging.getLogger("mailverdict")


def build_controller() -> FormController:
    pipeline = VerificationPipeline(
        rng=random.Random(settings.RANDOM_SEED),
        mx_delay=settings.MX_LOOKUP_DELAY,
        catch_all_delay=settings.CATCH_ALL_DELAY,
        mailbox_delay=settings.MAILBOX_DELAY,
    )
    return FormController(pipeline)


app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG)
app.state.controller = build_controller()

# ---------------------------------------------------
# CORS
# ---------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------
# Health check
# ---------------------------------------------------
@app.get("/health", tags=["health"])
async def health():
    return {"status": "ok"}

# ---------------------------------------------------
# Routers
# ---------------------------------------------------
app.include_router(pages.router, tags=["pages"])
app.include_router(verify.router, prefix="/verify", tags=["verify"])

LOG.info("%s ready (seed=%s)", settings.APP_NAME, settings.RANDOM_SEED)


def run():
    import uvicorn

    uvicorn.run("mailverdict.main:app", host="127.0.0.1", port=8000, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
