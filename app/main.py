import asyncio
import logging
import os
from pathlib import Path

import database
import models
import resolvers
import schemas
import uvicorn
import validation
from context import Context, get_context
from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

load_dotenv(Path(__file__).parent.parent / ".env")

ENVIRONMENT = os.getenv("ENVIRONMENT", "dev")
REQUEST_TIMEOUT_SECONDS = float(os.getenv("REQUEST_TIMEOUT_SECONDS", 30))

# --- Logging ---
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
)
logger = logging.getLogger("hackernews")

# --- DB tables ---
models.Base.metadata.create_all(bind=database.engine)

app = FastAPI(
    title="Hackernews Clone",
    description="Submit links, comment on them and browse a filterable feed.",
    version="1.0.0",
)

# --- CORS (allow frontend dev servers, etc.) ---
origins = ["*"] if ENVIRONMENT == "dev" else [
    os.getenv("PUBLIC_BASE_URL", "http://localhost:4000"),
]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_timeout(request: Request, call_next):
    try:
        return await asyncio.wait_for(call_next(request), timeout=REQUEST_TIMEOUT_SECONDS)
    except asyncio.TimeoutError:
        logger.warning("Request %s %s timed out after %ss", request.method, request.url.path, REQUEST_TIMEOUT_SECONDS)
        return JSONResponse(status_code=504, content={"detail": "Request timed out"})


@app.exception_handler(validation.ValidationError)
def validation_error(request: Request, exc: validation.ValidationError):
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=400, content={"detail": exc.message})


@app.exception_handler(SQLAlchemyError)
def store_error(request: Request, exc: SQLAlchemyError):
    logger.exception("Store error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


# Health check (useful for uptime monitors & load balancers)
@app.get("/health", response_model=schemas.HealthOut, include_in_schema=False)
def health():
    return {"status": "ok", "env": ENVIRONMENT}


def _link_out(ctx: Context, link: models.Link) -> schemas.LinkOut:
    return schemas.LinkOut(
        **schemas.LinkSummary.model_validate(link).model_dump(),
        comments=[schemas.CommentSummary.model_validate(c) for c in resolvers.link_comments(ctx, link)],
    )


def _comment_out(ctx: Context, comment: models.Comment) -> schemas.CommentOut:
    return schemas.CommentOut(
        **schemas.CommentSummary.model_validate(comment).model_dump(),
        link=schemas.LinkSummary.model_validate(resolvers.comment_link(ctx, comment)),
    )


# ---------- API ----------
@app.get("/info", response_model=schemas.InfoOut)
def info():
    return {"info": resolvers.info()}


@app.get("/feed", response_model=list[schemas.LinkOut])
def feed(
    filter_needle: str | None = Query(None, alias="filterNeedle"),
    skip: int = Query(0),
    take: int = Query(resolvers.FEED_TAKE_DEFAULT),
    ctx: Context = Depends(get_context),
):
    links = resolvers.feed(ctx, filter_needle=filter_needle, skip=skip, take=take)
    return [_link_out(ctx, link) for link in links]


@app.get("/link/{id}", response_model=schemas.LinkOut | None)
def link(id: str, ctx: Context = Depends(get_context)):
    found = resolvers.link(ctx, id)
    if found is None:
        return None
    return _link_out(ctx, found)


@app.get("/comment/{id}", response_model=schemas.CommentOut | None)
def comment(id: str, ctx: Context = Depends(get_context)):
    found = resolvers.comment(ctx, id)
    if found is None:
        return None
    return _comment_out(ctx, found)


@app.post("/link", response_model=schemas.LinkOut)
def post_link(link_in: schemas.LinkCreate, ctx: Context = Depends(get_context)):
    logger.info("Posting link: url=%s", link_in.url)
    return _link_out(ctx, resolvers.post_link(ctx, url=link_in.url, description=link_in.description))


@app.post("/comment", response_model=schemas.CommentOut)
def post_comment_on_link(comment_in: schemas.CommentCreate, ctx: Context = Depends(get_context)):
    logger.info("Posting comment on link %s", comment_in.link_id)
    new_comment = resolvers.post_comment_on_link(ctx, link_id=comment_in.link_id, body=comment_in.body)
    return _comment_out(ctx, new_comment)


if __name__ == "__main__":
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", 4000))
    logger.info("Server is running on http://localhost:%s", port)
    uvicorn.run(app, host=host, port=port)
