from contextlib import asynccontextmanager
from fastapi import FastAPI
from photofeed.api.error_handlers import register_error_handlers
from photofeed.api.v1 import auth, user
from photofeed.core import config
from photofeed.core.logging import setup_logging
from photofeed.db.base import Base
from photofeed.db.session import engine, create_database_if_missing
from photofeed.routers import post
from photofeed.routers import like
from photofeed.routers import comment

import photofeed.db.models  # noqa: F401  registers every table on Base.metadata


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(config.LOG_LEVEL)
    create_database_if_missing(config.DATABASE_URL)
    Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(title="photofeed", lifespan=lifespan)
register_error_handlers(app)

app.include_router(auth.router, prefix="/auth", tags=["Auth"])
app.include_router(user.router, prefix="/users", tags=["Users"])
app.include_router(post.router, prefix="/posts", tags=["Posts"])
app.include_router(like.router, prefix="/posts", tags=["Likes"])
app.include_router(comment.router, prefix="/posts", tags=["Comments"])
