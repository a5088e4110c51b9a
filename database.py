import logging
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from fastapi import Depends, FastAPI, Request
from contextlib import asynccontextmanager
from config import MONGODB_URI, DB_NAME, DOCTORS_COLLECTION

logger = logging.getLogger(__name__)


# --------------------------------
# MongoDB Connection (Lifespan)
# --------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    if not MONGODB_URI:
        logger.critical(" MONGODB_URI is not set in .env")
        raise ValueError(" MONGODB_URI is not set in .env")

    app.mongodb_client = AsyncIOMotorClient(MONGODB_URI, tz_aware=True)
    try:
        app.mongodb = app.mongodb_client[DB_NAME]
        logger.info(f"MongoDB connected to {DB_NAME}")
        yield
    except Exception as e:
        logger.exception(f" MongoDB connection error: {e}")
        raise
    finally:
        app.mongodb_client.close()
        logger.warning(" MongoDB disconnected.")


# --------------------------------
# Dependencies
# --------------------------------
async def get_database(request: Request) -> AsyncIOMotorDatabase:
    return request.app.mongodb


async def get_collection(
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> AsyncIOMotorCollection:
    return db[DOCTORS_COLLECTION]
