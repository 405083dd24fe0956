import os
import asyncio
from prometheus_client import Counter, start_http_server
import logging

logger = logging.getLogger(__name__)

MONGO_URL = os.getenv('MONGO_URL', 'mongodb://mongo:27017')
MONGO_DB = os.getenv('MONGO_DB', 'socialapp')
METRICS_PORT = int(os.getenv('METRICS_PORT', '8001'))

MONGO = None

REQUESTS_TOTAL = Counter(
    'socialapp_requests_total',
    'HTTP requests handled',
    ['method', 'status'],
)

def init_metrics(port: int = METRICS_PORT):
    """Initialize Prometheus metrics server"""
    try:
        start_http_server(port)
        logger.info(f"Prometheus metrics server started on port {port}")
    except OSError as e:
        logger.warning(f'Prometheus start failed: {e}')

async def mongo_startup():
    """Start MongoDB connection with retries"""
    global MONGO

    from motor.motor_asyncio import AsyncIOMotorClient

    max_retries = 3
    retry_delay = 3  # seconds

    for attempt in range(max_retries):
        client = None
        try:
            logger.info(f"Attempting to connect to MongoDB: {MONGO_URL} (attempt {attempt + 1}/{max_retries})")

            client = AsyncIOMotorClient(
                MONGO_URL,
                serverSelectionTimeoutMS=5000,
                connectTimeoutMS=5000,
                socketTimeoutMS=5000,
                maxPoolSize=50,
                minPoolSize=5,
                retryWrites=True,
                retryReads=True
            )

            # Test the connection
            await client.admin.command('ping')
            MONGO = client

            logger.info("MongoDB connected successfully")
            return

        except Exception as e:
            logger.warning(f'MongoDB startup attempt {attempt + 1} failed: {e}')
            if client is not None:
                client.close()

            if attempt < max_retries - 1:
                logger.info(f"Retrying MongoDB connection in {retry_delay} seconds...")
                await asyncio.sleep(retry_delay)

    logger.error("Failed to connect to MongoDB after all retries")
    raise RuntimeError(f'MongoDB unavailable at {MONGO_URL}')

def use_client(client):
    """Install an already-built client (tests pass an in-memory one)."""
    global MONGO
    MONGO = client

def get_db():
    if MONGO is None:
        raise RuntimeError('MongoDB client not started')
    return MONGO[MONGO_DB]

async def ensure_indexes():
    """Create the unique indexes the concepts rely on"""
    db = get_db()
    await db.users.create_index('username', unique=True)
    await db.friends.create_index([('user1', 1), ('user2', 1)], unique=True)
    await db.friend_requests.create_index([('from', 1), ('to', 1)], unique=True)
    await db.posts.create_index('author')
    await db.statuses.create_index('user')
    await db.messages.create_index('sender')
    await db.messages.create_index('recipients')
    await db.sessions.create_index('user')
    logger.info("MongoDB indexes ensured")

async def shutdown_connections():
    """Gracefully shutdown all connections"""
    global MONGO
    logger.info("Shutting down connections...")

    if MONGO is not None:
        MONGO.close()
        MONGO = None
        logger.info("MongoDB connection closed")
