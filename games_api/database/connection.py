import asyncpg
import asyncio
import orjson
from ..config import database
from ..logger import get_logger

logger = get_logger()

def _encode_json(value) -> str:
    return orjson.dumps(value).decode('utf-8')

class DatabaseConnection:
    def __init__(self):
        self.pool = None
        self._connection_semaphore = None
        self._initialized = False
        self._init_lock = asyncio.Lock()

    async def initialize(self):
        """Initialize the connection pool and create the games table"""
        if self._initialized:
            return

        async with self._init_lock:
            if self._initialized:  # Double check after acquiring lock
                return

            try:
                self.pool = await asyncpg.create_pool(
                    host=database.HOST,
                    port=database.PORT,
                    database=database.DATABASE,
                    user=database.USER,
                    password=database.PASSWORD,
                    min_size=database.MIN_POOL_SIZE,
                    max_size=database.MAX_POOL_SIZE,
                    command_timeout=database.COMMAND_TIMEOUT,
                    max_inactive_connection_lifetime=300.0,
                    init=self._init_connection,
                    setup=self._setup_connection
                )

                self._connection_semaphore = asyncio.Semaphore(database.MAX_POOL_SIZE)

                async with self.pool.acquire() as conn:
                    await conn.execute('''
                        CREATE TABLE IF NOT EXISTS games (
                            id VARCHAR(64) PRIMARY KEY,
                            name TEXT NOT NULL,
                            image TEXT NOT NULL,
                            type VARCHAR(100) NOT NULL,
                            points INTEGER NOT NULL CHECK (points >= 0),
                            questions JSONB NOT NULL DEFAULT '[]'::jsonb,
                            leaderboard JSONB NOT NULL DEFAULT '[]'::jsonb,
                            created_at DOUBLE PRECISION NOT NULL,
                            updated_at DOUBLE PRECISION NOT NULL
                        )
                    ''')
                    await conn.execute('''
                        CREATE INDEX IF NOT EXISTS idx_games_type
                        ON games(type)
                    ''')

                self._initialized = True
                logger.info("Database connection initialized successfully")
            except Exception as e:
                logger.error(f"Failed to initialize database connection: {e}")
                await self.close()
                raise

    async def _init_connection(self, connection):
        """Decode JSONB columns into Python lists/dicts"""
        await connection.set_type_codec(
            'jsonb',
            encoder=_encode_json,
            decoder=orjson.loads,
            schema='pg_catalog'
        )

    async def _setup_connection(self, connection):
        """Setup connection with proper settings"""
        await connection.execute('SET statement_timeout = 10000')
        await connection.execute('SET idle_in_transaction_session_timeout = 30000')
        await connection.execute('SET lock_timeout = 10000')

    async def close(self):
        """Close database connections"""
        if self.pool:
            await self.pool.close()
            self.pool = None
        self._initialized = False

    async def acquire_connection_semaphore(self):
        return await self._connection_semaphore.acquire()

    def release_connection_semaphore(self):
        self._connection_semaphore.release()
