import asyncio
import time
from contextlib import asynccontextmanager
from typing import List, Optional, Sequence
import asyncpg
from .store import GameStore
from ..core.errors import PersistenceError
from ..models.data import GameRec, SEARCHABLE_FIELDS, UPDATABLE_FIELDS
from ..logger import get_logger

logger = get_logger()

COLUMNS = ('id', 'name', 'image', 'type', 'points', 'questions', 'leaderboard',
           'created_at', 'updated_at')

class PostgresGameStore(GameStore):
    """Game documents in the `games` table, one row per game"""

    def __init__(self, db_connection):
        self.db = db_connection

    @asynccontextmanager
    async def _connection(self, action: str):
        await self.db.acquire_connection_semaphore()
        try:
            async with self.db.pool.acquire() as conn:
                yield conn
        except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError) as e:
            logger.error(f"Database error while {action}: {e}")
            raise PersistenceError(f"Failed while {action}") from e
        finally:
            self.db.release_connection_semaphore()

    async def find(self, projection: Optional[Sequence[str]] = None) -> List[dict]:
        columns = _select_list(projection)
        async with self._connection("listing games") as conn:
            rows = await conn.fetch(f'''
                SELECT {columns}
                FROM games
                ORDER BY created_at, id
            ''')
            return [dict(row) for row in rows]

    async def find_by_id(self, game_id: str) -> Optional[dict]:
        async with self._connection(f"fetching game {game_id}") as conn:
            row = await conn.fetchrow('''
                SELECT *
                FROM games
                WHERE id = $1
            ''', game_id)
            return dict(row) if row else None

    async def find_by_field(self, field: str, value) -> List[dict]:
        if field not in SEARCHABLE_FIELDS:
            raise ValueError(f"Cannot search games by {field}")
        async with self._connection(f"searching games by {field}") as conn:
            rows = await conn.fetch(f'''
                SELECT *
                FROM games
                WHERE {field} = $1
                ORDER BY created_at, id
            ''', value)
            return [dict(row) for row in rows]

    async def insert(self, doc: dict) -> dict:
        rec = GameRec(doc)
        async with self._connection("inserting game") as conn:
            row = await conn.fetchrow('''
                INSERT INTO games (id, name, image, type, points, questions, leaderboard,
                                   created_at, updated_at)
                VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9)
                RETURNING *
            ''', rec.id, rec.name, rec.image, rec.type, rec.points, rec.questions,
                rec.leaderboard, rec.created_at, rec.updated_at)
            return dict(row)

    async def update_by_id(self, game_id: str, changes: dict) -> Optional[dict]:
        fields = [field for field in UPDATABLE_FIELDS if field in changes]
        if not fields:
            return await self.find_by_id(game_id)

        assignments = [f"{field} = ${idx}" for idx, field in enumerate(fields, start=2)]
        params = [game_id] + [changes[field] for field in fields]
        assignments.append(f"updated_at = ${len(params) + 1}")
        params.append(time.time())

        async with self._connection(f"updating game {game_id}") as conn:
            row = await conn.fetchrow(f'''
                UPDATE games
                SET {', '.join(assignments)}
                WHERE id = $1
                RETURNING *
            ''', *params)
            return dict(row) if row else None

    async def delete_by_id(self, game_id: str) -> bool:
        async with self._connection(f"deleting game {game_id}") as conn:
            deleted = await conn.fetchval('''
                DELETE FROM games
                WHERE id = $1
                RETURNING id
            ''', game_id)
            return deleted is not None

    async def ping(self) -> bool:
        try:
            async with self._connection("checking database health") as conn:
                return await conn.fetchval('SELECT 1') == 1
        except PersistenceError:
            return False

def _select_list(projection: Optional[Sequence[str]]) -> str:
    if not projection:
        return '*'
    unknown = [column for column in projection if column not in COLUMNS]
    if unknown:
        raise ValueError(f"Unknown game columns: {', '.join(unknown)}")
    # id always comes back, like a document store projection
    columns = ['id'] + [column for column in projection if column != 'id']
    return ', '.join(columns)
