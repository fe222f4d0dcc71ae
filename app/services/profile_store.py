# app/services/profile_store.py

import os
import psycopg
import logging
from typing import List, Optional, Protocol
from dotenv import load_dotenv

from app.schemas import SoftwareEngineer

# 환경 변수 로드
load_dotenv()
DB_URL = os.getenv("DATABASE_URL")

# 로거 설정
logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS software_engineer (
  id                           INTEGER GENERATED BY DEFAULT AS IDENTITY PRIMARY KEY,
  name                         VARCHAR(255),
  tech_stack                   VARCHAR(255),
  learning_path_recommendation TEXT
);
"""

COLUMNS = "id, name, tech_stack, learning_path_recommendation"

# 명시적 id 로 INSERT 하면 identity 시퀀스가 증가하지 않으므로 max(id) 로 맞춰줌
SYNC_ID_SEQUENCE_SQL = """
SELECT setval(pg_get_serial_sequence('software_engineer', 'id'), GREATEST(max(id), 1))
  FROM software_engineer
"""


class ProfileStore(Protocol):
    def save(self, record: SoftwareEngineer) -> SoftwareEngineer: ...

    def find_by_id(self, engineer_id: int) -> Optional[SoftwareEngineer]: ...

    def find_all(self) -> List[SoftwareEngineer]: ...

    def delete_by_id(self, engineer_id: int) -> None: ...

    def exists_by_id(self, engineer_id: int) -> bool: ...

    def count(self) -> int: ...


def _to_record(row) -> SoftwareEngineer:
    engineer_id, name, tech_stack, recommendation = row
    return SoftwareEngineer(
        id=engineer_id,
        name=name,
        techStack=tech_stack,
        learningPathRecommendation=recommendation,
    )


class PostgresProfileStore:
    def __init__(self, db_url: Optional[str] = None):
        # PostgreSQL 연결
        db_url = db_url or DB_URL
        logger.debug("Connecting to database: %s", db_url)
        self.conn = psycopg.connect(db_url, autocommit=True)
        logger.debug("Database connection established")

    def init_schema(self) -> None:
        with self.conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        logger.info("software_engineer table created or verified")

    def save(self, record: SoftwareEngineer) -> SoftwareEngineer:
        """
        id 가 없으면 새 행을 만들고 DB 가 id 를 부여합니다.
        id 가 있으면 같은 id 의 행을 덮어씁니다 (없으면 그 id 로 생성).
        """
        params = (record.name, record.techStack, record.learningPathRecommendation)
        if record.id is None:
            with self.conn.cursor() as cur:
                cur.execute(
                    """
                    INSERT INTO software_engineer (name, tech_stack, learning_path_recommendation)
                    VALUES (%s, %s, %s)
                    RETURNING id
                    """,
                    params,
                )
                engineer_id = cur.fetchone()[0]
            logger.debug("Inserted software_engineer id=%d", engineer_id)
            return record.model_copy(update={"id": engineer_id})

        with self.conn.transaction(), self.conn.cursor() as cur:
            cur.execute(
                """
                INSERT INTO software_engineer (id, name, tech_stack, learning_path_recommendation)
                VALUES (%s, %s, %s, %s)
                ON CONFLICT (id) DO UPDATE
                   SET name = EXCLUDED.name,
                       tech_stack = EXCLUDED.tech_stack,
                       learning_path_recommendation = EXCLUDED.learning_path_recommendation
                """,
                (record.id, *params),
            )
            cur.execute(SYNC_ID_SEQUENCE_SQL)
            logger.debug("Upserted software_engineer id=%d", record.id)
        return record

    def find_by_id(self, engineer_id: int) -> Optional[SoftwareEngineer]:
        with self.conn.cursor() as cur:
            cur.execute(
                f"SELECT {COLUMNS} FROM software_engineer WHERE id = %s",
                (engineer_id,),
            )
            row = cur.fetchone()
        logger.debug("find_by_id(%r) -> %r", engineer_id, row)
        return _to_record(row) if row else None

    def find_all(self) -> List[SoftwareEngineer]:
        with self.conn.cursor() as cur:
            cur.execute(f"SELECT {COLUMNS} FROM software_engineer ORDER BY id")
            rows = cur.fetchall()
        logger.debug("Fetched %d rows", len(rows))
        return [_to_record(row) for row in rows]

    def delete_by_id(self, engineer_id: int) -> None:
        with self.conn.cursor() as cur:
            cur.execute("DELETE FROM software_engineer WHERE id = %s", (engineer_id,))
            logger.debug("delete_by_id(%r) removed %d row(s)", engineer_id, cur.rowcount)

    def exists_by_id(self, engineer_id: int) -> bool:
        with self.conn.cursor() as cur:
            cur.execute("SELECT 1 FROM software_engineer WHERE id = %s", (engineer_id,))
            return cur.fetchone() is not None

    def count(self) -> int:
        with self.conn.cursor() as cur:
            cur.execute("SELECT count(*) FROM software_engineer")
            return cur.fetchone()[0]
