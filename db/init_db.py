"""
db/init_db.py
-------------
Creates the database schema and loads the demo rows.
Run this module directly to reset a database to the demo state:
    python -m db.init_db
"""

from db.connection import get_connection, release_connection
from utils.logger import get_logger

logger = get_logger(__name__)

DROP_SQL = """
DROP TABLE IF EXISTS comments;
DROP TABLE IF EXISTS posts CASCADE;
DROP TABLE IF EXISTS users CASCADE;
"""

SCHEMA_SQL = """
-- pgcrypto provides crypt()/gen_salt() for password hashing
CREATE EXTENSION IF NOT EXISTS pgcrypto;

CREATE TABLE IF NOT EXISTS users
(
    id          INT PRIMARY KEY GENERATED ALWAYS AS IDENTITY,
    username    VARCHAR(100) NOT NULL UNIQUE,
    password    VARCHAR(100) NOT NULL,
    first_name  VARCHAR(100),
    last_name   VARCHAR(100),
    email       VARCHAR(100),
    is_active   BOOL
);

CREATE TABLE IF NOT EXISTS posts
(
    id          INT PRIMARY KEY GENERATED ALWAYS AS IDENTITY,
    title       VARCHAR(255) NOT NULL UNIQUE,
    body        TEXT NOT NULL,
    user_id     INT,
    FOREIGN KEY (user_id) REFERENCES users (id) ON DELETE SET NULL ON UPDATE CASCADE
);

CREATE TABLE IF NOT EXISTS comments
(
    id          INT PRIMARY KEY GENERATED ALWAYS AS IDENTITY,
    date        TIMESTAMP WITHOUT TIME ZONE DEFAULT NOW(),
    body        TEXT NOT NULL,
    user_id     INT,
    post_id     INT,
    FOREIGN KEY (user_id) REFERENCES users (id) ON DELETE SET NULL ON UPDATE CASCADE,
    FOREIGN KEY (post_id) REFERENCES posts (id) ON DELETE CASCADE ON UPDATE CASCADE
);
"""

DEMO_SQL = """
INSERT INTO users (username, password, first_name, last_name, email, is_active)
VALUES
    ('admin', crypt('password', gen_salt('bf', 8)), 'Administrator', 'Blog', 'admin@example.loc', true),
    ('ptsypyshev', crypt('testpass', gen_salt('bf', 8)), 'Pavel', 'Tsypyshev', 'ptsypyshev@example.loc', true),
    ('vpupkin', crypt('puptest', gen_salt('bf', 8)), 'Vasiliy', 'Pupkin', 'vpupkin@example.loc', false),
    ('iivanov', crypt('ivantest', gen_salt('bf', 8)), 'Ivan', 'Ivanov', 'iivanov@example.loc', true),
    ('ppetrov', crypt('petrtest', gen_salt('bf', 8)), 'Petr', 'Petrov', 'ppetrov@example.loc', true),
    ('ssidorov', crypt('sidrtest', gen_salt('bf', 8)), 'Sidor', 'Sidorov', 'ssidorov@example.loc', true);

INSERT INTO posts (title, body, user_id)
VALUES
    ('Post 1', 'Content for post 1', 2),
    ('Post 2', 'Content for post 2', 3),
    ('Post 3', 'Content for post 3', 4),
    ('Post 4', 'Content for post 4', 5),
    ('Post 5', 'Content for post 5', 6),
    ('Post 6', 'Content for post 6', 6),
    ('Post 7', 'Content for post 7', 5),
    ('Post 8', 'Content for post 8', 4),
    ('Post 9', 'Content for post 9', 3),
    ('Post 10', 'Content for post 10', 2);

INSERT INTO comments (body, user_id, post_id)
VALUES
    ('Comment 1', 6, 1),
    ('Comment 2', 5, 2),
    ('Comment 3', 4, 3),
    ('Comment 4', 3, 4),
    ('Comment 5', 2, 5),
    ('Comment 6', 2, 1),
    ('Comment 7', 3, 2),
    ('Comment 8', 4, 8),
    ('Comment 9', 5, 9),
    ('Comment 10', 6, 1);
"""


def _execute_script(script: str, description: str) -> None:
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(script)
        conn.commit()
        logger.info(f"{description} completed successfully.")
    except Exception as e:
        conn.rollback()
        logger.error(f"{description} failed: {e}")
        raise
    finally:
        release_connection(conn)


def create_tables() -> None:
    """
    Create the extension and all tables if they are missing.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    _execute_script(SCHEMA_SQL, "Schema creation")


def init_schema() -> None:
    """Drop all blog tables and create them again, empty."""
    _execute_script(DROP_SQL + SCHEMA_SQL, "Schema reset")


def add_demo_data() -> None:
    """
    Insert the fixed demo users, posts and comments.
    Expects freshly initialized tables, since post and comment rows refer
    to user and post ids 1..10.
    """
    _execute_script(DEMO_SQL, "Demo data load")


if __name__ == "__main__":
    from db.connection import init_pool
    init_pool()
    init_schema()
    add_demo_data()
    print("Database schema created and demo data loaded.")
