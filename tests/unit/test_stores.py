"""
Unit tests for the SQL stores, run against a fake psycopg2 connection.
"""

from datetime import datetime

import psycopg2
import pytest

from db.errors import (
    ConstraintViolation,
    MultipleFound,
    NotFound,
    QueryCompilationError,
    RowCountMismatch,
)
from models import Comment, Post, User
from stores import CommentStore, PostStore, UserStore
from stores.base import TableStore

USER_ROW = (1, "admin", "$2a$08$hash", "Administrator", "Blog", "admin@example.loc", True)


class TestCreate:
    """Tests for TableStore.create()."""

    def test_user_create_hashes_password(self, fake_db):
        fake_db.results.append({"rows": [(7,)]})
        user = User(username="alice", password="x", is_active=True)

        new_id = UserStore().create(user)

        sql, params = fake_db.executed[0]
        assert new_id == 7
        assert "crypt(%s, gen_salt('bf', 8))" in sql
        assert "RETURNING id" in sql
        assert params == ("alice", "x", "", "", "", True)
        assert fake_db.commits == 1
        assert fake_db.released == 1

    def test_post_create_binds_null_author(self, fake_db):
        fake_db.results.append({"rows": [(3,)]})

        assert PostStore().create(Post(title="t", body="b")) == 3
        assert fake_db.executed[0][1] == ("t", "b", None)

    def test_comment_create_stamps_date(self, fake_db):
        created = datetime(2024, 3, 1, 10, 0)
        fake_db.results.append({"rows": [(11, created)]})
        comment = Comment(body="hi", user_id=2, post_id=1)

        assert CommentStore().create(comment) == 11
        assert comment.date == created

    def test_constraint_violation(self, fake_db):
        fake_db.results.append({"error": psycopg2.IntegrityError("duplicate key value")})

        with pytest.raises(ConstraintViolation) as exc_info:
            UserStore().create(User(username="admin", password="x"))

        assert isinstance(exc_info.value.__cause__, psycopg2.IntegrityError)
        assert fake_db.rollbacks == 1
        assert fake_db.commits == 0
        assert fake_db.released == 1

    def test_other_errors_propagate_unchanged(self, fake_db):
        fake_db.results.append({"error": psycopg2.OperationalError("connection lost")})

        with pytest.raises(psycopg2.OperationalError):
            PostStore().create(Post(title="t", body="b"))
        assert fake_db.released == 1


class TestRead:
    """Tests for TableStore.read()."""

    def test_read_one(self, fake_db):
        fake_db.results.append({"rows": [USER_ROW]})

        user = UserStore().read(1)

        assert user == User(*USER_ROW)
        assert fake_db.executed[0] == ("SELECT * FROM users WHERE id = %s;", (1,))

    def test_not_found(self, fake_db):
        fake_db.results.append({"rows": []})

        with pytest.raises(NotFound, match="not found: post id 42"):
            PostStore().read(42)
        assert fake_db.released == 1

    def test_multiple_found(self, fake_db):
        fake_db.results.append({"rows": [(1, "a", "b", None), (1, "c", "d", None)]})

        with pytest.raises(MultipleFound):
            PostStore().read(1)


class TestUpdate:
    """Tests for TableStore.update()."""

    def test_update_one_column(self, fake_db):
        fake_db.results.append({"rowcount": 1})
        post = Post(id=5, title="new title")

        result = PostStore().update(post)

        assert result is post
        assert fake_db.executed == [
            ("UPDATE posts SET title = %s WHERE id = %s;", ["new title", 5])
        ]
        assert fake_db.commits == 1

    def test_update_password_is_hashed(self, fake_db):
        fake_db.results.append({"rowcount": 1})

        UserStore().update(User(id=1, password="new"), fields=["id", "password"])

        sql, params = fake_db.executed[0]
        assert "password = crypt(%s, gen_salt('bf', 8))" in sql
        assert params == ["new", 1]

    @pytest.mark.parametrize("rowcount", [0, 2])
    def test_row_count_mismatch(self, fake_db, rowcount):
        fake_db.results.append({"rowcount": rowcount})

        with pytest.raises(RowCountMismatch) as exc_info:
            PostStore().update(Post(id=5, title="x"))

        assert exc_info.value.rows_affected == rowcount
        assert f"{rowcount} rows affected" in str(exc_info.value)
        assert fake_db.commits == 0
        assert fake_db.rollbacks == 1

    def test_nothing_to_update_issues_no_sql(self, fake_db):
        with pytest.raises(QueryCompilationError):
            PostStore().update(Post(id=5))
        assert fake_db.executed == []

    def test_unique_violation_on_update(self, fake_db):
        fake_db.results.append({"error": psycopg2.IntegrityError("duplicate title")})

        with pytest.raises(ConstraintViolation):
            PostStore().update(Post(id=5, title="Post 1"))


class TestDelete:
    """Tests for TableStore.delete()."""

    def test_delete(self, fake_db):
        fake_db.results.append({"rowcount": 1})

        CommentStore().delete(3)

        assert fake_db.executed == [("DELETE FROM comments WHERE id = %s;", (3,))]
        assert fake_db.commits == 1

    def test_delete_missing_row(self, fake_db):
        fake_db.results.append({"rowcount": 0})

        with pytest.raises(RowCountMismatch, match="delete comment error: 0 rows affected"):
            CommentStore().delete(3)
        assert fake_db.released == 1


class TestTableStore:
    """Tests for the TableStore base class."""

    def test_store_without_insert_params_cannot_be_built(self):
        class TagStore(TableStore):
            table = "tags"
            resource = "tag"

        with pytest.raises(TypeError):
            TagStore()
