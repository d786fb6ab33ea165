import sqlite3

from sqlalchemy import inspect

from treehole.core.database import Database


def test_init_schema_creates_messages_table(tmp_path):
    db_path = tmp_path / "fresh.db"
    assert not db_path.exists()

    db = Database(f"sqlite:///{db_path}")
    db.init_schema()

    assert db_path.exists()
    columns = {col["name"] for col in inspect(db.engine).get_columns("messages")}
    assert columns == {"id", "content", "time", "likes"}
    db.dispose()


def test_init_schema_is_idempotent(tmp_path):
    db = Database(f"sqlite:///{tmp_path / 'twice.db'}")
    db.init_schema()
    db.init_schema()

    columns = [col["name"] for col in inspect(db.engine).get_columns("messages")]
    assert columns.count("likes") == 1
    db.dispose()


def test_init_schema_adds_likes_to_legacy_table(tmp_path):
    db_path = tmp_path / "legacy.db"

    # Table as it existed before likes were introduced
    conn = sqlite3.connect(db_path)
    conn.execute(
        "CREATE TABLE messages (id INTEGER PRIMARY KEY AUTOINCREMENT, content TEXT, time TEXT)"
    )
    conn.execute("INSERT INTO messages (content, time) VALUES ('old', '2024/01/01 08:00:00')")
    conn.commit()
    conn.close()

    db = Database(f"sqlite:///{db_path}")
    db.init_schema()
    db.dispose()

    conn = sqlite3.connect(db_path)
    rows = conn.execute("SELECT id, content, likes FROM messages").fetchall()
    conn.close()
    assert rows == [(1, "old", 0)]


def test_session_rolls_back_on_error(database):
    from treehole.models import Message

    try:
        with database.session() as session:
            session.add(Message(content="never", time="t", likes=0))
            session.flush()
            raise RuntimeError("abort")
    except RuntimeError:
        pass

    with database.session() as session:
        assert session.query(Message).count() == 0


def test_ping(database):
    assert database.ping() is True


def test_init_schema_resets_null_likes_from_legacy_server(tmp_path):
    from treehole.services.message_service import MessageService

    db_path = tmp_path / "legacy_nullable.db"

    # Layout of the older server: likes existed but was nullable
    conn = sqlite3.connect(db_path)
    conn.execute(
        "CREATE TABLE messages (id INTEGER PRIMARY KEY AUTOINCREMENT, content TEXT, "
        "time TEXT, likes INTEGER DEFAULT 0)"
    )
    conn.execute(
        "INSERT INTO messages (content, time, likes) VALUES ('old', '2024/01/01 08:00:00', NULL)"
    )
    conn.commit()
    conn.close()

    db = Database(f"sqlite:///{db_path}")
    db.init_schema()
    service = MessageService(db)

    listed = service.list_messages()
    assert [(m.content, m.likes) for m in listed] == [("old", 0)]
    assert service.toggle_like(listed[0].id, "like").likes == 1
    db.dispose()
