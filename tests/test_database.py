import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from db.database import session_scope


@pytest.fixture
def teardown_calls(monkeypatch):
    calls = []
    original_close = Session.close
    original_dispose = Engine.dispose

    def close(self):
        calls.append("close")
        return original_close(self)

    def dispose(self, *args, **kwargs):
        calls.append("dispose")
        return original_dispose(self, *args, **kwargs)

    monkeypatch.setattr(Session, "close", close)
    monkeypatch.setattr(Engine, "dispose", dispose)
    return calls


def test_session_scope_releases_on_success(tmp_path, teardown_calls):
    engine = create_engine(f"sqlite:///{tmp_path / 'scope.db'}")

    with session_scope(engine) as db:
        assert db.execute(text("SELECT 1")).scalar() == 1

    assert teardown_calls == ["close", "dispose"]


def test_session_scope_releases_when_body_raises(tmp_path, teardown_calls):
    engine = create_engine(f"sqlite:///{tmp_path / 'scope.db'}")

    with pytest.raises(RuntimeError, match="boom"):
        with session_scope(engine) as db:
            db.execute(text("SELECT 1"))
            raise RuntimeError("boom")

    assert teardown_calls == ["close", "dispose"]
