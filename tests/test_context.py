import pytest

import context
import crud
import database
from validation import ValidationError


class RecordingSession:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


@pytest.fixture
def session(monkeypatch):
    session = RecordingSession()
    monkeypatch.setattr(database, "SessionLocal", lambda: session)
    return session


def test_context_binds_one_store_to_the_session(session):
    dependency = context.get_context()
    ctx = next(dependency)
    assert isinstance(ctx.store, crud.RecordStore)
    assert ctx.store.db is session
    assert not session.closed

    with pytest.raises(StopIteration):
        next(dependency)
    assert session.closed


@pytest.mark.parametrize("error", [ValidationError("Cannot post empty comment."), RuntimeError("store down")])
def test_session_is_closed_when_the_request_fails(session, error):
    dependency = context.get_context()
    next(dependency)

    with pytest.raises(type(error)):
        dependency.throw(error)
    assert session.closed
