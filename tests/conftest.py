import httpx
import pytest

from notekeeper.database import NoteStore, get_store
from notekeeper.main import app


@pytest.fixture
def store(tmp_path):
    """Note store on a throwaway data file"""
    return NoteStore(tmp_path / "db.json")


@pytest.fixture
async def client(store):
    """Async HTTP client talking to the app in-process"""
    app.dependency_overrides[get_store] = lambda: store
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    app.dependency_overrides.clear()
