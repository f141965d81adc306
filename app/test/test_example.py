# bootstrap
import pytest

# imports
from main import ping, hello_world


def test_always_passes():
    assert True


@pytest.mark.asyncio
async def test_ping():
    res = await ping()
    assert res["hello"] == "world"


@pytest.mark.asyncio
async def test_hello_world():
    res = await hello_world()
    assert res["statusCode"] == 200 and res["responseMessage"] == "Hello, World!"


def test_process_time_header(client):
    res = client.get("/api/test")
    assert res.status_code == 200
    assert "X-Process-Time-MS" in res.headers
