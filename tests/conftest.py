import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from app.core.db import init_db, close_db
from app.main import app
from app.models.account import Employee, Manager
from app.models.restaurant import MenuItem, Restaurant
from app.scripts.seed_data import seed


@pytest.fixture
def client():
    """App client with a fresh in-memory database seeded with the demo data."""
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def db():
    """Tortoise on an in-memory SQLite database, seeded, for service-level tests."""
    await init_db("sqlite://:memory:")
    await seed()
    yield
    await close_db()


@pytest_asyncio.fixture
async def demo(db):
    """Handles on the seeded rows most tests need."""
    canteen = await Restaurant.get(name="Canteen Delight")
    dhaba = await Restaurant.get(name="North Spice Dhaba")
    return {
        "employee": await Employee.get(username="raj.kumar"),
        "manager": await Manager.get(username="canteendelight"),
        "other_manager": await Manager.get(username="northspice"),
        "restaurant": canteen,
        "other_restaurant": dhaba,
        "paneer": await MenuItem.get(name="Paneer Butter Masala"),
        "roti": await MenuItem.get(name="Roti"),
        "naan": await MenuItem.get(name="Butter Naan"),
    }


@pytest.fixture
def manager_headers(client):
    """Returns a function that logs a demo manager in and builds the auth header."""
    def login(username="canteendelight", password="password123"):
        response = client.post("/api/v1/auth/manager/login", json={"username": username, "password": password})
        assert response.status_code == 200
        return {"Authorization": f"Bearer {response.json()['data']['token']}"}
    return login
