import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from storefront.database import Base, get_db
from storefront.main import app
import storefront.models  # noqa: F401


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    # No context manager: the lifespan hook would touch the real database
    yield TestClient(app)
    app.dependency_overrides.clear()


def product_payload(product_id, price="10.00", **overrides):
    payload = {
        "id": product_id,
        "name": f"Product {product_id}",
        "price": price,
        "category": "apparel",
        "imageUrl": f"https://img.example.com/{product_id}.jpg",
        "description": "A product",
        "details": ["Cotton", "Machine wash"],
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def catalog(client):
    """Three products: 1 @ 10.00, 2 @ 24.99, 3 @ 5.50"""
    for product_id, price in ((1, "10.00"), (2, "24.99"), (3, "5.50")):
        response = client.post("/api/products", json=product_payload(product_id, price))
        assert response.status_code == 201
    return client
