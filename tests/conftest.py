import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from shop_manager.main import app
from shop_manager.domain.models.product import Product
from shop_manager.infrastructure.database import Base, get_db
from shop_manager.infrastructure.repositories.product_repository import SQLAlchemyProductRepository
from shop_manager.infrastructure.seed import seed_sample_products


# Fresh in-memory database per test; StaticPool keeps a single connection
# so the TestClient worker thread sees the same data
@pytest.fixture(scope="function")
def engine():
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture(scope="function")
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture(scope="function")
def repo(db_session: Session):
    return SQLAlchemyProductRepository(db_session, Product)


# The six sample products
@pytest.fixture(scope="function")
def seeded_repo(repo):
    seed_sample_products(repo)
    return repo


# Client without lifespan, so the real database is never touched
@pytest.fixture(scope="function")
def client(db_session: Session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def seeded_client(seeded_repo, client):
    return client
