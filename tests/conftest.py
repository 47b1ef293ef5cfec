import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from storefront.data.database import init_db, make_engine, make_session_factory
from storefront.domain.errors import PaymentProcessorError, RelayError
from storefront.main import create_app
from storefront.services.payment_client import ProcessorIntent

# seeded catalog: id 1 "Design" 2000.00, id 3 "AI & Machine Learning" 2500.00
DESIGN_ID = 1
AI_ID = 3


class FakePaymentClient:
    """In-memory stand-in for the Stripe payment intents API."""

    currency = "zar"

    def __init__(self):
        self.intents = {}
        self.error = None

    def create_intent(self, amount, session_id, customer_email=None):
        if self.error:
            raise self.error
        intent_id = f"pi_test_{len(self.intents) + 1}"
        metadata = {"session_id": session_id}
        if customer_email:
            metadata["customer_email"] = customer_email
        intent = ProcessorIntent(
            id=intent_id,
            amount=amount,
            currency=self.currency,
            status="requires_payment_method",
            client_secret=f"{intent_id}_secret_abc",
            metadata=metadata,
        )
        self.intents[intent_id] = intent
        return intent

    def retrieve_intent(self, intent_id):
        if self.error:
            raise self.error
        if intent_id not in self.intents:
            raise PaymentProcessorError(f"No such payment_intent: '{intent_id}'")
        return self.intents[intent_id]

    def succeed(self, intent_id):
        self.intents[intent_id].status = "succeeded"


class FakeRelayClient:
    def __init__(self, enabled=True):
        self.enabled = enabled
        self.sent = []
        self.error = None

    def forward(self, name, email, subject, message):
        if self.error:
            raise self.error
        self.sent.append({"name": name, "email": email, "subject": subject, "message": message})


@pytest.fixture()
def engine():
    engine = make_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine, seed=True)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def payment_client():
    return FakePaymentClient()


@pytest.fixture()
def relay_client():
    return FakeRelayClient()


@pytest.fixture()
def failing_relay_client():
    relay = FakeRelayClient()
    relay.error = RelayError("Relay error: form not found")
    return relay


@pytest.fixture()
def client(engine, session_factory, payment_client, relay_client):
    app = create_app(
        engine=engine,
        session_factory=session_factory,
        payment_client=payment_client,
        relay_client=relay_client,
    )
    with TestClient(app) as c:
        yield c
