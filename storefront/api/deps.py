# storefront/api/deps.py
from fastapi import Request

from storefront.services.payment_client import PaymentClient
from storefront.services.relay_client import RelayClient


def get_payment_client(request: Request) -> PaymentClient:
    return request.app.state.payment_client


def get_relay_client(request: Request) -> RelayClient:
    return request.app.state.relay_client
