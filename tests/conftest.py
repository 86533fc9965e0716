"""Pytest configuration and fixtures."""

import itertools
from datetime import date, time
from decimal import Decimal

import pytest

from CLIENTES.models import Agent, Client
from CONTRATOS.models import Contract
from INMUEBLES.models import Property
from OPERACIONES.models import Rental, Sale, Visit

_sequence = itertools.count(1)


@pytest.fixture
def make_property(db):
    def _make(**kwargs):
        n = next(_sequence)
        defaults = {
            "property_type": "APARTMENT",
            "address": f"Calle {n} # 10-20",
            "city": "Bogotá",
            "price": Decimal("350000000.00"),
        }
        defaults.update(kwargs)
        return Property.objects.create(**defaults)
    return _make


@pytest.fixture
def make_client(db):
    def _make(**kwargs):
        n = next(_sequence)
        defaults = {
            "first_name": "Cliente",
            "last_name": f"Prueba {n}",
            "document_type": "CC",
            "document_number": f"1000{n:05d}",
            "email": f"cliente{n}@ejemplo.com",
            "client_type": "TENANT",
        }
        defaults.update(kwargs)
        return Client.objects.create(**defaults)
    return _make


@pytest.fixture
def make_agent(db):
    def _make(**kwargs):
        n = next(_sequence)
        defaults = {"name": f"Agente {n}", "email": f"agente{n}@ejemplo.com"}
        defaults.update(kwargs)
        return Agent.objects.create(**defaults)
    return _make


@pytest.fixture
def make_contract(db):
    def _make(prop, client, start_date, end_date=None, **kwargs):
        defaults = {
            "contract_type": Contract.TYPE_RENTAL if end_date else Contract.TYPE_SALE,
            "value": Decimal("2500000.00"),
            "status": Contract.STATUS_DRAFT,
        }
        defaults.update(kwargs)
        return Contract.objects.create(
            property=prop,
            client=client,
            start_date=start_date,
            end_date=end_date,
            **defaults,
        )
    return _make


@pytest.fixture
def make_sale(db):
    def _make(prop, client, **kwargs):
        defaults = {"sale_date": date(2024, 3, 1), "value": Decimal("350000000.00")}
        defaults.update(kwargs)
        return Sale.objects.create(property=prop, client=client, **defaults)
    return _make


@pytest.fixture
def make_rental(db):
    def _make(prop, client, **kwargs):
        defaults = {
            "start_date": date(2024, 1, 1),
            "end_date": date(2024, 12, 31),
            "monthly_rent": Decimal("2500000.00"),
        }
        defaults.update(kwargs)
        return Rental.objects.create(property=prop, client=client, **defaults)
    return _make


@pytest.fixture
def make_visit(db):
    def _make(prop, client, **kwargs):
        defaults = {"visit_date": date(2024, 2, 10), "visit_time": time(10, 30)}
        defaults.update(kwargs)
        return Visit.objects.create(property=prop, client=client, **defaults)
    return _make


@pytest.fixture
def p1(make_property):
    return make_property(address="Carrera 7 # 72-41")


@pytest.fixture
def c1(make_client):
    return make_client(first_name="Ana", last_name="Gómez")


@pytest.fixture
def c2(make_client):
    return make_client(first_name="Luis", last_name="Pérez")
