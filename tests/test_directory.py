"""Tests for the customer, supplier and employee directory."""

from datetime import date
from decimal import Decimal

import pytest

from ledgerbook.domain.entities import Customer, Employee
from ledgerbook.domain.errors import NotFoundError, ValidationError


def test_create_customer(directory_service):
    customer = directory_service.create_entry(
        "customer", {"name": "ACME", "email": "ap@acme.test", "balance": "250"}
    )

    assert isinstance(customer, Customer)
    assert customer.name == "ACME"
    assert customer.balance == Decimal("250")
    assert customer.phone is None


def test_create_employee(directory_service):
    employee = directory_service.create_entry(
        "employee", {"name": "Bob", "salary": "8000", "join_date": "2023-06-01"}
    )

    assert isinstance(employee, Employee)
    assert employee.salary == Decimal("8000")
    assert employee.join_date == date(2023, 6, 1)


def test_name_required(directory_service):
    with pytest.raises(ValidationError, match="Supplier name is required"):
        directory_service.create_entry("supplier", {"contact": "Ann"})


def test_unknown_field(directory_service):
    with pytest.raises(ValidationError, match="Unknown customer field"):
        directory_service.create_entry("customer", {"name": "ACME", "salary": 1})


def test_update(directory_service):
    supplier = directory_service.create_entry("supplier", {"name": "Paper Co"})

    updated = directory_service.update_entry("supplier", supplier.id, {"phone": "555-0100"})

    assert updated.phone == "555-0100"
    assert updated.name == "Paper Co"


def test_update_missing(directory_service):
    with pytest.raises(NotFoundError):
        directory_service.update_entry("customer", "missing", {"phone": "1"})


def test_delete(directory_service):
    customer = directory_service.create_entry("customer", {"name": "ACME"})

    directory_service.delete_entry("customer", customer.id)

    assert directory_service.get_entry("customer", customer.id) is None
    assert directory_service.list_entries("customer") == []


def test_delete_missing(directory_service):
    with pytest.raises(NotFoundError):
        directory_service.delete_entry("employee", "missing")


def test_kinds_are_separate(directory_service):
    directory_service.create_entry("customer", {"name": "ACME"})

    assert directory_service.list_entries("supplier") == []
