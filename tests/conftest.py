"""Pytest configuration and fixtures."""

import os

import pytest

# Set test environment variables
os.environ["LOG_LEVEL"] = "INFO"
os.environ["LOG_TO_FILE"] = "false"
os.environ["INCLUDE_DEBUG_INFO"] = "true"


@pytest.fixture
def clean_bill_text() -> str:
    """Patient statement from a family clinic."""
    return """
    Patient Statement
    Dr. Smith Family Clinic
    Date of Service 2024-03-01
    CPT 99214
    Amount Due $450.32
    """


@pytest.fixture
def clean_eob_text() -> str:
    """Insurer EOB with the explicit not-a-bill notice."""
    return """
    Explanation of Benefits
    This is not a bill
    Member ID 123456
    Provider: Valley Medical Center
    Service: Office Visit
    Plan Paid $120.00
    Amount you owe $20.00
    """


@pytest.fixture
def disqualified_text() -> str:
    """Construction estimate with publishing boilerplate."""
    return """
    Construction estimate
    Contractor license #88231
    ISBN 978-0-00-000000-2
    Copyright 2020
    """
