# -*- coding: utf-8 -*-
"""
Configuration for pytest to run without user preferences and warning filters.
"""
import pytest
import os

def pytest_ignore_collect(collection_path):
    if 'setup' in str(collection_path):
        return True

def pytest_configure(config):
    os.environ["DISABLE_PREFERENCES"] = "1"
    os.environ.pop("FILTER_WARNINGS", None)

@pytest.fixture
def tickets():
    from flowmix import TicketCounter
    return TicketCounter()
