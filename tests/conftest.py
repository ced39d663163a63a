"""
Shared test setup.

Logfire is configured locally (nothing sent, no console output) so spans
opened by the code under test have somewhere to go.
"""

import logfire
import pytest


@pytest.fixture(scope="session", autouse=True)
def local_logfire():
    logfire.configure(send_to_logfire=False, console=False)
