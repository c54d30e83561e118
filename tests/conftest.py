"""
Gemeinsame Fixtures für die Tests.
"""

import pytest
from hochschul_verzeichnis.persistence import RecordSerializer
from hochschul_verzeichnis.service import University


@pytest.fixture
def serializer():
    return RecordSerializer()


@pytest.fixture
def university():
    return University()
