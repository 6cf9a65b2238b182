import pytest

from pronunciation_core import EngineConfig, PronunciationEngine
from pronunciation_core.languages import resolve_profile


@pytest.fixture
def engine():
    return PronunciationEngine()


@pytest.fixture
def sequence_engine():
    return PronunciationEngine(EngineConfig(alignment_mode="sequence"))


@pytest.fixture
def en_us():
    return resolve_profile("en-US")


@pytest.fixture
def es_es():
    return resolve_profile("es-ES")


@pytest.fixture
def fr_fr():
    return resolve_profile("fr-FR")


@pytest.fixture
def unknown_language():
    return resolve_profile("xx-XX")
