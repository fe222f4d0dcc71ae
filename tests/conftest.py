# tests/conftest.py
import itertools
import pytest
from types import SimpleNamespace


class InMemoryProfileStore:
    """dict 기반 ProfileStore 대역"""

    def __init__(self):
        self.rows = {}
        self._ids = itertools.count(1)

    def save(self, record):
        if record.id is None:
            record = record.model_copy(update={"id": next(self._ids)})
        self.rows[record.id] = record
        return record

    def find_by_id(self, engineer_id):
        return self.rows.get(engineer_id)

    def find_all(self):
        return list(self.rows.values())

    def delete_by_id(self, engineer_id):
        self.rows.pop(engineer_id, None)

    def exists_by_id(self, engineer_id):
        return engineer_id in self.rows

    def count(self):
        return len(self.rows)


def make_openai_client(content=None, error=None, calls=None):
    """chat.completions.create 만 흉내내는 OpenAI 클라이언트 (SimpleNamespace 중첩)"""
    def create(*args, **kwargs):
        if calls is not None:
            calls.append(kwargs)
        if error is not None:
            raise error
        return SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
        )

    return SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))


@pytest.fixture
def store():
    return InMemoryProfileStore()


@pytest.fixture
def fake_openai():
    return make_openai_client
