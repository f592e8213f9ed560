import json

import pytest

from fakes import FakeSession


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def keyspaces_file(tmp_path):
    path = tmp_path / "keyspaces.json"
    path.write_text(json.dumps(["ks_one", "ks_two", "ks_three"]))
    return str(path)
