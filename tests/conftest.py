"""Shared fixtures: a throwaway note store and a fake wttr.in."""

import copy
import io
import json
import urllib.error
import urllib.request
from pathlib import Path

import pytest

from core.config import Settings
from core.notes import NoteStore

SAMPLE_J1 = {
    "current_condition": [
        {
            "temp_F": "72",
            "temp_C": "22",
            "weatherDesc": [{"value": "Partly cloudy"}],
            "humidity": "64",
            "windspeedMiles": "9",
            "winddir16Point": "NNW",
        }
    ],
    "nearest_area": [],
}


@pytest.fixture()
def sample_j1() -> dict:
    return copy.deepcopy(SAMPLE_J1)


@pytest.fixture()
def notes_dir(tmp_path: Path) -> Path:
    # Deliberately not created: the store must make it on first use.
    return tmp_path / "home" / "dev-notes"


@pytest.fixture()
def store(notes_dir: Path) -> NoteStore:
    return NoteStore(notes_dir)


@pytest.fixture()
def settings(notes_dir: Path) -> Settings:
    return Settings(notes_dir=notes_dir, weather_url="https://weather.test")


class FakeWttr:
    """Stands in for urllib.request.urlopen and records requested URLs."""

    def __init__(self):
        self.urls: list[str] = []
        self.status = 200
        self.body: bytes = json.dumps(SAMPLE_J1).encode("utf-8")

    def __call__(self, req, *args, **kwargs):
        url = req.full_url if isinstance(req, urllib.request.Request) else req
        self.urls.append(url)
        if not 200 <= self.status < 300:
            raise urllib.error.HTTPError(url, self.status, "error", None, None)
        return io.BytesIO(self.body)


@pytest.fixture()
def wttr(monkeypatch) -> FakeWttr:
    fake = FakeWttr()
    monkeypatch.setattr(urllib.request, "urlopen", fake)
    return fake
