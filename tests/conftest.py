from collections.abc import Callable
from pathlib import Path
import logging

import pytest
from ytn.channel import Channel
from ytn.content import Content
from ytn.subscriber import Subscriber


Delivery = tuple[str, str]


class RecordingSubscriber(Subscriber):
    def __init__(self, name: str, deliveries: list[Delivery]) -> None:
        super().__init__(name)
        self.deliveries = deliveries

    def update(self, content: Content) -> None:
        super().update(content)
        self.deliveries.append((self.name, content.title))


@pytest.fixture(autouse=True)
def info_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    caplog.set_level(logging.INFO)
    return caplog


@pytest.fixture
def deliveries() -> list[Delivery]:
    return []


@pytest.fixture
def make_subscriber(
    deliveries: list[Delivery],
) -> Callable[[str], RecordingSubscriber]:
    def make(name: str) -> RecordingSubscriber:
        return RecordingSubscriber(name, deliveries)
    return make


@pytest.fixture
def channel() -> Channel:
    return Channel(name="Imagine Dragons")


@pytest.fixture
def tmp_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    import ytn.config as config
    config_file = tmp_path / "ytn" / "ytn.toml"
    config_file.parent.mkdir(parents=True)
    monkeypatch.setattr(config, "config_file", config_file)
    return config_file
