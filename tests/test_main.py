from pathlib import Path

from ytn.config import DEMO_SETTINGS
from ytn.content import ContentKind
from ytn.main import main, run


def test_demo_run(info_logs) -> None:
    (channel,) = run(DEMO_SETTINGS)
    assert [content.kind for content in channel.content] == [
        ContentKind.VIDEO,
        ContentKind.VIDEO,
        ContentKind.PHOTO,
    ]
    assert [subscriber.name for subscriber in channel.subscribers] == [
        "Bob",
        "Jack",
        "Tim",
    ]
    messages = [record.getMessage() for record in info_logs.records]
    received = [message for message in messages if "received a notification" in message]
    # 5 subscribers for the first clip, then 4, then 3
    assert len(received) == 12
    assert not any(
        message.startswith("Jacke(hater)") and "Cool clip №1" in message
        for message in received
    )


def test_main_with_config_path(tmp_path: Path, info_logs) -> None:
    path = tmp_path / "ytn.toml"
    path.write_text(
        '[[channels]]\nname = "Coldplay"\nsubscribers = ["Ann"]\nreleases = ["photo"]\n',
        encoding="utf-8",
    )
    main([str(path)])
    assert "Ann received a notification from 'Coldplay'" in info_logs.text


def test_main_without_config(tmp_config_home: Path, info_logs) -> None:
    main([])
    assert "Imagine Dragons: Hey fans" in info_logs.text
    assert "using the demo settings" in info_logs.text


def test_main_applies_log_level_after_loading(tmp_path: Path, info_logs) -> None:
    path = tmp_path / "ytn.toml"
    path.write_text(
        'log_level = "WARNING"\n\n[[channels]]\nname = "Coldplay"\nreleases = ["video"]\n',
        encoding="utf-8",
    )
    main([str(path)])
    messages = [record.getMessage() for record in info_logs.records]
    assert f"path={path!r}" in messages
    assert not any(message.startswith("Running") for message in messages)
    assert not any("Hey fans" in message for message in messages)
