import re

import responses

from concurrex.cli import fanout_downloader

PHOTOS = re.compile(r"https://jsonplaceholder\.typicode\.com/photos/\d+")


def test_fanout_downloader_counts_fetched_records(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, PHOTOS, json={"id": 1, "thumbnailUrl": "https://example.com/t"})
        count = fanout_downloader(0.3)
        calls = len(rsps.calls)
    assert 0 < count <= 5000
    assert count == calls
    assert (tmp_path / "logs.txt").exists()


def test_fanout_downloader_ignores_failed_fetches(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, PHOTOS, status=404)
        count = fanout_downloader(0.2)
        calls = len(rsps.calls)
    assert count == 0
    assert calls > 0