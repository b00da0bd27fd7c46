import pytest

from skylines import fetch
from skylines.paths import CLINES_FILE_NAME, HYGDATA_FILE_NAME


def test_existing_file_is_not_downloaded(tmp_path, monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("download attempted")

    monkeypatch.setattr(fetch, "download_file", fail)
    path = tmp_path / "clines.dat"
    path.write_text("C\n", encoding="utf-8")
    assert fetch.download_if_missing(path, "https://example.invalid/clines.dat") == path
    assert path.read_text(encoding="utf-8") == "C\n"


def test_missing_file_is_downloaded(tmp_path, monkeypatch):
    downloaded = tmp_path / "download.tmp"
    downloaded.write_text("payload", encoding="utf-8")
    calls = []

    def fake_download(url, cache=False, show_progress=True):
        calls.append(url)
        return str(downloaded)

    monkeypatch.setattr(fetch, "download_file", fake_download)
    target = tmp_path / "data" / "hygdata_v3.csv"
    assert fetch.download_if_missing(target, "https://example.invalid/hyg.csv") == target
    assert target.read_text(encoding="utf-8") == "payload"
    assert not downloaded.exists()
    assert calls == ["https://example.invalid/hyg.csv"]


def test_ensure_sources_uses_configured_urls(tmp_path, monkeypatch):
    calls = []

    def fake_download(url, cache=False, show_progress=True):
        calls.append(url)
        tmp = tmp_path / f"tmp{len(calls)}"
        tmp.write_text(url, encoding="utf-8")
        return str(tmp)

    monkeypatch.setattr(fetch, "download_file", fake_download)
    urls = {"hygdata_url": "https://example.invalid/a.csv", "clines_url": "https://example.invalid/b.dat"}
    catalog_file, clines_file = fetch.ensure_sources(tmp_path / "data", urls)
    assert catalog_file.name == HYGDATA_FILE_NAME
    assert clines_file.name == CLINES_FILE_NAME
    assert calls == ["https://example.invalid/a.csv", "https://example.invalid/b.dat"]


def test_download_error_propagates(tmp_path, monkeypatch):
    def broken(*args, **kwargs):
        raise OSError("network unreachable")

    monkeypatch.setattr(fetch, "download_file", broken)
    with pytest.raises(OSError):
        fetch.download_if_missing(tmp_path / "x.csv", "https://example.invalid/x.csv")
