import shutil
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from astropy.utils.data import download_file

from .paths import CLINES_FILE_NAME, CLINES_URL, HYGDATA_FILE_NAME, HYGDATA_URL


def download_if_missing(path: Union[str, Path], url: str) -> Path:
    """Downloads url to path unless the file is already there."""
    path = Path(path)
    if path.exists():
        return path

    print(f"Downloading {path.name}")
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = download_file(url, cache=False, show_progress=False)
    shutil.move(tmp, path)
    return path


def ensure_sources(data_dir: Union[str, Path], urls: Optional[Dict[str, str]] = None) -> Tuple[Path, Path]:
    """Makes sure the star catalog and clines.dat exist in data_dir.

    Returns (catalog path, clines path).
    """
    data_dir = Path(data_dir)
    urls = urls or {}
    catalog_file = download_if_missing(data_dir / HYGDATA_FILE_NAME, urls.get("hygdata_url", HYGDATA_URL))
    clines_file = download_if_missing(data_dir / CLINES_FILE_NAME, urls.get("clines_url", CLINES_URL))
    return catalog_file, clines_file
