import pytest

# Load C-extension deps up front: tests patch sys.modules with patch.dict, which
# would otherwise evict numpy on exit and it cannot be re-imported in-process.
import numpy  # noqa: F401
import pandas  # noqa: F401


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    # Redirect data dir for isolation
    data_dir = tmp_path / 'data'
    data_dir.mkdir()
    monkeypatch.setattr('services.persistence.DATA_DIR', str(data_dir))
    return data_dir
