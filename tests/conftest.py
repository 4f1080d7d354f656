import pytest

from tests.helpers import make_config, synth_stack


@pytest.fixture
def asset_dir(tmp_path):
    site_dir = tmp_path / "website"
    site_dir.mkdir()
    (site_dir / "index.html").write_text("<html><body>hello</body></html>")
    return str(site_dir)


@pytest.fixture
def synth(asset_dir):
    def _synth(**site):
        return synth_stack(make_config(**site), asset_dir)
    return _synth
