from pathlib import Path
import pytest
from picker.engine import Engine
from picker_ui.web import app as flask_app

def _seed(tmp: Path) -> Path:
    p = tmp / "items.txt"
    p.write_text("hello world\npicker demo line\n", encoding="utf-8")
    return p

@pytest.mark.e2e
def test_frontend_home_page_renders(tmp_path: Path):
    lines = _seed(tmp_path).read_text(encoding="utf-8").splitlines()
    eng = Engine().load_lines(lines)

    import picker_ui.web as webmod
    webmod._engine = eng

    client = flask_app.test_client()
    r = client.get("/")
    assert r.status_code == 200
    html = r.data.decode("utf-8", errors="ignore").lower()
    assert "<input" in html and "/api/filter" in html

    webmod._engine = None
