from pathlib import Path

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


def test_streamlit_page_is_not_installed_as_module():
    text = PYPROJECT.read_text(encoding="utf-8")
    modules = text.split("py-modules = [", 1)[1].split("]", 1)[0]
    assert '"app"' not in modules
    assert '"calculator"' in modules
