import pytest

from config import Settings, validate_settings


def test_defaults():
    config = Settings()

    assert config.pdf_dir == "./pdfs"
    assert config.api_path == "/api/pdfs"
    assert config.files_prefix == "/pdfs"
    assert config.file_url_prefix == "/pdfs/"
    assert config.port == 8080
    assert config.host == "0.0.0.0"
    assert validate_settings(config)


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PDFSHELF_PORT", "9090")
    monkeypatch.setenv("pdfshelf_pdf_dir", "/srv/pdfs")

    config = Settings()

    assert config.port == 9090
    assert config.pdf_dir == "/srv/pdfs"


def test_file_url_prefix_has_one_trailing_slash():
    assert Settings(files_prefix="/files/").file_url_prefix == "/files/"


@pytest.mark.parametrize("overrides", [
    {"port": 0},
    {"port": 70000},
    {"api_path": "api/pdfs"},
    {"files_prefix": "/"},
    {"api_path": "/pdfs/list"},
    {"api_path": "/pdfs"},
    {"pdf_dir": ""},
])
def test_invalid_settings(overrides):
    with pytest.raises(ValueError, match="Configuration errors"):
        validate_settings(Settings(**overrides))


def test_dotenv_file_is_ignored(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("PDFSHELF_PORT=9999\nPDFSHELF_PDF_DIR=/elsewhere\n")
    monkeypatch.chdir(tmp_path)

    config = Settings()

    assert config.port == 8080
    assert config.pdf_dir == "./pdfs"
