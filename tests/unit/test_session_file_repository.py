from harmonica_sync.infrastructure.repositories.session_file_repository import SessionFileRepository


def test_load_existing_ids_creates_missing_directory(tmp_path):
    """Verifica que el escaneo cree el directorio de salida si no existe."""
    output_dir = tmp_path / "sessions"
    repo = SessionFileRepository(output_dir)

    assert repo.load_existing_ids() == set()
    assert output_dir.is_dir()


def test_load_existing_ids_extracts_token_before_extension(tmp_path):
    """Verifica que solo cuente el token hst_ justo antes de .md."""
    (tmp_path / "2026-02-24-hst_abc123.md").write_text("x")
    (tmp_path / "my-topic-hst_00ff.md").write_text("x")
    (tmp_path / "hst_deadbeef.txt").write_text("x")
    (tmp_path / "hst_abc999-notes.md").write_text("x")
    (tmp_path / "README.md").write_text("x")

    ids = SessionFileRepository(tmp_path).load_existing_ids()

    assert ids == {"hst_abc123", "hst_00ff"}


def test_write_overwrites_existing_file(tmp_path):
    """Verifica que write sobrescriba un archivo existente."""
    repo = SessionFileRepository(tmp_path)
    (tmp_path / "2026-02-24-hst_1.md").write_text("old")

    path = repo.write("2026-02-24-hst_1.md", "new")

    assert path == tmp_path / "2026-02-24-hst_1.md"
    assert path.read_text(encoding="utf-8") == "new"
