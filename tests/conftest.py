import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep config reads/writes out of the real home directory"""
    home = tmp_path / 'codementor_home'
    monkeypatch.setenv('CODEMENTOR_HOME', str(home))
    for name in ('CODEMENTOR_STRICT', 'CODEMENTOR_SEED', 'CODEMENTOR_CATALOG'):
        monkeypatch.delenv(name, raising=False)
    return home
