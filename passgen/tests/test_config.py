import os

from passgen.core.config import Settings, _flag, get_settings


def test_default_template_path_points_at_package_templates():
    path = get_settings().template_path
    assert os.path.isfile(os.path.join(path, "index.html"))


def test_absolute_template_dir_is_used_as_is(tmp_path):
    settings = Settings(TEMPLATE_DIR=str(tmp_path))
    assert settings.template_path == str(tmp_path)



def test_flag_reads_environment(monkeypatch):
    for raw in ("1", "true", "TRUE", " yes ", "on"):
        monkeypatch.setenv("PASSGEN_SECURE_RANDOM", raw)
        assert _flag("PASSGEN_SECURE_RANDOM") is True
    for raw in ("0", "false", "", "nope"):
        monkeypatch.setenv("PASSGEN_SECURE_RANDOM", raw)
        assert _flag("PASSGEN_SECURE_RANDOM") is False


def test_flag_default_when_unset(monkeypatch):
    monkeypatch.delenv("PASSGEN_SECURE_RANDOM", raising=False)
    assert _flag("PASSGEN_SECURE_RANDOM") is False
    assert _flag("PASSGEN_SECURE_RANDOM", default="true") is True
