from linked_list_algorithms.config import env_flag


def test_env_flag_spellings(monkeypatch):
    for value in ("1", "true", "TRUE", "yes", " on "):
        monkeypatch.setenv("LLVIZ_FLAG", value)
        assert env_flag("LLVIZ_FLAG")
    for value in ("0", "false", "no", ""):
        monkeypatch.setenv("LLVIZ_FLAG", value)
        assert not env_flag("LLVIZ_FLAG")


def test_env_flag_default(monkeypatch):
    monkeypatch.delenv("LLVIZ_FLAG", raising=False)
    assert not env_flag("LLVIZ_FLAG")
    assert env_flag("LLVIZ_FLAG", default=True)
