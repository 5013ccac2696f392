from pathlib import Path
import pytest
from backend.engine import Engine
import frontend.web as webmod
from frontend.web import app as flask_app


def _seed(tmp: Path) -> str:
    path = tmp / "hamlet.txt"
    path.write_text(
        "To be, or not to be: that is the question.\n"
        "Whether 'tis nobler in the mind to suffer.\n",
        encoding="utf-8",
    )
    return str(path)


@pytest.fixture
def client(tmp_path: Path, monkeypatch):
    eng = Engine()
    eng.load(_seed(tmp_path))
    monkeypatch.setattr(webmod, "_engine", eng)
    yield flask_app.test_client()
    eng.shutdown()


@pytest.mark.e2e
def test_search_returns_json_list_of_snippets(client):
    rv = client.get("/search?q=question")
    assert rv.status_code == 200
    data = rv.get_json()
    assert isinstance(data, list) and len(data) == 1
    assert "<mark>question</mark>" in data[0]


@pytest.mark.e2e
def test_search_flags(client):
    rv = client.get("/search?q=To&cs=on")
    assert rv.get_json()[0].count("<mark>To</mark>") == 1
    rv = client.get("/search?q=to&ww=on")
    snippet = rv.get_json()[0]
    assert snippet.count("<mark>") == 3  # "To", "not to be", "mind to suffer"
    assert "<mark>to</mark>" in snippet


@pytest.mark.e2e
def test_search_rejects_missing_and_bad_queries(client):
    assert client.get("/search").status_code == 400
    rv = client.get("/search?q=to(")
    assert rv.status_code == 400
    assert "to(" in rv.get_data(as_text=True)


@pytest.mark.e2e
def test_suggest(client):
    rv = client.get("/suggest?q=the")
    assert rv.status_code == 200
    assert rv.get_json() == ["the"]


@pytest.mark.e2e
def test_suggest_rejects_short_queries(client):
    assert client.get("/suggest?q=th").status_code == 400
    assert client.get("/suggest").status_code == 400


@pytest.mark.e2e
def test_health_and_home(client):
    rv = client.get("/health")
    assert rv.status_code == 200
    assert rv.get_json()["ok"] is True
    rv = client.get("/")
    assert rv.status_code == 200
    assert "corpus search" in rv.get_data(as_text=True).lower()
    assert client.get("/app.js").status_code == 200


def test_requests_before_load_are_unavailable(monkeypatch):
    monkeypatch.setattr(webmod, "_engine", None)
    client = flask_app.test_client()
    assert client.get("/search?q=cat").status_code == 503
    assert client.get("/health").get_json()["ok"] is False


@pytest.mark.e2e
def test_suggest_checks_the_first_token_length(client):
    rv = client.get("/suggest?q=a%20question")
    assert rv.status_code == 400
    assert "at least 3" in rv.get_data(as_text=True)
    rv = client.get("/suggest?q=the%20a")
    assert rv.status_code == 200
    assert rv.get_json() == ["the"]


def test_malformed_port_is_reported_by_the_cli(monkeypatch, capsys):
    monkeypatch.setattr(webmod.CFG, "PORT", "not-a-port")
    with pytest.raises(SystemExit) as exc:
        webmod.main(["--corpus", "unused.txt"])
    assert exc.value.code == 2
    assert "--port" in capsys.readouterr().err


def test_malformed_port_env_does_not_break_config_import(monkeypatch):
    import importlib
    from backend import config

    monkeypatch.setenv("PORT", "not-a-port")
    try:
        importlib.reload(config)
        assert config.PORT == "not-a-port"
    finally:
        monkeypatch.delenv("PORT")
        importlib.reload(config)
    assert config.PORT == "3001"
