import os

from workout_tracker import __main__ as cli

def test_defaults():
    args = cli.build_parser().parse_args([])
    assert (args.host, args.port, args.db, args.static_files) == ("127.0.0.1", 8080, None, None)

def test_overrides_go_to_environment(monkeypatch, tmp_path):
    # work on a throwaway copy so nothing leaks into other tests
    monkeypatch.setattr(os, "environ", dict(os.environ))
    db_file = tmp_path / "w.db"
    args = cli.build_parser().parse_args(
        ["--db", str(db_file), "--static-files", "dist", "--log-level", "debug", "--port", "9000"]
    )
    cli.apply_overrides(args)
    assert os.environ["DATABASE_URL"] == f"sqlite:///{db_file}"
    assert os.environ["STATIC_FILES_DIR"] == "dist"
    assert os.environ["LOG_LEVEL"] == "DEBUG"
    assert args.port == 9000

def test_main_starts_uvicorn(monkeypatch):
    seen = {}
    monkeypatch.setattr(cli.uvicorn, "run", lambda target, **kw: seen.update(target=target, **kw))
    cli.main(["--host", "0.0.0.0", "--port", "8123"])
    assert seen["target"] == "workout_tracker.main:app"
    assert (seen["host"], seen["port"]) == ("0.0.0.0", 8123)
