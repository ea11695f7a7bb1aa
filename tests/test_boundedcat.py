import importlib.util
import io
import logging
from pathlib import Path

import pytest

TOOL = Path(__file__).resolve().parents[1] / "tools" / "boundedcat.py"


@pytest.fixture(scope="module")
def boundedcat():
    spec = importlib.util.spec_from_file_location("boundedcat", TOOL)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "hello.txt"
    path.write_bytes(b"Hello World")
    return path


def test_parse_args_defaults(boundedcat):
    args = boundedcat.parse_args(["some/file"])
    assert args.uri == "some/file"
    assert args.max_bytes == -1
    assert args.skip == 0
    assert args.chunk_size == 4096
    assert not args.verbose


def test_parse_args_rejects_bad_chunk_size(boundedcat):
    with pytest.raises(SystemExit) as excinfo:
        boundedcat.parse_args(["f", "--chunk-size", "0"])
    assert excinfo.value.code == 2


def test_run_limits_output(boundedcat, sample):
    out = io.BytesIO()
    args = boundedcat.parse_args([str(sample), "--max-bytes", "5", "--chunk-size", "2"])
    assert boundedcat.run(args, out) == 5
    assert out.getvalue() == b"Hello"


def test_run_skip_counts_against_limit(boundedcat, sample):
    out = io.BytesIO()
    args = boundedcat.parse_args([sample.as_uri(), "--max-bytes", "8", "--skip", "6"])
    assert boundedcat.run(args, out) == 2
    assert out.getvalue() == b"Wo"


def test_main_unlimited(boundedcat, sample, capsysbinary):
    assert boundedcat.main([str(sample)]) == 0
    assert capsysbinary.readouterr().out == b"Hello World"


def test_main_missing_file(boundedcat, tmp_path, capsys):
    assert boundedcat.main([str(tmp_path / "nope.txt")]) == 1
    assert "[error] resource does not exist" in capsys.readouterr().err


def test_run_logs_skip_on_tool_logger(boundedcat, sample, caplog):
    args = boundedcat.parse_args([str(sample), "--skip", "3"])
    with caplog.at_level(logging.DEBUG, logger="boundedcat"):
        boundedcat.run(args, io.BytesIO())
    assert any(
        record.name == "boundedcat" and "skipped 3 bytes" in record.getMessage()
        for record in caplog.records
    )
