import io

import pytest

from grammar_tokenizer.cli import main


@pytest.fixture
def grammar_file(tmp_path):
    path = tmp_path / "arith.yaml"
    path.write_text(
        "trimming: true\n"
        "token_types:\n"
        "  NUMBER: '[0-9]+'\n"
        "  PLUS: '\\+'\n",
        encoding="utf-8",
    )
    return path


def run(argv, stdin_text=""):
    out, err = io.StringIO(), io.StringIO()
    code = main(argv, stdin=io.StringIO(stdin_text), stdout=out, stderr=err)
    return code, out.getvalue(), err.getvalue()


def test_prints_tokens(grammar_file):
    code, out, err = run([str(grammar_file), "12 + 3"])
    assert code == 0
    assert out.splitlines() == ["0\tNUMBER\t'12'", "1\tPLUS\t'+'", "2\tNUMBER\t'3'"]
    assert err == ""


def test_reads_stdin(grammar_file):
    code, out, _ = run([str(grammar_file)], stdin_text="4+5\n")
    assert code == 0
    assert len(out.splitlines()) == 3


def test_no_trim_override(grammar_file):
    code, out, err = run([str(grammar_file), "--no-trim", "1 +2"])
    assert code == 1
    assert out.splitlines() == ["0\tNUMBER\t'1'"]
    assert 'No lexical element matches " +2"' in err


def test_lexical_error_exit_code(grammar_file):
    code, _, err = run([str(grammar_file), "1*2"])
    assert code == 1
    assert err.startswith("error: ")


def test_missing_grammar_file(tmp_path):
    code, _, err = run([str(tmp_path / "nope.yaml"), "1"])
    assert code == 1
    assert "not found" in err


def test_usage_error():
    with pytest.raises(SystemExit) as e:
        main([])
    assert e.value.code == 2


def test_options_between_arguments(grammar_file):
    code, out, _ = run([str(grammar_file), "--trim", "1 + 2"])
    assert code == 0
    assert len(out.splitlines()) == 3


def test_grammar_path_is_directory(tmp_path):
    code, _, err = run([str(tmp_path), "1"])
    assert code == 1
    assert err.startswith("error: ")


def test_grammar_file_not_utf8(tmp_path):
    path = tmp_path / "latin1.yaml"
    path.write_bytes(b"token_types:\n  A: '\xe9'\n")
    code, _, err = run([str(path), "1"])
    assert code == 1
    assert err.startswith("error: ")
