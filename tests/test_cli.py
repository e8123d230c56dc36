import io
import json
from pathlib import Path

import pytest

import wordguess.cli.play as play
import wordguess.cli.simulate as simulate


def _lists(tmp_path: Path):
    ans = tmp_path / "answers.txt"
    allw = tmp_path / "allowed.txt"
    ans.write_text("crane\nslate\nbrine\n", encoding="utf-8")
    allw.write_text("hotel\npygmy\n", encoding="utf-8")
    return ["--answers", str(ans), "--allowed", str(allw)]


def test_play_win(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("cranes\nslate\ncrane\n"))
    code = play.main(_lists(tmp_path) + ["--no-color"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Only 5 letter words are accepted" in out
    assert " s  l  a  t  e " in out
    assert "You guessed CRANE in 2 attempts!" in out


def test_play_index_and_rounds(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("slate\nbrine\n"))
    code = play.main(_lists(tmp_path) + ["--index", "1", "--rounds", "5", "--no-color"])
    out = capsys.readouterr().out
    assert code == 0
    assert "You guessed SLATE" in out and "You guessed BRINE" in out


def test_play_end_of_input(tmp_path, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("slate\n"))
    assert play.main(_lists(tmp_path) + ["--no-color"]) == 1


def test_play_bad_index(tmp_path):
    assert play.main(_lists(tmp_path) + ["--index", "99"]) == 2


def test_play_missing_file(tmp_path):
    assert play.main(["--answers", str(tmp_path / "nope.txt")]) == 2


def test_play_check_lists(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("crane\n"))
    assert play.main(_lists(tmp_path) + ["--check-lists", "--no-color"]) == 0
    assert "dictionary=5 | OK" in capsys.readouterr().out


def test_simulate_writes_reports(tmp_path, capsys):
    outdir = tmp_path / "reports"
    code = simulate.main(_lists(tmp_path) + ["--solver", "random_consistent", "--seed", "3",
                                             "--outdir", str(outdir), "--progress", "off"])
    assert code == 0
    out = capsys.readouterr().out
    assert "random_consistent: won 3/3" in out

    manifests = list(outdir.glob("run_*_manifest.json"))
    assert len(manifests) == 1
    data = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert data["num_cases"] == 3 and data["wins"] == 3
    assert len(list(outdir.glob("run_*.csv"))) == 1


def test_simulate_sample(tmp_path, capsys):
    code = simulate.main(_lists(tmp_path) + ["--sample", "2", "--outdir", str(tmp_path / "r"),
                                             "--progress", "plain"])
    assert code == 0
    assert "won 2/2" in capsys.readouterr().out


def test_simulate_refuses_malformed_lists(tmp_path, capsys):
    ans = tmp_path / "answers.txt"
    allw = tmp_path / "allowed.txt"
    ans.write_text("crane\nquickbrown\n", encoding="utf-8")
    allw.write_text("slate\n", encoding="utf-8")
    code = simulate.main(["--answers", str(ans), "--allowed", str(allw), "--solver", "letter_freq",
                          "--outdir", str(tmp_path / "r"), "--progress", "off"])
    assert code == 2
    assert "FAIL" in capsys.readouterr().out
    assert not (tmp_path / "r").exists()


@pytest.mark.parametrize("value", ["0", "-1"])
def test_simulate_rejects_non_positive_sample(tmp_path, value):
    with pytest.raises(SystemExit) as exc:
        simulate.main(_lists(tmp_path) + ["--sample", value])
    assert exc.value.code == 2


def test_simulate_batch_error_exits_2(tmp_path, monkeypatch):
    def boom(*args, **kwargs):
        raise ValueError("secret must be a 5-letter word")

    monkeypatch.setattr(simulate, "run_batch", boom)
    code = simulate.main(_lists(tmp_path) + ["--outdir", str(tmp_path / "r"), "--progress", "off"])
    assert code == 2
