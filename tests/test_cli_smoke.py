from pathlib import Path

from apps.cli.play import main


def _scripted(*answers):
    it = iter(answers)

    def ask(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None
    return ask


def _dictionary(tmp_path: Path) -> Path:
    (tmp_path / "english5.txt").write_text("apple\nmango\namber\ncrane\n", encoding="utf-8")
    return tmp_path


def test_play_exit_from_menu(tmp_path: Path, capsys):
    data = _dictionary(tmp_path)
    code = main(["--language", "english", "--data-dir", str(data)],
                ask=_scripted("A----", "", "1"))
    assert code == 0
    out = capsys.readouterr().out
    assert "2 words remaining:\napple amber" in out


def test_play_reprompts_on_bad_playfield(tmp_path: Path, capsys):
    data = _dictionary(tmp_path)
    code = main(["--language", "english", "--data-dir", str(data)],
                ask=_scripted("A---", "A----", "p", ""))
    assert code == 0
    out = capsys.readouterr().out
    assert "Too few/many letters in playfield" in out
    assert "The word is: amber" in out


def test_play_print_all_candidates(tmp_path: Path, capsys):
    data = _dictionary(tmp_path)
    code = main(["--data-dir", str(data)],
                ask=_scripted("english", "-----", "", "3", "-----", "", "1"))
    assert code == 0
    assert "apple mango amber crane Word count: 4" in capsys.readouterr().out


def test_missing_dictionary_exits_with_error(tmp_path: Path, capsys):
    code = main(["--language", "swedish", "--length", "6", "--data-dir", str(tmp_path)],
                ask=_scripted())
    assert code == 1
    assert "Cannot start game" in capsys.readouterr().err
