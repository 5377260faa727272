from gamebox.main import main
from gamebox.printing import FAILED


def feed(monkeypatch, answers):
    remaining = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_unknown_game_fails(monkeypatch, capsys):
    feed(monkeypatch, ["2"])
    assert main() == FAILED
    assert "Game not found!" in capsys.readouterr().out


def test_reasks_until_non_zero(monkeypatch, capsys):
    feed(monkeypatch, ["0", "abc", "7"])
    assert main([]) == FAILED
    out = capsys.readouterr().out
    assert out.count("Which game do you want to play?") == 3
    assert "Game not found!" in out


def test_negative_choice_fails(monkeypatch, capsys):
    feed(monkeypatch, ["-3"])
    assert main() == FAILED
    assert "Game not found!" in capsys.readouterr().out


def test_end_of_input_fails(monkeypatch, capsys):
    feed(monkeypatch, [])
    assert main() == FAILED
    assert "No game chosen." in capsys.readouterr().out