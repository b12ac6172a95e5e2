import io
import random

import pytest

from enfrendados.game import (
    DEFAULT_PAUSE,
    STARTING_DICE,
    WIN_BONUS,
    Console,
    Player,
    decide_first,
    play_match,
    play_turn,
    roll_dice,
    round_status,
)


class ScriptedRng:
    def __init__(self, values):
        self._values = list(values)

    def randint(self, low, high):
        value = self._values.pop(0)
        assert low <= value <= high
        return value


class LowestRng:
    def randint(self, low, high):
        return low


def make_console(text=""):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def test_console_read_line_strips_newline():
    console, _ = make_console("hola\nmundo\n")
    assert console.read_line() == "hola"
    assert console.read_line() == "mundo"


def test_console_read_line_at_eof_raises():
    console, _ = make_console("")
    with pytest.raises(EOFError):
        console.read_line()


def test_console_pause_writes_default_message():
    console, out = make_console()
    console.pause()
    assert out.getvalue() == DEFAULT_PAUSE + "\n"


def test_player_defaults():
    player = Player("Ana")
    assert player.dice_count == STARTING_DICE
    assert player.score == 0
    assert player.dice == []


def test_roll_dice_uses_source():
    assert roll_dice(3, ScriptedRng([2, 6, 1])) == [2, 6, 1]


def test_roll_dice_range():
    dice = roll_dice(40, random.Random(3))
    assert len(dice) == 40
    assert all(1 <= die <= 6 for die in dice)


def test_roll_dice_negative_count():
    with pytest.raises(ValueError):
        roll_dice(-1)


def test_decide_first_rerolls_on_tie():
    console, out = make_console()
    assert decide_first("Ana", "Beto", ScriptedRng([3, 3, 5, 2]), console) == 0
    assert "¡Empate! Se vuelve a tirar." in out.getvalue()


def test_decide_first_second_player():
    console, out = make_console()
    assert decide_first("Ana", "Beto", ScriptedRng([1, 4]), console) == 1
    assert "Empate" not in out.getvalue()


def test_round_status_contents():
    text = round_status(2, Player("Ana", 4, 10), Player("Beto", 8, 0))
    assert text.startswith("Ronda 2\n")
    assert "Puntajes de Ana: 10\n" in text
    assert "Dados de Beto: 8\n" in text


def test_pass_takes_a_die_from_opponent():
    current, opponent = Player("Ana"), Player("Beto")
    console, out = make_console("0\n")
    rng = ScriptedRng([3, 4, 1, 2, 3, 4, 5, 6])
    assert play_turn(current, opponent, rng, console) is False
    assert current.dice_count == STARTING_DICE + 1
    assert opponent.dice_count == STARTING_DICE - 1
    assert current.score == 0
    assert "ha pasado su turno" in out.getvalue()


def test_pass_when_opponent_has_one_die():
    current, opponent = Player("Ana"), Player("Beto", dice_count=1)
    console, out = make_console("0\n")
    rng = ScriptedRng([3, 4, 1, 2, 3, 4, 5, 6])
    assert play_turn(current, opponent, rng, console) is False
    assert current.dice_count == STARTING_DICE
    assert opponent.dice_count == 1
    assert "Beto no tiene suficientes dados para entregar." in out.getvalue()


def test_correct_combination_scores_and_hands_over_dice():
    current, opponent = Player("Ana"), Player("Beto")
    console, out = make_console("1\n6\n")
    rng = ScriptedRng([3, 4, 1, 2, 3, 4, 5, 6])
    assert play_turn(current, opponent, rng, console) is False
    assert current.score == 14
    assert current.dice_count + opponent.dice_count == 2 * STARTING_DICE
    assert opponent.dice_count - current.dice_count == 4
    assert "¡Es correcta!" in out.getvalue()
    assert current.dice == [1, 2, 3, 4, 5, 6]


def test_incorrect_combination_after_using_all_dice():
    current, opponent = Player("Ana"), Player("Beto")
    console, out = make_console("1\n2\n3\n4\n5\n6\n")
    rng = ScriptedRng([3, 4] + [1] * 6)
    assert play_turn(current, opponent, rng, console) is False
    assert current.score == 0
    assert current.dice_count == STARTING_DICE + 1
    assert " Es incorrecta." in out.getvalue()


def test_running_out_of_dice_wins():
    current, opponent = Player("Ana", dice_count=2), Player("Beto")
    console, out = make_console("1\n2\n")
    rng = ScriptedRng([1, 1, 1, 1])
    assert play_turn(current, opponent, rng, console) is True
    assert current.dice_count == 0
    assert current.score > WIN_BONUS
    assert "Ana se quedó sin dados y Ganó la partida!" in out.getvalue()


def test_invalid_choices_are_rejected_and_asked_again():
    current, opponent = Player("Ana"), Player("Beto")
    console, out = make_console("abc\n9\n1\n1\n0\n")
    rng = ScriptedRng([6, 6, 1, 1, 1, 1, 1, 1])
    assert play_turn(current, opponent, rng, console) is False
    text = out.getvalue()
    assert "Entrada inválida. Debe ser un número." in text
    assert "Posición inválida. Intente de nuevo." in text
    assert "No podés repetir el dado, volvé a elegir" in text
    assert "ha pasado su turno" in text


def test_turn_without_input_raises_eof():
    console, _ = make_console("")
    with pytest.raises(EOFError):
        play_turn(Player("Ana"), Player("Beto"), ScriptedRng([3, 4] + [1] * 6), console)


def test_match_ends_early_on_win():
    first, second = Player("Ana", dice_count=2), Player("Beto")
    console, out = make_console("1\n2\n")
    assert play_match(first, second, ScriptedRng([1, 1, 1, 1]), console) is True
    text = out.getvalue()
    assert "Ronda 1" in text
    assert "Ronda 2" not in text
    assert second.score == 0
    assert first.score > WIN_BONUS


def test_match_plays_three_rounds_when_everyone_passes():
    first, second = Player("Ana"), Player("Beto")
    console, out = make_console("0\n" * 6)
    assert play_match(first, second, LowestRng(), console) is False
    text = out.getvalue()
    assert "Ronda 3" in text
    assert "Ronda 4" not in text
    assert text.count("ha pasado su turno") == 6
    assert first.dice_count == second.dice_count
    assert first.score == second.score == 0