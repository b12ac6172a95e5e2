import io

import pytest

from enfrendados.game import DEFAULT_PAUSE, Console, Player
from enfrendados.screens import (
    credits_text,
    main_menu,
    rules_text,
    show_credits,
    show_rules,
    show_statistics,
    statistics_report,
)


def make_console(text=""):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def test_report_without_match():
    report = statistics_report(Player("A"), Player("B"), "Nadie", 0, False)
    assert "NO SE HA JUGADO NINGUNA PARTIDA." in report
    assert "Aún no se ha registrado ningún récord en esta sesión." in report
    assert "Jugador:" not in report


def test_report_first_wins():
    first = Player("Ana", dice_count=2, score=120)
    second = Player("Beto", dice_count=10, score=30)
    report = statistics_report(first, second, "Ana", 120, True)
    assert "Jugador: Ana | Puntos: 120 | Dados restantes: 2" in report
    assert "Jugador: Beto | Puntos: 30 | Dados restantes: 10" in report
    assert "¡El ganador de la ÚLTIMA PARTIDA es: Ana!" in report
    assert "MEJOR JUGADOR: Ana con 120 puntos." in report


def test_report_second_wins_and_tie():
    report = statistics_report(
        Player("Ana", score=1), Player("Beto", score=5), "Beto", 5, True
    )
    assert "¡El ganador de la ÚLTIMA PARTIDA es: Beto!" in report
    tie = statistics_report(Player("Ana"), Player("Beto"), "Nadie", 0, True)
    assert "¡La ÚLTIMA PARTIDA TERMINÓ EN EMPATE!" in tie


def test_report_ends_with_closing_line():
    report = statistics_report(Player("A"), Player("B"), "Nadie", 0, True)
    assert report.endswith("=" * 67 + "\n")


def test_show_statistics_pauses_twice():
    console, out = make_console()
    first = Player("Ana", score=40)
    second = Player("Beto", score=10)
    show_statistics(first, second, "Ana", 40, True, console)
    text = out.getvalue()
    assert text.count(DEFAULT_PAUSE) == 2
    assert text.index("ESTADÍSTICAS") < text.index("MEJOR JUGADOR: Ana con 40 puntos.")


def test_main_menu_retries_until_valid():
    console, out = make_console("x\n7\n3\n")
    assert main_menu(console) == 3
    text = out.getvalue()
    assert "Entrada invalida. Intente nuevamente" in text
    assert "La opcion 7 no es valida." in text


@pytest.mark.parametrize("choice", [0, 1, 2, 3, 4])
def test_main_menu_accepts_each_option(choice):
    console, _ = make_console(f"{choice}\n")
    assert main_menu(console) == choice


def test_main_menu_end_of_input():
    console, _ = make_console("")
    with pytest.raises(EOFError):
        main_menu(console)


def test_rules_shown_in_full():
    console, out = make_console()
    show_rules(console)
    assert rules_text() in out.getvalue()
    assert "REGLAMENTO DEL JUEGO: ENFRENDADOS" in rules_text()


def test_credits_shown_in_full():
    console, out = make_console()
    show_credits(console)
    text = out.getvalue()
    assert text.startswith(credits_text())
    assert "CREDITOS DEL JUEGO" in credits_text()
    assert DEFAULT_PAUSE in text