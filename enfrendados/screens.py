"""Menu, statistics, rules, credits and cover screens."""

from __future__ import annotations

import os
import sys

from enfrendados import terminal
from enfrendados.game import DEFAULT_PAUSE, Console, Player, TerminalConsole
from enfrendados.terminal import Color

MENU_CHOICES = range(0, 5)

_MENU_LOGO = (
    r"           __  __ ______ _  _ _   _",
    r"          |  \/  |  ____| \ | | |  | |",
    r"          | \  / | |__  |  \| | |  | |",
    r"          | |\/| |  __| | . ` | |  | |",
    r"          | |  | | |____| |\  | |__| |",
    r"          |_|  |_|______|_| \_|\____/",
)

_MENU_ITEMS = (
    (11, "1. Jugar"),
    (13, "2. Estadistica"),
    (15, "3. Creditos"),
    (17, "4. Reglamento"),
    (19, "0. Salir"),
)

_MENU_PROMPT = "Ingrese una opcion: "

_COVER_ART = (
    r" _______   ____________  _______   ______  ___     ____  ____  _____ ",
    r"/ ____/ | / / ____/ __ \/ ____/ | / / __ \/   |   / __ \/ __ \/ ___/ ",
    r"/ __/ /  |/ / /_  / /_/ / __/ /  |/ / / / / /| |  / / / / / / /\__ \ ",
    r"/ /___/ /|  / __/ / _, _/ /___/ /|  / /_/ / ___ | / /_/ / /_/ /___/ /",
    r"/_____/_/ |_/_/   /_/ |_/_____/_/ |_/_____/_/  |_/_____/\____//____/ ",
)

_STATS_CLOSING = "=" * 67 + "\n"

_RULES = (
    (Color.LIGHTRED,
     "\n=================   REGLAMENTO DEL JUEGO: ENFRENDADOS   =================\n"),
    (Color.WHITE,
     "Enfrendados es un juego de dados para dos jugadores que combina el azar\n"
     "con las matemáticas. El objetivo es sumar la mayor cantidad de puntos\n"
     "en un total de tres rondas.\n\n"),
    (Color.LIGHTBLUE,
     "-----------------------------------------------------------------------\n"),
    (Color.YELLOW, "REGLAS GENERALES:\n"),
    (Color.WHITE,
     "- Cada jugador tiene seis dados de seis caras (dados stock).\n"
     "- Adicionalmente, hay dos dados de doce caras que se usan entre rondas.\n"
     "- Al comenzar el juego, cada jugador lanza un dado de 6 caras.\n"
     "   Quien saque el valor más alto comienza la partida.\n"
     "   En caso de empate, se repite la tirada.\n"),
    (Color.YELLOW, "\nDINÁMICA DE CADA RONDA:\n"),
    (Color.WHITE,
     "- El jugador que inicia lanza los dos dados de 12 caras.\n"
     "- Luego lanza los dados stock (dados de 6 caras que tenga en su poder).\n"
     "- Los dados que tiene cada jugador se denominan dados stock y pueden\n"
     "   variar de una ronda a otra.\n"),
    (Color.YELLOW, "\nPUNTAJE:\n"),
    (Color.WHITE,
     "- Después de ambos lanzamientos, se determina el puntaje basado en\n"
     "   en matemáticas o si el jugador se quedó sin dados.\n"),
    (Color.YELLOW, "\nIMPORTANTE:\n"),
    (Color.WHITE,
     "- El juego finaliza después de 3 rondas y gana quien tenga más puntos.\n"
     "- Las reglas completas de puntuación se explican durante el juego.\n"),
    (Color.LIGHTRED,
     "=======================================================================\n\n"),
)

_CREDITS = (
    (Color.LIGHTMAGENTA,
     "===================== CREDITOS DEL JUEGO =====================\n\n"),
    (Color.YELLOW, "Nombre del grupo: "),
    (Color.WHITE, "Grupo 2\n\n"),
    (Color.LIGHTCYAN, "Participantes\n\n"),
    (Color.WHITE, "   - Integrantes del Grupo 2\n\n"),
    (Color.LIGHTGREEN, "MENCIONES ESPECIALES para:\n\n"),
    (Color.WHITE,
     "   - Íconos y logo de uso libre.\n"
     "   - Juego levemente inspirado en el juego Mafia.\n\n"),
    (Color.LIGHTBLUE,
     "=========================== ANEXO ============================\n"
     " \n \n \n \n"),
)


def _is_terminal(console: Console) -> bool:
    return isinstance(console, TerminalConsole)


def _paint(console: Console, color: Color) -> None:
    if _is_terminal(console):
        console.write(terminal.ansi_color(color))


def _at(console: Console, x: int, y: int, text: str) -> None:
    console.write(f"\033[{y};{x}H{text}")


def _statistics_sections(
    first: Player, second: Player, record_name: str, record_score: int, played: bool
) -> tuple[str, str]:
    if not played:
        match = (
            "==========================================================\n"
            "               NO SE HA JUGADO NINGUNA PARTIDA.       \n"
            "       ¡JUEGA UNA PARTIDA PARA VER LAS ESTADÍSTICAS!      \n"
            "==========================================================\n"
        )
    else:
        if first.score > second.score:
            verdict = f"¡El ganador de la ÚLTIMA PARTIDA es: {first.name}!\n"
        elif second.score > first.score:
            verdict = f"¡El ganador de la ÚLTIMA PARTIDA es: {second.name}!\n"
        else:
            verdict = "¡La ÚLTIMA PARTIDA TERMINÓ EN EMPATE!\n"
        lines = [
            "================ ESTADÍSTICAS DE LA ÚLTIMA PARTIDA ================\n"
        ]
        lines += [
            f"Jugador: {p.name} | Puntos: {p.score} | Dados restantes: {p.dice_count}\n"
            for p in (first, second)
        ]
        lines.append("--------------------------------------------------------\n")
        lines.append(verdict)
        lines.append(
            "-------------------------------------------------------------------\n"
        )
        match = "".join(lines)
    if record_score > 0:
        record = (
            "============= RÉCORD HISTÓRICO EN ESTA SESIÓN DE JUEGO =============\n"
            f"MEJOR JUGADOR: {record_name} con {record_score} puntos.\n"
        )
    else:
        record = "Aún no se ha registrado ningún récord en esta sesión.\n"
    return match, record


def statistics_report(
    first: Player, second: Player, record_name: str, record_score: int, played: bool
) -> str:
    """The full statistics screen as text."""
    match, record = _statistics_sections(
        first, second, record_name, record_score, played
    )
    return match + record + _STATS_CLOSING


def show_statistics(
    first: Player,
    second: Player,
    record_name: str,
    record_score: int,
    played: bool,
    console: Console,
) -> None:
    """Show the last match's statistics and the session record, pausing between parts."""
    match, record = _statistics_sections(
        first, second, record_name, record_score, played
    )
    if not played:
        _paint(console, Color.YELLOW)
        console.write(match)
        _paint(console, Color.WHITE)
    else:
        console.write(match)
    console.pause()
    console.write(record)
    console.pause()
    console.write(_STATS_CLOSING)


def _draw_menu(console: Console) -> None:
    if not _is_terminal(console):
        console.write("MENU\n")
        console.write("".join(f"{label}\n" for _, label in _MENU_ITEMS))
        console.write(_MENU_PROMPT)
        return
    console.clear()
    _paint(console, Color.LIGHTGREEN)
    for row in range(2, 21):
        _at(console, 15, row, "|")
        _at(console, 103, row, "|")
    _at(console, 15, 1, "=" * 89)
    _paint(console, Color.RED)
    for row, line in enumerate(_MENU_LOGO, start=2):
        _at(console, 25, row, line)
    _paint(console, Color.LIGHTGREEN)
    _at(console, 16, 9, "=" * 87)
    _paint(console, Color.MAGENTA)
    for row, label in _MENU_ITEMS:
        _at(console, 25, row, " " * 16 + label)
    _paint(console, Color.LIGHTGREEN)
    _at(console, 15, 21, "=" * 89)
    _paint(console, Color.YELLOW)
    _at(console, 26, 26, " " * 19 + _MENU_PROMPT + "\n\n\n\n")
    _paint(console, Color.LIGHTGREEN)
    for row in range(25, 28):
        _at(console, 43, row, "|")
        _at(console, 74, row, "|")
    _at(console, 43, 24, "=" * 32)
    _at(console, 43, 28, "=" * 32)
    console.write("\033[26;67H")


def main_menu(console: Console) -> int:
    """Show the main menu until a valid option (0 to 4) is entered, and return it."""
    fancy = _is_terminal(console)
    while True:
        _draw_menu(console)
        answer = console.read_line()
        try:
            choice = int(answer.strip())
        except ValueError:
            if fancy:
                _at(console, 41, 26, "")
            console.write("Entrada invalida. Intente nuevamente\n")
            console.sleep(1000)
            console.clear()
            continue
        if choice in MENU_CHOICES:
            console.clear()
            return choice
        _paint(console, Color.LIGHTRED)
        if fancy:
            _at(console, 75, 26, "")
        console.write(f"        La opcion {choice} no es valida.\n")
        if fancy:
            _at(console, 79, 27, "")
        console.write("      Intente nuevamente.\n")
        console.sleep(1500)
        console.clear()


def rules_text() -> str:
    """The game rules as plain text."""
    return "".join(text for _, text in _RULES)


def show_rules(console: Console) -> None:
    """Show the rules and wait for a key."""
    console.clear()
    for color, text in _RULES:
        _paint(console, color)
        console.write(text)
    _paint(console, Color.LIGHTCYAN)
    console.write("Presione una tecla para volver al menú...\n")
    _paint(console, Color.WHITE)
    console.pause("")
    console.clear()


def credits_text() -> str:
    """The credits as plain text."""
    return "".join(text for _, text in _CREDITS)


def show_credits(console: Console) -> None:
    """Show the credits and wait for a key."""
    for color, text in _CREDITS:
        _paint(console, color)
        console.write(text)
    console.write(DEFAULT_PAUSE + "\n")
    console.pause("")


def _put(x: int, y: int, text: str) -> None:
    terminal.locate(x, y)
    sys.stdout.write(text)
    sys.stdout.flush()


def _draw_cover(step: int) -> None:
    if step % 2 == 0:
        terminal.set_color(Color.RED)
        terminal.set_background_color(Color.WHITE)
    else:
        terminal.set_color(Color.WHITE)
        terminal.set_background_color(Color.LIGHTGREEN)
    terminal.hide_cursor()
    _put(15, 6, "=" * 89)
    for row in range(7, 21):
        _put(15, row, "|")
        _put(103, row, "|")
    _put(15, 20, "=" * 89)
    for row, line in enumerate(_COVER_ART, start=11):
        _put(25, row, line)
    _put(40, 25, " Presione una tecla para continuar")


def _finish_cover() -> None:
    terminal.reset_color()
    terminal.cls()


def show_cover() -> None:
    """Flash the title banner on the terminal until a key is pressed."""
    try:
        interactive = os.isatty(sys.stdin.fileno())
    except (AttributeError, OSError, ValueError):
        interactive = False
    if not interactive:
        _draw_cover(1)
        _finish_cover()
        return
    while True:
        for step in range(1, 20):
            _draw_cover(step)
            terminal.msleep(700)
            if terminal.kbhit():
                terminal.getch()
                _finish_cover()
                return