"""The game's main loop: menu, matches, session record and exit."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass, field

from enfrendados import terminal
from enfrendados.game import (
    Console,
    Player,
    TerminalConsole,
    decide_first,
    play_match,
)
from enfrendados.screens import (
    main_menu,
    show_cover,
    show_credits,
    show_rules,
    show_statistics,
)

NO_RECORD_NAME = "Nadie"


@dataclass
class Session:
    """State kept across matches: the last players and the best score so far."""

    first: Player = field(default_factory=lambda: Player(""))
    second: Player = field(default_factory=lambda: Player(""))
    record_name: str = NO_RECORD_NAME
    record_score: int = 0
    played: bool = False

    def record_result(self, first: Player, second: Player) -> str | None:
        """Update the session record from a finished match; return the announcement if it changed."""
        candidate = first if first.score > second.score else second
        if candidate.score <= self.record_score:
            return None
        self.record_score = candidate.score
        self.record_name = candidate.name
        return (
            f"RECORD HISTÓRICO EN LA SESIÓN: {self.record_name} "
            f"con {self.record_score} puntos.\n"
        )

    def final_report(self, first: Player, second: Player) -> str:
        """The closing summary of a match."""
        if first.score > second.score:
            verdict = f"¡El ganador es {first.name}!\n"
        elif second.score > first.score:
            verdict = f"¡El ganador es {second.name}!\n"
        else:
            verdict = "¡La partida ha terminado en empate!\n"
        return (
            "============ FIN DE LA PARTIDA ============\n"
            f"Puntaje final de {first.name}: {first.score}\n"
            f"Puntaje final de {second.name}: {second.score}\n"
            "------------------------------------------\n"
            f"{verdict}"
            "==========================================\n"
        )


def confirm_exit(console: Console) -> bool:
    """Ask whether to quit until S or N is answered; True to quit."""
    console.write("¿Estás seguro de salir del juego? S/N\n")
    answer = console.read_line().strip()[:1]
    while answer not in ("s", "S", "n", "N"):
        console.write("Entrada inválida. Debe ser S o N.\n")
        console.sleep(1000)
        console.clear()
        console.write("¿Estás seguro de salir del juego? S/N\n")
        answer = console.read_line().strip()[:1]
    if answer in ("s", "S"):
        console.write("Saliste del juego.\n")
        return True
    console.clear()
    return False


def play_new_game(session: Session, rng: random.Random, console: Console) -> None:
    """Ask for names, decide who starts, play a match and update the session."""
    console.clear()
    console.write(" Comenzará el juego \n")
    name1 = console.read_line("Ingrese nombre del jugador 1: ")
    name2 = console.read_line("Ingrese nombre del jugador 2: ")
    session.played = True

    starter = decide_first(name1, name2, rng, console)
    first = Player(name1)
    second = Player(name2)
    session.first, session.second = first, second

    leader, follower = (first, second) if starter == 0 else (second, first)
    console.write(f"{leader.name} empieza el juego.\n")
    console.pause()
    play_match(leader, follower, rng, console)

    console.sleep(2000)
    announcement = session.record_result(first, second)
    if announcement is not None:
        console.write(announcement)
        console.sleep(2000)
        console.clear()
    console.write(session.final_report(first, second))
    console.pause()


def run(console: Console, rng: random.Random) -> Session:
    """Show the menu and act on each choice until the player quits."""
    session = Session()
    while True:
        console.clear()
        choice = main_menu(console)
        if choice == 0:
            if confirm_exit(console):
                return session
        elif choice == 1:
            play_new_game(session, rng, console)
        elif choice == 2:
            show_statistics(
                session.first,
                session.second,
                session.record_name,
                session.record_score,
                session.played,
                console,
            )
        elif choice == 3:
            show_credits(console)
        elif choice == 4:
            show_rules(console)


def main(argv: list[str] | None = None) -> int:
    """Start the game on the terminal."""
    parser = argparse.ArgumentParser(
        prog="enfrendados", description="Juego de dados para dos jugadores."
    )
    parser.add_argument("--seed", type=int, default=None, help="semilla del azar")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    try:
        show_cover()
        run(TerminalConsole(), rng)
    except (EOFError, KeyboardInterrupt):
        print()
    finally:
        terminal.reset_color()
        terminal.show_cursor()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())